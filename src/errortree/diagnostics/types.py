"""Backend-neutral diagnostic records.

A DiagnosticRecord is the fully resolved form of one error occurrence:
code, kind, expanded message, severity, spans and nested causes. Adapters
project it into their own shapes and never re-derive any of these fields.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from errortree.errors import ConfigError, UnknownKindError
from errortree.span import SpanKind, SpanLabel


class Severity(enum.IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2


class SeverityTable(Mapping[str, Severity]):
    """Explicit kind -> severity mapping. Unknown kinds are an error, never a default."""

    def __init__(self, entries: Mapping[str, Severity | str]) -> None:
        table: dict[str, Severity] = {}
        for kind, severity in entries.items():
            if isinstance(severity, str):
                try:
                    severity = Severity[severity.upper()]
                except KeyError as e:
                    valid = ", ".join(s.name.lower() for s in Severity)
                    raise ConfigError(
                        f"unknown severity '{severity}' for kind '{kind}'. Valid: {valid}"
                    ) from e
            try:
                table[kind] = Severity(severity)
            except (ValueError, TypeError) as e:
                raise ConfigError(f"invalid severity {severity!r} for kind '{kind}'") from e
        self._table = MappingProxyType(table)

    def __getitem__(self, kind: str) -> Severity:
        return self._table[kind]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def severity_of(self, kind: str, path: str) -> Severity:
        try:
            return self._table[kind]
        except KeyError:
            raise UnknownKindError(path, kind) from None


DEFAULT_SEVERITIES = SeverityTable(
    {
        "error": Severity.ERROR,
        "warning": Severity.WARNING,
        "warn": Severity.WARNING,
        "info": Severity.INFO,
    }
)


@dataclass(frozen=True)
class DiagnosticRecord:
    code: str
    kind: str
    primary_message: str
    severity: Severity
    spans: tuple[SpanLabel, ...] = ()
    children: tuple[DiagnosticRecord, ...] = ()
    path: str = ""
    label: str | None = None
    notes: tuple[str, ...] = ()

    # -- Query methods ----------------------------------------------------------

    @property
    def is_blocking(self) -> bool:
        return self.severity == Severity.ERROR

    @property
    def primary_span(self) -> SpanLabel | None:
        for s in self.spans:
            if s.kind == SpanKind.PRIMARY:
                return s
        return None

    @property
    def depth(self) -> int:
        """Length of the longest chain of nested children."""
        return max((c.depth + 1 for c in self.children), default=0)

    def walk(self) -> Iterator[DiagnosticRecord]:
        """Yield this record and every nested child, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def span_label(self, span: SpanLabel) -> str | None:
        """Label to display under a span: its own, or the record label for primaries."""
        if span.label is not None:
            return span.label
        if span.kind == SpanKind.PRIMARY:
            return self.label
        return None
