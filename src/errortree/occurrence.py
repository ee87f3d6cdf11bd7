"""Runtime occurrences of leaf errors.

An occurrence is a regular exception: raise it, wrap another error with
``raise ErrorOccurrence(...) from err``, and hand it to `build_record`
wherever it is caught.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from errortree.span import Span, SpanKind, SpanLabel


class ErrorOccurrence(Exception):
    def __init__(
        self,
        path: str,
        fields: Mapping[str, object] | None = None,
        *,
        spans: Iterable[Span | SpanLabel] = (),
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(path)
        self.path = path
        self.fields: Mapping[str, object] = MappingProxyType(dict(fields or {}))
        self.spans: tuple[SpanLabel, ...] = tuple(_as_label(s) for s in spans)
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.fields.items())
        return f"{self.path}({args})"


def _as_label(span: Span | SpanLabel) -> SpanLabel:
    if isinstance(span, SpanLabel):
        return span
    return SpanLabel(span=span, kind=SpanKind.PRIMARY)
