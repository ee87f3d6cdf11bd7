"""Source spans attached to error occurrences.

Offsets are string indices into `Source.text`. Lines and columns are
0-based everywhere in this module; adapters convert to whatever their
target expects.
"""

from __future__ import annotations

import enum
from bisect import bisect_right
from dataclasses import dataclass
from functools import cached_property


class LineIndex:
    """Line lookup table for one source text."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        starts = [0]
        pos = text.find("\n")
        while pos != -1:
            starts.append(pos + 1)
            pos = text.find("\n", pos + 1)
        self._starts = starts

    def __len__(self) -> int:
        return len(self._starts)

    def line_at(self, pos: int) -> int:
        return bisect_right(self._starts, min(pos, self._length)) - 1

    def line_col_at(self, pos: int) -> tuple[int, int]:
        line = self.line_at(pos)
        return line, pos - self._starts[line]

    def line_span(self, line: int) -> tuple[int, int]:
        """Return (start, end) of a line, trailing newline included."""
        start = self._starts[line]
        end = self._starts[line + 1] if line + 1 < len(self._starts) else self._length
        return start, end

    def line_span_at(self, pos: int) -> tuple[int, int]:
        return self.line_span(self.line_at(pos))

    def span_with_context_lines(
        self, start: int, end: int, before: int = 0, after: int = 0
    ) -> tuple[int, int]:
        """Expand [start, end) to whole lines plus `before`/`after` context lines."""
        first = max(self.line_at(start) - before, 0)
        last = min(self.line_at(max(start, end - 1)) + after, len(self._starts) - 1)
        return self._starts[first], self.line_span(last)[1]


@dataclass(frozen=True)
class Source:
    uri: str
    text: str

    @cached_property
    def index(self) -> LineIndex:
        return LineIndex(self.text)

    def line_text(self, line: int) -> str:
        start, end = self.index.line_span(line)
        return self.text[start:end].rstrip("\r\n")


@dataclass(frozen=True)
class Span:
    start: int
    end: int
    source: Source | None = None

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def uri(self) -> str:
        return self.source.uri if self.source is not None else ""

    def slice(self, text: str | None = None) -> str:
        if text is None:
            text = self.source.text if self.source is not None else ""
        return text[self.start : self.end]

    def start_line_col(self) -> tuple[int, int]:
        if self.source is None:
            return 0, self.start
        return self.source.index.line_col_at(self.start)

    def end_line_col(self) -> tuple[int, int]:
        if self.source is None:
            return 0, self.end
        return self.source.index.line_col_at(self.end)


class SpanKind(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class SpanLabel:
    span: Span
    kind: SpanKind = SpanKind.PRIMARY
    label: str | None = None
