"""Plain-text rendering in the rustc / annotate-snippets style.

    error[E0105]: All in white.
     --> foo.rs:1:5
      |
    1 | use white;
      |     ^^^^^ check the color here
      |
      = level: warning    (only when the kind is not the severity name)
      = note: ...
      = caused by:
        error[E0001]: ...
"""

from __future__ import annotations

from errortree.diagnostics.types import DiagnosticRecord
from errortree.span import SpanKind, SpanLabel

_MARKERS = {SpanKind.PRIMARY: "^", SpanKind.SECONDARY: "-"}


def render(record: DiagnosticRecord) -> str:
    return "\n".join(_render(record, ""))


def _render(record: DiagnosticRecord, indent: str) -> list[str]:
    lines = [f"{indent}{record.primary_message}"]

    gutter = _gutter_width(record.spans)
    pad = " " * gutter
    for s in record.spans:
        lines.extend(_render_span(record, s, indent, pad))

    # The prefix shows the kind; spell out the level when it differs.
    level = record.severity.name.lower()
    if level != record.kind:
        lines.append(f"{indent}{pad}= level: {level}")

    for note in record.notes:
        lines.append(f"{indent}{pad}= note: {note}")

    for child in record.children:
        lines.append(f"{indent}{pad}= caused by:")
        lines.extend(_render(child, indent + pad + "  "))

    return lines


def _gutter_width(spans: tuple[SpanLabel, ...]) -> int:
    widest = 1
    for s in spans:
        line, _ = s.span.start_line_col()
        widest = max(widest, len(str(line + 1)))
    return widest + 1


def _render_span(record: DiagnosticRecord, s: SpanLabel, indent: str, pad: str) -> list[str]:
    span = s.span
    line, col = span.start_line_col()
    lines = [f"{indent}{pad[:-1]}--> {span.uri}:{line + 1}:{col + 1}"]
    if span.source is None:
        return lines

    text = span.source.line_text(line)
    line_start, _ = span.source.index.line_span(line)
    # Multi-line spans are marked up to the end of their first line.
    width = max(1, min(span.end, line_start + len(text)) - span.start)
    marker = " " * col + _MARKERS[s.kind] * width
    label = record.span_label(s)
    if label:
        marker += f" {label}"

    number = str(line + 1).rjust(len(pad) - 1)
    lines.append(f"{indent}{pad}|")
    lines.append(f"{indent}{number} | {text}".rstrip())
    lines.append(f"{indent}{pad}| {marker}")
    lines.append(f"{indent}{pad}|")
    return lines
