"""Language Server Protocol ``Diagnostic`` projection.

LSP positions are 0-based, which matches `Span` directly. LSP has no
nested diagnostics: secondary spans and every cause (depth-first) become
``relatedInformation`` entries. Notes are appended to the message.
"""

from __future__ import annotations

from errortree.diagnostics.types import DiagnosticRecord, Severity
from errortree.span import Span

# DiagnosticSeverity: Error = 1, Warning = 2, Information = 3, Hint = 4
_SEVERITY = {
    Severity.ERROR: 1,
    Severity.WARNING: 2,
    Severity.INFO: 3,
}


def render(record: DiagnosticRecord, *, source: str = "errortree") -> dict:
    primary = record.primary_span
    fallback = _location(primary.span) if primary is not None else _empty_location()

    message = record.primary_message
    for note in record.notes:
        message += f"\nnote: {note}"

    diagnostic: dict = {
        "range": fallback["range"],
        "severity": _SEVERITY[record.severity],
        "code": record.code,
        "source": source,
        "message": message,
        "data": {"kind": record.kind, "path": record.path},
    }

    related: list[dict] = []
    for s in record.spans:
        if s is primary:
            continue
        related.append(
            {
                "location": _location(s.span),
                "message": record.span_label(s) or record.primary_message,
            }
        )
    for child in record.children:
        _flatten_causes(child, fallback, related)
    if related:
        diagnostic["relatedInformation"] = related
    return diagnostic


def _flatten_causes(record: DiagnosticRecord, fallback: dict, out: list[dict]) -> None:
    primary = record.primary_span
    location = _location(primary.span) if primary is not None else fallback
    message = f"caused by: {record.primary_message}"
    for note in record.notes:
        message += f"\nnote: {note}"
    out.append({"location": location, "message": message})
    for child in record.children:
        _flatten_causes(child, location, out)


def _location(span: Span) -> dict:
    line, character = span.start_line_col()
    end_line, end_character = span.end_line_col()
    return {
        "uri": span.uri,
        "range": {
            "start": {"line": line, "character": character},
            "end": {"line": end_line, "character": end_character},
        },
    }


def _empty_location() -> dict:
    zero = {"line": 0, "character": 0}
    return {"uri": "", "range": {"start": dict(zero), "end": dict(zero)}}
