"""Render diagnostic records as JSON-serializable dicts (for agents and tooling)."""

from __future__ import annotations

import json

from errortree.diagnostics.types import DiagnosticRecord
from errortree.span import SpanLabel


def render(record: DiagnosticRecord) -> dict:
    """Render a DiagnosticRecord as a JSON-serializable dict."""
    return {
        "level": record.severity.name.lower(),
        "code": record.code,
        "kind": record.kind,
        "path": record.path,
        "message": record.primary_message,
        "label": record.label,
        "spans": [_span_to_dict(record, s) for s in record.spans],
        "notes": list(record.notes),
        "children": [render(child) for child in record.children],
    }


def dumps(record: DiagnosticRecord, *, indent: int | None = 2) -> str:
    return json.dumps(render(record), indent=indent, ensure_ascii=False)


def _span_to_dict(record: DiagnosticRecord, s: SpanLabel) -> dict:
    line, column = s.span.start_line_col()
    end_line, end_column = s.span.end_line_col()
    return {
        "uri": s.span.uri,
        "start": s.span.start,
        "end": s.span.end,
        # 1-based, like rustc's JSON output.
        "line_start": line + 1,
        "column_start": column + 1,
        "line_end": end_line + 1,
        "column_end": end_column + 1,
        "kind": s.kind.value,
        "label": record.span_label(s),
    }
