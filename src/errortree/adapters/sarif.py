"""SARIF 2.1.0 projection.

`render` produces one ``result`` object. SARIF has no nested results, so
causes go into the result's property bag under ``causes`` (each one a full
result object). `sarif_log` wraps results into a complete log with a rule
per code.
"""

from __future__ import annotations

from collections.abc import Iterable

from errortree.diagnostics.types import DiagnosticRecord, Severity
from errortree.span import SpanKind, SpanLabel

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA = "https://json.schemastore.org/sarif-2.1.0.json"

_LEVELS = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.INFO: "note",
}


def render(record: DiagnosticRecord) -> dict:
    result: dict = {
        "ruleId": record.code,
        "level": _LEVELS[record.severity],
        "message": {"text": record.primary_message},
    }

    primary = [s for s in record.spans if s.kind == SpanKind.PRIMARY]
    secondary = [s for s in record.spans if s.kind == SpanKind.SECONDARY]
    if primary:
        result["locations"] = [_location(record, s) for s in primary]
    if secondary:
        result["relatedLocations"] = [
            {"id": i, **_location(record, s)} for i, s in enumerate(secondary)
        ]

    properties: dict = {"kind": record.kind, "path": record.path}
    if record.notes:
        properties["notes"] = list(record.notes)
    if record.children:
        properties["causes"] = [render(child) for child in record.children]
    result["properties"] = properties
    return result


def sarif_log(
    records: Iterable[DiagnosticRecord],
    *,
    tool_name: str = "errortree",
    tool_version: str | None = None,
) -> dict:
    records = list(records)
    rules: dict[str, dict] = {}
    for record in records:
        for r in record.walk():
            rules.setdefault(
                r.code,
                {"id": r.code, "name": r.path, "shortDescription": {"text": r.kind}},
            )

    driver: dict = {"name": tool_name, "rules": list(rules.values())}
    if tool_version is not None:
        driver["version"] = tool_version
    return {
        "$schema": SARIF_SCHEMA,
        "version": SARIF_VERSION,
        "runs": [{"tool": {"driver": driver}, "results": [render(r) for r in records]}],
    }


def _location(record: DiagnosticRecord, s: SpanLabel) -> dict:
    line, column = s.span.start_line_col()
    end_line, end_column = s.span.end_line_col()
    location: dict = {
        "physicalLocation": {
            "artifactLocation": {"uri": s.span.uri},
            "region": {
                "startLine": line + 1,
                "startColumn": column + 1,
                "endLine": end_line + 1,
                "endColumn": end_column + 1,
                "charOffset": s.span.start,
                "charLength": len(s.span),
            },
        }
    }
    label = record.span_label(s)
    if label is not None:
        location["message"] = {"text": label}
    return location
