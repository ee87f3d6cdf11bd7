"""Diagnostic system: neutral records and the builder that produces them."""

from errortree.diagnostics.builder import build_record
from errortree.diagnostics.types import (
    DEFAULT_SEVERITIES,
    DiagnosticRecord,
    Severity,
    SeverityTable,
)

__all__ = [
    "DEFAULT_SEVERITIES",
    "DiagnosticRecord",
    "Severity",
    "SeverityTable",
    "build_record",
]
