"""errortree: stable, hierarchical error codes and backend-neutral diagnostics."""

from errortree.diagnostics import DiagnosticRecord, Severity, SeverityTable, build_record
from errortree.engine import CodeTable, DerivationConfig, DerivedInfo, Numbering, derive
from errortree.errors import (
    BuildError,
    ConfigError,
    CycleError,
    DuplicateCodeError,
    ErrorTreeError,
    RecordError,
    StructureError,
    TableNotInitializedError,
    TemplateError,
    UnknownKindError,
    UnknownLeafError,
)
from errortree.model import CategoryNode, ErrorTree, FieldSpec, LeafVariant, category, leaf
from errortree.occurrence import ErrorOccurrence
from errortree.span import Source, Span, SpanKind, SpanLabel
from errortree.table import TableCell, current, install

__version__ = "0.3.0"

__all__ = [
    "BuildError",
    "CategoryNode",
    "CodeTable",
    "ConfigError",
    "CycleError",
    "DerivationConfig",
    "DerivedInfo",
    "DiagnosticRecord",
    "DuplicateCodeError",
    "ErrorOccurrence",
    "ErrorTree",
    "ErrorTreeError",
    "FieldSpec",
    "LeafVariant",
    "Numbering",
    "RecordError",
    "Severity",
    "SeverityTable",
    "Source",
    "Span",
    "SpanKind",
    "SpanLabel",
    "StructureError",
    "TableCell",
    "TableNotInitializedError",
    "TemplateError",
    "UnknownKindError",
    "UnknownLeafError",
    "build_record",
    "category",
    "current",
    "derive",
    "install",
    "leaf",
]
