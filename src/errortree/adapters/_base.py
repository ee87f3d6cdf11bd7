"""Adapter protocol between neutral records and rendering backends."""

from __future__ import annotations

import enum
from typing import Protocol, runtime_checkable

from errortree.diagnostics.types import DiagnosticRecord
from errortree.errors import ErrorTreeError


class Backend(enum.Enum):
    TEXT = "text"  # rustc / annotate-snippets style terminal text
    JSON = "json"
    SARIF = "sarif"  # SARIF 2.1.0 result objects
    LSP = "lsp"  # Language Server Protocol Diagnostic
    RICH = "rich"  # rich.tree.Tree renderable


class AdapterError(ErrorTreeError):
    """Raised when a backend adapter cannot be loaded."""


@runtime_checkable
class Adapter(Protocol):
    def __call__(self, record: DiagnosticRecord) -> object: ...
