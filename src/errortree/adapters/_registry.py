"""Lazy adapter loading: backend modules are imported only when needed."""

from __future__ import annotations

import importlib
from collections.abc import Iterable

from errortree.adapters._base import Adapter, AdapterError, Backend
from errortree.diagnostics.types import DiagnosticRecord

_ADAPTER_MAP: dict[Backend, tuple[str, str]] = {
    Backend.TEXT: ("errortree.adapters.text", "render"),
    Backend.JSON: ("errortree.adapters.json_report", "render"),
    Backend.SARIF: ("errortree.adapters.sarif", "render"),
    Backend.LSP: ("errortree.adapters.lsp", "render"),
    Backend.RICH: ("errortree.adapters.rich_console", "render"),
}


def parse_backend(value: Backend | str) -> Backend:
    if isinstance(value, Backend):
        return value
    try:
        return Backend(value)
    except ValueError as e:
        valid = ", ".join(b.value for b in Backend)
        raise AdapterError(f"Unknown backend '{value}'. Valid: {valid}") from e


def get_adapter(backend: Backend | str) -> Adapter:
    """Lazy-load the render function for a backend.

    Raises AdapterError if the backend's module or its library is missing.
    """
    backend = parse_backend(backend)
    entry = _ADAPTER_MAP.get(backend)
    if entry is None:
        raise AdapterError(f"No adapter registered for {backend.value}")

    module_path, func_name = entry
    try:
        mod = importlib.import_module(module_path)
    except ImportError as e:
        raise AdapterError(
            f"Could not load the {backend.value} adapter: {e}. "
            f"Reinstall with: pip install errortree"
        ) from e

    return getattr(mod, func_name)


def render_all(
    record: DiagnosticRecord, backends: Iterable[Backend | str]
) -> dict[Backend, object]:
    """Render a record with every enabled backend, in the order given."""
    return {parse_backend(b): get_adapter(b)(record) for b in backends}
