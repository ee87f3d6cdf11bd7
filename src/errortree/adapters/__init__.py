"""Backend adapters: projections of DiagnosticRecord into rendering shapes."""

from errortree.adapters._base import Adapter, AdapterError, Backend
from errortree.adapters._registry import get_adapter, parse_backend, render_all

__all__ = [
    "Adapter",
    "AdapterError",
    "Backend",
    "get_adapter",
    "parse_backend",
    "render_all",
]
