"""Tree-wide settings: numbering policy, code width, severities, enabled backends."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from errortree.adapters._base import AdapterError, Backend
from errortree.adapters._registry import parse_backend
from errortree.diagnostics.types import DEFAULT_SEVERITIES, SeverityTable
from errortree.engine import DEFAULT_WIDTH, DerivationConfig, Numbering
from errortree.errors import ConfigError

DEFAULT_BACKENDS = (Backend.TEXT,)


@dataclass(frozen=True)
class TreeSettings:
    derivation: DerivationConfig
    severities: SeverityTable = field(default_factory=lambda: DEFAULT_SEVERITIES)
    backends: tuple[Backend, ...] = field(default=DEFAULT_BACKENDS)

    @classmethod
    def from_mapping(
        cls,
        tree: Mapping[str, Any],
        severities: Mapping[str, str] | None = None,
        render: Mapping[str, Any] | None = None,
    ) -> TreeSettings:
        """Read settings from the ``[tree]``, ``[severities]`` and ``[render]`` tables."""
        numbering_str = tree.get("numbering")
        if numbering_str is None:
            raise ConfigError("[tree] must declare 'numbering' (flat or hierarchical)")
        try:
            numbering = Numbering(numbering_str)
        except ValueError as e:
            valid = ", ".join(n.value for n in Numbering)
            raise ConfigError(f"Unknown numbering '{numbering_str}'. Valid: {valid}") from e

        width = tree.get("width", DEFAULT_WIDTH)
        if not isinstance(width, int) or isinstance(width, bool):
            raise ConfigError(f"'width' must be an integer, got {width!r}")

        severity_table = DEFAULT_SEVERITIES
        if severities is not None:
            if not isinstance(severities, Mapping):
                raise ConfigError("[severities] must be a table of kind = severity")
            severity_table = SeverityTable(severities)

        backends = DEFAULT_BACKENDS
        if render is not None and "backends" in render:
            try:
                backends = tuple(parse_backend(b) for b in render["backends"])
            except AdapterError as e:
                raise ConfigError(str(e)) from e

        return cls(
            derivation=DerivationConfig(numbering=numbering, width=width),
            severities=severity_table,
            backends=backends,
        )
