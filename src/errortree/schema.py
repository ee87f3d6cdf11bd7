"""TOML front end for declaring an error tree.

    [tree]
    numbering = "hierarchical"   # or "flat"; required
    width = 4
    acronym = "E"
    kind = "error"

    [[tree.children]]
    name = "file"
    number = 1
    description = "File-related errors."

      [[tree.children.children]]
      name = "not_found"
      number = 0
      description = "File {path!r} not found."
      fields = { path = "str" }

    [severities]                 # optional, kind -> error | warning | info
    error = "error"

    [render]                     # optional
    backends = ["text", "json"]
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from errortree.config import TreeSettings
from errortree.errors import ConfigError
from errortree.model import ErrorTree

_SETTINGS_KEYS = frozenset({"numbering", "width"})


def loads(text: str) -> tuple[ErrorTree, TreeSettings]:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}") from e

    unknown = sorted(set(data) - {"tree", "severities", "render"})
    if unknown:
        raise ConfigError(f"unknown top-level table(s): {', '.join(unknown)}")
    tree_data = data.get("tree")
    if not isinstance(tree_data, dict):
        raise ConfigError("missing [tree] table")

    settings = TreeSettings.from_mapping(
        tree_data,
        severities=data.get("severities"),
        render=data.get("render"),
    )
    root = {k: v for k, v in tree_data.items() if k not in _SETTINGS_KEYS}
    return ErrorTree.from_dict(root), settings


def load_tree(path: str | Path) -> tuple[ErrorTree, TreeSettings]:
    """Load an error tree and its settings from a TOML file."""
    return loads(Path(path).read_text())
