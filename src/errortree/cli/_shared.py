"""Shared helpers for CLI commands."""

from __future__ import annotations

import click

from errortree.config import TreeSettings
from errortree.engine import CodeTable, DerivedInfo, derive
from errortree.errors import BuildError, ConfigError
from errortree.model import ErrorTree
from errortree.schema import load_tree

tree_argument = click.argument("tree_file", type=click.Path(exists=True, dir_okay=False))


def load_table(tree_file: str) -> tuple[ErrorTree, TreeSettings, CodeTable]:
    """Load and derive a tree file; exit 1 with a build error message on failure."""
    try:
        tree, settings = load_tree(tree_file)
        table = derive(tree, settings.derivation)
    except (BuildError, ConfigError) as e:
        click.echo(f"error: invalid error tree {tree_file}: {e}", err=True)
        raise SystemExit(1) from e
    return tree, settings, table


def parse_fields(pairs: tuple[str, ...], info: DerivedInfo) -> dict[str, object]:
    """Parse key=value pairs, converting values to the leaf's declared field types."""
    declared = {f.name: f.type for f in info.fields}
    values: dict[str, object] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(
                f"Expected key=value pair, got '{pair}'", param_hint="'--field'"
            )
        k, v = pair.split("=", 1)
        k = k.strip()
        values[k] = _convert(v, declared.get(k, "str"), k)
    return values


def _convert(value: str, type_name: str, key: str) -> object:
    try:
        if type_name == "int":
            return int(value)
        if type_name == "float":
            return float(value)
    except ValueError as e:
        raise click.BadParameter(
            f"field '{key}' expects {type_name}, got '{value}'", param_hint="'--field'"
        ) from e
    if type_name == "bool":
        lowered = value.lower()
        if lowered not in ("true", "false", "1", "0", "yes", "no"):
            raise click.BadParameter(
                f"field '{key}' expects bool, got '{value}'", param_hint="'--field'"
            )
        return lowered in ("true", "1", "yes")
    return value


def parse_span(value: str) -> tuple[int, int]:
    """Parse START:END offsets."""
    start_str, sep, end_str = value.partition(":")
    try:
        start = int(start_str)
        end = int(end_str) if sep else start
    except ValueError as e:
        raise click.BadParameter(
            f"Expected START:END offsets, got '{value}'", param_hint="'--span'"
        ) from e
    if start < 0 or end < start:
        raise click.BadParameter(f"Invalid span '{value}'", param_hint="'--span'")
    return start, end
