"""The `check`, `codes` and `docs` commands: inspect an error tree file."""

from __future__ import annotations

import click

from errortree.cli._shared import load_table, tree_argument
from errortree.docs import render_index, render_reference


@click.command()
@tree_argument
def check(tree_file: str) -> None:
    """Validate an error tree and its codes."""
    _, settings, table = load_table(tree_file)
    click.echo(f"ok: {len(table)} codes ({settings.derivation.numbering.value} numbering)")


@click.command()
@tree_argument
def codes(tree_file: str) -> None:
    """List every code with its kind and leaf path."""
    _, _, table = load_table(tree_file)
    width = max(len(info.code) for info in table.values())
    for path, info in table.items():
        click.echo(f"{info.code.ljust(width)}  {info.kind:<8} {path}")


@click.command()
@tree_argument
@click.option("--index", is_flag=True, help="Print the nested variant index instead.")
def docs(tree_file: str, index: bool) -> None:
    """Print Markdown reference documentation for every code."""
    tree, _, table = load_table(tree_file)
    click.echo(render_index(tree, table) if index else render_reference(table))
