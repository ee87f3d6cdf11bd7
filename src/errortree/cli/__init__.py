"""CLI entry point: `errortree`."""

from __future__ import annotations

import click

from errortree.cli.render import render
from errortree.cli.tree import check, codes, docs
from errortree.log import setup_logging


@click.group()
@click.version_option(package_name="errortree")
@click.option("-v", "--verbose", is_flag=True, help="Log tree building details to stderr.")
def main(verbose: bool) -> None:
    """errortree: stable codes and diagnostics for error trees."""
    setup_logging("DEBUG" if verbose else "WARNING")


main.add_command(check)
main.add_command(codes)
main.add_command(docs)
main.add_command(render)
