"""The `render` command: build one occurrence and render it with each backend."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console

from errortree.adapters import AdapterError, Backend, get_adapter, parse_backend
from errortree.cli._shared import load_table, parse_fields, parse_span, tree_argument
from errortree.diagnostics import build_record
from errortree.errors import RecordError
from errortree.occurrence import ErrorOccurrence
from errortree.span import Source, Span, SpanLabel


@click.command()
@tree_argument
@click.argument("leaf")
@click.option("-f", "--field", "fields", multiple=True, help="Field value as key=value.")
@click.option("--span", "span_str", default=None, help="Primary span as START:END offsets.")
@click.option(
    "--source",
    "source_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File the span points into.",
)
@click.option("--label", default=None, help="Label for the primary span.")
@click.option(
    "-b",
    "--backend",
    "backends",
    multiple=True,
    type=click.Choice([b.value for b in Backend]),
    help="Backend(s) to render with (default: from the tree file).",
)
def render(
    tree_file: str,
    leaf: str,
    fields: tuple[str, ...],
    span_str: str | None,
    source_file: str | None,
    label: str | None,
    backends: tuple[str, ...],
) -> None:
    """Render an occurrence of LEAF (a dotted path) from TREE_FILE."""
    _, settings, table = load_table(tree_file)
    info = table.get(leaf)
    if info is None:
        raise click.BadParameter(f"no leaf '{leaf}' in {tree_file}", param_hint="'LEAF'")

    spans: list[SpanLabel] = []
    if span_str is not None:
        start, end = parse_span(span_str)
        source = None
        if source_file is not None:
            source = Source(uri=source_file, text=Path(source_file).read_text())
        spans.append(SpanLabel(span=Span(start, end, source), label=label))

    occurrence = ErrorOccurrence(leaf, parse_fields(fields, info), spans=spans)
    try:
        record = build_record(occurrence, table, settings.severities)
    except RecordError as e:
        click.echo(f"error: could not build diagnostic: {e}", err=True)
        raise SystemExit(1) from e

    selected = [parse_backend(b) for b in backends] or list(settings.backends)
    for backend in selected:
        try:
            adapter = get_adapter(backend)
        except AdapterError as e:
            raise click.ClickException(str(e)) from e
        _emit(backend, adapter(record))


def _emit(backend: Backend, output: object) -> None:
    if backend == Backend.RICH:
        Console().print(output)
    elif isinstance(output, str):
        click.echo(output)
    else:
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
