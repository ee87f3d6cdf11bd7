"""Render diagnostic records as `rich` trees; causes become sub-trees."""

from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from errortree.diagnostics.types import DiagnosticRecord, Severity

_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "bold yellow",
    Severity.INFO: "bold blue",
}


def render(record: DiagnosticRecord) -> Tree:
    tree = Tree(_header(record), guide_style="dim")
    _fill(tree, record)
    return tree


def _header(record: DiagnosticRecord) -> Text:
    return Text(record.primary_message, style=_STYLES[record.severity])


def _fill(tree: Tree, record: DiagnosticRecord) -> None:
    for s in record.spans:
        line, col = s.span.start_line_col()
        text = Text(f"--> {s.span.uri}:{line + 1}:{col + 1}", style="cyan")
        label = record.span_label(s)
        if label:
            text.append(f"  {label}", style="default")
        node = tree.add(text)
        if s.span.source is not None:
            node.add(Text(s.span.source.line_text(line), style="dim"))

    level = record.severity.name.lower()
    if level != record.kind:
        tree.add(Text(f"level: {level}", style=_STYLES[record.severity]))

    for note in record.notes:
        tree.add(Text(f"note: {note}", style="italic"))

    for child in record.children:
        _fill(tree.add(_header(child)), child)
