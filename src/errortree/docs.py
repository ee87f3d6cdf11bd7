"""Reference documentation generated from the code table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from errortree.model import CategoryNode

if TYPE_CHECKING:
    from errortree.engine import CodeTable, DerivedInfo
    from errortree.model import ErrorTree


def leaf_doc(info: DerivedInfo) -> str:
    """Markdown block for one leaf: code heading, `kind[code]`, description."""
    return f"### {info.code}\n\n`{info.kind}[{info.code}]`: {info.description}\n"


def render_reference(table: CodeTable) -> str:
    return "\n".join(table.doc(path) for path in table)


def render_index(tree: ErrorTree, table: CodeTable) -> str:
    """Nested Markdown list of every category and leaf.

    Categories show their name and description; leaves show their code,
    name and description. Nesting follows the tree.
    """
    lines = ["List of error variants:"]
    for path, node in tree.walk():
        indent = "  " * path.count(".")
        if isinstance(node, CategoryNode):
            text = f"{indent}- **{node.name}**"
            if node.description:
                text += f": {node.description}"
            lines.append(text)
        else:
            info = table[path]
            lines.append(f"{indent}- `{info.code}`(**{node.name}**): {info.description}")
    return "\n".join(lines)
