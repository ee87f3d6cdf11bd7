"""Error tree model: categories, leaf variants, and the validated tree.

The tree is declared once (with `category()`/`leaf()` or `ErrorTree.from_dict`)
and never mutated afterwards. Leaves are addressed by dotted paths built
from node names below the root, e.g. ``"fs.file.not_found"``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from errortree.errors import ConfigError, StructureError

FIELD_TYPES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "any": object,
}


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: str = "any"

    def accepts(self, value: object) -> bool:
        if self.type == "any":
            return True
        # bool is an int subclass; keep the two apart.
        if isinstance(value, bool):
            return self.type == "bool"
        if self.type == "float":
            return isinstance(value, (int, float))
        return isinstance(value, FIELD_TYPES[self.type])


@dataclass(frozen=True)
class LeafVariant:
    name: str
    number: int
    description: str
    fields: tuple[FieldSpec, ...] = ()
    label: str | None = None
    acronym: str | None = None
    kind: str | None = None

    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)


@dataclass(frozen=True)
class CategoryNode:
    name: str
    children: tuple[Node, ...] = ()
    acronym: str | None = None
    kind: str | None = None
    number: int | None = None
    description: str | None = None
    label: str | None = None


Node = Union[CategoryNode, LeafVariant]


# -- Builder helpers -----------------------------------------------------------


def leaf(
    name: str,
    number: int,
    description: str,
    *,
    fields: Mapping[str, str] | Iterable[str | FieldSpec] = (),
    label: str | None = None,
    acronym: str | None = None,
    kind: str | None = None,
) -> LeafVariant:
    return LeafVariant(
        name=name,
        number=number,
        description=description,
        fields=_field_specs(fields),
        label=label,
        acronym=acronym,
        kind=kind,
    )


def category(
    name: str,
    *children: Node,
    acronym: str | None = None,
    kind: str | None = None,
    number: int | None = None,
    description: str | None = None,
    label: str | None = None,
) -> CategoryNode:
    return CategoryNode(
        name=name,
        children=tuple(children),
        acronym=acronym,
        kind=kind,
        number=number,
        description=description,
        label=label,
    )


def _field_specs(fields: Mapping[str, str] | Iterable[str | FieldSpec]) -> tuple[FieldSpec, ...]:
    if isinstance(fields, Mapping):
        return tuple(FieldSpec(name=k, type=v) for k, v in fields.items())
    return tuple(f if isinstance(f, FieldSpec) else FieldSpec(name=f) for f in fields)


def join_path(parent: str, name: str) -> str:
    return f"{parent}.{name}" if parent else name


# -- Tree ------------------------------------------------------------------------


class ErrorTree:
    """A validated, immutable error tree."""

    def __init__(self, root: CategoryNode) -> None:
        if not isinstance(root, CategoryNode):
            raise StructureError("", "the root must be a category")
        self._root = root
        self._leaves: dict[str, LeafVariant] = {}
        self._check_category(root, "")

    def root(self) -> CategoryNode:
        return self._root

    def find_leaf(self, path: str | Sequence[str]) -> LeafVariant | None:
        if not isinstance(path, str):
            path = ".".join(path)
        return self._leaves.get(path)

    def walk(self) -> Iterator[tuple[str, Node]]:
        """Yield (path, node) depth-first for every node below the root.

        Siblings come out in declaration order.
        """
        yield from _walk(self._root, "")

    def leaves(self) -> Iterator[tuple[str, LeafVariant]]:
        for path, node in self.walk():
            if isinstance(node, LeafVariant):
                yield path, node

    def __len__(self) -> int:
        return len(self._leaves)

    def __contains__(self, path: object) -> bool:
        return path in self._leaves

    # -- Validation -------------------------------------------------------------

    def _check_category(self, node: CategoryNode, path: str) -> None:
        _check_number(node.number, path, optional=True)
        _check_text(node, path, ("acronym", "kind", "description", "label"))
        if not node.children:
            raise StructureError(path, "category has no children")

        seen: set[str] = set()
        for child in node.children:
            if not isinstance(child, (CategoryNode, LeafVariant)):
                raise StructureError(path, f"unexpected child node {child!r}")
            child_path = join_path(path, child.name)
            if not child.name or "." in child.name:
                raise StructureError(child_path, f"invalid node name {child.name!r}")
            if child.name in seen:
                raise StructureError(child_path, f"duplicate name '{child.name}' among siblings")
            seen.add(child.name)

            if isinstance(child, CategoryNode):
                self._check_category(child, child_path)
            else:
                self._check_leaf(child, child_path)

    def _check_leaf(self, node: LeafVariant, path: str) -> None:
        _check_number(node.number, path, optional=False)
        _check_text(node, path, ("acronym", "kind", "label"))
        if not isinstance(node.description, str):
            raise StructureError(path, f"description must be a string, got {node.description!r}")
        names: set[str] = set()
        for f in node.fields:
            if f.name in names:
                raise StructureError(path, f"duplicate field '{f.name}'")
            if f.type not in FIELD_TYPES:
                raise StructureError(path, f"unknown type '{f.type}' for field '{f.name}'")
            names.add(f.name)
        self._leaves[path] = node

    # -- Declarative construction -----------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ErrorTree:
        """Build a tree from its abstract declarative shape.

        A mapping with a ``children`` key is a category; anything else is a
        leaf and must carry ``number`` and ``description``.
        """
        if "children" not in data:
            raise ConfigError("the root node must declare 'children'")
        root = _node_from_dict(data, "", default_name="root")
        assert isinstance(root, CategoryNode)
        return cls(root)


def _walk(node: CategoryNode, path: str) -> Iterator[tuple[str, Node]]:
    for child in node.children:
        child_path = join_path(path, child.name)
        yield child_path, child
        if isinstance(child, CategoryNode):
            yield from _walk(child, child_path)


def _check_number(number: object, path: str, *, optional: bool) -> None:
    if number is None and optional:
        return
    if not isinstance(number, int) or isinstance(number, bool):
        raise StructureError(path, f"number must be an integer, got {number!r}")
    if number < 0:
        raise StructureError(path, f"number must be non-negative, got {number}")


def _check_text(node: Node, path: str, attrs: tuple[str, ...]) -> None:
    for attr in attrs:
        value = getattr(node, attr)
        if value is not None and not isinstance(value, str):
            raise StructureError(path, f"{attr} must be a string, got {value!r}")


_COMMON_KEYS = frozenset({"name", "acronym", "kind", "number", "description", "label"})
_CATEGORY_KEYS = _COMMON_KEYS | {"children"}
_LEAF_KEYS = _COMMON_KEYS | {"fields"}


def _node_from_dict(
    data: Mapping[str, Any], parent: str, *, default_name: str | None = None
) -> Node:
    if not isinstance(data, Mapping):
        where = parent or "<root>"
        raise ConfigError(f"expected a table under '{where}', got {type(data).__name__}")

    name = data.get("name", default_name)
    if not isinstance(name, str):
        raise ConfigError(f"node under '{parent or '<root>'}' is missing a 'name'")
    path = join_path(parent, name) if default_name is None else ""

    if "children" in data:
        _reject_unknown_keys(data, _CATEGORY_KEYS, path)
        children = data["children"]
        if not isinstance(children, list):
            raise ConfigError(f"'children' of '{path or '<root>'}' must be a list")
        return category(
            name,
            *(_node_from_dict(child, path) for child in children),
            acronym=data.get("acronym"),
            kind=data.get("kind"),
            number=data.get("number"),
            description=data.get("description"),
            label=data.get("label"),
        )

    _reject_unknown_keys(data, _LEAF_KEYS, path)
    for required in ("number", "description"):
        if required not in data:
            raise ConfigError(f"leaf '{path}' is missing '{required}'")
    fields = data.get("fields", ())
    if not isinstance(fields, (Mapping, list, tuple)):
        raise ConfigError(f"'fields' of '{path}' must be a table or a list of names")
    return leaf(
        name,
        data["number"],
        data["description"],
        fields=fields,
        label=data.get("label"),
        acronym=data.get("acronym"),
        kind=data.get("kind"),
    )


def _reject_unknown_keys(data: Mapping[str, Any], allowed: frozenset[str], path: str) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigError(f"unknown key(s) for '{path or '<root>'}': {', '.join(unknown)}")
