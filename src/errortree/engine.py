"""Code & message derivation.

Walks the error tree once and computes, for every leaf:

    number   digits identifying the leaf          "1234"
    code     acronym + zero-padded number         "E1234"
    kind     nearest declared kind label          "error"
    prefix   kind[code]: ...                      "error[E1234]: "
    message  prefix + description                 "error[E1234]: Access denied."

Acronym, kind and label are inherited from the nearest ancestor that
declares them. Numbers are always declared, never positional, so adding a
sibling cannot renumber an existing leaf.

Two numbering policies, chosen for the whole tree:
- FLAT: the number is the leaf's declared number; declared numbers must be
  unique across the tree.
- HIERARCHICAL: the number is every declared ancestor number followed by
  the leaf's own, e.g. category 1 / sub-category 2 / leaf 34 -> "1234".

Codes must be unique across the whole tree under either policy.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from errortree.docs import leaf_doc
from errortree.errors import ConfigError, DuplicateCodeError
from errortree.model import CategoryNode, ErrorTree, FieldSpec, join_path
from errortree.template import expand

logger = logging.getLogger(__name__)

DEFAULT_ACRONYM = "E"
DEFAULT_KIND = "error"
DEFAULT_WIDTH = 4


class Numbering(enum.Enum):
    FLAT = "flat"
    HIERARCHICAL = "hierarchical"


@dataclass(frozen=True)
class DerivationConfig:
    numbering: Numbering
    width: int = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        if not isinstance(self.numbering, Numbering):
            raise ConfigError(f"numbering must be a Numbering, got {self.numbering!r}")
        if not isinstance(self.width, int) or isinstance(self.width, bool) or self.width < 0:
            raise ConfigError(f"code width must be a non-negative integer, got {self.width}")


@dataclass(frozen=True)
class DerivedInfo:
    path: str
    number: str
    code: str
    kind: str
    acronym: str
    description: str
    label: str | None = None
    fields: tuple[FieldSpec, ...] = ()

    @property
    def prefix(self) -> str:
        return f"{self.kind}[{self.code}]: "

    @property
    def message(self) -> str:
        return self.prefix + self.description

    def render_description(self, values: Mapping[str, object]) -> str:
        return expand(self.description, values, self._positional(values), path=self.path)

    def render_message(self, values: Mapping[str, object]) -> str:
        return self.prefix + self.render_description(values)

    def render_label(self, values: Mapping[str, object]) -> str:
        """Label for the primary span; falls back to the description."""
        if self.label is None:
            return self.render_description(values)
        return expand(self.label, values, self._positional(values), path=self.path)

    def _positional(self, values: Mapping[str, object]) -> tuple[object, ...]:
        # {0}, {1}, ... refer to fields in declaration order.
        return tuple(values[f.name] for f in self.fields if f.name in values)


class CodeTable(Mapping[str, DerivedInfo]):
    """Immutable lookup from leaf path to its derived fields, in declaration order."""

    def __init__(self, entries: Iterable[DerivedInfo], config: DerivationConfig) -> None:
        by_path = {info.path: info for info in entries}
        self._by_path = MappingProxyType(by_path)
        self._by_code = MappingProxyType({info.code: info for info in by_path.values()})
        self._config = config

    @property
    def config(self) -> DerivationConfig:
        return self._config

    def __getitem__(self, path: str) -> DerivedInfo:
        return self._by_path[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_path)

    def __len__(self) -> int:
        return len(self._by_path)

    def __repr__(self) -> str:
        return f"CodeTable({len(self)} codes, {self._config.numbering.value})"

    def by_code(self, code: str) -> DerivedInfo | None:
        return self._by_code.get(code)

    def codes(self) -> list[str]:
        return list(self._by_code)

    def doc(self, path: str) -> str:
        return leaf_doc(self._by_path[path])

    def docs(self) -> dict[str, str]:
        return {path: leaf_doc(info) for path, info in self._by_path.items()}


@dataclass(frozen=True)
class _Context:
    acronym: str = DEFAULT_ACRONYM
    kind: str = DEFAULT_KIND
    label: str | None = None
    digits: str = ""

    def enter(self, node: CategoryNode) -> _Context:
        return _Context(
            acronym=node.acronym or self.acronym,
            kind=node.kind or self.kind,
            label=node.label if node.label is not None else self.label,
            digits=self.digits + (str(node.number) if node.number is not None else ""),
        )


def derive(tree: ErrorTree, config: DerivationConfig) -> CodeTable:
    """Derive the code table for a tree.

    Raises DuplicateCodeError naming both paths when two leaves collide.
    """
    entries: list[DerivedInfo] = []
    seen_codes: dict[str, str] = {}
    seen_numbers: dict[str, str] = {}

    for info in _descend(tree.root(), "", _Context(), config):
        if config.numbering is Numbering.FLAT:
            other = seen_numbers.setdefault(info.number, info.path)
            if other != info.path:
                raise DuplicateCodeError(info.number, other, info.path, number=True)
        entries.append(info)

    for info in entries:
        other = seen_codes.setdefault(info.code, info.path)
        if other != info.path:
            raise DuplicateCodeError(info.code, other, info.path)

    logger.debug("derived %d codes (%s numbering)", len(entries), config.numbering.value)
    return CodeTable(entries, config)


def _descend(
    node: CategoryNode, path: str, ctx: _Context, config: DerivationConfig
) -> Iterator[DerivedInfo]:
    ctx = ctx.enter(node)
    for child in node.children:
        child_path = join_path(path, child.name)
        if isinstance(child, CategoryNode):
            yield from _descend(child, child_path, ctx, config)
            continue

        if config.numbering is Numbering.HIERARCHICAL:
            number = ctx.digits + str(child.number)
        else:
            number = str(child.number)
        acronym = child.acronym or ctx.acronym
        yield DerivedInfo(
            path=child_path,
            number=number,
            code=f"{acronym}{number.rjust(config.width, '0')}",
            kind=child.kind or ctx.kind,
            acronym=acronym,
            description=child.description,
            label=child.label if child.label is not None else ctx.label,
            fields=child.fields,
        )
