"""Exception taxonomy.

Two families:
- BuildError: the tree or its codes are invalid. Raised while building the
  code table; the process must not continue with a partial table.
- RecordError: a single occurrence could not be turned into a diagnostic.
  Local to that call; the shared table is unaffected.
"""

from __future__ import annotations

from collections.abc import Sequence


class ErrorTreeError(Exception):
    """Base class for every error raised by errortree."""


class BuildError(ErrorTreeError):
    """Raised when the error tree cannot be turned into a code table."""


class StructureError(BuildError):
    """Malformed tree: duplicate sibling, empty category, negative number, ..."""

    def __init__(self, path: str, rule: str) -> None:
        self.path = path
        self.rule = rule
        super().__init__(f"invalid error tree at '{path or '<root>'}': {rule}")


class DuplicateCodeError(BuildError):
    """Two leaves derived the same code (or, in flat mode, the same number)."""

    def __init__(self, code: str, first: str, second: str, *, number: bool = False) -> None:
        self.code = code
        self.first = first
        self.second = second
        what = "number" if number else "code"
        super().__init__(f"duplicate {what} {code}: '{first}' and '{second}'")


class ConfigError(ErrorTreeError):
    """The declarative tree description or its settings are malformed."""


class TableNotInitializedError(ErrorTreeError):
    """The process-wide code table was read before it was installed."""


class RecordError(ErrorTreeError):
    """A diagnostic record could not be built for one occurrence."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to build diagnostic for '{path}': {reason}")


class UnknownLeafError(RecordError):
    def __init__(self, path: str) -> None:
        super().__init__(path, "no such leaf in the error tree")


class TemplateError(RecordError):
    """A description placeholder is unresolved or a declared field is missing."""


class UnknownKindError(RecordError):
    def __init__(self, path: str, kind: str) -> None:
        self.kind = kind
        super().__init__(path, f"no severity configured for kind '{kind}'")


class CycleError(RecordError):
    def __init__(self, paths: Sequence[str]) -> None:
        self.paths = tuple(paths)
        chain = " -> ".join(self.paths)
        super().__init__(self.paths[0], f"cause chain contains a cycle: {chain}")
