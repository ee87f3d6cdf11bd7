"""Process-wide code table, built exactly once.

The table is installed before any concurrent error reporting starts and is
read-only afterwards, so readers never take the lock. A failed build
poisons the cell: every later caller sees the same exception instead of a
partial table.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from errortree.engine import CodeTable, DerivationConfig, derive
from errortree.errors import TableNotInitializedError
from errortree.model import ErrorTree

logger = logging.getLogger(__name__)


class TableCell:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._table: CodeTable | None = None
        self._failure: Exception | None = None

    @property
    def is_initialized(self) -> bool:
        return self._table is not None

    @property
    def is_poisoned(self) -> bool:
        return self._failure is not None

    def initialize(self, factory: Callable[[], CodeTable]) -> CodeTable:
        """Run `factory` once and store its table.

        Later calls return the stored table without running `factory`.
        """
        with self._lock:
            if self._failure is not None:
                raise self._failure
            if self._table is None:
                try:
                    self._table = factory()
                except Exception as e:
                    self._failure = e
                    logger.error("error tree rejected: %s", e)
                    raise
                logger.info("installed code table with %d codes", len(self._table))
            return self._table

    def get(self) -> CodeTable:
        table = self._table
        if table is not None:
            return table
        if self._failure is not None:
            raise self._failure
        raise TableNotInitializedError("the code table has not been installed")


_PROCESS_TABLE = TableCell()


def install(tree: ErrorTree, config: DerivationConfig) -> CodeTable:
    """Derive and install the process-wide table (first call wins)."""
    return _PROCESS_TABLE.initialize(lambda: derive(tree, config))


def current() -> CodeTable:
    return _PROCESS_TABLE.get()
