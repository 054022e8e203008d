"""MemoryStore -- volatile store that keeps the snapshot in process memory.

Nothing survives the process.  Useful for throwaway sessions
(``todo --in-memory``) and for tests.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from todo_manager.models.item import TodoItem
from todo_manager.storage.base import PersistenceStore

logger = logging.getLogger(__name__)


class MemoryStore(PersistenceStore):
    """In-process snapshot store.

    Items are copied on the way in and on the way out, so the held snapshot
    only changes when :meth:`save` is called.

    Parameters
    ----------
    initial:
        Optional items to seed the store with, as if they had been saved.
    """

    def __init__(self, initial: Optional[Sequence[TodoItem]] = None) -> None:
        self._snapshot: Optional[list[TodoItem]] = None
        if initial is not None:
            self._snapshot = _copy_items(initial)

    def save(self, items: Sequence[TodoItem]) -> bool:
        self._snapshot = _copy_items(items)
        logger.debug("Held %d todo(s) in memory.", len(self._snapshot))
        return True

    def load(self) -> Optional[list[TodoItem]]:
        if self._snapshot is None:
            return None
        return _copy_items(self._snapshot)

    def has_snapshot(self) -> bool:
        """Check whether anything has been saved yet."""
        return self._snapshot is not None


def _copy_items(items: Sequence[TodoItem]) -> list[TodoItem]:
    return [item.model_copy() for item in items]
