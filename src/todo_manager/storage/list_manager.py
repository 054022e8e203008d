"""ListManager -- owns the todo list and keeps its store in sync.

The manager holds the authoritative, ordered list of :class:`TodoItem`
objects.  Every mutation is applied in memory first and then the full list
is pushed to the configured :class:`PersistenceStore`, so callers never
need to remember to save.

Typical usage::

    manager = ListManager(FileStore())
    manager.add_item("Buy milk")
    manager.toggle_completion(0)
    for item in manager.list_items():
        print(item.marker, item.title)
    manager.delete_item(0)

Indices are zero-based positions in the current list.  They shift after a
delete, so callers should re-list before reusing one.
"""

from __future__ import annotations

import logging
from typing import Optional

from todo_manager.models.item import TodoItem
from todo_manager.models.outcome import Outcome
from todo_manager.storage.base import PersistenceStore

logger = logging.getLogger(__name__)


class ListManager:
    """High-level manager for a single todo list.

    Parameters
    ----------
    store:
        The store to load the initial list from and to save to after every
        mutation.  Chosen by the caller (``FileStore`` or ``MemoryStore``).
    """

    def __init__(self, store: PersistenceStore) -> None:
        self._store = store
        self._items: list[TodoItem] = self._load_initial()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def store(self) -> PersistenceStore:
        """The underlying :class:`PersistenceStore`."""
        return self._store

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_item(self, title: str) -> Outcome:
        """Append a new, not yet completed todo and persist the list.

        Returns
        -------
        Outcome
            ``SUCCESS`` or ``PERSISTENCE_FAILED``.  The item is appended in
            memory either way.

        Raises
        ------
        ValueError
            If *title* is empty.
        """
        item = TodoItem(title=title)
        self._items.append(item)
        logger.info("Added todo %s ('%s').", item.id, item.title)
        return self._persist()

    def toggle_completion(self, index: int) -> Outcome:
        """Flip the completion flag of the todo at *index* and persist.

        Returns ``INDEX_NOT_FOUND`` without touching anything when *index*
        is out of range.
        """
        if not self._in_range(index):
            logger.debug("Toggle ignored: index %d out of range.", index)
            return Outcome.INDEX_NOT_FOUND

        item = self._items[index]
        completed = item.toggle()
        logger.info(
            "Marked todo %s as %s.",
            item.id,
            "completed" if completed else "pending",
        )
        return self._persist()

    def delete_item(self, index: int) -> Outcome:
        """Remove the todo at *index* and persist.

        Later todos move down by one position.  Returns ``INDEX_NOT_FOUND``
        without touching anything when *index* is out of range.
        """
        if not self._in_range(index):
            logger.debug("Delete ignored: index %d out of range.", index)
            return Outcome.INDEX_NOT_FOUND

        removed = self._items.pop(index)
        logger.info("Deleted todo %s ('%s').", removed.id, removed.title)
        return self._persist()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_items(self) -> list[TodoItem]:
        """Return a copy of the current list, in insertion order.

        The returned items are copies; changing them does not affect the
        manager.
        """
        return [item.model_copy() for item in self._items]

    def get_item(self, index: int) -> Optional[TodoItem]:
        """Return a copy of the todo at *index*, or *None* if out of range."""
        if not self._in_range(index):
            return None
        return self._items[index].model_copy()

    # ------------------------------------------------------------------
    # Reload
    # ------------------------------------------------------------------

    def reload(self) -> None:
        """Replace the in-memory list with the store's current snapshot.

        Any change that failed to save is discarded.
        """
        self._items = self._load_initial()
        logger.info("Reloaded %d todo(s) from the store.", len(self._items))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _load_initial(self) -> list[TodoItem]:
        loaded = self._store.load()
        if loaded is None:
            logger.debug("Store has no saved todos. Starting with an empty list.")
            return []
        return list(loaded)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def _persist(self) -> Outcome:
        """Save the full list and translate the result into an Outcome."""
        if self._store.save(self._items):
            return Outcome.SUCCESS
        logger.warning(
            "Todo list changed in memory but could not be saved (%d item(s)).",
            len(self._items),
        )
        return Outcome.PERSISTENCE_FAILED
