"""PersistenceStore -- the save/load contract shared by every store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from todo_manager.models.item import TodoItem


class PersistenceStore(ABC):
    """Abstract snapshot store for a whole todo list.

    Implementations persist the *entire* list on every save, replacing any
    earlier snapshot.  They must not raise for I/O or serialisation problems:
    ``save`` reports failure through its return value and ``load`` through
    an absent result.
    """

    @abstractmethod
    def save(self, items: Sequence[TodoItem]) -> bool:
        """Replace the stored snapshot with *items*.

        Returns
        -------
        bool
            *True* if the snapshot was recorded, *False* otherwise.  A failed
            save leaves the previous snapshot in place.
        """

    @abstractmethod
    def load(self) -> Optional[list[TodoItem]]:
        """Return the last saved snapshot.

        Returns
        -------
        list[TodoItem] or None
            The saved items in order, or *None* when nothing usable has been
            saved.  An empty list means an empty list was saved.
        """
