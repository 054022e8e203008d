"""Shared test doubles for the todo_manager test suite."""

from typing import Callable, Optional, Sequence

import pytest

from todo_manager.models.item import TodoItem
from todo_manager.storage.base import PersistenceStore


class RefusingStore(PersistenceStore):
    """A store whose saves always fail; counts save attempts."""

    def __init__(self, initial: Optional[list[TodoItem]] = None) -> None:
        self.initial = initial
        self.save_calls = 0

    def save(self, items: Sequence[TodoItem]) -> bool:
        self.save_calls += 1
        return False

    def load(self) -> Optional[list[TodoItem]]:
        return self.initial


@pytest.fixture()
def make_refusing_store() -> Callable[..., RefusingStore]:
    """Return a factory for stores that refuse every save."""
    return RefusingStore
