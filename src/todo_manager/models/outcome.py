"""Result taxonomy returned by every mutating ListManager operation."""

from __future__ import annotations

from enum import Enum


class Outcome(str, Enum):
    """Outcome of a mutating operation on the todo list.

    ``INDEX_NOT_FOUND`` means nothing changed.  ``PERSISTENCE_FAILED`` means
    the in-memory change was applied but the store could not record it, so
    memory and disk may differ until the next successful save.
    """

    SUCCESS = "success"
    INDEX_NOT_FOUND = "index_not_found"
    PERSISTENCE_FAILED = "persistence_failed"

    @property
    def ok(self) -> bool:
        """True only for :attr:`SUCCESS`."""
        return self is Outcome.SUCCESS
