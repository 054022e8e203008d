"""Pydantic data models for todo items and operation outcomes."""

from todo_manager.models.item import TodoItem
from todo_manager.models.outcome import Outcome

__all__ = [
    "Outcome",
    "TodoItem",
]
