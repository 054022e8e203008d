"""Persistence stores and the list manager that keeps them in sync."""

from todo_manager.storage.base import PersistenceStore
from todo_manager.storage.file_store import FileStore
from todo_manager.storage.list_manager import ListManager
from todo_manager.storage.memory_store import MemoryStore

__all__ = ["FileStore", "ListManager", "MemoryStore", "PersistenceStore"]
