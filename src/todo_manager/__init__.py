"""Todo Manager - A single-user command-line todo list with swappable persistence."""

__version__ = "0.1.0"

from todo_manager.config import TodoConfig

__all__ = ["TodoConfig", "__version__"]
