"""Click CLI and interactive shell for the todo list.

Provides the ``todo`` CLI entry point:
- ``todo``            -- Start the interactive shell (same as ``todo shell``).
- ``todo add``        -- Add a todo.
- ``todo list``       -- List todos (with --json-output).
- ``todo toggle``     -- Toggle a todo's completion by position.
- ``todo delete``     -- Delete a todo by position.
"""

from todo_manager.cli.main import add, cli, delete, list_todos, shell, toggle

__all__ = ["add", "cli", "delete", "list_todos", "shell", "toggle"]
