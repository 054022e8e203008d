"""Parsing of shell input lines into command values.

``parse_command`` is a pure function: it never touches the todo list.  Each
recognised line becomes one of the small frozen dataclasses below, which the
shell then dispatches on.  Indices are converted from the 1-based positions
users see to the 0-based positions the list manager expects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class AddCommand:
    title: str


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class ToggleCommand:
    index: int


@dataclass(frozen=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class ExitCommand:
    pass


@dataclass(frozen=True)
class InvalidCommand:
    message: str


Command = Union[
    AddCommand,
    ListCommand,
    ToggleCommand,
    DeleteCommand,
    HelpCommand,
    ExitCommand,
    InvalidCommand,
]

# Keyword -> canonical command name.
KEYWORDS = {
    "add": "add",
    "list": "list",
    "ls": "list",
    "toggle": "toggle",
    "delete": "delete",
    "rm": "delete",
    "help": "help",
    "?": "help",
    "exit": "exit",
    "quit": "exit",
}

HELP_TEXT = """\
Commands:
  add <title>     Add a new todo
  list            Show all todos
  toggle <n>      Mark todo number n as done / not done
  delete <n>      Delete todo number n
  help            Show this help
  exit            Leave the todo shell"""


def parse_command(line: str) -> Optional[Command]:
    """Parse one line of user input.

    Returns *None* for a blank line.  Unrecognised or malformed input yields
    an :class:`InvalidCommand` carrying a message for the user.
    """
    stripped = line.strip()
    if not stripped:
        return None

    parts = stripped.split(None, 1)
    keyword = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""
    name = KEYWORDS.get(keyword.lower())

    if name is None:
        return InvalidCommand(f"Unknown command '{keyword}'. Type 'help' for a list of commands.")

    if name == "add":
        if not rest:
            return InvalidCommand("Usage: add <title>")
        return AddCommand(title=rest)

    if name in ("toggle", "delete"):
        index = _parse_position(rest)
        if index is None:
            return InvalidCommand(f"Usage: {name} <n>  (n is a todo number from 'list')")
        if name == "toggle":
            return ToggleCommand(index=index)
        return DeleteCommand(index=index)

    if name == "list":
        return ListCommand()
    if name == "help":
        return HelpCommand()
    return ExitCommand()


def _parse_position(text: str) -> Optional[int]:
    """Convert a 1-based position string into a 0-based index.

    Returns *None* unless *text* is a single positive integer.
    """
    try:
        position = int(text)
    except ValueError:
        return None
    if position < 1:
        return None
    return position - 1
