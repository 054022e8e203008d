"""Interactive todo shell.

Reads one command per line, hands it to the :class:`ListManager`, and
prints the result.  The shell owns all user-facing wording; the manager
only reports :class:`Outcome` values.
"""

from __future__ import annotations

import logging

import click

from todo_manager.cli.commands import (
    HELP_TEXT,
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    InvalidCommand,
    ListCommand,
    ToggleCommand,
    parse_command,
)
from todo_manager.models.item import TodoItem
from todo_manager.models.outcome import Outcome
from todo_manager.storage.list_manager import ListManager

logger = logging.getLogger(__name__)

PERSISTENCE_WARNING = "Warning: the change was applied but could not be saved."


class TodoShell:
    """Read-eval-print loop over a :class:`ListManager`.

    Parameters
    ----------
    manager:
        The list manager every command is applied to.
    prompt:
        Text shown before each input line.
    """

    def __init__(self, manager: ListManager, prompt: str = "todo") -> None:
        self._manager = manager
        self._prompt = prompt

    @property
    def manager(self) -> ListManager:
        return self._manager

    def run(self) -> None:
        """Prompt for commands until ``exit`` or end of input."""
        click.echo("Todo shell. Type 'help' for a list of commands.")
        while True:
            try:
                line = click.prompt(
                    self._prompt,
                    default="",
                    show_default=False,
                    prompt_suffix="> ",
                )
            except click.Abort:
                click.echo()
                break

            command = parse_command(line)
            if command is None:
                continue
            if not self.execute(command):
                break

        click.echo("Bye!")

    def execute(self, command: Command) -> bool:
        """Run a single parsed command.

        Returns
        -------
        bool
            *False* when the shell should stop, *True* otherwise.
        """
        if isinstance(command, ExitCommand):
            return False

        if isinstance(command, HelpCommand):
            click.echo(HELP_TEXT)
        elif isinstance(command, InvalidCommand):
            click.secho(command.message, fg="red", err=True)
        elif isinstance(command, ListCommand):
            echo_items(self._manager.list_items())
        elif isinstance(command, AddCommand):
            outcome = self._manager.add_item(command.title)
            report_outcome(outcome, f"Added '{command.title}'.")
        elif isinstance(command, ToggleCommand):
            outcome = self._manager.toggle_completion(command.index)
            item = self._manager.get_item(command.index)
            state = "done" if item is not None and item.is_completed else "not done"
            report_outcome(
                outcome,
                f"Marked todo {command.index + 1} as {state}.",
                position=command.index + 1,
            )
        elif isinstance(command, DeleteCommand):
            outcome = self._manager.delete_item(command.index)
            report_outcome(
                outcome,
                f"Deleted todo {command.index + 1}.",
                position=command.index + 1,
            )
        else:
            logger.debug("Unhandled command %r.", command)
        return True


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def format_item(position: int, item: TodoItem) -> str:
    """Render one todo as ``<position>. <marker> <title>``."""
    return f"{position}. {item.marker} {item.title}"


def echo_items(items: list[TodoItem]) -> None:
    """Print a numbered list of todos, or a placeholder when empty."""
    if not items:
        click.echo("No todos yet.")
        return
    for position, item in enumerate(items, start=1):
        click.echo(format_item(position, item))


def report_outcome(outcome: Outcome, success_message: str, position: int = 0) -> None:
    """Print the user-facing message for *outcome*."""
    if outcome is Outcome.INDEX_NOT_FOUND:
        click.secho(f"No todo at position {position}.", fg="red", err=True)
        return
    click.echo(success_message)
    if outcome is Outcome.PERSISTENCE_FAILED:
        click.secho(PERSISTENCE_WARNING, fg="yellow", err=True)
