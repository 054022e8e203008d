"""Main Click CLI entry point for the todo command.

Running ``todo`` with no subcommand starts the interactive shell.  The
one-shot subcommands apply a single change and exit, which is handy for
scripts.

Entry point registered in pyproject.toml::

    [project.scripts]
    todo = "todo_manager.cli.main:cli"

Usage examples::

    todo                          # interactive shell
    todo --in-memory              # shell with a throwaway list
    todo add Buy milk
    todo list --json-output
    todo toggle 1
    todo delete 1
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from todo_manager import __version__
from todo_manager.cli.shell import TodoShell, echo_items, report_outcome
from todo_manager.config import StoreBackend, TodoConfig
from todo_manager.models.outcome import Outcome
from todo_manager.storage.base import PersistenceStore
from todo_manager.storage.file_store import FileStore
from todo_manager.storage.list_manager import ListManager
from todo_manager.storage.memory_store import MemoryStore


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todo-manager")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding todos.json. Defaults to ~/.todo-manager.",
)
@click.option(
    "--in-memory",
    is_flag=True,
    default=False,
    help="Keep todos in memory only; nothing is written to disk.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level for messages written to stderr.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a config.json file. Defaults to ~/.todo-manager/config.json.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Optional[str],
    in_memory: bool,
    log_level: Optional[str],
    config_path: Optional[str],
) -> None:
    """Todo Manager -- a small persistent todo list for the terminal."""
    ctx.ensure_object(dict)
    try:
        config = TodoConfig.load(
            config_path=config_path,
            data_dir=data_dir,
            backend=StoreBackend.MEMORY if in_memory else None,
            log_level=log_level,
        )
    except ValueError as exc:
        click.secho(f"ERROR: Failed to load configuration: {exc}", fg="red", err=True)
        sys.exit(1)

    config.configure_logging()
    ctx.obj["config"] = config
    ctx.obj["manager"] = _build_manager(config)

    if ctx.invoked_subcommand is None:
        TodoShell(ctx.obj["manager"]).run()


@cli.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Start the interactive todo shell."""
    TodoShell(ctx.obj["manager"]).run()


@cli.command()
@click.argument("title", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, title: tuple[str, ...]) -> None:
    """Add a new todo with the given TITLE."""
    text = " ".join(title).strip()
    if not text:
        click.secho("ERROR: The title must not be empty.", fg="red", err=True)
        sys.exit(1)
    manager: ListManager = ctx.obj["manager"]
    _finish(manager.add_item(text), f"Added '{text}'.")


@cli.command(name="list")
@click.option(
    "--json-output",
    "output_json",
    is_flag=True,
    default=False,
    help="Output todos as JSON instead of a numbered list.",
)
@click.pass_context
def list_todos(ctx: click.Context, output_json: bool) -> None:
    """Show all todos."""
    manager: ListManager = ctx.obj["manager"]
    items = manager.list_items()
    if output_json:
        click.echo(json.dumps([item.to_json_dict() for item in items], indent=2))
    else:
        echo_items(items)


@cli.command()
@click.argument("position", type=click.IntRange(min=1))
@click.pass_context
def toggle(ctx: click.Context, position: int) -> None:
    """Mark the todo at POSITION (as shown by 'list') done or not done."""
    manager: ListManager = ctx.obj["manager"]
    outcome = manager.toggle_completion(position - 1)
    item = manager.get_item(position - 1)
    state = "done" if item is not None and item.is_completed else "not done"
    _finish(outcome, f"Marked todo {position} as {state}.", position)


@cli.command()
@click.argument("position", type=click.IntRange(min=1))
@click.pass_context
def delete(ctx: click.Context, position: int) -> None:
    """Delete the todo at POSITION (as shown by 'list')."""
    manager: ListManager = ctx.obj["manager"]
    _finish(manager.delete_item(position - 1), f"Deleted todo {position}.", position)


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------


def _build_store(config: TodoConfig) -> PersistenceStore:
    """Create the store selected by *config*."""
    if config.backend is StoreBackend.MEMORY:
        return MemoryStore()
    return FileStore(config.data_file)


def _build_manager(config: TodoConfig) -> ListManager:
    """Build the store and inject it into a new :class:`ListManager`."""
    return ListManager(_build_store(config))


def _finish(outcome: Outcome, success_message: str, position: int = 0) -> None:
    """Report *outcome* and exit non-zero unless it succeeded."""
    report_outcome(outcome, success_message, position)
    if not outcome.ok:
        sys.exit(1)


if __name__ == "__main__":
    cli()
