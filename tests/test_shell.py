"""Tests for TodoShell -- the interactive read-eval-print loop.

The shell is driven through click's CliRunner isolation so that prompts
read from a scripted stdin.  Managers use real MemoryStore/FileStore
instances.
"""

from pathlib import Path
import click
import pytest
from click.testing import CliRunner

from todo_manager.cli.commands import (
    AddCommand,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    InvalidCommand,
    ListCommand,
    ToggleCommand,
)
from todo_manager.cli.shell import PERSISTENCE_WARNING, TodoShell, format_item
from todo_manager.models.item import TodoItem
from todo_manager.storage.file_store import FileStore
from todo_manager.storage.list_manager import ListManager
from todo_manager.storage.memory_store import MemoryStore


def _run_shell(manager: ListManager, script: str) -> str:
    """Run the shell with *script* as stdin and return everything printed."""

    @click.command()
    def entry() -> None:
        TodoShell(manager).run()

    result = CliRunner().invoke(entry, input=script)
    assert result.exit_code == 0, result.output
    return result.output


@pytest.fixture()
def manager() -> ListManager:
    return ListManager(MemoryStore())


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestFormatItem:
    def test_pending(self) -> None:
        assert format_item(1, TodoItem(title="Buy milk")) == "1. [ ] Buy milk"

    def test_completed(self) -> None:
        assert format_item(4, TodoItem(title="Done", is_completed=True)) == "4. [x] Done"


# ---------------------------------------------------------------------------
# execute()
# ---------------------------------------------------------------------------


class TestExecute:
    """Single commands applied directly, outside the loop."""

    def test_exit_stops(self, manager: ListManager) -> None:
        assert TodoShell(manager).execute(ExitCommand()) is False

    def test_add_continues_and_mutates(self, manager: ListManager) -> None:
        shell = TodoShell(manager)
        assert shell.execute(AddCommand(title="Buy milk")) is True
        assert [i.title for i in manager.list_items()] == ["Buy milk"]

    def test_toggle_and_delete(self, manager: ListManager) -> None:
        shell = TodoShell(manager)
        shell.execute(AddCommand(title="a"))
        shell.execute(ToggleCommand(index=0))
        assert manager.list_items()[0].is_completed is True
        shell.execute(DeleteCommand(index=0))
        assert manager.list_items() == []

    @pytest.mark.parametrize(
        "command",
        [ListCommand(), HelpCommand(), InvalidCommand(message="nope")],
    )
    def test_read_only_commands_continue(
        self, manager: ListManager, command: object
    ) -> None:
        assert TodoShell(manager).execute(command) is True
        assert manager.list_items() == []


# ---------------------------------------------------------------------------
# run()
# ---------------------------------------------------------------------------


class TestRun:
    """Full sessions over scripted input."""

    def test_scenario(self, manager: ListManager) -> None:
        output = _run_shell(
            manager,
            "add Buy milk\nlist\ntoggle 1\nlist\ndelete 1\nlist\nexit\n",
        )
        assert "Added 'Buy milk'." in output
        assert "1. [ ] Buy milk" in output
        assert "Marked todo 1 as done." in output
        assert "1. [x] Buy milk" in output
        assert "Deleted todo 1." in output
        assert "No todos yet." in output
        assert output.rstrip().endswith("Bye!")
        assert manager.list_items() == []

    def test_commands_after_exit_are_not_run(self, manager: ListManager) -> None:
        _run_shell(manager, "exit\nadd never\n")
        assert manager.list_items() == []

    def test_blank_lines_ignored(self, manager: ListManager) -> None:
        output = _run_shell(manager, "\n\nlist\nquit\n")
        assert "No todos yet." in output

    def test_out_of_range_position(self, manager: ListManager) -> None:
        output = _run_shell(manager, "add a\ntoggle 5\ndelete 2\nexit\n")
        assert "No todo at position 5." in output
        assert "No todo at position 2." in output
        assert len(manager) == 1

    def test_invalid_input_reported(self, manager: ListManager) -> None:
        output = _run_shell(manager, "dance\nadd\nexit\n")
        assert "Unknown command 'dance'" in output
        assert "Usage: add <title>" in output

    def test_help(self, manager: ListManager) -> None:
        output = _run_shell(manager, "help\nexit\n")
        assert "add <title>" in output
        assert "toggle <n>" in output

    def test_persistence_warning(self, make_refusing_store) -> None:
        manager = ListManager(make_refusing_store())
        output = _run_shell(manager, "add a\nexit\n")
        assert "Added 'a'." in output
        assert PERSISTENCE_WARNING in output

    def test_file_backed_session_persists(self, tmp_path: Path) -> None:
        path = tmp_path / "todos.json"
        _run_shell(ListManager(FileStore(path)), "add one\nadd two\ntoggle 2\nexit\n")

        fresh = ListManager(FileStore(path))
        items = fresh.list_items()
        assert [i.title for i in items] == ["one", "two"]
        assert [i.is_completed for i in items] == [False, True]
