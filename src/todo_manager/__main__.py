"""Allow ``python -m todo_manager`` to start the CLI."""

from todo_manager.cli.main import cli

if __name__ == "__main__":
    cli()
