"""Tests for package initialization and basic imports."""


def test_package_imports():
    """Verify the main package can be imported."""
    import todo_manager

    assert todo_manager is not None


def test_version_defined():
    """Verify __version__ is set and follows semver format."""
    from todo_manager import __version__

    assert __version__ is not None
    assert isinstance(__version__, str)
    parts = __version__.split(".")
    assert len(parts) == 3, f"Expected semver (X.Y.Z), got {__version__}"
    for part in parts:
        assert part.isdigit(), f"Version part '{part}' is not a digit in {__version__}"


def test_subpackages_importable():
    """Verify all subpackages can be imported."""
    import todo_manager.cli
    import todo_manager.models
    import todo_manager.storage

    assert todo_manager.cli is not None
    assert todo_manager.models is not None
    assert todo_manager.storage is not None


def test_public_exports():
    """Verify the store classes are exported from the storage package."""
    from todo_manager.storage import FileStore, ListManager, MemoryStore, PersistenceStore

    assert issubclass(FileStore, PersistenceStore)
    assert issubclass(MemoryStore, PersistenceStore)
    assert ListManager is not None


def test_cli_group_exists():
    """Verify the Click CLI group can be imported."""
    from todo_manager.cli.main import cli

    assert cli is not None
    assert callable(cli)
