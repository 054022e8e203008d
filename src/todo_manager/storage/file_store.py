"""FileStore -- durable store that keeps the todo list in a JSON file.

The whole list is written on every save as a JSON array of objects with the
fields ``id``, ``title`` and ``isCompleted``.  Writes are atomic
(write-to-temp + rename), so a crash mid-write never leaves a truncated
file behind and a failed save keeps the previous snapshot.

Typical usage::

    store = FileStore()                          # ~/.todo-manager/todos.json
    store = FileStore("/path/to/todos.json")     # explicit file

    store.save(items)
    items = store.load()                         # None if nothing saved
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence, Union

from todo_manager.models.item import TodoItem
from todo_manager.storage.base import PersistenceStore

logger = logging.getLogger(__name__)

# Default per-user directory holding the data file.
DEFAULT_DATA_DIR = Path.home() / ".todo-manager"

# File name of the persisted todo list inside the data directory.
DATA_FILE_NAME = "todos.json"

# Prefix for temporary files created during atomic writes.
TEMP_FILE_PREFIX = ".tmp_"


class FileStore(PersistenceStore):
    """JSON file-backed implementation of :class:`PersistenceStore`.

    The path is resolved once at construction; no filesystem access happens
    until the first :meth:`save` or :meth:`load`.  The parent directory is
    created on demand when saving.

    Parameters
    ----------
    path:
        Path to the JSON data file.  When *None*, defaults to
        ``~/.todo-manager/todos.json``.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        if path is not None:
            self._path = Path(path).expanduser().resolve()
        else:
            self._path = DEFAULT_DATA_DIR / DATA_FILE_NAME

    # ------------------------------------------------------------------
    # PersistenceStore API
    # ------------------------------------------------------------------

    def save(self, items: Sequence[TodoItem]) -> bool:
        """Write the full list to disk, replacing the previous file.

        Failures (unwritable path, full disk, unserialisable data) are logged
        and reported as *False*; the previous file is left untouched.
        """
        try:
            payload = json.dumps(
                [item.to_json_dict() for item in items],
                indent=2,
                ensure_ascii=False,
            )
            self._atomic_write(payload)
        except (OSError, TypeError, ValueError):
            logger.error(
                "Failed to save %d todo(s) to %s.",
                len(items),
                self._path,
                exc_info=True,
            )
            return False

        logger.info("Saved %d todo(s) to %s", len(items), self._path)
        return True

    def load(self) -> Optional[list[TodoItem]]:
        """Read the list back from disk.

        Returns
        -------
        list[TodoItem] or None
            The saved items, or *None* if the file does not exist or its
            contents cannot be parsed.
        """
        data = self._safe_read_json()
        if data is None:
            return None
        if not isinstance(data, list):
            logger.warning(
                "Data file %s does not contain a JSON array. The file will be ignored.",
                self._path,
            )
            return None
        try:
            items = [TodoItem.from_json_dict(record) for record in data]
        except ValueError:
            logger.warning(
                "Failed to deserialize todos from %s. File may be corrupt.",
                self._path,
                exc_info=True,
            )
            return None
        if len({item.id for item in items}) != len(items):
            logger.warning(
                "Duplicate todo ids in %s. The file will be ignored.",
                self._path,
            )
            return None

        logger.debug("Loaded %d todo(s) from %s", len(items), self._path)
        return items

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        """The resolved path of the data file."""
        return self._path

    def exists(self) -> bool:
        """Check whether the data file exists on disk."""
        return self._path.is_file()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _atomic_write(self, payload: str) -> None:
        """Write *payload* to the data file atomically.

        The temp file lives in the same directory as the target so the final
        ``os.replace`` is atomic on POSIX.  If anything fails before the
        rename, the temp file is removed and the original file is kept.
        """
        target = self._path
        target.parent.mkdir(parents=True, exist_ok=True)

        fd = None
        tmp_path: Optional[str] = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=str(target.parent),
                prefix=TEMP_FILE_PREFIX,
                suffix=".json",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fp:
                fd = None  # os.fdopen takes ownership of the fd
                fp.write(payload)
                fp.write("\n")
                fp.flush()
                os.fsync(fp.fileno())

            os.replace(tmp_path, str(target))
            tmp_path = None

        except BaseException:
            if fd is not None:
                os.close(fd)
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
            raise

    def _safe_read_json(self) -> Optional[object]:
        """Read and parse the data file, returning *None* on any failure."""
        if not self._path.is_file():
            logger.debug("No data file at %s.", self._path)
            return None
        try:
            with open(self._path, "r", encoding="utf-8") as fp:
                return json.load(fp)
        except json.JSONDecodeError:
            logger.warning(
                "Corrupt JSON in %s. The file will be ignored.",
                self._path,
                exc_info=True,
            )
            return None
        except (OSError, UnicodeDecodeError):
            logger.warning(
                "Could not read %s.",
                self._path,
                exc_info=True,
            )
            return None
