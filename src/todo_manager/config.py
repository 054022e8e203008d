"""Configuration and settings module for Todo Manager.

Provides the :class:`TodoConfig` class which centralises all configuration
for the todo CLI.  Configuration is resolved in priority order:

1. **Explicit overrides** (highest priority) -- usually CLI options
2. **Environment variables** -- ``TODO_MANAGER_*``
3. **Config file** -- ``~/.todo-manager/config.json``
4. **Defaults** (lowest priority) -- sensible built-in values

Typical usage::

    config = TodoConfig.load()                           # file + env + defaults
    config = TodoConfig.load(backend="memory")           # with an override
    config = TodoConfig(data_dir="/custom/path")         # programmatic construction

    print(config.data_file)   # resolved path to todos.json
    print(config.backend)     # StoreBackend.FILE
"""

from __future__ import annotations

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from todo_manager.storage.file_store import DATA_FILE_NAME, DEFAULT_DATA_DIR

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Config file name inside the default data directory.
CONFIG_FILE_NAME = "config.json"

# Environment variable prefix.  For example ``TODO_MANAGER_BACKEND=memory``.
ENV_PREFIX = "TODO_MANAGER_"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class StoreBackend(str, Enum):
    """Which :class:`PersistenceStore` implementation to use."""

    FILE = "file"
    MEMORY = "memory"


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class TodoConfig(BaseModel):
    """Centralised configuration for the todo CLI.

    Attributes
    ----------
    data_dir:
        Directory holding ``todos.json``.  Defaults to ``~/.todo-manager``.
    backend:
        ``file`` for the durable JSON store, ``memory`` for a session-only
        list that is forgotten on exit.
    log_level:
        Python logging level name.  Defaults to ``WARNING`` so that routine
        messages do not interleave with the interactive shell.
    """

    data_dir: Optional[str] = Field(
        default=None,
        description="Directory holding the todos.json data file.",
    )
    backend: StoreBackend = Field(
        default=StoreBackend.FILE,
        description="Persistence backend: file or memory.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL.",
    )

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def resolve_data_dir(self) -> "TodoConfig":
        """Resolve ``data_dir`` to an absolute path."""
        if self.data_dir is not None:
            self.data_dir = str(Path(self.data_dir).expanduser().resolve())
        else:
            self.data_dir = str(DEFAULT_DATA_DIR)
        return self

    @model_validator(mode="after")
    def validate_log_level(self) -> "TodoConfig":
        """Normalise and validate the log level string."""
        normalised = self.log_level.upper().strip()
        if normalised not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{self.log_level}'. "
                f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}."
            )
        self.log_level = normalised
        return self

    # ------------------------------------------------------------------
    # Factory: load from file + environment
    # ------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        config_path: Optional[str] = None,
        **overrides: Any,
    ) -> "TodoConfig":
        """Load configuration with full resolution: overrides -> env -> file -> defaults.

        Parameters
        ----------
        config_path:
            Explicit path to a ``config.json`` file.  When *None*, the file
            is looked up at ``~/.todo-manager/config.json``.
        overrides:
            Field values that win over everything else.  Entries whose value
            is *None* are ignored, so CLI options can be passed through as-is.

        Returns
        -------
        TodoConfig
            Fully resolved configuration object.

        Raises
        ------
        ValueError
            If the merged values are invalid (e.g. unknown log level).
        """
        merged: dict = {}
        merged.update(_load_config_file(config_path))
        merged.update(_load_env_overrides())
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(merged)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------

    @property
    def data_file(self) -> Path:
        """Path of the JSON file used by the file backend."""
        return Path(self.data_dir) / DATA_FILE_NAME

    def configure_logging(self) -> None:
        """Apply the configured log level to the ``todo_manager`` logger.

        Log records go to stderr so they never mix with shell output.
        Calling this more than once does not add duplicate handlers.
        """
        pkg_logger = logging.getLogger("todo_manager")
        pkg_logger.setLevel(self.log_level)

        if not pkg_logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            pkg_logger.addHandler(handler)
        for handler in pkg_logger.handlers:
            handler.setLevel(self.log_level)

    def to_dict(self) -> dict:
        """Return all configuration values as a plain dictionary."""
        return self.model_dump(mode="json")

    def __repr__(self) -> str:
        return (
            f"TodoConfig("
            f"data_dir={self.data_dir!r}, "
            f"backend={self.backend.value!r}, "
            f"log_level={self.log_level!r}"
            f")"
        )


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _load_config_file(config_path: Optional[str] = None) -> dict:
    """Read a ``config.json`` file and return its contents as a dict.

    Returns an empty dict if the file does not exist or is malformed.
    """
    if config_path is not None:
        path = Path(config_path).expanduser().resolve()
    else:
        path = DEFAULT_DATA_DIR / CONFIG_FILE_NAME

    if not path.is_file():
        logger.debug("No config file at %s. Using defaults.", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as fp:
            data = json.load(fp)
        if not isinstance(data, dict):
            logger.warning(
                "Config file %s does not contain a JSON object. Ignoring.",
                path,
            )
            return {}
        logger.info("Loaded configuration from %s", path)
        return data
    except json.JSONDecodeError:
        logger.warning(
            "Config file %s contains invalid JSON. Ignoring.",
            path,
            exc_info=True,
        )
        return {}
    except OSError:
        logger.warning(
            "Could not read config file %s. Ignoring.",
            path,
            exc_info=True,
        )
        return {}


def _load_env_overrides() -> dict:
    """Read ``TODO_MANAGER_*`` environment variables and return overrides.

    Supported variables:

    - ``TODO_MANAGER_DATA_DIR`` -- override data_dir
    - ``TODO_MANAGER_BACKEND`` -- override backend (``file``/``memory``)
    - ``TODO_MANAGER_LOG_LEVEL`` -- override log_level
    """
    overrides: dict = {}

    data_dir = os.environ.get(f"{ENV_PREFIX}DATA_DIR")
    if data_dir is not None:
        overrides["data_dir"] = data_dir

    backend = os.environ.get(f"{ENV_PREFIX}BACKEND")
    if backend is not None:
        overrides["backend"] = backend.lower().strip()

    log_level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level is not None:
        overrides["log_level"] = log_level

    if overrides:
        logger.info(
            "Environment overrides applied: %s",
            ", ".join(overrides.keys()),
        )

    return overrides
