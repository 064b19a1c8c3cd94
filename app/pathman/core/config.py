"""Configuration file I/O.

The configuration is a JSON document holding the ordered list of managed
directories. It is loaded once at the CLI boundary and passed to the core
as plain data.
"""

import json
import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pathman.core.paths import get_config_path
from pathman.models.managed import ManagedDirectory, Priority


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid JSON."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


class PathmanConfig(BaseModel):
    """Persisted pathman configuration.

    Attributes:
        managed_directories: Managed directories in insertion order.
    """

    model_config = ConfigDict(extra="forbid")

    managed_directories: Annotated[
        list[ManagedDirectory],
        Field(description="Directories spliced into PATH"),
    ] = []

    @model_validator(mode="after")
    def validate_unique_paths(self) -> "PathmanConfig":
        """Ensure every directory appears once."""
        seen: set[str] = set()
        for directory in self.managed_directories:
            if directory.path in seen:
                msg = f"Directory listed more than once: {directory.path}"
                raise ValueError(msg)
            seen.add(directory.path)
        return self

    def find_directory(self, path: str) -> ManagedDirectory | None:
        """Return the entry for ``path`` if it is managed."""
        for directory in self.managed_directories:
            if directory.path == path:
                return directory
        return None

    def upsert_directory(self, path: str, priority: Priority) -> bool:
        """Add a directory, or update its priority in place.

        Args:
            path: Absolute directory path.
            priority: Desired priority.

        Returns:
            True if the configuration changed.
        """
        new_entry = ManagedDirectory(path=path, priority=priority)
        for i, directory in enumerate(self.managed_directories):
            if directory.path == path:
                if directory.priority == priority:
                    return False
                self.managed_directories[i] = new_entry
                return True
        self.managed_directories.append(new_entry)
        return True

    def remove_directory(self, path: str) -> bool:
        """Remove a directory entry.

        Returns:
            True if an entry was removed.
        """
        for i, directory in enumerate(self.managed_directories):
            if directory.path == path:
                del self.managed_directories[i]
                return True
        return False


def load_config(path: Path | None = None) -> PathmanConfig:
    """Load and validate the configuration.

    A missing file yields an empty configuration.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated PathmanConfig.

    Raises:
        ConfigParseError: If the file is not valid JSON.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return PathmanConfig()
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {config_path}: {e}") from e

    try:
        return PathmanConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def save_config(config: PathmanConfig, path: Path | None = None) -> Path:
    """Save the configuration atomically.

    Args:
        config: Configuration to save.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            json.dump(data, f, indent=4)
            f.write("\n")
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def require_config(config_path: Path | None = None) -> PathmanConfig:
    """Load the configuration or exit with an error message.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    import typer

    from pathman.utils.formatting import print_error

    try:
        return load_config(config_path)
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e
