"""XDG-compliant path management for pathman.

Provides the configuration location and the managed folder locations.

Defaults:
- Config: ~/.config/pathman/config.json (or $XDG_CONFIG_HOME/pathman/)
- Managed folder: ~/.local/bin/pathman-links/ (or $PATHMAN_HOME)
- Front subfolder: <managed folder>/front
- Back subfolder: <managed folder>/back
"""

import os
from pathlib import Path

from pathman.models.managed import Priority

# Application identifier for directory naming
APP_NAME = "pathman"

CONFIG_FILENAME = "config.json"

# Environment variable overriding the managed folder location
HOME_ENV_VAR = "PATHMAN_HOME"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/pathman/ (or XDG_CONFIG_HOME/pathman/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/pathman/config.json.
    """
    return get_config_dir() / CONFIG_FILENAME


def get_managed_folder() -> Path:
    """Get the base managed folder that holds the front and back subfolders.

    Returns:
        Path to $PATHMAN_HOME, or ~/.local/bin/pathman-links.
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser().absolute()
    return Path.home() / ".local" / "bin" / "pathman-links"


def get_front_folder() -> Path:
    """Get the front subfolder path."""
    return get_managed_folder() / Priority.FRONT.value


def get_back_folder() -> Path:
    """Get the back subfolder path."""
    return get_managed_folder() / Priority.BACK.value


def get_folder(priority: Priority) -> Path:
    """Get the subfolder hosting links of the given priority."""
    return get_front_folder() if priority == Priority.FRONT else get_back_folder()


def ensure_folder(path: Path, name: str) -> Path:
    """Create a folder with 0755 permissions if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(mode=0o755, parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} folder {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} folder {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def get_bash_profile_path() -> Path:
    """Get the bash profile file to edit.

    Returns:
        ~/.bash_profile if it exists, otherwise ~/.profile.
    """
    bash_profile = Path.home() / ".bash_profile"
    if bash_profile.exists():
        return bash_profile
    return Path.home() / ".profile"
