"""Shell profile integration.

Provides the snippet that makes a login shell export the PATH composed by
``pathman path``, and appends it to the user's bash profile.
"""

import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

SHELL_INTEGRATION_LINES: tuple[str, ...] = (
    "if command -v pathman >/dev/null 2>&1; then",
    "  PATHMAN_CMD=pathman",
    'elif [ -x "$HOME/.local/pathman/bin/pathman" ]; then',
    '  PATHMAN_CMD="$HOME/.local/pathman/bin/pathman"',
    "fi",
    "",
    'if [ -n "$PATHMAN_CMD" ]; then',
    "  # Calculate a new $PATH from the old one and pathman's configuration.",
    '  NEW_PATH=$("$PATHMAN_CMD" path 2>/dev/null)',
    '  if [ $? -eq 0 ] && [ -n "$NEW_PATH" ]; then',
    '    export PATH="$NEW_PATH"',
    '  elif [ -n "$PS1" ]; then',
    '    echo "Warning: pathman failed to update PATH" >&2',
    "  fi",
    'elif [ -n "$PS1" ]; then',
    '  echo "Warning: pathman not found, PATH not updated" >&2',
    "fi",
)


def get_shell_integration_script() -> str:
    """Return the shell integration snippet as a single string."""
    return "\n".join(SHELL_INTEGRATION_LINES) + "\n"


def profile_has_pathman_export(profile_path: Path) -> bool:
    """Check if a profile already exports a PATH computed by pathman.

    Recognises both a one-line ``export PATH=$(pathman path)`` and the
    integration snippet.

    Raises:
        OSError: If the profile exists but cannot be read.
    """
    try:
        content = profile_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return False

    if '"$PATHMAN_CMD" path' in content:
        return True
    return any(
        "export" in line and "PATH" in line and "pathman path" in line
        for line in content.splitlines()
    )


def add_to_profile(profile_path: Path, now: datetime | None = None) -> bool:
    """Append the shell integration snippet to a profile.

    Args:
        profile_path: Profile file to edit (created if missing).
        now: Timestamp for the marker comment, defaults to the current time.

    Returns:
        False if the profile already had a pathman export, True if appended.

    Raises:
        OSError: If the profile cannot be read or written.
    """
    if profile_has_pathman_export(profile_path):
        logger.debug("PATH export already present in %s", profile_path)
        return False

    stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    existing = profile_path.read_text(encoding="utf-8") if profile_path.exists() else ""

    parts: list[str] = []
    if existing and not existing.endswith("\n"):
        parts.append("\n")
    parts.append(f"\n# Added by 'pathman init' on {stamp}\n")
    parts.append(get_shell_integration_script())

    with profile_path.open("a", encoding="utf-8") as f:
        f.write("".join(parts))
    return True
