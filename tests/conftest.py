"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass
class PathmanEnv:
    """Locations used by an isolated pathman installation."""

    home: Path
    front: Path
    back: Path
    config_path: Path
    system_bin: Path

    def make_executable(self, directory: Path, name: str) -> Path:
        """Create an executable shell script in a directory."""
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text("#!/bin/sh\n")
        path.chmod(0o755)
        return path


@pytest.fixture
def pathman_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PathmanEnv:
    """Point pathman at temporary folders and a config under tmp_path.

    PATH holds only an empty system bin directory, so masking checks never
    see the real system.
    """
    home = tmp_path / "links"
    config_home = tmp_path / "config"
    system_bin = tmp_path / "sysbin"
    system_bin.mkdir()

    monkeypatch.setenv("PATHMAN_HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("PATH", str(system_bin))

    return PathmanEnv(
        home=home,
        front=home / "front",
        back=home / "back",
        config_path=config_home / "pathman" / "config.json",
        system_bin=system_bin,
    )


@pytest.fixture
def initialized_env(pathman_env: PathmanEnv) -> PathmanEnv:
    """An isolated installation whose front and back folders exist."""
    pathman_env.front.mkdir(parents=True)
    pathman_env.back.mkdir(parents=True)
    return pathman_env


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping long temporary paths in captured output."""
    from pathman.utils.formatting import console, err_console

    monkeypatch.setattr(console, "width", 200)
    monkeypatch.setattr(err_console, "width", 200)
