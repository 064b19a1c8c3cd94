"""Unit tests for the init command."""

import os
import stat
from pathlib import Path

import pytest
from conftest import PathmanEnv
from pathman.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestInit:
    """Tests for pathman init."""

    def test_creates_folders(
        self, pathman_env: PathmanEnv, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Base, front and back folders are created with mode 0755."""
        monkeypatch.setenv("SHELL", "/bin/zsh")

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        for folder in (pathman_env.home, pathman_env.front, pathman_env.back):
            assert folder.is_dir()
        assert stat.S_IMODE(pathman_env.front.stat().st_mode) & 0o022 == 0

    def test_non_bash_prints_snippet(
        self, pathman_env: PathmanEnv, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Other shells get the snippet to paste."""
        monkeypatch.setenv("SHELL", "/usr/bin/fish")

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert '"$PATHMAN_CMD" path' in result.stdout

    def test_bash_updates_profile(
        self, pathman_env: PathmanEnv, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Bash users get the snippet appended to ~/.profile once."""
        home = tmp_path / "home"
        home.mkdir()
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.setenv("SHELL", "/bin/bash")

        first = runner.invoke(app, ["init", "--yes"])
        second = runner.invoke(app, ["init", "--yes"])

        assert first.exit_code == 0
        assert second.exit_code == 0
        content = (home / ".profile").read_text()
        assert content.count("# Added by 'pathman init'") == 1

    def test_bash_declined(
        self, pathman_env: PathmanEnv, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Declining leaves the profile alone."""
        home = tmp_path / "home"
        home.mkdir()
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.setenv("SHELL", "/bin/bash")

        result = runner.invoke(app, ["init"], input="n\n")

        assert result.exit_code == 0
        assert not (home / ".profile").exists()

    def test_already_on_path(
        self, pathman_env: PathmanEnv, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Nothing else happens when both folders are on PATH."""
        monkeypatch.setenv("PATH", os.pathsep.join([str(pathman_env.front), str(pathman_env.back)]))

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert "already on your PATH" in result.stdout
