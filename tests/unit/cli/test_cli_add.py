"""Unit tests for the add command."""

import json
import os

import pytest
from conftest import PathmanEnv
from pathman.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestAddFile:
    """Tests for pathman add with an executable file."""

    def test_add_to_front(self, initialized_env: PathmanEnv) -> None:
        """A symlink is created in the front folder."""
        tool = initialized_env.make_executable(initialized_env.home.parent / "opt", "tool")

        result = runner.invoke(app, ["add", str(tool)])

        assert result.exit_code == 0
        assert "Added 'tool'" in result.stdout
        assert os.readlink(initialized_env.front / "tool") == str(tool)

    def test_add_to_back_with_name(self, initialized_env: PathmanEnv) -> None:
        """--priority back and --name are honoured."""
        tool = initialized_env.make_executable(initialized_env.home.parent / "opt", "tool")

        result = runner.invoke(app, ["add", str(tool), "--priority", "back", "--name", "t"])

        assert result.exit_code == 0
        assert (initialized_env.back / "t").is_symlink()

    def test_existing_requires_force(self, initialized_env: PathmanEnv) -> None:
        """Adding the same name twice needs --force."""
        tool = initialized_env.make_executable(initialized_env.home.parent / "opt", "tool")
        runner.invoke(app, ["add", str(tool)])

        result = runner.invoke(app, ["add", str(tool)])
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = runner.invoke(app, ["add", str(tool), "--force"])
        assert result.exit_code == 0

    def test_masking_refused(
        self, initialized_env: PathmanEnv, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A link that would mask a system executable is refused."""
        tool = initialized_env.make_executable(initialized_env.home.parent / "opt", "tool")
        initialized_env.make_executable(initialized_env.system_bin, "tool")
        monkeypatch.setenv(
            "PATH", os.pathsep.join([str(initialized_env.front), str(initialized_env.system_bin)])
        )

        result = runner.invoke(app, ["add", str(tool)])

        assert result.exit_code == 1
        assert "will mask" in result.output
        assert not (initialized_env.front / "tool").exists()

    def test_folder_not_on_path_warns(self, initialized_env: PathmanEnv) -> None:
        """A same-named executable is only a warning when the folder is not on PATH."""
        tool = initialized_env.make_executable(initialized_env.home.parent / "opt", "tool")
        initialized_env.make_executable(initialized_env.system_bin, "tool")

        result = runner.invoke(app, ["add", str(tool)])

        assert result.exit_code == 0
        assert "Warning" in result.output
        assert (initialized_env.front / "tool").is_symlink()

    def test_missing_path(self, initialized_env: PathmanEnv) -> None:
        """A nonexistent path is an error."""
        result = runner.invoke(app, ["add", str(initialized_env.home / "nope")])

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_not_initialized(self, pathman_env: PathmanEnv) -> None:
        """Adding before init reports the missing folder."""
        tool = pathman_env.make_executable(pathman_env.home.parent / "opt", "tool")

        result = runner.invoke(app, ["add", str(tool)])

        assert result.exit_code == 1
        assert "Folder unavailable" in result.output


class TestAddDirectory:
    """Tests for pathman add with a directory."""

    def _load(self, env: PathmanEnv) -> list[dict[str, str]]:
        return json.loads(env.config_path.read_text())["managed_directories"]

    def test_add_directory(self, pathman_env: PathmanEnv) -> None:
        """A directory is recorded in the config."""
        cargo = pathman_env.home.parent / "cargo"
        cargo.mkdir()

        result = runner.invoke(app, ["add", str(cargo)])

        assert result.exit_code == 0
        assert "Added directory" in result.stdout
        assert self._load(pathman_env) == [{"path": str(cargo), "priority": "front"}]

    def test_update_priority_in_place(self, pathman_env: PathmanEnv) -> None:
        """Adding again with another priority updates the same entry."""
        first = pathman_env.home.parent / "first"
        second = pathman_env.home.parent / "second"
        first.mkdir()
        second.mkdir()
        runner.invoke(app, ["add", str(first)])
        runner.invoke(app, ["add", str(second)])

        result = runner.invoke(app, ["add", str(first), "-p", "back"])

        assert result.exit_code == 0
        assert "Updated directory priority" in result.stdout
        assert self._load(pathman_env) == [
            {"path": str(first), "priority": "back"},
            {"path": str(second), "priority": "front"},
        ]

    def test_already_managed(self, pathman_env: PathmanEnv) -> None:
        """Re-adding with the same priority changes nothing."""
        cargo = pathman_env.home.parent / "cargo"
        cargo.mkdir()
        runner.invoke(app, ["add", str(cargo)])

        result = runner.invoke(app, ["add", str(cargo)])

        assert result.exit_code == 0
        assert "already managed" in result.stdout
