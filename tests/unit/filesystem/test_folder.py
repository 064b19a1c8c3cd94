"""Unit tests for managed folder listing."""

from pathlib import Path

import pytest
from pathman.filesystem.errors import FolderUnavailableError
from pathman.filesystem.folder import (
    find_link,
    list_executables,
    list_links,
    list_links_both,
)
from pathman.models.managed import Priority


def _make_exec(path: Path) -> Path:
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)
    return path


class TestListLinks:
    """Tests for list_links."""

    def test_lists_symlinks_sorted(self, tmp_path: Path) -> None:
        """Symlinks are listed by name with their stored target."""
        target = _make_exec(tmp_path / "tool")
        folder = tmp_path / "front"
        folder.mkdir()
        (folder / "zz").symlink_to(target)
        (folder / "aa").symlink_to("/does/not/exist")

        links = list_links(folder, Priority.FRONT)

        assert [link.name for link in links] == ["aa", "zz"]
        assert links[0].target == "/does/not/exist"
        assert links[1].target == str(target)
        assert all(link.priority == Priority.FRONT for link in links)

    def test_ignores_regular_files(self, tmp_path: Path) -> None:
        """Non-symlink entries are ignored."""
        (tmp_path / "notes.txt").write_text("")
        assert list_links(tmp_path, Priority.BACK) == []

    def test_missing_folder(self, tmp_path: Path) -> None:
        """A missing folder raises FolderUnavailableError."""
        with pytest.raises(FolderUnavailableError, match="does not exist"):
            list_links(tmp_path / "missing", Priority.FRONT)

    def test_file_instead_of_folder(self, tmp_path: Path) -> None:
        """A file in place of the folder is reported as not a directory."""
        path = tmp_path / "front"
        path.write_text("")
        with pytest.raises(FolderUnavailableError, match="not a directory"):
            list_links(path, Priority.FRONT)


class TestListLinksBoth:
    """Tests for list_links_both."""

    def test_front_then_back(self, tmp_path: Path) -> None:
        """Front links come first; a missing folder contributes nothing."""
        front = tmp_path / "front"
        front.mkdir()
        (front / "b").symlink_to("/x")
        (front / "a").symlink_to("/y")

        links = list_links_both(front, tmp_path / "back")

        assert [(link.name, link.priority) for link in links] == [
            ("a", Priority.FRONT),
            ("b", Priority.FRONT),
        ]


class TestFindLink:
    """Tests for find_link."""

    def test_front_searched_first(self, tmp_path: Path) -> None:
        """A name in both folders is found in front."""
        front, back = tmp_path / "front", tmp_path / "back"
        front.mkdir()
        back.mkdir()
        (front / "x").symlink_to("/a")
        (back / "x").symlink_to("/b")

        assert find_link("x", front, back) == (front / "x", Priority.FRONT)

    def test_dangling_link_found(self, tmp_path: Path) -> None:
        """Dangling symlinks are still found."""
        front, back = tmp_path / "front", tmp_path / "back"
        back.mkdir()
        (back / "x").symlink_to("/gone")

        assert find_link("x", front, back) == (back / "x", Priority.BACK)

    def test_not_found(self, tmp_path: Path) -> None:
        """Unknown names return None."""
        assert find_link("x", tmp_path / "front", tmp_path / "back") is None


class TestListExecutables:
    """Tests for list_executables."""

    def test_only_executable_files(self, tmp_path: Path) -> None:
        """Plain files without the exec bit and subdirectories are skipped."""
        _make_exec(tmp_path / "cargo")
        (tmp_path / "README").write_text("")
        (tmp_path / "sub").mkdir()

        assert list_executables(str(tmp_path)) == ["cargo"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory yields an empty list."""
        assert list_executables(str(tmp_path / "missing")) == []
