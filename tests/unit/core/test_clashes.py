"""Unit tests for clash detection.

Masking checks run against an in-memory directory listing so no real
filesystem is involved, plus one check against tmp_path.
"""

from pathlib import Path

from pathman.core.clashes import (
    check_masking,
    collect_managed_executables,
    file_exists_in,
    find_masking_clashes,
    find_name_clashes,
)
from pathman.models.clash import ClashKind
from pathman.models.managed import ManagedExecutable, ManagedLink, Priority


def _fake_fs(listing: dict[str, set[str]]):
    """Build a file_exists predicate from a directory -> names mapping."""

    def exists(directory: str, name: str) -> bool:
        return name in listing.get(directory, set())

    return exists


class TestFindNameClashes:
    """Tests for find_name_clashes."""

    def test_common_names(self) -> None:
        """Only names present in both folders are reported."""
        assert find_name_clashes({"foo", "bar"}, {"bar", "baz"}) == ["bar"]

    def test_sorted(self) -> None:
        """Results are sorted alphabetically."""
        assert find_name_clashes(["z", "a", "m"], ["m", "z", "a"]) == ["a", "m", "z"]

    def test_no_clashes(self) -> None:
        """Disjoint sets produce no clashes."""
        assert find_name_clashes(["a"], ["b"]) == []


class TestCollectManagedExecutables:
    """Tests for collect_managed_executables."""

    def test_links_hosted_by_priority_folder(self) -> None:
        """Each link is hosted by the folder matching its priority."""
        links = [
            ManagedLink(name="foo", target="/opt/foo", priority=Priority.FRONT),
            ManagedLink(name="bar", target="/opt/bar", priority=Priority.BACK),
        ]
        result = collect_managed_executables(links, "/m/front", "/m/back")
        assert result == [
            ManagedExecutable("foo", "/m/front"),
            ManagedExecutable("bar", "/m/back"),
        ]

    def test_directory_contents_follow_links(self) -> None:
        """Directory executables come after links, hosted by their directory."""
        links = [ManagedLink(name="foo", target="/opt/foo", priority=Priority.FRONT)]
        result = collect_managed_executables(
            links, "/m/front", "/m/back", {"/home/u/.cargo/bin": ["cargo", "rustc"]}
        )
        assert result[1:] == [
            ManagedExecutable("cargo", "/home/u/.cargo/bin"),
            ManagedExecutable("rustc", "/home/u/.cargo/bin"),
        ]


class TestFindMaskingClashes:
    """Tests for find_masking_clashes."""

    def test_front_link_masks_later_executable(self) -> None:
        """A front link earlier on PATH masks a same-named executable."""
        fs = _fake_fs({"/usr/bin": {"foo"}, "/mfront": {"foo"}})
        clashes = find_masking_clashes(
            ["/mfront", "/usr/bin", "/mback"],
            [ManagedExecutable("foo", "/mfront")],
            managed_locations={"/mfront", "/mback"},
            file_exists=fs,
        )
        assert len(clashes) == 1
        assert clashes[0].kind == ClashKind.MASKS
        assert clashes[0].describe() == "foo (masks /usr/bin/foo)"

    def test_reversed_order_is_masked(self) -> None:
        """The same link later on PATH is masked."""
        fs = _fake_fs({"/usr/bin": {"foo"}, "/mfront": {"foo"}})
        clashes = find_masking_clashes(
            ["/usr/bin", "/mfront", "/mback"],
            [ManagedExecutable("foo", "/mfront")],
            managed_locations={"/mfront", "/mback"},
            file_exists=fs,
        )
        assert len(clashes) == 1
        assert clashes[0].kind == ClashKind.MASKED
        assert clashes[0].describe() == "foo (masked by /usr/bin/foo)"

    def test_first_unmanaged_hit_wins(self) -> None:
        """Only the first unrelated directory holding the name is reported."""
        fs = _fake_fs({"/a": {"foo"}, "/b": {"foo"}})
        clashes = find_masking_clashes(
            ["/m", "/a", "/b"],
            [ManagedExecutable("foo", "/m")],
            managed_locations={"/m"},
            file_exists=fs,
        )
        assert [c.other_dir for c in clashes] == ["/a"]

    def test_managed_locations_never_clash(self) -> None:
        """Managed locations are skipped when looking for unrelated executables."""
        fs = _fake_fs({"/mback": {"foo"}, "/cargo": {"foo"}})
        clashes = find_masking_clashes(
            ["/mfront", "/cargo", "/mback"],
            [ManagedExecutable("foo", "/mfront")],
            managed_locations={"/mfront", "/mback", "/cargo"},
            file_exists=fs,
        )
        assert clashes == []

    def test_empty_managed_folder_never_clashes(self) -> None:
        """A managed folder hosting nothing is still not an unrelated directory."""
        fs = _fake_fs({"/mback": {"foo"}})
        clashes = find_masking_clashes(
            ["/mfront", "/mback"],
            [ManagedExecutable("foo", "/mfront")],
            managed_locations={"/mfront", "/mback"},
            file_exists=fs,
        )
        assert clashes == []

    def test_host_not_on_path_skipped(self) -> None:
        """Executables whose host is not on PATH produce no report."""
        fs = _fake_fs({"/usr/bin": {"foo"}})
        clashes = find_masking_clashes(
            ["/usr/bin"],
            [ManagedExecutable("foo", "/mfront")],
            managed_locations={"/mfront", "/mback"},
            file_exists=fs,
        )
        assert clashes == []

    def test_report_order_follows_input(self) -> None:
        """Reports come back in the order of the executables."""
        fs = _fake_fs({"/usr/bin": {"a", "b"}})
        clashes = find_masking_clashes(
            ["/m", "/usr/bin"],
            [ManagedExecutable("b", "/m"), ManagedExecutable("a", "/m")],
            managed_locations={"/m"},
            file_exists=fs,
        )
        assert [c.name for c in clashes] == ["b", "a"]

    def test_oserror_treated_as_absent(self) -> None:
        """A directory that cannot be checked does not produce a clash."""

        def broken(directory: str, name: str) -> bool:
            raise PermissionError("denied")

        clashes = find_masking_clashes(
            ["/m", "/locked"],
            [ManagedExecutable("foo", "/m")],
            managed_locations={"/m"},
            file_exists=broken,
        )
        assert clashes == []

    def test_against_real_directories(self, tmp_path: Path) -> None:
        """The default predicate checks the filesystem."""
        front = tmp_path / "front"
        system = tmp_path / "bin"
        front.mkdir()
        system.mkdir()
        (system / "foo").write_text("#!/bin/sh\n")

        clashes = find_masking_clashes(
            [str(front), str(system)],
            [ManagedExecutable("foo", str(front))],
            managed_locations={str(front)},
        )
        assert len(clashes) == 1
        assert clashes[0].other_path == str(system / "foo")


class TestCheckMasking:
    """Tests for check_masking."""

    def test_undetermined_when_host_not_on_path(self) -> None:
        """A hit is undetermined when the host is missing from PATH."""
        fs = _fake_fs({"/usr/bin": {"foo"}})
        report = check_masking("foo", "/mfront", ["/usr/bin"], {"/mfront"}, fs)
        assert report is not None
        assert report.kind == ClashKind.UNDETERMINED

    def test_none_without_hit(self) -> None:
        """No same-named executable means no report."""
        report = check_masking("foo", "/mfront", ["/mfront", "/usr/bin"], {"/mfront"}, _fake_fs({}))
        assert report is None


class TestFileExistsIn:
    """Tests for file_exists_in."""

    def test_dangling_symlink_does_not_count(self, tmp_path: Path) -> None:
        """A dangling symlink is not an existing file."""
        (tmp_path / "foo").symlink_to(tmp_path / "missing")
        assert file_exists_in(str(tmp_path), "foo") is False

    def test_regular_file(self, tmp_path: Path) -> None:
        """A regular file exists."""
        (tmp_path / "foo").write_text("")
        assert file_exists_in(str(tmp_path), "foo") is True
