from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates the directory walk against a real temporary tree, including
symlink handling and failure reporting, plus the user data directory
and path normalization helpers.
"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from bloat.domain.errors import TraversalError
from bloat.infra.fs import get_user_data_dir, normalize_path, walk_entries

# -----------------------------------------------------------------------------
# WALK TESTS
# -----------------------------------------------------------------------------

def test_walk_reports_directories_without_size(sample_tree: Path) -> None:
    entries = {e.path: e for e in walk_entries(str(sample_tree))}

    assert entries[str(sample_tree)].is_dir
    assert entries[str(sample_tree / "b")].size == 0
    assert entries[str(sample_tree / "b" / "file1")].size == 100
    assert entries[str(sample_tree / "c" / "file2")].size == 50
    assert not entries[str(sample_tree / "c" / "file2")].is_dir


def test_walk_visits_root_first_and_in_sorted_order(tmp_path: Path, make_file) -> None:
    make_file(tmp_path / "r" / "z.txt", 1)
    make_file(tmp_path / "r" / "a.txt", 1)

    paths = [e.path for e in walk_entries(str(tmp_path / "r"))]

    assert paths == [
        str(tmp_path / "r"),
        str(tmp_path / "r" / "a.txt"),
        str(tmp_path / "r" / "z.txt"),
    ]


def test_walk_of_plain_file_root_yields_the_file(tmp_path: Path, make_file) -> None:
    target = make_file(tmp_path / "single.bin", 33)

    entries = list(walk_entries(str(target)))

    assert len(entries) == 1
    assert entries[0].size == 33
    assert entries[0].is_dir is False


def test_walk_missing_root_raises(tmp_path: Path) -> None:
    missing = str(tmp_path / "nope")
    with pytest.raises(TraversalError) as excinfo:
        list(walk_entries(missing))

    assert excinfo.value.root == missing
    assert excinfo.value.path == missing
    assert excinfo.value.report_detail == excinfo.value.detail


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_walk_does_not_follow_directory_symlinks(tmp_path: Path, make_file) -> None:
    make_file(tmp_path / "target" / "big", 1000)
    root = tmp_path / "root"
    root.mkdir()
    link = root / "link"
    os.symlink(str(tmp_path / "target"), str(link))

    entries = {e.path: e for e in walk_entries(str(root))}

    assert str(link / "big") not in entries
    assert entries[str(link)].is_dir is False
    assert entries[str(link)].size == os.lstat(str(link)).st_size


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions only")
@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores permissions")
def test_walk_unreadable_directory_raises(tmp_path: Path, make_file) -> None:
    make_file(tmp_path / "root" / "locked" / "secret", 5)
    locked = tmp_path / "root" / "locked"
    locked.chmod(0o000)
    try:
        with pytest.raises(TraversalError) as excinfo:
            list(walk_entries(str(tmp_path / "root")))
    finally:
        locked.chmod(0o755)

    assert excinfo.value.path == str(locked)


def test_walk_stat_failure_raises(sample_tree: Path) -> None:
    with patch("bloat.infra.fs.os.lstat", side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(TraversalError, match="Permission denied"):
            list(walk_entries(str(sample_tree)))

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            path = get_user_data_dir()
            assert "Bloat" in path


def test_get_user_data_dir_unix() -> None:
    """Verify resolution of ~/.bloat on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            path = get_user_data_dir()
            assert path.replace("\\", "/").endswith("/home/testuser/.bloat")


def test_normalize_path_expansion() -> None:
    """Verify expansion of environment variables and user shortcuts."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

        with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
            path = normalize_path("~/code", fallback=".")
            assert "code" in Path(path).parts


def test_normalize_path_blank_uses_fallback(tmp_path: Path) -> None:
    assert normalize_path("   ", fallback=str(tmp_path)) == os.path.abspath(str(tmp_path))
