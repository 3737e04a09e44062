from __future__ import annotations

"""
Unit tests for the Directory Scanning Service.

Verifies that a root walk feeds the accumulator with normalized keys,
echoes every visited path, and leaves partial totals in place when the
walk fails midway.
"""

import os
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from bloat.core.services.accumulator import BloatAccumulator
from bloat.core.services.scanner import scan_root
from bloat.domain.errors import PathResolutionError, TraversalError
from bloat.domain.models import ScanStats, WalkEntry


def test_scan_root_relative_totals(sample_tree: Path) -> None:
    """Reference scenario: {'.': 150, 'b': 100, 'c': 50}."""
    acc = BloatAccumulator(absolute_mode=False)

    stats = scan_root(acc, str(sample_tree))

    assert {k: r.total_bytes for k, r in acc.directory_map.items()} == {".": 150, "b": 100, "c": 50}
    assert stats.files_counted == 2
    assert stats.bytes_counted == 150


def test_scan_root_echoes_every_visited_path(sample_tree: Path) -> None:
    visited: List[str] = []
    acc = BloatAccumulator(absolute_mode=False)

    stats = scan_root(acc, str(sample_tree), progress=visited.append)

    expected = {
        str(sample_tree),
        str(sample_tree / "b"),
        str(sample_tree / "b" / "file1"),
        str(sample_tree / "c"),
        str(sample_tree / "c" / "file2"),
    }
    assert set(visited) == expected
    assert stats.entries_visited == len(expected)


def test_scan_root_directories_carry_no_size(deep_tree: Path) -> None:
    acc = BloatAccumulator(absolute_mode=False)
    scan_root(acc, str(deep_tree))

    assert acc.total_for(".") == 10 + 200 + 300 + 40
    assert acc.total_for("src") == 500
    assert acc.total_for(os.path.join("src", "pkg")) == 300
    assert acc.total_for("docs") == 40
    # A directory without files never receives a contribution
    assert os.path.join("src", "pkg", "empty") not in acc


def test_relative_and_absolute_modes_agree(deep_tree: Path) -> None:
    rel = BloatAccumulator(absolute_mode=False)
    scan_root(rel, str(deep_tree))

    absolute = BloatAccumulator(absolute_mode=True)
    scan_root(absolute, str(deep_tree))

    base = os.path.abspath(str(deep_tree))
    for key, record in rel.directory_map.items():
        abs_key = os.path.normpath(os.path.join(base, key))
        assert absolute.total_for(abs_key) == record.total_bytes


def test_scan_root_keeps_partial_totals_on_traversal_error(sample_tree: Path) -> None:
    root = str(sample_tree)

    def broken_walk(_root: str):
        yield WalkEntry(path=root, size=0, is_dir=True)
        yield WalkEntry(path=os.path.join(root, "b", "file1"), size=100, is_dir=False)
        raise TraversalError(root, os.path.join(root, "c"), "Permission denied")

    acc = BloatAccumulator(absolute_mode=False)
    stats = ScanStats()

    with patch("bloat.core.services.scanner.walk_entries", broken_walk):
        with pytest.raises(TraversalError):
            scan_root(acc, root, stats=stats)

    assert acc.total_for("b") == 100
    assert acc.total_for(".") == 100
    assert stats.files_counted == 1


def test_scan_root_propagates_path_resolution_error(sample_tree: Path) -> None:
    acc = BloatAccumulator(absolute_mode=False)

    with patch(
        "bloat.core.services.normalizer.PathNormalizer.normalize",
        side_effect=PathResolutionError("x", "boom"),
    ):
        with pytest.raises(PathResolutionError):
            scan_root(acc, str(sample_tree))

    assert len(acc) == 0
