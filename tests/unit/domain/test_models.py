from __future__ import annotations

"""
Unit tests for the scan domain models and their factory functions.
"""

import dataclasses

import pytest

from bloat.domain.errors import BloatError, PathResolutionError, TraversalError
from bloat.domain.models import (
    DirectoryRecord,
    ScanStats,
    create_error_summary,
    create_success_summary,
)


def test_directory_record_is_mutable_in_place():
    record = DirectoryRecord(path="b")
    record.total_bytes += 10
    assert record.total_bytes == 10


def test_success_summary_aggregates_stats():
    stats = [
        ScanStats(entries_visited=3, files_counted=2, bytes_counted=150),
        ScanStats(entries_visited=1, files_counted=1, bytes_counted=10),
    ]
    dirs = [DirectoryRecord(path="/a", total_bytes=160)]

    summary = create_success_summary(["/a", "/x"], True, dirs, stats, {"/x": "denied"})

    assert summary.ok is True
    assert summary.error == ""
    assert summary.files_scanned == 3
    assert summary.bytes_scanned == 160
    assert summary.failed_roots == {"/x": "denied"}
    assert summary.directories == dirs
    assert summary.directories is not dirs


def test_error_summary_has_no_directories():
    summary = create_error_summary("can't process x: boom", ["a"], False)

    assert summary.ok is False
    assert summary.error == "can't process x: boom"
    assert summary.directories == []
    assert summary.failed_roots == {}


def test_summary_is_frozen():
    summary = create_error_summary("boom", ["a"], False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        summary.ok = True  # type: ignore[misc]


def test_error_hierarchy_and_details():
    traversal = TraversalError("/root", "/root/sub", "Permission denied")
    resolution = PathResolutionError("/root/file", "bad path")

    assert isinstance(traversal, BloatError)
    assert isinstance(resolution, BloatError)
    assert str(traversal) == "/root/sub: Permission denied"
    assert traversal.report_detail == "/root/sub: Permission denied"
    assert TraversalError("/root", "/root", "gone").report_detail == "gone"
    assert resolution.path == "/root/file"
