from __future__ import annotations

"""
Report Rendering Service.

Turns the ranked snapshot into the text lines or the JSON payload printed
by the CLI.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Sequence

import humanize

from bloat.domain.models import DirectoryRecord, ScanSummary

SIZE_COLUMN_WIDTH = 6


def format_size(nbytes: int) -> str:
    """Render a byte count in compact form: 150B, 1.5K, 2.0M."""
    return humanize.naturalsize(nbytes, gnu=True)


def _limit(directories: Sequence[DirectoryRecord], top: int) -> Sequence[DirectoryRecord]:
    return directories[:top] if top and top > 0 else directories


def render_report_lines(directories: Sequence[DirectoryRecord], top: int = 0) -> List[str]:
    """
    Build one ``<size> <path>`` line per directory, in the given order.

    Args:
        directories: Ranked records, most bloated first.
        top: Keep only the first ``top`` records; 0 keeps all.

    Returns:
        List[str]: Report lines without trailing newlines.
    """
    return [
        f"{format_size(record.total_bytes):>{SIZE_COLUMN_WIDTH}} {record.path}"
        for record in _limit(directories, top)
    ]


def summary_to_dict(summary: ScanSummary, top: int = 0) -> Dict[str, Any]:
    """
    Build the JSON-serializable form of a run summary.

    Every directory entry carries both the raw byte count and its
    human-readable rendering.
    """
    payload = asdict(summary)
    payload["directories"] = [
        {
            "path": record.path,
            "total_bytes": record.total_bytes,
            "size": format_size(record.total_bytes),
        }
        for record in _limit(summary.directories, top)
    ]
    return payload
