from __future__ import annotations

"""
Scan Domain Data Models.

Defines the records accumulated during a scan and the result object handed
from the application layer to the CLI view.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass
class DirectoryRecord:
    """
    Accumulated bloat of a single directory.

    Attributes:
        path: Directory key (root-relative or absolute, depending on mode).
        total_bytes: Size of every file nested anywhere beneath the directory.
    """
    path: str
    total_bytes: int = 0


@dataclass(frozen=True)
class WalkEntry:
    """One entry visited by the traversal primitive."""
    path: str
    size: int
    is_dir: bool


@dataclass
class ScanStats:
    """Counters collected while scanning a single root."""
    entries_visited: int = 0
    files_counted: int = 0
    bytes_counted: int = 0


@dataclass(frozen=True)
class ScanSummary:
    """
    Unified result of one invocation.

    Attributes:
        ok: False only when the run was aborted by a fatal error.
        error: Description of the fatal error, empty otherwise.
        roots: Root arguments in the order they were scanned.
        absolute_mode: Whether keys are absolute paths.
        directories: Ranked records, most bloated first.
        failed_roots: Root -> detail for every abandoned root.
        files_scanned: Number of sized entries fed to the accumulator.
        bytes_scanned: Sum of their sizes.
    """
    ok: bool
    error: str

    roots: List[str]
    absolute_mode: bool

    directories: List[DirectoryRecord] = field(default_factory=list)
    failed_roots: Dict[str, str] = field(default_factory=dict)

    files_scanned: int = 0
    bytes_scanned: int = 0

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_summary(
        roots: List[str],
        absolute_mode: bool,
        directories: List[DirectoryRecord],
        stats: List[ScanStats],
        failed_roots: Optional[Dict[str, str]] = None,
) -> ScanSummary:
    """
    Create the summary of a run that reached the ranking step.

    Args:
        roots: Scanned roots.
        absolute_mode: Key mode of the run.
        directories: Ordered snapshot produced by the accumulator.
        stats: Per-root counters, including partial counts of failed roots.
        failed_roots: Roots abandoned because of a traversal error.
    """
    return ScanSummary(
        ok=True,
        error="",
        roots=list(roots),
        absolute_mode=absolute_mode,
        directories=list(directories),
        failed_roots=dict(failed_roots or {}),
        files_scanned=sum(s.files_counted for s in stats),
        bytes_scanned=sum(s.bytes_counted for s in stats),
    )


def create_error_summary(
        error: str,
        roots: List[str],
        absolute_mode: bool,
        failed_roots: Optional[Dict[str, str]] = None,
) -> ScanSummary:
    """Create the summary of a run aborted by a fatal error."""
    return ScanSummary(
        ok=False,
        error=error,
        roots=list(roots),
        absolute_mode=absolute_mode,
        failed_roots=dict(failed_roots or {}),
    )
