from __future__ import annotations

"""
Directory Scanning Service.

Drives the filesystem walk of one root: echoes every visited path,
normalizes each sized entry and charges it to the accumulator.
"""

import logging
from typing import Callable, Optional

from bloat.core.services.accumulator import BloatAccumulator
from bloat.core.services.normalizer import PathNormalizer
from bloat.domain.models import ScanStats
from bloat.infra.fs import walk_entries

logger = logging.getLogger(__name__)

ProgressCb = Callable[[str], None]


def scan_root(
        accumulator: BloatAccumulator,
        root: str,
        progress: Optional[ProgressCb] = None,
        stats: Optional[ScanStats] = None,
) -> ScanStats:
    """
    Walk ``root`` and charge every file found to the accumulator.

    Errors are not handled here. A TraversalError leaves whatever was
    accumulated so far in place and propagates so the caller can abandon
    this root; a PathResolutionError propagates as a fatal condition.

    Args:
        accumulator: Shared accumulator of the run; its mode selects the
                     key form.
        root: Directory to scan, as given by the user.
        progress: Called with every visited path before it is processed.
        stats: Counter object to update in place. Passing one in lets the
               caller keep partial counts of a root that fails mid-walk.

    Returns:
        ScanStats: Counters for this root.

    Raises:
        TraversalError: When the walk cannot continue.
        PathResolutionError: When a visited path cannot be normalized.
    """
    stats = stats if stats is not None else ScanStats()
    normalizer = PathNormalizer(root, accumulator.absolute_mode)

    logger.debug(f"Scanning root '{root}' (absolute_mode={accumulator.absolute_mode})")

    for entry in walk_entries(root):
        stats.entries_visited += 1
        if progress:
            progress(entry.path)

        if entry.is_dir:
            continue

        key = normalizer.normalize(entry.path)
        accumulator.add_file(key, entry.size)
        stats.files_counted += 1
        stats.bytes_counted += entry.size

    logger.debug(
        f"Finished '{root}': {stats.files_counted} files, {stats.bytes_counted} bytes"
    )
    return stats
