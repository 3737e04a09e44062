from __future__ import annotations

"""
Core scan orchestration.

Coordinates a complete run:
1. Fixes the key mode from the number of roots.
2. Scans every root in order into one shared accumulator.
3. Abandons a root on a traversal error and carries on with the next one.
4. Aborts the run on a path resolution error.
5. Ranks the accumulated directories once.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence

from bloat.core.services.accumulator import BloatAccumulator
from bloat.core.services.normalizer import is_absolute_mode
from bloat.core.services.scanner import ProgressCb, scan_root
from bloat.domain.errors import PathResolutionError, TraversalError
from bloat.domain.models import (
    ScanStats,
    ScanSummary,
    create_error_summary,
    create_success_summary,
)

logger = logging.getLogger(__name__)

RootErrorCb = Callable[[str, TraversalError], None]


def run_scan(
        roots: Sequence[str],
        *,
        progress: Optional[ProgressCb] = None,
        on_root_error: Optional[RootErrorCb] = None,
) -> ScanSummary:
    """
    Scan every root and rank the directories found.

    Overlapping or repeated roots are scanned as given; files under the
    overlap are counted once per root.

    Args:
        roots: Root directories in scan order. One root selects relative
               keys, several select absolute keys.
        progress: Receives every visited path.
        on_root_error: Receives the root and error of every abandoned root.

    Returns:
        ScanSummary: Ranked result, or an error summary when a path could
                     not be resolved.
    """
    roots = list(roots)
    absolute_mode = is_absolute_mode(roots)
    accumulator = BloatAccumulator(absolute_mode)

    all_stats: List[ScanStats] = []
    failed_roots: Dict[str, str] = {}

    logger.info(f"Scanning {len(roots)} root(s), absolute_mode={absolute_mode}")

    for root in roots:
        stats = ScanStats()
        all_stats.append(stats)
        try:
            scan_root(accumulator, root, progress=progress, stats=stats)
        except TraversalError as e:
            failed_roots[root] = e.report_detail
            logger.info(f"Abandoned root '{root}': {e}")
            if on_root_error:
                on_root_error(root, e)
        except PathResolutionError as e:
            msg = f"can't process {e.path}: {e.detail}"
            logger.info(msg)
            return create_error_summary(msg, roots, absolute_mode, failed_roots)

    directories = accumulator.sort()
    return create_success_summary(roots, absolute_mode, directories, all_stats, failed_roots)
