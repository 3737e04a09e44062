from __future__ import annotations

"""
Bloat Accumulation Service.

Keeps a running byte total per directory key. Every file's size is pushed
up its whole chain of parent directories, so a directory's total always
equals the sum of everything nested beneath it without ever being computed
from its children.
"""

import logging
import os
from typing import Dict, List

from bloat.domain.models import DirectoryRecord

logger = logging.getLogger(__name__)


def parent_key(key: str) -> str:
    """
    Return the directory containing ``key``.

    Relative keys climb to ``"."``; absolute keys climb to the filesystem
    root (``/`` or a drive root). Both are fixed points: their parent is
    themselves.
    """
    return os.path.dirname(key) or os.curdir


class BloatAccumulator:
    """
    Per-run mapping from directory key to accumulated size.

    Accumulation and ranking are separate steps: ``add_file`` and
    ``add_bloat`` mutate ``directory_map`` while the walk runs, and
    ``sort`` materializes the read-only ranking once the walk is over.

    Attributes:
        absolute_mode: True when keys are absolute paths. Fixed for the
                       lifetime of the instance.
        directory_map: Directory key -> record, created lazily.
        ordered_directories: Ranked snapshot, empty until ``sort`` runs.
    """

    def __init__(self, absolute_mode: bool):
        self._absolute_mode = bool(absolute_mode)
        self.directory_map: Dict[str, DirectoryRecord] = {}
        self.ordered_directories: List[DirectoryRecord] = []

    @property
    def absolute_mode(self) -> bool:
        return self._absolute_mode

    def __len__(self) -> int:
        return len(self.directory_map)

    def __contains__(self, key: object) -> bool:
        return key in self.directory_map

    def total_for(self, key: str) -> int:
        """Return the accumulated bytes of ``key``, 0 if it was never seen."""
        record = self.directory_map.get(key)
        return record.total_bytes if record else 0

    def add_bloat(self, directory_key: str, nbytes: int) -> None:
        """
        Add ``nbytes`` to the total of a single directory.

        Args:
            directory_key: Key of the directory to charge.
            nbytes: Non-negative byte count.
        """
        record = self.directory_map.get(directory_key)
        if record is None:
            self.directory_map[directory_key] = DirectoryRecord(path=directory_key, total_bytes=nbytes)
            return
        record.total_bytes += nbytes

    def add_file(self, file_path: str, nbytes: int) -> None:
        """
        Charge a file's size to its directory and to every ancestor of it.

        The walk stops at the first key whose parent is itself. The file's
        own key is never charged.

        Args:
            file_path: Normalized key of the file.
            nbytes: Size of the file in bytes.
        """
        current = file_path
        while True:
            parent = parent_key(current)
            if parent == current:
                break
            self.add_bloat(parent, nbytes)
            current = parent

    def sort(self) -> List[DirectoryRecord]:
        """
        Rank every known directory, most bloated first.

        Equal totals are ordered by key so that repeated runs over an
        unchanged tree print identical reports.

        Returns:
            List[DirectoryRecord]: The ranked snapshot, also kept in
                                   ``ordered_directories``.
        """
        self.ordered_directories = sorted(
            self.directory_map.values(),
            key=lambda r: (-r.total_bytes, r.path),
        )
        logger.debug(f"Ranked {len(self.ordered_directories)} directories.")
        return self.ordered_directories
