from __future__ import annotations

"""
Path Normalization Service.

Decides the string form of directory keys. With a single root every key
is relative to that root, which keeps the report short. With several roots
keys are absolute, since relative keys from different roots would collide
in the shared map.
"""

import os
from typing import Sequence

from bloat.domain.errors import PathResolutionError


def is_absolute_mode(roots: Sequence[str]) -> bool:
    """Return True when the run covers more than one root."""
    return len(roots) > 1


class PathNormalizer:
    """
    Converts visited paths into directory keys for one root.

    Attributes:
        root: The root argument as given on the command line.
        absolute_mode: Key mode shared by every root of the run.
    """

    def __init__(self, root: str, absolute_mode: bool):
        self.root = root
        self.absolute_mode = absolute_mode

    def normalize(self, path: str) -> str:
        """
        Express ``path`` in the key form of the current run.

        Args:
            path: A path produced by walking ``root``.

        Returns:
            str: Absolute path, or path relative to root (root itself is ".").

        Raises:
            PathResolutionError: If the path cannot be resolved, e.g. the
                                 working directory vanished mid-scan or the
                                 path lives on another drive than the root.
        """
        try:
            if self.absolute_mode:
                return os.path.abspath(path)
            return os.path.relpath(path, self.root)
        except (OSError, ValueError) as e:
            raise PathResolutionError(path, str(e)) from e
