from __future__ import annotations

"""
Domain Exceptions.

Failure taxonomy of a scan. A TraversalError costs only the root being
walked; a PathResolutionError ends the whole run.
"""


class BloatError(Exception):
    """Base class for every error raised by the scan domain."""


class TraversalError(BloatError):
    """
    A filesystem entry under a root could not be listed or stat'ed.

    Attributes:
        root: The root argument whose scan is abandoned.
        path: The entry that failed.
        detail: Human readable cause (usually the OSError text).
    """

    def __init__(self, root: str, path: str, detail: str):
        super().__init__(f"{path}: {detail}")
        self.root = root
        self.path = path
        self.detail = detail

    @property
    def report_detail(self) -> str:
        """Detail as shown next to the root: the failing path is omitted when it is the root."""
        return self.detail if self.path == self.root else f"{self.path}: {self.detail}"


class PathResolutionError(BloatError):
    """
    A visited path could not be turned into a directory key.

    Attributes:
        path: The visited path.
        detail: Human readable cause.
    """

    def __init__(self, path: str, detail: str):
        super().__init__(f"{path}: {detail}")
        self.path = path
        self.detail = detail
