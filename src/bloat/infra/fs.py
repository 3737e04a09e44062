from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the directory walk that feeds the scanner, plus cross-platform
path helpers for the application data directory. Acts as an abstraction
over the 'os' module so the core never touches the filesystem directly.
"""

import os
import stat
from typing import Iterator, Optional

from bloat.domain.errors import TraversalError
from bloat.domain.models import WalkEntry

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Bloat"
UNIX_APP_DIR_NAME = ".bloat"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/Bloat
    - Linux/Mac: ~/.bloat

    The directory is not created here; writers create it on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# TRAVERSAL API
# -----------------------------------------------------------------------------

def walk_entries(root: str) -> Iterator[WalkEntry]:
    """
    Visit the root and every entry nested beneath it.

    Directories are yielded with a size of 0 for progress reporting only.
    Every other entry (regular files, symlinks, special files) carries its
    lstat size. Symbolic links are never followed. Names are visited in
    sorted order within each directory.

    The first failure ends the walk: entries already yielded stay yielded
    and a TraversalError is raised for the offending path.

    Args:
        root: Directory to walk, as given on the command line.

    Yields:
        WalkEntry: One record per visited entry. Paths are prefixed by root.

    Raises:
        TraversalError: When a directory cannot be listed or an entry
                        cannot be stat'ed.
    """
    st = _lstat(root, root)
    if not stat.S_ISDIR(st.st_mode):
        yield WalkEntry(path=root, size=st.st_size, is_dir=False)
        return

    def _on_error(err: OSError) -> None:
        raise TraversalError(root, err.filename or root, err.strerror or str(err))

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_on_error):
        yield WalkEntry(path=dirpath, size=0, is_dir=True)

        # os.walk reports links to directories as directories; they are sized as links
        linked = [d for d in dirnames if os.path.islink(os.path.join(dirpath, d))]
        dirnames[:] = sorted(d for d in dirnames if d not in linked)

        for name in sorted(filenames + linked):
            file_path = os.path.join(dirpath, name)
            yield WalkEntry(path=file_path, size=_lstat(root, file_path).st_size, is_dir=False)


def _lstat(root: str, path: str) -> os.stat_result:
    try:
        return os.lstat(path)
    except OSError as e:
        raise TraversalError(root, path, e.strerror or str(e)) from e
