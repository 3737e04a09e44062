from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used by scanner, engine and CLI tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def write_bytes(path: Path, size: int) -> Path:
    """Create ``path`` (and its parents) holding exactly ``size`` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference tree used across the suite.

    Structure:
    /a
      /b
        file1   (100 bytes)
      /c
        file2   (50 bytes)
    """
    root = tmp_path / "a"
    write_bytes(root / "b" / "file1", 100)
    write_bytes(root / "c" / "file2", 50)
    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """
    Create a tree with nesting and files at several levels.

    Structure:
    /proj
      README          (10 bytes)
      /src
        main.py       (200 bytes)
        /pkg
          mod.py      (300 bytes)
          /empty
      /docs
        guide.md      (40 bytes)
    """
    root = tmp_path / "proj"
    write_bytes(root / "README", 10)
    write_bytes(root / "src" / "main.py", 200)
    write_bytes(root / "src" / "pkg" / "mod.py", 300)
    (root / "src" / "pkg" / "empty").mkdir()
    write_bytes(root / "docs" / "guide.md", 40)
    return root


@pytest.fixture
def make_file():
    """Expose ``write_bytes`` to tests that build their own layouts."""
    return write_bytes
