"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from testable_sys.filepath import FakeFilePath, RealFilePath
from testable_sys.filesystem import FakeFileSystem, RealFileSystem


@pytest.fixture
def real_fs() -> RealFileSystem:
    """Create a filesystem bound to the host."""
    return RealFileSystem()


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Create an empty in-memory filesystem."""
    return FakeFileSystem()


@pytest.fixture
def real_fp() -> RealFilePath:
    """Create a tree walker bound to the host."""
    return RealFilePath()


@pytest.fixture
def fake_fp() -> FakeFilePath:
    """Create a fake tree walker."""
    return FakeFilePath()


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree on disk.

    Layout::

        root/
            b.txt
            a/
                x.txt
                deep/
                    y.txt
            c/
    """
    root = tmp_path / "root"
    (root / "a" / "deep").mkdir(parents=True)
    (root / "c").mkdir()
    (root / "b.txt").write_text("b")
    (root / "a" / "x.txt").write_text("x")
    (root / "a" / "deep" / "y.txt").write_text("y")
    return root
