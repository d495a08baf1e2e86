"""Dependency container for system access.

This module separates object creation from object use. Application code
receives a SysContext and calls ``ctx.filesystem`` / ``ctx.filepath`` without
knowing whether they touch the disk.

Dependencies are typed using Protocols rather than concrete implementations,
so tests can inject the in-memory fakes (or any other double) without
inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from testable_sys.protocols import FilePath, FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from testable_sys.filesystem import RealFileSystem
    return RealFileSystem.create_default()


def _default_filepath() -> FilePath:
    """Create the default tree walker implementation."""
    from testable_sys.filepath import RealFilePath
    return RealFilePath.create_default()


@dataclass
class SysContext:
    """Container for system dependencies.

    Provides a single injection point for filesystem and tree-walking access.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    filepath: FilePath = field(default_factory=_default_filepath)


def create_context() -> SysContext:
    """Factory for production dependencies bound to the host.

    Returns:
        SysContext wired to RealFileSystem and RealFilePath.
    """
    return SysContext()


def create_fake_context(files: dict[str, bytes] | None = None) -> SysContext:
    """Factory for in-memory dependencies. Use this in tests.

    The fake walker owns the fake filesystem, so both seams see the same files.

    Args:
        files: Optional initial file contents.

    Returns:
        SysContext wired to FakeFileSystem and FakeFilePath.
    """
    from testable_sys.filepath import FakeFilePath
    from testable_sys.filesystem import FakeFileSystem

    filepath = FakeFilePath(fs=FakeFileSystem(files))
    return SysContext(filesystem=filepath.fs, filepath=filepath)
