"""Protocol definitions for system abstractions.

This module defines abstract interfaces (Protocols) for filesystem and
file-tree access. Designing to interfaces enables:
- Application code that never names a concrete implementation
- Easy substitution of in-memory fakes in tests
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime
from typing import Protocol, runtime_checkable

StrPath = str | os.PathLike[str]


@runtime_checkable
class FileInfo(Protocol):
    """Protocol for file metadata descriptors returned by stat-like calls."""

    name: str | None
    size: int | None
    mode: int | None
    mod_time: datetime | None

    def is_dir(self) -> bool:
        """Report whether the descriptor describes a directory.

        Returns:
            True for directories, False otherwise.
        """
        ...


@runtime_checkable
class WriteCloser(Protocol):
    """Protocol for writable handles returned by FileSystem.create."""

    def write(self, data: bytes) -> int:
        """Write bytes to the handle.

        Args:
            data: Bytes to write.

        Returns:
            Number of bytes written.
        """
        ...

    def close(self) -> None:
        """Release the handle."""
        ...


# Visitor called once per walked entry as (path, info, error).
WalkFunc = Callable[[str, "FileInfo | None", "OSError | None"], None]


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    Implementations handle reading, writing, and directory operations.
    """

    def read_file(self, path: StrPath) -> bytes:
        """Read the full contents of a file.

        Args:
            path: Path to the file.

        Returns:
            File content as bytes.

        Raises:
            FakeFileNotFound: If the in-memory entry does not exist.
            OSError: If the host cannot read the file.
        """
        ...

    def remove_all(self, path: StrPath) -> None:
        """Remove a file or a directory tree.

        Args:
            path: Path to remove.
        """
        ...

    def create(self, path: StrPath) -> WriteCloser:
        """Create or truncate a file and open it for writing.

        Args:
            path: Path to the file.

        Returns:
            Writable handle bound to the new file.
        """
        ...

    def stat(self, path: StrPath) -> FileInfo:
        """Describe a file or directory.

        Args:
            path: Path to describe.

        Returns:
            Metadata descriptor for the path.

        Raises:
            FileNotFoundError: If the path does not exist.
        """
        ...

    def mkdir_all(self, path: StrPath, mode: int = 0o777) -> None:
        """Create a directory along with any missing parents.

        Args:
            path: Directory to create.
            mode: Permission bits for newly created directories.
        """
        ...

    def write_file(self, path: StrPath, data: bytes, mode: int = 0o666) -> int:
        """Replace the contents of a file.

        Args:
            path: Path to the file.
            data: New contents.
            mode: Permission bits used if the file is created.

        Returns:
            Number of bytes written.
        """
        ...


@runtime_checkable
class FilePath(Protocol):
    """Protocol for file-tree traversal."""

    def walk(self, root: StrPath, walk_fn: WalkFunc) -> None:
        """Walk the tree rooted at root, calling walk_fn for each entry.

        Args:
            root: Root of the tree, visited first.
            walk_fn: Visitor called as walk_fn(path, info, err). Raising
                SkipDir prunes the current directory; any other exception
                stops the walk and propagates.
        """
        ...
