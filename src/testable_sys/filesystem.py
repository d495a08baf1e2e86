"""Host and in-memory implementations of the FileSystem protocol.

RealFileSystem hands each call straight to the host OS. FakeFileSystem
keeps every file in memory, keyed by its path string, so code written
against the FileSystem protocol can run in tests without a disk.

Example:
    >>> def read_config(fs, name):
    ...     return fs.read_file(name)
    >>> fake = FakeFileSystem()
    >>> fake.write_file("app.cfg", b"debug=1")
    7
    >>> read_config(fake, "app.cfg")
    b'debug=1'
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

from testable_sys.fileinfo import FakeFileInfo, HostFileInfo
from testable_sys.protocols import StrPath
from testable_sys.types import FakeFileNotFound

__all__ = ["FakeFileSystem", "InMemoryWriter", "RealFileSystem"]

logger = logging.getLogger(__name__)


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os, Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    @classmethod
    def create_default(cls) -> RealFileSystem:
        """Create a filesystem bound to the host."""
        return cls()

    def read_file(self, path: StrPath) -> bytes:
        """Read the full contents of a file."""
        return Path(path).read_bytes()

    def remove_all(self, path: StrPath) -> None:
        """Remove a file or directory tree; a missing path is not an error."""
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except FileNotFoundError:
            logger.debug("remove_all: %s does not exist", os.fspath(path))

    def create(self, path: StrPath) -> BinaryIO:
        """Create or truncate a file and open it for binary writing."""
        return open(path, "wb")

    def stat(self, path: StrPath) -> HostFileInfo:
        """Describe a path, following symbolic links."""
        return HostFileInfo.from_stat(os.fspath(path), os.stat(path))

    def mkdir_all(self, path: StrPath, mode: int = 0o777) -> None:
        """Create a directory and any missing parents."""
        os.makedirs(path, mode=mode, exist_ok=True)

    def write_file(self, path: StrPath, data: bytes, mode: int = 0o666) -> int:
        """Replace the contents of a file, creating it with mode if needed.

        Returns:
            len(data). Failures raise instead of reporting a partial count.
        """
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with open(fd, "wb") as f:
            f.write(data)
        return len(data)


class InMemoryWriter:
    """Writable handle over one FakeFileSystem buffer.

    Writes extend the shared buffer in place. Closing releases nothing.
    """

    def __init__(self, buf: bytearray) -> None:
        self.buf = buf
        self.closed = False

    def write(self, data: bytes) -> int:
        self.buf.extend(data)
        return len(data)

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> InMemoryWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class FakeFileSystem:
    """In-memory filesystem implementation.

    Files live in a flat mapping from path string to buffer; there is no
    directory tree. Satisfies the FileSystem protocol structurally.

    Attributes:
        files: Mapping from path to contents. Tests may seed or inspect it.
    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        """Initialize the fake filesystem.

        Args:
            files: Optional initial contents, copied into fresh buffers.
        """
        self.files: dict[str, bytearray] = {
            name: bytearray(data) for name, data in (files or {}).items()
        }

    def read_file(self, path: StrPath) -> bytes:
        """Return a snapshot of the file's contents.

        Raises:
            FakeFileNotFound: If no entry exists at path.
        """
        name = os.fspath(path)
        buf = self.files.get(name)
        if buf is None:
            logger.debug("read_file: no fake entry for %s", name)
            raise FakeFileNotFound(filename=name)
        return bytes(buf)

    def remove_all(self, path: StrPath) -> None:
        """Delete the entry at path.

        Raises:
            FakeFileNotFound: If no entry exists at path.
        """
        name = os.fspath(path)
        if name not in self.files:
            raise FakeFileNotFound(filename=name)
        del self.files[name]

    def stat(self, path: StrPath) -> FakeFileInfo:
        """Return a stub descriptor for an existing entry.

        Raises:
            FileNotFoundError: If no entry exists at path.
        """
        name = os.fspath(path)
        try:
            self.read_file(name)
        except FakeFileNotFound as e:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), name) from e
        return FakeFileInfo()

    def mkdir_all(self, path: StrPath, mode: int = 0o777) -> None:
        """Model a directory as an empty entry at path."""
        self.create(path)

    def create(self, path: StrPath) -> InMemoryWriter:
        """Replace the entry at path with an empty buffer and return a writer."""
        buf = bytearray()
        self.files[os.fspath(path)] = buf
        return InMemoryWriter(buf)

    def write_file(self, path: StrPath, data: bytes, mode: int = 0o666) -> int:
        """Replace the entry at path with data."""
        return self.create(path).write(data)
