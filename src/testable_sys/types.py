"""Shared error types for testable_sys."""

from __future__ import annotations

__all__ = ["FakeFileNotFound", "SkipDir", "SysError"]


class SysError(Exception):
    """Base class for errors raised by testable_sys."""

    pass


class FakeFileNotFound(SysError):
    """Error raised by FakeFileSystem when a requested file isn't found.

    Attributes:
        filename: The path that had no in-memory entry.
    """

    def __init__(self, filename: str) -> None:
        """Initialize the error.

        Args:
            filename: The missing path.
        """
        super().__init__(f"Fake file {filename} not found")
        self.filename = filename

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FakeFileNotFound):
            return NotImplemented
        return self.filename == other.filename

    def __hash__(self) -> int:
        return hash((FakeFileNotFound, self.filename))

    def __reduce__(self) -> tuple[type[FakeFileNotFound], tuple[str]]:
        return (FakeFileNotFound, (self.filename,))


class SkipDir(SysError):
    """Raised by a walk visitor to skip the directory being visited."""

    pass
