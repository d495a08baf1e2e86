"""Filesystem and file-tree seams with real and in-memory implementations.

Application code depends on the FileSystem and FilePath protocols. Production
code wires RealFileSystem / RealFilePath; tests wire FakeFileSystem /
FakeFilePath and never touch the disk.
"""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from testable_sys.context import SysContext, create_context, create_fake_context
from testable_sys.fileinfo import FakeFileInfo, HostFileInfo
from testable_sys.filepath import FakeFilePath, RealFilePath
from testable_sys.filesystem import FakeFileSystem, InMemoryWriter, RealFileSystem
from testable_sys.protocols import (
    FileInfo,
    FilePath,
    FileSystem,
    WalkFunc,
    WriteCloser,
)
from testable_sys.types import FakeFileNotFound, SkipDir, SysError

__all__ = [
    "__version__",
    "FakeFileInfo",
    "FakeFileNotFound",
    "FakeFilePath",
    "FakeFileSystem",
    "FileInfo",
    "FilePath",
    "FileSystem",
    "HostFileInfo",
    "InMemoryWriter",
    "RealFilePath",
    "RealFileSystem",
    "SkipDir",
    "SysContext",
    "SysError",
    "WalkFunc",
    "WriteCloser",
    "create_context",
    "create_fake_context",
]
