"""File metadata descriptors.

HostFileInfo describes a real path from an ``os.stat_result``. FakeFileInfo is
the stand-in handed out by the fakes: it only answers ``is_dir()``, and tests
may flip that flag to exercise code that branches on directories.
"""

from __future__ import annotations

import os
import stat
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, PrivateAttr

__all__ = ["FakeFileInfo", "HostFileInfo"]


class FakeFileInfo(BaseModel):
    """Fake file metadata.

    Every field other than the directory flag is left unset and must not be
    relied upon by calling code.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str | None = None
    size: int | None = None
    mode: int | None = None
    mod_time: datetime | None = None

    _is_dir: bool = PrivateAttr(default=False)

    def is_dir(self) -> bool:
        """Return the configured directory flag (False unless set)."""
        return self._is_dir

    def set_is_dir(self, is_dir: bool) -> None:
        """Set the value reported by is_dir()."""
        self._is_dir = is_dir


class HostFileInfo(BaseModel):
    """Metadata for a path on the host filesystem."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    size: int
    mode: int
    mod_time: datetime
    directory: bool
    stat_result: os.stat_result

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> HostFileInfo:
        """Build a descriptor from a stat result.

        Args:
            path: Path the result belongs to; its base name becomes ``name``.
            st: Result of ``os.stat`` or ``os.lstat``.

        Returns:
            Descriptor for the path.
        """
        return cls(
            name=os.path.basename(os.path.normpath(path)),
            size=st.st_size,
            mode=st.st_mode,
            mod_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            directory=stat.S_ISDIR(st.st_mode),
            stat_result=st,
        )

    def is_dir(self) -> bool:
        """Return True if the path is a directory."""
        return self.directory
