"""File-tree traversal abstraction.

RealFilePath walks the host filesystem depth-first in lexical order.
FakeFilePath performs a single synthetic visit of the root so code that
walks trees can be tested without a directory on disk.
"""

from __future__ import annotations

import logging
import os

from testable_sys.fileinfo import FakeFileInfo, HostFileInfo
from testable_sys.filesystem import FakeFileSystem
from testable_sys.protocols import FileInfo, StrPath, WalkFunc
from testable_sys.types import SkipDir

__all__ = ["FakeFilePath", "RealFilePath"]

logger = logging.getLogger(__name__)


def _visit(walk_fn: WalkFunc, path: str, info: FileInfo | None, err: OSError | None) -> bool:
    """Call walk_fn, returning False if it asked to skip."""
    try:
        walk_fn(path, info, err)
    except SkipDir:
        return False
    return True


def _lstat(path: str) -> HostFileInfo:
    return HostFileInfo.from_stat(path, os.lstat(path))


class RealFilePath:
    """Production tree walker.

    Visits the root first, then descends depth-first, visiting each
    directory's entries in lexical order. Symbolic links are reported but
    never followed.
    """

    @classmethod
    def create_default(cls) -> RealFilePath:
        """Create a walker bound to the host filesystem."""
        return cls()

    def walk(self, root: StrPath, walk_fn: WalkFunc) -> None:
        """Walk the tree rooted at root, calling walk_fn for each entry.

        Args:
            root: Root of the tree.
            walk_fn: Visitor called as walk_fn(path, info, err). Entries that
                cannot be stat'ed are reported with info None and the error.
                A directory that cannot be listed is visited normally, then
                reported again with its info and the listing error. Raising
                SkipDir on a directory prunes it; on a file it skips the rest
                of the containing directory. Other exceptions propagate and
                end the walk.
        """
        top = os.fspath(root)
        try:
            info = _lstat(top)
        except OSError as e:
            _visit(walk_fn, top, None, e)
            return
        try:
            self._walk(top, info, walk_fn)
        except SkipDir:
            pass

    def _walk(self, path: str, info: HostFileInfo, walk_fn: WalkFunc) -> None:
        walk_fn(path, info, None)
        if not info.is_dir():
            return

        try:
            with os.scandir(path) as it:
                names = sorted(entry.name for entry in it)
        except OSError as e:
            logger.debug("walk: cannot list %s: %s", path, e)
            walk_fn(path, info, e)
            return

        for name in names:
            filename = os.path.join(path, name)
            try:
                entry = _lstat(filename)
            except OSError as e:
                _visit(walk_fn, filename, None, e)
                continue
            try:
                self._walk(filename, entry, walk_fn)
            except SkipDir:
                # Pruned directory; a file's SkipDir ends its parent.
                if not entry.is_dir():
                    raise


class FakeFilePath:
    """Fake tree walker.

    Walk never traverses anything: it calls the visitor once with the root and
    a FakeFileInfo, then records that it ran.

    Attributes:
        fs: In-memory filesystem shared with code under test.
        file_info: Descriptor to hand the visitor; a fresh FakeFileInfo when None.
        walk_invoked: True once walk has been called.
        walked_roots: Every root passed to walk, in call order.
    """

    def __init__(
        self,
        fs: FakeFileSystem | None = None,
        file_info: FakeFileInfo | None = None,
    ) -> None:
        self.fs = fs if fs is not None else FakeFileSystem()
        self.file_info = file_info
        self.walk_invoked = False
        self.walked_roots: list[str] = []

    def walk(self, root: StrPath, walk_fn: WalkFunc) -> None:
        """Visit root exactly once with a stub descriptor and no error."""
        name = os.fspath(root)
        self.walk_invoked = True
        self.walked_roots.append(name)
        info = self.file_info if self.file_info is not None else FakeFileInfo()
        _visit(walk_fn, name, info, None)
