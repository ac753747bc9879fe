import logging
import os
import stat
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class FileContext:
    """Stat information of a directory entry during traversal.

    Both the entry's own stat (not following symlinks) and, for symlinks, the stat of the link
    target are loaded lazily and cached.
    """
    def __init__(self, path: Path, st: os.stat_result | None = None):
        self._path: Path = path
        self._stat: os.stat_result | None = st
        self._target_stat: os.stat_result | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def stat(self) -> os.stat_result:
        if self._stat is None:
            self._stat = self._path.stat(follow_symlinks=False)
        return self._stat

    @property
    def target_stat(self) -> os.stat_result:
        """Stat of the entry with symlinks resolved."""
        if self._target_stat is None:
            self._target_stat = self.stat if not self.is_symlink() else self._path.stat()
        return self._target_stat

    def is_symlink(self):
        return stat.S_ISLNK(self.stat.st_mode)

    def is_dir(self):
        return stat.S_ISDIR(self.stat.st_mode)

    def is_file(self):
        """True for regular files and for symlinks whose target is a regular file."""
        return stat.S_ISREG(self.target_stat.st_mode)


def walk(path: Path) -> Iterator[FileContext]:
    """Recursively traverse a directory in natural directory-entry order.

    Symlinked directories are reported but not descended into, so link cycles cannot occur.
    A directory that cannot be listed is skipped with a warning; the rest of the tree is
    still traversed.
    """
    try:
        children = list(path.iterdir())
    except OSError as e:
        logger.warning(f"Cannot list directory {path}: {e}")
        return

    child: Path
    for child in children:
        context = FileContext(child)
        try:
            is_dir = context.is_dir()
        except OSError as e:
            logger.warning(f"Cannot stat {child}: {e}")
            continue

        yield context

        if is_dir:
            yield from walk(child)


def iter_regular_files(root: str | os.PathLike) -> Iterator[Path]:
    """Yield the path of every regular file beneath root, including symlinks to regular files.

    A root that does not exist or is not a directory yields nothing instead of raising.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug(f"Not a directory, nothing to traverse: {root}")
        return

    for context in walk(root):
        try:
            is_file = context.is_file()
        except OSError as e:
            logger.warning(f"Cannot resolve symlink {context.path}: {e}")
            continue

        if is_file:
            yield context.path
