"""Path utilities for deriving the names shown in a hash report."""

import os
from pathlib import Path

# Substituted when no folder name can be derived from the scan root
FALLBACK_FOLDER_NAME = 'null'


def _strip_trailing_separators(root: str) -> str:
    stripped = root.rstrip('/\\')
    # A root made only of separators keeps one, e.g. '/'
    return stripped if stripped else root[:1]


def folder_name(root: str | os.PathLike) -> str | None:
    """Get the deepest folder name from a root path.

    Splits on the last '/' and falls back to the last '\\', so roots written with either
    convention work on any platform.

    Args:
        root: Scan root as supplied by the caller

    Returns:
        The text after the last separator, or None if the root contains no separator at all.

    Examples:
        >>> folder_name('/home/user/folder1')
        'folder1'
        >>> folder_name('C:\\\\data\\\\folder1')
        'folder1'
        >>> folder_name('folder1') is None
        True
    """
    root = _strip_trailing_separators(os.fspath(root))

    index = root.rfind('/')
    if index == -1:
        index = root.rfind('\\')
        if index == -1:
            return None

    return root[index + 1:]


def report_folder_name(root: str | os.PathLike) -> str:
    """Folder name used in the report filename, with the 'null' fallback."""
    name = folder_name(root)
    return name if name else FALLBACK_FOLDER_NAME


def printable(text: str) -> str:
    """Make a path string safe to encode as UTF-8.

    Names that are not valid in the filesystem encoding reach Python as surrogate escapes.
    Their raw bytes are decoded again with U+FFFD replacing the undecodable parts, so
    b'caf\\xe9.txt' is rendered as 'caf\\ufffd.txt'.
    """
    return os.fsencode(text).decode('utf-8', 'replace')


def relativize(root: str | os.PathLike, file_path: str | os.PathLike) -> str:
    """Build the display path of a file found beneath root.

    The result starts with the root folder's own name, followed by the file's path relative
    to root with components joined by '/'. For example, root '/data/folder1' and file
    '/data/folder1/sub/file.txt' give 'folder1/sub/file.txt'. The result is passed
    through printable().

    When the root contains no separator, the root string itself leads the display path
    (root 'folder1' gives 'folder1/sub/file.txt') rather than the 'null' placeholder that
    report_folder_name() substitutes in the report filename.

    Raises:
        ValueError: file_path is not beneath root
    """
    root_str = os.fspath(root)
    name = folder_name(root_str)
    if name is None:
        # No separator: the root is a single segment naming the folder itself
        name = _strip_trailing_separators(root_str)

    relative = Path(file_path).relative_to(Path(root_str))
    return printable('/'.join((name, *relative.parts)) if relative.parts else name)
