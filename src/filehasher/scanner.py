import logging
import os
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .digest import HashResult, hash_file
from .errors import UnreadableFile
from .utils.walker import iter_regular_files

logger = logging.getLogger(__name__)


class UnreadablePolicy(StrEnum):
    """What a scan does with a file whose content cannot be hashed."""
    OMIT = 'omit'
    FAIL = 'fail'
    FLAG = 'flag'


@dataclass(frozen=True)
class ScanResult:
    """Digests of every file found beneath a root.

    Attributes:
        root: The root as supplied by the caller
        entries: Read-only mapping of file path to hex digest, in discovery order
        failures: Files that could not be hashed. Populated for every policy; only the FLAG
                  policy renders them in the report.
        policy: The unreadable-file policy the scan ran with
    """
    root: str
    entries: Mapping[Path, str] = field(default_factory=lambda: MappingProxyType({}))
    failures: tuple[HashResult, ...] = ()
    policy: UnreadablePolicy = UnreadablePolicy.OMIT

    def __len__(self):
        return len(self.entries)


def scan(root: str | os.PathLike, on_unreadable: UnreadablePolicy = UnreadablePolicy.OMIT) -> ScanResult:
    """Hash every regular file beneath root.

    Files are processed one at a time in traversal order. A root that is not a directory
    produces an empty result; validating the root is the caller's job.

    Raises:
        UnreadableFile: A file failed to hash and on_unreadable is FAIL
    """
    on_unreadable = UnreadablePolicy(on_unreadable)
    entries: dict[Path, str] = {}
    failures: list[HashResult] = []

    for file_path in iter_regular_files(root):
        result = hash_file(file_path)
        if result.ok:
            entries[file_path] = result.digest
            continue

        if on_unreadable is UnreadablePolicy.FAIL:
            raise UnreadableFile(file_path, result.cause, result.message)
        failures.append(result)

    if failures:
        discovered = len(entries) + len(failures)
        logger.warning(f"Hashed {len(entries)} of {discovered} files under {root}; "
                       f"{len(failures)} could not be read")
    logger.info(f"Scanned {root}: {len(entries)} files hashed")

    return ScanResult(os.fspath(root), MappingProxyType(entries), tuple(failures), on_unreadable)
