"""Rendering of scan results into the text report."""

import datetime
import os
from dataclasses import dataclass

from .path import printable, relativize, report_folder_name
from ..scanner import ScanResult, UnreadablePolicy

HEADER_PREFIX = 'Path to scan: '
LINE_SEPARATOR = os.linesep
TIMESTAMP_FORMAT = '%Y-%m-%d_%H-%M-%S'


@dataclass(frozen=True)
class Report:
    """Immutable text report of one scan.

    Attributes:
        root: The scan root exactly as supplied
        lines: Entry lines, one per file, without the header
    """
    root: str
    lines: tuple[str, ...]

    @property
    def header(self) -> str:
        return f"{HEADER_PREFIX}{self.root}"

    @property
    def text(self) -> str:
        return LINE_SEPARATOR.join((self.header, *self.lines))

    def __str__(self):
        return self.text


def format_report(scan_result: ScanResult, sort_entries: bool = True) -> Report:
    """Turn a scan result into a report.

    Each entry is rendered as '<relative-path>: <digest-hex>'. Files that failed to hash are
    rendered as '<relative-path>: UNREADABLE (<cause>)' when the scan used the FLAG policy and
    left out otherwise.

    The header names scan_result.root, which is also the base the entries are relativized to.

    Args:
        scan_result: Completed scan
        sort_entries: Sort lines by relative path. When False, discovery order is kept.
    """
    root = scan_result.root

    rendered = [(relativize(root, path), value) for path, value in scan_result.entries.items()]
    if scan_result.policy is UnreadablePolicy.FLAG:
        rendered.extend(
            (relativize(root, failure.path), f"UNREADABLE ({failure.cause})")
            for failure in scan_result.failures)

    if sort_entries:
        rendered.sort(key=lambda item: item[0])

    return Report(printable(root), tuple(f"{path}: {value}" for path, value in rendered))


def report_filename(root: str | os.PathLike, now: datetime.datetime | None = None) -> str:
    """Derive '<folder-name>-Hashes_<yyyy-MM-dd_HH-mm-ss>.txt' using local time."""
    if now is None:
        now = datetime.datetime.now()
    return f"{report_folder_name(root)}-Hashes_{now.strftime(TIMESTAMP_FORMAT)}.txt"
