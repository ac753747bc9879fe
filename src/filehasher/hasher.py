import logging
import os
from pathlib import Path

from .digest import FailureCause
from .errors import InvalidRoot
from .report.formatter import format_report, report_filename
from .report.writer import write_report
from .scanner import UnreadablePolicy, scan

logger = logging.getLogger(__name__)


def run_scan(
        root_path: str | os.PathLike,
        *,
        on_unreadable: UnreadablePolicy = UnreadablePolicy.OMIT,
        sort_entries: bool = True,
        output_directory: str | os.PathLike | None = None) -> Path:
    """Hash every file beneath root_path and write the report.

    The report is named '<folder-name>-Hashes_<timestamp>.txt' and written to
    output_directory, the current working directory by default.

    Args:
        root_path: Directory to scan
        on_unreadable: What to do with files that cannot be hashed
        sort_entries: Sort report lines by relative path instead of discovery order
        output_directory: Directory receiving the report

    Returns:
        Absolute path of the written report

    Raises:
        InvalidRoot: root_path does not exist or is not a directory
        UnreadableFile: A file could not be hashed and on_unreadable is FAIL
        ReportWriteFailed: The report could not be encoded or written
    """
    root = os.fspath(root_path)
    root_as_path = Path(root)
    if not root_as_path.is_dir():
        cause = FailureCause.NOT_A_DIRECTORY if root_as_path.exists() else FailureCause.NOT_FOUND
        raise InvalidRoot(root, cause)

    logger.info(f"Scanning {root}")
    scan_result = scan(root, on_unreadable)
    report = format_report(scan_result, sort_entries=sort_entries)
    return write_report(report, report_filename(root), output_directory)
