"""Failures surfaced to callers of run_scan."""

import os
from pathlib import Path

from .digest import FailureCause


class ScanFailure(Exception):
    """Base class of the fatal failures of a scan.

    Attributes:
        path: The path the failure concerns (scan root, report file or unreadable file)
        cause: Category of the underlying problem
    """

    def __init__(self, path: str | os.PathLike, cause: FailureCause, message: str):
        super().__init__(message)
        self.path = Path(path)
        self.cause = FailureCause(cause)

    @property
    def message(self) -> str:
        return str(self)


class InvalidRoot(ScanFailure):
    def __init__(self, path: str | os.PathLike, cause: FailureCause = FailureCause.NOT_A_DIRECTORY):
        super().__init__(
            path, cause,
            f"Given Folder '{os.fspath(path)}' is not a folder, re-check that! ({cause})")


class ReportWriteFailed(ScanFailure):
    def __init__(self, path: str | os.PathLike, cause: FailureCause, detail: str | None = None):
        if cause is FailureCause.ENCODING_UNSUPPORTED:
            message = f"An error occurred because the report for '{os.fspath(path)}' cannot be encoded as UTF-8"
        else:
            message = (f"An error occurred while creating the output file '{os.fspath(path)}' ({cause}), "
                       f"make sure the program has the rights to do so!")
        if detail:
            message = f"{message}: {detail}"
        super().__init__(path, cause, message)


class UnreadableFile(ScanFailure):
    def __init__(self, path: str | os.PathLike, cause: FailureCause, detail: str | None = None):
        message = f"Cannot hash '{os.fspath(path)}' ({cause})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(path, cause, message)
