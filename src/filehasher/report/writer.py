import logging
import os
from pathlib import Path

from .formatter import Report
from ..digest import FailureCause, classify_os_error
from ..errors import ReportWriteFailed

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'


def write_report(report: Report, filename: str, directory: str | os.PathLike | None = None) -> Path:
    """Persist a report as UTF-8 text and return its absolute path.

    The content is encoded before any file is created. It is then written to a temporary file
    next to the destination and moved into place with os.replace, so the destination either
    holds the complete report or is left untouched.

    Args:
        report: Report to write
        filename: Name of the report file
        directory: Target directory, the current working directory if None

    Raises:
        ReportWriteFailed: The text cannot be encoded or the file cannot be created
    """
    if directory is None:
        directory = Path.cwd()
    destination = (Path(directory) / filename).absolute()

    try:
        content = report.text.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise ReportWriteFailed(destination, FailureCause.ENCODING_UNSUPPORTED, str(e)) from e

    tmp_path = destination.with_name(f".{destination.name}.{os.getpid()}.tmp")
    try:
        tmp_path.write_bytes(content)
        os.replace(tmp_path, destination)
    except OSError as e:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            logger.warning(f"Cannot remove temporary report file {tmp_path}")
        raise ReportWriteFailed(destination, classify_os_error(e), str(e)) from e

    logger.info(f"Wrote report with {len(report.lines)} entries to {destination}")
    return destination
