import errno
import hashlib
import logging
import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

logger = logging.getLogger(__name__)

DIGEST_ALGORITHM = 'sha512'
DIGEST_SIZE = 64


class FailureCause(StrEnum):
    PERMISSION = 'permission'
    NOT_FOUND = 'not-found'
    NOT_A_DIRECTORY = 'not-a-directory'
    IO_ERROR = 'io-error'
    ENCODING_UNSUPPORTED = 'encoding-unsupported'
    ALGORITHM_UNAVAILABLE = 'algorithm-unavailable'


def classify_os_error(error: OSError) -> FailureCause:
    """Map an OSError onto the failure category reported to callers."""
    if isinstance(error, PermissionError):
        return FailureCause.PERMISSION
    if isinstance(error, FileNotFoundError):
        return FailureCause.NOT_FOUND
    if isinstance(error, NotADirectoryError) or error.errno == errno.ENOTDIR:
        return FailureCause.NOT_A_DIRECTORY
    return FailureCause.IO_ERROR


def digest_bytes(data: bytes) -> bytes:
    # hashlib.new raises ValueError when the runtime lacks the algorithm
    return hashlib.new(DIGEST_ALGORITHM, data).digest()


def digest(data: bytes) -> str:
    """Return the lowercase hex SHA-512 digest of data (128 characters)."""
    return digest_bytes(data).hex()


@dataclass(frozen=True)
class HashResult:
    """Outcome of hashing a single file.

    Exactly one of digest and cause is set. A failed result keeps the message of the
    underlying error so that it can be logged or rendered.
    """
    path: Path
    digest: str | None = None
    cause: FailureCause | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.digest is not None


def hash_file(path: str | os.PathLike) -> HashResult:
    """Hash the full content of a file.

    The file is read into memory in one piece before digesting. Errors reading the file or an
    unavailable digest algorithm are returned as a failed HashResult instead of being raised.
    """
    path = Path(path)
    logger.debug(f"Starting hash computation for: {path}")

    try:
        content = path.read_bytes()
    except OSError as e:
        cause = classify_os_error(e)
        logger.warning(f"Cannot read {path} ({cause}): {e}")
        return HashResult(path, cause=cause, message=str(e))

    try:
        value = digest(content)
    except ValueError as e:
        logger.warning(f"Digest algorithm {DIGEST_ALGORITHM} unavailable while hashing {path}: {e}")
        return HashResult(path, cause=FailureCause.ALGORITHM_UNAVAILABLE, message=str(e))

    logger.debug(f"Completed hash computation for: {path}")
    return HashResult(path, digest=value)
