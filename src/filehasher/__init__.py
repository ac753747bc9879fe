from .digest import DIGEST_ALGORITHM, FailureCause, HashResult, digest, hash_file
from .errors import InvalidRoot, ReportWriteFailed, ScanFailure, UnreadableFile
from .scanner import ScanResult, UnreadablePolicy, scan
from .report.formatter import Report, format_report, report_filename
from .report.writer import write_report
from .hasher import run_scan
