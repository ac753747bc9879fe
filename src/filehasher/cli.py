import argparse
import logging
import sys
import textwrap
import tomllib

from . import ScanFailure, UnreadablePolicy, run_scan
from .settings import (
    Settings,
    SETTING_LOG_LEVEL,
    SETTING_LOG_PATH,
    SETTING_OUTPUT_DIR,
    SETTING_SORT,
    SETTING_UNREADABLE,
)
from .utils.profiling import profile_main

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def configure_logging(log_file: str | None, log_level: str | None, verbose: bool):
    """Configure the root logger, replacing any handlers already installed.

    Logs go to log_file at log_level (INFO by default) when a file is given, otherwise to
    stderr at WARNING, or INFO with verbose.
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    if log_file:
        logging.basicConfig(
            filename=log_file,
            encoding='utf-8',
            level=getattr(logging, log_level or 'INFO'),
            format=LOG_FORMAT
        )
    else:
        if log_level is None:
            log_level = 'INFO' if verbose else 'WARNING'
        logging.basicConfig(
            stream=sys.stderr,
            level=getattr(logging, log_level),
            format=LOG_FORMAT
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='filehasher',
        description='Compute a SHA-512 digest for every file beneath a directory and write them to a report '
                    'named <folder>-Hashes_<timestamp>.txt.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            Examples:
              filehasher /home/user/documents
              filehasher --on-unreadable flag --output-dir /tmp/reports /home/user/documents

            Settings may also be read from a TOML file (--config or FILEHASHER_CONFIG):
              [report]
              unreadable = "flag"
              sort = false
              output_dir = "/tmp/reports"

              [logging]
              path = "/tmp/filehasher.log"
              level = "DEBUG"
            ''').strip()
    )
    parser.add_argument(
        'path',
        metavar='PATH',
        help='Directory to scan')
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Path to a TOML settings file. If not provided, uses the FILEHASHER_CONFIG environment variable.')
    parser.add_argument(
        '--on-unreadable',
        choices=[policy.value for policy in UnreadablePolicy],
        help='What to do with files that cannot be read: omit them from the report (default), fail the whole '
             'scan, or flag them in the report as UNREADABLE')
    parser.add_argument(
        '--keep-order',
        action='store_true',
        default=None,
        help='Keep the directory traversal order in the report instead of sorting by path')
    parser.add_argument(
        '--output-dir',
        metavar='PATH',
        help='Directory receiving the report (default: current working directory)')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output for detailed information during the scan')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file. If not provided, uses logging.path from the settings file or logs to stderr.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=LOG_LEVELS,
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO when logging to a file.')
    return parser


@profile_main
def filehasher_main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.locate(args.config)
    except (OSError, tomllib.TOMLDecodeError) as e:
        parser.error(f"cannot load settings: {e}")

    log_file = args.log_file or settings.get(SETTING_LOG_PATH)
    log_level = args.log_level or settings.get(SETTING_LOG_LEVEL)
    if log_level is not None and log_level not in LOG_LEVELS:
        parser.error(f"invalid logging level in settings: {log_level}")
    configure_logging(log_file, log_level, args.verbose)

    try:
        on_unreadable = UnreadablePolicy(args.on_unreadable or settings.get(SETTING_UNREADABLE, 'omit'))
    except ValueError as e:
        parser.error(str(e))

    if args.keep_order:
        sort_entries = False
    else:
        sort_entries = bool(settings.get(SETTING_SORT, True))

    output_directory = args.output_dir or settings.get(SETTING_OUTPUT_DIR)

    try:
        report_path = run_scan(
            args.path,
            on_unreadable=on_unreadable,
            sort_entries=sort_entries,
            output_directory=output_directory
        )
    except ScanFailure as e:
        logger.error(f"Scan of {args.path} failed: {e}")
        print(e, file=sys.stderr)
        sys.exit(1)

    print(f"Successfully created {report_path} as the Output File!")


if __name__ == '__main__':
    filehasher_main()
