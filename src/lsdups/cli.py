import argparse
import logging
import re
import sys
import textwrap
from pathlib import Path

from .commands.list_duplicates import ListOptions, do_list
from .settings import (
    ScanSettings,
    find_settings_file,
    SETTING_PATTERN,
    SETTING_SKIP_PATTERN,
    SETTING_MIN_SIZE,
    SETTING_VERBOSE,
    SETTING_USE_BYTES,
    SETTING_LOG_PATH,
    SETTING_LOG_LEVEL,
)
from .utils.profiling import profile_main
from .utils.walker import WalkPolicy

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unsigned integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"size must not be negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lsdups',
        description='List files sharing the same name under a directory, largest groups first. Only names are '
                    'compared; file contents are never read.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            Examples:
              lsdups
              lsdups -d ~/Pictures -p '\\.jpe?g' --size 1048576
              lsdups -d ~/src --filter '\\.o' -v

            Settings may also be read from a TOML file: --config PATH, the
            LSDUPS_CONFIG environment variable, or .lsdups.toml in the scanned
            directory. Command line options take precedence.
            ''').strip()
    )
    parser.add_argument(
        '-d', '--dir',
        metavar='DIRECTORY-PATH',
        default='.',
        help='Directory to traverse, defaults to current directory')
    parser.add_argument(
        '-p', '--pattern',
        metavar='PATTERN',
        help='Pattern for files, defaults to all files. Matched case-insensitively against the end of the name.')
    parser.add_argument(
        '--filter',
        metavar='SKIP-PATTERN',
        help='Pattern for files to filter out/skip, defaults to empty (skip nothing)')
    parser.add_argument(
        '--size',
        metavar='BYTES',
        type=non_negative_int,
        help='Hide groups whose total size is below this many bytes, defaults to 0')
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=None,
        help='Show the compiled patterns and include files whose name is unique')
    parser.add_argument(
        '--bytes',
        action='store_true',
        default=None,
        help='Show sizes in bytes instead of megabytes')
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Path to a TOML settings file. If not provided, uses LSDUPS_CONFIG environment variable or '
             '.lsdups.toml in the scanned directory.')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file for operation logging. If not provided, uses logging.path from settings or no '
             'logging.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=LOG_LEVELS,
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO when a log file is used.')
    return parser


def configure_logging(log_file: str | None, log_level: str | None) -> bool:
    """Send log records to log_file. Does nothing when log_file is not set.

    Returns:
        True if logging was configured, False otherwise
    """
    if not log_file:
        return False

    if log_level is None:
        log_level = 'INFO'

    # Reset logging configuration
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, log_level),
        format=LOG_FORMAT
    )
    return True


def resolve_options(args: argparse.Namespace, settings: ScanSettings) -> ListOptions:
    """Merge command line arguments over settings file values over defaults."""
    def pick(value, key, default, expected_type, description):
        if value is not None:
            return value
        value = settings.get(key, default)
        # bool is an int subclass; a TOML boolean is never a valid size
        if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
            raise ValueError(f"{key} must be {description}, got {value!r}")
        return value

    min_size = pick(args.size, SETTING_MIN_SIZE, 0, int, 'a non-negative integer')
    if min_size < 0:
        raise ValueError(f"{SETTING_MIN_SIZE} must be a non-negative integer, got {min_size!r}")

    return ListOptions(
        pattern=pick(args.pattern, SETTING_PATTERN, '.*', str, 'a string'),
        skip_pattern=pick(args.filter, SETTING_SKIP_PATTERN, '', str, 'a string'),
        min_group_total_size=min_size,
        verbose=pick(args.verbose, SETTING_VERBOSE, False, bool, 'true or false'),
        use_bytes=pick(args.bytes, SETTING_USE_BYTES, False, bool, 'true or false'),
    )


@profile_main
def lsdups_main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    root = Path(args.dir)
    if not root.exists():
        print(f"Error: Path does not exist: {root}", file=sys.stderr)
        sys.exit(1)
    if not root.is_dir():
        print(f"Error: Not a directory: {root}", file=sys.stderr)
        sys.exit(1)

    settings_file = find_settings_file(root, args.config)
    if settings_file is not None and not settings_file.is_file():
        print(f"Error: Settings file does not exist: {settings_file}", file=sys.stderr)
        sys.exit(1)

    try:
        settings = ScanSettings(settings_file)
    except ValueError as e:
        # tomllib.TOMLDecodeError is a ValueError
        print(f"Error: Invalid settings file {settings_file}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot read settings file {settings_file}: {e}", file=sys.stderr)
        sys.exit(1)

    # --log-file takes precedence over logging.path from the settings file
    if args.log_file:
        configure_logging(args.log_file, args.log_level)
    else:
        log_level = args.log_level or settings.get(SETTING_LOG_LEVEL)
        if log_level is not None and str(log_level).upper() not in LOG_LEVELS:
            parser.error(f"{SETTING_LOG_LEVEL} must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")
        configure_logging(settings.get(SETTING_LOG_PATH), log_level and str(log_level).upper())

    try:
        options = resolve_options(args, settings)
    except ValueError as e:
        parser.error(str(e))

    try:
        WalkPolicy.from_strings(options.pattern, options.skip_pattern)
    except re.error as e:
        parser.error(f"invalid pattern: {e}")

    do_list(root, options)


if __name__ == '__main__':
    lsdups_main()
