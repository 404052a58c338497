"""Command-line interface for istringscheck."""

import sys
import argparse
from pathlib import Path

from .__version__ import __version__
from .checker import StringsChecker
from .errors import ArgumentError, StringsCheckError
from .utils.colors import Colors
from .utils.config import Config, ConfigValidationError
from .utils.logging import configure_logging, get_logger

USAGE_REMINDER = (
    "The arguments passed must be the source localization file "
    "and the folder containing other localizations"
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='istringscheck',
        description=(
            'Ensures that all your translated strings have the same number '
            'of format parameters as your source strings.'
        ),
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('source', help='Source .strings file')
    parser.add_argument('translations', help='Directory searched recursively for .strings files')
    parser.add_argument('--config', metavar='PATH',
                        help='Config file (default: ./.istringscheck.yml if present)')
    parser.add_argument('--encoding', metavar='ENC',
                        help='Declared encoding of source and translation files (default: utf-8)')
    parser.add_argument('--no-strict', action='store_true',
                        help='Report missing keys as findings instead of aborting')
    parser.add_argument('--fail-on-mismatch', action='store_true',
                        help='Exit with status 1 if any placeholder count differs')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', '-v', action='store_true', help='Show debug output')
    verbosity.add_argument('--quiet', '-q', action='store_true', help='Only show findings')

    parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors')
    parser.add_argument('--log-file', metavar='PATH', help='Also write a log file')

    return parser


def validate_args(args, parser: argparse.ArgumentParser) -> None:
    """
    Check that the source file and translations directory exist.

    Raises:
        ArgumentError: Either path is missing or of the wrong kind
    """
    source_exists = Path(args.source).is_file()
    dir_exists = Path(args.translations).is_dir()

    if not (source_exists and dir_exists):
        raise ArgumentError(f"{USAGE_REMINDER}\n{parser.format_usage()}")


def load_config(args) -> Config:
    """
    Load the config file and apply command line overrides.

    Raises:
        ConfigValidationError: The resulting config is invalid
    """
    config = Config.from_file(Path(args.config) if args.config else None)

    if args.encoding:
        config.encoding.source = args.encoding
        config.encoding.translations = args.encoding
    if args.no_strict:
        config.check.strict_missing_keys = False
    if args.fail_on_mismatch:
        config.check.fail_on_mismatch = True

    errors, warnings = config.validate()
    for warning in warnings:
        get_logger().debug(f"Config warning: {warning}")
    if errors:
        raise ConfigValidationError(errors)

    return config


def fail(message: str) -> int:
    """Print a fatal error on stderr and return the exit status."""
    print(f"{Colors.error('error:')} {message}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        Colors.enabled = False

    try:
        validate_args(args, parser)
        configure_logging(
            verbose=args.verbose,
            quiet=args.quiet,
            log_file=Path(args.log_file) if args.log_file else None,
            use_colors=not args.no_color
        )
        config = load_config(args)
        report = StringsChecker(config).run(Path(args.source), Path(args.translations))
    except ConfigValidationError as e:
        return fail('; '.join(e.errors))
    except StringsCheckError as e:
        return fail(str(e))
    except OSError as e:
        return fail(str(e))

    if config.check.fail_on_mismatch and (report.mismatch_count or report.missing_count):
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
