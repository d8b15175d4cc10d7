#!/usr/bin/env python3
"""Byte filter CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .config import FilterConfig, Settings
from .display import POST_LABEL, PRE_LABEL, display
from .errors import ByteFilterError, ConfigError, InvalidFilterError
from .filters import resolve_filter
from .transform import run_transform

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Apply a byte filter to a file and show it before and after",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Filters:
  upper   ASCII letters to uppercase
  lower   ASCII letters to lowercase
  null    copy bytes unchanged

Examples:
  %(prog)s -i in.txt -o out.txt -f upper       # Write uppercased copy
  %(prog)s -i notes.txt -o notes.txt -f lower  # Rewrite file in place
  %(prog)s -i in.txt -o out.txt -f null --config settings.yml
        """,
    )

    parser.add_argument("-i", "--input", required=True, metavar="PATH", help="Input file")
    parser.add_argument("-o", "--output", required=True, metavar="PATH", help="Output file")
    parser.add_argument(
        "-f", "--filter", required=True, metavar="NAME", help="Filter: upper, lower or null"
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="YAML file with settings (chunk_size, file_mode, log_level)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    """Run the filter pipeline."""
    args = _build_parser().parse_args()

    # Load settings
    settings = Settings()
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        try:
            settings = Settings.from_yaml(args.config)
        except (ConfigError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.verbose:
        _configure_logging(logging.DEBUG)
    elif settings.log_level is not None:
        _configure_logging(settings.log_level)

    config = FilterConfig(
        input_path=args.input,
        output_path=args.output,
        filter_name=args.filter,
        settings=settings,
    )

    # Input is shown before the filter name is checked
    display(config.input_path, PRE_LABEL, chunk_size=config.chunk_size)

    byte_filter = resolve_filter(config.filter_name)
    if byte_filter is None:
        print(InvalidFilterError(config.filter_name), file=sys.stderr)
        return 1

    try:
        result = run_transform(config, byte_filter)
    except ByteFilterError as e:
        print(e, file=sys.stderr)
        return 1

    log.info(f"Applied '{byte_filter.value}' to {result.bytes_read} bytes ({result.mode} paths)")

    display(config.output_path, POST_LABEL, chunk_size=config.chunk_size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
