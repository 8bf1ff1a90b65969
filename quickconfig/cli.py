#!/usr/bin/env python3
"""
Command-line front end for quickconfig.

Usage:
    python -m quickconfig show config.yaml --format json
    python -m quickconfig convert config.yaml config.json
    python -m quickconfig flags --verbose --mode:fast input.txt
"""

import argparse
import contextlib
import sys
from typing import List, Optional

from .config.errors import ConfigError
from .config.files import dump_json, dump_yaml, file_kind, load_from_file, save_to_file
from .config.quick import DictConfig, FlagConfig
from .utils.logger import get_logger, setup_logging, with_debug_logging, with_quiet_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='quickconfig',
        description='Inspect and convert YAML/JSON configuration files',
        allow_abbrev=False
    )
    parser.add_argument('--log-level', default='WARNING', help='Logging level')
    parser.add_argument('--log-file', help='Also write logs to this file')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', action='store_true', help='Show quickconfig debug messages')
    verbosity.add_argument('--quiet', action='store_true', help='Only show quickconfig warnings and errors')

    subparsers = parser.add_subparsers(dest='command')

    show = subparsers.add_parser('show', help='Print a configuration file', allow_abbrev=False)
    show.add_argument('path', help='Configuration file (.yaml, .yml or .json)')
    show.add_argument('--format', choices=['yaml', 'json'], help='Output format (default: input format)')

    convert = subparsers.add_parser('convert', help='Convert between YAML and JSON', allow_abbrev=False)
    convert.add_argument('source', help='File to read')
    convert.add_argument('dest', help='File to write, format chosen by extension')

    flags = subparsers.add_parser('flags', help='List the --flags found in the given arguments', allow_abbrev=False)
    flags.add_argument('args', nargs='*', help='Arguments to scan')

    return parser


def _show(path: str, output_format: Optional[str]) -> None:
    config = load_from_file(DictConfig, path)
    if output_format is None:
        output_format = 'json' if file_kind(path) == 'json' else 'yaml'

    if output_format == 'json':
        print(dump_json(config.data))
    else:
        print(dump_yaml(config.data), end='')


def _convert(source: str, dest: str) -> None:
    config = load_from_file(DictConfig, source)
    save_to_file(config, dest)
    print(f"Converted {source} -> {dest}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line usage."""
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    if args.command != 'flags' and extra:
        parser.error(f"unrecognized arguments: {' '.join(extra)}")

    log_level = 'DEBUG' if args.verbose else args.log_level
    app_logger = setup_logging(log_level=log_level, log_file=args.log_file)

    if args.verbose:
        scope = with_debug_logging(app_logger)
    elif args.quiet:
        scope = with_quiet_logging(app_logger)
    else:
        scope = contextlib.nullcontext()

    with scope:
        return _run(parser, args, extra)


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace, extra: List[str]) -> int:
    try:
        if args.command == 'show':
            _show(args.path, args.format)
        elif args.command == 'convert':
            _convert(args.source, args.dest)
        elif args.command == 'flags':
            # Unknown --options land in ``extra``; plain words in ``args.args``
            for flag in FlagConfig.from_arguments(extra + args.args):
                print(flag)
        else:
            parser.print_help()
            return 2
    except (ConfigError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
