#!/usr/bin/env python3
"""
clipkit CLI - render help for, or parse arguments against, a declaration file.

Usage:
    clipkit help options.yaml
    clipkit help options.yaml --plain
    clipkit parse options.yaml -v -o out.txt input.txt
    clipkit --help
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

import clipkit
from clipkit.config import load_registry
from clipkit.exceptions import ConfigError, ParsingError
from clipkit.help import HelpRenderer
from clipkit.registry import OptionsRegistry
from clipkit.ui import Console, ConsoleSink

lg = logging.getLogger(__name__)

_LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_PARSE_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="clipkit",
        description="Render help for, or parse arguments against, "
        "an option declaration file",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=_LOG_LEVELS,
        help="logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--version", action="version", version=f"clipkit {clipkit.__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    help_cmd = subparsers.add_parser("help", help="render the declared help screen")
    help_cmd.add_argument("file", help="YAML declaration file")
    help_cmd.add_argument(
        "--plain", action="store_true", help="single-space padded text, no styling"
    )
    help_cmd.add_argument("--no-color", action="store_true", help="disable color")

    parse_cmd = subparsers.add_parser(
        "parse",
        help="parse arguments and print the result as JSON",
        description="All tokens after FILE are parsed against the declaration.",
    )
    parse_cmd.add_argument("--no-color", action="store_true", help="disable color")
    parse_cmd.add_argument("file", help="YAML declaration file")
    parse_cmd.add_argument("args", nargs=argparse.REMAINDER, help="arguments to parse")
    return parser


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _show_help(registry: OptionsRegistry, console: Console, plain: bool) -> None:
    renderer = HelpRenderer()
    if plain:
        console.write(renderer.render_plain(registry))
    else:
        renderer.render_styled(registry, ConsoleSink(console))
    console.flush()


def _run_help(args: argparse.Namespace, console: Console, errors: Console) -> int:
    registry = load_registry(args.file)
    _show_help(registry, console, args.plain)
    return EXIT_OK


def _run_parse(args: argparse.Namespace, console: Console, errors: Console) -> int:
    registry = load_registry(args.file)
    try:
        result = registry.parse(args.args)
    except ParsingError as e:
        lg.debug("parse failed", extra={"error": type(e).__name__})
        errors.print_error(str(e))
        return EXIT_PARSE_ERROR

    if result.help_requested:
        _show_help(registry, console, plain=False)
        return EXIT_OK

    print(json.dumps(result.to_dict(), indent=2), file=console.file)
    return EXIT_OK


_COMMANDS = {
    "help": _run_help,
    "parse": _run_parse,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the clipkit CLI."""
    args = _build_parser().parse_args(argv)
    _setup_logging(args.log_level)
    no_color = True if args.no_color else None
    console = Console(no_color=no_color)
    # errors stay off stdout so JSON output can be piped
    errors = Console(no_color=no_color, file=sys.stderr)

    try:
        return _COMMANDS[args.command](args, console, errors)
    except ConfigError as e:
        errors.print_error(str(e))
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
