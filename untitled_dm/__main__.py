"""
untitled-dm

Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import Sequence

from rich.markup import escape

from untitled_dm.config import DEFAULT_CONFIG_PATH, load_config
from untitled_dm.console import console
from untitled_dm.exceptions import ConfigDecodeError, MalformedArgumentError
from untitled_dm.logger import logger
from untitled_dm.menu import DEFAULT_TITLE, Menu
from untitled_dm.registry import CommandRegistry
from untitled_dm.state import NO_SELECTION, SelectionState
from untitled_dm.themes import OneColors
from untitled_dm.utils import get_program_invocation, setup_logging
from untitled_dm.version import __version__


def get_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="untitled-dm",
        description="Pick a session or command from a menu and launch it.",
        epilog='Example: untitled-dm -e "Shell=bash -l" -e "Sway=sway"',
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Print program version and exit",
    )
    parser.add_argument(
        "-q",
        dest="quit_on_error",
        action="store_true",
        help="Quit on command error",
    )
    parser.add_argument(
        "-c",
        dest="config",
        default=DEFAULT_CONFIG_PATH,
        metavar="PATH",
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-d",
        dest="default_selection",
        type=int,
        default=NO_SELECTION,
        metavar="INDEX",
        help="Index to default selection. No selection if negative",
    )
    parser.add_argument(
        "-e",
        dest="extra_commands",
        action="append",
        default=[],
        metavar='"NAME=PROGRAM ARG..."',
        help="Additional command, may be repeated. Quote arguments containing spaces",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to the console",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write logs to PATH",
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        help="Console log format (default: cli, or json inside containers)",
    )
    return parser


def build_menu(args: Namespace) -> Menu:
    """
    Build the menu from parsed arguments.

    Raises:
        ConfigDecodeError: If the configuration file cannot be decoded.
        MalformedArgumentError: If an `-e` command is malformed.
    """
    config = load_config(args.config)
    registry = CommandRegistry.build(args.extra_commands, config.commands)
    state = SelectionState(
        registry.choices,
        selected=args.default_selection,
        quit_on_error=args.quit_on_error,
    )
    return Menu(registry, state, title=config.title or DEFAULT_TITLE)


def main(argv: Sequence[str] | None = None) -> int:
    args = get_arg_parser().parse_args(argv)
    if args.version:
        console.print(f"{get_program_invocation()} v{__version__}", highlight=False)
        return 0

    setup_logging(
        mode=args.log_mode,
        log_filename=args.log_file,
        json_log_to_file=args.log_mode == "json",
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        menu = build_menu(args)
    except (ConfigDecodeError, MalformedArgumentError) as error:
        logger.error("Startup failed: %s", error)
        console.print(
            f"[{OneColors.DARK_RED}]❌ {escape(str(error))}[/]", highlight=False
        )
        return 1

    try:
        failure = asyncio.run(menu.run())
    except Exception as error:
        logger.exception("Menu loop failed")
        console.print(
            f"[{OneColors.DARK_RED}]❌ Menu failed:[/] {escape(str(error))}",
            highlight=False,
        )
        return 1

    if failure:
        console.print(
            f"[{OneColors.LIGHT_RED_b}]Could not start selected option:[/] "
            f"{escape(failure.error)}",
            highlight=False,
        )
        if failure.output:
            console.print(failure.output, markup=False, highlight=False, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
