"""
Command-line entry point.

Parses the arguments, opens the expense store once for the whole command,
dispatches to the handler and turns MonkeError into a diagnostic and exit
status 1.
"""

import argparse
import logging
import sys
from functools import partial
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from monke import __version__
from monke.config.config import Config
from monke.core.errors import MonkeError
from monke.core.logger import setup_logger
from monke.core.validators import validate_environment
from monke.handlers import register_handlers
from monke.handlers.context import CommandContext
from monke.storage.storage import open_repository

logger = logging.getLogger("monke")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monke",
        description="Monke is a simple expense tracker CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  monke add -t Rent -a 1200 -d 1 -c Housing
  monke add --title Coffee --amount 3.5 --day 14
  monke ls
  monke chart
  monke clear
        """,
    )
    parser.add_argument("--db", type=Path, default=None, help=f"Expense database (default: {Config.DB_PATH})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    register_handlers(subparsers)
    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Run one command and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger("monke", "DEBUG" if args.verbose else Config.LOG_LEVEL)

    if args.command is None:
        parser.print_help()
        return 0

    console = console or Console()
    err_console = Console(stderr=True)

    try:
        validate_environment()
        with open_repository(args.db or Config.DB_PATH) as repository:
            ctx = CommandContext(
                repository=repository,
                console=console,
                read_line=partial(console.input, markup=False),
                line_width=Config.LINE_WIDTH,
                chart_width=Config.CHART_WIDTH,
            )
            return args.handler(args, ctx)
    except MonkeError as e:
        logger.error("Command %s failed: %s", args.command, e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        return 1
    except KeyboardInterrupt:
        return 130


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
