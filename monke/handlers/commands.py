"""
Handlers for the read and maintenance commands: `ls`, `chart` and `clear`.

- ls: every expense as a table, the category line and totals;
- chart: categories ranked by amount with proportional bars;
- clear: delete everything after an interactive confirmation.

register_commands() is the single place where these handlers are attached
to the argparse sub-parsers.
"""

import logging
from argparse import Namespace
from typing import Final

from monke.handlers.context import CommandContext
from monke.render.terminal import render_chart, render_listing
from monke.reports.aggregation import summarize

logger = logging.getLogger(__name__)

CONFIRM_PROMPT: Final[str] = (
    "Are you sure you want to delete ALL expenses? This cannot be undone. [y/N]: "
)
AFFIRMATIVE_ANSWERS: Final[frozenset[str]] = frozenset({"y", "yes"})


def list_expenses(args: Namespace, ctx: CommandContext) -> int:
    """
    Handler for `ls`.

    Reads all expenses ordered by day and renders the table, the category
    line and the totals. An empty store only prints a notice.
    """
    expenses = ctx.repository.list_expenses()
    if not expenses:
        ctx.console.print("No expenses found.")
        return 0

    summary = summarize(expenses)
    render_listing(ctx.console, expenses, summary, ctx.today(), ctx.line_width)
    logger.debug("Listed %s expenses, total %.2f", summary.count, summary.total)
    return 0


def show_chart(args: Namespace, ctx: CommandContext) -> int:
    """Handler for `chart`."""
    summary = summarize(ctx.repository.list_expenses())
    if not render_chart(ctx.console, summary, ctx.chart_width):
        ctx.console.print("No categorized expenses found to chart.")
    return 0


def is_confirmed(answer: str | None) -> bool:
    """True only for "y" or "yes", ignoring case and surrounding whitespace."""
    return (answer or "").strip().lower() in AFFIRMATIVE_ANSWERS


def clear_expenses(args: Namespace, ctx: CommandContext) -> int:
    """
    Handler for `clear`.

    Anything but an explicit yes, including end of input, cancels without
    touching the store.
    """
    try:
        answer = ctx.read_line(CONFIRM_PROMPT)
    except EOFError:
        answer = ""

    if not is_confirmed(answer):
        ctx.console.print("Operation cancelled.")
        return 0

    deleted = ctx.repository.clear()
    logger.info("Cleared %s expenses", deleted)
    ctx.console.print("All expenses have been deleted.")
    return 0


def register_commands(subparsers) -> None:
    """Attach `ls`, `chart` and `clear` to the CLI parser."""
    subparsers.add_parser("ls", help="List all expenses").set_defaults(handler=list_expenses)
    subparsers.add_parser(
        "chart", help="Display category expenses as a simple chart"
    ).set_defaults(handler=show_chart)
    subparsers.add_parser(
        "clear", help="Delete all expenses from the database"
    ).set_defaults(handler=clear_expenses)
