"""
Handler for the `add` command.

Validates the flags, stores one expense and confirms it to the user.
Validation happens before anything is written, so a rejected command
leaves the store untouched.
"""

import logging
from argparse import ArgumentParser, Namespace

from monke.core.validators import validate_amount, validate_day, validate_title
from monke.domain.domain import MAX_DAY, MIN_DAY
from monke.handlers.context import CommandContext

logger = logging.getLogger(__name__)


def add_expense(args: Namespace, ctx: CommandContext) -> int:
    """
    Insert a new expense from the parsed `add` flags.

    Parameters
    ----------
    args : Namespace
        Parsed flags: title, amount, day and optional category.
    ctx : CommandContext
        Open repository and output console.

    Returns
    -------
    int
        Process exit status.

    Raises
    ------
    ValidationError
        Empty title, non-finite amount or day outside 1..28.
    StorageError
        The insert failed.
    """
    title = validate_title(args.title)
    amount = validate_amount(args.amount)
    day = validate_day(args.day)

    expense_id = ctx.repository.add(title, amount, day, args.category)
    logger.info("Expense added: id=%s %s %.2f (%s)", expense_id, title, amount, args.category)

    ctx.console.print(f"Expense added successfully for day {day}!")
    return 0


def register_expenses(subparsers) -> None:
    """Attach the `add` sub-command to the CLI parser."""
    parser: ArgumentParser = subparsers.add_parser("add", help="Add a new expense")
    parser.add_argument("-t", "--title", required=True, help="Title of the expense (required)")
    parser.add_argument("-a", "--amount", required=True, type=float, help="Amount of the expense (required)")
    parser.add_argument(
        "-d",
        "--day",
        required=True,
        type=int,
        help=f"Day of the month ({MIN_DAY}-{MAX_DAY}) for the expense (required)",
    )
    parser.add_argument("-c", "--category", default=None, help="Category of the expense (optional)")
    parser.set_defaults(handler=add_expense)
