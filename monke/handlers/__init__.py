"""
Handlers Registry
Single place where every sub-command is attached to the parser
"""

from monke.handlers.commands import register_commands
from monke.handlers.expenses import register_expenses


def register_handlers(subparsers) -> None:
    """Register all command handlers."""
    register_expenses(subparsers)
    register_commands(subparsers)
