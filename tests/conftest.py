"""
Shared fixtures for the monke test suite.

No test touches the real ~/.config/monke store: every database lives in
pytest's tmp_path.
"""

from datetime import date
from io import StringIO

import pytest
from rich.console import Console

from monke.domain.domain import Expense
from monke.handlers.context import CommandContext
from monke.storage.storage import open_repository


def make_console() -> Console:
    """Plain-text console writing into a StringIO buffer."""
    return Console(file=StringIO(), width=200, color_system=None, force_terminal=False)


def output_of(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "monke" / "monke.db"


@pytest.fixture
def repository(db_path):
    with open_repository(db_path) as repo:
        yield repo


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def make_context(repository, console):
    """Build a CommandContext with a scripted answer for prompts."""

    def _make(answer: str = "", today: date = date(2026, 10, 17), **kwargs) -> CommandContext:
        def read_line(prompt: str) -> str:
            console.print(prompt, end="", markup=False)
            return answer

        return CommandContext(
            repository=repository,
            console=console,
            read_line=read_line,
            today=lambda: today,
            **kwargs,
        )

    return _make


@pytest.fixture
def sample_expenses():
    """The worked example: 10 and 30 on Food, 60 without a category."""
    return [
        Expense(id=1, title="A", amount=10.0, day=3, category="Food"),
        Expense(id=2, title="B", amount=30.0, day=12, category="Food"),
        Expense(id=3, title="C", amount=60.0, day=20, category=""),
    ]
