"""
Everything a command handler needs, passed in explicitly.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from rich.console import Console

from monke.config.config import Config
from monke.storage.storage import ExpenseRepository


@dataclass
class CommandContext:
    repository: ExpenseRepository
    console: Console
    read_line: Callable[[str], str]
    today: Callable[[], date] = date.today
    line_width: int = Config.LINE_WIDTH
    chart_width: int = Config.CHART_WIDTH
