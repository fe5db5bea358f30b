from dataclasses import dataclass
from typing import Final

UNCATEGORIZED: Final[str] = "Uncategorized"

# Capped at 28 so every month has the day.
MIN_DAY: Final[int] = 1
MAX_DAY: Final[int] = 28


def fold_category(category: str | None) -> str:
    """Fold an empty or missing category into UNCATEGORIZED."""
    if category:
        return category
    return UNCATEGORIZED


@dataclass
class Expense:
    id: int
    title: str
    amount: float
    day: int
    category: str | None = None

    @property
    def display_category(self) -> str:
        return fold_category(self.category)


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    amount: float
