"""
Aggregation of expenses into category totals
Grand total, per-category sums, percentages and the two category orderings
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from monke.domain.domain import UNCATEGORIZED, CategoryTotal, Expense


@dataclass
class Summary:
    """Grand total plus per-category totals keyed by display name."""

    total: float = 0.0
    category_totals: dict[str, float] = field(default_factory=dict)
    count: int = 0

    def percentage_of(self, category: str) -> float:
        return percentage(self.category_totals.get(category, 0.0), self.total)


def summarize(expenses: Iterable[Expense]) -> Summary:
    """
    Sum expenses overall and per category.

    Empty or missing categories are folded into "Uncategorized". The
    resulting mapping keeps first-seen order, which carries no meaning:
    callers pick display_order() or chart_order().
    """
    summary = Summary()
    for expense in expenses:
        name = expense.display_category
        summary.category_totals[name] = summary.category_totals.get(name, 0.0) + expense.amount
        summary.total += expense.amount
        summary.count += 1
    return summary


def percentage(amount: float, total: float) -> float:
    """Share of amount in total, in percent; 0 when the total is 0."""
    if total == 0:
        return 0.0
    return amount / total * 100


def display_order(names: Iterable[str]) -> list[str]:
    """Case-insensitive alphabetical order with "Uncategorized" always last."""
    return sorted(names, key=lambda name: (name == UNCATEGORIZED, name.lower()))


def chart_order(category_totals: Mapping[str, float]) -> list[CategoryTotal]:
    """Descending by amount; the sort is stable so ties keep first-seen order."""
    return sorted(
        (CategoryTotal(name, amount) for name, amount in category_totals.items()),
        key=lambda item: item.amount,
        reverse=True,
    )


def chartable(category_totals: Mapping[str, float]) -> dict[str, float]:
    """Only categories whose total is positive."""
    return {name: amount for name, amount in category_totals.items() if amount > 0}
