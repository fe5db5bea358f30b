"""
Proportional segment allocation for the category line and chart bars.

Each category gets round(percentage / 100 * width) columns, taken in order
from a shared budget. Rounding alone can leave the line a few columns short
or long, so the allocation is clipped to the remaining budget and whatever
is left over goes to the last category. The segments therefore always add
up to exactly the requested width.
"""

import math
from collections.abc import Iterable, Sequence

from monke.domain.domain import CategoryTotal
from monke.reports.aggregation import percentage


def allocate_segments(categories: Sequence[CategoryTotal], total: float, width: int) -> list[int]:
    """
    Compute segment lengths for categories given in chart order.

    Parameters
    ----------
    categories : Sequence[CategoryTotal]
        Categories in the order they are drawn.
    total : float
        Grand total the percentages are computed against.
    width : int
        Total number of columns to fill; must be positive.

    Returns
    -------
    list[int]
        One length per category. Sums to ``width`` whenever ``categories``
        is not empty; empty input gives an empty list.
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    lengths: list[int] = []
    remaining = width
    for item in categories:
        scaled = percentage(item.amount, total) / 100 * width
        # An overflowed total gives inf/inf = nan; such a share counts as 0.
        if not math.isfinite(scaled):
            scaled = 0.0
        # Halves round away from zero, not to even.
        wanted = int(_round_half_up(scaled))
        length = max(0, min(wanted, remaining))
        lengths.append(length)
        remaining -= length

    if lengths and remaining > 0:
        lengths[-1] += remaining
    return lengths


def _round_half_up(value: float) -> float:
    if value < 0:
        return -_round_half_up(-value)
    return float(int(value + 0.5))


def assign_palette(names: Iterable[str], palette_size: int) -> dict[str, int]:
    """
    Give each category a palette index in alphabetical order, cycling.

    The assignment depends only on the set of names, so a category keeps
    its color between the table, the line and the chart.
    """
    if palette_size < 1:
        raise ValueError("palette_size must be positive")
    return {name: index % palette_size for index, name in enumerate(sorted(set(names)))}
