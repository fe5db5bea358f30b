"""
Terminal rendering of expense reports with rich.

This layer is the only place that knows about colors: it maps palette
indices and DayStatus values coming from monke.reports to rich styles and
prints tables, the category line and the chart to a Console.
"""

from collections.abc import Mapping, Sequence
from datetime import date
from typing import Final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from monke.domain.domain import Expense
from monke.reports.aggregation import Summary, chart_order, chartable, display_order, percentage
from monke.reports.segments import allocate_segments, assign_palette
from monke.reports.status import DayStatus, classify_day

STATUS_GLYPH: Final[str] = "●"
SEGMENT_GLYPH: Final[str] = "■"

CATEGORY_PALETTE: Final[tuple[str, ...]] = (
    "color(21)",   # Blue 3
    "color(51)",   # Cyan 1
    "color(141)",  # Medium Purple 1
    "color(43)",   # Cyan 3
    "color(178)",  # Gold 3
    "color(130)",  # Dark Orange 3
    "color(108)",  # Dark Sea Green
    "color(97)",   # Medium Purple 4
    "color(243)",  # Grey 46
    "color(65)",   # Dark Sea Green 4
)

STATUS_STYLES: Final[dict[DayStatus, str]] = {
    DayStatus.PAST: "color(40)",
    DayStatus.TODAY: "blink color(226)",
    DayStatus.NEAR_FUTURE: "color(198)",
    DayStatus.MID_FUTURE: "color(208)",
    DayStatus.FUTURE: "",
}


def category_styles(names: Sequence[str]) -> dict[str, str]:
    """Rich style per category name."""
    indices = assign_palette(names, len(CATEGORY_PALETTE))
    return {name: CATEGORY_PALETTE[index] for name, index in indices.items()}


def format_amount(amount: float) -> str:
    return f"{amount:.2f}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def render_expense_table(
    console: Console,
    expenses: Sequence[Expense],
    styles: Mapping[str, str],
    today: date,
) -> None:
    """Print one row per expense with title, amount, date, category and status."""
    month_name = today.strftime("%B")

    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column("Title", justify="left")
    table.add_column("Amount", justify="right")
    table.add_column("Date", justify="left")
    table.add_column("Category", justify="left")
    table.add_column("Status", justify="center")

    for expense in expenses:
        category = expense.display_category
        status = classify_day(expense.day, today.day)
        table.add_row(
            Text(expense.title),
            format_amount(expense.amount),
            f"{expense.day:02d} {month_name}",
            Text(category, style=styles.get(category, "")),
            Text(STATUS_GLYPH, style=STATUS_STYLES[status]),
        )

    console.print(table)


def build_category_line(summary: Summary, styles: Mapping[str, str], width: int) -> Text:
    """A single line of width glyphs split between categories by share."""
    ordered = chart_order(summary.category_totals)
    lengths = allocate_segments(ordered, summary.total, width)

    line = Text()
    for item, length in zip(ordered, lengths):
        if length:
            line.append(SEGMENT_GLYPH * length, style=styles.get(item.name, ""))
    return line


def render_category_line(console: Console, summary: Summary, styles: Mapping[str, str], width: int) -> None:
    console.print(build_category_line(summary, styles, width), no_wrap=True, crop=False)


def render_summary(console: Console, summary: Summary, styles: Mapping[str, str]) -> None:
    """Grand total followed by the per-category breakdown in display order."""
    console.print()
    console.print(f"Total Amount: {format_amount(summary.total)}")
    if not summary.category_totals:
        return

    console.print("Category Totals:")
    for name in display_order(summary.category_totals):
        amount = summary.category_totals[name]
        line = Text("  - ")
        line.append(name, style=styles.get(name, ""))
        line.append(f": {format_amount(amount)} ({format_percentage(percentage(amount, summary.total))})")
        console.print(line)


def render_listing(console: Console, expenses: Sequence[Expense], summary: Summary, today: date, width: int) -> None:
    """Full `ls` output: table, category line and totals."""
    styles = category_styles(list(summary.category_totals))
    render_expense_table(console, expenses, styles, today)
    render_category_line(console, summary, styles, width)
    render_summary(console, summary, styles)


def render_chart(console: Console, summary: Summary, width: int) -> bool:
    """
    Print categories ranked by amount with a proportional bar each.

    Categories whose total is not positive are left out. The bars share
    one budget of ``width`` columns.

    Returns
    -------
    bool
        False when there was nothing to chart.
    """
    totals = chartable(summary.category_totals)
    if not totals:
        return False

    grand_total = sum(totals.values())
    ordered = chart_order(totals)
    lengths = allocate_segments(ordered, grand_total, width)
    styles = category_styles(list(summary.category_totals))

    console.print("Category Expense Chart:")
    console.print(f"Total: {format_amount(grand_total)}")
    console.print()

    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column("Category", justify="left")
    table.add_column("Amount", justify="right")
    table.add_column("Percent", justify="right")
    table.add_column("Chart", justify="left", no_wrap=True)

    for item, length in zip(ordered, lengths):
        style = styles.get(item.name, "")
        table.add_row(
            Text(item.name, style=style),
            format_amount(item.amount),
            format_percentage(percentage(item.amount, grand_total)),
            Text(SEGMENT_GLYPH * length, style=style),
        )

    console.print(table)
    return True
