"""
Tests for category aggregation, percentages and orderings.
"""

import random

import pytest

from monke.domain.domain import Expense
from monke.reports.aggregation import (
    chart_order,
    chartable,
    display_order,
    percentage,
    summarize,
)


class TestSummarize:
    """Tests for grand and per-category totals."""

    def test_worked_example(self, sample_expenses):
        """Test totals for the Food/Uncategorized example."""
        summary = summarize(sample_expenses)
        assert summary.total == pytest.approx(100.0)
        assert summary.category_totals == {"Food": 40.0, "Uncategorized": 60.0}
        assert summary.count == 3

    def test_none_and_empty_fold_together(self):
        """Test that None and "" end up in the same bucket."""
        summary = summarize([
            Expense(id=1, title="a", amount=1.5, day=1, category=None),
            Expense(id=2, title="b", amount=2.5, day=1, category=""),
        ])
        assert summary.category_totals == {"Uncategorized": 4.0}

    def test_empty_input(self):
        """Test that no expenses give a zero total and no categories."""
        summary = summarize([])
        assert summary.total == 0.0
        assert summary.category_totals == {}

    def test_category_totals_add_up_to_total(self):
        """Test that per-category totals sum to the grand total."""
        rng = random.Random(7)
        names = ["Food", "Rent", "", None, "fun", "Travel"]
        expenses = [
            Expense(id=i, title=f"e{i}", amount=round(rng.uniform(0, 500), 2), day=rng.randint(1, 28),
                    category=rng.choice(names))
            for i in range(200)
        ]
        summary = summarize(expenses)
        assert sum(summary.category_totals.values()) == pytest.approx(summary.total)

    def test_percentage_of(self, sample_expenses):
        """Test the percentage helper on the summary."""
        summary = summarize(sample_expenses)
        assert summary.percentage_of("Food") == pytest.approx(40.0)
        assert summary.percentage_of("Missing") == 0.0


class TestPercentage:
    """Tests for percentage()."""

    def test_zero_total(self):
        """Test that a zero total gives 0% instead of dividing by zero."""
        assert percentage(25.0, 0.0) == 0.0

    def test_share(self):
        """Test the plain share computation."""
        assert percentage(30.0, 120.0) == pytest.approx(25.0)


class TestOrderings:
    """Tests for display and chart ordering."""

    def test_display_order_uncategorized_last(self):
        """Test alphabetical, case-insensitive order with Uncategorized last."""
        names = ["zeta", "Uncategorized", "alpha", "Beta", "Vacation"]
        assert display_order(names) == ["alpha", "Beta", "Vacation", "zeta", "Uncategorized"]

    def test_display_order_ignores_amounts(self):
        """Test that a large Uncategorized total still sorts last."""
        totals = {"Uncategorized": 1000.0, "A": 1.0}
        assert display_order(totals) == ["A", "Uncategorized"]

    def test_chart_order_descending(self, sample_expenses):
        """Test the worked example ranks Uncategorized first."""
        ordered = chart_order(summarize(sample_expenses).category_totals)
        assert [item.name for item in ordered] == ["Uncategorized", "Food"]

    def test_chart_order_non_increasing(self):
        """Test that amounts never increase along the chart order."""
        totals = {"a": 5.0, "b": 50.0, "c": 0.0, "d": 50.0, "e": -3.0, "f": 12.5}
        amounts = [item.amount for item in chart_order(totals)]
        assert all(x >= y for x, y in zip(amounts, amounts[1:]))

    def test_chart_order_ties_keep_first_seen(self):
        """Test that equal totals keep their insertion order."""
        totals = {"second": 10.0, "first": 10.0, "big": 20.0}
        assert [item.name for item in chart_order(totals)] == ["big", "second", "first"]

    def test_chartable_drops_non_positive(self):
        """Test that zero and negative totals are excluded from charts."""
        assert chartable({"a": 0.0, "b": -4.0, "c": 2.0}) == {"c": 2.0}
