"""
Status of an expense day relative to today.
"""

from enum import StrEnum


class DayStatus(StrEnum):
    PAST = "past"
    TODAY = "today"
    NEAR_FUTURE = "near_future"  # 1-3 days ahead
    MID_FUTURE = "mid_future"  # 4-5 days ahead
    FUTURE = "future"


def classify_day(expense_day: int, current_day: int) -> DayStatus:
    """Bucket an expense day against the current day of the month."""
    if expense_day == current_day:
        return DayStatus.TODAY
    if expense_day < current_day:
        return DayStatus.PAST

    days_ahead = expense_day - current_day
    if days_ahead <= 3:
        return DayStatus.NEAR_FUTURE
    if days_ahead <= 5:
        return DayStatus.MID_FUTURE
    return DayStatus.FUTURE
