"""
Validators for command input and configuration
"""

import math

from monke.config.config import Config
from monke.core.errors import ValidationError
from monke.domain.domain import MAX_DAY, MIN_DAY


def validate_title(title: str | None) -> str:
    """Return the stripped title or raise ValidationError if it is empty."""
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationError("title flag is required.")
    return cleaned


def validate_amount(amount: float) -> float:
    """Reject inf and nan; any finite amount is accepted."""
    if not math.isfinite(amount):
        raise ValidationError(f"Invalid amount '{amount}'. Please provide a finite number.")
    return amount


def validate_day(day: int) -> int:
    """Accept a day of the month between MIN_DAY and MAX_DAY inclusive."""
    if day < MIN_DAY or day > MAX_DAY:
        raise ValidationError(
            f"Invalid day '{day}'. Please provide a day between {MIN_DAY} and {MAX_DAY}."
        )
    return day


def validate_environment() -> None:
    """Startup check of the loaded configuration."""
    Config.validate()
