"""Compute the date window shown by the calendar."""

from __future__ import annotations

from datetime import datetime

from .const import DEFAULT_TOTAL_DAYS
from .dates import add_days, end_of_day, start_of_day
from .models import Window


def compute_window(today: datetime, total_days: int = DEFAULT_TOTAL_DAYS) -> Window:
    """Window starting at ``today``'s midnight and spanning ``total_days`` days."""
    if total_days < 1:
        raise ValueError(f"total_days must be at least 1, got {total_days}")
    start = start_of_day(today)
    return Window(
        start=start,
        end=end_of_day(add_days(start, total_days - 1)),
        total_days=total_days,
    )
