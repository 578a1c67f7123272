"""Month grid layout for a range of days."""

from __future__ import annotations

from datetime import datetime

from .dates import (
    add_days,
    add_months_preserving_day,
    align_to_week_end_saturday,
    align_to_week_start_sunday,
    day_offset,
    end_of_month,
    start_of_day,
    start_of_month,
    to_millis,
    weekday_index,
)
from .models import GridDay, GridDescriptor
from .window import compute_window


def months_in_range(range_start: datetime, total_days: int) -> list[datetime]:
    """First-of-month midnights for every month the range touches, in order."""
    months: list[datetime] = []
    month = start_of_month(range_start)
    last_month_ms = to_millis(start_of_month(compute_window(range_start, total_days).end))
    while to_millis(month) <= last_month_ms:
        months.append(month)
        month = add_months_preserving_day(month, 1)
    return months


def build_grid(range_start: datetime, total_days: int) -> list[GridDescriptor]:
    """Describe the Sunday-to-Saturday grid of each month in the range.

    Every day of each month is listed with its offset from ``range_start``;
    days before or after the range keep their (negative or too large) offset
    and are flagged as outside it.
    """
    if total_days < 1:
        raise ValueError(f"total_days must be at least 1, got {total_days}")

    origin = start_of_day(range_start)
    grids: list[GridDescriptor] = []
    for month_start in months_in_range(origin, total_days):
        month_end = end_of_month(month_start)
        grid_start = align_to_week_start_sunday(month_start)

        days: list[GridDay] = []
        day = month_start
        while to_millis(day) <= to_millis(month_end):
            offset = day_offset(day, origin)
            days.append(GridDay(day=day, day_offset=offset, in_range=0 <= offset < total_days))
            day = add_days(day, 1)

        grids.append(
            GridDescriptor(
                month_start=month_start,
                month_end=month_end,
                grid_start=grid_start,
                grid_end=align_to_week_end_saturday(month_end),
                leading_spacers=(
                    weekday_index(month_start)
                    if to_millis(grid_start) != to_millis(month_start)
                    else 0
                ),
                trailing_spacers=6 - weekday_index(month_end),
                days=tuple(days),
            )
        )
    return grids
