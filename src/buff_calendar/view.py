"""Presentation model: month grids filled with labeled day segments.

This is the structure a renderer walks to draw the calendar. It carries no
markup; each month is a flat sequence of cells, seven per row.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from .dates import is_same_day
from .labels import type_label
from .models import GridDescriptor, Segment


@dataclass(frozen=True)
class SegmentView:
    """A segment with its display label."""

    segment: Segment
    label: str

    @classmethod
    def from_segment(cls, segment: Segment) -> SegmentView:
        return cls(segment=segment, label=type_label(segment.type))


@dataclass(frozen=True)
class SpacerCell:
    """Padding before the 1st or after the last day of a month."""


@dataclass(frozen=True)
class DayCell:
    """One calendar day in a month grid."""

    day: datetime  # local midnight
    day_offset: int
    in_range: bool
    is_today: bool
    segments: tuple[SegmentView, ...] = field(default_factory=tuple)


Cell = Union[SpacerCell, DayCell]


@dataclass(frozen=True)
class MonthView:
    """All cells of one month, leading and trailing spacers included."""

    month_start: datetime
    cells: tuple[Cell, ...]

    @property
    def weeks(self) -> list[tuple[Cell, ...]]:
        """Cells split into rows of seven, Sunday first."""
        return [self.cells[i : i + 7] for i in range(0, len(self.cells), 7)]

    @property
    def day_cells(self) -> list[DayCell]:
        return [cell for cell in self.cells if isinstance(cell, DayCell)]


def build_calendar_view(
    buckets: Sequence[Sequence[Segment]],
    grids: Sequence[GridDescriptor],
    total_days: int,
    today: datetime,
) -> list[MonthView]:
    """Merge day buckets into their month grids.

    ``today`` is passed in rather than read from the clock so the result is
    deterministic.
    """
    months: list[MonthView] = []
    for grid in grids:
        cells: list[Cell] = [SpacerCell() for _ in range(grid.leading_spacers)]
        for grid_day in grid.days:
            in_range = grid_day.in_range and grid_day.day_offset < total_days
            segments = buckets[grid_day.day_offset] if in_range else ()
            cells.append(
                DayCell(
                    day=grid_day.day,
                    day_offset=grid_day.day_offset,
                    in_range=in_range,
                    is_today=is_same_day(grid_day.day, today),
                    segments=tuple(SegmentView.from_segment(seg) for seg in segments),
                )
            )
        cells.extend(SpacerCell() for _ in range(grid.trailing_spacers))
        months.append(MonthView(month_start=grid.month_start, cells=tuple(cells)))
    return months
