"""Tests for merging day buckets into month views."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from buff_calendar.grid import build_grid
from buff_calendar.models import Occurrence
from buff_calendar.segmenter import segment_by_day
from buff_calendar.view import DayCell, SpacerCell, build_calendar_view

UTC = ZoneInfo("UTC")

RANGE_START = datetime(2026, 4, 20, tzinfo=UTC)
TOTAL_DAYS = 15


def _ts(year: int, month: int, day: int, hour: int = 0) -> int:
    return int(datetime(year, month, day, hour, tzinfo=UTC).timestamp())


def _build(occurrences, today=datetime(2026, 4, 22, 15, 0, tzinfo=UTC)):
    buckets = segment_by_day(occurrences, RANGE_START, TOTAL_DAYS)
    grids = build_grid(RANGE_START, TOTAL_DAYS)
    return build_calendar_view(buckets, grids, TOTAL_DAYS, today)


class TestMonthViews:
    def test_one_view_per_month(self):
        months = _build([])
        assert [m.month_start for m in months] == [
            datetime(2026, 4, 1, tzinfo=UTC),
            datetime(2026, 5, 1, tzinfo=UTC),
        ]

    def test_cells_include_spacers(self):
        april, may = _build([])
        # April 2026 starts on a Wednesday and ends on a Thursday.
        assert april.cells[:3] == (SpacerCell(), SpacerCell(), SpacerCell())
        assert isinstance(april.cells[3], DayCell)
        assert len(april.cells) == 3 + 30 + 2
        # May 2026 starts on a Friday and ends on a Sunday.
        assert len(may.cells) == 5 + 31 + 6
        assert all(len(week) == 7 for week in may.weeks)

    def test_only_today_is_highlighted(self):
        months = _build([])
        today_cells = [c for m in months for c in m.day_cells if c.is_today]
        assert [c.day for c in today_cells] == [datetime(2026, 4, 22, tzinfo=UTC)]

    def test_outside_days_are_flagged(self):
        april, may = _build([])
        assert not april.day_cells[0].in_range
        assert april.day_cells[19].in_range
        assert may.day_cells[3].in_range
        assert not may.day_cells[4].in_range


class TestSegmentsInCells:
    def test_segments_land_on_their_day(self):
        occs = [
            Occurrence(id="a", type="triple_xp", start_time=_ts(2026, 4, 30, 22), end_time=_ts(2026, 5, 1, 2)),
            Occurrence(id="b", type="mystery_bonus", start_time=_ts(2026, 4, 21, 9), end_time=_ts(2026, 4, 21, 10)),
        ]
        april, may = _build(occs)

        apr_21 = april.day_cells[20]
        assert [sv.segment.id for sv in apr_21.segments] == ["b"]
        assert apr_21.segments[0].label == "Mystery Bonus"

        apr_30 = april.day_cells[29]
        may_1 = may.day_cells[0]
        assert [sv.label for sv in apr_30.segments] == ["Triple XP"]
        assert [sv.label for sv in may_1.segments] == ["Triple XP"]

    def test_outside_days_have_no_segments(self):
        occs = [Occurrence(id="a", type="double_xp", start_time=_ts(2026, 4, 5, 9), end_time=_ts(2026, 4, 5, 10))]
        april, _ = _build(occs)
        assert all(cell.segments == () for cell in april.day_cells)
