"""Tests for month grid alignment."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from buff_calendar.grid import build_grid, months_in_range

UTC = ZoneInfo("UTC")


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=UTC)


# =========================================================================== #
#  1. Month enumeration
# =========================================================================== #


class TestMonthsInRange:
    def test_single_month(self):
        assert months_in_range(_day(2026, 4, 10), 5) == [_day(2026, 4, 1)]

    def test_spans_two_months(self):
        assert months_in_range(_day(2026, 4, 20), 15) == [_day(2026, 4, 1), _day(2026, 5, 1)]

    def test_crosses_year(self):
        assert months_in_range(_day(2026, 12, 20), 20) == [_day(2026, 12, 1), _day(2027, 1, 1)]

    def test_default_sixty_one_days_from_late_january(self):
        # Jan 31 + 60 days lands on Apr 1.
        months = months_in_range(_day(2026, 1, 31), 61)
        assert [m.month for m in months] == [1, 2, 3, 4]


# =========================================================================== #
#  2. Alignment and spacers
# =========================================================================== #


class TestAlignment:
    def test_month_starting_wednesday(self):
        [april] = build_grid(_day(2026, 4, 1), 30)
        assert april.month_start == _day(2026, 4, 1)
        assert april.leading_spacers == 3
        assert april.grid_start == _day(2026, 3, 29)

    def test_trailing_spacers(self):
        [april] = build_grid(_day(2026, 4, 1), 30)
        # Apr 30 2026 is a Thursday.
        assert april.month_end == datetime(2026, 4, 30, 23, 59, 59, 999000, tzinfo=UTC)
        assert april.trailing_spacers == 2
        assert april.grid_end == _day(2026, 5, 2)
        assert april.weeks == 5

    def test_month_starting_sunday_has_no_leading_spacers(self):
        # Feb 2026 runs Sunday the 1st to Saturday the 28th.
        [february] = build_grid(_day(2026, 2, 1), 28)
        assert february.leading_spacers == 0
        assert february.grid_start == february.month_start
        assert february.trailing_spacers == 0
        assert february.weeks == 4

    def test_grid_cells_fill_whole_weeks(self):
        for grid in build_grid(_day(2026, 1, 1), 365):
            assert (grid.leading_spacers + len(grid.days) + grid.trailing_spacers) % 7 == 0


# =========================================================================== #
#  3. Day offsets
# =========================================================================== #


class TestDayOffsets:
    def test_offsets_relative_to_range_start(self):
        april, may = build_grid(_day(2026, 4, 20), 15)

        assert april.days[0].day_offset == -19
        assert not april.days[0].in_range
        assert april.days[19].day == _day(2026, 4, 20)
        assert april.days[19].day_offset == 0
        assert april.days[19].in_range
        assert april.days[-1].day_offset == 10

        assert may.days[0].day_offset == 11
        assert may.days[3].day_offset == 14
        assert may.days[3].in_range
        assert may.days[4].day_offset == 15
        assert not may.days[4].in_range
        assert len(may.days) == 31

    def test_offset_lookup(self):
        april, may = build_grid(_day(2026, 4, 20), 15)
        assert april.offset_of(_day(2026, 4, 25)) == 5
        assert may.offset_of(datetime(2026, 5, 4, 15, 30, tzinfo=UTC)) == 14
        assert may.offset_of(_day(2026, 5, 5)) is None
        assert april.offset_of(_day(2026, 4, 1)) is None
        assert april.offset_of(_day(2026, 5, 1)) is None

    def test_range_start_time_of_day_is_ignored(self):
        [april] = build_grid(datetime(2026, 4, 10, 17, 45, tzinfo=UTC), 3)
        assert [d.day_offset for d in april.days if d.in_range] == [0, 1, 2]

    def test_rejects_empty_range(self):
        with pytest.raises(ValueError):
            build_grid(_day(2026, 4, 1), 0)


class TestDstMonth:
    def test_march_in_new_york(self, new_york):
        [march] = build_grid(datetime(2026, 3, 1, tzinfo=new_york), 31)
        assert len(march.days) == 31
        assert [d.day_offset for d in march.days] == list(range(31))
        assert all(d.day.hour == 0 for d in march.days)
