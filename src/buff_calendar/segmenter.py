"""Split occurrences into per-calendar-day segments."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from .dates import add_days, day_offset, end_of_day, from_millis, start_of_day, to_millis
from .models import Occurrence, Segment
from .window import compute_window

_LOGGER = logging.getLogger(__name__)


def segment_by_day(
    occurrences: Iterable[Occurrence],
    window_start: datetime,
    total_days: int,
) -> list[list[Segment]]:
    """Bucket occurrence segments by day offset from ``window_start``.

    Returns a list of ``total_days`` buckets. Each occurrence is clipped to
    the window and cut at every local midnight it crosses; consecutive pieces
    meet at 23:59:59.999 / 00:00:00.000. Buckets are sorted by start time,
    keeping input order for equal starts.
    """
    if total_days < 1:
        raise ValueError(f"total_days must be at least 1, got {total_days}")

    tz = window_start.tzinfo
    buckets: list[list[Segment]] = [[] for _ in range(total_days)]
    window_start_ms = to_millis(window_start)
    window_end_ms = to_millis(compute_window(window_start, total_days).end)

    for occ in occurrences:
        occ_start_ms = max(occ.start_time * 1000, window_start_ms)
        occ_end_ms = min(occ.end_time * 1000, window_end_ms)
        if occ_end_ms < occ_start_ms:
            continue

        day = start_of_day(from_millis(occ_start_ms, tz))
        last_day_ms = to_millis(start_of_day(from_millis(occ_end_ms, tz)))
        while to_millis(day) <= last_day_ms:
            seg_start_ms = max(occ_start_ms, to_millis(day))
            seg_end_ms = min(occ_end_ms, to_millis(end_of_day(day)))
            index = day_offset(day, window_start)
            if 0 <= index < total_days and seg_end_ms >= seg_start_ms:
                buckets[index].append(
                    Segment(
                        id=occ.id,
                        type=occ.type,
                        start=from_millis(seg_start_ms, tz),
                        end=from_millis(seg_end_ms, tz),
                    )
                )
            day = add_days(day, 1)

    for bucket in buckets:
        bucket.sort(key=lambda seg: seg.start_ms)

    _LOGGER.debug(
        "Segmented into %d buckets holding %d segments",
        total_days,
        sum(len(bucket) for bucket in buckets),
    )
    return buckets
