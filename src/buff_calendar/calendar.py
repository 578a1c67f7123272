"""End-to-end calendar build: window, expansion, segmentation and layout."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import aiohttp

from .const import DEFAULT_TOTAL_DAYS
from .config import CalendarConfig
from .exceptions import EventValidationError, UnknownRecurrenceType
from .expander import expand_events
from .grid import build_grid
from .models import Event, GridDescriptor, Occurrence, Segment, Window
from .segmenter import segment_by_day
from .source import EventSource, load_events_or_demo
from .view import MonthView, build_calendar_view
from .window import compute_window

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarResult:
    """Everything a renderer needs for one calendar page."""

    window: Window
    occurrences: tuple[Occurrence, ...]
    buckets: list[list[Segment]]
    grids: list[GridDescriptor]
    months: list[MonthView]
    errors: tuple[EventValidationError, ...] = field(default_factory=tuple)
    warnings: tuple[UnknownRecurrenceType, ...] = field(default_factory=tuple)
    used_demo_data: bool = False


def build_calendar(
    records: Iterable[Event | dict[str, Any]],
    today: datetime,
    total_days: int = DEFAULT_TOTAL_DAYS,
    *,
    used_demo_data: bool = False,
) -> CalendarResult:
    """Lay out ``records`` over the ``total_days`` starting with ``today``.

    ``today`` must be an aware datetime in the zone the calendar is drawn in;
    it sets both the window start and the highlighted day.
    """
    window = compute_window(today, total_days)
    expansion = expand_events(records, window.start, window.end)
    buckets = segment_by_day(expansion.occurrences, window.start, window.total_days)
    grids = build_grid(window.start, window.total_days)
    months = build_calendar_view(buckets, grids, window.total_days, today)
    return CalendarResult(
        window=window,
        occurrences=expansion.occurrences,
        buckets=buckets,
        grids=grids,
        months=months,
        errors=expansion.errors,
        warnings=expansion.warnings,
        used_demo_data=used_demo_data,
    )


async def async_build_calendar(
    config: CalendarConfig,
    now: datetime,
    session: aiohttp.ClientSession | None = None,
) -> CalendarResult:
    """Load events from the configured source and build the calendar.

    ``now`` is converted into the configured zone. When the source fails and
    ``demo_fallback`` is off, the source error propagates.
    """
    today = now.astimezone(config.tzinfo)
    async with EventSource(
        config.events_url, session, timeout=config.request_timeout
    ) as source:
        if config.demo_fallback:
            records, used_demo = await load_events_or_demo(source, today)
        else:
            records, used_demo = await source.async_get_records(), False

    result = build_calendar(records, today, config.total_days, used_demo_data=used_demo)
    if result.errors:
        _LOGGER.warning(
            "%d of the events from %s were rejected", len(result.errors), config.events_url
        )
    return result
