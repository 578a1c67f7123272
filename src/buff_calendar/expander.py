"""Expand recurring events into concrete occurrences over a window."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime, tzinfo
from typing import Any, Callable

from .dates import (
    add_days,
    add_months_preserving_day,
    add_weeks,
    from_timestamp,
    to_millis,
    to_timestamp,
)
from .exceptions import EventValidationError, MalformedEvent, UnknownRecurrenceType
from .models import Event, ExpansionResult, Occurrence, RecurrenceType

_LOGGER = logging.getLogger(__name__)

_STEPS: dict[RecurrenceType, Callable[[datetime, int], datetime]] = {
    RecurrenceType.DAILY: add_days,
    RecurrenceType.WEEKLY: add_weeks,
    RecurrenceType.MONTHLY: add_months_preserving_day,
}


def overlaps(start_ms: int, end_ms: int, window_start_ms: int, window_end_ms: int) -> bool:
    """Inclusive overlap test; touching either window edge counts."""
    return end_ms >= window_start_ms and start_ms <= window_end_ms


def expand_events(
    records: Iterable[Event | dict[str, Any]],
    window_start: datetime,
    window_end: datetime,
) -> ExpansionResult:
    """Resolve every event in ``records`` to the occurrences that touch the window.

    Raw dict records are parsed first. A record that is malformed, whose end
    is not after its start, or whose times fall outside the representable
    date range is reported in ``errors`` and skipped; the rest of the batch
    is still expanded. Recurring events are stepped in the local
    calendar of ``window_start``.

    Occurrences keep the input order of their events and, within one event,
    chronological order.
    """
    tz = window_start.tzinfo
    occurrences: list[Occurrence] = []
    errors: list[EventValidationError] = []
    warnings: list[UnknownRecurrenceType] = []

    for index, record in enumerate(records):
        try:
            event = record if isinstance(record, Event) else Event.from_record(record, index=index)
            event.validate(index=index)
        except EventValidationError as err:
            _LOGGER.warning("Skipping event at position %s: %s", index, err)
            errors.append(err)
            continue

        if event.is_recurring and event.recurrence is None:
            warning = UnknownRecurrenceType(
                f"Event {event.id} has unknown recurrence type "
                f"{event.recurrence_type!r}; using its base occurrence only",
                recurrence_type=event.recurrence_type,
                event_id=event.id,
                index=index,
            )
            _LOGGER.warning("%s", warning)
            warnings.append(warning)

        try:
            expanded = list(_expand_event(event, window_start, window_end, tz))
        except (OverflowError, ValueError, OSError) as err:
            error = MalformedEvent(
                f"Event {event.id} cannot be placed on the calendar: {err}",
                event_id=event.id,
                index=index,
            )
            _LOGGER.warning("Skipping event at position %s: %s", index, error)
            errors.append(error)
            continue
        occurrences.extend(expanded)

    _LOGGER.debug(
        "Expanded %d occurrences (%d rejected, %d with fallback)",
        len(occurrences),
        len(errors),
        len(warnings),
    )
    return ExpansionResult(
        occurrences=tuple(occurrences),
        errors=tuple(errors),
        warnings=tuple(warnings),
    )


def _expand_event(
    event: Event,
    window_start: datetime,
    window_end: datetime,
    tz: tzinfo | None,
) -> Iterator[Occurrence]:
    window_start_ms = to_millis(window_start)
    window_end_ms = to_millis(window_end)

    if not event.is_recurring:
        if overlaps(
            event.start_time * 1000, event.end_time * 1000, window_start_ms, window_end_ms
        ):
            yield event.occurrence_at(event.start_time)
        return

    step = _STEPS.get(event.recurrence)
    duration_ms = event.duration * 1000
    occurrence_start = from_timestamp(event.start_time, tz)
    while to_millis(occurrence_start) <= window_end_ms:
        start_ms = to_millis(occurrence_start)
        if overlaps(start_ms, start_ms + duration_ms, window_start_ms, window_end_ms):
            yield event.occurrence_at(to_timestamp(occurrence_start))
        if step is None:
            break
        occurrence_start = step(occurrence_start, 1)
