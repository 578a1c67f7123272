"""Value types for events, occurrences, segments and month grids."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import voluptuous as vol

from ._validation import validate_event_record
from .dates import day_offset, to_millis, to_timestamp
from .exceptions import (
    EventValidationError,
    InvalidInterval,
    MalformedEvent,
    UnknownRecurrenceType,
)


class RecurrenceType(str, enum.Enum):
    """Recurrence rules understood by the expander."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class Event:
    """A buff event as supplied by the event source."""

    id: str
    type: str
    start_time: int  # Unix seconds
    end_time: int  # Unix seconds
    recurring: bool = False
    recurrence_type: str = RecurrenceType.NONE.value

    @classmethod
    def from_record(cls, data: Any, *, index: int | None = None) -> Event:
        """Construct from a raw record dict.

        Args:
            data: Record as decoded from the events document.
            index: Position of the record in its batch, for error reporting.

        Raises:
            MalformedEvent: If a required field is missing or not numeric.
        """
        try:
            record = validate_event_record(data)
        except vol.Invalid as err:
            event_id = data.get("id") if isinstance(data, dict) else None
            raise MalformedEvent(
                f"Malformed event record: {err}",
                event_id=str(event_id) if event_id is not None else None,
                index=index,
            ) from err
        return cls(
            id=record["id"],
            type=record["type"] or "",
            start_time=record["start_time"],
            end_time=record["end_time"],
            recurring=record["recurring"],
            recurrence_type=record["recurrence_type"] or RecurrenceType.NONE.value,
        )

    @property
    def duration(self) -> int:
        """Length in seconds, shared by every occurrence."""
        return self.end_time - self.start_time

    @property
    def recurrence(self) -> RecurrenceType | None:
        """The parsed recurrence rule, or None when unrecognized."""
        try:
            return RecurrenceType(self.recurrence_type)
        except ValueError:
            return None

    @property
    def is_recurring(self) -> bool:
        """Whether the expander should step this event at all."""
        return self.recurring and self.recurrence_type != RecurrenceType.NONE.value

    def validate(self, *, index: int | None = None) -> None:
        """Raise InvalidInterval unless the event ends after it starts."""
        if self.end_time <= self.start_time:
            raise InvalidInterval(
                f"Event {self.id} ends at {self.end_time}, "
                f"not after its start {self.start_time}",
                event_id=self.id,
                index=index,
            )

    def occurrence_at(self, start_time: int) -> Occurrence:
        """Materialize one occurrence beginning at ``start_time``."""
        return Occurrence(
            id=self.id,
            type=self.type,
            start_time=start_time,
            end_time=start_time + self.duration,
        )


@dataclass(frozen=True)
class Occurrence:
    """One concrete instance of an event's recurrence."""

    id: str
    type: str
    start_time: int  # Unix seconds
    end_time: int  # Unix seconds


@dataclass(frozen=True)
class Segment:
    """The part of an occurrence that falls within one calendar day.

    ``start`` and ``end`` carry millisecond precision so that a segment can
    end on 23:59:59.999 and the next one begin on 00:00:00.000.
    """

    id: str
    type: str
    start: datetime
    end: datetime

    @property
    def start_time(self) -> int:
        return to_timestamp(self.start)

    @property
    def end_time(self) -> int:
        return to_timestamp(self.end)

    @property
    def start_ms(self) -> int:
        return to_millis(self.start)

    @property
    def end_ms(self) -> int:
        return to_millis(self.end)


@dataclass(frozen=True)
class Window:
    """Inclusive range of days the calendar covers."""

    start: datetime  # local midnight
    end: datetime  # last millisecond of the final day
    total_days: int


@dataclass(frozen=True)
class ExpansionResult:
    """Occurrences expanded from a batch, plus per-event problems.

    ``errors`` holds rejected events; ``warnings`` holds events that were
    expanded with a fallback (an unknown recurrence type).
    """

    occurrences: tuple[Occurrence, ...] = field(default_factory=tuple)
    errors: tuple[EventValidationError, ...] = field(default_factory=tuple)
    warnings: tuple[UnknownRecurrenceType, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GridDay:
    """A calendar day of a month grid and where it sits in the window."""

    day: datetime  # local midnight
    day_offset: int
    in_range: bool


@dataclass(frozen=True)
class GridDescriptor:
    """Sunday-aligned layout of one month that intersects the window."""

    month_start: datetime
    month_end: datetime
    grid_start: datetime
    grid_end: datetime
    leading_spacers: int
    trailing_spacers: int
    days: tuple[GridDay, ...] = field(default_factory=tuple)

    @property
    def weeks(self) -> int:
        """Number of grid rows."""
        return (self.leading_spacers + len(self.days) + self.trailing_spacers) // 7

    def offset_of(self, day: datetime) -> int | None:
        """Window day offset of a day in this month, or None if outside the window."""
        index = day_offset(day, self.month_start)
        if not 0 <= index < len(self.days):
            return None
        grid_day = self.days[index]
        return grid_day.day_offset if grid_day.in_range else None
