"""Expand recurring buff events into day segments and month grids."""

from .const import __version__
from .calendar import CalendarResult, async_build_calendar, build_calendar
from .config import CalendarConfig, events_document_url, resolve_timezone, timezone_label
from .exceptions import (
    BuffCalendarError,
    ConfigError,
    EventSourceError,
    EventValidationError,
    InvalidInterval,
    MalformedEvent,
    SourceConnectionError,
    SourceResponseError,
    UnknownRecurrenceType,
)
from .expander import expand_events
from .grid import build_grid
from .labels import BuffType, type_label
from .models import (
    Event,
    ExpansionResult,
    GridDay,
    GridDescriptor,
    Occurrence,
    RecurrenceType,
    Segment,
    Window,
)
from .segmenter import segment_by_day
from .source import EventSource, demo_events, load_events_or_demo
from .view import DayCell, MonthView, SegmentView, SpacerCell, build_calendar_view
from .window import compute_window

__all__ = [
    "__version__",
    "CalendarResult",
    "async_build_calendar",
    "build_calendar",
    "CalendarConfig",
    "events_document_url",
    "resolve_timezone",
    "timezone_label",
    "BuffCalendarError",
    "ConfigError",
    "EventSourceError",
    "EventValidationError",
    "InvalidInterval",
    "MalformedEvent",
    "SourceConnectionError",
    "SourceResponseError",
    "UnknownRecurrenceType",
    "expand_events",
    "build_grid",
    "BuffType",
    "type_label",
    "Event",
    "ExpansionResult",
    "GridDay",
    "GridDescriptor",
    "Occurrence",
    "RecurrenceType",
    "Segment",
    "Window",
    "segment_by_day",
    "EventSource",
    "demo_events",
    "load_events_or_demo",
    "DayCell",
    "MonthView",
    "SegmentView",
    "SpacerCell",
    "build_calendar_view",
    "compute_window",
]
