"""Schema for raw event records as they arrive from the event source."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Any

import voluptuous as vol

# One day of slack keeps local-time conversions inside the datetime range.
_MIN_TIMESTAMP = int((datetime.min.replace(tzinfo=timezone.utc) + timedelta(days=1)).timestamp())
_MAX_TIMESTAMP = int((datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)).timestamp())


def _timestamp(value: Any) -> int:
    """Accept unix seconds as a number; fractional seconds are floored.

    Values outside the range a datetime can hold are rejected.
    """
    if isinstance(value, bool):
        raise vol.Invalid("expected unix seconds, got a boolean")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise vol.Invalid(f"expected unix seconds, got {value}")
        value = math.floor(value)
    if not isinstance(value, int):
        raise vol.Invalid(f"expected unix seconds, got {type(value).__name__}")
    if not _MIN_TIMESTAMP <= value <= _MAX_TIMESTAMP:
        raise vol.Invalid(f"unix seconds {value} out of the supported range")
    return value


EVENT_RECORD_SCHEMA = vol.Schema(
    {
        vol.Required("id"): vol.All(vol.Any(str, int), vol.Coerce(str)),
        vol.Required("start_time"): _timestamp,
        vol.Required("end_time"): _timestamp,
        vol.Optional("type", default=""): vol.Any(None, str),
        vol.Optional("recurring", default=False): bool,
        vol.Optional("recurrence_type", default="none"): vol.Any(None, str),
    },
    extra=vol.ALLOW_EXTRA,
)


def validate_event_record(data: Any) -> dict[str, Any]:
    """Validate a raw record, returning the normalized dict.

    Raises:
        vol.Invalid: If the record is not a mapping or a field is bad.
    """
    if not isinstance(data, dict):
        raise vol.Invalid(f"expected an object, got {type(data).__name__}")
    return EVENT_RECORD_SCHEMA(data)
