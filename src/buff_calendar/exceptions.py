"""Exception hierarchy for the buff calendar."""

from __future__ import annotations


class BuffCalendarError(Exception):
    """Base exception for all buff calendar errors."""


class ConfigError(BuffCalendarError):
    """Configuration failed validation."""


class EventValidationError(BuffCalendarError):
    """A single event record was rejected or needs attention.

    Attributes:
        event_id: ID of the offending event, if it could be read.
        index: Position of the record in the input batch, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        event_id: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.event_id = event_id
        self.index = index


class MalformedEvent(EventValidationError):
    """A required field is missing or has the wrong type."""


class InvalidInterval(EventValidationError):
    """The event's end time is not after its start time."""


class UnknownRecurrenceType(EventValidationError):
    """The recurrence type is not recognized; only the base occurrence is used.

    Attributes:
        recurrence_type: The unrecognized value.
    """

    def __init__(
        self,
        message: str,
        *,
        recurrence_type: str,
        event_id: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message, event_id=event_id, index=index)
        self.recurrence_type = recurrence_type


class EventSourceError(BuffCalendarError):
    """The event document could not be retrieved."""


class SourceConnectionError(EventSourceError):
    """Event source is unreachable (network error, DNS, timeout)."""


class SourceResponseError(EventSourceError):
    """Event source returned an unexpected error response.

    Attributes:
        status_code: HTTP status code, if available.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
