"""Event document retrieval with a demo-data fallback."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any

import aiohttp

from .const import DEFAULT_REQUEST_TIMEOUT
from .dates import to_timestamp
from .exceptions import EventSourceError, SourceConnectionError, SourceResponseError
from .labels import BuffType
from .models import RecurrenceType

_LOGGER = logging.getLogger(__name__)

_HOUR = 60 * 60


class EventSource:
    """Async reader for the events JSON document.

    Usage::

        async with aiohttp.ClientSession() as session:
            source = EventSource("https://example.com/events.json", session)
            records = await source.async_get_records()

    If no session is provided, the source creates and manages its own.
    The caller is responsible for calling ``async_close()`` when done
    (or use the source as an async context manager).
    """

    def __init__(
        self,
        url: str,
        session: aiohttp.ClientSession | None = None,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._url = url
        self._owns_session = session is None
        self._session = session or aiohttp.ClientSession()
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def __aenter__(self) -> EventSource:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.async_close()

    @property
    def url(self) -> str:
        return self._url

    async def async_close(self) -> None:
        """Close the HTTP session if the source owns it."""
        if self._owns_session:
            await self._session.close()

    async def async_get_records(self) -> list[Any]:
        """Fetch the raw event records.

        A document whose top level is not a list yields no records. Records
        are returned unvalidated; the expander checks them one by one.

        Raises:
            SourceResponseError: On non-2xx responses or an undecodable body.
            SourceConnectionError: On network errors and timeouts.
        """
        _LOGGER.debug("Fetching events from %s", self._url)
        try:
            async with self._session.get(
                self._url,
                headers={"Cache-Control": "no-cache"},
                timeout=self._timeout,
            ) as resp:
                if resp.status >= 400:
                    body = await resp.text()
                    raise SourceResponseError(
                        f"Event source error: HTTP {resp.status} - {body}",
                        status_code=resp.status,
                    )
                data = await resp.json(content_type=None)
        except aiohttp.ClientError as err:
            raise SourceConnectionError(f"Connection error: {err}") from err
        except asyncio.TimeoutError as err:
            raise SourceConnectionError(f"Timed out fetching {self._url}") from err
        except ValueError as err:
            raise SourceResponseError(f"Invalid JSON from {self._url}: {err}") from err

        if not isinstance(data, list):
            _LOGGER.debug("Events document is %s, not a list", type(data).__name__)
            return []
        return data


def demo_events(now: datetime) -> list[dict[str, Any]]:
    """Sample records shown when the event source is unavailable."""
    now_ts = to_timestamp(now)
    evening_start = now.replace(hour=18, minute=0, second=0, microsecond=0)
    evening_end = now.replace(hour=20, minute=0, second=0, microsecond=0)
    return [
        {
            "id": "demo-quad-1",
            "type": BuffType.QUADRUPLE_XP.value,
            "start_time": now_ts + _HOUR,
            "end_time": now_ts + 3 * _HOUR,
            "recurring": False,
            "recurrence_type": RecurrenceType.NONE.value,
        },
        {
            "id": "demo-triple-weekly",
            "type": BuffType.TRIPLE_XP.value,
            "start_time": now_ts + 2 * _HOUR,
            "end_time": now_ts + 4 * _HOUR,
            "recurring": True,
            "recurrence_type": RecurrenceType.WEEKLY.value,
        },
        {
            "id": "demo-double-daily",
            "type": BuffType.DOUBLE_XP.value,
            "start_time": now_ts + 5 * _HOUR,
            "end_time": now_ts + 6 * _HOUR,
            "recurring": True,
            "recurrence_type": RecurrenceType.DAILY.value,
        },
        {
            "id": "demo-monthly",
            "type": BuffType.DOUBLE_XP.value,
            "start_time": to_timestamp(evening_start),
            "end_time": to_timestamp(evening_end),
            "recurring": True,
            "recurrence_type": RecurrenceType.MONTHLY.value,
        },
    ]


async def load_events_or_demo(
    source: EventSource, now: datetime
) -> tuple[list[Any], bool]:
    """Fetch records, substituting demo data if the source fails.

    Returns:
        The records and whether the demo data was used.
    """
    try:
        return await source.async_get_records(), False
    except EventSourceError as err:
        _LOGGER.warning("Event source %s unavailable, using demo data: %s", source.url, err)
        return demo_events(now), True
