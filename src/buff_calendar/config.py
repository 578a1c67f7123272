"""Configuration for building a calendar from a remote events document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import voluptuous as vol
from tzlocal import get_localzone, get_localzone_name

from .const import (
    CONF_DEMO_FALLBACK,
    CONF_EVENTS_URL,
    CONF_REQUEST_TIMEOUT,
    CONF_TIMEZONE,
    CONF_TOTAL_DAYS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TOTAL_DAYS,
    EVENTS_FILENAME,
    LOCAL_TIMEZONE_LABEL,
)
from .exceptions import ConfigError

_LOGGER = logging.getLogger(__name__)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_EVENTS_URL): vol.All(str, vol.Length(min=1)),
        vol.Optional(CONF_TOTAL_DAYS, default=DEFAULT_TOTAL_DAYS): vol.All(
            int, vol.Range(min=1)
        ),
        vol.Optional(CONF_TIMEZONE, default=None): vol.Any(None, str),
        vol.Optional(CONF_REQUEST_TIMEOUT, default=DEFAULT_REQUEST_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0, min_included=False)
        ),
        vol.Optional(CONF_DEMO_FALLBACK, default=True): bool,
    }
)


@dataclass(frozen=True)
class CalendarConfig:
    """Where to load events from and how to lay them out."""

    events_url: str
    total_days: int = DEFAULT_TOTAL_DAYS
    timezone: str | None = None  # None = system local zone
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    demo_fallback: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CalendarConfig:
        """Construct from a plain dict, applying defaults.

        Raises:
            ConfigError: If the dict fails validation.
        """
        try:
            conf = CONFIG_SCHEMA(data)
        except vol.Invalid as err:
            raise ConfigError(f"Invalid configuration: {err}") from err
        return cls(
            events_url=events_document_url(conf[CONF_EVENTS_URL]),
            total_days=conf[CONF_TOTAL_DAYS],
            timezone=conf[CONF_TIMEZONE],
            request_timeout=conf[CONF_REQUEST_TIMEOUT],
            demo_fallback=conf[CONF_DEMO_FALLBACK],
        )

    @property
    def tzinfo(self) -> tzinfo:
        return resolve_timezone(self.timezone)


def events_document_url(url: str) -> str:
    """Point a base URL ending in ``/`` at the default events document."""
    if url.endswith("/"):
        return url + EVENTS_FILENAME
    return url


def resolve_timezone(name: str | None) -> tzinfo:
    """Look up an IANA zone, or the system local zone when ``name`` is None.

    Raises:
        ConfigError: If the name is not a known zone.
    """
    if name is None:
        try:
            return get_localzone()
        except LookupError:
            _LOGGER.debug("No local time zone found, falling back to UTC")
            return ZoneInfo("UTC")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise ConfigError(f"Unknown time zone: {name}") from err


def timezone_label(name: str | None) -> str:
    """Text describing the zone the calendar is shown in.

    Without an explicit name this is the system zone's IANA name, or
    ``LOCAL_TIMEZONE_LABEL`` when the system zone cannot be named.
    """
    if name:
        return name
    try:
        local_name = get_localzone_name()
    except (LookupError, ValueError) as err:
        _LOGGER.debug("Cannot name the local time zone: %s", err)
        return LOCAL_TIMEZONE_LABEL
    return local_name or LOCAL_TIMEZONE_LABEL
