"""Constants for the buff calendar."""

from typing import Final

__version__ = "0.1.0"

DEFAULT_TOTAL_DAYS: Final = 61  # today + next 60 days
DEFAULT_REQUEST_TIMEOUT: Final = 10.0  # seconds

EVENTS_FILENAME: Final = "events.json"
LOCAL_TIMEZONE_LABEL: Final = "Local Time"

CONF_EVENTS_URL: Final = "events_url"
CONF_TOTAL_DAYS: Final = "total_days"
CONF_TIMEZONE: Final = "timezone"
CONF_REQUEST_TIMEOUT: Final = "request_timeout"
CONF_DEMO_FALLBACK: Final = "demo_fallback"
