"""Tests for configuration parsing and time zone lookup."""

from __future__ import annotations

from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from buff_calendar.config import (
    CalendarConfig,
    events_document_url,
    resolve_timezone,
    timezone_label,
)
from buff_calendar.const import DEFAULT_REQUEST_TIMEOUT, DEFAULT_TOTAL_DAYS, LOCAL_TIMEZONE_LABEL
from buff_calendar.exceptions import ConfigError


class TestCalendarConfig:
    def test_defaults(self):
        config = CalendarConfig.from_dict({"events_url": "https://example.com/events.json"})
        assert config == CalendarConfig(
            events_url="https://example.com/events.json",
            total_days=DEFAULT_TOTAL_DAYS,
            timezone=None,
            request_timeout=DEFAULT_REQUEST_TIMEOUT,
            demo_fallback=True,
        )

    def test_explicit_values(self):
        config = CalendarConfig.from_dict(
            {
                "events_url": "https://example.com/events.json",
                "total_days": 14,
                "timezone": "Europe/Berlin",
                "request_timeout": 3,
                "demo_fallback": False,
            }
        )
        assert config.total_days == 14
        assert config.request_timeout == 3.0
        assert config.demo_fallback is False
        assert config.tzinfo == ZoneInfo("Europe/Berlin")

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"events_url": ""},
            {"events_url": "https://example.com/events.json", "total_days": 0},
            {"events_url": "https://example.com/events.json", "request_timeout": 0},
            {"events_url": "https://example.com/events.json", "unexpected": 1},
        ],
    )
    def test_invalid(self, data):
        with pytest.raises(ConfigError):
            CalendarConfig.from_dict(data)

    def test_base_url_points_at_events_document(self):
        config = CalendarConfig.from_dict({"events_url": "https://example.com/buffs/"})
        assert config.events_url == "https://example.com/buffs/events.json"

    def test_document_url_is_kept(self):
        assert events_document_url("https://example.com/buffs.json") == "https://example.com/buffs.json"
        assert events_document_url("/static/") == "/static/events.json"


class TestTimezone:
    def test_named_zone(self):
        assert resolve_timezone("America/New_York") == ZoneInfo("America/New_York")

    def test_local_zone(self):
        assert isinstance(resolve_timezone(None), tzinfo)

    def test_unknown_zone(self):
        with pytest.raises(ConfigError):
            resolve_timezone("Mars/Olympus_Mons")

    def test_label_for_named_zone(self):
        assert timezone_label("Europe/Berlin") == "Europe/Berlin"

    def test_label_for_local_zone_uses_its_name(self, monkeypatch):
        monkeypatch.setattr("buff_calendar.config.get_localzone_name", lambda: "Asia/Tokyo")
        assert timezone_label(None) == "Asia/Tokyo"

    def test_label_falls_back_when_local_zone_unnamed(self, monkeypatch):
        monkeypatch.setattr("buff_calendar.config.get_localzone_name", lambda: None)
        assert timezone_label(None) == LOCAL_TIMEZONE_LABEL

    def test_label_falls_back_when_local_zone_unknown(self, monkeypatch):
        def _raise():
            raise ZoneInfoNotFoundError("Invalid/Zone")

        monkeypatch.setattr("buff_calendar.config.get_localzone_name", _raise)
        assert timezone_label(None) == "Local Time"
