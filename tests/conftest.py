"""Shared fixtures for the buff calendar tests."""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest


@pytest.fixture
def new_york() -> ZoneInfo:
    """A zone with DST; 2026 springs forward on Mar 8 and falls back on Nov 1."""
    return ZoneInfo("America/New_York")
