"""Calendar arithmetic over timezone-aware datetimes.

All helpers are pure: they take an aware ``datetime`` and return a new one in
the same time zone. Stepping by days, weeks or months works on the wall-clock
calendar date, so an 18:00 instant stays at 18:00 across DST transitions.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

from dateutil.relativedelta import relativedelta

_ONE_MS = timedelta(milliseconds=1)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _normalize(value: datetime) -> datetime:
    """Resolve the UTC offset after wall-clock arithmetic.

    Wall times that fall into a DST gap are moved forward to a real instant.
    """
    return value.astimezone(timezone.utc).astimezone(value.tzinfo)


def from_timestamp(seconds: int | float, tz: tzinfo) -> datetime:
    """Convert unix seconds to an aware datetime in ``tz``."""
    return datetime.fromtimestamp(seconds, tz=tz)


def from_millis(millis: int, tz: tzinfo) -> datetime:
    """Convert unix milliseconds to an aware datetime in ``tz``."""
    return (_EPOCH + millis * _ONE_MS).astimezone(tz)


def to_millis(value: datetime) -> int:
    """Return the instant as integer unix milliseconds."""
    return (value - _EPOCH) // _ONE_MS


def to_timestamp(value: datetime) -> int:
    """Return the instant as unix seconds, floored."""
    return to_millis(value) // 1000


def start_of_day(value: datetime) -> datetime:
    """Truncate to local midnight."""
    return _normalize(value.replace(hour=0, minute=0, second=0, microsecond=0, fold=0))


def end_of_day(value: datetime) -> datetime:
    """Return the last millisecond of the local day containing ``value``."""
    next_day = start_of_day(add_days(start_of_day(value), 1))
    return (next_day.astimezone(timezone.utc) - _ONE_MS).astimezone(value.tzinfo)


def add_days(value: datetime, days: int) -> datetime:
    return _normalize(value + timedelta(days=days))


def add_weeks(value: datetime, weeks: int) -> datetime:
    return add_days(value, 7 * weeks)


def add_months_preserving_day(value: datetime, months: int) -> datetime:
    """Advance by whole months, clamping to the target month's last day.

    The clamp is not undone by later steps: Jan 31 + 1 month is Feb 28 and
    Feb 28 + 1 month is Mar 28.
    """
    return _normalize(value + relativedelta(months=months))


def start_of_month(value: datetime) -> datetime:
    return start_of_day(value.replace(day=1))


def end_of_month(value: datetime) -> datetime:
    """Return the last millisecond of the month containing ``value``."""
    last_day = start_of_month(value) + relativedelta(months=1, days=-1)
    return end_of_day(_normalize(last_day))


def weekday_index(value: datetime) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7


def align_to_week_start_sunday(value: datetime) -> datetime:
    day = start_of_day(value)
    return add_days(day, -weekday_index(day))


def align_to_week_end_saturday(value: datetime) -> datetime:
    day = start_of_day(value)
    return add_days(day, 6 - weekday_index(day))


def is_same_day(a: datetime, b: datetime) -> bool:
    """Calendar-date equality, judged in ``a``'s time zone."""
    return a.date() == b.astimezone(a.tzinfo).date()


def day_offset(day: datetime, origin: datetime) -> int:
    """Number of calendar days from ``origin``'s date to ``day``'s date.

    Negative when ``day`` precedes ``origin``. Counts dates rather than
    elapsed hours, so 23- and 25-hour days still count as one.
    """
    return (day.astimezone(origin.tzinfo).date() - origin.date()).days
