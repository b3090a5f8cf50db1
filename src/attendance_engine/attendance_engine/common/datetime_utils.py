from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import DAYS_PER_WEEK

# date.fromordinal(1) is Monday 0001-01-01, so ordinals double as a Monday epoch.
_EPOCH_MONDAY = 1
_MIN_DAY = date.min.toordinal()
_MAX_DAY = date.max.toordinal()


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_date(value) -> Optional[date]:
    """Best-effort conversion of a provider value into a calendar date.

    Accepts ``date``/``datetime`` objects and ISO strings with or without a
    time component (``2024-03-01``, ``2024-03-01T10:00:00``,
    ``2024-03-01 10:00:00.000Z``). The time of day is dropped. Anything else,
    including trailing text that is not a valid time, yields None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if len(text) < 10 or not _is_time_suffix(text[10:]):
        return None
    try:
        return parse_iso_date(text[:10])
    except ValueError:
        return None


def _is_time_suffix(rest: str) -> bool:
    if not rest:
        return True
    if rest[0] not in "T ":
        return False
    clock = rest[1:]
    if clock.endswith("Z"):
        clock = clock[:-1]
    try:
        time.fromisoformat(clock)
    except ValueError:
        return False
    return True


def today_local() -> date:
    """Current local calendar date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def as_calendar_date(value) -> date:
    """Normalise a "now" argument (date or datetime) to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def day_number(value: date) -> int:
    return value.toordinal()


def from_day_number(number: int) -> date:
    return date.fromordinal(number)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if end is earlier)."""
    return day_number(end) - day_number(start)


def add_days(value: date, days: int) -> date:
    """Shift by whole days, clamped to the supported calendar (date.min..date.max)."""
    return from_day_number(min(max(day_number(value) + days, _MIN_DAY), _MAX_DAY))


def week_start(value: date) -> date:
    """Monday on or before ``value``."""
    n = day_number(value)
    return from_day_number(n - (n - _EPOCH_MONDAY) % DAYS_PER_WEEK)


def week_end(value: date) -> date:
    """Sunday on or after ``value``."""
    return add_days(week_start(value), DAYS_PER_WEEK - 1)


def format_time_of_day(value: Optional[str]) -> str:
    """Trim ``HH:MM:SS`` to ``HH:MM``; blanks become empty string."""
    return (value or "").strip()[:5]
