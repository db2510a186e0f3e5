from __future__ import annotations

from datetime import datetime

from ..core.constants import HOURS_PRECISION, SECONDS_PER_HOUR


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_entry_date(value: datetime) -> str:
    """Human readable clock-in date, e.g. ``Oct 19, 2026``."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def hours_between(start: datetime, end: datetime) -> float:
    """Elapsed hours from start to end rounded to two decimals."""
    seconds = (end - start).total_seconds()
    return round(seconds / SECONDS_PER_HOUR, HOURS_PRECISION)


def isoformat_or_none(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
