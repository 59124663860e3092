from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: str | time) -> time:
    """Parse HH:MM or HH:MM:SS into time (settings accept either form)."""
    if isinstance(value, time):
        return value
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value.strip(), fmt).time()


def now_local() -> datetime:
    """Current local server time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
