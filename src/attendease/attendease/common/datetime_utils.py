from __future__ import annotations

import calendar
from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a 1-based month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def weekday_name(value: date) -> str:
    return value.strftime("%A")


def weekday_short(value: date) -> str:
    return value.strftime("%a")
