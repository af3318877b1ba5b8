"""Utility helpers for generating the rolling date window."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from cbr_fx.utils.cbr import DEFAULT_WINDOW_DAYS


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def window_dates(end: str | date | None = None, days: int = DEFAULT_WINDOW_DAYS) -> Iterator[date]:
    """Yield ``days`` consecutive calendar days, newest first, ending at ``end``.

    ``end`` defaults to today and is always the first value produced, so the
    window is inclusive of it.
    """

    if isinstance(days, bool) or not isinstance(days, int):
        raise TypeError("days must be an integer")
    if days <= 0:
        raise ValueError("days must be positive")

    end_date = parse_date(end) if end is not None else date.today()
    for offset in range(days):
        yield end_date - timedelta(days=offset)
