"""Label text for the tooltip and axis ticks."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import List, Optional

from .config import DATE_FORMAT


def format_value(value: Optional[float]) -> str:
    """Tooltip value: rounded to a whole number, ``N/A`` when missing."""
    if value is None or math.isnan(value):
        return "N/A"
    return f"{value:.0f}"


def format_date(value: date) -> str:
    """Tooltip date in ISO form."""
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(DATE_FORMAT)


def format_value_tick(value: float) -> str:
    # the zero tick sits on the date axis, leave it blank
    if value is None or math.isnan(value) or value <= 0:
        return ""
    return f"{value:.0f}"


def format_year_tick(value: date) -> str:
    return value.strftime("%Y")


def year_ticks(start: date, end: date) -> List[date]:
    """January 1st of every year inside ``[start, end]``."""
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()
    first_year = start.year if (start.month, start.day) == (1, 1) else start.year + 1
    return [date(year, 1, 1) for year in range(first_year, end.year + 1)]
