"""Domain-to-pixel mappings for the date and value axes.

Both scales are thin wrappers over :class:`matplotlib.transforms.BboxTransform`
using matplotlib date numbers for the date axis, so the session's pixel
positions follow the same conversion the axes use. :func:`date_limits` and
:func:`value_limits` widen degenerate domains the way the plotter sets its
axis limits.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Tuple, Union

import matplotlib.dates as mdates
from matplotlib.transforms import Bbox, BboxTransform

from .series import DateLike, day_number


def value_limits(domain: Tuple[float, float]) -> Tuple[float, float]:
    """Value axis limits for ``domain``, at least one unit tall."""
    low, high = float(domain[0]), float(domain[1])
    if high <= low:
        high = low + 1.0
    return low, high


def date_limits(domain: Tuple[date, date]) -> Tuple[date, date]:
    """Date axis limits for ``domain``; a single day is padded by a day each side."""
    start, end = domain
    if start == end:
        return start - timedelta(days=1), end + timedelta(days=1)
    return start, end


class LinearScale:
    """Map a numeric domain onto a pixel range and back."""

    def __init__(self, domain: Tuple[float, float], output_range: Tuple[float, float]):
        d0, d1 = float(domain[0]), float(domain[1])
        if d0 == d1:
            d1 = d0 + 1.0
        self.domain = (d0, d1)
        self.range = (float(output_range[0]), float(output_range[1]))
        self._transform = BboxTransform(
            Bbox([[d0, 0.0], [d1, 1.0]]),
            Bbox([[self.range[0], 0.0], [self.range[1], 1.0]]),
        )

    def __call__(self, value: float) -> float:
        if value is None or (isinstance(value, float) and math.isnan(value)):
            return math.nan
        return float(self._transform.transform((float(value), 0.0))[0])

    def invert(self, pixel: float) -> float:
        return float(self._transform.inverted().transform((float(pixel), 0.0))[0])

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"


class TimeScale:
    """Map a date domain onto a pixel range and back.

    Inverting a pixel that falls between two calendar days yields a UTC
    datetime with a time of day.
    """

    def __init__(self, domain: Tuple[DateLike, DateLike], output_range: Tuple[float, float]):
        self.domain = domain
        self.range = (float(output_range[0]), float(output_range[1]))
        self._days = LinearScale((day_number(domain[0]), day_number(domain[1])), self.range)

    def __call__(self, value: DateLike) -> float:
        return self._days(day_number(value))

    def invert(self, pixel: float) -> datetime:
        return mdates.num2date(self._days.invert(pixel))

    def __repr__(self) -> str:
        return f"TimeScale(domain={self.domain}, range={self.range})"


def date_of(value: Union[float, DateLike]) -> date:
    """Round a matplotlib date number or a datetime to the nearest calendar day."""
    if not isinstance(value, (int, float)):
        value = day_number(value)
    return mdates.num2date(round(value)).date()
