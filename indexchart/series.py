"""Time-series data model with nearest-sample lookup and date-range filtering.

A :class:`Series` is loaded once and never mutated. Hover lookups and range
filters are pure functions over it, recomputed on every interaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Optional, Union, overload

import matplotlib.dates as mdates
import numpy as np

if TYPE_CHECKING:
    from .scales import LinearScale, TimeScale


DateLike = Union[date, datetime, np.datetime64, str]


class InvalidInput(ValueError):
    """Raised when a series operation is called outside its contract."""


def day_number(value: DateLike) -> float:
    """Convert a date-like value to a matplotlib date number.

    Calendar dates map to whole numbers; datetimes keep their time of day so
    a pointer position between two samples can be measured against both.
    Aware datetimes are converted to UTC first.
    """
    if isinstance(value, str):
        value = date.fromisoformat(value)
    if not isinstance(value, (date, np.datetime64)):
        raise InvalidInput(f"Unsupported date value: {value!r}")
    return float(mdates.date2num(value))


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class Sample:
    """One (date, value) observation."""

    date: date
    value: float


@dataclass(frozen=True)
class DateRange:
    """Inclusive [start, end] date window."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidInput(f"Range start {self.start} is after end {self.end}.")

    @classmethod
    def ordered(cls, first: date, second: date) -> "DateRange":
        """Build a range from two slider handles given in either order."""
        if first <= second:
            return cls(first, second)
        return cls(second, first)

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True)
class DomainBounds:
    """Axis bounds derived from whichever series view is displayed."""

    min_date: date
    max_date: date
    max_value: float


@dataclass(frozen=True)
class CursorPoint:
    """Nearest sample to the pointer and where it sits on screen."""

    sample: Sample
    index: int
    x: float
    y: float


class Series:
    """Immutable ordered sequence of samples, strictly increasing by date."""

    __slots__ = ("_dates", "_values", "_days")

    def __init__(self, samples: Iterable[Sample] = ()) -> None:
        samples = list(samples)
        dates = np.array([np.datetime64(_as_date(s.date), "D") for s in samples], dtype="datetime64[D]")
        values = np.array([float(s.value) for s in samples], dtype=float)
        self._assign(dates, values, validate=True)

    @classmethod
    def from_arrays(cls, dates: Any, values: Any) -> "Series":
        """Build a series from parallel date and value arrays."""
        series = cls.__new__(cls)
        series._assign(
            np.asarray(dates).astype("datetime64[D]"),
            np.asarray(values, dtype=float),
            validate=True,
        )
        return series

    @classmethod
    def _view(cls, dates: np.ndarray, values: np.ndarray) -> "Series":
        series = cls.__new__(cls)
        series._assign(dates, values, validate=False)
        return series

    def _assign(self, dates: np.ndarray, values: np.ndarray, *, validate: bool) -> None:
        if validate:
            if dates.shape != values.shape or dates.ndim != 1:
                raise InvalidInput("Dates and values must be one-dimensional and the same length.")
            if np.isnat(dates).any():
                raise InvalidInput("Series dates must not contain missing values.")
            if len(dates) > 1 and np.any(np.diff(dates) <= np.timedelta64(0, "D")):
                raise InvalidInput("Series dates must be strictly increasing.")
            dates = dates.copy()
            values = values.copy()
            dates.flags.writeable = False
            values.flags.writeable = False
        self._dates = dates
        self._values = values
        self._days = mdates.date2num(dates) if len(dates) else np.empty(0, dtype=float)

    @property
    def dates(self) -> np.ndarray:
        return self._dates

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def day_numbers(self) -> np.ndarray:
        return self._days

    @property
    def is_empty(self) -> bool:
        return len(self._dates) == 0

    @property
    def first(self) -> Sample:
        _require_non_empty(self, "first")
        return self[0]

    @property
    def last(self) -> Sample:
        _require_non_empty(self, "last")
        return self[-1]

    def __len__(self) -> int:
        return len(self._dates)

    @overload
    def __getitem__(self, key: int) -> Sample: ...

    @overload
    def __getitem__(self, key: slice) -> "Series": ...

    def __getitem__(self, key):
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise InvalidInput("Series slices must be contiguous.")
            return Series._view(self._dates[key], self._values[key])
        return Sample(date=self._dates[key].astype(object), value=float(self._values[key]))

    def __iter__(self) -> Iterator[Sample]:
        for i in range(len(self)):
            yield self[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return np.array_equal(self._dates, other._dates) and np.array_equal(self._values, other._values)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_empty:
            return "Series([])"
        return f"Series({len(self)} samples, {self._dates[0]} .. {self._dates[-1]})"


def _require_non_empty(series: Series, operation: str) -> None:
    if series.is_empty:
        raise InvalidInput(f"Cannot compute {operation} of an empty series.")


def nearest_index(series: Series, query: DateLike) -> int:
    """Return the index of the sample whose date is closest to ``query``.

    Binary search gives the leftmost insertion point ``i``; the candidates are
    ``i - 1`` and ``i`` clamped to the series bounds. Exact ties go to the
    later sample.
    """
    _require_non_empty(series, "nearest")
    days = series.day_numbers
    q = day_number(query)
    i = int(np.searchsorted(days, q, side="left"))
    before = max(i - 1, 0)
    after = min(i, len(days) - 1)
    if abs(q - days[before]) < abs(days[after] - q):
        return before
    return after


def nearest(series: Series, query: DateLike) -> Sample:
    """Return the sample closest in date to ``query``."""
    return series[nearest_index(series, query)]


def locate(series: Series, query: DateLike, x_scale: TimeScale, y_scale: LinearScale) -> CursorPoint:
    """Find the nearest sample and map it to pixel coordinates."""
    index = nearest_index(series, query)
    sample = series[index]
    return CursorPoint(sample=sample, index=index, x=x_scale(sample.date), y=y_scale(sample.value))


def filter_range(series: Series, date_range: DateRange) -> Series:
    """Return the contiguous run of samples with ``start <= date <= end``.

    The result may be empty; it shares storage with ``series``.
    """
    days = series.day_numbers
    lo = int(np.searchsorted(days, day_number(date_range.start), side="left"))
    hi = int(np.searchsorted(days, day_number(date_range.end), side="right"))
    return series[lo:max(lo, hi)]


def domain_bounds(series: Series) -> DomainBounds:
    """Date extent and maximum value of a non-empty series."""
    _require_non_empty(series, "domain bounds")
    return DomainBounds(
        min_date=series.first.date,
        max_date=series.last.date,
        max_value=float(np.max(series.values)),
    )


def max_value(series: Series) -> Optional[float]:
    """Maximum value, or ``None`` for an empty series."""
    if series.is_empty:
        return None
    return float(np.max(series.values))
