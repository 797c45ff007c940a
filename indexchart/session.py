"""Rendering session: owns the loaded series and all mutable view state.

Event handlers hold a reference to one :class:`ChartSession` and ask it for
the next view state; drawing that state is left to the plotting package.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from .config import PLOT_HEIGHT_PX, PLOT_WIDTH_PX
from .scales import LinearScale, TimeScale, date_limits, value_limits
from .series import (
    CursorPoint,
    DateRange,
    InvalidInput,
    Series,
    domain_bounds,
    filter_range,
    locate,
    max_value,
)


@dataclass(frozen=True)
class ViewState:
    """What the renderer draws for the current interaction."""

    series: Series
    date_range: DateRange
    date_domain: Tuple[date, date]
    value_domain: Tuple[float, float]

    @property
    def is_empty(self) -> bool:
        return self.series.is_empty


def compute_view(
    series: Series,
    date_range: DateRange,
    previous_value_domain: Optional[Tuple[float, float]] = None,
) -> ViewState:
    """Filter ``series`` to ``date_range`` and derive the axis domains.

    The date domain always follows the range. The value domain is
    ``[0, max]`` over the visible samples; when none are visible it keeps
    ``previous_value_domain`` (or the full series bounds when there is none).
    """
    visible = filter_range(series, date_range)
    top = max_value(visible)
    if top is not None:
        value_domain = (0.0, top)
    elif previous_value_domain is not None:
        value_domain = previous_value_domain
    else:
        value_domain = (0.0, domain_bounds(series).max_value)
    return ViewState(
        series=visible,
        date_range=date_range,
        date_domain=(date_range.start, date_range.end),
        value_domain=value_domain,
    )


class ChartSession:
    """State for one chart window: series, current range, scales and cursor."""

    def __init__(self, series: Series, plot_width: float = PLOT_WIDTH_PX, plot_height: float = PLOT_HEIGHT_PX):
        if series.is_empty:
            raise InvalidInput("Cannot chart an empty series.")
        self.series = series
        self.bounds = domain_bounds(series)
        self.full_range = DateRange(self.bounds.min_date, self.bounds.max_date)
        self.width = float(plot_width)
        self.height = float(plot_height)

        self.view = compute_view(series, self.full_range)
        self.cursor: Optional[CursorPoint] = None
        self.x_scale: TimeScale
        self.y_scale: LinearScale
        self._rebuild_scales()

    def _rebuild_scales(self) -> None:
        # pixel origin is the bottom-left corner of the plot area, limits as the axes draw them
        self.x_scale = TimeScale(date_limits(self.view.date_domain), (0.0, self.width))
        self.y_scale = LinearScale(value_limits(self.view.value_domain), (0.0, self.height))

    @property
    def date_range(self) -> DateRange:
        return self.view.date_range

    def resize(self, width: float, height: float) -> None:
        """Update the plot area size in pixels."""
        if width == self.width and height == self.height:
            return
        self.width = float(width)
        self.height = float(height)
        self._rebuild_scales()

    def hover(self, x_pixel: float) -> Optional[CursorPoint]:
        """Snap the pointer to the nearest visible sample.

        Returns ``None`` when the current range shows no samples.
        """
        if self.view.is_empty:
            self.cursor = None
            return None
        query = self.x_scale.invert(x_pixel)
        self.cursor = locate(self.view.series, query, self.x_scale, self.y_scale)
        return self.cursor

    def leave(self) -> None:
        self.cursor = None

    def select_range(self, start: date, end: date) -> ViewState:
        """Apply a slider selection and recompute the view."""
        date_range = DateRange.ordered(start, end)
        self.view = compute_view(self.series, date_range, self.view.value_domain)
        self.cursor = None
        self._rebuild_scales()
        if self.view.is_empty:
            print(f"[Range] {date_range.start} to {date_range.end}: no samples, keeping value axis")
        else:
            print(
                f"[Range] {date_range.start} to {date_range.end}: "
                f"{len(self.view.series)} samples, max {self.view.value_domain[1]:.2f}"
            )
        return self.view

    def reset_range(self) -> ViewState:
        return self.select_range(self.full_range.start, self.full_range.end)
