"""Interactive index history chart.

The pure core (series model, nearest-sample lookup, range filtering, scales
and the chart session) imports without a GUI; the Tk application lives in
``indexchart.app``.
"""

from .series import (
    CursorPoint,
    DateRange,
    DomainBounds,
    InvalidInput,
    Sample,
    Series,
    domain_bounds,
    filter_range,
    locate,
    nearest,
    nearest_index,
)
from .session import ChartSession, ViewState, compute_view

__all__ = [
    "ChartSession",
    "CursorPoint",
    "DateRange",
    "DomainBounds",
    "InvalidInput",
    "Sample",
    "Series",
    "ViewState",
    "compute_view",
    "domain_bounds",
    "filter_range",
    "locate",
    "nearest",
    "nearest_index",
]
