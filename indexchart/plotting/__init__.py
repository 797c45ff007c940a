"""Plotting components for the index chart.

- plotter: Plot area layout and drawing of a view state
- hover_tooltip: Hover cursor snapping to the nearest sample
- range_slider: Two-handle date range slider
"""

from .plotter import ChartPlotter
from .hover_tooltip import HoverTooltipHandler
from .range_slider import RangeSliderHandler

__all__ = [
    "ChartPlotter",
    "HoverTooltipHandler",
    "RangeSliderHandler",
]
