"""Date range selection with a two-handle slider.

The slider sits under the plot; moving either handle narrows the visible
date window, recomputes the value axis and redraws the chart.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Callable, Optional, Tuple

import matplotlib.dates as mdates
from matplotlib.widgets import RangeSlider

from ..config import (
    AREA_COLOR,
    FIGURE_HEIGHT_PX,
    FIGURE_WIDTH_PX,
    SLIDER_AREA_HEIGHT_PX,
    SLIDER_HEIGHT_PX,
    SLIDER_OFFSET_LEFT_PX,
    SLIDER_OFFSET_TOP_PX,
    SLIDER_WIDTH_PX,
)
from ..formatting import format_date
from ..scales import date_of

if TYPE_CHECKING:
    import matplotlib.figure
    from matplotlib.backend_bases import FigureCanvasBase

    from ..session import ChartSession, ViewState
    from .hover_tooltip import HoverTooltipHandler
    from .plotter import ChartPlotter


def slider_rect() -> list:
    """Slider axes as ``[left, bottom, width, height]`` figure fractions."""
    top = SLIDER_AREA_HEIGHT_PX - SLIDER_OFFSET_TOP_PX
    return [
        SLIDER_OFFSET_LEFT_PX / FIGURE_WIDTH_PX,
        (top - SLIDER_HEIGHT_PX) / FIGURE_HEIGHT_PX,
        SLIDER_WIDTH_PX / FIGURE_WIDTH_PX,
        SLIDER_HEIGHT_PX / FIGURE_HEIGHT_PX,
    ]


class RangeSliderHandler:
    """Manages the date range slider and the redraw it triggers."""

    def __init__(
        self,
        fig: matplotlib.figure.Figure,
        canvas: FigureCanvasBase,
        session: ChartSession,
        plotter: ChartPlotter,
        hover: Optional[HoverTooltipHandler] = None,
    ):
        """Initialize the range slider handler.

        Args:
            fig: Matplotlib figure the slider is added to
            canvas: Canvas to redraw after a change
            session: Chart session owning the current range
            plotter: Plotter that redraws the view
            hover: Hover handler whose cursor is cleared on change
        """
        self.fig = fig
        self.canvas = canvas
        self.session = session
        self.plotter = plotter
        self.hover = hover

        # Callback for UI updates
        self.on_range_changed: Optional[Callable[[ViewState], None]] = None

        self.valmin = mdates.date2num(session.full_range.start)
        # a single-day series still gets a one-day track
        self.valmax = max(mdates.date2num(session.full_range.end), self.valmin + 1.0)

        self.ax = fig.add_axes(slider_rect())
        self.slider = RangeSlider(
            self.ax,
            "",
            self.valmin,
            self.valmax,
            valinit=(self.valmin, self.valmax),
            valstep=1.0,
            facecolor=AREA_COLOR,
        )
        self._update_value_text(session.full_range.start, session.full_range.end)
        self.slider.on_changed(self.on_slider_change)

    def on_slider_change(self, val: Tuple[float, float]) -> None:
        """Handle a handle move.

        Args:
            val: Slider positions as matplotlib date numbers
        """
        start, end = self.to_dates(val)
        view = self.session.select_range(start, end)

        if self.hover is not None:
            self.hover.clear(redraw=False)
        self.plotter.draw(view)
        self._update_value_text(view.date_range.start, view.date_range.end)
        self.canvas.draw_idle()

        if self.on_range_changed:
            self.on_range_changed(view)

    @staticmethod
    def to_dates(val: Tuple[float, float]) -> Tuple[date, date]:
        return date_of(val[0]), date_of(val[1])

    def _update_value_text(self, start: date, end: date) -> None:
        self.slider.valtext.set_text(f"{format_date(start)} to {format_date(end)}")

    def reset(self) -> None:
        """Move both handles back to the full extent (fires the change callback)."""
        self.slider.set_val((self.valmin, self.valmax))

    def disconnect(self) -> None:
        self.slider.disconnect_events()

