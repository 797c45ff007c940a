"""Main drawing of the index chart.

Lays out the plot area inside the figure and draws the gradient area, the
line, the yearly date axis and the right-hand value axis for a
:class:`~indexchart.session.ViewState`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import matplotlib.dates as mdates
import numpy as np
from matplotlib import colors as mcolors
from matplotlib.ticker import FixedLocator, FuncFormatter, MaxNLocator

from ..config import (
    AREA_COLOR,
    AREA_OPACITY,
    CHART_TITLE,
    FIGURE_HEIGHT_PX,
    FIGURE_WIDTH_PX,
    LINE_COLOR,
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    PLOT_HEIGHT_PX,
    PLOT_WIDTH_PX,
    SLIDER_AREA_HEIGHT_PX,
    SOURCE_CREDIT,
    SOURCE_URL,
    TICK_FONT_SIZE,
    TICK_LABEL_COLOR,
    VALUE_TICK_COUNT,
)
from ..formatting import format_value_tick, format_year_tick, year_ticks
from ..scales import date_limits, value_limits

if TYPE_CHECKING:
    import matplotlib.axes
    import matplotlib.figure

    from ..session import ViewState


def plot_area_rect() -> list:
    """Plot area as ``[left, bottom, width, height]`` figure fractions."""
    return [
        MARGIN_LEFT / FIGURE_WIDTH_PX,
        (SLIDER_AREA_HEIGHT_PX + MARGIN_BOTTOM) / FIGURE_HEIGHT_PX,
        PLOT_WIDTH_PX / FIGURE_WIDTH_PX,
        PLOT_HEIGHT_PX / FIGURE_HEIGHT_PX,
    ]


def _gradient_image(color: str, steps: int = 256) -> np.ndarray:
    """Vertical RGBA strip, opaque at the top and transparent at the bottom."""
    rgba = np.zeros((steps, 1, 4))
    rgba[:, :, :3] = mcolors.to_rgb(color)
    rgba[:, 0, 3] = np.linspace(1.0, 0.0, steps)
    return rgba


class ChartPlotter:
    """Draws a view state onto a matplotlib figure."""

    def __init__(self, fig: matplotlib.figure.Figure):
        """Initialize the plotter.

        Args:
            fig: Matplotlib figure to draw on
        """
        self.fig = fig
        self.ax: Optional[matplotlib.axes.Axes] = None
        self.line: Optional[Any] = None
        self.area: Optional[Any] = None
        self.gradient: Optional[Any] = None
        self._gradient_rgba = _gradient_image(AREA_COLOR)

    def setup(self) -> matplotlib.axes.Axes:
        """Clear the figure and build the empty plot area.

        Returns:
            The plot axes
        """
        self.fig.clear()
        ax = self.fig.add_axes(plot_area_rect())
        self.ax = ax

        ax.spines["top"].set_visible(False)
        ax.spines["left"].set_visible(False)
        ax.yaxis.tick_right()
        ax.tick_params(axis="both", labelsize=TICK_FONT_SIZE, labelcolor=TICK_LABEL_COLOR)

        ax.yaxis.set_major_locator(MaxNLocator(nbins=VALUE_TICK_COUNT))
        ax.yaxis.set_major_formatter(FuncFormatter(lambda value, _pos: format_value_tick(value)))
        ax.xaxis.set_major_formatter(
            FuncFormatter(lambda num, _pos: format_year_tick(mdates.num2date(num).date()))
        )

        (self.line,) = ax.plot([], [], color=LINE_COLOR, linewidth=1, zorder=3)
        self.area = None
        self.gradient = None

        ax.text(
            0, 1.02, CHART_TITLE,
            transform=ax.transAxes,
            fontfamily="sans-serif", fontsize=16, fontweight="bold",
            ha="left", va="bottom",
        )
        credit = ax.text(
            1, -0.06, SOURCE_CREDIT,
            transform=ax.transAxes,
            fontfamily="sans-serif", fontsize=8, fontweight="bold",
            ha="right", va="top",
        )
        credit.set_url(SOURCE_URL)

        print("[Plot] Plot area ready")
        return ax

    def draw(self, view: ViewState) -> None:
        """Redraw line, area and both axes for ``view``.

        Args:
            view: Visible series and the axis domains to show
        """
        if self.ax is None:
            self.setup()

        self._remove_area()

        x = mdates.date2num(view.series.dates) if not view.is_empty else np.array([])
        y = view.series.values
        self.line.set_data(x, y)

        if not view.is_empty:
            self._draw_area(x, y, view.value_domain[1])

        self._apply_domains(view)

        print(f"[Plot] Drew {len(view.series)} points, {view.date_domain[0]} to {view.date_domain[1]}")

    def _draw_area(self, x: np.ndarray, y: np.ndarray, top: float) -> None:
        ax = self.ax
        self.area = ax.fill_between(x, 0, y, facecolor="none", edgecolor="none", zorder=2)
        if len(x) < 2 or top <= 0:
            # nothing to shade under a single point or a flat zero line
            return
        self.gradient = ax.imshow(
            self._gradient_rgba,
            aspect="auto",
            extent=(x[0], x[-1], 0, top),
            origin="upper",
            alpha=AREA_OPACITY,
            zorder=2,
        )
        paths = self.area.get_paths()
        if paths:
            self.gradient.set_clip_path(paths[0], transform=ax.transData)

    def _remove_area(self) -> None:
        for artist in (self.area, self.gradient):
            if artist is not None:
                artist.remove()
        self.area = None
        self.gradient = None

    def _apply_domains(self, view: ViewState) -> None:
        ax = self.ax
        start, end = date_limits(view.date_domain)
        ax.set_xlim(mdates.date2num(start), mdates.date2num(end))
        ax.set_ylim(*value_limits(view.value_domain))

        ticks = year_ticks(view.date_domain[0], view.date_domain[1])
        ax.xaxis.set_major_locator(FixedLocator(mdates.date2num(ticks) if ticks else []))
