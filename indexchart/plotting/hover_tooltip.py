"""Interactive hover cursor for data point inspection.

Snaps a marker to the sample nearest the pointer, draws dashed guide lines
to both axes and labels the value beside the value axis and the date under
the date axis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import matplotlib.dates as mdates

from ..config import (
    CURSOR_EDGE,
    CURSOR_FILL,
    CURSOR_OPACITY,
    CURSOR_RADIUS,
    GUIDE_COLOR,
)
from ..formatting import format_date, format_value

if TYPE_CHECKING:
    import matplotlib.axes
    import matplotlib.figure
    from matplotlib.backend_bases import FigureCanvasBase

    from ..series import CursorPoint
    from ..session import ChartSession


_GUIDE_STYLE = dict(color=GUIDE_COLOR, linewidth=1, linestyle=(0, (2, 2)), zorder=100)
_LABEL_BOX = dict(boxstyle="round,pad=0.4", facecolor="white", edgecolor="#333333", alpha=0.95, linewidth=1)


class HoverTooltipHandler:
    """Manages the hover cursor on the chart."""

    def __init__(
        self,
        fig: matplotlib.figure.Figure,
        ax: matplotlib.axes.Axes,
        canvas: FigureCanvasBase,
        session: ChartSession,
    ):
        """Initialize the hover tooltip handler.

        Args:
            fig: Matplotlib figure
            ax: Plot axes the cursor lives in
            canvas: Canvas delivering mouse events
            session: Chart session answering nearest-sample lookups
        """
        self.fig = fig
        self.ax = ax
        self.canvas = canvas
        self.session = session

        # State for visualization elements
        self.hover_marker: Optional[Any] = None
        self.hover_vline: Optional[Any] = None
        self.hover_hline: Optional[Any] = None
        self.value_label: Optional[Any] = None
        self.date_label: Optional[Any] = None

        # For logging throttling
        self._hover_call_count = 0

        # Connect mouse motion event
        self.canvas.mpl_connect("motion_notify_event", self.on_graph_hover)
        # Connect axes leave event to clear hover when mouse leaves
        self.canvas.mpl_connect("axes_leave_event", self._on_axes_leave)

    def attach(self, ax: matplotlib.axes.Axes, session: ChartSession) -> None:
        """Point the handler at a freshly built plot and session.

        Call :meth:`clear` before the old axes are torn down; artists from a
        cleared figure are dropped here without being removed again.
        """
        self.hover_marker = self.hover_vline = self.hover_hline = None
        self.value_label = self.date_label = None
        self.ax = ax
        self.session = session

    def on_graph_hover(self, event: Any) -> None:
        """Handle mouse movement over the graph.

        Args:
            event: Matplotlib mouse motion event
        """
        if event.inaxes is not self.ax or event.x is None:
            self.session.leave()
            self._clear_hover_elements()
            return

        self._hover_call_count += 1
        log_this_call = (self._hover_call_count % 50 == 1)

        # Pixel coordinates relative to the plot area's bottom-left corner
        bbox = self.ax.bbox
        self.session.resize(bbox.width, bbox.height)
        point = self.session.hover(event.x - bbox.x0)

        if point is None:
            self._clear_hover_elements()
            return

        self._clear_hover_elements(redraw=False)
        self.show(point)
        self.canvas.draw_idle()

        if log_this_call:
            print(
                f"[Hover] {format_date(point.sample.date)} = {format_value(point.sample.value)} "
                f"at ({point.x:.0f}, {point.y:.0f})px"
            )

    def show(self, point: CursorPoint) -> None:
        """Draw the cursor graphics for ``point`` (no redraw).

        Args:
            point: Nearest sample; its position comes from the axes data transform
        """
        ax = self.ax
        display = ax.transData.transform((mdates.date2num(point.sample.date), point.sample.value))
        fx, fy = ax.transAxes.inverted().transform(display)

        (self.hover_marker,) = ax.plot(
            [fx], [fy],
            transform=ax.transAxes,
            marker="o",
            markersize=2 * CURSOR_RADIUS,
            markerfacecolor=CURSOR_FILL,
            markeredgecolor=CURSOR_EDGE,
            alpha=CURSOR_OPACITY,
            linestyle="none",
            zorder=101,
        )
        # Guide lines from the point down to the date axis and across to the value axis
        (self.hover_vline,) = ax.plot([fx, fx], [fy, 0], transform=ax.transAxes, **_GUIDE_STYLE)
        (self.hover_hline,) = ax.plot([fx, 1], [fy, fy], transform=ax.transAxes, **_GUIDE_STYLE)

        self.value_label = ax.annotate(
            format_value(point.sample.value),
            xy=(1, fy),
            xycoords="axes fraction",
            xytext=(9, 0),
            textcoords="offset points",
            ha="left",
            va="center",
            fontsize=9,
            bbox=_LABEL_BOX,
            annotation_clip=False,
            zorder=102,
        )
        self.date_label = ax.annotate(
            format_date(point.sample.date),
            xy=(fx, 0),
            xycoords="axes fraction",
            xytext=(0, -24),
            textcoords="offset points",
            ha="center",
            va="top",
            fontsize=9,
            bbox=_LABEL_BOX,
            annotation_clip=False,
            zorder=102,
        )

    def _clear_hover_elements(self, redraw: bool = True) -> None:
        """Remove all hover visualization elements from the plot.

        Args:
            redraw: Whether to redraw the canvas after clearing (default True)
        """
        elements_removed = 0
        for name in ("hover_marker", "hover_vline", "hover_hline", "value_label", "date_label"):
            artist = getattr(self, name)
            if artist is not None:
                artist.remove()
                setattr(self, name, None)
                elements_removed += 1

        if redraw and elements_removed > 0:
            self.canvas.draw_idle()

    def _on_axes_leave(self, event: Any) -> None:
        """Handle mouse leaving the axes area.

        Args:
            event: Matplotlib axes leave event
        """
        self.session.leave()
        self._clear_hover_elements()

    def clear(self, redraw: bool = True) -> None:
        """Public method to clear hover elements."""
        self.session.leave()
        self._clear_hover_elements(redraw=redraw)
