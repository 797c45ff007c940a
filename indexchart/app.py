from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List, Optional

import matplotlib

matplotlib.use("TkAgg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
import tkinter as tk
from tkinter import filedialog, messagebox, ttk

from .config import (
    DEFAULT_CSV,
    FIGURE_DPI,
    FIGURE_HEIGHT_PX,
    FIGURE_WIDTH_PX,
    WINDOW_TITLE,
)
from .data_loader import SeriesLoadError, SeriesLoader
from .formatting import format_date
from .plotting import ChartPlotter, HoverTooltipHandler, RangeSliderHandler
from .session import ChartSession, ViewState


class IndexChartApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title(WINDOW_TITLE)

        self.update_idletasks()
        screen_width = self.winfo_screenwidth()
        screen_height = self.winfo_screenheight()

        # Room for the figure plus the button row, capped to the screen
        window_width = min(FIGURE_WIDTH_PX + 40, int(screen_width * 0.95))
        window_height = min(FIGURE_HEIGHT_PX + 80, int(screen_height * 0.9))
        position_x = (screen_width - window_width) // 2
        position_y = (screen_height - window_height) // 2
        self.geometry(f"{window_width}x{window_height}+{position_x}+{position_y}")

        print(f"[Window Init] Screen: {screen_width}x{screen_height}px")
        print(f"[Window Init] Window: {window_width}x{window_height}px at ({position_x}, {position_y})")

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.session: Optional[ChartSession] = None
        self.source_name: Optional[str] = None
        self.data_loader = SeriesLoader()

        main_container = ttk.Frame(self)
        main_container.grid(row=0, column=0, sticky="nsew")
        main_container.rowconfigure(1, weight=1)
        main_container.columnconfigure(0, weight=1)

        # === Top controls ===
        top = ttk.Frame(main_container)
        top.grid(row=0, column=0, sticky="ew", padx=8, pady=4)
        ttk.Button(top, text="Open Data File...", command=self.open_csv).pack(side=tk.LEFT)
        ttk.Button(top, text="Export PNG", command=lambda: self.export_graph('png')).pack(side=tk.LEFT, padx=5)
        ttk.Button(top, text="Export JPEG", command=lambda: self.export_graph('jpeg')).pack(side=tk.LEFT, padx=5)
        ttk.Button(top, text="Reset Range", command=self.reset_range).pack(side=tk.LEFT, padx=5)
        self.status = tk.StringVar(value="No file loaded")
        ttk.Label(top, textvariable=self.status).pack(side=tk.LEFT, padx=10)

        # === Figure area ===
        self.fig = plt.Figure(
            figsize=(FIGURE_WIDTH_PX / FIGURE_DPI, FIGURE_HEIGHT_PX / FIGURE_DPI),
            dpi=FIGURE_DPI,
        )
        self.canvas = FigureCanvasTkAgg(self.fig, master=main_container)
        self.canvas_widget = self.canvas.get_tk_widget()
        self.canvas_widget.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)

        self.plotter = ChartPlotter(self.fig)
        self.hover_handler: Optional[HoverTooltipHandler] = None
        self.range_slider: Optional[RangeSliderHandler] = None

    def open_csv(self):
        """Ask for a CSV file and chart it."""
        path = filedialog.askopenfilename(
            title="Select index history (CSV)",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not path:
            return
        self.load_series(path)

    def load_series(self, path: str | Path) -> bool:
        """Load ``path`` into a new session and rebuild the chart.

        Returns:
            True when the file was loaded
        """
        try:
            result = self.data_loader.load(path)
        except SeriesLoadError as exc:
            messagebox.showerror("Error loading file", f"Failed to load file:\n{exc}")
            return False

        # Drop the old cursor and slider before the figure is cleared
        if self.hover_handler is not None:
            self.hover_handler.clear(redraw=False)
        if self.range_slider is not None:
            self.range_slider.disconnect()

        self.session = ChartSession(result.series)
        self.source_name = result.source_path.name

        ax = self.plotter.setup()
        self.plotter.draw(self.session.view)

        if self.hover_handler is None:
            self.hover_handler = HoverTooltipHandler(self.fig, ax, self.canvas, self.session)
        else:
            self.hover_handler.attach(ax, self.session)

        self.range_slider = RangeSliderHandler(
            self.fig, self.canvas, self.session, self.plotter, hover=self.hover_handler,
        )
        self.range_slider.on_range_changed = self._on_range_changed

        self.canvas.draw()
        self._on_range_changed(self.session.view)
        return True

    def _on_range_changed(self, view: ViewState) -> None:
        """Callback when the slider selects a new range.

        Args:
            view: The view state now on screen
        """
        start, end = view.date_range.start, view.date_range.end
        if view.is_empty:
            self.status.set(f"{self.source_name}: no data between {format_date(start)} and {format_date(end)}")
        else:
            self.status.set(
                f"{self.source_name}: {len(view.series)} of {len(self.session.series)} samples "
                f"({format_date(start)} to {format_date(end)})"
            )

    def reset_range(self):
        """Show the full date extent again."""
        if self.range_slider is None:
            return
        self.range_slider.reset()

    def export_graph(self, fmt):
        if self.session is None:
            messagebox.showwarning("No graph", "Please load data before exporting.")
            return
        filetypes = [(f"{fmt.upper()} files", f"*.{fmt}"), ("All files", "*.*")]
        path = filedialog.asksaveasfilename(defaultextension=f".{fmt}", filetypes=filetypes)
        if not path:
            return
        try:
            self.fig.savefig(path, format=fmt, bbox_inches='tight')
        except (OSError, ValueError) as e:
            messagebox.showerror("Export error", str(e))
            return
        print(f"[Export] Saved {path}")
        messagebox.showinfo("Export successful", f"Graph exported as {os.path.basename(path)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive index history chart.")
    parser.add_argument(
        "csv",
        nargs="?",
        default=None,
        help=f"CSV with Date and Close columns (default: {DEFAULT_CSV} if present)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    app = IndexChartApp()

    path = Path(args.csv) if args.csv else Path(DEFAULT_CSV)
    if args.csv or path.exists():
        app.load_series(path)

    app.mainloop()


if __name__ == "__main__":
    main()
