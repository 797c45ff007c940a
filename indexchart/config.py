"""Static configuration for the index chart."""

from __future__ import annotations

# Data source
DEFAULT_CSV = "^BVSP.csv"
DATE_COLUMN = "Date"
VALUE_COLUMN = "Close"
DATE_FORMAT = "%Y-%m-%d"

# Figure geometry (pixels): the chart above, the slider strip below
FIGURE_WIDTH_PX = 1200
CHART_HEIGHT_PX = 800
SLIDER_AREA_HEIGHT_PX = 100
FIGURE_HEIGHT_PX = CHART_HEIGHT_PX + SLIDER_AREA_HEIGHT_PX
FIGURE_DPI = 100
MARGIN_TOP = 50
MARGIN_RIGHT = 50
MARGIN_BOTTOM = 50
MARGIN_LEFT = 50
PLOT_WIDTH_PX = FIGURE_WIDTH_PX - MARGIN_LEFT - MARGIN_RIGHT
PLOT_HEIGHT_PX = CHART_HEIGHT_PX - MARGIN_TOP - MARGIN_BOTTOM

# Slider strip below the plot (pixels)
SLIDER_WIDTH_PX = 300
SLIDER_HEIGHT_PX = 24
SLIDER_OFFSET_LEFT_PX = 60
SLIDER_OFFSET_TOP_PX = 30

# Colours
LINE_COLOR = "steelblue"
AREA_COLOR = "steelblue"
AREA_OPACITY = 0.5
CURSOR_FILL = "springgreen"
CURSOR_EDGE = "green"
CURSOR_OPACITY = 0.75
CURSOR_RADIUS = 5
GUIDE_COLOR = "green"
TICK_LABEL_COLOR = "#888"
TICK_FONT_SIZE = 12
VALUE_TICK_COUNT = 10

# Text
CHART_TITLE = "^BVSP - Dados Históricos do Índice Bovespa"
SOURCE_CREDIT = "Fonte: Yahoo Finance"
SOURCE_URL = "https://finance.yahoo.com/quote/%5EBVSP/"
WINDOW_TITLE = "Index History Chart"
