"""Load index history CSV files into a :class:`Series`."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from .config import DATE_COLUMN, DATE_FORMAT, VALUE_COLUMN
from .series import Series


class SeriesLoadError(Exception):
    """Raised when the input data file cannot be turned into a series."""


@dataclass
class SeriesLoadResult:
    """Represents the result of loading an index history file."""

    series: Series
    source_path: Path
    rows_read: int
    rows_dropped: int


class SeriesLoader:
    """Read a Date/Close CSV, drop unusable rows and sort by date."""

    def __init__(
        self,
        *,
        date_column: str = DATE_COLUMN,
        value_column: str = VALUE_COLUMN,
        date_format: str = DATE_FORMAT,
    ) -> None:
        self.date_column = date_column
        self.value_column = value_column
        self.date_format = date_format

    def load(self, path: str | Path) -> SeriesLoadResult:
        """Load the given data file and return a structured result."""
        file_path = Path(path)
        if not file_path.exists():
            raise SeriesLoadError(f"File not found: {file_path}")

        try:
            df = pd.read_csv(file_path)
        except pd.errors.EmptyDataError:
            raise SeriesLoadError("The selected file is empty.") from None
        if df.empty:
            raise SeriesLoadError("The selected file is empty.")

        df.columns = [str(column).strip() for column in df.columns]
        missing = [c for c in (self.date_column, self.value_column) if c not in df.columns]
        if missing:
            raise SeriesLoadError(f"Missing required column(s): {', '.join(missing)}")

        dates = pd.to_datetime(df[self.date_column], format=self.date_format, errors="coerce")
        if dates.notna().sum() == 0:
            raise SeriesLoadError(f"Could not parse dates in column '{self.date_column}'.")
        values = pd.to_numeric(df[self.value_column], errors="coerce")

        frame = pd.DataFrame({"date": dates, "value": values}).dropna()
        # stable sort so "keep last" means last in file order
        frame = frame.sort_values("date", kind="mergesort")
        frame = frame.drop_duplicates(subset="date", keep="last")
        if frame.empty:
            raise SeriesLoadError(f"No rows with both a date and a numeric '{self.value_column}'.")

        series = Series.from_arrays(frame["date"].to_numpy(), frame["value"].to_numpy())
        rows_dropped = len(df) - len(series)

        print(f"[Data Load] {file_path.name}: {len(series)} samples ({rows_dropped} rows dropped)")
        print(f"[Data Load] Span {series.first.date} to {series.last.date}")

        return SeriesLoadResult(
            series=series,
            source_path=file_path,
            rows_read=len(df),
            rows_dropped=rows_dropped,
        )
