from datetime import date, datetime

from indexchart.formatting import (
    format_date,
    format_value,
    format_value_tick,
    format_year_tick,
    year_ticks,
)


def test_format_value_rounds_to_whole_number() -> None:
    assert format_value(118781.4) == "118781"
    assert format_value(99.7) == "100"


def test_format_value_missing() -> None:
    assert format_value(None) == "N/A"
    assert format_value(float("nan")) == "N/A"


def test_format_date_is_iso() -> None:
    assert format_date(date(2020, 3, 1)) == "2020-03-01"
    assert format_date(datetime(2020, 3, 1, 15, 30)) == "2020-03-01"


def test_value_ticks_blank_at_and_below_zero() -> None:
    assert format_value_tick(0.0) == ""
    assert format_value_tick(-20000.0) == ""
    assert format_value_tick(float("nan")) == ""
    assert format_value_tick(20000.0) == "20000"


def test_year_ticks_inside_range() -> None:
    ticks = year_ticks(date(2019, 6, 1), date(2022, 1, 1))
    assert ticks == [date(2020, 1, 1), date(2021, 1, 1), date(2022, 1, 1)]
    assert [format_year_tick(t) for t in ticks] == ["2020", "2021", "2022"]
    assert year_ticks(date(2020, 1, 1), date(2020, 12, 31)) == [date(2020, 1, 1)]
    assert year_ticks(date(2020, 2, 1), date(2020, 12, 31)) == []
