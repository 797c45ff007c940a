import math
from datetime import date, datetime, timedelta, timezone

import matplotlib.dates as mdates

from indexchart.scales import LinearScale, TimeScale, date_limits, date_of, value_limits
from indexchart.series import day_number


def test_time_scale_maps_domain_onto_range() -> None:
    scale = TimeScale((date(2020, 1, 1), date(2020, 1, 11)), (0, 1000))
    assert scale(date(2020, 1, 1)) == 0
    assert math.isclose(scale(date(2020, 1, 11)), 1000)
    assert math.isclose(scale(date(2020, 1, 6)), 500)


def test_time_scale_invert_keeps_time_of_day() -> None:
    scale = TimeScale((date(2020, 1, 1), date(2020, 1, 3)), (0, 200))
    assert scale.invert(50) == datetime(2020, 1, 1, 12, tzinfo=timezone.utc)


def test_linear_scale_flipped_range_and_invert() -> None:
    scale = LinearScale((0, 150), (700, 0))
    assert scale(0) == 700
    assert math.isclose(scale(150), 0, abs_tol=1e-9)
    assert math.isclose(scale.invert(350), 75)


def test_degenerate_domain_is_one_unit_tall() -> None:
    scale = LinearScale((5, 5), (0, 100))
    assert scale(5) == 0
    assert scale(6) == 100
    assert math.isnan(scale(float("nan")))


def test_value_limits_widen_flat_and_negative_domains() -> None:
    assert value_limits((0.0, 150.0)) == (0.0, 150.0)
    assert value_limits((0.0, 0.0)) == (0.0, 1.0)
    assert value_limits((0.0, -4.0)) == (0.0, 1.0)


def test_date_limits_pad_a_single_day() -> None:
    assert date_limits((date(2020, 1, 2), date(2020, 1, 2))) == (date(2020, 1, 1), date(2020, 1, 3))
    assert date_limits((date(2020, 1, 1), date(2020, 2, 1))) == (date(2020, 1, 1), date(2020, 2, 1))


def test_day_number_agrees_with_matplotlib_dates() -> None:
    assert day_number(date(2020, 3, 1)) == mdates.date2num(date(2020, 3, 1))
    assert day_number("2020-03-01") == mdates.date2num(date(2020, 3, 1))
    # aware datetimes are measured in UTC
    brasilia = timezone(timedelta(hours=-3))
    assert day_number(datetime(2020, 3, 1, 21, tzinfo=brasilia)) == mdates.date2num(datetime(2020, 3, 2))


def test_date_of_rounds_to_nearest_day() -> None:
    assert date_of(datetime(2020, 1, 1, 11)) == date(2020, 1, 1)
    assert date_of(datetime(2020, 1, 1, 13)) == date(2020, 1, 2)
    assert date_of(mdates.date2num(date(2020, 1, 1)) + 0.6) == date(2020, 1, 2)
