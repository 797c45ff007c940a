import math
from datetime import date

import pytest

from indexchart.series import DateRange, InvalidInput, Sample, Series
from indexchart.session import ChartSession, compute_view


def _series() -> Series:
    return Series(
        [
            Sample(date(2020, 1, 1), 100.0),
            Sample(date(2020, 6, 1), 150.0),
            Sample(date(2021, 1, 1), 120.0),
        ]
    )


def test_initial_view_covers_full_extent() -> None:
    session = ChartSession(_series(), plot_width=1100, plot_height=700)
    assert session.view.date_domain == (date(2020, 1, 1), date(2021, 1, 1))
    assert session.view.value_domain == (0.0, 150.0)
    assert len(session.view.series) == 3
    assert session.cursor is None


def test_empty_series_is_rejected() -> None:
    with pytest.raises(InvalidInput):
        ChartSession(Series())


def test_select_range_recomputes_domains() -> None:
    session = ChartSession(_series())
    view = session.select_range(date(2020, 12, 31), date(2020, 2, 1))
    assert view.date_range == DateRange(date(2020, 2, 1), date(2020, 12, 31))
    assert view.date_domain == (date(2020, 2, 1), date(2020, 12, 31))
    assert list(view.series) == [Sample(date(2020, 6, 1), 150.0)]
    assert view.value_domain == (0.0, 150.0)
    assert session.x_scale(date(2020, 2, 1)) == 0.0


def test_empty_range_keeps_value_axis() -> None:
    session = ChartSession(_series())
    session.select_range(date(2020, 12, 1), date(2021, 1, 1))
    assert session.view.value_domain == (0.0, 120.0)

    view = session.select_range(date(2010, 1, 1), date(2010, 12, 31))
    assert view.is_empty
    assert view.value_domain == (0.0, 120.0)
    assert view.date_domain == (date(2010, 1, 1), date(2010, 12, 31))
    assert session.hover(10.0) is None


def test_compute_view_without_previous_domain_falls_back_to_series() -> None:
    view = compute_view(_series(), DateRange(date(2030, 1, 1), date(2030, 2, 1)))
    assert view.is_empty
    assert view.value_domain == (0.0, 150.0)


def test_hover_snaps_to_nearest_and_reports_pixels() -> None:
    session = ChartSession(_series(), plot_width=1100, plot_height=700)
    span_days = (date(2021, 1, 1) - date(2020, 1, 1)).days
    x = 60 / span_days * 1100  # 2020-03-01

    point = session.hover(x)
    assert point is not None
    assert point.sample == Sample(date(2020, 1, 1), 100.0)
    assert point.index == 0
    assert point.x == 0.0
    assert math.isclose(point.y, 100.0 / 150.0 * 700)
    assert session.cursor is point


def test_hover_clamps_at_plot_edges() -> None:
    session = ChartSession(_series(), plot_width=1100, plot_height=700)
    assert session.hover(-40).sample.date == date(2020, 1, 1)
    last = session.hover(1200)
    assert last.sample.date == date(2021, 1, 1)
    assert last.x == pytest.approx(1100.0)


def test_hover_only_sees_visible_samples() -> None:
    session = ChartSession(_series(), plot_width=1000, plot_height=500)
    session.select_range(date(2020, 3, 1), date(2021, 1, 1))
    point = session.hover(0)
    assert point.sample.date == date(2020, 6, 1)
    assert point.y == pytest.approx(500.0)


def test_leave_and_range_change_clear_cursor() -> None:
    session = ChartSession(_series())
    session.hover(100)
    session.leave()
    assert session.cursor is None

    session.hover(100)
    session.select_range(date(2020, 1, 1), date(2020, 12, 31))
    assert session.cursor is None


def test_reset_range_restores_full_view() -> None:
    session = ChartSession(_series())
    session.select_range(date(2020, 6, 1), date(2020, 6, 1))
    view = session.reset_range()
    assert len(view.series) == 3
    assert view.value_domain == (0.0, 150.0)


def test_resize_rescales_pixels() -> None:
    session = ChartSession(_series(), plot_width=1100, plot_height=700)
    session.resize(550, 350)
    assert session.hover(550).x == pytest.approx(550.0)
    assert session.y_scale(150.0) == pytest.approx(350.0)


def test_flat_zero_series_puts_cursor_on_date_axis() -> None:
    flat = Series([Sample(date(2020, 1, 2), 0.0), Sample(date(2020, 1, 3), 0.0)])
    session = ChartSession(flat, plot_width=1100, plot_height=700)
    point = session.hover(0)
    assert point.y == 0.0
    assert point.x == 0.0


def test_single_sample_session_pads_date_axis() -> None:
    session = ChartSession(Series([Sample(date(2020, 1, 2), 50.0)]), plot_width=1000, plot_height=500)
    point = session.hover(0)
    assert point.sample.value == 50.0
    assert point.x == 500.0
    assert point.y == pytest.approx(500.0)
