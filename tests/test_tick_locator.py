import pytest

from plotframe.tick_locator import (
    IndexLocator,
    LinearLocator,
    MaxNLocator,
    nonsingular,
    scale_range,
)


def _approx(values):
    return pytest.approx(values, rel=1e-6, abs=1e-9)


@pytest.fixture
def locator():
    return MaxNLocator(9).with_steps([1.0, 2.0, 2.5, 5.0, 10.0])


@pytest.mark.parametrize(
    "vmin, vmax, expected",
    [
        (0.0, 0.0, (-1.0, 1.0)),
        (1.0, 1.0, (0.0, 2.0)),
        (1.0, 0.0, (0.0, 1.0)),
        (-1.0, 0.0, (-1.0, 0.0)),
        (0.0, -1.0, (-1.0, 0.0)),
        (0.0, 1.0, (0.0, 1.0)),
        (0.0, 1.0e-6, (0.0, 1.0e-6)),
        (1.0, 1.0 + 1.0e-6, (1.0, 1.000001)),
    ],
)
def test_max_n_locator_view_limits(locator, vmin, vmax, expected):
    assert locator.view_limits(vmin, vmax) == _approx(expected)


@pytest.mark.parametrize(
    "vmin, vmax, expected",
    [
        (0.0, 1.0, [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]),
        (0.0, 10.0, [0.0, 2.0, 4.0, 6.0, 8.0, 10.0]),
        (0.0, 0.1, [0.0, 0.02, 0.04, 0.06, 0.08, 0.099999994]),
        (0.0, 1e6, [0.0, 2e5, 4e5, 6e5, 8e5, 10e5]),
    ],
)
def test_max_n_locator_tick_values_0_1(locator, vmin, vmax, expected):
    assert list(locator.tick_values(vmin, vmax)) == _approx(expected)


@pytest.mark.parametrize(
    "vmin, vmax, expected",
    [
        (11.0, 12.0, [11.0, 11.2, 11.4, 11.6, 11.8, 12.0]),
        (-1009.0, -1008.0, [-1009.0, -1008.8, -1008.6, -1008.4, -1008.2, -1008.0]),
    ],
)
def test_max_n_locator_tick_values_offset(locator, vmin, vmax, expected):
    assert list(locator.tick_values(vmin, vmax)) == _approx(expected)


@pytest.mark.parametrize(
    "vmin, vmax, expected",
    [
        (10.0, 11.0, [10.0, 10.2, 10.4, 10.6, 10.8, 11.0]),
        (10.0, 12.0, [10.0, 10.25, 10.5, 10.75, 11.0, 11.25, 11.5, 11.75, 12.0]),
        (10.0, 13.0, [10.0, 10.5, 11.0, 11.5, 12.0, 12.5, 13.0]),
        (10.0, 14.0, [10.0, 10.5, 11.0, 11.5, 12.0, 12.5, 13.0, 13.5, 14.0]),
        (10.0, 15.0, [10.0, 11.0, 12.0, 13.0, 14.0, 15.0]),
        (10.0, 16.0, [10.0, 11.0, 12.0, 13.0, 14.0, 15.0, 16.0]),
        (10.0, 17.0, [10.0, 11.0, 12.0, 13.0, 14.0, 15.0, 16.0, 17.0]),
        (10.0, 18.0, [10.0, 11.0, 12.0, 13.0, 14.0, 15.0, 16.0, 17.0, 18.0]),
        (10.0, 19.0, [10.0, 12.0, 14.0, 16.0, 18.0, 20.0]),
        (10.0, 20.0, [10.0, 12.0, 14.0, 16.0, 18.0, 20.0]),
    ],
)
def test_max_n_locator_tick_values_ranges(locator, vmin, vmax, expected):
    assert list(locator.tick_values(vmin, vmax)) == _approx(expected)


@pytest.mark.parametrize(
    "vmin, vmax",
    [(-2.0, 6.0), (-2.4, 6.28)],
)
def test_max_n_locator_tick_zero(locator, vmin, vmax):
    expected = [-2.0, -1.0, 0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert list(locator.tick_values(vmin, vmax)) == _approx(expected)


def test_default_max_n_locator_matches_explicit_steps(locator):
    default = MaxNLocator()
    assert list(default.tick_values(10.0, 19.0)) == list(locator.tick_values(10.0, 19.0))


def test_view_limits_contain_range(locator):
    for vmin, vmax in [(0.3, 7.7), (-13.2, 4.1), (100.5, 101.25)]:
        lo, hi = locator.view_limits(vmin, vmax)
        assert lo <= vmin and hi >= vmax


def test_with_steps_rejects_empty():
    with pytest.raises(ValueError):
        MaxNLocator().with_steps([])


def test_with_steps_rejects_out_of_range():
    with pytest.raises(ValueError):
        MaxNLocator().with_steps([0.5, 2.0])


def test_index_locator_ticks():
    assert list(IndexLocator(1.0, 0.0).tick_values(0.0, 3.0)) == _approx([0.0, 1.0, 2.0, 3.0])


def test_index_locator_default_view_limits():
    assert IndexLocator(1.0, 0.0).view_limits(2.0, 5.0) == (2.0, 5.0)


def test_index_locator_too_many_ticks():
    with pytest.raises(ValueError):
        IndexLocator(1.0, 0.0).tick_values(0.0, 2000.0)


def test_linear_locator_ticks():
    ticks = LinearLocator(5).tick_values(0.0, 1.0)
    assert list(ticks) == _approx([0.0, 0.25, 0.5, 0.75, 1.0])


def test_linear_locator_default_count():
    assert len(LinearLocator().tick_values(0.0, 1.0)) == 11


@pytest.mark.parametrize(
    "vmin, vmax, expected",
    [(2.0, 1.0, (1.0, 2.0)), (1.0, 1.0, (0.0, 2.0)), (0.0, 3.0, (0.0, 3.0))],
)
def test_linear_locator_view_limits(vmin, vmax, expected):
    assert LinearLocator().view_limits(vmin, vmax) == expected


def test_nonsingular_non_finite():
    assert nonsingular(float("inf"), 1.0, 1e-13, 1e-14) == _approx((-1e-13, 1e-13))


def test_nonsingular_zero_range():
    assert nonsingular(0.0, 0.0, 1e-13, 1e-14) == _approx((-1e-13, 1e-13))


def test_nonsingular_keeps_wide_range():
    assert nonsingular(1.0, 2.0, 1e-13, 1e-14) == (1.0, 2.0)


def test_scale_range_zero_width():
    assert scale_range(5.0, 5.0, 9) == (1.0, 0.0)


def test_scale_range_unit():
    assert scale_range(0.0, 1.0, 9) == _approx((0.1, 0.0))


def test_scale_range_offset_sign():
    scale, offset = scale_range(-1009.0, -1008.0, 9)
    assert offset == _approx(-1000.0)
    assert scale == _approx(0.1)