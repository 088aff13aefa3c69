import pytest

from plotframe.tick_formatter import Formatter, format_tick


def _decimals(label):
    return len(label.split(".")[1]) if "." in label else 0


def test_quarter_spacing_keeps_two_digits():
    assert format_tick(0.25, 0.25) == "0.25"


def test_unit_spacing_has_no_decimals():
    assert format_tick(3.0, 1.0) == "3"


def test_fifth_spacing_has_one_decimal():
    assert format_tick(0.4, 0.2) == "0.4"


@pytest.mark.parametrize("value", [0.0, 0.2, 0.4, 1.6, -0.8])
def test_near_spacings_format_alike(value):
    assert format_tick(value, 0.19999) == format_tick(value, 0.2004)


@pytest.mark.parametrize("delta", [0.001, 0.1, 0.25, 1.0, 5.0, 100.0])
def test_labels_parse_back_near_value(delta):
    for k in range(-3, 6):
        value = k * delta
        assert float(format_tick(value, delta)) == pytest.approx(value, abs=delta / 2 + 1e-9)


@pytest.mark.parametrize("delta", [0.001, 0.1, 0.25, 2.5, 5.0])
def test_consecutive_labels_are_distinct(delta):
    labels = [format_tick(k * delta, delta) for k in range(5)]
    assert len(set(labels)) == len(labels)


def test_finer_spacing_never_uses_fewer_decimals():
    coarse = format_tick(1.0, 0.1)
    fine = format_tick(1.0, 0.01)
    assert _decimals(fine) >= _decimals(coarse)


def test_plain_formatter_uses_format_tick():
    for value, delta in [(0.25, 0.25), (12.0, 2.0), (-0.03, 0.01)]:
        assert Formatter.PLAIN.format(value, delta) == format_tick(value, delta)


def test_zero_spacing_raises():
    with pytest.raises(ValueError):
        format_tick(1.0, 0.0)