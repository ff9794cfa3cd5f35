import pytest

from junglecore.color import LinearColor


def test_default_color_is_fully_transparent_black():
    assert LinearColor().rgba == (0.0, 0.0, 0.0, 0.0)


def test_given_color_defaults_to_opaque():
    assert LinearColor(0.2, 0.4, 0.6).a == 1.0
    assert LinearColor(0.2, 0.4, 0.6, 0.5).a == 0.5


def test_named_colors():
    assert LinearColor(1.0, 0.0, 0.0) == LinearColor.RED
    assert LinearColor.RED + LinearColor.GREEN + LinearColor.BLUE != LinearColor.WHITE
    assert (LinearColor.RED + LinearColor.GREEN + LinearColor.BLUE).rgba[:3] == LinearColor.WHITE.rgba[:3]


def test_componentwise_multiply():
    white = LinearColor(1.0, 1.0, 1.0)
    red = LinearColor(1.0, 0.0, 0.0)
    black = LinearColor(0.0, 0.0, 0.0)
    green = LinearColor(0.0, 1.0, 0.0)
    assert (white * red).rgba == (1.0, 0.0, 0.0, 1.0)
    assert (black * green).rgba == (0.0, 0.0, 0.0, 1.0)


def test_divide_by_zero_raises():
    white = LinearColor(1.0, 1.0, 1.0)
    with pytest.raises(ZeroDivisionError) as excinfo:
        white / 0.0
    assert excinfo.type is ZeroDivisionError
    assert white.rgba == (1.0, 1.0, 1.0, 1.0)


def test_clamp_default_range():
    c = LinearColor(-0.5, 0.5, 2.0, 3.0).clamp()
    assert c == LinearColor(0.0, 0.5, 1.0, 1.0)


def test_clamp_custom_range():
    c = LinearColor(0.1, 0.5, 0.9, 0.3).clamp(0.2, 0.8)
    assert all(0.2 <= part <= 0.8 for part in c)
    assert c.g == 0.5


def test_lerp_endpoints():
    assert LinearColor.lerp(LinearColor.RED, LinearColor.BLUE, 0.0) == LinearColor.RED
    assert LinearColor.lerp(LinearColor.RED, LinearColor.BLUE, 1.0) == LinearColor.BLUE


def test_lerp_midpoint_is_average():
    a = LinearColor(0.0, 0.2, 0.4, 0.0)
    b = LinearColor(1.0, 0.6, 0.0, 1.0)
    mid = LinearColor.lerp(a, b, 0.5)
    for got, x, y in zip(mid, a, b):
        assert got == pytest.approx((x + y) / 2)


def test_not_equal():
    assert LinearColor.RED != LinearColor.GREEN
    assert not (LinearColor.RED != LinearColor(1.0, 0.0, 0.0, 1.0))