import pytest

from lifegrid.field import Field


def make_field():
    return Field(0.5, 10.0, 0.0, 40.0)


def test_starts_at_home():
    f = make_field()
    assert (f.xpos, f.ypos) == (f.homex, f.homey)
    assert f.scale == 1.0


def test_shift_moves_position():
    f = make_field()
    f.shift(12.0, -7.0)
    assert f.xpos == pytest.approx(f.homex + 12.0)
    assert f.ypos == pytest.approx(f.homey - 7.0)


def test_zoom_keeps_point_fixed():
    f = make_field()
    f.shift(30.0, 15.0)
    x, y = 200.0, 300.0
    before = ((x - f.xpos) / f.scale, (y - f.ypos) / f.scale)
    f.zoom(x, y, 0.05)
    after = ((x - f.xpos) / f.scale, (y - f.ypos) / f.scale)
    assert after == pytest.approx(before)


def test_zoom_direction():
    f = make_field()
    f.zoom(10.0, 10.0, 0.05)
    assert f.scale > 1.0
    g = make_field()
    g.zoom(10.0, 10.0, -0.05)
    assert g.scale < 1.0


def test_zoom_at_origin_of_field_keeps_position():
    f = make_field()
    f.zoom(f.xpos, f.ypos, 0.3)
    assert (f.xpos, f.ypos) == pytest.approx((f.homex, f.homey))


def test_home_resets_everything():
    f = make_field()
    f.shift(5.0, 5.0)
    f.zoom(100.0, 100.0, 0.2)
    f.home()
    assert (f.xpos, f.ypos, f.scale) == (f.homex, f.homey, 1.0)
    assert (f.scale_down, f.scale_up) == (0.5, 10.0)