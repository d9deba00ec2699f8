import math

import pytest

from mandelzoom.config import ViewerConfig
from mandelzoom.view import ViewState

W, H = 800, 600


def test_defaults():
    view = ViewState()
    assert view.snapshot() == (-0.5, 0.0, 1.0)


@pytest.mark.parametrize("zoom", [0.0, -1.0, float("nan"), float("inf")])
def test_non_positive_zoom_rejected(zoom):
    with pytest.raises(ValueError):
        ViewState(zoom=zoom)


def test_center_pixel_maps_to_center():
    view = ViewState()
    assert view.screen_to_complex(400, 300, W, H) == (-0.5, 0.0)


def test_center_pixel_maps_to_center_after_zoom():
    view = ViewState(0.25, -0.75, 64.0)
    assert view.screen_to_complex(W // 2, H // 2, W, H) == (0.25, -0.75)


def test_corner_pixel_default_view():
    real, imag = ViewState().screen_to_complex(0, 0, W, H)
    assert real == pytest.approx(-0.5 - 0.5 * 3.5 * W / H)
    assert imag == pytest.approx(-1.75)


@pytest.mark.parametrize("view", [
    ViewState(),
    ViewState(-0.743643887, 0.131825904, 2.0 ** 20),
    ViewState(0.3, 0.5, 0.125),
])
def test_transform_finite_and_monotonic(view):
    xs = range(0, W, 37)
    ys = range(0, H, 29)
    for y in ys:
        reals = [view.screen_to_complex(x, y, W, H)[0] for x in xs]
        assert all(math.isfinite(r) for r in reals)
        assert all(a < b for a, b in zip(reals, reals[1:]))
    for x in xs:
        imags = [view.screen_to_complex(x, y, W, H)[1] for y in ys]
        assert all(math.isfinite(i) for i in imags)
        assert all(a < b for a, b in zip(imags, imags[1:]))


def test_base_range_scales_window():
    view = ViewState(0.0, 0.0, 1.0)
    _, imag_top = view.screen_to_complex(0, 0, W, H, base_range=2.0)
    assert imag_top == pytest.approx(-1.0)


def test_bounds_match_transform_edges():
    view = ViewState(-1.0, 0.25, 4.0)
    real_min, real_max, imag_min, imag_max = view.bounds(W, H)
    assert (real_min, imag_min) == pytest.approx(view.screen_to_complex(0, 0, W, H))
    assert real_max == pytest.approx(view.screen_to_complex(W, 0, W, H)[0])
    assert imag_max == pytest.approx(view.screen_to_complex(0, H, W, H)[1])


def test_recenter():
    view = ViewState()
    view.recenter(0.1, -0.2)
    assert (view.center_real, view.center_imag) == (0.1, -0.2)
    assert view.zoom == 1.0


def test_zoom_in_then_out_round_trips_zoom():
    view = ViewState(zoom=3.0)
    view.zoom_in()
    assert view.zoom == 6.0
    view.zoom_out()
    assert view.zoom == pytest.approx(3.0)


def test_zoom_stays_positive():
    view = ViewState()
    for _ in range(50):
        view.zoom_out()
    assert view.zoom > 0


def test_zoom_out_stops_before_underflow():
    view = ViewState()
    with pytest.raises(ValueError):
        for _ in range(1100):
            view.zoom_out()
    assert view.zoom > 0
    smallest = view.zoom
    with pytest.raises(ValueError):
        view.zoom_out()
    assert view.zoom == smallest
    real, imag = view.screen_to_complex(0, 0, W, H)
    assert math.isfinite(real) and math.isfinite(imag)


def test_zoom_in_stops_before_overflow():
    view = ViewState()
    with pytest.raises(ValueError):
        for _ in range(1100):
            view.zoom_in()
    assert math.isfinite(view.zoom)
    real, imag = view.screen_to_complex(0, 0, W, H)
    assert math.isfinite(real) and math.isfinite(imag)


@pytest.mark.parametrize("factor", [0.0, -2.0])
def test_bad_zoom_factor(factor):
    view = ViewState()
    with pytest.raises(ValueError):
        view.zoom_in(factor)
    with pytest.raises(ValueError):
        view.zoom_out(factor)


def test_reset_restores_defaults():
    view = ViewState()
    view.recenter(1.5, -1.5)
    view.zoom_in()
    view.zoom_in()
    view.zoom_out(8.0)
    view.reset()
    assert view.snapshot() == (-0.5, 0.0, 1.0)


def test_reset_restores_configured_home():
    view = ViewState.from_config(ViewerConfig(center_real=0.3, center_imag=0.1, zoom=4.0))
    view.recenter(0.0, 0.0)
    view.zoom_in()
    view.reset()
    assert view.snapshot() == (0.3, 0.1, 4.0)


def test_equality_ignores_home():
    moved = ViewState(1.0, 1.0, 2.0)
    moved.recenter(-0.5, 0.0)
    moved.zoom_out()
    assert moved == ViewState()
