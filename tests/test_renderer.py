import numpy as np
import pytest

from mandelzoom.compute import color_from_iter, escape_time
from mandelzoom.config import ViewerConfig
from mandelzoom.renderer import Frame, FrameRenderer, RenderInProgressError
from mandelzoom.view import ViewState


@pytest.fixture
def renderer(small_config):
    return FrameRenderer(small_config)


def test_frame_shape_and_metadata(renderer):
    view = ViewState()
    frame = renderer.render(view)

    assert isinstance(frame, Frame)
    assert frame.pixels.shape == (60, 80, 4)
    assert frame.iterations.shape == (60, 80)
    assert (frame.width, frame.height) == (80, 60)
    assert frame.view == (-0.5, 0.0, 1.0)
    assert frame.max_iter == 64
    assert frame.elapsed >= 0.0


def test_raster_channels(renderer):
    frame = renderer.render(ViewState())
    assert np.all(frame.pixels >= 0.0)
    assert np.all(frame.pixels <= 1.0)
    np.testing.assert_array_equal(frame.pixels[..., 3], 1.0)


def test_in_set_pixels_are_black(renderer):
    frame = renderer.render(ViewState())
    inside = frame.iterations == frame.max_iter
    assert inside.any()
    np.testing.assert_array_equal(frame.pixels[inside][:, :3], 0.0)


def test_frame_matches_per_pixel_composition(renderer):
    view = ViewState(-0.75, 0.1, 3.0)
    frame = renderer.render(view)
    cfg = renderer.config
    for y in range(0, cfg.height, 7):
        for x in range(0, cfg.width, 9):
            c = view.screen_to_complex(x, y, cfg.width, cfg.height, cfg.base_range)
            n = escape_time(c[0], c[1], cfg.max_iter)
            assert frame.iterations[y, x] == n
            assert tuple(frame.pixels[y, x]) == pytest.approx(color_from_iter(n, cfg.max_iter))


def test_each_render_returns_new_raster(renderer):
    view = ViewState()
    first = renderer.render(view)
    second = renderer.render(view)
    assert first.pixels is not second.pixels
    np.testing.assert_array_equal(first.pixels, second.pixels)

    view.zoom_in()
    third = renderer.render(view)
    assert not np.array_equal(first.iterations, third.iterations)
    assert first.view == (-0.5, 0.0, 1.0)


def test_reentrant_render_rejected(renderer):
    renderer._rendering = True
    assert renderer.rendering
    with pytest.raises(RenderInProgressError):
        renderer.render(ViewState())


def test_guard_released_after_render(renderer):
    renderer.render(ViewState())
    assert not renderer.rendering


def test_guard_released_after_failure(renderer, monkeypatch):
    def boom(view):
        raise RuntimeError("kernel failed")

    monkeypatch.setattr(renderer, "_render", boom)
    with pytest.raises(RuntimeError):
        renderer.render(ViewState())
    assert not renderer.rendering


def test_adaptive_iterations_follow_zoom():
    renderer = FrameRenderer(ViewerConfig(width=40, height=30, adaptive_iterations=True))
    assert renderer.render(ViewState(zoom=1.0)).max_iter == 120
    frame = renderer.render(ViewState(zoom=8.0))
    assert frame.max_iter == 260
    assert frame.iterations.max() <= 260


def test_palette_cached_per_cap(renderer):
    assert renderer.palette(64) is renderer.palette(64)
    assert renderer.palette(64).shape == (65, 4)
    assert renderer.palette(32).shape == (33, 4)


def test_colormap_from_config():
    config = ViewerConfig(width=40, height=30, max_iter=32, colormap="grayscale")
    renderer = FrameRenderer(config)
    gray = renderer.render(ViewState()).pixels
    spectrum = FrameRenderer(ViewerConfig(width=40, height=30, max_iter=32)).render(ViewState()).pixels
    assert renderer.colormap == "grayscale"
    np.testing.assert_array_equal(gray[..., 0], gray[..., 1])
    assert not np.array_equal(spectrum, gray)


def test_adaptive_render_at_extreme_zoom():
    renderer = FrameRenderer(ViewerConfig(width=20, height=15, adaptive_iterations=True))
    frame = renderer.render(ViewState(-0.5, 0.0, 1e300))
    assert frame.max_iter == 500


def test_default_config():
    assert FrameRenderer().config == ViewerConfig()
