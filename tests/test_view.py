import pytest

from fractol.fractal import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    ESC,
    MAX_ITER,
    ZOOM_IN,
    ZOOM_OUT,
    get_color,
)
from fractol.mlx.image import Image
from fractol.view import Viewport, render_julia, render_mandelbrot, zoom_factor


def _rgb_at(image, x, y):
    start = image.size_line * y + image.bytes_per_pixel * x
    return bytes(image.data[start : start + 3])


def _rgb(color):
    return bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))


def test_zoom_factors():
    assert zoom_factor(ZOOM_IN) == 0.9
    assert zoom_factor(ZOOM_OUT) == 1.1
    assert zoom_factor(1) == 1.0


def test_default_bounds():
    view = Viewport()
    assert (view.min_re, view.max_re, view.min_im, view.max_im) == (-2.0, 2.0, -2.0, 2.0)


def test_to_complex_corners_and_centre():
    view = Viewport(width=8, height=8)
    assert view.to_complex(0, 0) == complex(-2, -2)
    assert view.to_complex(4, 4) == pytest.approx(0j)


@pytest.mark.parametrize("button", [ZOOM_IN, ZOOM_OUT])
def test_zoom_keeps_point_under_mouse(button):
    view = Viewport(width=8, height=8)
    before = view.to_complex(3, 5)
    view.zoom_at(button, 3, 5)
    assert view.to_complex(3, 5) == pytest.approx(before)


def test_zoom_in_shrinks_span():
    view = Viewport()
    view.zoom_at(ZOOM_IN, 100, 200)
    assert view.max_re - view.min_re == pytest.approx(4.0 * 0.9)
    assert view.max_im - view.min_im == pytest.approx(4.0 * 0.9)


def test_other_button_leaves_view_alone():
    view = Viewport()
    view.zoom_at(1, 10, 10)
    assert view == Viewport()


def test_pan_directions():
    view = Viewport()
    assert view.pan(ARROW_RIGHT) is True
    assert view.min_re == pytest.approx(-1.9)
    view.pan(ARROW_LEFT)
    assert view.min_re == pytest.approx(-2.0)
    view.pan(ARROW_UP)
    assert view.max_im == pytest.approx(1.9)
    view.pan(ARROW_DOWN)
    assert view.max_im == pytest.approx(2.0)


def test_pan_ignores_other_keys():
    view = Viewport()
    assert view.pan(ESC) is False
    assert view == Viewport()


def test_reset_restores_bounds():
    view = Viewport(width=8, height=8)
    view.zoom_at(ZOOM_IN, 1, 1)
    view.pan(ARROW_RIGHT)
    view.reset()
    assert view == Viewport(width=8, height=8)


def test_mandelbrot_centre_is_inside_set():
    view = Viewport(width=4, height=4)
    image = render_mandelbrot(view, Image(4, 4))
    assert _rgb_at(image, 2, 2) == _rgb(get_color(MAX_ITER))


def test_mandelbrot_corner_escapes_at_once():
    view = Viewport(width=4, height=4)
    image = render_mandelbrot(view, Image(4, 4))
    # c = -2-2i: z becomes c after one step, which is outside the bail-out.
    assert _rgb_at(image, 0, 0) == _rgb(get_color(1))


def test_julia_of_zero():
    view = Viewport(width=4, height=4)
    image = render_julia(view, 0j, Image(4, 4))
    assert _rgb_at(image, 2, 2) == _rgb(get_color(MAX_ITER))
    assert _rgb_at(image, 0, 0) == _rgb(get_color(0))


def test_render_skips_pixels_outside_image():
    view = Viewport(width=6, height=6)
    image = render_julia(view, complex(-0.8, 0.156), Image(3, 3))
    assert image.width == 3
    assert _rgb_at(image, 2, 2) != bytes(3)