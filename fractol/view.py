"""The visible region of the complex plane and fractal rendering."""

from __future__ import annotations

from dataclasses import dataclass

from fractol.fractal import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    HEIGHT,
    WIDTH,
    ZOOM_IN,
    ZOOM_OUT,
    escape_time,
    get_color,
    put_pixel,
)
from fractol.mlx.image import Image

_PAN_STEP = 0.1
_INITIAL_EXTENT = 2.0


def zoom_factor(button: int) -> float:
    """Return the scale a mouse button applies: wheel up zooms in."""
    if button == ZOOM_IN:
        return 0.9
    if button == ZOOM_OUT:
        return 1.1
    return 1.0


@dataclass
class Viewport:
    """A rectangle of the complex plane shown on a width x height screen."""

    max_re: float = _INITIAL_EXTENT
    min_re: float = -_INITIAL_EXTENT
    max_im: float = _INITIAL_EXTENT
    min_im: float = -_INITIAL_EXTENT
    width: int = WIDTH
    height: int = HEIGHT

    def reset(self) -> None:
        """Show the square from -2-2i to 2+2i."""
        self.max_re = _INITIAL_EXTENT
        self.min_re = -_INITIAL_EXTENT
        self.max_im = _INITIAL_EXTENT
        self.min_im = -_INITIAL_EXTENT

    def to_complex(self, x: float, y: float) -> complex:
        """Return the point of the plane under screen pixel (x, y)."""
        re_ = (self.max_re - self.min_re) * x / self.width + self.min_re
        im = (self.max_im - self.min_im) * y / self.height + self.min_im
        return complex(re_, im)

    def zoom_at(self, button: int, x: float, y: float) -> None:
        """Scale the view by the button's factor about the point under (x, y)."""
        factor = zoom_factor(button)
        mouse = self.to_complex(x, y)
        self.max_re = mouse.real + (self.max_re - mouse.real) * factor
        self.min_re = mouse.real + (self.min_re - mouse.real) * factor
        self.max_im = mouse.imag + (self.max_im - mouse.imag) * factor
        self.min_im = mouse.imag + (self.min_im - mouse.imag) * factor

    def pan(self, keycode: int) -> bool:
        """Shift the view for an arrow key; return whether it moved."""
        if keycode == ARROW_RIGHT:
            self.max_re += _PAN_STEP
            self.min_re += _PAN_STEP
        elif keycode == ARROW_LEFT:
            self.max_re -= _PAN_STEP
            self.min_re -= _PAN_STEP
        elif keycode == ARROW_UP:
            self.max_im -= _PAN_STEP
            self.min_im -= _PAN_STEP
        elif keycode == ARROW_DOWN:
            self.max_im += _PAN_STEP
            self.min_im += _PAN_STEP
        else:
            return False
        return True


def _pixels(viewport: Viewport):
    for y in range(viewport.height):
        for x in range(viewport.width):
            yield x, y, viewport.to_complex(x, y)


def render_mandelbrot(viewport: Viewport, image: Image) -> Image:
    """Draw the Mandelbrot set seen through viewport into image."""
    for x, y, point in _pixels(viewport):
        put_pixel(image, x, y, get_color(escape_time(0j, point)))
    return image


def render_julia(viewport: Viewport, c: complex, image: Image) -> Image:
    """Draw the Julia set of c seen through viewport into image."""
    for x, y, point in _pixels(viewport):
        put_pixel(image, x, y, get_color(escape_time(point, c)))
    return image