"""Escape-time iteration, the colour palette and argument parsing."""

from __future__ import annotations

import math
import re
from functools import reduce

from fractol.mlx.image import Image

WIDTH = 400
HEIGHT = 400
BAIL_OUT = 4
MAX_ITER = 75
PI = 3.14

ESC = 65307
ZOOM_IN = 4
ZOOM_OUT = 5
ARROW_LEFT = 65361
ARROW_UP = 65362
ARROW_RIGHT = 65363
ARROW_DOWN = 65364

_NUMBER = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")
_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)(?:\.([0-9]*))?")


def escape_time(z: complex, c: complex) -> int:
    """Count iterations of z -> z*z + c before |z|^2 reaches the bail-out.

    The count stops at MAX_ITER for points that never escape.
    """
    re_, im = z.real, z.imag
    c_re, c_im = c.real, c.imag
    iteration = 0
    while re_ * re_ + im * im < BAIL_OUT and iteration < MAX_ITER:
        re_, im = re_ * re_ - im * im + c_re, 2 * re_ * im + c_im
        iteration += 1
    return iteration


def get_color(iteration: int) -> int:
    """Map an iteration count to a 0xRRGGBB colour."""
    t = iteration / MAX_ITER
    red = int((math.cos(t * PI) * 0.5 + 0.5) * 255)
    green = int((math.cos(t * PI) * 0.5 + 0.5) * 255)
    blue = int((math.sin(t * PI) * 0.5 + 0.5) * 255)
    return (red << 16) | (green << 8) | blue


def put_pixel(image: Image, x: int, y: int, color: int) -> None:
    """Write color's red, green and blue bytes at (x, y) in that order.

    Points outside the image are ignored.
    """
    if not (0 <= x < image.width and 0 <= y < image.height):
        return
    offset = image.bytes_per_pixel * x + image.size_line * y
    image.data[offset : offset + 3] = bytes(
        ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
    )


def is_valid_number(text: str) -> bool:
    """Tell whether text is a plain decimal number such as -0.8 or 42."""
    return _NUMBER.fullmatch(text) is not None


def _accumulate(digits: str) -> float:
    return reduce(lambda total, digit: total * 10.0 + int(digit), digits, 0.0)


def parse_double(text: str) -> float:
    """Read the decimal number at the start of text, after any whitespace.

    Parsing stops at the first character that cannot continue the
    number; text without digits gives 0.0.
    """
    match = _LEADING_NUMBER.match(text)
    sign = -1.0 if match.group(1) == "-" else 1.0
    integer = _accumulate(match.group(2))
    fraction_digits = match.group(3) or ""
    fraction = _accumulate(fraction_digits)
    divisor = 10.0 ** len(fraction_digits)
    return sign * (integer + fraction / divisor)