"""Off-screen images held in memory, and pixel colour conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class ImageType(IntEnum):
    """How an image's pixels are stored."""

    XIMAGE = 1
    SHM = 2
    SHM_PIXMAP = 3


@dataclass(eq=False)
class Image:
    """A width x height pixel buffer laid out in rows of size_line bytes."""

    width: int
    height: int
    byte_order: int = 0
    bpp: int = 32
    type: ImageType = ImageType.XIMAGE
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bpp <= 0 or self.bpp % 8:
            raise ValueError(f"unsupported bits per pixel: {self.bpp}")
        if self.byte_order not in (0, 1):
            raise ValueError(f"invalid byte order: {self.byte_order}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def size_line(self) -> int:
        return self.width * self.bytes_per_pixel

    @property
    def _order(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * self.bytes_per_pixel

    def pixel(self, x: int, y: int) -> int:
        """Return the stored value of pixel (x, y)."""
        start = self._offset(x, y)
        raw = self.data[start : start + self.bytes_per_pixel]
        return int.from_bytes(raw, self._order)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store color at (x, y), in the image's byte order."""
        start = self._offset(x, y)
        size = self.bytes_per_pixel
        value = color & ((1 << (8 * size)) - 1)
        self.data[start : start + size] = value.to_bytes(size, self._order)

    def to_ppm(self) -> bytes:
        """Return the image as a binary PPM (P6) document."""
        out = bytearray(f"P6\n{self.width} {self.height}\n255\n".encode("ascii"))
        for y in range(self.height):
            for x in range(self.width):
                color = self.pixel(x, y)
                out += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        return bytes(out)


def new_image(width: int, height: int, byte_order: int = 0) -> Image:
    """Create a zeroed 32-bit image."""
    return Image(width, height, byte_order)


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive: {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (shift, bits) for red, green and blue as one 6-tuple."""
    return (*_mask_shift(red_mask), *_mask_shift(green_mask), *_mask_shift(blue_mask))


def convert_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth."""
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )