"""Windows: a fixed-size drawing surface with hooks and a pointer."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Any

from fractol.mlx.events import Event, EventMask, EventType, HookTable
from fractol.mlx.image import Image, convert_color, rgb_shifts

_TRUECOLOR_SHIFTS = rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF)
_ALL_PLANES = 0xFFFFFFFF


class Window:
    """A window of fixed size whose contents are kept in memory.

    The window cannot be resized, starts black, and has its first
    expose event waiting in `pending`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        title: str = "",
        *,
        depth: int = 24,
        shifts: tuple[int, ...] = _TRUECOLOR_SHIFTS,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size {width}x{height}")
        self.width = width
        self.height = height
        self.title = title
        self.depth = depth
        self.shifts = shifts
        self.min_size = (width, height)
        self.max_size = (width, height)
        self.hooks = HookTable()
        self.foreground = _ALL_PLANES
        self.font: str | None = None
        self.cursor_visible = True
        self.texts: list[tuple[int, int, int, str, str | None]] = []
        self.pending: deque[Event] = deque([Event(EventType.EXPOSE, window=self)])
        self._frame = Image(width, height)
        self._pointer = (0, 0)

    def __repr__(self) -> str:
        return f"Window({self.width}, {self.height}, {self.title!r})"

    @property
    def _depth_mask(self) -> int:
        return (1 << min(self.depth, 32)) - 1

    def hook(
        self,
        event_type: int,
        mask: int,
        func: Callable[..., Any] | None,
        param: Any = None,
    ) -> None:
        """Register a hook for any event type."""
        self.hooks.set(event_type, mask, func, param)

    def key_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call func(keysym, param) when a key is released."""
        self.hooks.set(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call func(button, x, y, param) when a mouse button is pressed."""
        self.hooks.set(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call func(param) when the window needs redrawing."""
        self.hooks.set(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def clear(self) -> None:
        """Paint the whole window with the background colour."""
        self._frame.data[:] = bytes(len(self._frame.data))
        self.texts.clear()

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value shown at (x, y)."""
        return self._frame.pixel(x, y) & self._depth_mask

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Draw one pixel of colour 0xRRGGBB; points outside are clipped."""
        self.foreground = convert_color(color, self.depth, self.shifts)
        if 0 <= x < self.width and 0 <= y < self.height:
            self._frame.set_pixel(x, y, self.foreground)

    def string_put(self, x: int, y: int, color: int, text: str) -> None:
        """Draw text with its baseline starting at (x, y) in the current font."""
        self.foreground = convert_color(color, self.depth, self.shifts)
        self.texts.append((x, y, self.foreground, text, self.font))

    def set_font(self, name: str) -> None:
        """Choose the font used by later calls to string_put."""
        self.font = name

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy image into the window with its top left corner at (x, y)."""
        left, top = max(0, x), max(0, y)
        right = min(self.width, x + image.width)
        bottom = min(self.height, y + image.height)
        if left >= right or top >= bottom:
            return
        frame = self._frame
        if image.bpp == frame.bpp and image.byte_order == frame.byte_order:
            step = frame.bytes_per_pixel
            span = (right - left) * step
            for row in range(top, bottom):
                src = (row - y) * image.size_line + (left - x) * step
                dst = row * frame.size_line + left * step
                frame.data[dst : dst + span] = image.data[src : src + span]
            return
        for row in range(top, bottom):
            for col in range(left, right):
                frame.set_pixel(col, row, image.pixel(col - x, row - y))

    def mouse_move(self, x: int, y: int) -> None:
        """Move the pointer to (x, y) relative to the window."""
        self._pointer = (x, y)

    def mouse_hide(self) -> None:
        """Make the pointer invisible over this window."""
        self.cursor_visible = False

    def mouse_show(self) -> None:
        """Show the pointer over this window again."""
        self.cursor_visible = True

    def mouse_pos(self) -> tuple[int, int]:
        """Return the pointer position relative to the window."""
        return self._pointer