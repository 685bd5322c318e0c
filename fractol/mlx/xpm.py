"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from fractol.mlx.colornames import lookup_color
from fractol.mlx.image import Image, new_image
from fractol.mlx.textutil import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000

_NAME_LIMIT = 63
_INT = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _blank(text: str, start: int, count: int) -> str:
    count = min(count, len(text) - start)
    return text[:start] + " " * count + text[start + count :]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces."""
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = find(text[begin + 2 :], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = find(text[begin + 2 :], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in text, in order."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def color_key(chars: str) -> int:
    """Pack the characters naming a palette entry into one integer."""
    result = 0
    for char in chars:
        result = (result << 8) + ord(char)
    return result


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    if not match:
        return 0
    value = int(match.group(3), 16)
    return -value if match.group(1) == "-" else value


def get_text_rgb(name: str, end: str | None) -> int:
    """Return the colour a palette entry names: #hex, or a colour name.

    A two-word name is passed as name and end. Unknown names give 0;
    "None" gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _next_line(source: Iterator[str], what: str) -> str:
    try:
        return next(source)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str], byte_order: int = 0) -> Image:
    """Build an image from the strings of an XPM document."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header: {' '.join(header)}")

    # With one or two chars per pixel the last definition of a key wins,
    # with more the first one does.
    direct = cpp <= 2
    palette: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour visual in {line!r}") from None
        if at >= len(words):
            raise XpmError(f"no colour after 'c' in {line!r}")
        end = words[at + 1] if at + 1 < len(words) else None
        rgb = get_text_rgb(words[at], end)
        key = color_key(line[:cpp])
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = new_image(width, height, byte_order)
    for y in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < cpp * width:
            raise XpmError(f"pixel row {y} too short")
        for x in range(width):
            color = palette.get(color_key(line[cpp * x : cpp * (x + 1)]), 0)
            if color == -1:
                color = TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def xpm_to_image(lines: Iterable[str], byte_order: int = 0) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(list(lines), byte_order)


def xpm_file_to_image(path: str | os.PathLike[str], byte_order: int = 0) -> Image:
    """Read an XPM file into an image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)), byte_order)