import pytest

from fractol.mlx.events import Event, EventMask, EventType
from fractol.mlx.image import Image, new_image
from fractol.mlx.window import Window

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42


def color_map_1(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def fill_image(image):
    for y in range(image.height):
        for x in range(image.width):
            image.set_pixel(x, y, color_map_1(x, y, image.width, image.height))


def test_new_window_is_black_and_fixed_size():
    win = Window(WIN1_SX, WIN1_SY, "Title1")
    assert win.title == "Title1"
    assert win.pixel(0, 0) == 0
    assert win.pixel(WIN1_SX - 1, WIN1_SY - 1) == 0
    assert win.min_size == win.max_size == (WIN1_SX, WIN1_SY)


def test_first_expose_is_pending():
    win = Window(WIN1_SX, WIN1_SY, "Title1")
    assert list(win.pending) == [Event(EventType.EXPOSE, window=win)]


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
def test_invalid_size_is_rejected(size):
    with pytest.raises(ValueError):
        Window(*size)


def test_colormap_with_pixel_put():
    win = Window(WIN1_SX, WIN1_SY, "Title1")
    for x in range(WIN1_SX):
        for y in range(0, WIN1_SY, 11):
            win.pixel_put(x, y, color_map_1(x, y, WIN1_SX, WIN1_SY))
    for x, y in [(0, 0), (120, 121), (241, 231), (17, 44)]:
        assert win.pixel(x, y) == color_map_1(x, y, WIN1_SX, WIN1_SY)


def test_pixel_put_outside_is_clipped():
    win = Window(10, 10)
    win.pixel_put(-1, 3, 0xFFFFFF)
    win.pixel_put(10, 3, 0xFFFFFF)
    assert all(win.pixel(x, 3) == 0 for x in range(10))
    with pytest.raises(IndexError):
        win.pixel(10, 3)


def test_clear_window():
    win = Window(WIN1_SX, WIN1_SY, "Title1")
    win.pixel_put(5, 5, 0xFF99FF)
    win.string_put(5, WIN1_SY // 2, 0xFF99FF, "String output")
    win.clear()
    assert win.pixel(5, 5) == 0
    assert win.texts == []


@pytest.mark.parametrize("byte_order", [0, 1])
def test_put_image_at_offset(byte_order):
    win = Window(WIN1_SX, WIN1_SY, "Title1")
    image = new_image(IM1_SX, IM1_SY, byte_order)
    fill_image(image)
    win.put_image(image, 20, 20)
    for x, y in [(0, 0), (41, 41), (10, 30), (33, 2)]:
        assert win.pixel(20 + x, 20 + y) == image.pixel(x, y)
    assert win.pixel(19, 20) == 0
    assert win.pixel(20 + IM1_SX, 20) == 0


def test_put_image_is_clipped_at_edges():
    win = Window(30, 30)
    image = new_image(IM1_SX, IM1_SY)
    fill_image(image)
    win.put_image(image, -5, -7)
    assert win.pixel(0, 0) == image.pixel(5, 7)
    assert win.pixel(29, 29) == image.pixel(34, 36)
    win.put_image(image, 100, 100)
    assert win.pixel(29, 29) == image.pixel(34, 36)


def test_put_image_masks_to_depth():
    win = Window(4, 4)
    image = Image(2, 2)
    image.set_pixel(0, 0, 0xFF000000)
    image.set_pixel(1, 1, 0xFF00FFFF)
    win.put_image(image, 0, 0)
    assert win.pixel(0, 0) == 0
    assert win.pixel(1, 1) == 0x00FFFF


def test_string_put_records_text_with_font():
    win = Window(WIN1_SX, WIN1_SY, "Title1")
    win.string_put(5, WIN1_SY // 2, 0xFF99FF, "String output")
    win.set_font("fixed")
    win.string_put(15, WIN1_SY // 2 + 20, 0x00FFFF, "MinilibX test")
    assert win.texts == [
        (5, WIN1_SY // 2, 0xFF99FF, "String output", None),
        (15, WIN1_SY // 2 + 20, 0x00FFFF, "MinilibX test", "fixed"),
    ]


def test_key_hook_receives_escape():
    win = Window(WIN1_SX, WIN1_SY, "Title3")
    keys = []
    win.key_hook(lambda key, p: keys.append((key, p)), None)
    assert win.hooks.get(EventType.KEY_RELEASE).mask == EventMask.KEY_RELEASE
    win.hooks.dispatch(Event(EventType.KEY_RELEASE, keysym=0xFF1B))
    assert keys == [(0xFF1B, None)]


def test_mouse_and_expose_hooks():
    win = Window(WIN1_SX, WIN1_SY, "Title1")
    seen = []
    win.mouse_hook(lambda b, x, y, p: seen.append((b, x, y)), 0)
    win.expose_hook(lambda p: seen.append("expose"), 0)
    win.hooks.dispatch(win.pending.popleft())
    win.hooks.dispatch(Event(EventType.BUTTON_PRESS, button=1, x=12, y=34))
    assert seen == ["expose", (1, 12, 34)]
    assert win.hooks.event_mask() == EventMask.BUTTON_PRESS | EventMask.EXPOSURE


def test_generic_hook_for_motion():
    win = Window(WIN1_SX, WIN1_SY, "Title3")
    moves = []
    win.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION,
             lambda x, y, p: moves.append((x, y)), 0)
    win.hooks.dispatch(Event(EventType.MOTION_NOTIFY, x=7, y=9))
    assert moves == [(7, 9)]


def test_mouse_pointer_controls():
    win = Window(WIN1_SX, WIN1_SY)
    win.mouse_move(40, 50)
    assert win.mouse_pos() == (40, 50)
    win.mouse_hide()
    assert win.cursor_visible is False
    win.mouse_show()
    assert win.cursor_visible is True