# fractol

Renders the Mandelbrot set and Julia sets into in-memory images. Each
pixel is coloured by an escape-time count (at most 75 iterations of
`z -> z*z + c`, stopping once `|z|^2` reaches 4) mapped through a
cosine/sine colour ramp. The region of the complex plane on view can be
panned and zoomed.

The package carries its own small image and window layer
(`fractol.mlx`): images with a raw pixel buffer, in-memory windows with
event hooks, named X11-style colours and an XPM image reader. It needs no
third-party libraries.

## Installation

```
pip install .
```

## Rendering

```python
from fractol.mlx.image import new_image
from fractol.view import Viewport, render_mandelbrot, render_julia

image = new_image(400, 400, 0)
viewport = Viewport()            # -2 .. 2 on both axes, 400x400 pixels
render_mandelbrot(viewport, image)
with open("mandelbrot.ppm", "wb") as out:
    out.write(image.to_ppm())

julia = render_julia(Viewport(), complex(-0.8, 0.156), new_image(400, 400, 0))
```

`fractol.view.Viewport` describes the visible rectangle:

- `to_complex(x, y)` gives the point of the plane under a pixel;
- `zoom_at(button, x, y)` scales the view about the point under `(x, y)`:
  button 4 (`ZOOM_IN`) by 0.9, button 5 (`ZOOM_OUT`) by 1.1, any other
  button leaves it unchanged (see `zoom_factor`);
- `pan(keycode)` moves the view by 0.1 for the arrow key codes
  `ARROW_LEFT`, `ARROW_RIGHT`, `ARROW_UP` and `ARROW_DOWN` from
  `fractol.fractal`, and returns whether it moved;
- `reset()` goes back to the initial square.

`fractol.fractal` holds the building blocks: `escape_time(z, c)`,
`get_color(iteration)`, `put_pixel(image, x, y, color)` (which writes the
red, green and blue bytes at the pixel's offset and ignores points outside
the image), and two helpers for reading numbers from text:

- `is_valid_number(text)` accepts an optional sign, digits and at most one
  dot that is neither first nor last (`0.285`, `-1`, `+0.5`);
- `parse_double(text)` reads the decimal number at the start of the text,
  after any whitespace, and gives `0.0` when there are no digits.

## The image and window layer

- `fractol.mlx.image`: `Image` (with `pixel`, `set_pixel`, `to_ppm`),
  `new_image`, and `rgb_shifts` / `convert_color` for turning `0xRRGGBB`
  into pixel values of visuals shallower than 24 bits.
- `fractol.mlx.window`: `Window`, a fixed-size surface kept in memory, with
  `pixel_put`, `put_image`, `clear`, `string_put`, `set_font`, pointer
  helpers (`mouse_move`, `mouse_pos`, `mouse_hide`, `mouse_show`) and hook
  registration (`hook`, `key_hook`, `mouse_hook`, `expose_hook`). A new
  window has one expose event waiting in `pending`.
- `fractol.mlx.events`: `EventType`, `EventMask`, `Event`, and `HookTable`,
  whose `dispatch(event)` calls the registered hook with the arguments the
  event type calls for (key code, button and position, position, or just
  the parameter).
- `fractol.mlx.xpm`: `xpm_file_to_image` and `xpm_to_image` read XPM
  pictures; transparent (`None`) entries become `0xFF000000`. Bad data
  raises `XpmError`.
- `fractol.mlx.colornames`: `lookup_color` resolves names such as
  `"light goldenrod"` or `"grey50"` to `0xRRGGBB`, ignoring case.

## What it does not do

There is no command-line program and no on-screen display: windows exist
only in memory and nothing runs an event loop or delivers events to them.
To look at a fractal, render it into an image and save it with `to_ppm`.

## Running the tests

```
pip install .[test]
pytest
```