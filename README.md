# pixmlx

A small pixel graphics library with no dependencies. It provides a display
that holds windows, per-window event hooks, an event loop, in-memory pixel
images and an XPM picture reader.

Everything happens in memory. Events enter the queue through `Display.post`,
and `Display.loop` passes each one to the hook installed for it. This makes
the library useful for tests, for headless rendering and for teaching.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Modules

- `pixmlx.colornames`: the table of named colours and `lookup_color`.
- `pixmlx.text`: string helpers `find`, `find_unquoted` and `split_words`.
- `pixmlx.color`: `VisualFormat` and `visual_format`, for colour-to-pixel conversion.
- `pixmlx.image`: `Image`, `ImageType` and `new_image`.
- `pixmlx.xpm`: XPM reading, with `XpmError`.
- `pixmlx.display`: `Display`, `Window`, `Event` and `EventType`.

## Images

```python
from pixmlx.image import new_image

img = new_image(42, 42)
img.fill(0x181818)
img.put_pixel(10, 10, 0xFF0000)
assert img.get_pixel(10, 10) == 0xFF0000
```

`new_image(width, height, fmt=None)` creates a zeroed buffer. It uses the
24-bit TrueColor layout unless you pass a different `VisualFormat`. A width
or height that is not positive raises `ValueError`.

Rows are padded to a multiple of 32 bits. Images at depth 24 or more use 32
bits per pixel, and the byte order is little-endian by default.

The `Image` methods:

- `put_pixel` converts a `0xRRGGBB` colour for the image's visual and stores it.
- `set_raw` stores a pixel value unchanged.
- `get_pixel` returns the raw stored value.
- `fill` sets every pixel to one colour.

Any coordinate outside the image raises `IndexError`.

`Image.data_addr()` returns a named tuple with four fields: `data` (the
buffer), `bits_per_pixel`, `size_line` and `endian`.

## Colours

`pixmlx.colornames.lookup_color(name)` returns the `0xRRGGBB` value of a
named colour, such as `"light goldenrod"` or `"gray50"`. Case is ignored. An
unknown name returns `None`. The special name `"none"` maps to `-1`.

`pixmlx.color.visual_format(red_mask, green_mask, blue_mask, depth)`
describes a pixel layout. `VisualFormat.convert(color)` maps a `0xRRGGBB`
colour into that layout. At depth 24 or more the colour is returned
unchanged. `Display.get_color_value` does the same conversion for the
display's own visual.

## XPM pictures

```python
from pixmlx.xpm import xpm_to_image, xpm_file_to_image

img = xpm_to_image([
    "2 2 2 1",
    "a c #FF0000",
    "b c blue",
    "ab",
    "ba",
])
picture = xpm_file_to_image("open.xpm")
```

A colour can be written as `#RRGGBB` or as a name from the colour table. Two
words such as `c light blue` are joined and looked up as one name. A colour
that cannot be resolved becomes `0`. The colour `None` is stored as
`0xFF000000`.

Bad or truncated data raises `XpmError`, a subclass of `ValueError`. Examples
are a header without four non-zero values, a colour line without a `c` key,
or rows that are missing or too short. A file that cannot be opened also
raises `XpmError`.

For files, comments outside quoted strings are removed with
`strip_comments`, and the quoted strings are then extracted with
`quoted_lines`. Both helpers are public, as is `parse_xpm`.

## Windows, hooks and the loop

```python
from pixmlx.display import Display, Event, EventType

display = Display()
win = display.new_window(242, 242, "Title1")

def on_key(key):
    print("key", key)
    if key == 0xFF1B:
        display.destroy_window(win)

win.key_hook(on_key)
win.mouse_hook(lambda button, x, y: print("mouse", button, x, y))
display.post(Event(EventType.BUTTON_PRESS, win, button=1, x=10, y=20))
display.post(Event(EventType.KEY_RELEASE, win, key=0xFF1B))
display.loop()
```

Each hook receives its own set of arguments:

| Hook | Event | Callback |
| --- | --- | --- |
| `key_hook` | key release | `callback(key)` |
| `mouse_hook` | button press | `callback(button, x, y)` |
| `expose_hook` | expose | `callback()` |

Only expose events with `count == 0` are delivered. `Window.hook(event,
mask, callback)` installs a hook for any `EventType` and raises `ValueError`
for an unknown event code. It passes these arguments:

- key events: `key`
- button events: `button, x, y`
- motion events: `x, y`
- all other events: no arguments

The mask constants (`KEY_PRESS_MASK`, `POINTER_MOTION_MASK`,
`EXPOSURE_MASK`, ...) live in `pixmlx.display`. `Window.event_mask()`
returns the union of the masks of the installed hooks.

A `CLIENT_MESSAGE` event with `delete_window=True` calls the window's
`DESTROY_NOTIFY` hook.

`Display.new_window` queues the first expose event of the new window.
`Display.windows` lists the open windows with the newest first, and
`Display.pending` counts the queued events. Events for a destroyed window
are dropped.

`Display.loop()` keeps delivering events while at least one window is open.
It stops in any of these cases:

- `Display.loop_end()` has been called.
- The queue is empty and no loop hook is set.

A callback set with `Display.loop_hook` runs each time the queue has been
drained.

You can draw to a window with three methods:

- `Display.pixel_put` ignores points outside the window.
- `Display.put_image` clips the image to the window.
- `Display.clear_window` resets the window to black.

The pixels are kept in `Window.canvas`, which is an `Image`. Using a window
that is not open on the display raises `ValueError`.

## What it does not do

The library does not connect to a real screen, and no window ever appears.
Input never comes from a real keyboard or mouse. Every event has to be
posted, and key events carry whatever `key` value you give them.

The library also does not provide:

- text drawing or fonts
- pointer movement or hiding
- screen size queries
- writing images to files