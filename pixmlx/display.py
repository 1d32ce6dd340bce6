"""An in-memory display: windows, event hooks and the event loop.

Windows keep their contents in an :class:`~pixmlx.image.Image`. Events
are queued with :meth:`Display.post` and handed to the hooks that were
installed on the target window when :meth:`Display.loop` runs.
"""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple

from pixmlx.color import TRUECOLOR_24, VisualFormat
from pixmlx.image import Image, new_image

NO_EVENT_MASK = 0
KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
ENTER_WINDOW_MASK = 1 << 4
LEAVE_WINDOW_MASK = 1 << 5
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17


class EventType(enum.IntEnum):
    """Event codes, numbered as in the X protocol."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


class _Hook(NamedTuple):
    callback: Callable[..., object]
    mask: int


@dataclass(eq=False)
class Window:
    """A fixed-size window with its own pixel contents and event hooks."""

    width: int
    height: int
    title: str
    visual: VisualFormat = TRUECOLOR_24
    canvas: Image = field(init=False, repr=False)
    hooks: dict[EventType, _Hook] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.canvas = new_image(self.width, self.height, self.visual)

    def hook(self, event: int, mask: int, callback: Callable[..., object]) -> None:
        """Install ``callback`` for ``event``, selecting it with ``mask``."""
        try:
            kind = EventType(event)
        except ValueError:
            raise ValueError(f"unknown event type {event}") from None
        self.hooks[kind] = _Hook(callback, mask)

    def key_hook(self, callback: Callable[[int], object]) -> None:
        """Call ``callback(keycode)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, callback)

    def mouse_hook(self, callback: Callable[[int, int, int], object]) -> None:
        """Call ``callback(button, x, y)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, callback)

    def expose_hook(self, callback: Callable[[], object]) -> None:
        """Call ``callback()`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, callback)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        mask = NO_EVENT_MASK
        for installed in self.hooks.values():
            mask |= installed.mask
        return mask


@dataclass(frozen=True, eq=False)
class Event:
    """An event addressed to a window.

    ``key`` carries the keysym of key events, ``button``, ``x`` and ``y``
    the pointer data, ``count`` the number of expose events still to
    follow, and ``delete_window`` marks a client message asking to close
    the window.
    """

    type: EventType
    window: Window
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_window: bool = False


class Display:
    """A display connection holding windows, queued events and the loop hook."""

    def __init__(self, visual: VisualFormat | None = None) -> None:
        self.visual = visual if visual is not None else TRUECOLOR_24
        self._windows: list[Window] = []
        self._queue: deque[Event] = deque()
        self._loop_hook: Callable[[], object] | None = None
        self._end_loop = False

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, most recently created first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of events waiting in the queue."""
        return len(self._queue)

    def _require(self, window: Window) -> None:
        if window not in self._windows:
            raise ValueError(f"window {window.title!r} is not open on this display")

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first expose event is queued straight away."""
        window = Window(width, height, title, self.visual)
        self._windows.insert(0, window)
        self._queue.append(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window``; events still queued for it are ignored."""
        self._require(window)
        self._windows.remove(window)

    def loop_hook(self, callback: Callable[[], object] | None) -> None:
        """Set the function called each time the event queue is drained."""
        self._loop_hook = callback

    def post(self, event: Event) -> None:
        """Queue an event for delivery by :meth:`loop`."""
        self._queue.append(event)

    def loop(self) -> None:
        """Deliver queued events to hooks until no window is left.

        The loop also stops after :meth:`loop_end`, or once the queue is
        empty when no loop hook is set, since nothing could then arrive.
        """
        while self._windows and not self._end_loop:
            while not self._end_loop and self._queue:
                self._dispatch(self._queue.popleft())
            if self._loop_hook is None:
                break
            self._loop_hook()

    def loop_end(self) -> None:
        """Make :meth:`loop` return as soon as possible."""
        self._end_loop = True

    def _dispatch(self, event: Event) -> None:
        window = event.window
        if window not in self._windows:
            return
        if event.type is EventType.CLIENT_MESSAGE and event.delete_window:
            closer = window.hooks.get(EventType.DESTROY_NOTIFY)
            if closer is not None:
                closer.callback()
        installed = window.hooks.get(event.type)
        if installed is None:
            return
        callback = installed.callback
        if event.type in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            callback(event.key)
        elif event.type in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            callback(event.button, event.x, event.y)
        elif event.type is EventType.MOTION_NOTIFY:
            callback(event.x, event.y)
        elif event.type is EventType.EXPOSE:
            if event.count == 0:
                callback()
        else:
            callback()

    def get_color_value(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to a pixel value of this display."""
        return self.visual.convert(color)

    def pixel_put(self, window: Window, x: int, y: int, color: int) -> None:
        """Draw one pixel; points outside the window are ignored."""
        self._require(window)
        if 0 <= x < window.width and 0 <= y < window.height:
            window.canvas.put_pixel(x, y, color)

    def put_image(self, window: Window, image: Image, x: int, y: int) -> None:
        """Copy ``image`` into ``window`` with its top-left corner at (x, y)."""
        self._require(window)
        for src_y in range(max(0, -y), min(image.height, window.height - y)):
            for src_x in range(max(0, -x), min(image.width, window.width - x)):
                window.canvas.set_raw(x + src_x, y + src_y, image.get_pixel(src_x, src_y))

    def clear_window(self, window: Window) -> None:
        """Reset the window to its black background."""
        self._require(window)
        window.canvas.fill(0)