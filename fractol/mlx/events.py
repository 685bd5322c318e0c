"""Window events and the per-window table of hooks that handle them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any

MAX_EVENT = 36


class EventType(IntEnum):
    """Event type numbers, as the X protocol defines them."""

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


class EventMask(IntFlag):
    """Bits selecting which events a window receives."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass(frozen=True)
class Event:
    """One event delivered to a window."""

    type: int
    window: Any = None
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0


@dataclass
class Hook:
    """A handler registered for one event type."""

    mask: int
    func: Callable[..., Any] | None
    param: Any = None


def _check_type(event_type: int) -> int:
    kind = int(event_type)
    if not 0 <= kind < MAX_EVENT:
        raise ValueError(f"event type out of range: {kind}")
    return kind


class HookTable:
    """The hooks of one window, indexed by event type."""

    def __init__(self) -> None:
        self._hooks: dict[int, Hook] = {}

    def set(
        self,
        event_type: int,
        mask: int,
        func: Callable[..., Any] | None,
        param: Any = None,
    ) -> None:
        """Register func (with param) for event_type, selecting mask."""
        self._hooks[_check_type(event_type)] = Hook(int(mask), func, param)

    def get(self, event_type: int) -> Hook | None:
        """Return the hook registered for event_type, if any."""
        return self._hooks.get(_check_type(event_type))

    def event_mask(self) -> EventMask:
        """Return the union of the masks of all registered hooks."""
        mask = 0
        for hook in self._hooks.values():
            mask |= hook.mask
        return EventMask(mask)

    def dispatch(self, event: Event) -> Any:
        """Call the hook for event with the arguments its type calls for.

        Returns what the hook returned, or None when no hook was called.
        """
        kind = int(event.type)
        hook = self._hooks.get(kind)
        if hook is None or hook.func is None or kind < EventType.KEY_PRESS:
            return None
        func, param = hook.func, hook.param
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            return func(event.keysym, param)
        if kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            return func(event.button, event.x, event.y, param)
        if kind == EventType.MOTION_NOTIFY:
            return func(event.x, event.y, param)
        if kind == EventType.EXPOSE:
            # Only the last of a run of expose events is delivered.
            return func(param) if event.count == 0 else None
        return func(param)