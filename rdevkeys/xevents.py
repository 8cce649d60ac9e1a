"""Turning recorded X server events into events, and measuring the display."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Protocol

from . import linux_keycodes
from .event import (
    Button,
    ButtonPress,
    ButtonRelease,
    DisplayError,
    Event,
    EventType,
    KeyPress,
    KeyRelease,
    ListenError,
    MouseMove,
    UnknownButton,
    Wheel,
    keyboard_only as _keyboard_only_from_env,
)
from .keyboard import Keyboard

__all__ = [
    "XEventType",
    "RecordDatum",
    "Listener",
    "convert_event",
    "convert",
    "record_range",
    "display_size",
]


class XEventType(IntEnum):
    """Core X protocol event type numbers for input devices."""

    KeyPress = 2
    KeyRelease = 3
    ButtonPress = 4
    ButtonRelease = 5
    MotionNotify = 6


_NAMED_BUTTONS = {1: Button.Left, 2: Button.Middle, 3: Button.Right}


def convert_event(code: int, type_: int, x: float, y: float) -> Optional[EventType]:
    """Map an X event type and detail code to an event type, or None."""
    code &= 0xFF
    if type_ == XEventType.KeyPress:
        return KeyPress(linux_keycodes.key_from_code(code))
    if type_ == XEventType.KeyRelease:
        return KeyRelease(linux_keycodes.key_from_code(code))
    if type_ == XEventType.ButtonPress:
        if code == 4:
            return Wheel(delta_x=0, delta_y=1)
        if code == 5:
            return Wheel(delta_x=0, delta_y=-1)
        return ButtonPress(_NAMED_BUTTONS.get(code, UnknownButton(code)))
    if type_ == XEventType.ButtonRelease:
        if code in (4, 5):
            return None
        return ButtonRelease(_NAMED_BUTTONS.get(code, UnknownButton(code)))
    if type_ == XEventType.MotionNotify:
        return MouseMove(x=x, y=y)
    return None


def convert(
    keyboard: Optional[Keyboard], code: int, type_: int, x: float, y: float
) -> Optional[Event]:
    """Build a full event, asking the keyboard what a key press types."""
    event_type = convert_event(code, type_, x, y)
    if event_type is None or keyboard is None:
        return None
    unicode = keyboard.add(event_type)
    return Event(
        event_type=event_type,
        unicode=unicode,
        platform_code=code,
        position_code=code,
        usb_hid=0,
    )


def record_range(keyboard_only: bool) -> tuple[int, int]:
    """First and last device event types to record."""
    last = XEventType.KeyRelease if keyboard_only else XEventType.MotionNotify
    return int(XEventType.KeyPress), int(last)


class _Display(Protocol):
    def screen_size(self) -> Optional[tuple[int, int]]:
        """Width and height of the default screen, or None without a screen."""
        ...


def display_size(display: Optional[_Display]) -> tuple[int, int]:
    """Return the size in pixels of the default screen of an open display."""
    if display is None:
        raise DisplayError(DisplayError.Kind.NoDisplay)
    size = display.screen_size()
    if size is None:
        raise DisplayError(DisplayError.Kind.NoDisplay)
    width, height = size
    if width < 0 or height < 0:
        raise DisplayError(DisplayError.Kind.NoDisplay)
    return width, height


_DATUM = struct.Struct("=BB6xQ3?xhhhhH2x")


@dataclass(frozen=True)
class RecordDatum:
    """The fields of a recorded core input event that are used."""

    type_: int
    code: int
    root_x: int
    root_y: int
    event_x: int
    event_y: int
    state: int

    SIZE = _DATUM.size

    @classmethod
    def from_bytes(cls, data: bytes) -> "RecordDatum":
        """Parse the leading bytes of recorded event data."""
        if len(data) < _DATUM.size:
            raise ValueError(
                f"record data is {len(data)} bytes, need at least {_DATUM.size}"
            )
        (type_, code, _rest, _a, _b, _c, root_x, root_y, event_x, event_y, state) = (
            _DATUM.unpack_from(data)
        )
        return cls(type_, code, root_x, root_y, event_x, event_y, state)


class Listener:
    """Turns recorded event data into events and hands them to a callback."""

    def __init__(
        self,
        callback: Callable[[Event], object],
        keyboard: Optional[Keyboard],
        keyboard_only: Optional[bool] = None,
    ) -> None:
        if keyboard is None:
            raise ListenError(ListenError.Kind.KeyboardError)
        self.callback = callback
        self.keyboard = keyboard
        if keyboard_only is None:
            keyboard_only = _keyboard_only_from_env()
        self.record_range = record_range(keyboard_only)

    def handle(self, data: bytes) -> Optional[Event]:
        """Convert one recorded datum; deliver and return the event, if any."""
        datum = RecordDatum.from_bytes(data)
        event = convert(
            self.keyboard,
            datum.code,
            datum.type_,
            float(datum.root_x),
            float(datum.root_y),
        )
        if event is not None:
            self.callback(event)
        return event