"""Sending synthetic keyboard and mouse events through fake input."""

from __future__ import annotations

import math
from typing import Callable, Optional, Protocol

from . import linux_keycodes
from .event import (
    AnyButton,
    AnyKey,
    Button,
    ButtonPress,
    ButtonRelease,
    EventType,
    KeyPress,
    KeyRelease,
    MouseMove,
    RawKey,
    RawKeyKind,
    SimulateError,
    UnknownButton,
    Wheel,
)

__all__ = [
    "FakeInputBackend",
    "Simulator",
    "clamp_coordinate",
    "char_keysym",
]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_LIMIT = 2**32
# A key code no real key uses, remapped to the wanted character on demand.
_CHAR_KEYCODE = 194
_BUTTON_CODES = {Button.Left: 1, Button.Middle: 2, Button.Right: 3}
_WHEEL_UP = 4
_WHEEL_DOWN = 5


class FakeInputBackend(Protocol):
    """An open display that accepts fake input events."""

    def fake_key_event(self, keycode: int, is_press: bool) -> bool:
        ...

    def fake_button_event(self, button: int, is_press: bool) -> bool:
        ...

    def fake_motion_event(self, x: int, y: int) -> bool:
        ...

    def change_keyboard_mapping(self, keycode: int, keysym: int) -> None:
        """Make the key code produce the given keysym."""
        ...

    def flush(self) -> None:
        """Send buffered requests and wait until the server has handled them."""
        ...

    def close(self) -> None:
        ...


def clamp_coordinate(value: float) -> int:
    """Round a coordinate half away from zero into the range of a C int; 0 if not finite."""
    if not math.isfinite(value):
        return 0
    value = min(max(value, float(_INT_MIN)), float(_INT_MAX))
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


def char_keysym(chr: str) -> int:
    """Return the keysym that types a character."""
    if not isinstance(chr, str):
        raise TypeError(f"expected a character, got {chr!r}")
    if len(chr) != 1:
        raise ValueError(f"expected exactly one character, got {chr!r}")
    ordinal = ord(chr)
    return ordinal if ordinal < 0x100 else ordinal | 0x01000000


def _button_code(button: AnyButton) -> Optional[int]:
    if isinstance(button, Button):
        return _BUTTON_CODES[button]
    if isinstance(button, UnknownButton) and 0 <= button.code < _UINT_LIMIT:
        return button.code
    return None


class Simulator:
    """Sends events through a fresh display connection for every call."""

    def __init__(self, connect: Callable[[], Optional[FakeInputBackend]]) -> None:
        self._connect = connect

    def simulate(self, event_type: EventType) -> None:
        """Send one event; raise SimulateError if it could not be sent."""
        self._run(lambda backend: self._send(backend, event_type))

    def simulate_char(self, chr: str, pressed: bool) -> None:
        """Press or release a key that types the given character."""
        keysym = char_keysym(chr)

        def send(backend: FakeInputBackend) -> bool:
            backend.change_keyboard_mapping(_CHAR_KEYCODE, keysym)
            return bool(backend.fake_key_event(_CHAR_KEYCODE, pressed))

        self._run(send)

    def simulate_unicode(self, unicode: int) -> None:
        """Typing a UTF-16 code unit directly is not possible here; always fails."""
        raise SimulateError(f"cannot send code unit {unicode!r} directly")

    def _run(self, send: Callable[[FakeInputBackend], bool]) -> None:
        backend = self._connect()
        if backend is None:
            raise SimulateError("no display")
        try:
            if not send(backend):
                raise SimulateError("the event was not sent")
            backend.flush()
        finally:
            backend.close()

    def _send(self, backend: FakeInputBackend, event_type: EventType) -> bool:
        match event_type:
            case KeyPress(key):
                return self._send_key(backend, key, True)
            case KeyRelease(key):
                return self._send_key(backend, key, False)
            case ButtonPress(button):
                code = _button_code(button)
                return code is not None and bool(backend.fake_button_event(code, True))
            case ButtonRelease(button):
                code = _button_code(button)
                return code is not None and bool(backend.fake_button_event(code, False))
            case MouseMove(x, y):
                return bool(
                    backend.fake_motion_event(clamp_coordinate(x), clamp_coordinate(y))
                )
            case Wheel(_, delta_y):
                code = _WHEEL_UP if delta_y > 0 else _WHEEL_DOWN
                pressed = bool(backend.fake_button_event(code, True))
                released = bool(backend.fake_button_event(code, False))
                return pressed and released
        raise TypeError(f"not an event type: {event_type!r}")

    @staticmethod
    def _send_key(backend: FakeInputBackend, key: AnyKey, is_press: bool) -> bool:
        if isinstance(key, RawKey):
            if key.kind is not RawKeyKind.LinuxXorgKeycode:
                return False
            return bool(backend.fake_key_event(key.code, is_press))
        code = linux_keycodes.code_from_key(key)
        if code is None:
            return False
        return bool(backend.fake_key_event(code, is_press))