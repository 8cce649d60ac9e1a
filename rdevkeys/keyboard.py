"""Turning key presses into the text the keyboard layout produces."""

from __future__ import annotations

from typing import Optional, Protocol

from . import linux_keycodes
from .event import EventType, KeyPress, UnicodeInfo

__all__ = ["KeyboardBackend", "Keyboard", "decode_lookup"]

_LOOKUP_LEN = 4
_CONTROL_MASK_OFF = 0xFFFB
_KEYSYM_LIMIT = 1 << 32


class KeyboardBackend(Protocol):
    """What the keyboard needs from the windowing system."""

    def modifiers(self) -> int:
        """Return the current modifier mask of the pointer's screen."""
        ...

    def lookup(self, keycode: int, state: int) -> tuple[bytes, int]:
        """Return the UTF-8 bytes a key press produces and its keysym."""
        ...

    def keysym_name(self, keysym: int) -> Optional[str]:
        """Return the name of a keysym, or None if it has none."""
        ...


def decode_lookup(buf: bytes) -> Optional[UnicodeInfo]:
    """Make a UnicodeInfo from the bytes of a lookup; None for nothing or C0 controls."""
    if not buf:
        return None
    data = bytes(buf[:_LOOKUP_LEN])
    end = data.find(b"\x00")
    if end >= 0:
        data = data[:end]
    try:
        name: Optional[str] = data.decode("utf-8")
    except UnicodeDecodeError:
        name = None
    if len(data) == 1 and name is not None and "\x01" <= name <= "\x1f":
        return None
    return UnicodeInfo(name=name, unicode=(), is_dead=False)


class Keyboard:
    """Keeps the keysym of the last press and reports what a press types."""

    def __init__(self, backend: KeyboardBackend) -> None:
        self._backend = backend
        self._keysym = 0

    @property
    def keysym(self) -> int:
        """Keysym of the last key press looked up, or 0 if it does not fit 32 bits."""
        return self._keysym if 0 <= self._keysym < _KEYSYM_LIMIT else 0

    def add(self, event_type: EventType) -> Optional[UnicodeInfo]:
        """Feed an event; return what a key press types, None otherwise."""
        if not isinstance(event_type, KeyPress):
            return None
        keycode = linux_keycodes.code_from_key(event_type.key)
        if keycode is None:
            return None
        # Control is ignored so that Ctrl+key still gives the plain character.
        state = self._backend.modifiers() & _CONTROL_MASK_OFF
        return self._unicode_from_code(keycode, state)

    def is_dead(self) -> bool:
        """True when the last key looked up is a dead key."""
        name = self._backend.keysym_name(self._keysym)
        return bool(name) and name.startswith("dead")

    def _unicode_from_code(self, keycode: int, state: int) -> Optional[UnicodeInfo]:
        buf, keysym = self._backend.lookup(keycode, state)
        self._keysym = keysym
        if self.is_dead():
            return UnicodeInfo(name=None, unicode=(), is_dead=True)
        return decode_lookup(buf)