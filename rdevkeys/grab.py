"""Grabbing the keyboard so that key events reach only the grab callback."""

from __future__ import annotations

import logging
import queue
import threading
import time
import unicodedata
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Protocol

from . import linux_keycodes
from .event import Event, GrabError, KeyPress, KeyRelease, UnicodeInfo
from .keyboard import Keyboard

__all__ = [
    "GrabControl",
    "GrabBackend",
    "GrabService",
    "is_control",
    "retry_delay",
    "convert_key_event",
]

log = logging.getLogger(__name__)

_EXIT = object()
_STOP = object()


class GrabControl(Enum):
    """Commands for the thread that owns the keyboard grab."""

    Grab = "grab"
    UnGrab = "ungrab"
    Exit = "exit"


class GrabBackend(Protocol):
    """What the grab needs from the windowing system."""

    def open(self) -> None:
        """Open the display and select key events on the root window.

        Raises GrabError when there is no display or no screen.
        """
        ...

    def wait_readable(self, timeout: float) -> bool:
        """Wait up to timeout seconds for events; raise OSError if polling fails."""
        ...

    def read_events(self) -> Iterable[tuple[int, bool]]:
        """Return the pending key events as (keycode, is_press) pairs."""
        ...

    def grab_keyboard(self) -> None:
        """Take the keyboard away from other applications."""
        ...

    def ungrab_keyboard(self) -> None:
        """Give the keyboard back to other applications."""
        ...

    def close(self) -> None:
        """Release any grab and close the display."""
        ...


def is_control(unicode_info: Optional[UnicodeInfo]) -> bool:
    """True when the text of a key press holds a control character."""
    if unicode_info is None or unicode_info.name is None:
        return False
    return any(unicodedata.category(ch) == "Cc" for ch in unicode_info.name)


def retry_delay(attempt: int) -> float:
    """Seconds to wait after the given consecutive failure to start a grab (from 1)."""
    if attempt < 1:
        raise ValueError("attempt numbers start at 1")
    counter = min(attempt - 1, 4)
    millis = 0
    if counter <= 3:
        counter += 1
        millis += 100
    if 3 < counter < 10:
        millis += counter * 100
    else:
        millis += 1000
    return millis / 1000


def convert_key_event(keyboard: Optional[Keyboard], code: int, is_press: bool) -> Event:
    """Build a key event from an X key code, with text and keysym if a keyboard is given."""
    key = linux_keycodes.key_from_code(code)
    event_type = KeyPress(key) if is_press else KeyRelease(key)
    unicode: Optional[UnicodeInfo] = None
    platform_code = 0
    if keyboard is not None:
        info = keyboard.add(event_type)
        # Keys such as Delete give control characters; those carry no text.
        unicode = None if is_control(info) else info
        platform_code = keyboard.keysym
    return Event(
        event_type=event_type,
        unicode=unicode,
        platform_code=platform_code,
        position_code=code,
        usb_hid=0,
    )


class GrabService:
    """Runs the keyboard grab and hands every key event to a callback."""

    def __init__(
        self,
        backend: GrabBackend,
        keyboard_factory: Callable[[], Optional[Keyboard]],
        *,
        poll_timeout: float = 0.3,
        settle_delay: float = 0.05,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        self._backend = backend
        self._keyboard_factory = keyboard_factory
        self._poll_timeout = poll_timeout
        self._settle_delay = settle_delay
        self._sleep = sleep
        self._active = threading.Event()
        self._backend_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._events: Optional[queue.Queue] = None
        self._control: Optional[queue.Queue] = None
        self._keyboard: Optional[Keyboard] = None

    def start(self, callback: Callable[[Event], Any]) -> None:
        """Start grabbing in the background; does nothing if already grabbing."""
        with self._state_lock:
            if self._active.is_set():
                return
            keyboard = self._keyboard_factory()
            if keyboard is None:
                raise GrabError(GrabError.Kind.KeyboardError)
            self._keyboard = keyboard
            events: queue.Queue = queue.Queue()
            self._events = events
            self._active.set()
        threading.Thread(target=self._grab_loop, daemon=True).start()
        threading.Thread(
            target=self._callback_loop, args=(events, callback), daemon=True
        ).start()
        self._settle(2)

    def enable(self) -> None:
        """Take the keyboard away from other applications."""
        self._send(GrabControl.Grab)

    def disable(self) -> None:
        """Give the keyboard back while still listening."""
        self._send(GrabControl.UnGrab)

    def is_grabbed(self) -> bool:
        return self._active.is_set()

    def exit(self) -> None:
        """Stop grabbing and stop delivering events."""
        self._active.clear()
        with self._state_lock:
            events = self._events
        if events is not None:
            events.put(_EXIT)
        self._send(GrabControl.Exit)

    def _settle(self, factor: int = 1) -> None:
        delay = self._settle_delay * factor
        if delay > 0:
            time.sleep(delay)

    def _send(self, command: GrabControl) -> None:
        with self._state_lock:
            control = self._control
        if control is None:
            log.error("Failed to send grab command, no sender")
        else:
            control.put(command)
        self._settle()

    def _callback_loop(
        self, events: queue.Queue, callback: Callable[[Event], Any]
    ) -> None:
        while True:
            item = events.get()
            if item is _EXIT:
                break
            try:
                callback(item)
            except Exception:
                log.exception("Grab callback failed")

    def _grab_loop(self) -> None:
        attempt = 0
        while self._active.is_set():
            try:
                self._run_grabber()
            except GrabError as err:
                log.debug("Failed to start grab keyboard, %r", err)
                attempt += 1
                self._sleep(retry_delay(attempt))
            else:
                attempt = 0

    def _run_grabber(self) -> None:
        backend = self._backend
        backend.open()
        control: queue.Queue = queue.Queue()
        try:
            with self._state_lock:
                self._control = control
            threading.Thread(
                target=self._control_loop, args=(control,), daemon=True
            ).start()
            self._poll_loop()
        finally:
            with self._state_lock:
                if self._control is control:
                    self._control = None
            control.put(_STOP)
            with self._backend_lock:
                backend.close()

    def _control_loop(self, control: queue.Queue) -> None:
        while True:
            command = control.get()
            if command is GrabControl.Exit:
                self._active.clear()
                break
            if command is GrabControl.Grab:
                with self._backend_lock:
                    self._backend.grab_keyboard()
                self._settle()
            elif command is GrabControl.UnGrab:
                with self._backend_lock:
                    self._backend.ungrab_keyboard()
                self._settle()
            else:
                break

    def _poll_loop(self) -> None:
        while self._active.is_set():
            try:
                ready = self._backend.wait_readable(self._poll_timeout)
            except OSError as err:
                log.error("Failed to poll event, %s", err)
                break
            if not ready:
                continue
            with self._backend_lock:
                pending = list(self._backend.read_events())
            for code, is_press in pending:
                event = convert_key_event(self._keyboard, code, is_press)
                events = self._events
                if events is not None:
                    events.put(event)