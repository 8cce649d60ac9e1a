import queue
import threading
import time

import pytest

from rdevkeys import linux_keycodes
from rdevkeys.event import GrabError, Key, KeyPress, KeyRelease, UnicodeInfo
from rdevkeys.grab import (
    GrabControl,
    GrabService,
    convert_key_event,
    is_control,
    retry_delay,
)
from rdevkeys.keyboard import Keyboard

S_CODE = linux_keycodes.code_from_key(Key.KeyS)
DELETE_CODE = linux_keycodes.code_from_key(Key.Delete)
S_KEYSYM = 0x73
DELETE_KEYSYM = 0xFFFF


class FakeKeys:
    def __init__(self):
        self.table = {
            S_CODE: (b"s", S_KEYSYM),
            DELETE_CODE: (b"\x7f", DELETE_KEYSYM),
        }

    def modifiers(self):
        return 0

    def lookup(self, keycode, state):
        return self.table.get(keycode, (b"", 0))

    def keysym_name(self, keysym):
        return None


class FakeGrabBackend:
    def __init__(self, events=()):
        self.pending = queue.Queue()
        for item in events:
            self.pending.put(item)
        self.calls = []
        self.opened = 0
        self.closed = 0

    def open(self):
        self.opened += 1

    def wait_readable(self, timeout):
        if not self.pending.empty():
            return True
        time.sleep(min(timeout, 0.01))
        return not self.pending.empty()

    def read_events(self):
        items = []
        while not self.pending.empty():
            items.append(self.pending.get())
        return items

    def grab_keyboard(self):
        self.calls.append("grab")

    def ungrab_keyboard(self):
        self.calls.append("ungrab")

    def close(self):
        self.closed += 1


class FailingBackend(FakeGrabBackend):
    def open(self):
        self.opened += 1
        raise GrabError(GrabError.Kind.MissingDisplayError)


def wait_for(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def make_keyboard():
    return Keyboard(FakeKeys())


def test_is_control_detects_delete_character():
    assert is_control(UnicodeInfo(name="\x7f")) is True
    assert is_control(UnicodeInfo(name="\x1b")) is True


def test_is_control_false_for_text_and_missing():
    assert is_control(UnicodeInfo(name="a")) is False
    assert is_control(UnicodeInfo(name=None)) is False
    assert is_control(None) is False


def test_retry_delay_values():
    assert retry_delay(1) == retry_delay(2) == retry_delay(3)
    assert retry_delay(1) == 1.1
    assert retry_delay(4) == 0.5
    assert retry_delay(5) == retry_delay(50) == 0.4


def test_retry_delay_rejects_zero():
    with pytest.raises(ValueError):
        retry_delay(0)


def test_convert_key_event_without_keyboard():
    event = convert_key_event(None, S_CODE, True)
    assert event.event_type == KeyPress(Key.KeyS)
    assert event.unicode is None
    assert event.platform_code == 0
    assert event.position_code == S_CODE


def test_convert_key_event_with_keyboard():
    event = convert_key_event(make_keyboard(), S_CODE, True)
    assert event.unicode.name == "s"
    assert event.platform_code == S_KEYSYM
    assert event.position_code == S_CODE


def test_convert_key_event_drops_control_text_but_keeps_keysym():
    event = convert_key_event(make_keyboard(), DELETE_CODE, True)
    assert event.event_type == KeyPress(Key.Delete)
    assert event.unicode is None
    assert event.platform_code == DELETE_KEYSYM


def test_convert_key_event_release_keeps_last_keysym():
    keyboard = make_keyboard()
    convert_key_event(keyboard, S_CODE, True)
    event = convert_key_event(keyboard, S_CODE, False)
    assert event.event_type == KeyRelease(Key.KeyS)
    assert event.unicode is None
    assert event.platform_code == S_KEYSYM


def test_start_without_keyboard_fails():
    service = GrabService(FakeGrabBackend(), lambda: None, settle_delay=0)
    with pytest.raises(GrabError) as info:
        service.start(lambda event: None)
    assert info.value.kind is GrabError.Kind.KeyboardError
    assert service.is_grabbed() is False


def test_events_reach_callback_and_control_works():
    backend = FakeGrabBackend([(S_CODE, True), (S_CODE, False)])
    received = []
    service = GrabService(backend, make_keyboard, settle_delay=0, poll_timeout=0.05)
    service.start(received.append)
    try:
        assert service.is_grabbed() is True
        assert wait_for(lambda: len(received) >= 2)
        assert received[0].event_type == KeyPress(Key.KeyS)
        assert received[0].unicode.name == "s"
        assert received[0].platform_code == S_KEYSYM
        assert received[1].event_type == KeyRelease(Key.KeyS)
        assert received[1].position_code == S_CODE

        service.enable()
        assert wait_for(lambda: backend.calls == ["grab"])
        service.disable()
        assert wait_for(lambda: backend.calls == ["grab", "ungrab"])
    finally:
        service.exit()
    assert service.is_grabbed() is False
    assert wait_for(lambda: backend.closed >= 1)


def test_second_start_keeps_first_callback():
    backend = FakeGrabBackend()
    first, second = [], []
    service = GrabService(backend, make_keyboard, settle_delay=0, poll_timeout=0.05)
    service.start(first.append)
    try:
        service.start(second.append)
        backend.pending.put((S_CODE, True))
        assert wait_for(lambda: len(first) == 1)
        assert second == []
        assert backend.opened == 1
    finally:
        service.exit()


def test_failed_open_retries_with_backoff():
    backend = FailingBackend()
    delays = []
    lock = threading.Lock()

    def record(seconds):
        with lock:
            delays.append(seconds)
        time.sleep(0.001)

    service = GrabService(backend, make_keyboard, settle_delay=0, sleep=record)
    service.start(lambda event: None)
    try:
        assert wait_for(lambda: len(delays) >= 5)
    finally:
        service.exit()
    with lock:
        first = delays[:5]
    assert first == [retry_delay(n) for n in range(1, 6)]
    assert backend.opened >= 5
    assert service.is_grabbed() is False


def test_exit_through_control_clears_grab():
    backend = FakeGrabBackend([(S_CODE, True)])
    received = []
    service = GrabService(backend, make_keyboard, settle_delay=0, poll_timeout=0.05)
    service.start(received.append)
    assert wait_for(lambda: len(received) == 1)
    service.exit()
    assert service.is_grabbed() is False
    assert wait_for(lambda: backend.closed == 1)
    assert GrabControl("exit") is GrabControl.Exit