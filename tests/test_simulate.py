import math

import pytest

from rdevkeys import linux_keycodes
from rdevkeys.event import (
    Button,
    ButtonPress,
    ButtonRelease,
    Key,
    KeyPress,
    KeyRelease,
    MouseMove,
    RawKey,
    RawKeyKind,
    SimulateError,
    UnknownButton,
    Wheel,
)
from rdevkeys.simulate import Simulator, char_keysym, clamp_coordinate


class RecordingBackend:
    def __init__(self, result=True):
        self.result = result
        self.calls = []
        self.flushed = False
        self.closed = False

    def fake_key_event(self, keycode, is_press):
        self.calls.append(("key", keycode, is_press))
        return self.result

    def fake_button_event(self, button, is_press):
        self.calls.append(("button", button, is_press))
        return self.result

    def fake_motion_event(self, x, y):
        self.calls.append(("motion", x, y))
        return self.result

    def change_keyboard_mapping(self, keycode, keysym):
        self.calls.append(("map", keycode, keysym))

    def flush(self):
        self.flushed = True

    def close(self):
        self.closed = True


def make(result=True):
    backend = RecordingBackend(result)
    return backend, Simulator(lambda: backend)


def test_key_press_sends_linux_keycode():
    backend, sim = make()
    sim.simulate(KeyPress(Key.KeyS))
    assert backend.calls == [("key", linux_keycodes.code_from_key(Key.KeyS), True)]
    assert backend.flushed and backend.closed


def test_key_release():
    backend, sim = make()
    sim.simulate(KeyRelease(Key.Escape))
    assert backend.calls == [("key", linux_keycodes.code_from_key(Key.Escape), False)]


def test_failure_closes_without_flush():
    backend, sim = make(result=False)
    with pytest.raises(SimulateError):
        sim.simulate(KeyPress(Key.KeyA))
    assert backend.closed is True
    assert backend.flushed is False


def test_no_display_raises():
    sim = Simulator(lambda: None)
    with pytest.raises(SimulateError):
        sim.simulate(KeyPress(Key.KeyA))


def test_key_without_linux_code_fails():
    backend, sim = make()
    with pytest.raises(SimulateError):
        sim.simulate(KeyPress(Key.Cancel))
    assert backend.calls == []


def test_raw_linux_key_is_sent_as_is():
    backend, sim = make()
    sim.simulate(KeyPress(RawKey(RawKeyKind.LinuxXorgKeycode, 57)))
    assert backend.calls == [("key", 57, True)]


def test_raw_mac_key_fails():
    backend, sim = make()
    with pytest.raises(SimulateError):
        sim.simulate(KeyRelease(RawKey(RawKeyKind.MacVirtualKeycode, 57)))
    assert backend.calls == []
    assert backend.closed is True


def test_named_buttons():
    backend, sim = make()
    sim.simulate(ButtonPress(Button.Left))
    sim.simulate(ButtonPress(Button.Middle))
    sim.simulate(ButtonRelease(Button.Right))
    assert backend.calls == [
        ("button", 1, True),
        ("button", 2, True),
        ("button", 3, False),
    ]


def test_unknown_button_code_passed_through():
    backend, sim = make()
    sim.simulate(ButtonPress(UnknownButton(8)))
    assert backend.calls == [("button", 8, True)]


def test_negative_unknown_button_fails():
    backend, sim = make()
    with pytest.raises(SimulateError):
        sim.simulate(ButtonRelease(UnknownButton(-1)))
    assert backend.calls == []


def test_wheel_up_and_down():
    backend, sim = make()
    sim.simulate(Wheel(delta_x=0, delta_y=1))
    sim.simulate(Wheel(delta_x=0, delta_y=-1))
    assert backend.calls == [
        ("button", 4, True),
        ("button", 4, False),
        ("button", 5, True),
        ("button", 5, False),
    ]


def test_wheel_zero_scrolls_down():
    backend, sim = make()
    sim.simulate(Wheel(delta_x=3, delta_y=0))
    assert [call[1] for call in backend.calls] == [5, 5]


def test_mouse_move_rounds_and_clamps():
    backend, sim = make()
    sim.simulate(MouseMove(x=400.0, y=math.inf))
    assert backend.calls == [("motion", 400, 0)]


def test_clamp_coordinate():
    assert clamp_coordinate(10.0) == 10
    assert clamp_coordinate(2.5) == -clamp_coordinate(-2.5)
    assert clamp_coordinate(2.5) == 3
    assert clamp_coordinate(0.49999999999999994) == 0
    assert clamp_coordinate(math.nan) == 0
    assert clamp_coordinate(-math.inf) == 0
    assert clamp_coordinate(1e20) == 2**31 - 1
    assert clamp_coordinate(-1e20) == -(2**31)


def test_char_keysym():
    assert char_keysym("A") == ord("A")
    assert char_keysym("\u00e9") == 0xE9
    assert char_keysym("\u20ac") == 0x010020AC


def test_char_keysym_rejects_strings():
    with pytest.raises(ValueError):
        char_keysym("ab")
    with pytest.raises(TypeError):
        char_keysym(65)


def test_simulate_char_remaps_spare_key():
    backend, sim = make()
    sim.simulate_char("\u20ac", True)
    sim.simulate_char("\u20ac", False)
    keysym = char_keysym("\u20ac")
    assert backend.calls == [
        ("map", 194, keysym),
        ("key", 194, True),
        ("map", 194, keysym),
        ("key", 194, False),
    ]


def test_simulate_char_failure():
    backend, sim = make(result=False)
    with pytest.raises(SimulateError):
        sim.simulate_char("a", True)
    assert backend.closed is True


def test_simulate_unicode_always_fails():
    backend, sim = make()
    with pytest.raises(SimulateError):
        sim.simulate_unicode(0x41)
    assert backend.calls == []