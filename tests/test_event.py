import json
from datetime import datetime, timezone

import pytest

from rdevkeys.event import (
    Button,
    ButtonPress,
    ButtonRelease,
    DisplayError,
    Event,
    GrabError,
    Key,
    KeyPress,
    KeyRelease,
    ListenError,
    MouseMove,
    RawKey,
    RawKeyKind,
    SimulateError,
    UnicodeInfo,
    UnknownButton,
    UnknownKey,
    Wheel,
    is_known,
    keyboard_only,
)


def _serialize_example() -> Event:
    return Event(
        event_type=KeyPress(Key.KeyS),
        unicode=UnicodeInfo(name="S", unicode=(), is_dead=False),
    )


def test_serialize_example_round_trip():
    event = _serialize_example()
    assert Event.from_json(event.to_json()) == event


def test_serialized_event_type_shape():
    data = json.loads(_serialize_example().to_json())
    assert data["event_type"] == {"KeyPress": "KeyS"}
    assert data["unicode"] == {"name": "S", "unicode": [], "is_dead": False}
    assert data["platform_code"] == 0
    assert data["position_code"] == 0
    assert data["usb_hid"] == 0
    assert data["extra_data"] == 0


def test_time_is_seconds_and_nanos_since_epoch():
    moment = datetime(1970, 1, 1, 0, 0, 5, 250, tzinfo=timezone.utc)
    data = Event(KeyRelease(Key.KeyA), time=moment).to_dict()
    assert data["time"] == {"secs_since_epoch": 5, "nanos_since_epoch": 250_000}
    assert Event.from_dict(data).time == moment


@pytest.mark.parametrize(
    "event_type",
    [
        KeyPress(Key.Return),
        KeyRelease(UnknownKey(219)),
        KeyPress(RawKey(RawKeyKind.MacVirtualKeycode, 57)),
        KeyRelease(RawKey(RawKeyKind.LinuxXorgKeycode, 194)),
        ButtonPress(Button.Left),
        ButtonRelease(UnknownButton(8)),
        MouseMove(x=400.0, y=12.5),
        Wheel(delta_x=0, delta_y=-1),
    ],
)
def test_event_type_round_trip(event_type):
    event = Event(event_type, platform_code=3, position_code=4, usb_hid=5, extra_data=6)
    restored = Event.from_json(event.to_json())
    assert restored == event
    assert restored.event_type == event_type


def test_unknown_key_and_raw_key_shapes():
    unknown = Event(KeyPress(UnknownKey(219))).to_dict()["event_type"]
    assert unknown == {"KeyPress": {"Unknown": 219}}
    raw = Event(KeyPress(RawKey(RawKeyKind.LinuxXorgKeycode, 194))).to_dict()["event_type"]
    assert raw == {"KeyPress": {"RawKey": {"LinuxXorgKeycode": 194}}}


def test_mouse_move_and_wheel_shapes():
    move = Event(MouseMove(x=400.0, y=400.0)).to_dict()["event_type"]
    assert move == {"MouseMove": {"x": 400.0, "y": 400.0}}
    wheel = Event(Wheel(delta_x=0, delta_y=1)).to_dict()["event_type"]
    assert wheel == {"Wheel": {"delta_x": 0, "delta_y": 1}}


def test_unicode_none_round_trip():
    event = Event(KeyPress(Key.ShiftLeft))
    assert event.to_dict()["unicode"] is None
    assert Event.from_dict(event.to_dict()).unicode is None


def test_dead_key_unicode_round_trip():
    info = UnicodeInfo(name=None, unicode=(0x20AC,), is_dead=True)
    event = Event(KeyPress(Key.Quote), unicode=info)
    assert Event.from_json(event.to_json()).unicode == info


@pytest.mark.parametrize(
    "event_type",
    [
        {"KeyPress": "NoSuchKey"},
        {"KeyPress": {"Bogus": 1}},
        {"Teleport": {}},
        {"MouseMove": {"x": 1.0}},
        {"KeyPress": "KeyA", "KeyRelease": "KeyA"},
        {"ButtonPress": "Fourth"},
        {"Wheel": {"delta_x": 0, "delta_y": "up"}},
    ],
)
def test_from_dict_rejects_bad_event_type(event_type):
    data = Event(KeyPress(Key.KeyA)).to_dict()
    data["event_type"] = event_type
    with pytest.raises(ValueError):
        Event.from_dict(data)


def test_from_dict_requires_time():
    data = Event(KeyPress(Key.KeyA)).to_dict()
    del data["time"]
    with pytest.raises(ValueError):
        Event.from_dict(data)


def test_from_json_rejects_invalid_json():
    with pytest.raises(ValueError):
        Event.from_json("{not json")


def test_time_before_epoch_cannot_be_serialized():
    event = Event(KeyPress(Key.KeyA), time=datetime(1960, 1, 1, tzinfo=timezone.utc))
    with pytest.raises(ValueError):
        event.to_dict()


def test_is_known():
    assert is_known(Key.KeyS) is True
    assert is_known(UnknownKey(0)) is False
    assert is_known(RawKey(RawKeyKind.MacVirtualKeycode, 0)) is False


def test_keyboard_only():
    assert keyboard_only({"KEYBOARD_ONLY": "y"}) is True
    assert keyboard_only({"KEYBOARD_ONLY": ""}) is False
    assert keyboard_only({}) is False


def test_keyboard_only_reads_process_environment(monkeypatch):
    monkeypatch.setenv("KEYBOARD_ONLY", "y")
    assert keyboard_only() is True
    monkeypatch.delenv("KEYBOARD_ONLY")
    assert keyboard_only() is False


def test_errors_carry_kind_and_detail():
    error = GrabError(GrabError.Kind.IoError, OSError("boom"))
    assert error.kind is GrabError.Kind.IoError
    assert isinstance(error.detail, OSError)
    assert str(ListenError(ListenError.Kind.KeyboardError)) == "KeyboardError"
    assert DisplayError("NoDisplay").kind is DisplayError.Kind.NoDisplay


def test_error_kind_must_be_valid():
    with pytest.raises(ValueError):
        ListenError("NotAKind")


def test_simulate_error_keeps_its_message():
    error = SimulateError("could not send")
    assert "could not send" in str(error)