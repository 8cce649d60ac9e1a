"""Core event types: keys, buttons, event kinds, events and errors."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional, Union

__all__ = [
    "Key",
    "UnknownKey",
    "RawKeyKind",
    "RawKey",
    "Button",
    "UnknownButton",
    "KeyPress",
    "KeyRelease",
    "ButtonPress",
    "ButtonRelease",
    "MouseMove",
    "Wheel",
    "EventType",
    "AnyKey",
    "AnyButton",
    "UnicodeInfo",
    "Event",
    "DisplayError",
    "ListenError",
    "GrabError",
    "SimulateError",
    "is_known",
    "keyboard_only",
]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Key(Enum):
    """Physical keys, named after their position on a QWERTY layout."""

    Alt = "Alt"
    AltGr = "AltGr"
    Backspace = "Backspace"
    CapsLock = "CapsLock"
    ControlLeft = "ControlLeft"
    ControlRight = "ControlRight"
    Delete = "Delete"
    DownArrow = "DownArrow"
    End = "End"
    Escape = "Escape"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    F21 = "F21"
    F22 = "F22"
    F23 = "F23"
    F24 = "F24"
    Home = "Home"
    LeftArrow = "LeftArrow"
    MetaLeft = "MetaLeft"
    MetaRight = "MetaRight"
    PageDown = "PageDown"
    PageUp = "PageUp"
    Return = "Return"
    RightArrow = "RightArrow"
    ShiftLeft = "ShiftLeft"
    ShiftRight = "ShiftRight"
    Space = "Space"
    Tab = "Tab"
    UpArrow = "UpArrow"
    PrintScreen = "PrintScreen"
    ScrollLock = "ScrollLock"
    Pause = "Pause"
    NumLock = "NumLock"
    BackQuote = "BackQuote"
    Num1 = "Num1"
    Num2 = "Num2"
    Num3 = "Num3"
    Num4 = "Num4"
    Num5 = "Num5"
    Num6 = "Num6"
    Num7 = "Num7"
    Num8 = "Num8"
    Num9 = "Num9"
    Num0 = "Num0"
    Minus = "Minus"
    Equal = "Equal"
    KeyQ = "KeyQ"
    KeyW = "KeyW"
    KeyE = "KeyE"
    KeyR = "KeyR"
    KeyT = "KeyT"
    KeyY = "KeyY"
    KeyU = "KeyU"
    KeyI = "KeyI"
    KeyO = "KeyO"
    KeyP = "KeyP"
    LeftBracket = "LeftBracket"
    RightBracket = "RightBracket"
    KeyA = "KeyA"
    KeyS = "KeyS"
    KeyD = "KeyD"
    KeyF = "KeyF"
    KeyG = "KeyG"
    KeyH = "KeyH"
    KeyJ = "KeyJ"
    KeyK = "KeyK"
    KeyL = "KeyL"
    SemiColon = "SemiColon"
    Quote = "Quote"
    BackSlash = "BackSlash"
    IntlBackslash = "IntlBackslash"
    IntlRo = "IntlRo"
    IntlYen = "IntlYen"
    KanaMode = "KanaMode"
    KeyZ = "KeyZ"
    KeyX = "KeyX"
    KeyC = "KeyC"
    KeyV = "KeyV"
    KeyB = "KeyB"
    KeyN = "KeyN"
    KeyM = "KeyM"
    Comma = "Comma"
    Dot = "Dot"
    Slash = "Slash"
    Insert = "Insert"
    KpReturn = "KpReturn"
    KpMinus = "KpMinus"
    KpPlus = "KpPlus"
    KpMultiply = "KpMultiply"
    KpDivide = "KpDivide"
    KpDecimal = "KpDecimal"
    KpEqual = "KpEqual"
    KpComma = "KpComma"
    Kp0 = "Kp0"
    Kp1 = "Kp1"
    Kp2 = "Kp2"
    Kp3 = "Kp3"
    Kp4 = "Kp4"
    Kp5 = "Kp5"
    Kp6 = "Kp6"
    Kp7 = "Kp7"
    Kp8 = "Kp8"
    Kp9 = "Kp9"
    Function = "Function"
    Apps = "Apps"
    VolumeUp = "VolumeUp"
    VolumeDown = "VolumeDown"
    VolumeMute = "VolumeMute"
    Lang1 = "Lang1"
    Lang2 = "Lang2"
    Lang3 = "Lang3"
    Lang4 = "Lang4"
    Lang5 = "Lang5"
    Cancel = "Cancel"
    Clear = "Clear"
    Kana = "Kana"
    Junja = "Junja"
    Final = "Final"
    Hanja = "Hanja"
    Select = "Select"
    Print = "Print"
    Execute = "Execute"
    Help = "Help"
    Sleep = "Sleep"
    Separator = "Separator"


@dataclass(frozen=True)
class UnknownKey:
    """A key with no name, carrying the platform code it was seen with."""

    code: int


class RawKeyKind(Enum):
    """Which platform code space a raw key code belongs to."""

    LinuxXorgKeycode = "LinuxXorgKeycode"
    MacVirtualKeycode = "MacVirtualKeycode"


@dataclass(frozen=True)
class RawKey:
    """A key given directly by a platform-specific code."""

    kind: RawKeyKind
    code: int


AnyKey = Union[Key, UnknownKey, RawKey]


class Button(Enum):
    """Mouse buttons with a name."""

    Left = "Left"
    Right = "Right"
    Middle = "Middle"


@dataclass(frozen=True)
class UnknownButton:
    """A mouse button beyond the three named ones."""

    code: int


AnyButton = Union[Button, UnknownButton]


@dataclass(frozen=True)
class KeyPress:
    key: AnyKey


@dataclass(frozen=True)
class KeyRelease:
    key: AnyKey


@dataclass(frozen=True)
class ButtonPress:
    button: AnyButton


@dataclass(frozen=True)
class ButtonRelease:
    button: AnyButton


@dataclass(frozen=True)
class MouseMove:
    """Pointer position in pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class Wheel:
    delta_x: int
    delta_y: int


EventType = Union[KeyPress, KeyRelease, ButtonPress, ButtonRelease, MouseMove, Wheel]


@dataclass(frozen=True)
class UnicodeInfo:
    """What the operating system made of a key press."""

    name: Optional[str] = None
    unicode: tuple[int, ...] = ()
    is_dead: bool = False


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Event:
    """An event as received from the system, with the time it arrived."""

    event_type: EventType
    time: datetime = field(default_factory=_now)
    unicode: Optional[UnicodeInfo] = None
    platform_code: int = 0
    position_code: int = 0
    usb_hid: int = 0
    extra_data: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of this event."""
        return {
            "event_type": _event_type_to_data(self.event_type),
            "time": _time_to_data(self.time),
            "unicode": _unicode_to_data(self.unicode),
            "platform_code": self.platform_code,
            "position_code": self.position_code,
            "usb_hid": self.usb_hid,
            "extra_data": self.extra_data,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """Build an event from a mapping made by :meth:`to_dict`."""
        if not isinstance(data, Mapping):
            raise ValueError("event must be a mapping")
        try:
            event_type = data["event_type"]
            time = data["time"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        return cls(
            event_type=_event_type_from_data(event_type),
            time=_time_from_data(time),
            unicode=_unicode_from_data(data.get("unicode")),
            platform_code=_int(data.get("platform_code", 0), "platform_code"),
            position_code=_int(data.get("position_code", 0), "position_code"),
            usb_hid=_int(data.get("usb_hid", 0), "usb_hid"),
            extra_data=_int(data.get("extra_data", 0), "extra_data"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "Event":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid JSON: {exc}") from exc
        return cls.from_dict(data)


def is_known(key: AnyKey) -> bool:
    """True for named keys, False for unknown and raw keys."""
    return isinstance(key, Key)


def keyboard_only(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when KEYBOARD_ONLY is set to a non-empty value."""
    env = os.environ if environ is None else environ
    return bool(env.get("KEYBOARD_ONLY", ""))


class _KindError(Exception):
    """An error that carries a kind and an optional detail."""

    Kind: type[Enum]

    def __init__(self, kind: Enum, detail: Any = None) -> None:
        self.kind = self.Kind(kind)
        self.detail = detail
        message = self.kind.value if detail is None else f"{self.kind.value}: {detail}"
        super().__init__(message)


class DisplayError(_KindError):
    """The display could not be reached or measured."""

    class Kind(Enum):
        NoDisplay = "NoDisplay"


class ListenError(_KindError):
    """Listening to global events failed."""

    class Kind(Enum):
        MissingDisplayError = "MissingDisplayError"
        KeyboardError = "KeyboardError"
        RecordContextEnablingError = "RecordContextEnablingError"
        RecordContextError = "RecordContextError"
        XRecordExtensionError = "XRecordExtensionError"


class GrabError(_KindError):
    """Grabbing global events failed."""

    class Kind(Enum):
        MissingDisplayError = "MissingDisplayError"
        MissingScreenError = "MissingScreenError"
        KeyboardError = "KeyboardError"
        IoError = "IoError"


class SimulateError(Exception):
    """An event could not be sent."""


def _int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} must be a number, got {value!r}")
    return float(value)


def _single(data: Any, what: str) -> tuple[str, Any]:
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ValueError(f"{what} must be a mapping with exactly one entry")
    ((tag, value),) = data.items()
    return tag, value


def _key_to_data(key: AnyKey) -> Any:
    match key:
        case Key():
            return key.value
        case UnknownKey(code):
            return {"Unknown": code}
        case RawKey(kind, code):
            return {"RawKey": {kind.value: code}}
    raise TypeError(f"not a key: {key!r}")


def _key_from_data(data: Any) -> AnyKey:
    if isinstance(data, str):
        try:
            return Key(data)
        except ValueError:
            raise ValueError(f"unknown key name {data!r}") from None
    tag, value = _single(data, "key")
    if tag == "Unknown":
        return UnknownKey(_int(value, "key code"))
    if tag == "RawKey":
        kind, code = _single(value, "raw key")
        try:
            raw_kind = RawKeyKind(kind)
        except ValueError:
            raise ValueError(f"unknown raw key kind {kind!r}") from None
        return RawKey(raw_kind, _int(code, "raw key code"))
    raise ValueError(f"unknown key variant {tag!r}")


def _button_to_data(button: AnyButton) -> Any:
    match button:
        case Button():
            return button.value
        case UnknownButton(code):
            return {"Unknown": code}
    raise TypeError(f"not a button: {button!r}")


def _button_from_data(data: Any) -> AnyButton:
    if isinstance(data, str):
        try:
            return Button(data)
        except ValueError:
            raise ValueError(f"unknown button name {data!r}") from None
    tag, value = _single(data, "button")
    if tag != "Unknown":
        raise ValueError(f"unknown button variant {tag!r}")
    return UnknownButton(_int(value, "button code"))


def _event_type_to_data(event_type: EventType) -> dict[str, Any]:
    match event_type:
        case KeyPress(key):
            return {"KeyPress": _key_to_data(key)}
        case KeyRelease(key):
            return {"KeyRelease": _key_to_data(key)}
        case ButtonPress(button):
            return {"ButtonPress": _button_to_data(button)}
        case ButtonRelease(button):
            return {"ButtonRelease": _button_to_data(button)}
        case MouseMove(x, y):
            return {"MouseMove": {"x": x, "y": y}}
        case Wheel(delta_x, delta_y):
            return {"Wheel": {"delta_x": delta_x, "delta_y": delta_y}}
    raise TypeError(f"not an event type: {event_type!r}")


def _event_type_from_data(data: Any) -> EventType:
    tag, value = _single(data, "event_type")
    if tag == "KeyPress":
        return KeyPress(_key_from_data(value))
    if tag == "KeyRelease":
        return KeyRelease(_key_from_data(value))
    if tag == "ButtonPress":
        return ButtonPress(_button_from_data(value))
    if tag == "ButtonRelease":
        return ButtonRelease(_button_from_data(value))
    if not isinstance(value, Mapping):
        raise ValueError(f"{tag} payload must be a mapping")
    try:
        if tag == "MouseMove":
            return MouseMove(_number(value["x"], "x"), _number(value["y"], "y"))
        if tag == "Wheel":
            return Wheel(
                _int(value["delta_x"], "delta_x"), _int(value["delta_y"], "delta_y")
            )
    except KeyError as exc:
        raise ValueError(f"{tag} is missing {exc.args[0]!r}") from None
    raise ValueError(f"unknown event type {tag!r}")


def _time_to_data(moment: datetime) -> dict[str, int]:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = moment - _EPOCH
    if delta < timedelta(0):
        raise ValueError("time is before the Unix epoch")
    return {
        "secs_since_epoch": delta.days * 86400 + delta.seconds,
        "nanos_since_epoch": delta.microseconds * 1000,
    }


def _time_from_data(data: Any) -> datetime:
    if not isinstance(data, Mapping):
        raise ValueError("time must be a mapping")
    try:
        secs = _int(data["secs_since_epoch"], "secs_since_epoch")
        nanos = _int(data["nanos_since_epoch"], "nanos_since_epoch")
    except KeyError as exc:
        raise ValueError(f"time is missing {exc.args[0]!r}") from None
    if secs < 0 or not 0 <= nanos < 1_000_000_000:
        raise ValueError("time is out of range")
    return _EPOCH + timedelta(seconds=secs, microseconds=nanos // 1000)


def _unicode_to_data(info: Optional[UnicodeInfo]) -> Optional[dict[str, Any]]:
    if info is None:
        return None
    return {"name": info.name, "unicode": list(info.unicode), "is_dead": info.is_dead}


def _unicode_from_data(data: Any) -> Optional[UnicodeInfo]:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ValueError("unicode must be a mapping or null")
    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise ValueError("unicode name must be a string or null")
    units = data.get("unicode", [])
    if not isinstance(units, list):
        raise ValueError("unicode code units must be a list")
    is_dead = data.get("is_dead", False)
    if not isinstance(is_dead, bool):
        raise ValueError("is_dead must be a boolean")
    return UnicodeInfo(
        name=name,
        unicode=tuple(_int(unit, "code unit") for unit in units),
        is_dead=is_dead,
    )