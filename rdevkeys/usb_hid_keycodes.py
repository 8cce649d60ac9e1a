"""USB HID keyboard usage codes for the named keys."""

from __future__ import annotations

from typing import Optional

from .event import AnyKey, Key, UnknownKey

_PAIRS: tuple[tuple[Key, int], ...] = (
    (Key.Alt, 0xE2),
    (Key.AltGr, 0xE6),
    (Key.Backspace, 0x2A),
    (Key.CapsLock, 0x39),
    (Key.ControlLeft, 0xE0),
    (Key.ControlRight, 0xE4),
    (Key.Delete, 0x4C),
    (Key.UpArrow, 0x52),
    (Key.DownArrow, 0x51),
    (Key.LeftArrow, 0x50),
    (Key.RightArrow, 0x4F),
    (Key.End, 0x4D),
    (Key.Escape, 0x29),
    (Key.F1, 0x3A),
    (Key.F2, 0x3B),
    (Key.F3, 0x3C),
    (Key.F4, 0x3D),
    (Key.F5, 0x3E),
    (Key.F6, 0x3F),
    (Key.F7, 0x40),
    (Key.F8, 0x41),
    (Key.F9, 0x42),
    (Key.F10, 0x43),
    (Key.F11, 0x44),
    (Key.F12, 0x45),
    (Key.F13, 0x68),
    (Key.F14, 0x69),
    (Key.F15, 0x6A),
    (Key.F16, 0x6B),
    (Key.F17, 0x6C),
    (Key.F18, 0x6D),
    (Key.F19, 0x6E),
    (Key.F20, 0x6F),
    (Key.F21, 0x70),
    (Key.F22, 0x71),
    (Key.F23, 0x72),
    (Key.F24, 0x73),
    (Key.Home, 0x4A),
    (Key.MetaLeft, 0xE3),
    (Key.PageDown, 0x4E),
    (Key.PageUp, 0x4B),
    (Key.Return, 0x28),
    (Key.ShiftLeft, 0xE1),
    (Key.ShiftRight, 0xE5),
    (Key.Space, 0x2C),
    (Key.Tab, 0x2B),
    (Key.PrintScreen, 0x46),
    (Key.ScrollLock, 0x47),
    (Key.NumLock, 0x53),
    (Key.BackQuote, 0x35),
    (Key.Num1, 0x1E),
    (Key.Num2, 0x1F),
    (Key.Num3, 0x20),
    (Key.Num4, 0x21),
    (Key.Num5, 0x22),
    (Key.Num6, 0x23),
    (Key.Num7, 0x24),
    (Key.Num8, 0x25),
    (Key.Num9, 0x26),
    (Key.Num0, 0x27),
    (Key.Minus, 0x2D),
    (Key.Equal, 0x2E),
    (Key.KeyQ, 0x14),
    (Key.KeyW, 0x1A),
    (Key.KeyE, 0x08),
    (Key.KeyR, 0x15),
    (Key.KeyT, 0x17),
    (Key.KeyY, 0x1C),
    (Key.KeyU, 0x18),
    (Key.KeyI, 0x0C),
    (Key.KeyO, 0x12),
    (Key.KeyP, 0x13),
    (Key.LeftBracket, 0x2F),
    (Key.RightBracket, 0x30),
    (Key.BackSlash, 0x31),
    (Key.KeyA, 0x04),
    (Key.KeyS, 0x16),
    (Key.KeyD, 0x07),
    (Key.KeyF, 0x09),
    (Key.KeyG, 0x0A),
    (Key.KeyH, 0x0B),
    (Key.KeyJ, 0x0D),
    (Key.KeyK, 0x0E),
    (Key.KeyL, 0x0F),
    (Key.SemiColon, 0x33),
    (Key.Quote, 0x34),
    (Key.IntlBackslash, 0x64),
    (Key.IntlRo, 0x87),
    (Key.IntlYen, 0x89),
    (Key.KeyZ, 0x1D),
    (Key.KeyX, 0x1B),
    (Key.KeyC, 0x06),
    (Key.KeyV, 0x19),
    (Key.KeyB, 0x05),
    (Key.KeyN, 0x11),
    (Key.KeyM, 0x10),
    (Key.Comma, 0x36),
    (Key.Dot, 0x37),
    (Key.Slash, 0x38),
    (Key.Insert, 0x49),
    (Key.KpMinus, 0x56),
    (Key.KpPlus, 0x57),
    (Key.KpMultiply, 0x55),
    (Key.KpDivide, 0x54),
    (Key.KpDecimal, 0x63),
    (Key.KpReturn, 0x58),
    (Key.KpEqual, 0x67),
    (Key.KpComma, 0x85),
    (Key.Kp0, 0x62),
    (Key.Kp1, 0x59),
    (Key.Kp2, 0x5A),
    (Key.Kp3, 0x5B),
    (Key.Kp4, 0x5C),
    (Key.Kp5, 0x5D),
    (Key.Kp6, 0x5E),
    (Key.Kp7, 0x5F),
    (Key.Kp8, 0x60),
    (Key.Kp9, 0x61),
    (Key.MetaRight, 0xE7),
    (Key.Apps, 0x00),
    (Key.VolumeUp, 0x80),
    (Key.VolumeDown, 0x81),
    (Key.VolumeMute, 0x7F),
    (Key.Lang1, 0x8B),
    (Key.Lang2, 0x8A),
    (Key.Lang3, 0x92),
    (Key.Lang4, 0x93),
    (Key.Lang5, 0x94),
    (Key.Cancel, 0x9B),
    (Key.Clear, 0x9C),
    (Key.Kana, 0x88),
    (Key.Junja, 0x00),
    (Key.Final, 0x00),
    (Key.Hanja, 0x91),
    (Key.Select, 0x77),
    (Key.Print, 0x00),
    (Key.Execute, 0x74),
    (Key.Help, 0x75),
    (Key.Sleep, 0x00),
    (Key.Separator, 0x9F),
    (Key.Pause, 0x00),
)

_CODE_OF: dict[Key, int] = dict(_PAIRS)
# Several keys have no usage and share code 0; the first one listed wins.
_KEY_OF: dict[int, Key] = {}
for _key, _code in _PAIRS:
    _KEY_OF.setdefault(_code, _key)


def code_from_key(key: AnyKey) -> Optional[int]:
    """Return the USB HID usage code of a key, or None if it has none."""
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, Key):
        return _CODE_OF.get(key)
    return None


def key_from_code(code: int) -> AnyKey:
    """Return the key for a USB HID usage code, UnknownKey if unnamed."""
    return _KEY_OF.get(code, UnknownKey(code))