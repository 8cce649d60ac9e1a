"""X.org key codes for the named keys."""

from __future__ import annotations

from typing import Optional

from .event import AnyKey, Key, UnknownKey

_PAIRS: tuple[tuple[Key, int], ...] = (
    (Key.Alt, 64),
    (Key.AltGr, 108),
    (Key.Backspace, 22),
    (Key.CapsLock, 66),
    (Key.ControlLeft, 37),
    (Key.ControlRight, 105),
    (Key.Delete, 119),
    (Key.DownArrow, 116),
    (Key.End, 115),
    (Key.Escape, 9),
    (Key.F1, 67),
    (Key.F10, 76),
    (Key.F11, 95),
    (Key.F12, 96),
    (Key.F13, 0xBF),
    (Key.F14, 0xC0),
    (Key.F15, 0xC1),
    (Key.F16, 0xC2),
    (Key.F17, 0xC3),
    (Key.F18, 0xC4),
    (Key.F19, 0xC5),
    (Key.F20, 0xC6),
    (Key.F21, 0xC7),
    (Key.F22, 0xC8),
    (Key.F23, 0xC9),
    (Key.F24, 0xCA),
    (Key.F2, 68),
    (Key.F3, 69),
    (Key.F4, 70),
    (Key.F5, 71),
    (Key.F6, 72),
    (Key.F7, 73),
    (Key.F8, 74),
    (Key.F9, 75),
    (Key.Home, 110),
    (Key.LeftArrow, 113),
    (Key.MetaLeft, 133),
    (Key.PageDown, 117),
    (Key.PageUp, 112),
    (Key.Return, 36),
    (Key.RightArrow, 114),
    (Key.ShiftLeft, 50),
    (Key.ShiftRight, 62),
    (Key.Space, 65),
    (Key.Tab, 23),
    (Key.UpArrow, 111),
    (Key.PrintScreen, 107),
    (Key.ScrollLock, 78),
    (Key.Pause, 127),
    (Key.NumLock, 77),
    (Key.BackQuote, 49),
    (Key.Num1, 10),
    (Key.Num2, 11),
    (Key.Num3, 12),
    (Key.Num4, 13),
    (Key.Num5, 14),
    (Key.Num6, 15),
    (Key.Num7, 16),
    (Key.Num8, 17),
    (Key.Num9, 18),
    (Key.Num0, 19),
    (Key.Minus, 20),
    (Key.Equal, 21),
    (Key.KeyQ, 24),
    (Key.KeyW, 25),
    (Key.KeyE, 26),
    (Key.KeyR, 27),
    (Key.KeyT, 28),
    (Key.KeyY, 29),
    (Key.KeyU, 30),
    (Key.KeyI, 31),
    (Key.KeyO, 32),
    (Key.KeyP, 33),
    (Key.LeftBracket, 34),
    (Key.RightBracket, 35),
    (Key.KeyA, 38),
    (Key.KeyS, 39),
    (Key.KeyD, 40),
    (Key.KeyF, 41),
    (Key.KeyG, 42),
    (Key.KeyH, 43),
    (Key.KeyJ, 44),
    (Key.KeyK, 45),
    (Key.KeyL, 46),
    (Key.SemiColon, 47),
    (Key.Quote, 48),
    (Key.BackSlash, 51),
    (Key.IntlBackslash, 94),
    (Key.IntlRo, 0x61),
    (Key.IntlYen, 0x84),
    (Key.KanaMode, 0x65),
    (Key.KeyZ, 52),
    (Key.KeyX, 53),
    (Key.KeyC, 54),
    (Key.KeyV, 55),
    (Key.KeyB, 56),
    (Key.KeyN, 57),
    (Key.KeyM, 58),
    (Key.Comma, 59),
    (Key.Dot, 60),
    (Key.Slash, 61),
    (Key.Insert, 118),
    (Key.KpDecimal, 91),
    (Key.KpReturn, 104),
    (Key.KpMinus, 82),
    (Key.KpPlus, 86),
    (Key.KpMultiply, 63),
    (Key.KpDivide, 106),
    (Key.KpEqual, 0x7D),
    (Key.KpComma, 0x81),
    (Key.Kp0, 90),
    (Key.Kp1, 87),
    (Key.Kp2, 88),
    (Key.Kp3, 89),
    (Key.Kp4, 83),
    (Key.Kp5, 84),
    (Key.Kp6, 85),
    (Key.Kp7, 79),
    (Key.Kp8, 80),
    (Key.Kp9, 81),
    (Key.MetaRight, 134),
    (Key.Apps, 135),
    (Key.VolumeUp, 0x007B),
    (Key.VolumeDown, 0x007A),
    (Key.VolumeMute, 0x0079),
    (Key.Lang1, 0x0066),
    (Key.Lang2, 0x0064),
    (Key.Lang3, 0x0062),
    (Key.Lang4, 0x0063),
    (Key.Lang5, 0x005D),
)

_CODE_OF: dict[Key, int] = dict(_PAIRS)
_KEY_OF: dict[int, Key] = {}
for _key, _code in _PAIRS:
    _KEY_OF.setdefault(_code, _key)


def code_from_key(key: AnyKey) -> Optional[int]:
    """Return the X.org key code of a key, or None if it has none."""
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, Key):
        return _CODE_OF.get(key)
    return None


def key_from_code(code: int) -> AnyKey:
    """Return the key for an X.org key code, UnknownKey if unnamed."""
    return _KEY_OF.get(code, UnknownKey(code))