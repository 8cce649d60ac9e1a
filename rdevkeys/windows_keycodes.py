"""Windows virtual key codes and scan codes for the named keys."""

from __future__ import annotations

from typing import Optional

from .event import AnyKey, Key, UnknownKey

_TRIPLES: tuple[tuple[Key, int, int], ...] = (
    (Key.Alt, 164, 0x38),
    (Key.AltGr, 165, 0xE038),
    (Key.Backspace, 0x08, 0x0E),
    (Key.CapsLock, 20, 0x3A),
    (Key.ControlLeft, 162, 0x1D),
    (Key.ControlRight, 163, 0xE01D),
    (Key.Delete, 46, 0xE053),
    (Key.UpArrow, 38, 0xE048),
    (Key.DownArrow, 40, 0xE050),
    (Key.LeftArrow, 37, 0xE04B),
    (Key.RightArrow, 39, 0xE04D),
    (Key.End, 35, 0xE04F),
    (Key.Escape, 27, 0x01),
    (Key.F1, 112, 0x3B),
    (Key.F2, 113, 0x3C),
    (Key.F3, 114, 0x3D),
    (Key.F4, 115, 0x3E),
    (Key.F5, 116, 0x3F),
    (Key.F6, 117, 0x40),
    (Key.F7, 118, 0x41),
    (Key.F8, 119, 0x42),
    (Key.F9, 120, 0x43),
    (Key.F10, 121, 0x44),
    (Key.F11, 122, 0x57),
    (Key.F12, 123, 0x58),
    (Key.F13, 0x7C, 0x64),
    (Key.F14, 0x7D, 0x65),
    (Key.F15, 0x7E, 0x66),
    (Key.F16, 0x7F, 0x67),
    (Key.F17, 0x80, 0x68),
    (Key.F18, 0x81, 0x69),
    (Key.F19, 0x82, 0x6A),
    (Key.F20, 0x83, 0x6B),
    (Key.F21, 0x84, 0x6C),
    (Key.F22, 0x85, 0x6D),
    (Key.F23, 0x86, 0x6E),
    (Key.F24, 0x87, 0x76),
    (Key.Home, 36, 0xE047),
    (Key.MetaLeft, 91, 0xE05B),
    (Key.PageDown, 34, 0xE051),
    (Key.PageUp, 33, 0xE049),
    (Key.Return, 13, 0x1C),
    (Key.ShiftLeft, 160, 0x2A),
    (Key.ShiftRight, 161, 0x36),
    (Key.Space, 32, 0x39),
    (Key.Tab, 0x09, 0x0F),
    (Key.PrintScreen, 44, 0xE037),
    (Key.ScrollLock, 145, 0x46),
    (Key.NumLock, 144, 0x45),
    (Key.BackQuote, 192, 0x29),
    (Key.Num1, 49, 0x02),
    (Key.Num2, 50, 0x03),
    (Key.Num3, 51, 0x04),
    (Key.Num4, 52, 0x05),
    (Key.Num5, 53, 0x06),
    (Key.Num6, 54, 0x07),
    (Key.Num7, 55, 0x08),
    (Key.Num8, 56, 0x09),
    (Key.Num9, 57, 0x0A),
    (Key.Num0, 48, 0x0B),
    (Key.Minus, 189, 0x0C),
    (Key.Equal, 187, 0x0D),
    (Key.KeyQ, 81, 0x10),
    (Key.KeyW, 87, 0x11),
    (Key.KeyE, 69, 0x12),
    (Key.KeyR, 82, 0x13),
    (Key.KeyT, 84, 0x14),
    (Key.KeyY, 89, 0x15),
    (Key.KeyU, 85, 0x16),
    (Key.KeyI, 73, 0x17),
    (Key.KeyO, 79, 0x18),
    (Key.KeyP, 80, 0x19),
    (Key.LeftBracket, 219, 0x1A),
    (Key.RightBracket, 221, 0x1B),
    (Key.BackSlash, 220, 0x2B),
    (Key.KeyA, 65, 0x1E),
    (Key.KeyS, 83, 0x1F),
    (Key.KeyD, 68, 0x20),
    (Key.KeyF, 70, 0x21),
    (Key.KeyG, 71, 0x22),
    (Key.KeyH, 72, 0x23),
    (Key.KeyJ, 74, 0x24),
    (Key.KeyK, 75, 0x25),
    (Key.KeyL, 76, 0x26),
    (Key.SemiColon, 186, 0x27),
    (Key.Quote, 222, 0x28),
    (Key.IntlBackslash, 226, 0x56),
    (Key.IntlRo, 0x00E2, 0x0073),
    (Key.IntlYen, 0x00DC, 0x007D),
    (Key.KanaMode, 0x0000, 0x70),
    (Key.KeyZ, 90, 0x2C),
    (Key.KeyX, 88, 0x2D),
    (Key.KeyC, 67, 0x2E),
    (Key.KeyV, 86, 0x2F),
    (Key.KeyB, 66, 0x30),
    (Key.KeyN, 78, 0x31),
    (Key.KeyM, 77, 0x32),
    (Key.Comma, 188, 0x33),
    (Key.Dot, 190, 0x34),
    (Key.Slash, 191, 0x35),
    (Key.Insert, 45, 0xE052),
    (Key.KpMinus, 109, 0x4A),
    (Key.KpPlus, 107, 0x4E),
    (Key.KpMultiply, 106, 0x37),
    (Key.KpDivide, 111, 0xE035),
    (Key.KpDecimal, 110, 0x53),
    (Key.KpReturn, 13, 0xE01C),
    (Key.KpEqual, 0x0000, 0x59),
    (Key.KpComma, 0x0000, 0x7E),
    (Key.Kp0, 96, 0x52),
    (Key.Kp1, 97, 0x4F),
    (Key.Kp2, 98, 0x50),
    (Key.Kp3, 99, 0x51),
    (Key.Kp4, 100, 0x4B),
    (Key.Kp5, 101, 0x4C),
    (Key.Kp6, 102, 0x4D),
    (Key.Kp7, 103, 0x47),
    (Key.Kp8, 104, 0x48),
    (Key.Kp9, 105, 0x49),
    (Key.MetaRight, 92, 0xE05C),
    (Key.Apps, 93, 0xE05D),
    (Key.VolumeUp, 0x00AF, 0xE030),
    (Key.VolumeDown, 0x00AE, 0xE02E),
    (Key.VolumeMute, 0x00AD, 0xE020),
    (Key.Lang1, 0x1D, 0x007B),
    (Key.Lang2, 0x1C, 0x0079),
    (Key.Lang3, 0x0000, 0x0078),
    (Key.Lang4, 0x0000, 0x0077),
    (Key.Lang5, 0x0000, 0x0076),
    (Key.Cancel, 0x03, 0x0000),
    (Key.Clear, 12, 0x0000),
    (Key.Kana, 0x15, 0x0080),
    (Key.Junja, 0x17, 0x0000),
    (Key.Final, 0x18, 0x0000),
    (Key.Hanja, 0x19, 0x00F1),
    (Key.Select, 0x29, 0x0000),
    (Key.Print, 0x2A, 0x0000),
    (Key.Execute, 0x2B, 0x0000),
    (Key.Help, 0x2F, 0x0000),
    (Key.Sleep, 0x5F, 0x0000),
    (Key.Separator, 0x6C, 0x0000),
    (Key.Pause, 19, 0x0000),
)

_CODE_OF: dict[Key, int] = {key: code for key, code, _ in _TRIPLES}
_SCANCODE_OF: dict[Key, int] = {key: scancode for key, _, scancode in _TRIPLES}

# Where codes repeat, the first key listed wins.
_KEY_OF: dict[int, Key] = {}
_KEY_OF_SCANCODE: dict[int, Key] = {}
for _key, _code, _scancode in _TRIPLES:
    _KEY_OF.setdefault(_code, _key)
    if _scancode != 0:
        _KEY_OF_SCANCODE.setdefault(_scancode, _key)

# Keys whose scan code is shared with another key, so the virtual code decides.
_PREFER_VIRTUAL = frozenset({Key.AltGr, Key.KpDivide, Key.ControlRight})


def code_from_key(key: AnyKey) -> Optional[int]:
    """Return the Windows virtual key code of a key, or None if it has none."""
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, Key):
        return _CODE_OF.get(key)
    return None


def key_from_code(code: int) -> AnyKey:
    """Return the key for a Windows virtual key code, UnknownKey if unnamed."""
    return _KEY_OF.get(code, UnknownKey(code))


def scancode_from_key(key: AnyKey) -> Optional[int]:
    """Return the Windows scan code of a key, or None if it has none."""
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, Key):
        return _SCANCODE_OF.get(key)
    return None


def key_from_scancode(scancode: int) -> AnyKey:
    """Return the key for a Windows scan code; scan code 0 is always unknown."""
    return _KEY_OF_SCANCODE.get(scancode, UnknownKey(scancode))


def get_win_key(keycode: int, scancode: int) -> AnyKey:
    """Pick the key for a virtual code and scan code pair seen together."""
    key = key_from_code(keycode)
    if key in _PREFER_VIRTUAL:
        return key
    scancode_key = key_from_scancode(scancode)
    if scancode_key != UnknownKey(scancode):
        return scancode_key
    return key


def get_win_codes(key: AnyKey) -> Optional[tuple[int, int]]:
    """Return the (virtual code, scan code) pair of a key, or None."""
    keycode = code_from_key(key)
    if keycode is None:
        return None
    if key == UnknownKey(keycode):
        key = key_from_code(keycode)
    scancode = scancode_from_key(key)
    if scancode is None:
        return None
    return keycode, scancode