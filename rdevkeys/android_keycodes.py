"""Android key codes for the named keys."""

from __future__ import annotations

from typing import Optional

from .event import AnyKey, Key, UnknownKey

_PAIRS: tuple[tuple[Key, int], ...] = (
    (Key.Alt, 57),
    (Key.AltGr, 58),
    (Key.Backspace, 67),
    (Key.CapsLock, 115),
    (Key.ControlLeft, 113),
    (Key.ControlRight, 114),
    (Key.Delete, 112),
    (Key.DownArrow, 20),
    (Key.End, 123),
    (Key.Escape, 111),
    (Key.F1, 131),
    (Key.F10, 140),
    (Key.F11, 141),
    (Key.F12, 142),
    (Key.F2, 132),
    (Key.F3, 133),
    (Key.F4, 134),
    (Key.F5, 135),
    (Key.F6, 136),
    (Key.F7, 137),
    (Key.F8, 138),
    (Key.F9, 139),
    (Key.Home, 3),
    (Key.LeftArrow, 21),
    (Key.MetaLeft, 117),
    (Key.PageDown, 93),
    (Key.PageUp, 92),
    (Key.Return, 66),
    (Key.RightArrow, 22),
    (Key.ShiftLeft, 59),
    (Key.ShiftRight, 60),
    (Key.Space, 62),
    (Key.Tab, 61),
    (Key.UpArrow, 19),
    (Key.PrintScreen, 120),
    (Key.ScrollLock, 116),
    (Key.NumLock, 143),
    (Key.Pause, 121),
    (Key.BackQuote, 75),
    (Key.Num1, 8),
    (Key.Num2, 9),
    (Key.Num3, 10),
    (Key.Num4, 11),
    (Key.Num5, 12),
    (Key.Num6, 13),
    (Key.Num7, 14),
    (Key.Num8, 15),
    (Key.Num9, 16),
    (Key.Num0, 7),
    (Key.Minus, 69),
    (Key.Equal, 70),
    (Key.KeyA, 29),
    (Key.KeyB, 30),
    (Key.KeyC, 31),
    (Key.KeyD, 32),
    (Key.KeyE, 33),
    (Key.KeyF, 34),
    (Key.KeyG, 35),
    (Key.KeyH, 36),
    (Key.KeyI, 37),
    (Key.KeyJ, 38),
    (Key.KeyK, 39),
    (Key.KeyL, 40),
    (Key.KeyM, 41),
    (Key.KeyN, 42),
    (Key.KeyO, 43),
    (Key.KeyP, 44),
    (Key.KeyQ, 45),
    (Key.KeyR, 46),
    (Key.KeyS, 47),
    (Key.KeyT, 48),
    (Key.KeyU, 49),
    (Key.KeyV, 50),
    (Key.KeyW, 51),
    (Key.KeyX, 52),
    (Key.KeyY, 53),
    (Key.KeyZ, 54),
    (Key.LeftBracket, 71),
    (Key.RightBracket, 72),
    (Key.SemiColon, 74),
    (Key.Quote, 75),
    (Key.BackSlash, 73),
    (Key.KanaMode, 218),
    (Key.Comma, 55),
    (Key.Dot, 56),
    (Key.Slash, 76),
    (Key.Insert, 124),
)

_CODE_OF: dict[Key, int] = dict(_PAIRS)
# Where two keys share a code, the first one listed wins.
_KEY_OF: dict[int, Key] = {}
for _key, _code in _PAIRS:
    _KEY_OF.setdefault(_code, _key)


def code_from_key(key: AnyKey) -> Optional[int]:
    """Return the Android key code of a key, or None if it has none."""
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, Key):
        return _CODE_OF.get(key)
    return None


def key_from_code(code: int) -> AnyKey:
    """Return the key for an Android key code, UnknownKey if unnamed."""
    return _KEY_OF.get(code, UnknownKey(code))