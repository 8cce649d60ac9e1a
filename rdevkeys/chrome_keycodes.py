"""Browser KeyboardEvent.code strings for the named keys."""

from __future__ import annotations

from typing import Optional

from .event import AnyKey, Key, UnknownKey

RESERVED_UNKNOWN_CODE = 0

_PAIRS: tuple[tuple[Key, str], ...] = (
    (Key.Alt, "AltLeft"),
    (Key.AltGr, "AltRight"),
    (Key.Backspace, "Backspace"),
    (Key.CapsLock, "CapsLock"),
    (Key.ControlLeft, "ControlLeft"),
    (Key.ControlRight, "ControlRight"),
    (Key.Delete, "Delete"),
    (Key.UpArrow, "ArrowUp"),
    (Key.DownArrow, "ArrowDown"),
    (Key.LeftArrow, "ArrowLeft"),
    (Key.RightArrow, "ArrowRight"),
    (Key.End, "End"),
    (Key.Escape, "Escape"),
    (Key.F1, "F1"),
    (Key.F2, "F2"),
    (Key.F3, "F3"),
    (Key.F4, "F4"),
    (Key.F5, "F5"),
    (Key.F6, "F6"),
    (Key.F7, "F7"),
    (Key.F8, "F8"),
    (Key.F9, "F9"),
    (Key.F10, "F10"),
    (Key.F11, "F11"),
    (Key.F12, "F12"),
    (Key.F13, "F13"),
    (Key.F14, "F14"),
    (Key.F15, "F15"),
    (Key.F16, "F16"),
    (Key.F17, "F17"),
    (Key.F18, "F18"),
    (Key.F19, "F19"),
    (Key.F20, "F20"),
    (Key.F21, "F21"),
    (Key.F22, "F22"),
    (Key.F23, "F23"),
    (Key.F24, "F24"),
    (Key.Home, "Home"),
    (Key.MetaLeft, "MetaLeft"),
    (Key.PageDown, "PageDown"),
    (Key.PageUp, "PageUp"),
    (Key.Return, "Enter"),
    (Key.ShiftLeft, "ShiftLeft"),
    (Key.ShiftRight, "ShiftRight"),
    (Key.Space, "Space"),
    (Key.Tab, "Tab"),
    (Key.PrintScreen, "PrintScreen"),
    (Key.ScrollLock, "ScrollLock"),
    (Key.NumLock, "NumLock"),
    (Key.BackQuote, "Backquote"),
    (Key.Num1, "Digit1"),
    (Key.Num2, "Digit2"),
    (Key.Num3, "Digit3"),
    (Key.Num4, "Digit4"),
    (Key.Num5, "Digit5"),
    (Key.Num6, "Digit6"),
    (Key.Num7, "Digit7"),
    (Key.Num8, "Digit8"),
    (Key.Num9, "Digit9"),
    (Key.Num0, "Digit0"),
    (Key.Minus, "Minus"),
    (Key.Equal, "Equal"),
    (Key.KeyQ, "KeyQ"),
    (Key.KeyW, "KeyW"),
    (Key.KeyE, "KeyE"),
    (Key.KeyR, "KeyR"),
    (Key.KeyT, "KeyT"),
    (Key.KeyY, "KeyY"),
    (Key.KeyU, "KeyU"),
    (Key.KeyI, "KeyI"),
    (Key.KeyO, "KeyO"),
    (Key.KeyP, "KeyP"),
    (Key.LeftBracket, "BracketLeft"),
    (Key.RightBracket, "BracketRight"),
    (Key.BackSlash, "Backslash"),
    (Key.KeyA, "KeyA"),
    (Key.KeyS, "KeyS"),
    (Key.KeyD, "KeyD"),
    (Key.KeyF, "KeyF"),
    (Key.KeyG, "KeyG"),
    (Key.KeyH, "KeyH"),
    (Key.KeyJ, "KeyJ"),
    (Key.KeyK, "KeyK"),
    (Key.KeyL, "KeyL"),
    (Key.SemiColon, "Semicolon"),
    (Key.Quote, "Quote"),
    (Key.IntlBackslash, "IntlBackslash"),
    (Key.IntlRo, "IntlRo"),
    (Key.IntlYen, "IntlYen"),
    (Key.KanaMode, "KanaMode"),
    (Key.KeyZ, "KeyZ"),
    (Key.KeyX, "KeyX"),
    (Key.KeyC, "KeyC"),
    (Key.KeyV, "KeyV"),
    (Key.KeyB, "KeyB"),
    (Key.KeyN, "KeyN"),
    (Key.KeyM, "KeyM"),
    (Key.Comma, "Comma"),
    (Key.Dot, "Period"),
    (Key.Slash, "Slash"),
    (Key.Insert, "Insert"),
    (Key.KpMinus, "NumpadSubtract"),
    (Key.KpPlus, "NumpadAdd"),
    (Key.KpMultiply, "NumpadMultiply"),
    (Key.KpDivide, "NumpadDivide"),
    (Key.KpDecimal, "NumpadDecimal"),
    (Key.KpReturn, "NumpadEnter"),
    (Key.KpEqual, "NumpadEqual"),
    (Key.KpComma, "NumpadComma"),
    (Key.Kp0, "Numpad0"),
    (Key.Kp1, "Numpad1"),
    (Key.Kp2, "Numpad2"),
    (Key.Kp3, "Numpad3"),
    (Key.Kp4, "Numpad4"),
    (Key.Kp5, "Numpad5"),
    (Key.Kp6, "Numpad6"),
    (Key.Kp7, "Numpad7"),
    (Key.Kp8, "Numpad8"),
    (Key.Kp9, "Numpad9"),
    (Key.MetaRight, "MetaRight"),
    (Key.Apps, "ContextMenu"),
    (Key.VolumeUp, "AudioVolumeUp"),
    (Key.VolumeDown, "AudioVolumeDown"),
    (Key.VolumeMute, "AudioVolumeMute"),
    (Key.Lang1, "NonConvert"),
    (Key.Lang2, "Convert"),
    (Key.Lang3, "Lang3"),
    (Key.Lang4, "Lang4"),
    (Key.Lang5, "Lang5"),
    (Key.Cancel, ""),
    (Key.Clear, ""),
    (Key.Kana, ""),
    (Key.Junja, ""),
    (Key.Final, ""),
    (Key.Hanja, ""),
    (Key.Select, ""),
    (Key.Print, ""),
    (Key.Execute, ""),
    (Key.Help, ""),
    (Key.Sleep, ""),
    (Key.Separator, ""),
    (Key.Pause, ""),
)

_CODE_OF: dict[Key, str] = dict(_PAIRS)
# Keys without a browser code share the empty string; the first one listed wins.
_KEY_OF: dict[str, Key] = {}
for _key, _code in _PAIRS:
    _KEY_OF.setdefault(_code, _key)


def code_from_key(key: AnyKey) -> Optional[str]:
    """Return the browser code string of a named key, or None."""
    if isinstance(key, Key):
        return _CODE_OF.get(key)
    return None


def key_from_code(code: str) -> AnyKey:
    """Return the key for a browser code string, or the reserved unknown key."""
    return _KEY_OF.get(code, UnknownKey(RESERVED_UNKNOWN_CODE))