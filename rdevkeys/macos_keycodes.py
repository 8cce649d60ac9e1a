"""macOS virtual key codes for the named keys."""

from __future__ import annotations

from typing import Optional

from . import macos_virtual_keycodes as vk
from .event import AnyKey, Key, UnknownKey

_PAIRS: tuple[tuple[Key, int], ...] = (
    (Key.KeyA, vk.kVK_ANSI_A),
    (Key.KeyS, vk.kVK_ANSI_S),
    (Key.KeyD, vk.kVK_ANSI_D),
    (Key.KeyF, vk.kVK_ANSI_F),
    (Key.KeyH, vk.kVK_ANSI_H),
    (Key.KeyG, vk.kVK_ANSI_G),
    (Key.KeyZ, vk.kVK_ANSI_Z),
    (Key.KeyX, vk.kVK_ANSI_X),
    (Key.KeyC, vk.kVK_ANSI_C),
    (Key.KeyV, vk.kVK_ANSI_V),
    (Key.IntlBackslash, vk.kVK_ISO_Section),
    (Key.KeyB, vk.kVK_ANSI_B),
    (Key.KeyQ, vk.kVK_ANSI_Q),
    (Key.KeyW, vk.kVK_ANSI_W),
    (Key.KeyE, vk.kVK_ANSI_E),
    (Key.KeyR, vk.kVK_ANSI_R),
    (Key.KeyY, vk.kVK_ANSI_Y),
    (Key.KeyT, vk.kVK_ANSI_T),
    (Key.Num1, vk.kVK_ANSI_1),
    (Key.Num2, vk.kVK_ANSI_2),
    (Key.Num3, vk.kVK_ANSI_3),
    (Key.Num4, vk.kVK_ANSI_4),
    (Key.Num6, vk.kVK_ANSI_6),
    (Key.Num5, vk.kVK_ANSI_5),
    (Key.Equal, vk.kVK_ANSI_Equal),
    (Key.Num9, vk.kVK_ANSI_9),
    (Key.Num7, vk.kVK_ANSI_7),
    (Key.Minus, vk.kVK_ANSI_Minus),
    (Key.Num8, vk.kVK_ANSI_8),
    (Key.Num0, vk.kVK_ANSI_0),
    (Key.RightBracket, vk.kVK_ANSI_RightBracket),
    (Key.KeyO, vk.kVK_ANSI_O),
    (Key.KeyU, vk.kVK_ANSI_U),
    (Key.LeftBracket, vk.kVK_ANSI_LeftBracket),
    (Key.KeyI, vk.kVK_ANSI_I),
    (Key.KeyP, vk.kVK_ANSI_P),
    (Key.Return, vk.kVK_Return),
    (Key.KeyL, vk.kVK_ANSI_L),
    (Key.KeyJ, vk.kVK_ANSI_J),
    (Key.Quote, vk.kVK_ANSI_Quote),
    (Key.KeyK, vk.kVK_ANSI_K),
    (Key.SemiColon, vk.kVK_ANSI_Semicolon),
    (Key.BackSlash, vk.kVK_ANSI_Backslash),
    (Key.Comma, vk.kVK_ANSI_Comma),
    (Key.Slash, vk.kVK_ANSI_Slash),
    (Key.KeyN, vk.kVK_ANSI_N),
    (Key.KeyM, vk.kVK_ANSI_M),
    (Key.Dot, vk.kVK_ANSI_Period),
    (Key.Tab, vk.kVK_Tab),
    (Key.Space, vk.kVK_Space),
    (Key.BackQuote, vk.kVK_ANSI_Grave),
    (Key.Backspace, vk.kVK_Delete),
    (Key.Escape, vk.kVK_Escape),
    (Key.MetaRight, vk.kVK_RightCommand),
    (Key.MetaLeft, vk.kVK_Command),
    (Key.ShiftLeft, vk.kVK_Shift),
    (Key.CapsLock, vk.kVK_CapsLock),
    (Key.Alt, vk.kVK_Option),
    (Key.ControlLeft, vk.kVK_Control),
    (Key.ShiftRight, vk.kVK_RightShift),
    (Key.AltGr, vk.kVK_RightOption),
    (Key.ControlRight, vk.kVK_RightControl),
    (Key.Function, vk.kVK_Function),
    (Key.F17, vk.kVK_F17),
    (Key.KpDecimal, vk.kVK_ANSI_KeypadDecimal),
    (Key.KpMultiply, vk.kVK_ANSI_KeypadMultiply),
    (Key.KpPlus, vk.kVK_ANSI_KeypadPlus),
    (Key.NumLock, vk.kVK_ANSI_KeypadClear),
    (Key.VolumeUp, vk.kVK_VolumeUp),
    (Key.VolumeDown, vk.kVK_VolumeDown),
    (Key.VolumeMute, vk.kVK_Mute),
    (Key.KpDivide, vk.kVK_ANSI_KeypadDivide),
    (Key.KpReturn, vk.kVK_ANSI_KeypadEnter),
    (Key.KpMinus, vk.kVK_ANSI_KeypadMinus),
    (Key.F18, vk.kVK_F18),
    (Key.F19, vk.kVK_F19),
    (Key.KpEqual, vk.kVK_ANSI_KeypadEquals),
    (Key.Kp0, vk.kVK_ANSI_Keypad0),
    (Key.Kp1, vk.kVK_ANSI_Keypad1),
    (Key.Kp2, vk.kVK_ANSI_Keypad2),
    (Key.Kp3, vk.kVK_ANSI_Keypad3),
    (Key.Kp4, vk.kVK_ANSI_Keypad4),
    (Key.Kp5, vk.kVK_ANSI_Keypad5),
    (Key.Kp6, vk.kVK_ANSI_Keypad6),
    (Key.Kp7, vk.kVK_ANSI_Keypad7),
    (Key.F20, vk.kVK_F20),
    (Key.Kp8, vk.kVK_ANSI_Keypad8),
    (Key.Kp9, vk.kVK_ANSI_Keypad9),
    (Key.IntlYen, vk.kVK_JIS_Yen),
    (Key.IntlRo, vk.kVK_JIS_Underscore),
    (Key.KpComma, vk.kVK_JIS_KeypadComma),
    (Key.F5, vk.kVK_F5),
    (Key.F6, vk.kVK_F6),
    (Key.F7, vk.kVK_F7),
    (Key.F3, vk.kVK_F3),
    (Key.F8, vk.kVK_F8),
    (Key.F9, vk.kVK_F9),
    (Key.Lang2, vk.kVK_JIS_Eisu),
    (Key.F11, vk.kVK_F11),
    (Key.Lang1, vk.kVK_JIS_Kana),
    (Key.F13, vk.kVK_F13),
    (Key.F16, vk.kVK_F16),
    (Key.F14, vk.kVK_F14),
    (Key.F10, vk.kVK_F10),
    (Key.F12, vk.kVK_F12),
    (Key.F15, vk.kVK_F15),
    (Key.Insert, vk.kVK_Help),
    (Key.Home, vk.kVK_Home),
    (Key.PageUp, vk.kVK_PageUp),
    (Key.Delete, vk.kVK_ForwardDelete),
    (Key.F4, vk.kVK_F4),
    (Key.End, vk.kVK_End),
    (Key.F2, vk.kVK_F2),
    (Key.PageDown, vk.kVK_PageDown),
    (Key.F1, vk.kVK_F1),
    (Key.LeftArrow, vk.kVK_LeftArrow),
    (Key.RightArrow, vk.kVK_RightArrow),
    (Key.DownArrow, vk.kVK_DownArrow),
    (Key.UpArrow, vk.kVK_UpArrow),
    (Key.Apps, vk.kVK_Context_Menu),
)

_CODE_OF: dict[Key, int] = dict(_PAIRS)
_KEY_OF: dict[int, Key] = {}
for _key, _code in _PAIRS:
    _KEY_OF.setdefault(_code, _key)


def code_from_key(key: AnyKey) -> Optional[int]:
    """Return the macOS virtual key code of a key, or None if it has none."""
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, Key):
        return _CODE_OF.get(key)
    return None


def key_from_code(code: int) -> AnyKey:
    """Return the key for a macOS virtual key code, UnknownKey if unnamed."""
    return _KEY_OF.get(code, UnknownKey(code))