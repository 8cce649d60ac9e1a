"""Virtual key codes of the macOS keyboard, under their Carbon names."""

from __future__ import annotations

from typing import Optional

CGKeyCode = int

kVK_ANSI_A: CGKeyCode = 0
kVK_ANSI_S: CGKeyCode = 1
kVK_ANSI_D: CGKeyCode = 2
kVK_ANSI_F: CGKeyCode = 3
kVK_ANSI_H: CGKeyCode = 4
kVK_ANSI_G: CGKeyCode = 5
kVK_ANSI_Z: CGKeyCode = 6
kVK_ANSI_X: CGKeyCode = 7
kVK_ANSI_C: CGKeyCode = 8
kVK_ANSI_V: CGKeyCode = 9
kVK_ANSI_B: CGKeyCode = 11
kVK_ANSI_Q: CGKeyCode = 12
kVK_ANSI_W: CGKeyCode = 13
kVK_ANSI_E: CGKeyCode = 14
kVK_ANSI_R: CGKeyCode = 15
kVK_ANSI_Y: CGKeyCode = 16
kVK_ANSI_T: CGKeyCode = 17
kVK_ANSI_1: CGKeyCode = 18
kVK_ANSI_2: CGKeyCode = 19
kVK_ANSI_3: CGKeyCode = 20
kVK_ANSI_4: CGKeyCode = 21
kVK_ANSI_6: CGKeyCode = 22
kVK_ANSI_5: CGKeyCode = 23
kVK_ANSI_Equal: CGKeyCode = 24
kVK_ANSI_9: CGKeyCode = 25
kVK_ANSI_7: CGKeyCode = 26
kVK_ANSI_Minus: CGKeyCode = 27
kVK_ANSI_8: CGKeyCode = 28
kVK_ANSI_0: CGKeyCode = 29
kVK_ANSI_RightBracket: CGKeyCode = 30
kVK_ANSI_O: CGKeyCode = 31
kVK_ANSI_U: CGKeyCode = 32
kVK_ANSI_LeftBracket: CGKeyCode = 33
kVK_ANSI_I: CGKeyCode = 34
kVK_ANSI_P: CGKeyCode = 35
kVK_ANSI_L: CGKeyCode = 37
kVK_ANSI_J: CGKeyCode = 38
kVK_ANSI_Quote: CGKeyCode = 39
kVK_ANSI_K: CGKeyCode = 40
kVK_ANSI_Semicolon: CGKeyCode = 41
kVK_ANSI_Backslash: CGKeyCode = 42
kVK_ANSI_Comma: CGKeyCode = 43
kVK_ANSI_Slash: CGKeyCode = 44
kVK_ANSI_N: CGKeyCode = 45
kVK_ANSI_M: CGKeyCode = 46
kVK_ANSI_Period: CGKeyCode = 47
kVK_ANSI_Grave: CGKeyCode = 50
kVK_ANSI_KeypadDecimal: CGKeyCode = 65
kVK_ANSI_KeypadMultiply: CGKeyCode = 67
kVK_ANSI_KeypadPlus: CGKeyCode = 69
kVK_ANSI_KeypadClear: CGKeyCode = 71
kVK_ANSI_KeypadDivide: CGKeyCode = 75
kVK_ANSI_KeypadEnter: CGKeyCode = 76
kVK_ANSI_KeypadMinus: CGKeyCode = 78
kVK_ANSI_KeypadEquals: CGKeyCode = 81
kVK_ANSI_Keypad0: CGKeyCode = 82
kVK_ANSI_Keypad1: CGKeyCode = 83
kVK_ANSI_Keypad2: CGKeyCode = 84
kVK_ANSI_Keypad3: CGKeyCode = 85
kVK_ANSI_Keypad4: CGKeyCode = 86
kVK_ANSI_Keypad5: CGKeyCode = 87
kVK_ANSI_Keypad6: CGKeyCode = 88
kVK_ANSI_Keypad7: CGKeyCode = 89
kVK_ANSI_Keypad8: CGKeyCode = 91
kVK_ANSI_Keypad9: CGKeyCode = 92

kVK_Return: CGKeyCode = 36
kVK_Tab: CGKeyCode = 48
kVK_Space: CGKeyCode = 49
kVK_Delete: CGKeyCode = 51
kVK_Escape: CGKeyCode = 53
kVK_Command: CGKeyCode = 55
kVK_Shift: CGKeyCode = 56
kVK_CapsLock: CGKeyCode = 57
kVK_Option: CGKeyCode = 58
kVK_Control: CGKeyCode = 59
kVK_RightCommand: CGKeyCode = 54
kVK_RightShift: CGKeyCode = 60
kVK_RightOption: CGKeyCode = 61
kVK_RightControl: CGKeyCode = 62
kVK_Function: CGKeyCode = 63
kVK_F17: CGKeyCode = 64
kVK_VolumeUp: CGKeyCode = 72
kVK_VolumeDown: CGKeyCode = 73
kVK_Mute: CGKeyCode = 74
kVK_F18: CGKeyCode = 79
kVK_F19: CGKeyCode = 80
kVK_F20: CGKeyCode = 90
kVK_F5: CGKeyCode = 96
kVK_F6: CGKeyCode = 97
kVK_F7: CGKeyCode = 98
kVK_F3: CGKeyCode = 99
kVK_F8: CGKeyCode = 100
kVK_F9: CGKeyCode = 101
kVK_F11: CGKeyCode = 103
kVK_F13: CGKeyCode = 105
kVK_F16: CGKeyCode = 106
kVK_F14: CGKeyCode = 107
kVK_F10: CGKeyCode = 109
kVK_F12: CGKeyCode = 111
kVK_F15: CGKeyCode = 113
kVK_Help: CGKeyCode = 114
kVK_Home: CGKeyCode = 115
kVK_PageUp: CGKeyCode = 116
kVK_ForwardDelete: CGKeyCode = 117
kVK_F4: CGKeyCode = 118
kVK_End: CGKeyCode = 119
kVK_F2: CGKeyCode = 120
kVK_PageDown: CGKeyCode = 121
kVK_F1: CGKeyCode = 122
kVK_LeftArrow: CGKeyCode = 123
kVK_RightArrow: CGKeyCode = 124
kVK_DownArrow: CGKeyCode = 125
kVK_UpArrow: CGKeyCode = 126

kVK_ISO_Section: CGKeyCode = 10

kVK_JIS_Yen: CGKeyCode = 93
kVK_JIS_Underscore: CGKeyCode = 94
kVK_JIS_KeypadComma: CGKeyCode = 95
kVK_JIS_Eisu: CGKeyCode = 102
kVK_JIS_Kana: CGKeyCode = 104

kVK_Context_Menu: CGKeyCode = 110
kVK_Unknown: CGKeyCode = 0xFFFF

KEYCODES: dict[str, CGKeyCode] = {
    "kVK_ANSI_A": kVK_ANSI_A,
    "kVK_ANSI_S": kVK_ANSI_S,
    "kVK_ANSI_D": kVK_ANSI_D,
    "kVK_ANSI_F": kVK_ANSI_F,
    "kVK_ANSI_H": kVK_ANSI_H,
    "kVK_ANSI_G": kVK_ANSI_G,
    "kVK_ANSI_Z": kVK_ANSI_Z,
    "kVK_ANSI_X": kVK_ANSI_X,
    "kVK_ANSI_C": kVK_ANSI_C,
    "kVK_ANSI_V": kVK_ANSI_V,
    "kVK_ANSI_B": kVK_ANSI_B,
    "kVK_ANSI_Q": kVK_ANSI_Q,
    "kVK_ANSI_W": kVK_ANSI_W,
    "kVK_ANSI_E": kVK_ANSI_E,
    "kVK_ANSI_R": kVK_ANSI_R,
    "kVK_ANSI_Y": kVK_ANSI_Y,
    "kVK_ANSI_T": kVK_ANSI_T,
    "kVK_ANSI_1": kVK_ANSI_1,
    "kVK_ANSI_2": kVK_ANSI_2,
    "kVK_ANSI_3": kVK_ANSI_3,
    "kVK_ANSI_4": kVK_ANSI_4,
    "kVK_ANSI_6": kVK_ANSI_6,
    "kVK_ANSI_5": kVK_ANSI_5,
    "kVK_ANSI_Equal": kVK_ANSI_Equal,
    "kVK_ANSI_9": kVK_ANSI_9,
    "kVK_ANSI_7": kVK_ANSI_7,
    "kVK_ANSI_Minus": kVK_ANSI_Minus,
    "kVK_ANSI_8": kVK_ANSI_8,
    "kVK_ANSI_0": kVK_ANSI_0,
    "kVK_ANSI_RightBracket": kVK_ANSI_RightBracket,
    "kVK_ANSI_O": kVK_ANSI_O,
    "kVK_ANSI_U": kVK_ANSI_U,
    "kVK_ANSI_LeftBracket": kVK_ANSI_LeftBracket,
    "kVK_ANSI_I": kVK_ANSI_I,
    "kVK_ANSI_P": kVK_ANSI_P,
    "kVK_ANSI_L": kVK_ANSI_L,
    "kVK_ANSI_J": kVK_ANSI_J,
    "kVK_ANSI_Quote": kVK_ANSI_Quote,
    "kVK_ANSI_K": kVK_ANSI_K,
    "kVK_ANSI_Semicolon": kVK_ANSI_Semicolon,
    "kVK_ANSI_Backslash": kVK_ANSI_Backslash,
    "kVK_ANSI_Comma": kVK_ANSI_Comma,
    "kVK_ANSI_Slash": kVK_ANSI_Slash,
    "kVK_ANSI_N": kVK_ANSI_N,
    "kVK_ANSI_M": kVK_ANSI_M,
    "kVK_ANSI_Period": kVK_ANSI_Period,
    "kVK_ANSI_Grave": kVK_ANSI_Grave,
    "kVK_ANSI_KeypadDecimal": kVK_ANSI_KeypadDecimal,
    "kVK_ANSI_KeypadMultiply": kVK_ANSI_KeypadMultiply,
    "kVK_ANSI_KeypadPlus": kVK_ANSI_KeypadPlus,
    "kVK_ANSI_KeypadClear": kVK_ANSI_KeypadClear,
    "kVK_ANSI_KeypadDivide": kVK_ANSI_KeypadDivide,
    "kVK_ANSI_KeypadEnter": kVK_ANSI_KeypadEnter,
    "kVK_ANSI_KeypadMinus": kVK_ANSI_KeypadMinus,
    "kVK_ANSI_KeypadEquals": kVK_ANSI_KeypadEquals,
    "kVK_ANSI_Keypad0": kVK_ANSI_Keypad0,
    "kVK_ANSI_Keypad1": kVK_ANSI_Keypad1,
    "kVK_ANSI_Keypad2": kVK_ANSI_Keypad2,
    "kVK_ANSI_Keypad3": kVK_ANSI_Keypad3,
    "kVK_ANSI_Keypad4": kVK_ANSI_Keypad4,
    "kVK_ANSI_Keypad5": kVK_ANSI_Keypad5,
    "kVK_ANSI_Keypad6": kVK_ANSI_Keypad6,
    "kVK_ANSI_Keypad7": kVK_ANSI_Keypad7,
    "kVK_ANSI_Keypad8": kVK_ANSI_Keypad8,
    "kVK_ANSI_Keypad9": kVK_ANSI_Keypad9,
    "kVK_Return": kVK_Return,
    "kVK_Tab": kVK_Tab,
    "kVK_Space": kVK_Space,
    "kVK_Delete": kVK_Delete,
    "kVK_Escape": kVK_Escape,
    "kVK_Command": kVK_Command,
    "kVK_Shift": kVK_Shift,
    "kVK_CapsLock": kVK_CapsLock,
    "kVK_Option": kVK_Option,
    "kVK_Control": kVK_Control,
    "kVK_RightCommand": kVK_RightCommand,
    "kVK_RightShift": kVK_RightShift,
    "kVK_RightOption": kVK_RightOption,
    "kVK_RightControl": kVK_RightControl,
    "kVK_Function": kVK_Function,
    "kVK_F17": kVK_F17,
    "kVK_VolumeUp": kVK_VolumeUp,
    "kVK_VolumeDown": kVK_VolumeDown,
    "kVK_Mute": kVK_Mute,
    "kVK_F18": kVK_F18,
    "kVK_F19": kVK_F19,
    "kVK_F20": kVK_F20,
    "kVK_F5": kVK_F5,
    "kVK_F6": kVK_F6,
    "kVK_F7": kVK_F7,
    "kVK_F3": kVK_F3,
    "kVK_F8": kVK_F8,
    "kVK_F9": kVK_F9,
    "kVK_F11": kVK_F11,
    "kVK_F13": kVK_F13,
    "kVK_F16": kVK_F16,
    "kVK_F14": kVK_F14,
    "kVK_F10": kVK_F10,
    "kVK_F12": kVK_F12,
    "kVK_F15": kVK_F15,
    "kVK_Help": kVK_Help,
    "kVK_Home": kVK_Home,
    "kVK_PageUp": kVK_PageUp,
    "kVK_ForwardDelete": kVK_ForwardDelete,
    "kVK_F4": kVK_F4,
    "kVK_End": kVK_End,
    "kVK_F2": kVK_F2,
    "kVK_PageDown": kVK_PageDown,
    "kVK_F1": kVK_F1,
    "kVK_LeftArrow": kVK_LeftArrow,
    "kVK_RightArrow": kVK_RightArrow,
    "kVK_DownArrow": kVK_DownArrow,
    "kVK_UpArrow": kVK_UpArrow,
    "kVK_ISO_Section": kVK_ISO_Section,
    "kVK_JIS_Yen": kVK_JIS_Yen,
    "kVK_JIS_Underscore": kVK_JIS_Underscore,
    "kVK_JIS_KeypadComma": kVK_JIS_KeypadComma,
    "kVK_JIS_Eisu": kVK_JIS_Eisu,
    "kVK_JIS_Kana": kVK_JIS_Kana,
    "kVK_Context_Menu": kVK_Context_Menu,
    "kVK_Unknown": kVK_Unknown,
}

_NAMES: dict[int, str] = {value: name for name, value in KEYCODES.items()}


def name_of(code: int) -> Optional[str]:
    """Return the Carbon name of a virtual key code, or None if it has none."""
    return _NAMES.get(code)