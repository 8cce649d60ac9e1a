"""Conversions of key codes between platforms, going through the named key."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from . import android_keycodes, linux_keycodes, macos_keycodes, usb_hid_keycodes
from . import windows_keycodes
from .event import AnyKey, Event, Key, KeyPress, KeyRelease
from .macos_virtual_keycodes import kVK_ANSI_Grave, kVK_ISO_Section

__all__ = [
    "Platform",
    "macos_iso_code_from_key",
    "win_scancode_to_linux_code",
    "win_scancode_to_macos_code",
    "win_scancode_to_macos_iso_code",
    "win_scancode_to_android_key_code",
    "linux_code_to_win_scancode",
    "linux_code_to_macos_code",
    "linux_code_to_macos_iso_code",
    "linux_code_to_android_key_code",
    "usb_hid_code_to_win_scancode",
    "usb_hid_code_to_linux_code",
    "usb_hid_code_to_macos_code",
    "usb_hid_code_to_macos_iso_code",
    "usb_hid_code_to_android_key_code",
    "describe_key_event",
]


class Platform(Enum):
    """Platform whose codes an event carries."""

    WINDOWS = "windows"
    LINUX = "linux"


def macos_iso_code_from_key(key: AnyKey) -> Optional[int]:
    """macOS key code on an ISO layout, where section and grave swap places."""
    code = macos_keycodes.code_from_key(key)
    if code == kVK_ISO_Section:
        return kVK_ANSI_Grave
    if code == kVK_ANSI_Grave:
        return kVK_ISO_Section
    return code


def _convert(
    code: int,
    key_from_code: Callable[[int], AnyKey],
    code_from_key: Callable[[AnyKey], Optional[int]],
) -> Optional[int]:
    key = key_from_code(code)
    if not isinstance(key, Key):
        return None
    return code_from_key(key)


def win_scancode_to_linux_code(code: int) -> Optional[int]:
    return _convert(code, windows_keycodes.key_from_scancode, linux_keycodes.code_from_key)


def win_scancode_to_macos_code(code: int) -> Optional[int]:
    return _convert(code, windows_keycodes.key_from_scancode, macos_keycodes.code_from_key)


def win_scancode_to_macos_iso_code(code: int) -> Optional[int]:
    return _convert(code, windows_keycodes.key_from_scancode, macos_iso_code_from_key)


def win_scancode_to_android_key_code(code: int) -> Optional[int]:
    return _convert(
        code, windows_keycodes.key_from_scancode, android_keycodes.code_from_key
    )


def linux_code_to_win_scancode(code: int) -> Optional[int]:
    return _convert(
        code, linux_keycodes.key_from_code, windows_keycodes.scancode_from_key
    )


def linux_code_to_macos_code(code: int) -> Optional[int]:
    return _convert(code, linux_keycodes.key_from_code, macos_keycodes.code_from_key)


def linux_code_to_macos_iso_code(code: int) -> Optional[int]:
    return _convert(code, linux_keycodes.key_from_code, macos_iso_code_from_key)


def linux_code_to_android_key_code(code: int) -> Optional[int]:
    return _convert(code, linux_keycodes.key_from_code, android_keycodes.code_from_key)


def usb_hid_code_to_win_scancode(code: int) -> Optional[int]:
    return _convert(
        code, usb_hid_keycodes.key_from_code, windows_keycodes.scancode_from_key
    )


def usb_hid_code_to_linux_code(code: int) -> Optional[int]:
    return _convert(code, usb_hid_keycodes.key_from_code, linux_keycodes.code_from_key)


def usb_hid_code_to_macos_code(code: int) -> Optional[int]:
    return _convert(code, usb_hid_keycodes.key_from_code, macos_keycodes.code_from_key)


def usb_hid_code_to_macos_iso_code(code: int) -> Optional[int]:
    return _convert(code, usb_hid_keycodes.key_from_code, macos_iso_code_from_key)


def usb_hid_code_to_android_key_code(code: int) -> Optional[int]:
    return _convert(
        code, usb_hid_keycodes.key_from_code, android_keycodes.code_from_key
    )


def _key_name(key: AnyKey) -> str:
    return key.value if isinstance(key, Key) else repr(key)


def describe_key_event(event: Event, platform: Platform) -> Optional[str]:
    """Describe a key event with its codes on every platform; None for others."""
    match event.event_type:
        case KeyPress(key):
            kind = f"KeyPress({_key_name(key)})"
        case KeyRelease(key):
            kind = f"KeyRelease({_key_name(key)})"
        case _:
            return None

    platform = Platform(platform)
    if platform is Platform.WINDOWS:
        win = event.position_code
        macos = win_scancode_to_macos_code(event.position_code) or 0
        linux = win_scancode_to_linux_code(event.position_code) or 0
    else:
        win = linux_code_to_win_scancode(event.platform_code) or 0
        macos = linux_code_to_macos_code(event.platform_code) or 0
        linux = event.platform_code

    name = event.unicode.name if event.unicode is not None else None
    return (
        f"name: {name!r}, type: {kind}, code: 0x{event.platform_code:02X}, "
        f"scan: 0x{event.position_code:04X}\n"
        f"win: 0x{win:04X}, linux: 0x{linux:04X}, macos: 0x{macos:04X}"
    )