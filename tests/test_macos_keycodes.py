from rdevkeys import macos_virtual_keycodes as vk
from rdevkeys.event import Key, RawKey, RawKeyKind, UnknownKey
from rdevkeys.macos_keycodes import code_from_key, key_from_code


def test_reversible():
    for code in range(0, 65536):
        key = key_from_code(code)
        assert code_from_key(key) == code, code


def test_named_codes():
    assert code_from_key(Key.KeyA) == 0
    assert code_from_key(Key.IntlBackslash) == vk.kVK_ISO_Section
    assert code_from_key(Key.Backspace) == 51
    assert key_from_code(vk.kVK_Context_Menu) == Key.Apps
    assert key_from_code(vk.kVK_ANSI_Grave) == Key.BackQuote


def test_unmapped_key_has_no_code():
    assert code_from_key(Key.PrintScreen) is None
    assert code_from_key(Key.KanaMode) is None


def test_unknown_and_raw_keys():
    assert key_from_code(vk.kVK_Unknown) == UnknownKey(0xFFFF)
    assert code_from_key(UnknownKey(500)) == 500
    assert code_from_key(RawKey(RawKeyKind.MacVirtualKeycode, 0)) is None