from rdevkeys.event import Key, RawKey, RawKeyKind, UnknownKey
from rdevkeys.windows_keycodes import (
    code_from_key,
    get_win_codes,
    get_win_key,
    key_from_code,
    key_from_scancode,
    scancode_from_key,
)


def test_reversible():
    for code in range(0, 65535):
        key = key_from_code(code)
        assert code_from_key(key) == code, code


def test_shared_virtual_code_first_wins():
    assert key_from_code(13) == Key.Return
    assert key_from_code(0) == Key.KanaMode


def test_scancodes():
    assert scancode_from_key(Key.KeyA) == 0x1E
    assert scancode_from_key(Key.KpReturn) == 0xE01C
    assert key_from_scancode(0x1E) == Key.KeyA
    assert key_from_scancode(0x76) == Key.F24
    assert key_from_scancode(0) == UnknownKey(0)
    assert key_from_scancode(0xABCD) == UnknownKey(0xABCD)


def test_raw_key_has_no_codes():
    raw = RawKey(RawKeyKind.LinuxXorgKeycode, 10)
    assert code_from_key(raw) is None
    assert scancode_from_key(raw) is None
    assert get_win_codes(raw) is None


def test_get_win_key_prefers_virtual_for_ambiguous_keys():
    assert get_win_key(165, 0x38) == Key.AltGr
    assert get_win_key(111, 0x35) == Key.KpDivide
    assert get_win_key(163, 0x1D) == Key.ControlRight


def test_get_win_key_uses_scancode():
    assert get_win_key(13, 0xE01C) == Key.KpReturn
    assert get_win_key(36, 0x47) == Key.Kp7


def test_get_win_key_falls_back_to_virtual():
    assert get_win_key(65, 0) == Key.KeyA
    assert get_win_key(65, 0x9999) == Key.KeyA


def test_get_win_codes():
    assert get_win_codes(Key.KeyA) == (65, 0x1E)
    assert get_win_codes(UnknownKey(65)) == (65, 0x1E)
    assert get_win_codes(UnknownKey(0xFFFF)) == (0xFFFF, 0xFFFF)
    assert get_win_codes(Key.Pause) == (19, 0)