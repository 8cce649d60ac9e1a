import pytest

from rdevkeys.android_keycodes import code_from_key, key_from_code
from rdevkeys.event import Key, RawKey, RawKeyKind, UnknownKey


def test_reversible():
    for code in range(65636):
        key = key_from_code(code)
        assert code_from_key(key) == code, f"Could not convert back code: {code}"


@pytest.mark.parametrize(
    "key, code",
    [
        (Key.KeyA, 29),
        (Key.Home, 3),
        (Key.Space, 62),
        (Key.KanaMode, 218),
        (Key.Insert, 124),
    ],
)
def test_known_codes(key, code):
    assert code_from_key(key) == code
    assert key_from_code(code) == key


def test_shared_code_resolves_to_first_key():
    assert code_from_key(Key.Quote) == 75
    assert code_from_key(Key.BackQuote) == 75
    assert key_from_code(75) == Key.BackQuote


def test_unmapped_code_gives_unknown_key():
    assert key_from_code(500) == UnknownKey(500)


def test_unknown_key_passes_code_through():
    assert code_from_key(UnknownKey(9999)) == 9999


def test_keys_without_code():
    assert code_from_key(Key.F13) is None
    assert code_from_key(Key.Kp0) is None
    assert code_from_key(RawKey(RawKeyKind.MacVirtualKeycode, 0)) is None