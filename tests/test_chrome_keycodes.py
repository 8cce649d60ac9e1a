import pytest

from rdevkeys.chrome_keycodes import RESERVED_UNKNOWN_CODE, code_from_key, key_from_code
from rdevkeys.event import Key, UnknownKey


@pytest.mark.parametrize("code", ["KeyA", "KeyB", "KeyC"])
def test_reversible(code):
    key = key_from_code(code)
    assert code_from_key(key) == code


@pytest.mark.parametrize(
    "key, code",
    [
        (Key.Return, "Enter"),
        (Key.Alt, "AltLeft"),
        (Key.Dot, "Period"),
        (Key.Apps, "ContextMenu"),
        (Key.Lang1, "NonConvert"),
        (Key.KpMinus, "NumpadSubtract"),
    ],
)
def test_known_codes(key, code):
    assert code_from_key(key) == code
    assert key_from_code(code) == key


def test_unknown_string_gives_reserved_key():
    assert key_from_code("NoSuchKey") == UnknownKey(RESERVED_UNKNOWN_CODE)
    assert RESERVED_UNKNOWN_CODE == 0


def test_empty_code_is_shared():
    assert code_from_key(Key.Pause) == ""
    assert code_from_key(Key.Cancel) == ""
    assert key_from_code("") == Key.Cancel


def test_unnamed_keys_have_no_code():
    assert code_from_key(UnknownKey(5)) is None
    assert code_from_key(Key.Function) is None


def test_every_nonempty_code_round_trips():
    for key in Key:
        code = code_from_key(key)
        if code:
            assert key_from_code(code) == key