import pytest

from rdevkeys import macos_virtual_keycodes as vk


def test_every_constant_names_back():
    assert vk.KEYCODES
    for name, value in vk.KEYCODES.items():
        assert vk.name_of(value) == name


def test_codes_are_distinct():
    names = {vk.name_of(value) for value in vk.KEYCODES.values()}
    assert len(names) == len(vk.KEYCODES)
    assert names == set(vk.KEYCODES)


def test_unknown_sentinel():
    assert vk.kVK_Unknown == 0xFFFF
    assert vk.name_of(0xFFFF) == "kVK_Unknown"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("kVK_ANSI_A", vk.kVK_ANSI_A),
        ("kVK_ANSI_Grave", vk.kVK_ANSI_Grave),
        ("kVK_ISO_Section", vk.kVK_ISO_Section),
        ("kVK_Command", vk.kVK_Command),
        ("kVK_Context_Menu", vk.kVK_Context_Menu),
    ],
)
def test_named_constants(name, value):
    assert vk.name_of(value) == name
    assert vk.KEYCODES[name] == value


@pytest.mark.parametrize(
    ("code", "name"),
    [(0, "kVK_ANSI_A"), (10, "kVK_ISO_Section"), (50, "kVK_ANSI_Grave"), (126, "kVK_UpArrow")],
)
def test_pinned_codes(code, name):
    assert vk.name_of(code) == name


def test_unmapped_code_has_no_name():
    assert vk.name_of(0x1234) is None
    assert vk.name_of(-1) is None