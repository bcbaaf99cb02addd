import string

import pytest

from waldem.keycodes import SCANCODE_MASK, KeyCode, scancode_to_keycode


def test_character_keys_use_their_character():
    assert KeyCode(ord("\r")) is KeyCode.RETURN
    assert KeyCode(ord(" ")) is KeyCode.SPACE
    assert KeyCode(ord("\\")) is KeyCode.BACKSLASH
    assert KeyCode(0x7F) is KeyCode.KEY_DELETE
    assert KeyCode(0x1B) is KeyCode.ESCAPE


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_letters_are_lowercase_characters(letter):
    assert KeyCode[letter.upper()] == ord(letter)
    assert KeyCode(ord(letter)).name == letter.upper()


@pytest.mark.parametrize("digit", string.digits)
def test_digits(digit):
    assert KeyCode(ord(digit)) is KeyCode[f"KEY_{digit}"]


def test_scancode_to_keycode_sets_mask_bit():
    for scancode in (0, 1, 57, 290):
        code = scancode_to_keycode(scancode)
        assert code & SCANCODE_MASK
        assert code & ~SCANCODE_MASK == scancode


def test_mask_is_bit_thirty():
    assert scancode_to_keycode(0) == 1 << 30
    assert SCANCODE_MASK == 1 << 30


def test_function_keys_are_consecutive():
    for first, last in ((1, 12), (13, 24)):
        keys = [KeyCode[f"F{n}"] for n in range(first, last + 1)]
        scancodes = [key & ~SCANCODE_MASK for key in keys]
        assert scancodes == list(range(scancodes[0], scancodes[0] + len(keys)))
        assert [scancode_to_keycode(s) for s in scancodes] == keys


def test_keypad_digits_order():
    keys = [KeyCode[f"KP_{n}"] for n in range(1, 10)]
    scancodes = [key & ~SCANCODE_MASK for key in keys]
    assert scancodes == list(range(scancodes[0], scancodes[0] + 9))
    assert KeyCode(scancode_to_keycode(scancodes[-1] + 1)) is KeyCode.KP_0


def test_all_values_unique():
    values = [member.value for member in KeyCode]
    assert len(set(values)) == len(KeyCode.__members__)
    assert [KeyCode(v) for v in values] == list(KeyCode)


def test_scancode_key_flag():
    assert KeyCode(scancode_to_keycode(57)) is KeyCode.CAPSLOCK
    assert KeyCode.CAPSLOCK.is_scancode_key is True
    assert KeyCode.ENDCALL.is_scancode_key is True
    assert KeyCode(ord("w")).is_scancode_key is False
    assert KeyCode(0x7F).is_scancode_key is False


def test_printable_keys_below_128():
    for member in KeyCode:
        if member.is_scancode_key:
            assert scancode_to_keycode(member.value & ~SCANCODE_MASK) == member.value
        else:
            assert KeyCode(member.value) is member
            assert 0 <= member.value < 128


def test_round_trip_by_value():
    for member in KeyCode:
        assert KeyCode(member.value) is member


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        KeyCode(ord("A"))