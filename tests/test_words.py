import random

import pytest

from wordint.core.words import WordWidth, WORD_WIDTHS, get_word_width, default_word_width
from wordint.internals.errors import WordWidthError


U8 = WORD_WIDTHS[8]


@pytest.mark.parametrize("a, b, c, expected", [
    (1, 2, 3, (6, 0)),
    (0xFF, 1, 0, (0x00, 1)),
    (0xFF, 0, 1, (0x00, 1)),
    (0x80, 0x80, 0, (0x00, 1)),
    (0xFF, 0xFF, 0xFF, (0xFD, 2)),
    (0xFF, 0xFF, 1, (0xFF, 1)),
    (0, 0, 0, (0, 0)),
])
def test_add_and_carry_u8(a, b, c, expected):
    assert U8.add_and_carry(a, b, c) == expected


def test_add_and_carry_matches_integer_sum(width):
    rng = random.Random(width.bits)
    for _ in range(500):
        a, b, c = (rng.randrange(width.base) for _ in range(3))
        s, carries = width.add_and_carry(a, b, c)
        assert 0 <= s <= width.mask
        assert carries in (0, 1, 2)
        assert s + carries * width.base == a + b + c


def test_small_carry_in(width):
    # the decimal constructor feeds carries of up to 10 back in as c
    s, carries = width.add_and_carry(width.mask, width.mask, 10)
    assert s + carries * width.base == 2 * width.mask + 10


def test_bit_helpers():
    assert U8.hi_bit(0x80) == 1
    assert U8.hi_bit(0x7F) == 0
    assert U8.hi_3_bits(0xE0) == 7
    assert U8.hi_3_bits(0x1F) == 0
    assert U8.fill(1) == 0xFF
    assert U8.fill(0) == 0
    assert U8.invert(0x0F) == 0xF0
    assert U8.shl(0x81, 1) == 0x02
    assert U8.hex_digits == 2
    assert WORD_WIDTHS[64].hex_digits == 16
    assert WORD_WIDTHS[64].hi_bit(1 << 63) == 1
    assert WORD_WIDTHS[32].name == "u32"


@pytest.mark.parametrize("bits", [0, 7, 12, 128])
def test_unsupported_width(bits):
    with pytest.raises(WordWidthError) as exc:
        WordWidth(bits)
    assert exc.value.code == "NE1003"
    with pytest.raises(WordWidthError):
        get_word_width(bits)


def test_get_word_width_accepts_several_forms():
    assert get_word_width(16) is WORD_WIDTHS[16]
    assert get_word_width("32") is WORD_WIDTHS[32]
    assert get_word_width(WORD_WIDTHS[64]) is WORD_WIDTHS[64]
    assert get_word_width(None) is WORD_WIDTHS[8]
    with pytest.raises(WordWidthError):
        get_word_width("eight")


def test_default_word_width_from_environment(monkeypatch):
    assert default_word_width({}) is WORD_WIDTHS[8]
    assert default_word_width({"WORDINT_WORD_BITS": "32"}) is WORD_WIDTHS[32]
    assert default_word_width({"WORDINT_WORD_BITS": " "}) is WORD_WIDTHS[8]
    with pytest.raises(WordWidthError):
        default_word_width({"WORDINT_WORD_BITS": "7"})

    monkeypatch.setenv("WORDINT_WORD_BITS", "16")
    assert default_word_width() is WORD_WIDTHS[16]
    assert get_word_width() is WORD_WIDTHS[16]
