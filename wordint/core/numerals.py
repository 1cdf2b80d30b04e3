"""Construction of BigInts from decimal numerals."""
from __future__ import annotations

from typing import Union

from wordint.core.bigint import BigInt, canonicalize
from wordint.core.constants import TIMES_EIGHT_SHIFT, TIMES_TWO_SHIFT
from wordint.core.words import WordWidth, get_word_width
from wordint.internals.errors import raise_internal_error
from wordint.internals.parser import parse_numeral


def word_capacity(digit_count: int, width: WordWidth) -> int:
    """Words needed to hold any numeral of digit_count digits, sign included.

    log2(10) is approximated from above by 7/2, so this can over-allocate
    but never under-allocate.
    """
    return 1 + (7 * digit_count) // (2 * width.bits)


def from_decimal_string(text: str, width: Union[int, WordWidth, None] = None) -> BigInt:
    """Parse an optionally negative base-10 numeral.

    The magnitude is accumulated as value = 10 * value + digit over a
    pre-sized word buffer, then negated in place when the numeral had a
    leading '-'.

    Raises:
        NumeralSyntaxError: the text is not '-'? followed by ASCII digits.
    """
    width = get_word_width(width)
    negative, digits = parse_numeral(text)

    cap = word_capacity(len(digits), width)
    data = [0] * cap
    for ch in digits:
        # 10*x = (x << 3) + (x << 1); bits shifted out of a word carry into the next
        carry = ord(ch) - ord("0")
        for i in range(cap):
            w = data[i]
            shifted_out = width.hi_3_bits(w) + width.hi_bit(w)
            data[i], c = width.add_and_carry(
                width.shl(w, TIMES_EIGHT_SHIFT), width.shl(w, TIMES_TWO_SHIFT), carry
            )
            carry = shifted_out + c
        # accumulating a non-negative value in a buffer sized for it never carries out
        if carry:
            raise_internal_error("IE0001", carry=carry, cap=cap, text=text)

    if negative:
        # flip the bits and add one; the last carry is thrown away
        carry = 1
        for i in range(cap):
            data[i], carry = width.add_and_carry(width.invert(data[i]), carry, 0)

    canonicalize(data, width)
    return BigInt(width, tuple(data))
