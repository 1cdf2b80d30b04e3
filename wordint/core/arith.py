"""Addition and subtraction of BigInts.

Both operations run through add(): subtraction adds the two's-complement
negation of the second operand (bit inversion plus a carry-in of one). The
result buffer starts as long as the longer operand and either grows by one
word, when the signed sum overflowed that width, or is canonicalized.
"""
from __future__ import annotations

from wordint.core.bigint import BigInt, canonicalize, zero
from wordint.core.words import WordWidth
from wordint.internals.errors import WordWidthError


def _common_width(a: BigInt, b: BigInt) -> WordWidth:
    if a.width != b.width:
        raise WordWidthError("NE1004", left=a.width.bits, right=b.width.bits)
    return a.width


def add(a: BigInt, b: BigInt, negate_b: bool = False) -> BigInt:
    """Return a + b, or a - b when negate_b is set."""
    width = _common_width(a, b)
    length = max(len(a), len(b))
    up_to = min(len(a), len(b))
    res = [0] * length

    sign_a = a.sign
    sign_b = b.sign
    # sign extension of a, and of b as it is actually added (inverted if negated)
    ext_a = width.fill(sign_a)
    ext_b = width.fill(sign_b ^ int(negate_b))

    if negate_b:
        carry = 1
        for i in range(up_to):
            res[i], carry = width.add_and_carry(a[i], width.invert(b[i]), carry)
        for i in range(up_to, len(a)):
            res[i], carry = width.add_and_carry(a[i], ext_b, carry)
        for i in range(up_to, len(b)):
            res[i], carry = width.add_and_carry(ext_a, width.invert(b[i]), carry)
        # same rule as below, with b's sign flipped by the negation
        overflowed = sign_a != sign_b and sign_a != width.hi_bit(res[-1])
    else:
        carry = 0
        for i in range(up_to):
            res[i], carry = width.add_and_carry(a[i], b[i], carry)
        for i in range(up_to, len(a)):
            res[i], carry = width.add_and_carry(a[i], ext_b, carry)
        for i in range(up_to, len(b)):
            res[i], carry = width.add_and_carry(ext_a, b[i], carry)
        # overflow iff a and b share a sign the result does not have
        overflowed = sign_a == sign_b and sign_a != width.hi_bit(res[-1])

    if overflowed:
        # The extra word is one more position of the same sum. For
        # non-negative operands it equals the final carry.
        top, _ = width.add_and_carry(ext_a, ext_b, carry)
        res.append(top)
    else:
        canonicalize(res, width)
    return BigInt(width, tuple(res))


def subtract(a: BigInt, b: BigInt) -> BigInt:
    """Return a - b."""
    return add(a, b, True)


def negate(x: BigInt) -> BigInt:
    """Return -x, computed as 0 - x."""
    return add(zero(x.width), x, True)
