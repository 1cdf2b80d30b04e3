"""Fixed-width unsigned words.

A WordWidth describes one word type (u8, u16, u32 or u64) and carries the
bit tricks every higher-level operation is built from. Words themselves are
plain ints kept in [0, base).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from wordint.core.constants import (
    SUPPORTED_WORD_BITS,
    DEFAULT_WORD_BITS,
    WORD_BITS_ENV,
    TIMES_EIGHT_SHIFT,
)
from wordint.internals.errors import WordWidthError


@dataclass(frozen=True)
class WordWidth:
    bits: int
    base: int = field(init=False, repr=False)
    mask: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.bits not in SUPPORTED_WORD_BITS:
            raise WordWidthError("NE1003", bits=self.bits, choices=", ".join(map(str, SUPPORTED_WORD_BITS)))
        object.__setattr__(self, "base", 1 << self.bits)
        object.__setattr__(self, "mask", (1 << self.bits) - 1)

    @property
    def hex_digits(self) -> int:
        return self.bits // 4

    @property
    def name(self) -> str:
        return f"u{self.bits}"

    def hi_bit(self, w: int) -> int:
        """Sign bit of a word."""
        return w >> (self.bits - 1)

    def hi_3_bits(self, w: int) -> int:
        """Bits lost when the word is shifted left by three."""
        return w >> (self.bits - TIMES_EIGHT_SHIFT)

    def fill(self, negative: int) -> int:
        """Sign-extension word: all zeros, or all ones when negative."""
        return self.mask if negative else 0

    def invert(self, w: int) -> int:
        return ~w & self.mask

    def shl(self, w: int, n: int) -> int:
        return (w << n) & self.mask

    def add_and_carry(self, a: int, b: int, c: int) -> Tuple[int, int]:
        """Add three words, returning the truncated sum and the carries out.

        The two additions are chained and each may wrap on its own, so the
        carry count is 0, 1 or 2.
        """
        ab = (a + b) & self.mask
        abc = (ab + c) & self.mask
        return abc, (ab < a) + (abc < ab)


WORD_WIDTHS: Dict[int, WordWidth] = {bits: WordWidth(bits) for bits in SUPPORTED_WORD_BITS}


def get_word_width(bits: Union[int, str, WordWidth, None] = None) -> WordWidth:
    """Resolve a width given as a WordWidth, a bit count, or None for the default."""
    if bits is None:
        return default_word_width()
    if isinstance(bits, WordWidth):
        return bits
    try:
        return WORD_WIDTHS[int(bits)]
    except (KeyError, ValueError):
        raise WordWidthError("NE1003", bits=bits, choices=", ".join(map(str, SUPPORTED_WORD_BITS))) from None


def default_word_width(environ: Optional[Dict[str, str]] = None) -> WordWidth:
    """Word width from WORDINT_WORD_BITS, falling back to DEFAULT_WORD_BITS."""
    env = os.environ if environ is None else environ
    raw = env.get(WORD_BITS_ENV)
    if raw is None or not raw.strip():
        return WORD_WIDTHS[DEFAULT_WORD_BITS]
    return get_word_width(raw.strip())
