"""Two's-complement big integers stored as a sequence of fixed-width words."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from wordint.core.words import WordWidth, get_word_width


def canonicalize(words: List[int], width: WordWidth) -> List[int]:
    """Trim redundant sign-extension words from a buffer, in place.

    The sign is taken from the current top word. Trailing words equal to its
    fill value are dropped; if that exposes a word whose top bit disagrees
    with the sign, one fill word is put back. Returns the same list.
    """
    negative = width.hi_bit(words[-1])
    fill = width.fill(negative)
    while len(words) > 1 and words[-1] == fill:
        words.pop()
    if width.hi_bit(words[-1]) != negative:
        words.append(fill)
    return words


@dataclass(frozen=True)
class BigInt:
    """An immutable, canonical two's-complement integer.

    ``data`` holds the words least-significant first. Instances are built by
    from_decimal_string() and by the add/subtract engine, both of which
    canonicalize before constructing one.
    """
    width: WordWidth
    data: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("BigInt needs at least one word")
        if not isinstance(self.data, tuple):
            object.__setattr__(self, "data", tuple(self.data))
        for w in self.data:
            if not 0 <= w <= self.width.mask:
                raise ValueError(f"word {w:#x} does not fit in {self.width.bits} bits")

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, i: int) -> int:
        return self.data[i]

    @property
    def sign(self) -> int:
        """1 if negative, else 0."""
        return self.width.hi_bit(self.data[-1])

    def word(self, i: int) -> int:
        """The i-th word, sign-extended past the stored length."""
        if i < len(self.data):
            return self.data[i]
        return self.width.fill(self.sign)

    def is_canonical(self) -> bool:
        return list(self.data) == canonicalize(list(self.data), self.width)

    def to_int(self) -> int:
        # Debugging aid; the engine itself never converts to Python ints.
        value = 0
        for w in reversed(self.data):
            value = (value << self.width.bits) | w
        if self.sign:
            value -= 1 << (self.width.bits * len(self.data))
        return value

    def __add__(self, other: "BigInt") -> "BigInt":
        from wordint.core.arith import add
        if not isinstance(other, BigInt):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: "BigInt") -> "BigInt":
        from wordint.core.arith import subtract
        if not isinstance(other, BigInt):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self) -> "BigInt":
        from wordint.core.arith import negate
        return negate(self)

    def __repr__(self) -> str:
        words = ", ".join(f"0x{w:0{self.width.hex_digits}x}" for w in self.data)
        return f"BigInt({self.width.name}, [{words}])"


def zero(width: Union[int, WordWidth, None] = None) -> BigInt:
    """Canonical zero: one word, all bits clear."""
    return BigInt(get_word_width(width), (0,))
