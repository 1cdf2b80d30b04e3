"""Word width constants.

Centralized bit widths for the supported word types, plus the knobs used to
pick one at runtime. Used with get_word_width(bits) throughout the core and
with ir.IntType(bits) in the backend.
"""

# Word type bit widths
WORD8_BIT_WIDTH = 8      # u8 words, the default
WORD16_BIT_WIDTH = 16    # u16 words
WORD32_BIT_WIDTH = 32    # u32 words
WORD64_BIT_WIDTH = 64    # u64 words

SUPPORTED_WORD_BITS = (
    WORD8_BIT_WIDTH,
    WORD16_BIT_WIDTH,
    WORD32_BIT_WIDTH,
    WORD64_BIT_WIDTH,
)

DEFAULT_WORD_BITS = WORD8_BIT_WIDTH

# Environment variable overriding DEFAULT_WORD_BITS
WORD_BITS_ENV = "WORDINT_WORD_BITS"

# 10 * x is computed as (x << 3) + (x << 1); the top three bits of a word are
# shifted out by the first term regardless of the word width.
TIMES_EIGHT_SHIFT = 3
TIMES_TWO_SHIFT = 1
