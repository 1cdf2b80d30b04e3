import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wordint.core.constants import SUPPORTED_WORD_BITS, WORD_BITS_ENV  # noqa: E402  (import after sys.path tweak)
from wordint.core.words import WORD_WIDTHS
from wordint.core.numerals import from_decimal_string

# Values straddling the sign/word boundaries of every supported width
SAMPLE_VALUES = [
    0, 1, -1, 2, -2, 9, 10, 99, 127, 128, -128, -129, 255, 256, -255, -256,
    32767, 32768, -32768, -32769, 65535, 65536, -65536,
    2**31 - 1, 2**31, -2**31, -2**31 - 1, 2**32, -2**32,
    2**63 - 1, 2**63, -2**63, -2**63 - 1, 2**64, -2**64,
    10**30, -10**30, 123456789012345678901234567890, -98765432109876543210987654321,
]


@pytest.fixture(autouse=True)
def _clean_word_bits_env(monkeypatch):
    """Tests pick widths explicitly; a stray WORDINT_WORD_BITS must not leak in."""
    monkeypatch.delenv(WORD_BITS_ENV, raising=False)


@pytest.fixture(params=SUPPORTED_WORD_BITS, ids=lambda bits: f"u{bits}")
def width(request):
    return WORD_WIDTHS[request.param]


@pytest.fixture
def big(width):
    """Parse a Python int (or numeral string) at the current width."""
    def _big(value):
        return from_decimal_string(str(value), width)
    return _big
