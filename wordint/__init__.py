"""wordint - arbitrary-precision two's-complement integers over fixed-width words."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("wordint")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

from wordint.core.words import WordWidth, WORD_WIDTHS, get_word_width, default_word_width
from wordint.core.bigint import BigInt, canonicalize, zero
from wordint.core.arith import add, subtract, negate
from wordint.core.numerals import from_decimal_string
from wordint.core.formatting import to_hex, print_hex
from wordint.internals.errors import NumeralSyntaxError, WordWidthError

__all__ = [
    "WordWidth",
    "WORD_WIDTHS",
    "get_word_width",
    "default_word_width",
    "BigInt",
    "canonicalize",
    "zero",
    "add",
    "subtract",
    "negate",
    "from_decimal_string",
    "to_hex",
    "print_hex",
    "NumeralSyntaxError",
    "WordWidthError",
]
