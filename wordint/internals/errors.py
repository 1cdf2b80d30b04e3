# wordint/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from wordint.internals.report import Span, Reporter


class Severity(str, Enum):
    ERROR = "error"


class Category(str, Enum):
    GENERAL   = "general"
    NUMERAL   = "numeral"
    WIDTH     = "width"
    CLI       = "cli"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)


class NumeralSyntaxError(ValueError):
    """Raised when a decimal numeral is malformed. Nothing has been computed yet."""
    def __init__(self, code: str, text: str, span: Optional[Span] = None, **kwargs):
        self.message = _fmt(code, text=text, **kwargs)
        super().__init__(f"{code}: {self.message}")
        self.code = code
        self.text = text
        self.span = span


class WordWidthError(ValueError):
    """Raised for an unsupported word width or operands of different widths."""
    def __init__(self, code: str, **kwargs):
        super().__init__(f"{code}: {_fmt(code, **kwargs)}")
        self.code = code
        self.params = kwargs


def emit(r: Reporter, em: ErrorMessage, span: Optional[Span], source: Optional[str] = None, **kwargs) -> None:
    r.error(em.code, _fmt(em.code, **kwargs), span, source)

def emit_numeral_error(r: Reporter, exc: NumeralSyntaxError) -> None:
    """Report a NumeralSyntaxError, pointing the caret into the numeral."""
    r.error(exc.code, exc.message, exc.span, exc.text)

def raise_internal_error(code: str, **kwargs) -> None:
    """Raise a RuntimeError for internal consistency failures.

    Internal errors (IE codes) indicate a bug in wordint itself, such as a
    buffer sizing estimate that turned out too small. They are never a
    consequence of user input.

    Raises:
        RuntimeError: Always raises with formatted error message
    """
    text = _fmt(code, **kwargs)
    raise RuntimeError(f"{code}: {text}")


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# CLI usage - CE0xxx range
_add(ErrorMessage("CE0001", Severity.ERROR,
    "expected 3 arguments (A B MODE), got {count}",
    Category.CLI, "The harness needs two decimal numerals and a mode character."))

# Numerals and widths - NE1xxx range
_add(ErrorMessage("NE1001", Severity.ERROR,
    "invalid character {char!r} in numeral '{text}'",
    Category.NUMERAL, "Only an optional leading '-' followed by ASCII digits 0-9 is accepted."))

_add(ErrorMessage("NE1002", Severity.ERROR,
    "numeral '{text}' has no digits",
    Category.NUMERAL, "An empty string or a lone '-' is not a number."))

_add(ErrorMessage("NE1003", Severity.ERROR,
    "unsupported word width {bits}; expected one of {choices}",
    Category.WIDTH, "Words are 8, 16, 32 or 64 bits wide."))

_add(ErrorMessage("NE1004", Severity.ERROR,
    "cannot combine a {left}-bit operand with a {right}-bit operand",
    Category.WIDTH, "Both operands of add/subtract must use the same word width."))

# Internal errors - IE0xxx range
_add(ErrorMessage("IE0001", Severity.ERROR,
    "carry {carry} out of the {cap}-word accumulator while parsing '{text}'",
    Category.INTERNAL, "The buffer capacity estimate for decimal parsing was too small."))
