"""Lark parser setup for decimal numerals."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from lark import Lark, Token, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from wordint.internals.errors import NumeralSyntaxError
from wordint.internals.report import Span, span_of

GRAMMAR_PATH = Path(__file__).parent.parent / "numeral.lark"

_parser: Optional[Lark] = None


def get_parser() -> Lark:
    """The numeral grammar carries no state between parses, so one parser is shared."""
    global _parser
    if _parser is None:
        _parser = Lark.open(
            str(GRAMMAR_PATH),
            parser="lalr",
            lexer="basic",
            propagate_positions=True,
            maybe_placeholders=False,
        )
    return _parser


def _column_span(col: int) -> Span:
    return Span(1, col, 1, col + 1)


def _syntax_error(e: UnexpectedInput, text: str) -> NumeralSyntaxError:
    """Translate a lark failure into a coded NumeralSyntaxError."""
    if isinstance(e, UnexpectedEOF) or (isinstance(e, UnexpectedToken) and e.token.type == "$END"):
        return NumeralSyntaxError("NE1002", text, _column_span(len(text) + 1))

    span = None
    if isinstance(e, UnexpectedCharacters):
        pos = e.pos_in_stream
    elif isinstance(e, UnexpectedToken):
        pos = e.token.start_pos
        span = span_of(e.token)
    else:
        pos = getattr(e, "pos_in_stream", None)
    if pos is None or not 0 <= pos < len(text):
        pos = 0
    return NumeralSyntaxError("NE1001", text, span or _column_span(pos + 1), char=text[pos] if text else "")


def parse_numeral(text: str) -> Tuple[bool, Token]:
    """Validate a decimal numeral.

    Returns:
        Tuple of (negative, digits token).

    Raises:
        NumeralSyntaxError: NE1002 when there are no digits, NE1001 for any
            other unexpected character.
    """
    try:
        tree = get_parser().parse(text)
    except UnexpectedInput as e:
        raise _syntax_error(e, text) from None

    digits = next(tree.scan_values(lambda t: isinstance(t, Token) and t.type == "DIGITS"))
    return text.startswith("-"), digits
