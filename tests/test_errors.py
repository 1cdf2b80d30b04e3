import pytest

from wordint.core.numerals import from_decimal_string
from wordint.core.words import get_word_width
from wordint.internals import errors as er
from wordint.internals.report import Reporter, Span


def test_registry_codes():
    for code in ("CE0001", "NE1001", "NE1002", "NE1003", "NE1004", "IE0001"):
        assert er.ERR[code].code == code
    assert er.ERR.NE1001.category == er.Category.NUMERAL
    assert er.ERR.IE0001.category == er.Category.INTERNAL
    with pytest.raises(AttributeError):
        er.ERR.XX9999


def test_duplicate_code_rejected():
    with pytest.raises(ValueError):
        er._add(er.ErrorMessage("NE1001", er.Severity.ERROR, "again"))


def test_missing_format_key():
    with pytest.raises(KeyError, match="missing text key 'count'"):
        er._fmt("CE0001")


def test_raise_internal_error():
    with pytest.raises(RuntimeError, match=r"^IE0001: carry 3 out of the 1-word accumulator while parsing '1000'$"):
        er.raise_internal_error("IE0001", carry=3, cap=1, text="1000")


def test_numeral_error_is_rendered_with_caret():
    with pytest.raises(er.NumeralSyntaxError) as exc:
        from_decimal_string("12a", 8)

    reporter = Reporter(filename="<A>")
    er.emit_numeral_error(reporter, exc.value)
    assert reporter.has_errors
    assert reporter.format(use_color=False).splitlines() == [
        "<A>:1:3: error [NE1001]: invalid character 'a' in numeral '12a'.",
        "  | 12a",
        "  |   ^",
    ]


def test_colored_output_contains_ansi():
    reporter = Reporter()
    reporter.error("NE1002", "numeral '-' has no digits", Span(1, 2, 1, 3), "-")
    text = reporter.format(use_color=True)
    assert "\x1b[" in text
    assert "NE1002" in text


def test_emit_without_span():
    reporter = Reporter()
    er.emit(reporter, er.ERR.CE0001, None, count=2)
    assert reporter.format(use_color=False) == "<argv>: error [CE0001]: expected 3 arguments (A B MODE), got 2."


def test_width_error_reemits_through_catalog():
    with pytest.raises(er.WordWidthError) as exc:
        get_word_width(12)

    assert exc.value.params["bits"] == 12
    reporter = Reporter(filename="WORDINT_WORD_BITS")
    er.emit(reporter, er.ERR[exc.value.code], None, **exc.value.params)
    assert reporter.format(use_color=False) == (
        "WORDINT_WORD_BITS: error [NE1003]: unsupported word width 12; expected one of 8, 16, 32, 64."
    )


def test_every_registered_code_is_an_error():
    assert {m.severity for m in er.REGISTRY.values()} == {er.Severity.ERROR}
