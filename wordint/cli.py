"""wordint CLI - add or subtract two decimal numerals and dump the words in hex."""
from __future__ import annotations

import argparse
import sys
import traceback
from typing import Optional, TextIO

from wordint.core.constants import SUPPORTED_WORD_BITS, WORD_BITS_ENV
from wordint.core.words import get_word_width
from wordint.core.numerals import from_decimal_string
from wordint.core.arith import add
from wordint.core.formatting import print_hex
from wordint.internals import errors as er
from wordint.internals.report import Reporter

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_ERROR = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordint",
        description="Add (MODE != 1) or subtract (MODE == 1) two decimal numerals",
        usage="%(prog)s [options] A B MODE",
        epilog=f"A and B are decimal numerals; MODE 1 subtracts. "
               f"The word width defaults to ${WORD_BITS_ENV}, or 8 when unset.",
    )
    parser.add_argument("--word-bits", type=int, choices=SUPPORTED_WORD_BITS,
                        help="Word width in bits")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in diagnostics")
    parser.add_argument("--traceback", action="store_true",
                        help="Print full traceback on unexpected errors (for debugging)")
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse options, leaving every other token as an operand.

    Operands are not argparse positionals: a malformed numeral such as "-12a"
    would otherwise be rejected as an unknown option and never reach the
    numeral parser. Leftovers keep their command-line order.
    """
    args, rest = build_parser().parse_known_args(argv)
    if "--" in rest:
        rest.remove("--")
    args.operands = rest
    return args


def run(args: argparse.Namespace, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    use_color = None if not args.no_color else False

    if args.version:
        from wordint.internals.version import print_banner
        print_banner()
        return EXIT_OK

    if len(args.operands) < 3:
        reporter = Reporter()
        er.emit(reporter, er.ERR.CE0001, None, count=len(args.operands))
        reporter.print(stderr, use_color)
        print(build_parser().format_usage().rstrip(), file=stderr)
        return EXIT_USAGE

    text_a, text_b, mode = args.operands[:3]
    subtract = mode.startswith("1")

    try:
        width = get_word_width(args.word_bits)
    except er.WordWidthError as e:
        # --word-bits is range-checked by argparse, so the bad value came from the environment
        reporter = Reporter(filename=WORD_BITS_ENV)
        er.emit(reporter, er.ERR[e.code], None, **e.params)
        reporter.print(stderr, use_color)
        return EXIT_ERROR

    reporter = Reporter()
    operands = []
    for position, text in (("A", text_a), ("B", text_b)):
        reporter.filename = f"<{position}>"
        try:
            operands.append(from_decimal_string(text, width))
        except er.NumeralSyntaxError as e:
            er.emit_numeral_error(reporter, e)
            reporter.print(stderr, use_color)
            return EXIT_ERROR

    a, b = operands
    print_hex(a, stdout)
    print_hex(b, stdout)
    print_hex(add(a, b, subtract), stdout)
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        if args.traceback:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


def cli_main() -> int:
    return main()
