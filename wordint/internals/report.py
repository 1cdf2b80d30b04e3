from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Any, TextIO
import sys

from lark import Token

class C:
    """ANSI color/style escape codes."""
    RESET = "\x1b[0m"
    BOLD  = "\x1b[1m"
    DIM   = "\x1b[2m"
    RED   = "\x1b[31m"
    CYAN  = "\x1b[36m"
    GRAY  = "\x1b[90m"

@dataclass
class Span:
    line: int
    col: int
    end_line: int
    end_col: int

@dataclass
class Diagnostic:
    kind: str
    code: str
    message: str
    span: Optional[Span] = None
    source: Optional[str] = None  # Text the span points into (one numeral per diagnostic)

def span_of(t: Any) -> Optional[Span]:
    m = getattr(t, "meta", None)
    if m is not None and not getattr(m, "empty", False):
        return Span(m.line, m.column, m.end_line, m.end_column)
    if isinstance(t, Token):
        line = getattr(t, "line", None)
        col = getattr(t, "column", None)
        end_line = getattr(t, "end_line", None)
        end_col = getattr(t, "end_column", None)
        if line is not None and col is not None:
            return Span(line, col, end_line or line, end_col or col)
    return None


class Reporter:
    def __init__(self, filename: str = "<argv>") -> None:
        self.filename = filename
        self.items: List[Diagnostic] = []

    def error(self, code: str, msg: str, span: Optional[Span], source: Optional[str] = None):
        self.items.append(Diagnostic("error", code, msg, span, source))

    @property
    def has_errors(self) -> bool:
        return any(d.kind == "error" for d in self.items)

    def format(self, use_color: bool = True) -> str:
        """Render all diagnostics.

        Each diagnostic gets a header line. When it carries a span and the
        text it points into, the text is echoed with a caret run underneath.
        """
        out: List[str] = []

        for d in self.items:
            loc = f"{self.filename}:{d.span.line}:{d.span.col}" if d.span else self.filename

            # Ensure message ends with period
            message = d.message if d.message.endswith('.') else f"{d.message}."

            if use_color:
                kind = f"{C.BOLD}{C.RED}{d.kind}{C.RESET}"
                head = f"{C.CYAN}{loc}{C.RESET}: {kind} [{C.DIM}{d.code}{C.RESET}]: {message}"
            else:
                head = f"{loc}: {d.kind} [{d.code}]: {message}"
            out.append(head)

            if d.span and d.source is not None:
                # 1-based columns; ensure at least one caret
                start = max(1, d.span.col)
                end = max(start + 1, d.span.end_col)
                caret = " " * (start - 1) + "^" * (end - start)
                if use_color:
                    out.append(f"{C.GRAY}  |{C.RESET} {d.source}")
                    out.append(f"{C.GRAY}  |{C.RESET} {C.RED}{caret}{C.RESET}")
                else:
                    out.append(f"  | {d.source}")
                    out.append(f"  | {caret}")

        return "\n".join(out)

    def print(self, stream: Optional[TextIO] = None, use_color: Optional[bool] = None) -> None:
        stream = stream if stream is not None else sys.stderr
        if use_color is None:
            # Only colorize interactive terminals
            use_color = stream.isatty()
        if self.items:
            print(self.format(use_color=use_color), file=stream)
