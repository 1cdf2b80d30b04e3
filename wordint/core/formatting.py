"""Debug hex dump of BigInts."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from wordint.core.bigint import BigInt


def to_hex(x: BigInt) -> str:
    """Words most-significant first, each padded to bits/4 hex digits."""
    digits = x.width.hex_digits
    return " ".join(f"{w:0{digits}x}" for w in reversed(x.data)) + "\n"


def print_hex(x: BigInt, file: Optional[TextIO] = None) -> None:
    (file if file is not None else sys.stdout).write(to_hex(x))
