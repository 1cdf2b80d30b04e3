from __future__ import annotations
import os
import sys
from typing import Optional, TextIO

from wordint import __version__ as app_ver, __dev__ as is_dev
from wordint.core.constants import SUPPORTED_WORD_BITS, WORD_BITS_ENV
from wordint.core.words import default_word_width
from wordint.internals.errors import WordWidthError


def _backend_versions() -> str:
    # llvmlite loads a shared library on import; a broken install only costs the banner line
    try:
        import llvmlite
        from llvmlite import binding as llvm
    except (ImportError, OSError):
        return "llvmlite unavailable"
    llvm_ver = ".".join(map(str, llvm.llvm_version_info))
    return f"llvmlite {llvmlite.__version__} • LLVM {llvm_ver}"


def _active_width() -> str:
    try:
        return default_word_width().name
    except WordWidthError:
        return f"unsupported ${WORD_BITS_ENV}={os.environ.get(WORD_BITS_ENV)!r}"


def print_banner(stream: Optional[TextIO] = None) -> None:
    """Print the version, the word widths and the libraries wordint runs on."""
    import lark

    stream = stream if stream is not None else sys.stdout
    dev_marker = " (dev)" if is_dev else ""
    widths = " ".join(f"u{bits}" for bits in SUPPORTED_WORD_BITS)
    print(
        f"wordint {app_ver}{dev_marker}\n"
        f"words: {widths} (active: {_active_width()})\n"
        f"lark {lark.__version__} • {_backend_versions()}",
        file=stream,
    )
