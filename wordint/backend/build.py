"""
wordint IR build script.

Writes the word primitive for each supported width as LLVM bitcode
(words.bc), or as textual IR (words.ll) with --ll.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import llvmlite.binding as llvm

from wordint.backend.ir_words import generate_module_ir
from wordint.core.constants import SUPPORTED_WORD_BITS


def init_llvm() -> None:
    """Initialize the LLVM native target."""
    # llvm.initialize() is deprecated and handled automatically
    llvm.initialize_native_target()
    llvm.initialize_native_asmprinter()


def compile_module_to_bc(module, output_path: Path) -> None:
    """Verify an llvmlite module and write it out as bitcode."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    mod = llvm.parse_assembly(str(module))
    mod.verify()

    with open(output_path, "wb") as f:
        f.write(mod.as_bitcode())

    print(f"  → {output_path}")


def write_module_ll(module, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(str(module), encoding="utf-8")
    print(f"  → {output_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordint-build",
        description="Emit the wordint word primitive as LLVM IR",
    )
    parser.add_argument("outdir", nargs="?", default="build", help="Output directory (default: build)")
    parser.add_argument("--ll", action="store_true", help="Write textual IR instead of bitcode")
    parser.add_argument(
        "--word-bits",
        type=int,
        action="append",
        choices=SUPPORTED_WORD_BITS,
        help="Only emit this width (repeatable; default: all)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    outdir = Path(args.outdir)

    print("Building wordint.words...")
    module = generate_module_ir(args.word_bits)

    if args.ll:
        write_module_ll(module, outdir / "words.ll")
        return 0

    try:
        init_llvm()
        compile_module_to_bc(module, outdir / "words.bc")
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
