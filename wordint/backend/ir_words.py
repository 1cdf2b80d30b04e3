"""
LLVM IR for the word primitive.

Generates, for each supported word width:
    i32 wordint_add_and_carry_u{bits}(iN a, iN b, iN c, iN* out)

Implementation:
    ab  = a + b          (wraps)
    abc = ab + c         (wraps)
    *out = abc
    return (ab <u a) + (abc <u ab)

The carry count is 0, 1 or 2, matching WordWidth.add_and_carry.
"""
from __future__ import annotations

from typing import Iterable, Optional

from llvmlite import ir

from wordint.core.constants import SUPPORTED_WORD_BITS
from wordint.core.words import WordWidth, get_word_width

CARRY_TYPE = ir.IntType(32)


def function_name(width: WordWidth) -> str:
    return f"wordint_add_and_carry_{width.name}"


def create_module(name: str = "words") -> ir.Module:
    """Create a new LLVM module with the default target triple."""
    module = ir.Module(name=f"wordint.{name}")
    module.triple = ""
    return module


def generate_add_and_carry(module: ir.Module, width: WordWidth) -> ir.Function:
    word_type = ir.IntType(width.bits)
    func_type = ir.FunctionType(CARRY_TYPE, [word_type, word_type, word_type, word_type.as_pointer()])
    func = ir.Function(module, func_type, name=function_name(width))

    a_param, b_param, c_param, out_param = func.args
    a_param.name = "a"
    b_param.name = "b"
    c_param.name = "c"
    out_param.name = "out"

    entry = func.append_basic_block("entry")
    builder = ir.IRBuilder(entry)

    ab = builder.add(a_param, b_param, name="ab")
    abc = builder.add(ab, c_param, name="abc")
    builder.store(abc, out_param)

    # Each addition wrapped iff its result is below its left operand
    wrapped_ab = builder.icmp_unsigned('<', ab, a_param, name="wrapped_ab")
    wrapped_abc = builder.icmp_unsigned('<', abc, ab, name="wrapped_abc")
    carry = builder.add(
        builder.zext(wrapped_ab, CARRY_TYPE, name="carry_ab"),
        builder.zext(wrapped_abc, CARRY_TYPE, name="carry_abc"),
        name="carry",
    )
    builder.ret(carry)
    return func


def generate_module_ir(widths: Optional[Iterable[int]] = None) -> ir.Module:
    """Build the wordint.words module holding one primitive per word width."""
    module = create_module()
    for bits in (widths or SUPPORTED_WORD_BITS):
        generate_add_and_carry(module, get_word_width(bits))
    return module
