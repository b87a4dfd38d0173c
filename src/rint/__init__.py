"""rint: a 32-bit two's-complement integer with a hand-rolled decimal parser."""

from rint.core.int32 import INT32_MAX, INT32_MIN, UINT32_MAX
from rint.errors import ArithmeticOverflowError, ParseError, ParseErrorKind
from rint.models import BoundedInt
from rint.parse import ParseState, parse_bits
from rint.render import render_decimal, render_hex

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "UINT32_MAX",
    "ArithmeticOverflowError",
    "BoundedInt",
    "ParseError",
    "ParseErrorKind",
    "ParseState",
    "parse_bits",
    "render_decimal",
    "render_hex",
]
