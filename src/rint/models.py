import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from rint.core.int32 import (
    UINT32_MAX,
    bits_to_i32,
    fits_i32,
    i32_div_trunc,
    i32_to_bits,
    negate_bits,
    u32_add,
    u32_div,
    u32_mul,
    u32_sub,
    wrap_u32,
)
from rint.errors import ArithmeticOverflowError
from rint.parse import parse_bits
from rint.render import render_decimal, render_hex

_LOGGER = logging.getLogger(__name__)


class BoundedInt(BaseModel):
    """A signed 32-bit integer stored as its two's-complement bit pattern.

    The ``+``, ``-``, ``*`` and ``/`` operators wrap modulo ``2**32`` and
    never raise on overflow. ``/`` and ``//`` divide the unsigned
    interpretation of the stored bits; use :meth:`checked_div` for signed
    division. A zero divisor raises ``ZeroDivisionError``.
    """

    model_config = ConfigDict(frozen=True)

    bits: int = Field(
        ge=0,
        le=UINT32_MAX,
        strict=True,
        description="Unsigned 32-bit storage cell",
    )

    @classmethod
    def from_str(cls, text: str) -> "BoundedInt":
        return cls(bits=parse_bits(text))

    @classmethod
    def from_bits(cls, bits: int) -> "BoundedInt":
        return cls(bits=bits)

    @classmethod
    def from_int(cls, value: int) -> "BoundedInt":
        """Wrap an arbitrary Python int into 32 bits, like a C cast."""
        return cls(bits=wrap_u32(value))

    def to_string(self) -> str:
        return render_decimal(self.bits)

    def to_hex(self) -> str:
        return render_hex(self.bits)

    def to_int(self) -> int:
        return bits_to_i32(self.bits)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BoundedInt({self.to_string()}, bits={self.to_hex()})"

    def __int__(self) -> int:
        return self.to_int()

    def __neg__(self) -> "BoundedInt":
        return BoundedInt(bits=negate_bits(self.bits))

    def __add__(self, other: Any) -> "BoundedInt":
        if not isinstance(other, BoundedInt):
            return NotImplemented
        return BoundedInt(bits=u32_add(self.bits, other.bits))

    def __sub__(self, other: Any) -> "BoundedInt":
        if not isinstance(other, BoundedInt):
            return NotImplemented
        return BoundedInt(bits=u32_sub(self.bits, other.bits))

    def __mul__(self, other: Any) -> "BoundedInt":
        if not isinstance(other, BoundedInt):
            return NotImplemented
        return BoundedInt(bits=u32_mul(self.bits, other.bits))

    def __floordiv__(self, other: Any) -> "BoundedInt":
        if not isinstance(other, BoundedInt):
            return NotImplemented
        return BoundedInt(bits=u32_div(self.bits, other.bits))

    __truediv__ = __floordiv__

    def checked_add(self, other: "BoundedInt") -> "BoundedInt":
        return self._checked("+", self.to_int() + other.to_int(), other)

    def checked_sub(self, other: "BoundedInt") -> "BoundedInt":
        return self._checked("-", self.to_int() - other.to_int(), other)

    def checked_mul(self, other: "BoundedInt") -> "BoundedInt":
        return self._checked("*", self.to_int() * other.to_int(), other)

    def checked_div(self, other: "BoundedInt") -> "BoundedInt":
        """Signed division truncating toward zero.

        ``INT32_MIN / -1`` is the only overflowing case.
        """
        quotient = i32_div_trunc(self.to_int(), other.to_int())
        return self._checked("/", quotient, other)

    def _checked(
        self, op: str, result: int, other: "BoundedInt"
    ) -> "BoundedInt":
        if not fits_i32(result):
            _LOGGER.debug(
                "checked %s overflowed: %d %s %d = %d",
                op,
                self.to_int(),
                op,
                other.to_int(),
                result,
            )
            raise ArithmeticOverflowError(op, self.to_int(), other.to_int())
        return BoundedInt(bits=i32_to_bits(result))
