"""Helpers for 32-bit two's-complement arithmetic on raw bit patterns."""

INT32_BITS = 32
UINT32_MASK = (1 << INT32_BITS) - 1
UINT32_MAX = UINT32_MASK
INT32_SIGN_BIT = 1 << (INT32_BITS - 1)
INT32_MIN = -(1 << (INT32_BITS - 1))
INT32_MAX = (1 << (INT32_BITS - 1)) - 1


def wrap_u32(value: int) -> int:
    """Reduce an integer modulo 2**32 into an unsigned bit pattern."""
    return value & UINT32_MASK


def wrap_i32(value: int) -> int:
    """Wrap an integer into signed 32-bit range."""
    return ((value + INT32_SIGN_BIT) & UINT32_MASK) + INT32_MIN


def is_negative(bits: int) -> bool:
    return bits & INT32_SIGN_BIT != 0


def negate_bits(bits: int) -> int:
    """Two's-complement negation: bitwise complement plus one."""
    return (~bits + 1) & UINT32_MASK


def bits_to_i32(bits: int) -> int:
    return wrap_i32(bits)


def i32_to_bits(value: int) -> int:
    return wrap_u32(value)


def checked_mul_u32(lhs: int, rhs: int) -> int | None:
    result = lhs * rhs
    if result > UINT32_MAX:
        return None
    return result


def checked_add_u32(lhs: int, rhs: int) -> int | None:
    result = lhs + rhs
    if result > UINT32_MAX:
        return None
    return result


def u32_add(lhs: int, rhs: int) -> int:
    return wrap_u32(lhs + rhs)


def u32_sub(lhs: int, rhs: int) -> int:
    return wrap_u32(lhs - rhs)


def u32_mul(lhs: int, rhs: int) -> int:
    return wrap_u32(lhs * rhs)


def u32_div(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise ZeroDivisionError("division by zero")
    return wrap_u32(lhs) // wrap_u32(rhs)


def i32_div_trunc(lhs: int, rhs: int) -> int:
    """Signed division truncating toward zero, like Java/Rust ``/``."""
    if rhs == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        return -quotient
    return quotient


def fits_i32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX
