from rint.core.int32 import UINT32_MASK, is_negative, negate_bits


def render_decimal(bits: int) -> str:
    """Render a 32-bit pattern as a signed decimal string.

    ``0x80000000`` renders as ``"-2147483648"``: complementing it yields the
    same pattern, whose unsigned value is the magnitude.
    """
    bits &= UINT32_MASK
    if is_negative(bits):
        return f"-{negate_bits(bits)}"
    return str(bits)


def render_hex(bits: int) -> str:
    return f"0x{bits & UINT32_MASK:08X}"
