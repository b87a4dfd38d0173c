"""Decimal-string parser producing 32-bit two's-complement bit patterns.

Grammar: an optional ``+``/``-`` sign, decimal digits, then an optional ``.``
followed by fractional digits that are discarded. The magnitude is
accumulated in unsigned 32-bit space, so ``"3000000000"`` is accepted and
only becomes negative through its stored pattern.
"""

import logging
from enum import Enum

from rint.core.int32 import checked_add_u32, checked_mul_u32, negate_bits
from rint.errors import ParseError, ParseErrorKind

_LOGGER = logging.getLogger(__name__)

_ZERO = ord("0")
_NINE = ord("9")
_PLUS = ord("+")
_MINUS = ord("-")
_DOT = ord(".")


class ParseState(str, Enum):
    START = "start"
    IN_INTEGER = "in_integer"
    IN_FRACTION = "in_fraction"


def _is_digit(byte: int) -> bool:
    return _ZERO <= byte <= _NINE


def _accumulate(bits: int, digit: int) -> int:
    shifted = checked_mul_u32(bits, 10)
    if shifted is None:
        raise ParseError(ParseErrorKind.OVERFLOW)
    total = checked_add_u32(shifted, digit)
    if total is None:
        raise ParseError(ParseErrorKind.OVERFLOW)
    return total


def parse_bits(text: str) -> int:
    """Parse ``text`` into an unsigned 32-bit two's-complement pattern.

    Raises:
        ParseError: ``INVALID_DIGIT`` for a byte outside the grammar,
            ``OVERFLOW`` when the magnitude exceeds ``2**32 - 1``.
    """
    state = ParseState.START
    bits = 0
    negative = False

    for byte in text.encode("utf-8", errors="surrogatepass"):
        previous = state
        if state == ParseState.START and byte in (_PLUS, _MINUS):
            negative = byte == _MINUS
            state = ParseState.IN_INTEGER
        elif state in (ParseState.START, ParseState.IN_INTEGER) and _is_digit(
            byte
        ):
            bits = _accumulate(bits, byte - _ZERO)
            state = ParseState.IN_INTEGER
        elif state == ParseState.IN_INTEGER and byte == _DOT:
            state = ParseState.IN_FRACTION
        elif state == ParseState.IN_FRACTION and _is_digit(byte):
            # Fractional digits are truncated.
            pass
        else:
            _LOGGER.debug(
                "rejecting byte %#04x in state %s for %r",
                byte,
                state.value,
                text,
            )
            raise ParseError(ParseErrorKind.INVALID_DIGIT)
        _LOGGER.debug(
            "byte %#04x: %s -> %s (bits=%d)",
            byte,
            previous.value,
            state.value,
            bits,
        )

    if negative:
        bits = negate_bits(bits)
    return bits
