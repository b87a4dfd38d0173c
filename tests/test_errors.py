import copy
import pickle

import pytest

from rint.errors import ArithmeticOverflowError, ParseError, ParseErrorKind


@pytest.mark.parametrize("kind", list(ParseErrorKind))
def test_parse_error_survives_pickle_and_copy(kind: ParseErrorKind) -> None:
    err = ParseError(kind)

    restored = pickle.loads(pickle.dumps(err))

    assert restored == err
    assert restored.kind is kind
    assert str(restored) == str(err)
    assert copy.copy(err).kind is kind


def test_arithmetic_overflow_error_survives_pickle_and_copy() -> None:
    err = ArithmeticOverflowError("+", 2147483647, 1)

    restored = pickle.loads(pickle.dumps(err))

    assert (restored.op, restored.lhs, restored.rhs) == ("+", 2147483647, 1)
    assert str(restored) == "int32 overflow in 2147483647 + 1"
    assert str(copy.copy(err)) == str(err)
