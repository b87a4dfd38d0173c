from enum import Enum


class ParseErrorKind(str, Enum):
    INVALID_DIGIT = "invalid_digit"
    OVERFLOW = "overflow"


_MESSAGES = {
    ParseErrorKind.INVALID_DIGIT: "Invalid digit found",
    ParseErrorKind.OVERFLOW: "Overflow occurred",
}


class ParseError(ValueError):
    """Raised when a decimal string cannot be parsed into a 32-bit pattern."""

    def __init__(self, kind: ParseErrorKind) -> None:
        super().__init__(_MESSAGES[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __reduce__(self) -> tuple[type["ParseError"], tuple[ParseErrorKind]]:
        return (type(self), (self.kind,))

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name})"


class ArithmeticOverflowError(OverflowError):
    """Raised by checked arithmetic when a result leaves int32 range."""

    def __init__(self, op: str, lhs: int, rhs: int) -> None:
        super().__init__(f"int32 overflow in {lhs} {op} {rhs}")
        self.op = op
        self.lhs = lhs
        self.rhs = rhs

    def __reduce__(
        self,
    ) -> tuple[type["ArithmeticOverflowError"], tuple[str, int, int]]:
        return (type(self), (self.op, self.lhs, self.rhs))
