from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_EXPRESSION = "empty_expression"
    INVALID_CHARACTER = "invalid_character"
    UNBALANCED_PARENS = "unbalanced_parens"
    UNEXPECTED_TOKEN = "unexpected_token"
    TRAILING_INPUT = "trailing_input"
    DIVISION_BY_ZERO = "division_by_zero"
    NUMERIC_OVERFLOW = "numeric_overflow"


class CalculationError(Exception):
    """
    Base of every failure `evaluate` can report.

    Malformed input always ends up here; callers only need to catch this class
    and read `kind` / `message`.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LexError(CalculationError):
    pass


class ParseError(CalculationError):
    pass


class EvalError(CalculationError):
    pass


class EmptyExpressionError(ParseError):
    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self) -> None:
        super().__init__("expression is empty")


class InvalidCharacterError(LexError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"invalid character {char!r} at position {position}")
        self.char = char
        self.position = position


class UnbalancedParensError(ParseError):
    kind = ErrorKind.UNBALANCED_PARENS


class UnexpectedTokenError(ParseError):
    kind = ErrorKind.UNEXPECTED_TOKEN


class TrailingInputError(ParseError):
    kind = ErrorKind.TRAILING_INPUT


class DivisionByZeroError(EvalError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("division by zero")


class NumericOverflowError(EvalError):
    kind = ErrorKind.NUMERIC_OVERFLOW

    def __init__(self) -> None:
        super().__init__("result is not a finite number")
