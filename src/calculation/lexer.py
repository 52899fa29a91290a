from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .errors import InvalidCharacterError


class TokenKind(str, Enum):
    NUMBER = "NUMBER"
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    END = "END"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    position: int
    value: Optional[float] = None

    def describe(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"number {_format_value(self.value)}"
        if self.kind is TokenKind.END:
            return "end of expression"
        return repr(_SYMBOLS[self.kind])


DIGITS = "0123456789"
DECIMAL_POINT = "."
WHITESPACE = " \t"

_SINGLE_CHAR_TOKENS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}
_SYMBOLS = {kind: ch for ch, kind in _SINGLE_CHAR_TOKENS.items()}


def _format_value(value: Optional[float]) -> str:
    if value is not None and value.is_integer():
        return str(int(value))
    return repr(value)


def is_valid_expression_char(ch: str) -> bool:
    """
    Character rule shared by the lexer and the HTTP pre-filter.

    Accepts ASCII digits, the decimal point, `+ - * / ( )`, space and tab.
    """
    if len(ch) != 1:
        return False
    return ch in DIGITS or ch == DECIMAL_POINT or ch in _SINGLE_CHAR_TOKENS or ch in WHITESPACE


def _read_number(text: str, start: int) -> tuple[float, int]:
    pos = start
    seen_point = False
    while pos < len(text) and (text[pos] in DIGITS or text[pos] == DECIMAL_POINT):
        if text[pos] == DECIMAL_POINT:
            if seen_point:
                raise InvalidCharacterError(DECIMAL_POINT, pos)
            seen_point = True
        pos += 1

    literal = text[start:pos]
    if literal == DECIMAL_POINT:
        # a point without any digit around it is not a number
        raise InvalidCharacterError(DECIMAL_POINT, start)
    return float(literal), pos


def tokenize(text: str) -> Iterator[Token]:
    """
    Lazily split `text` into tokens. The sequence always ends with END.

    Raises InvalidCharacterError when the offending character is reached, so a
    consumer sees every token before it first.
    """
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if not is_valid_expression_char(ch):
            raise InvalidCharacterError(ch, pos)

        if ch in WHITESPACE:
            pos += 1
            continue

        if ch in DIGITS or ch == DECIMAL_POINT:
            value, end = _read_number(text, pos)
            yield Token(TokenKind.NUMBER, pos, value)
            pos = end
            continue

        yield Token(_SINGLE_CHAR_TOKENS[ch], pos)
        pos += 1

    yield Token(TokenKind.END, pos)
