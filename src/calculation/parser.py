from __future__ import annotations

from typing import Iterable, List, Optional

from .errors import TrailingInputError, UnbalancedParensError, UnexpectedTokenError
from .lexer import Token, TokenKind
from .nodes import BinaryOp, Literal, Node, UnaryMinus


_ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
_MULTIPLICATIVE = (TokenKind.STAR, TokenKind.SLASH)


class _Group:
    """
    Parse state of one `expression`: the top level or one '(' ... ')' group.

    `expr_left expr_op` is the pending additive operand, `term_left term_op`
    the pending multiplicative one, `sign` the unary sign read for the
    primary being parsed.
    """

    def __init__(self, opening: Optional[Token] = None) -> None:
        self.opening = opening
        self.expr_left: Optional[Node] = None
        self.expr_op: Optional[TokenKind] = None
        self.term_left: Optional[Node] = None
        self.term_op: Optional[TokenKind] = None
        self.sign: Optional[TokenKind] = None

    def at_first_operand(self) -> bool:
        return self.expr_left is None and self.term_left is None and self.sign is None

    def push_operand(self, operand: Node) -> None:
        if self.sign is TokenKind.MINUS:
            operand = UnaryMinus(operand)
        self.sign = None
        if self.term_op is not None:
            operand = BinaryOp(self.term_op, self.term_left, operand)
            self.term_op = None
        self.term_left = operand

    def close_term(self) -> None:
        if self.expr_op is not None:
            self.expr_left = BinaryOp(self.expr_op, self.expr_left, self.term_left)
            self.expr_op = None
        else:
            self.expr_left = self.term_left
        self.term_left = None

    def finish(self) -> Node:
        self.close_term()
        return self.expr_left


class Parser:
    """
    Parser for

        expression := term (('+' | '-') term)*
        term       := unary (('*' | '/') unary)*
        unary      := ('+' | '-')? primary
        primary    := Number | '(' expression ')'

    Same decisions as a recursive-descent parser with one token of lookahead,
    but nested groups live on an explicit stack, so nesting depth is bounded
    by memory only.

    A sign is only accepted on the first operand of an expression (start of
    input or right after '('), and only one per primary: `-(-5)` parses,
    `--5`, `1+-2` and `2*-3` do not.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = iter(tokens)
        self._current = next(self._tokens, Token(TokenKind.END, 0))

    def _advance(self) -> Token:
        tok = self._current
        if tok.kind is not TokenKind.END:
            self._current = next(self._tokens)
        return tok

    def parse(self) -> Node:
        groups: List[_Group] = [_Group()]
        expect_operand = True

        while True:
            group = groups[-1]
            tok = self._current

            if expect_operand:
                if tok.kind in _ADDITIVE and group.at_first_operand():
                    group.sign = self._advance().kind
                elif tok.kind is TokenKind.NUMBER:
                    self._advance()
                    group.push_operand(Literal(tok.value))
                    expect_operand = False
                elif tok.kind is TokenKind.LPAREN:
                    self._advance()
                    groups.append(_Group(tok))
                else:
                    raise UnexpectedTokenError(
                        f"expected a number or '(' but found {tok.describe()} at position {tok.position}"
                    )
                continue

            if tok.kind in _MULTIPLICATIVE:
                group.term_op = self._advance().kind
                expect_operand = True
            elif tok.kind in _ADDITIVE:
                group.close_term()
                group.expr_op = self._advance().kind
                expect_operand = True
            elif tok.kind is TokenKind.RPAREN:
                if group.opening is None:
                    raise UnbalancedParensError(f"unmatched ')' at position {tok.position}")
                self._advance()
                groups.pop()
                groups[-1].push_operand(group.finish())
            elif group.opening is not None:
                if tok.kind is TokenKind.END:
                    raise UnbalancedParensError(f"missing ')' for '(' at position {group.opening.position}")
                raise UnexpectedTokenError(
                    f"expected ')' but found {tok.describe()} at position {tok.position}"
                )
            elif tok.kind is TokenKind.END:
                return group.finish()
            else:
                raise TrailingInputError(
                    f"unexpected {tok.describe()} at position {tok.position} after a complete expression"
                )


def parse(tokens: Iterable[Token]) -> Node:
    return Parser(tokens).parse()
