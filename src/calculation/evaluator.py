from __future__ import annotations

import math
import operator
from typing import Callable, Dict, List, Tuple

from .errors import DivisionByZeroError, EmptyExpressionError, NumericOverflowError
from .lexer import TokenKind, tokenize
from .nodes import BinaryOp, Literal, Node, UnaryMinus
from .parser import parse


_BIN_OPS: Dict[TokenKind, Callable[[float, float], float]] = {
    TokenKind.PLUS: operator.add,
    TokenKind.MINUS: operator.sub,
    TokenKind.STAR: operator.mul,
    TokenKind.SLASH: operator.truediv,
}


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise NumericOverflowError()
    return value


def _apply(op: TokenKind, left: float, right: float) -> float:
    # exact zero only; -0.0 == 0.0 as well
    if op is TokenKind.SLASH and right == 0.0:
        raise DivisionByZeroError()
    return _finite(_BIN_OPS[op](left, right))


def evaluate_node(node: Node) -> float:
    """
    Post-order walk of the tree with an explicit stack.

    Long operator chains produce left-deep trees as deep as the chain is long,
    so the walk does not recurse.
    """
    values: List[float] = []
    stack: List[Tuple[Node, bool]] = [(node, False)]

    while stack:
        current, expanded = stack.pop()

        if isinstance(current, Literal):
            values.append(_finite(current.value))
            continue

        if not expanded:
            stack.append((current, True))
            if isinstance(current, BinaryOp):
                stack.append((current.right, False))
                stack.append((current.left, False))
            else:
                stack.append((current.operand, False))
            continue

        if isinstance(current, UnaryMinus):
            values.append(-values.pop())
        else:
            right = values.pop()
            left = values.pop()
            values.append(_apply(current.op, left, right))

    return values.pop()


def evaluate(expression: str) -> float:
    """
    Evaluate one arithmetic expression.

    Returns a finite float or raises a CalculationError subclass; no other
    exception type escapes for any input string. The whole input is tokenized
    before parsing, so an invalid character is reported even when a grammar
    error comes earlier in the text.
    """
    tokens = list(tokenize(expression))
    if tokens[0].kind is TokenKind.END:
        raise EmptyExpressionError()

    tree = parse(tokens)
    return evaluate_node(tree)
