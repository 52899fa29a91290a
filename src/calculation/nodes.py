from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .lexer import TokenKind


@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class UnaryMinus:
    operand: "Node"


@dataclass(frozen=True)
class BinaryOp:
    op: TokenKind  # PLUS | MINUS | STAR | SLASH
    left: "Node"
    right: "Node"


Node = Union[Literal, UnaryMinus, BinaryOp]
