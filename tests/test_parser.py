import unittest

from src.calculation.errors import (
    TrailingInputError,
    UnbalancedParensError,
    UnexpectedTokenError,
)
from src.calculation.lexer import TokenKind, tokenize
from src.calculation.nodes import BinaryOp, Literal, UnaryMinus
from src.calculation.parser import parse


def tree(text: str):
    return parse(tokenize(text))


class TestParserShape(unittest.TestCase):
    def test_precedence(self) -> None:
        self.assertEqual(
            tree("1+2*3"),
            BinaryOp(TokenKind.PLUS, Literal(1.0), BinaryOp(TokenKind.STAR, Literal(2.0), Literal(3.0))),
        )

    def test_left_associative(self) -> None:
        self.assertEqual(
            tree("2-3-4"),
            BinaryOp(TokenKind.MINUS, BinaryOp(TokenKind.MINUS, Literal(2.0), Literal(3.0)), Literal(4.0)),
        )

    def test_parens_override_precedence(self) -> None:
        self.assertEqual(
            tree("(1+2)*3"),
            BinaryOp(TokenKind.STAR, BinaryOp(TokenKind.PLUS, Literal(1.0), Literal(2.0)), Literal(3.0)),
        )

    def test_unary_minus_binds_to_primary(self) -> None:
        self.assertEqual(
            tree("-2*3"),
            BinaryOp(TokenKind.STAR, UnaryMinus(Literal(2.0)), Literal(3.0)),
        )

    def test_unary_plus_is_dropped(self) -> None:
        self.assertEqual(tree("+7"), Literal(7.0))

    def test_sign_after_open_paren(self) -> None:
        self.assertEqual(tree("-(-5)"), UnaryMinus(UnaryMinus(Literal(5.0))))
        self.assertEqual(
            tree("3*(-2)"),
            BinaryOp(TokenKind.STAR, Literal(3.0), UnaryMinus(Literal(2.0))),
        )


class TestParserErrors(unittest.TestCase):
    def test_unclosed_paren(self) -> None:
        with self.assertRaises(UnbalancedParensError):
            tree("(1+2")
        with self.assertRaises(UnbalancedParensError):
            tree("((1)")

    def test_extra_close_paren(self) -> None:
        with self.assertRaises(UnbalancedParensError):
            tree("1+2)")
        with self.assertRaises(UnbalancedParensError):
            tree("(1))")

    def test_two_operators_in_a_row(self) -> None:
        for text in ["1++2", "1*/2", "1+-2", "2*-3", "1-+2"]:
            with self.assertRaises(UnexpectedTokenError, msg=text):
                tree(text)

    def test_chained_signs_rejected(self) -> None:
        for text in ["--5", "+-3", "-+3", "(--1)"]:
            with self.assertRaises(UnexpectedTokenError, msg=text):
                tree(text)

    def test_missing_operand(self) -> None:
        for text in ["1+", "*2", "(*2)", "1+)"]:
            with self.assertRaises(UnexpectedTokenError, msg=text):
                tree(text)

    def test_empty_group(self) -> None:
        with self.assertRaises(UnexpectedTokenError):
            tree("()")

    def test_number_where_close_paren_expected(self) -> None:
        with self.assertRaises(UnexpectedTokenError):
            tree("(1 2)")

    def test_trailing_input(self) -> None:
        for text in ["1 2", "2+2 3", "(1)(2)", "3 (4)"]:
            with self.assertRaises(TrailingInputError, msg=text):
                tree(text)

    def test_error_message_has_position(self) -> None:
        with self.assertRaises(UnexpectedTokenError) as ctx:
            tree("1+*2")
        self.assertIn("position 2", ctx.exception.message)

    def test_deep_nesting_is_not_limited(self) -> None:
        depth = 5000
        self.assertEqual(tree("(" * depth + "1" + ")" * depth), Literal(1.0))

        node = tree("-(" * depth + "2" + ")" * depth)
        signs = 0
        while isinstance(node, UnaryMinus):
            signs += 1
            node = node.operand
        self.assertEqual(signs, depth)
        self.assertEqual(node, Literal(2.0))

    def test_huge_unclosed_nesting(self) -> None:
        with self.assertRaises(UnexpectedTokenError):
            tree("(" * 5000)
        with self.assertRaises(UnbalancedParensError):
            tree("(" * 5000 + "1")


if __name__ == "__main__":
    unittest.main()
