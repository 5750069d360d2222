"""Tests for the unparse pass."""

import pytest

from declang.ast import (
    Assignment,
    Block,
    Exponentiation,
    FloatDiv,
    IntDiv,
    Literal,
    Minus,
    Modulus,
    Plus,
    Return,
    Times,
    Variable,
)
from declang.unparse import indentation, summarize, unparse


@pytest.mark.parametrize(
    "node_type, symbol",
    [
        (Plus, "+"),
        (Minus, "-"),
        (Times, "*"),
        (FloatDiv, "/"),
        (IntDiv, "//"),
        (Modulus, "%"),
        (Exponentiation, "**"),
    ],
)
def test_binary_operator_is_parenthesised(node_type, symbol):
    left, right = Variable("a"), Literal(2)

    assert unparse(node_type(left, right)) == f"({unparse(left)} {symbol} {unparse(right)})"


class TestExpressions:
    def test_nesting_composes(self):
        expr = Times(Plus(Literal(2), Literal(3)), Minus(Literal(4), Literal(1)))

        assert unparse(expr) == "((2 + 3) * (4 - 1))"

    def test_float_literal(self):
        assert unparse(Literal(2.5)) == "2.5"

    def test_expressions_ignore_level(self):
        assert unparse(Plus(Variable("x"), Literal(1)), 3) == "(x + 1)"


class TestStatements:
    def test_assignment(self):
        stmt = Assignment(Variable("x"), Plus(Literal(1), Literal(2)))

        assert unparse(stmt) == "x := (1 + 2)"

    def test_return_is_indented_by_level(self):
        assert unparse(Return(Variable("x")), 2) == "        return x"

    def test_negative_level_has_no_indent(self):
        assert unparse(Return(Literal(0)), -1) == "return 0"
        assert indentation(-3) == ""

    def test_block(self):
        block = Block(
            [
                Assignment(Variable("x"), Literal(1)),
                Return(Variable("x")),
            ]
        )

        assert unparse(block) == "{\n    x := 1\n    return x\n}"

    def test_nested_block_indents_each_level(self):
        block = Block([Block([Return(Literal(1))])])

        assert unparse(block, 1) == (
            "    {\n"
            "        {\n"
            "            return 1\n"
            "        }\n"
            "    }"
        )

    def test_empty_block(self):
        assert unparse(Block([])) == "{\n}"


class TestSummarize:
    def test_joins_lines(self):
        block = Block([Return(Literal(1))])

        assert summarize(block) == "{ return 1 }"

    def test_truncates_long_text(self):
        stmt = Assignment(Variable("x" * 100), Literal(1))

        text = summarize(stmt, max_len=10)

        assert text == "x" * 10 + "..."
