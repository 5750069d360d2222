"""Unparse pass — renders a tree back into indented source text."""

from __future__ import annotations

from . import constants
from .ast import (
    Assignment,
    BinaryOperator,
    Block,
    Exponentiation,
    FloatDiv,
    IntDiv,
    Literal,
    Minus,
    Modulus,
    Node,
    Plus,
    Return,
    Times,
    Variable,
    Visitor,
)


def indentation(level: int) -> str:
    if level <= 0:
        return ""
    return " " * (level * constants.INDENT_WIDTH)


class Unparser(Visitor[int, str]):
    """Binary operators are always fully parenthesised; only statements indent."""

    def _binary(self, node: BinaryOperator, level: int, symbol: str) -> str:
        left = node.left.accept(self, level)
        right = node.right.accept(self, level)
        return f"({left} {symbol} {right})"

    def visit_plus(self, node: Plus, level: int) -> str:
        return self._binary(node, level, constants.PLUS_SYMBOL)

    def visit_minus(self, node: Minus, level: int) -> str:
        return self._binary(node, level, constants.MINUS_SYMBOL)

    def visit_times(self, node: Times, level: int) -> str:
        return self._binary(node, level, constants.TIMES_SYMBOL)

    def visit_float_div(self, node: FloatDiv, level: int) -> str:
        return self._binary(node, level, constants.FLOAT_DIV_SYMBOL)

    def visit_int_div(self, node: IntDiv, level: int) -> str:
        return self._binary(node, level, constants.INT_DIV_SYMBOL)

    def visit_modulus(self, node: Modulus, level: int) -> str:
        return self._binary(node, level, constants.MODULUS_SYMBOL)

    def visit_exponentiation(self, node: Exponentiation, level: int) -> str:
        return self._binary(node, level, constants.EXPONENTIATION_SYMBOL)

    def visit_literal(self, node: Literal, level: int) -> str:
        return str(node.value)

    def visit_variable(self, node: Variable, level: int) -> str:
        return node.name

    def visit_assignment(self, node: Assignment, level: int) -> str:
        target = node.target.accept(self, level)
        value = node.value.accept(self, level)
        return f"{indentation(level)}{target} {constants.ASSIGN_SYMBOL} {value}"

    def visit_return(self, node: Return, level: int) -> str:
        value = node.value.accept(self, level)
        return f"{indentation(level)}{constants.RETURN_KEYWORD} {value}"

    def visit_block(self, node: Block, level: int) -> str:
        indent = indentation(level)
        lines = [f"{indent}{constants.BLOCK_OPEN}"]
        lines.extend(stmt.accept(self, level + 1) for stmt in node.statements)
        lines.append(f"{indent}{constants.BLOCK_CLOSE}")
        return "\n".join(lines)


def unparse(node: Node, level: int = 0) -> str:
    return node.accept(Unparser(), level)


def summarize(node: Node, max_len: int = constants.MERMAID_MAX_LABEL_LEN) -> str:
    """Single-line rendering of *node*, truncated to *max_len* characters."""
    text = " ".join(line.strip() for line in unparse(node).splitlines())
    return text[:max_len] + "..." if len(text) > max_len else text
