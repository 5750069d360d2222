"""Tree statistics and scope maintenance passes."""

from __future__ import annotations

from collections import Counter

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


class NodeCounter(Visitor[Counter, None]):
    """Tallies every node in the tree by variant name."""

    def _binary(self, node: BinaryOperator, counts: Counter, kind: str) -> None:
        counts[kind] += 1
        node.left.accept(self, counts)
        node.right.accept(self, counts)

    def visit_plus(self, node: Plus, counts: Counter) -> None:
        self._binary(node, counts, "Plus")

    def visit_minus(self, node: Minus, counts: Counter) -> None:
        self._binary(node, counts, "Minus")

    def visit_times(self, node: Times, counts: Counter) -> None:
        self._binary(node, counts, "Times")

    def visit_float_div(self, node: FloatDiv, counts: Counter) -> None:
        self._binary(node, counts, "FloatDiv")

    def visit_int_div(self, node: IntDiv, counts: Counter) -> None:
        self._binary(node, counts, "IntDiv")

    def visit_modulus(self, node: Modulus, counts: Counter) -> None:
        self._binary(node, counts, "Modulus")

    def visit_exponentiation(self, node: Exponentiation, counts: Counter) -> None:
        self._binary(node, counts, "Exponentiation")

    def visit_literal(self, node: Literal, counts: Counter) -> None:
        counts["Literal"] += 1

    def visit_variable(self, node: Variable, counts: Counter) -> None:
        counts["Variable"] += 1

    def visit_assignment(self, node: Assignment, counts: Counter) -> None:
        counts["Assignment"] += 1
        node.target.accept(self, counts)
        node.value.accept(self, counts)

    def visit_return(self, node: Return, counts: Counter) -> None:
        counts["Return"] += 1
        node.value.accept(self, counts)

    def visit_block(self, node: Block, counts: Counter) -> None:
        counts["Block"] += 1
        for stmt in node.statements:
            stmt.accept(self, counts)


def count_nodes(root: Node) -> dict[str, int]:
    """Count nodes by variant, e.g. ``{"Block": 1, "Assignment": 2, ...}``."""
    counts: Counter = Counter()
    root.accept(NodeCounter(), counts)
    return dict(counts)


class ScopeResetter(Visitor[None, int]):
    """Clears the local table of every block; returns how many were cleared.

    Only statements can contain blocks, so expressions contribute nothing.
    """

    def visit_plus(self, node: Plus, _: None) -> int:
        return 0

    def visit_minus(self, node: Minus, _: None) -> int:
        return 0

    def visit_times(self, node: Times, _: None) -> int:
        return 0

    def visit_float_div(self, node: FloatDiv, _: None) -> int:
        return 0

    def visit_int_div(self, node: IntDiv, _: None) -> int:
        return 0

    def visit_modulus(self, node: Modulus, _: None) -> int:
        return 0

    def visit_exponentiation(self, node: Exponentiation, _: None) -> int:
        return 0

    def visit_literal(self, node: Literal, _: None) -> int:
        return 0

    def visit_variable(self, node: Variable, _: None) -> int:
        return 0

    def visit_assignment(self, node: Assignment, _: None) -> int:
        return 0

    def visit_return(self, node: Return, _: None) -> int:
        return 0

    def visit_block(self, node: Block, _: None) -> int:
        node.scope.clear()
        return 1 + sum(stmt.accept(self, None) for stmt in node.statements)


def reset_scopes(root: Node) -> int:
    """Empty every block's local table so another pass starts clean."""
    return root.accept(ScopeResetter(), None)
