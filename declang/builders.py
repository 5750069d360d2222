"""Node construction layer with argument validation and optional tracing."""

from __future__ import annotations

import logging
from typing import Any

from .ast import (
    Assignment,
    BinaryOperator,
    Block,
    Exponentiation,
    Expression,
    FloatDiv,
    IntDiv,
    Literal,
    Minus,
    Modulus,
    Plus,
    Return,
    Statement,
    Times,
    Variable,
)
from .errors import ConstructionError
from .scope import ScopeTable

logger = logging.getLogger(__name__)


def _require(node_kind: str, **arguments: Any) -> None:
    for name, value in arguments.items():
        if value is None:
            raise ConstructionError(node_kind, name)


class NodeBuilder:
    """Factory with one method per node variant.

    Every factory rejects missing sub-nodes with ``ConstructionError`` so a
    malformed tree never reaches the passes. With ``trace=True`` each
    constructed node is logged at DEBUG level.
    """

    def __init__(self, trace: bool = False):
        self.trace = trace

    def _built(self, node: Any) -> Any:
        if self.trace:
            logger.debug("Built %s", node)
        return node

    def _binary(
        self,
        kind: type[BinaryOperator],
        left: Expression | None,
        right: Expression | None,
    ) -> Any:
        _require(kind.__name__, left=left, right=right)
        return self._built(kind(left, right))

    # ── operators ────────────────────────────────────────────────

    def plus(self, left: Expression | None, right: Expression | None) -> Plus:
        return self._binary(Plus, left, right)

    def minus(self, left: Expression | None, right: Expression | None) -> Minus:
        return self._binary(Minus, left, right)

    def times(self, left: Expression | None, right: Expression | None) -> Times:
        return self._binary(Times, left, right)

    def float_div(
        self, left: Expression | None, right: Expression | None
    ) -> FloatDiv:
        return self._binary(FloatDiv, left, right)

    def int_div(self, left: Expression | None, right: Expression | None) -> IntDiv:
        return self._binary(IntDiv, left, right)

    def modulus(self, left: Expression | None, right: Expression | None) -> Modulus:
        return self._binary(Modulus, left, right)

    def exponentiation(
        self, left: Expression | None, right: Expression | None
    ) -> Exponentiation:
        return self._binary(Exponentiation, left, right)

    # ── leaves ───────────────────────────────────────────────────

    def literal(self, value: int | float | None) -> Literal:
        _require("Literal", value=value)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConstructionError("Literal", "value", detail="non-numeric")
        return self._built(Literal(value))

    def variable(self, name: str | None) -> Variable:
        _require("Variable", name=name)
        if not isinstance(name, str) or not name:
            raise ConstructionError("Variable", "name", detail="empty")
        return self._built(Variable(name))

    # ── statements ───────────────────────────────────────────────

    def assignment(
        self, target: Variable | None, value: Expression | None
    ) -> Assignment:
        _require("Assignment", target=target, value=value)
        return self._built(Assignment(target, value))

    def return_(self, value: Expression | None) -> Return:
        _require("Return", value=value)
        return self._built(Return(value))

    def block(
        self,
        statements: list[Statement] | None,
        parent: ScopeTable | Block | None = None,
    ) -> Block:
        """Build a block; *parent* may be a scope table or an enclosing block."""
        _require("Block", statements=statements)
        if any(stmt is None for stmt in statements):
            raise ConstructionError("Block", "statements", detail="None in")
        enclosing = parent.scope if isinstance(parent, Block) else parent
        return self._built(Block(list(statements), ScopeTable(enclosing)))
