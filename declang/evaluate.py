"""Evaluation pass — interprets the tree against its scope tables."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable

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
    entry_scope,
)
from .errors import DivisionByZero, EvaluationError, InvalidOperation, UndefinedVariable
from .scope import ScopeTable

logger = logging.getLogger(__name__)

Number = int | float


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a numeric value in this language
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_number(value: Any, operator: str) -> Number:
    if not _is_number(value):
        raise InvalidOperation(operator, f"non-numeric operand {value!r}")
    return value


def _float_div(lhs: Number, rhs: Number) -> float:
    if rhs == 0:
        raise DivisionByZero(constants.FLOAT_DIV_SYMBOL)
    return float(lhs) / float(rhs)


def _truncated_quotient(lhs: int, rhs: int) -> int:
    # Rounds toward zero: -7 // 2 is -3, not -4.
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _int_div(lhs: Number, rhs: Number) -> Number:
    if rhs == 0:
        raise DivisionByZero(constants.INT_DIV_SYMBOL)
    if isinstance(lhs, int) and isinstance(rhs, int):
        return _truncated_quotient(lhs, rhs)
    return float(math.trunc(lhs / rhs))


def _modulus(lhs: Number, rhs: Number) -> Number:
    """Remainder with the sign of the dividend: -7 % 2 is -1."""
    if rhs == 0:
        raise DivisionByZero(constants.MODULUS_SYMBOL)
    if isinstance(lhs, int) and isinstance(rhs, int):
        return lhs - rhs * _truncated_quotient(lhs, rhs)
    return math.fmod(lhs, rhs)


def _power(lhs: Number, rhs: Number) -> float:
    try:
        return math.pow(lhs, rhs)
    except (OverflowError, ValueError) as exc:
        raise InvalidOperation(constants.EXPONENTIATION_SYMBOL, str(exc)) from exc


class Evaluator(Visitor[ScopeTable | None, Any]):
    """Computes the value of a tree.

    Integer operands stay integral unless either side is a float, except for
    exponentiation which always produces a float. Integer division and
    modulus truncate toward zero. A ``Return`` ends every enclosing block:
    the visitor records the returned value and each block stops as soon as
    it sees the flag.
    """

    def __init__(self):
        self._returning = False
        self._return_value: Any = constants.NO_VALUE

    def _binary(
        self,
        node: BinaryOperator,
        table: ScopeTable | None,
        operator: str,
        fn: Callable[[Number, Number], Number],
    ) -> Number:
        lhs = _require_number(node.left.accept(self, table), operator)
        rhs = _require_number(node.right.accept(self, table), operator)
        return fn(lhs, rhs)

    def visit_plus(self, node: Plus, table: ScopeTable | None) -> Number:
        return self._binary(node, table, constants.PLUS_SYMBOL, lambda a, b: a + b)

    def visit_minus(self, node: Minus, table: ScopeTable | None) -> Number:
        return self._binary(node, table, constants.MINUS_SYMBOL, lambda a, b: a - b)

    def visit_times(self, node: Times, table: ScopeTable | None) -> Number:
        return self._binary(node, table, constants.TIMES_SYMBOL, lambda a, b: a * b)

    def visit_float_div(self, node: FloatDiv, table: ScopeTable | None) -> Number:
        return self._binary(node, table, constants.FLOAT_DIV_SYMBOL, _float_div)

    def visit_int_div(self, node: IntDiv, table: ScopeTable | None) -> Number:
        return self._binary(node, table, constants.INT_DIV_SYMBOL, _int_div)

    def visit_modulus(self, node: Modulus, table: ScopeTable | None) -> Number:
        return self._binary(node, table, constants.MODULUS_SYMBOL, _modulus)

    def visit_exponentiation(
        self, node: Exponentiation, table: ScopeTable | None
    ) -> Number:
        return self._binary(node, table, constants.EXPONENTIATION_SYMBOL, _power)

    def visit_literal(self, node: Literal, table: ScopeTable | None) -> Number:
        return _require_number(node.value, "literal")

    def visit_variable(self, node: Variable, table: ScopeTable | None) -> Any:
        if table is None:
            raise UndefinedVariable(node.name)
        try:
            value = table.lookup(node.name)
        except KeyError:
            raise UndefinedVariable(node.name) from None
        if value is constants.UNASSIGNED:
            raise UndefinedVariable(node.name)
        return value

    def visit_assignment(self, node: Assignment, table: ScopeTable | None) -> Any:
        if table is None:
            raise InvalidOperation(constants.ASSIGN_SYMBOL, "no enclosing scope")
        value = node.value.accept(self, table)
        table.declare(node.target.name, value)
        logger.debug("%s := %r", node.target.name, value)
        return value

    def visit_return(self, node: Return, table: ScopeTable | None) -> Any:
        value = node.value.accept(self, table)
        self._returning = True
        self._return_value = value
        return value

    def visit_block(self, node: Block, table: ScopeTable | None) -> Any:
        previous = node.enter(table)
        try:
            result: Any = constants.NO_VALUE
            for stmt in node.statements:
                result = stmt.accept(self, node.scope)
                if self._returning:
                    return self._return_value
            return result
        finally:
            node.leave(previous)


def evaluate(root: Node, scope: ScopeTable | None = None) -> Any:
    """Evaluate *root* and return its value.

    Args:
        root: The tree to run, normally a ``Block``.
        scope: Enclosing table whose bindings are visible to *root*.

    Returns:
        The value of the first ``Return`` reached, else the value of the
        last statement, or ``constants.NO_VALUE`` for an empty block.

    Raises:
        EvaluationError: ``UndefinedVariable``, ``DivisionByZero`` or
            ``InvalidOperation``.
    """
    return root.accept(Evaluator(), entry_scope(root, scope))


@dataclass(frozen=True)
class EvaluationOutcome:
    """Result of evaluating a tree without letting the error escape."""

    ok: bool
    value: Any = constants.NO_VALUE
    error: EvaluationError | None = None

    @classmethod
    def success(cls, value: Any) -> EvaluationOutcome:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: EvaluationError) -> EvaluationOutcome:
        return cls(ok=False, error=error)


def try_evaluate(root: Node, scope: ScopeTable | None = None) -> EvaluationOutcome:
    """Like :func:`evaluate`, but returns failures as an ``EvaluationOutcome``."""
    try:
        return EvaluationOutcome.success(evaluate(root, scope))
    except EvaluationError as exc:
        logger.warning("Evaluation failed: %s", exc)
        return EvaluationOutcome.failure(exc)
