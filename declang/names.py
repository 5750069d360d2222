"""Name resolution — checks every variable read against the scope chain."""

from __future__ import annotations

import logging

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
from .scope import ScopeTable

logger = logging.getLogger(__name__)


class NameResolver(Visitor[ScopeTable, bool]):
    """Returns ``True`` when every name read is declared before use.

    An unresolved name is an ordinary analysis result, not an error: the
    walk always continues so that every assignment still declares its target
    and the verdict covers the whole tree.
    """

    def _binary(self, node: BinaryOperator, table: ScopeTable) -> bool:
        left_ok = node.left.accept(self, table)
        right_ok = node.right.accept(self, table)
        return left_ok and right_ok

    def visit_plus(self, node: Plus, table: ScopeTable) -> bool:
        return self._binary(node, table)

    def visit_minus(self, node: Minus, table: ScopeTable) -> bool:
        return self._binary(node, table)

    def visit_times(self, node: Times, table: ScopeTable) -> bool:
        return self._binary(node, table)

    def visit_float_div(self, node: FloatDiv, table: ScopeTable) -> bool:
        return self._binary(node, table)

    def visit_int_div(self, node: IntDiv, table: ScopeTable) -> bool:
        return self._binary(node, table)

    def visit_modulus(self, node: Modulus, table: ScopeTable) -> bool:
        return self._binary(node, table)

    def visit_exponentiation(self, node: Exponentiation, table: ScopeTable) -> bool:
        return self._binary(node, table)

    def visit_literal(self, node: Literal, table: ScopeTable) -> bool:
        return True

    def visit_variable(self, node: Variable, table: ScopeTable) -> bool:
        if table.contains(node.name):
            return True
        logger.debug("Unresolved name '%s'", node.name)
        return False

    def visit_assignment(self, node: Assignment, table: ScopeTable) -> bool:
        value_ok = node.value.accept(self, table)
        # Declared even when the initializer is invalid.
        if not table.contains_local(node.target.name):
            table.declare(node.target.name, constants.UNASSIGNED)
        return value_ok

    def visit_return(self, node: Return, table: ScopeTable) -> bool:
        return node.value.accept(self, table)

    def visit_block(self, node: Block, table: ScopeTable | None) -> bool:
        previous = node.enter(table)
        try:
            results = [stmt.accept(self, node.scope) for stmt in node.statements]
        finally:
            node.leave(previous)
        return all(results)


def resolve_names(root: Node, scope: ScopeTable | None = None) -> bool:
    """Check that *root* reads no undeclared names.

    Args:
        root: The tree to check, normally a ``Block``.
        scope: Enclosing table. A block root falls back to its own table
            and any other root to a fresh one.

    Returns:
        ``True`` when every variable read resolves through the scope chain.
    """
    valid = root.accept(NameResolver(), entry_scope(root, scope))
    logger.debug("Name resolution finished: valid=%s", valid)
    return valid
