"""AST node model and the double-dispatch visitor protocol."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Generic, TypeVar

from .scope import ScopeTable

P = TypeVar("P")
R = TypeVar("R")


class Visitor(ABC, Generic[P, R]):
    """One pass over the tree.

    Every node variant calls back into exactly one ``visit_*`` method, so a
    pass decides behaviour per variant without inspecting node types.
    """

    @abstractmethod
    def visit_plus(self, node: Plus, param: P) -> R: ...

    @abstractmethod
    def visit_minus(self, node: Minus, param: P) -> R: ...

    @abstractmethod
    def visit_times(self, node: Times, param: P) -> R: ...

    @abstractmethod
    def visit_float_div(self, node: FloatDiv, param: P) -> R: ...

    @abstractmethod
    def visit_int_div(self, node: IntDiv, param: P) -> R: ...

    @abstractmethod
    def visit_modulus(self, node: Modulus, param: P) -> R: ...

    @abstractmethod
    def visit_exponentiation(self, node: Exponentiation, param: P) -> R: ...

    @abstractmethod
    def visit_literal(self, node: Literal, param: P) -> R: ...

    @abstractmethod
    def visit_variable(self, node: Variable, param: P) -> R: ...

    @abstractmethod
    def visit_assignment(self, node: Assignment, param: P) -> R: ...

    @abstractmethod
    def visit_return(self, node: Return, param: P) -> R: ...

    @abstractmethod
    def visit_block(self, node: Block, param: P) -> R: ...


# ── Expressions ──────────────────────────────────────────────────


class Expression(ABC):
    @abstractmethod
    def accept(self, visitor: Visitor[P, R], param: P) -> R: ...


@dataclass(eq=False)
class Literal(Expression):
    value: int | float

    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_literal(self, param)


@dataclass(eq=False)
class Variable(Expression):
    name: str

    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_variable(self, param)


@dataclass(eq=False)
class BinaryOperator(Expression):
    left: Expression
    right: Expression


class Plus(BinaryOperator):
    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_plus(self, param)


class Minus(BinaryOperator):
    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_minus(self, param)


class Times(BinaryOperator):
    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_times(self, param)


class FloatDiv(BinaryOperator):
    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_float_div(self, param)


class IntDiv(BinaryOperator):
    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_int_div(self, param)


class Modulus(BinaryOperator):
    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_modulus(self, param)


class Exponentiation(BinaryOperator):
    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_exponentiation(self, param)


# ── Statements ───────────────────────────────────────────────────


class Statement(ABC):
    # Control never falls through a terminator to the next statement.
    is_terminator: ClassVar[bool] = False

    @abstractmethod
    def accept(self, visitor: Visitor[P, R], param: P) -> R: ...


@dataclass(eq=False)
class Assignment(Statement):
    target: Variable
    value: Expression

    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_assignment(self, param)


@dataclass(eq=False)
class Return(Statement):
    value: Expression

    is_terminator: ClassVar[bool] = True

    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_return(self, param)


@dataclass(eq=False)
class Block(Statement):
    """An ordered statement sequence owning its own scope table.

    The table's ``parent`` links the block to its enclosing scope. A block
    built without one borrows the table it is visited with, for that walk only.
    """

    statements: list[Statement] = field(default_factory=list)
    scope: ScopeTable = field(default_factory=ScopeTable)

    def add_statement(self, stmt: Statement) -> None:
        self.statements.append(stmt)

    def enter(self, outer: ScopeTable | None) -> ScopeTable | None:
        """Chain an unparented table to *outer* and return the parent it had.

        Pair every call with :meth:`leave` so the next walk starts unchained.
        """
        previous = self.scope.parent
        if previous is None and outer is not None and outer is not self.scope:
            self.scope.parent = outer
        return previous

    def leave(self, previous: ScopeTable | None) -> None:
        self.scope.parent = previous

    def accept(self, visitor: Visitor[P, R], param: P) -> R:
        return visitor.visit_block(self, param)


Node = Expression | Statement


def entry_scope(root: Node, scope: ScopeTable | None) -> ScopeTable | None:
    """Table a pass starts from when the caller supplies none.

    A block brings its own table; any other root gets a fresh one so that
    assignments have somewhere to declare.
    """
    if scope is None and not isinstance(root, Block):
        return ScopeTable()
    return scope
