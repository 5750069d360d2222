"""Error families raised by the evaluator and the construction layer."""

from __future__ import annotations


class EvaluationError(Exception):
    """Base class for runtime faults raised while evaluating a tree."""


class UndefinedVariable(EvaluationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined variable '{name}'")


class DivisionByZero(EvaluationError):
    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Division by zero in '{operator}'")


class InvalidOperation(EvaluationError):
    """A malformed node or an arithmetic domain error reached the evaluator."""

    def __init__(self, operator: str, detail: str = ""):
        self.operator = operator
        self.detail = detail
        message = f"Invalid operation '{operator}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ConstructionError(ValueError):
    """A node factory was called without a required argument."""

    def __init__(self, node_kind: str, argument: str, detail: str = "missing"):
        self.node_kind = node_kind
        self.argument = argument
        super().__init__(f"{node_kind}: {detail} argument '{argument}'")
