"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

PLUS_SYMBOL = "+"
MINUS_SYMBOL = "-"
TIMES_SYMBOL = "*"
FLOAT_DIV_SYMBOL = "/"
INT_DIV_SYMBOL = "//"
MODULUS_SYMBOL = "%"
EXPONENTIATION_SYMBOL = "**"

ASSIGN_SYMBOL = ":="
RETURN_KEYWORD = "return"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"

INDENT_WIDTH = 4

MERMAID_MAX_LABEL_LEN = 60
MERMAID_ENTRY_STYLE = "fill:#28a745,color:#fff"
MERMAID_DEAD_STYLE = "fill:#dc3545,color:#fff,stroke-dasharray: 5 5"


class _NoValue:
    """Sentinel result of evaluating a block that contains no statements."""

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE = _NoValue()


class _Unassigned:
    """Slot value for a name declared by resolution but never assigned."""

    def __repr__(self) -> str:
        return "UNASSIGNED"


UNASSIGNED = _Unassigned()
