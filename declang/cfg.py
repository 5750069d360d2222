"""CFG Builder — statement-level control-flow graph and reachability."""

from __future__ import annotations

import logging
from collections import deque

from . import constants
from .ast import (
    Assignment,
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
    Statement,
    Times,
    Variable,
    Visitor,
)
from .digraph import DiGraph
from .unparse import summarize

logger = logging.getLogger(__name__)


class CFG(DiGraph[Statement]):
    """Statements as vertices, ``a -> b`` when *b* runs right after *a*."""

    def __init__(self, start: Statement | None = None):
        super().__init__()
        self.start = start

    def reachability(self) -> tuple[list[Statement], list[Statement]]:
        """Partition the vertices by whether BFS from ``start`` reaches them.

        Returns ``(reachable, unreachable)``. ``reachable`` is in BFS order and
        includes ``start``; ``unreachable`` keeps vertex insertion order.
        """
        if self.start is None:
            return [], self.vertices()

        visited: set[Statement] = {self.start}
        reachable: list[Statement] = [self.start]
        queue: deque[Statement] = deque([self.start])
        while queue:
            current = queue.popleft()
            for neighbor in self._adjacency[current]:
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                reachable.append(neighbor)
                queue.append(neighbor)

        unreachable = [v for v in self._adjacency if v not in visited]
        return reachable, unreachable

    def __str__(self) -> str:
        reachable, _ = self.reachability()
        live = set(reachable)
        index_of = {stmt: i for i, stmt in enumerate(self._adjacency)}
        lines = []
        for stmt, index in index_of.items():
            succs = ", ".join(f"#{index_of[s]}" for s in self._adjacency[stmt])
            succs = succs or "(none)"
            marker = "entry" if stmt is self.start else ("" if stmt in live else "dead")
            tag = f" [{marker}]" if marker else ""
            lines.append(f"#{index}{tag}  {summarize(stmt)}  succs={succs}")
        return "\n".join(lines)


class ControlFlowGraphBuilder(Visitor[Statement | None, Statement | None]):
    """Builds a CFG while threading the last executed statement.

    Each visit receives the statement that ran before the node and returns
    the statement that runs before whatever follows. Once a ``Return`` has
    been threaded through, later statements are still added as vertices but
    never receive an edge, and the ``Return`` stays the previous statement.
    """

    def __init__(self):
        self.cfg = CFG()

    def _link(self, node: Statement, previous: Statement | None) -> Statement:
        self.cfg.add_vertex(node)
        if previous is None:
            if self.cfg.start is None:
                self.cfg.start = node
            return node
        if previous.is_terminator:
            logger.debug("Unreachable statement: %s", summarize(node))
            return previous
        self.cfg.add_edge(previous, node)
        return node

    def visit_plus(self, node: Plus, previous: Statement | None) -> None:
        return None

    def visit_minus(self, node: Minus, previous: Statement | None) -> None:
        return None

    def visit_times(self, node: Times, previous: Statement | None) -> None:
        return None

    def visit_float_div(self, node: FloatDiv, previous: Statement | None) -> None:
        return None

    def visit_int_div(self, node: IntDiv, previous: Statement | None) -> None:
        return None

    def visit_modulus(self, node: Modulus, previous: Statement | None) -> None:
        return None

    def visit_exponentiation(
        self, node: Exponentiation, previous: Statement | None
    ) -> None:
        return None

    def visit_literal(self, node: Literal, previous: Statement | None) -> None:
        return None

    def visit_variable(self, node: Variable, previous: Statement | None) -> None:
        return None

    def visit_assignment(
        self, node: Assignment, previous: Statement | None
    ) -> Statement:
        return self._link(node, previous)

    def visit_return(self, node: Return, previous: Statement | None) -> Statement:
        return self._link(node, previous)

    def visit_block(self, node: Block, previous: Statement | None) -> Statement | None:
        last = previous
        for stmt in node.statements:
            last = stmt.accept(self, last)
        return last

    def build(self, root: Node) -> CFG:
        root.accept(self, None)
        logger.debug(
            "Built CFG: %d vertices, %d edges",
            self.cfg.vertex_count(),
            self.cfg.edge_count(),
        )
        return self.cfg


def build_cfg(root: Node) -> CFG:
    """Build the statement-level control-flow graph of *root*."""
    return ControlFlowGraphBuilder().build(root)


# ── Mermaid export ───────────────────────────────────────────────


def _escape_mermaid(text: str) -> str:
    """Escape characters that break Mermaid node labels."""
    return text.replace('"', "#quot;").replace("<", "#lt;").replace(">", "#gt;")


def _node_shape(stmt: Statement, is_entry: bool) -> tuple[str, str]:
    """Return (open_delim, close_delim) for the Mermaid node shape."""
    if is_entry or stmt.is_terminator:
        return '(["', '"])'
    return '["', '"]'


def cfg_to_mermaid(cfg: CFG) -> str:
    """Convert a CFG to a Mermaid flowchart TD diagram.

    Unreachable statements are drawn too, styled as dead code.
    """
    lines: list[str] = ["flowchart TD"]
    ids = {stmt: f"s{i}" for i, stmt in enumerate(cfg.vertices())}
    _, unreachable = cfg.reachability()

    for stmt, nid in ids.items():
        is_entry = stmt is cfg.start
        open_delim, close_delim = _node_shape(stmt, is_entry)
        label = _escape_mermaid(summarize(stmt))
        lines.append(f"    {nid}{open_delim}{label}{close_delim}")

    for src, dst in cfg.edges():
        lines.append(f"    {ids[src]} --> {ids[dst]}")

    if cfg.start is not None and cfg.start in ids:
        lines.append(f"    style {ids[cfg.start]} {constants.MERMAID_ENTRY_STYLE}")
    for stmt in unreachable:
        lines.append(f"    style {ids[stmt]} {constants.MERMAID_DEAD_STYLE}")

    return "\n".join(lines)
