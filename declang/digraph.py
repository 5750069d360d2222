"""Directed graph backed by an insertion-ordered adjacency map."""

from __future__ import annotations

import logging
from typing import Generic, Hashable, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class DiGraph(Generic[T]):
    """Adjacency-list digraph.

    Vertices are compared by their own ``__eq__``/``__hash__``; AST statements
    hash by identity, so textually identical statements stay distinct.
    Adding an existing vertex or edge is a no-op that returns ``False``.
    """

    def __init__(self):
        self._adjacency: dict[T, list[T]] = {}

    # ── mutation ─────────────────────────────────────────────────

    def add_vertex(self, vertex: T) -> bool:
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = []
        return True

    def add_edge(self, source: T, destination: T) -> bool:
        """Add ``source -> destination``; both endpoints must already exist."""
        self._require(source)
        self._require(destination)
        successors = self._adjacency[source]
        if destination in successors:
            return False
        successors.append(destination)
        return True

    def remove_vertex(self, vertex: T) -> bool:
        """Remove *vertex* together with every edge into or out of it."""
        if vertex not in self._adjacency:
            return False
        for successors in self._adjacency.values():
            if vertex in successors:
                successors.remove(vertex)
        del self._adjacency[vertex]
        return True

    def remove_edge(self, source: T, destination: T) -> bool:
        self._require(source)
        self._require(destination)
        successors = self._adjacency[source]
        if destination not in successors:
            return False
        successors.remove(destination)
        return True

    # ── queries ──────────────────────────────────────────────────

    def has_vertex(self, vertex: T) -> bool:
        return vertex in self._adjacency

    def has_edge(self, source: T, destination: T) -> bool:
        return destination in self._adjacency.get(source, [])

    def neighbors(self, vertex: T) -> list[T]:
        self._require(vertex)
        return list(self._adjacency[vertex])

    def predecessors(self, vertex: T) -> list[T]:
        self._require(vertex)
        return [src for src, succs in self._adjacency.items() if vertex in succs]

    def vertices(self) -> list[T]:
        return list(self._adjacency)

    def edges(self) -> list[tuple[T, T]]:
        return [(src, dst) for src, succs in self._adjacency.items() for dst in succs]

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(succs) for succs in self._adjacency.values())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[T]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return f"Vertices: {self.vertex_count()} Edges: {self.edge_count()}"

    def _require(self, vertex: T) -> None:
        if vertex not in self._adjacency:
            raise KeyError(f"{vertex!r} not in graph")

    # ── algorithms ───────────────────────────────────────────────

    def depth_first_search(self) -> list[T]:
        """Visit every vertex and return them in reverse finishing order.

        The vertex that finishes last comes first, which is the order the
        second phase of Kosaraju's algorithm consumes.
        """
        visited: set[T] = set()
        finished: list[T] = []
        for vertex in self._adjacency:
            if vertex not in visited:
                self._dfs_visit(vertex, visited, finished)
        finished.reverse()
        return finished

    def _dfs_visit(self, root: T, visited: set[T], finished: list[T]) -> None:
        # Iterative: a straight-line CFG is a chain as long as the program.
        visited.add(root)
        stack: list[tuple[T, Iterator[T]]] = [(root, iter(self._adjacency[root]))]
        while stack:
            vertex, successors = stack[-1]
            for neighbor in successors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append((neighbor, iter(self._adjacency[neighbor])))
                    break
            else:
                stack.pop()
                finished.append(vertex)

    def transpose(self) -> DiGraph[T]:
        """Return a new graph with every edge reversed."""
        reversed_graph: DiGraph[T] = DiGraph()
        for vertex in self._adjacency:
            reversed_graph.add_vertex(vertex)
        for src, dst in self.edges():
            reversed_graph.add_edge(dst, src)
        return reversed_graph

    def strongly_connected_components(self) -> list[list[T]]:
        """Kosaraju: DFS finish order, then collect trees on the transpose."""
        order = self.depth_first_search()
        transposed = self.transpose()
        assigned: set[T] = set()
        components: list[list[T]] = []
        for vertex in order:
            if vertex in assigned:
                continue
            component: list[T] = []
            transposed._collect(vertex, assigned, component)
            components.append(component)
        logger.debug(
            "Found %d strongly connected components over %d vertices",
            len(components),
            self.vertex_count(),
        )
        return components

    def _collect(self, root: T, assigned: set[T], component: list[T]) -> None:
        assigned.add(root)
        component.append(root)
        stack: list[Iterator[T]] = [iter(self._adjacency[root])]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in assigned:
                    assigned.add(neighbor)
                    component.append(neighbor)
                    stack.append(iter(self._adjacency[neighbor]))
                    break
            else:
                stack.pop()
