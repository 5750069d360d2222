"""Scope Table — a local symbol map chained to an optional enclosing scope."""

from __future__ import annotations

from typing import Any, Iterator


class ScopeTable:
    """Maps identifiers to value slots.

    Lookups walk outward through ``parent`` until a table declares the name.
    Declarations only ever touch the local map, so a child can shadow a name
    without altering the ancestor that also declares it.
    """

    def __init__(self, parent: ScopeTable | None = None):
        self._locals: dict[str, Any] = {}
        self.parent = parent

    def declare(self, name: str, value: Any = None) -> None:
        self._locals[name] = value

    def lookup(self, name: str) -> Any:
        """Return the value bound in the nearest table declaring *name*.

        Raises ``KeyError`` when no table in the chain declares it.
        """
        table: ScopeTable | None = self
        while table is not None:
            if name in table._locals:
                return table._locals[name]
            table = table.parent
        raise KeyError(name)

    def contains(self, name: str) -> bool:
        table: ScopeTable | None = self
        while table is not None:
            if name in table._locals:
                return True
            table = table.parent
        return False

    def lookup_local(self, name: str) -> Any:
        return self._locals[name]

    def contains_local(self, name: str) -> bool:
        return name in self._locals

    def local_names(self) -> list[str]:
        return list(self._locals)

    def remove(self, name: str) -> bool:
        """Drop *name* from the local map only; ancestors are never touched."""
        if name not in self._locals:
            return False
        del self._locals[name]
        return True

    def clear(self) -> None:
        self._locals.clear()

    def depth(self) -> int:
        """Number of ancestors above this table (0 for a root scope)."""
        count = 0
        table = self.parent
        while table is not None:
            count += 1
            table = table.parent
        return count

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __getitem__(self, name: str) -> Any:
        return self.lookup(name)

    def __len__(self) -> int:
        return len(self._locals)

    def __iter__(self) -> Iterator[str]:
        return iter(self._locals)

    def __repr__(self) -> str:
        return f"ScopeTable(locals={self._locals!r}, depth={self.depth()})"
