"""Tests for the chained scope table."""

import pytest

from declang.scope import ScopeTable


class TestDeclareAndLookup:
    def test_declared_name_is_found(self):
        table = ScopeTable()
        table.declare("x", 10)

        assert table.lookup("x") == 10
        assert table.contains("x")

    def test_missing_name_raises_key_error(self):
        table = ScopeTable()

        with pytest.raises(KeyError):
            table.lookup("missing")
        assert not table.contains("missing")

    def test_redeclaring_overwrites_locally(self):
        table = ScopeTable()
        table.declare("x", 1)
        table.declare("x", 2)

        assert table.lookup("x") == 2
        assert len(table) == 1

    def test_declare_without_value_binds_none(self):
        table = ScopeTable()
        table.declare("x")

        assert table.contains("x")
        assert table.lookup("x") is None


class TestParentChain:
    def test_lookup_delegates_to_parent(self):
        outer = ScopeTable()
        outer.declare("x", 5)
        inner = ScopeTable(outer)

        assert inner.lookup("x") == 5
        assert "x" in inner
        assert not inner.contains_local("x")

    def test_lookup_walks_several_levels(self):
        root = ScopeTable()
        root.declare("a", 1)
        middle = ScopeTable(root)
        leaf = ScopeTable(middle)

        assert leaf.lookup("a") == 1
        assert leaf.depth() == 2
        assert root.depth() == 0

    def test_declare_never_touches_parent(self):
        outer = ScopeTable()
        inner = ScopeTable(outer)
        inner.declare("y", 3)

        assert not outer.contains("y")
        assert inner.local_names() == ["y"]

    def test_shadowing_hides_parent_binding(self):
        outer = ScopeTable()
        outer.declare("x", "outer")
        inner = ScopeTable(outer)
        inner.declare("x", "inner")

        assert inner.lookup("x") == "inner"
        assert outer.lookup("x") == "outer"

    def test_local_lookup_ignores_parent(self):
        outer = ScopeTable()
        outer.declare("x", 1)
        inner = ScopeTable(outer)

        with pytest.raises(KeyError):
            inner.lookup_local("x")


class TestRemove:
    def test_remove_only_affects_local_map(self):
        outer = ScopeTable()
        outer.declare("x", 100)
        inner = ScopeTable(outer)
        inner.declare("x", 200)

        assert inner.remove("x")

        assert inner.lookup("x") == 100
        assert outer.lookup_local("x") == 100

    def test_remove_never_reaches_into_parent(self):
        outer = ScopeTable()
        outer.declare("x", 1)
        inner = ScopeTable(outer)

        assert not inner.remove("x")
        assert outer.contains_local("x")

    def test_remove_missing_name(self):
        assert not ScopeTable().remove("ghost")


class TestClear:
    def test_clear_empties_only_local_map(self):
        outer = ScopeTable()
        outer.declare("x", 1)
        inner = ScopeTable(outer)
        inner.declare("y", 2)

        inner.clear()

        assert len(inner) == 0
        assert inner.lookup("x") == 1
