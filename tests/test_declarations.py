"""Tests for DeclarationStore and the fixed-point closure."""

import threading

from propwire import WILDCARD, DeclarationStore
from propwire._closure import closure


class TestDeclarationStore:
    def test_add_and_query(self):
        store = DeclarationStore([("total", "a"), ("total", "b")])
        assert store.direct_dependencies("total") == ["a", "b"]
        assert store.direct_dependents("a") == ["total"]
        assert len(store) == 2

    def test_self_edge_dropped(self):
        store = DeclarationStore()
        assert store.add("a", "a") is False
        assert len(store) == 0
        assert ("a", "a") not in store

    def test_duplicates_suppressed(self):
        store = DeclarationStore()
        assert store.add("total", "a") is True
        assert store.add("total", "a") is False
        assert store.edges() == [("total", "a")]

    def test_insertion_order_preserved(self):
        store = DeclarationStore([("x", "c"), ("x", "a"), ("x", "b")])
        assert store.direct_dependencies("x") == ["c", "a", "b"]

    def test_wildcard_dependent_of_others(self):
        store = DeclarationStore([("summary", WILDCARD)])
        assert store.direct_dependents("x") == ["summary"]
        assert store.direct_dependents("summary") == []
        assert store.direct_dependencies("summary") == []

    def test_unknown_name_has_nothing(self):
        store = DeclarationStore()
        assert store.direct_dependents("x") == []
        assert store.direct_dependencies("x") == []

    def test_concurrent_adds(self):
        store = DeclarationStore()

        def _add(prefix):
            for i in range(200):
                store.add(f"{prefix}{i}", "base")

        threads = [threading.Thread(target=_add, args=(p,)) for p in "abcd"]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(store) == 800
        assert len(store.direct_dependents("base")) == 800


class TestClosure:
    def test_chain(self):
        edges = {"a": ["b"], "b": ["c"]}
        assert closure("a", lambda n: edges.get(n, [])) == ["b", "c"]

    def test_cycle_terminates(self):
        edges = {"a": ["b"], "b": ["a"]}
        assert closure("a", lambda n: edges.get(n, [])) == ["b"]

    def test_three_cycle(self):
        edges = {"a": ["b"], "b": ["c"], "c": ["a"]}
        assert closure("a", lambda n: edges.get(n, [])) == ["b", "c"]

    def test_diamond_no_duplicates(self):
        edges = {"a": ["b", "c"], "b": ["d"], "c": ["d"]}
        assert closure("a", lambda n: edges.get(n, [])) == ["b", "c", "d"]

    def test_isolated(self):
        assert closure("a", lambda n: []) == []

    def test_discovery_order_by_pass(self):
        # "e" is found in the second pass through "b", after "c" from the first.
        edges = {"a": ["b", "c"], "b": ["e"]}
        assert closure("a", lambda n: edges.get(n, [])) == ["b", "c", "e"]
