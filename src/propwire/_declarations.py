"""Per-instance dependency table: dependent name -> ordered dependency names.

Appends and reads are serialized by one lock per store. Edges are never
removed, and a property is never recorded as depending on itself.
"""

from __future__ import annotations

import threading
from typing import Iterable

WILDCARD = "*"


class DeclarationStore:
    """Dependency edges owned by a single object."""

    __slots__ = ("_edges", "_lock")

    def __init__(self, edges: Iterable[tuple[str, str]] = ()) -> None:
        self._edges: dict[str, dict[str, None]] = {}
        self._lock = threading.Lock()
        for dependent, dependency in edges:
            self.add(dependent, dependency)

    def add(self, dependent: str, dependency: str) -> bool:
        """Record that dependent changes whenever dependency does.

        Returns False for a self-edge or an edge already present.
        """
        if dependent == dependency:
            return False
        with self._lock:
            deps = self._edges.setdefault(dependent, {})
            if dependency in deps:
                return False
            deps[dependency] = None
            return True

    def direct_dependents(self, name: str) -> list[str]:
        """Names declaring name (or the wildcard) as a dependency."""
        with self._lock:
            return [
                dependent
                for dependent, deps in self._edges.items()
                if dependent != name and (name in deps or WILDCARD in deps)
            ]

    def direct_dependencies(self, name: str) -> list[str]:
        """Names that name declares, without the wildcard marker."""
        with self._lock:
            deps = self._edges.get(name, {})
            return [d for d in deps if d != WILDCARD and d != name]

    def edges(self) -> list[tuple[str, str]]:
        with self._lock:
            return [(k, d) for k, deps in self._edges.items() for d in deps]

    def __len__(self) -> int:
        with self._lock:
            return sum(len(deps) for deps in self._edges.values())

    def __contains__(self, edge: tuple[str, str]) -> bool:
        dependent, dependency = edge
        with self._lock:
            return dependency in self._edges.get(dependent, {})

    def __repr__(self) -> str:
        return f"DeclarationStore({self.edges()!r})"
