"""Fluent registration of dependency edges.

For dependencies that are computed, or awkward to put on the property:

    class Match(ObservableObject):
        def __init__(self, ring_count):
            super().__init__()
            for i in range(ring_count):
                self.begin_dependency("status").depends_on(f"ring_{i}")

Edges registered this way are merged with the declared ones in the same
store. Register from the constructor, before any property is written.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger("propwire.registrar")


class PropertyMapBuilder:
    """Adds dependencies to one dependent property. Chainable."""

    __slots__ = ("_add_dependency", "_dependent")

    def __init__(self, add_dependency: Callable[[str], None], dependent: str = "") -> None:
        if add_dependency is None:
            raise ValueError("add_dependency callback is required")
        self._add_dependency = add_dependency
        self._dependent = dependent

    def depends_on(self, *names: str) -> PropertyMapBuilder:
        for name in names:
            logger.debug("Registering %s -> %s", self._dependent or "?", name)
            self._add_dependency(name)
        return self

    def __repr__(self) -> str:
        return f"PropertyMapBuilder({self._dependent!r})"
