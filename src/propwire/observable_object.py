"""ObservableObject — property change notification with dependency fan-out.

A write that changes a property's value emits that property's name on
``property_changed``, then the name of every property that depends on it,
directly or transitively, each exactly once. Dependencies come from
``depends_on`` declarations on the class and from ``begin_dependency``
calls made in the constructor.

All dispatch is synchronous on the writing thread. The only shared mutable
state is the per-instance DeclarationStore, which serializes its own access.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, TypeVar

from propwire._closure import closure
from propwire._declarations import DeclarationStore
from propwire._properties import require_property
from propwire.command import ReactsOnDependencyChanged
from propwire.depends_on import declared_edges
from propwire.ref import Ref
from propwire.registrar import PropertyMapBuilder
from propwire.signal import Signal

logger = logging.getLogger("propwire.observable_object")

T = TypeVar("T")

# Old value of a backing attribute that has never been assigned.
_UNSET = object()

ChangedCallback = Callable[[T, T], None]


class ObservableObject:
    """Base class for objects whose properties notify on change.

    Usage:
        class Totals(ObservableObject):
            def __init__(self):
                super().__init__()
                self._a = 1
                self._b = 5

            @property
            def a(self):
                return self._a

            @a.setter
            def a(self, value):
                self._set(value)

            b = observable(5)

            @depends_on("a", "b")
            @property
            def total(self):
                return self.a + self.b

        t = Totals()
        t.property_changed.subscribe(print)
        t.a = 2  # prints "a", then "total"
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared_edges(cls)

    def __init__(self) -> None:
        self.__declarations = DeclarationStore(declared_edges(type(self)))
        self.property_changed: Signal[str] = Signal()

    # --- Writes ---

    def _set(
        self,
        value: T,
        *,
        name: str | None = None,
        store: str | Ref[T] | None = None,
        on_changed: ChangedCallback | None = None,
    ) -> bool:
        """Store value and dispatch change notifications if it differs.

        name defaults to the calling function's name, so a property setter
        can simply call ``self._set(value)``. store is the backing store: an
        attribute name, a Ref, or None for the attribute ``_<name>``. An
        attribute that was never assigned counts as different from any value,
        so the first write always notifies (on_changed then gets None as old).
        on_changed(old, new) runs after the store is updated and before any
        notification. Returns whether the value changed.
        """
        if name is None:
            name = sys._getframe(1).f_code.co_name
        require_property(type(self), name)

        if store is None:
            store = Ref.attribute(self, f"_{name}", _UNSET)
        elif isinstance(store, str):
            store = Ref.attribute(self, store, _UNSET)

        old = store.value
        if old is value or old == value:
            return False

        store.value = value
        if on_changed is not None:
            on_changed(None if old is _UNSET else old, value)
        self.notify_changed(name)
        return True

    def notify_changed(self, name: str) -> None:
        """Emit name, then each dependent of name in discovery order.

        A dependent whose current value implements ReactsOnDependencyChanged
        has on_dependency_changed() called just before its own notification.
        """
        require_property(type(self), name)
        self.property_changed.emit(name)

        dependents = self.dependents_of(name)
        if dependents:
            logger.debug("%s changed on %s; dependents %s", name, type(self).__name__, dependents)
        for dependent in dependents:
            value = self._current_value(dependent)
            if not isinstance(value, type) and isinstance(value, ReactsOnDependencyChanged):
                value.on_dependency_changed()
            self.property_changed.emit(dependent)

    def _current_value(self, name: str) -> Any:
        require_property(type(self), name)
        return getattr(self, name)

    # --- Dependency map ---

    def begin_dependency(self, name: str) -> PropertyMapBuilder:
        """Start registering dependencies for property name.

        Usage (in __init__, after super().__init__()):
            self.begin_dependency("can_save").depends_on("title").depends_on("body")
        """
        store = self.__declarations
        return PropertyMapBuilder(lambda dependency: store.add(name, dependency), name)

    def dependents_of(self, name: str) -> list[str]:
        """Properties that change, transitively, when name changes."""
        require_property(type(self), name)
        return closure(name, self.__declarations.direct_dependents)

    def dependencies_of(self, name: str) -> list[str]:
        """Names that name depends on, transitively. Never the wildcard."""
        require_property(type(self), name)
        return closure(name, self.__declarations.direct_dependencies)

    def dependency_edges(self) -> list[tuple[str, str]]:
        """Snapshot of this object's (dependent, dependency) pairs."""
        return self.__declarations.edges()
