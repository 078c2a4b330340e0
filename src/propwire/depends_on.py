"""Static dependency declarations and type-level queries.

``depends_on`` attaches dependency names to a property as plain data. The
edges for a class are collected once per type (see ``declared_edges``) and
every ObservableObject copies them into its own store at construction.

Usage:
    class Totals(ObservableObject):
        a = observable(1)
        b = observable(5)

        @depends_on("a", "b")
        @property
        def total(self):
            return self.a + self.b

        @depends_on(WILDCARD)
        @property
        def summary(self):
            return f"{self.a} + {self.b} = {self.total}"

The type-level functions below answer the same closure questions as an
instance does, from declarations alone, for tooling that has no instance.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from propwire import _anchor
from propwire._closure import closure
from propwire._declarations import WILDCARD
from propwire._properties import (
    ObservableProperty,
    PropertyRef,
    property_names,
    require_property,
)

logger = logging.getLogger("propwire.depends_on")

D = TypeVar("D")

_ATTR = "__depends_on__"

__all__ = [
    "WILDCARD",
    "depends_on",
    "declared_dependencies",
    "declared_edges",
    "direct_dependents",
    "all_dependents",
    "direct_dependencies",
    "all_dependencies",
]


def depends_on(*names: str) -> Callable[[D], D]:
    """Declare that the decorated property changes whenever names change.

    Works above or below ``@property`` and on ``observable`` descriptors.
    Stacking several decorators accumulates their names.
    """
    if not names:
        raise ValueError("depends_on() needs at least one property name")
    for name in names:
        if not isinstance(name, str) or not name:
            raise ValueError(f"invalid property name: {name!r}")

    def decorate(target: D) -> D:
        if isinstance(target, ObservableProperty):
            target.dependencies.extend(names)
        elif isinstance(target, property):
            if target.fget is None:
                raise ValueError("depends_on() needs a property with a getter")
            _tag(target.fget, names)
        elif callable(target):
            _tag(target, names)
        else:
            raise ValueError(f"depends_on() cannot decorate {target!r}")
        return target

    return decorate


def _tag(fn: Callable, names: tuple[str, ...]) -> None:
    try:
        declared = fn.__dict__.setdefault(_ATTR, [])
    except AttributeError:
        raise ValueError(f"depends_on() cannot attach names to {fn!r}") from None
    declared.extend(names)


def _names_on(attr: Any) -> list[str]:
    if isinstance(attr, ObservableProperty):
        return list(attr.dependencies)
    if isinstance(attr, property) and attr.fget is not None:
        return list(getattr(attr.fget, _ATTR, ()))
    return []


def declared_dependencies(cls: type, name: str) -> list[str]:
    """Names declared on property name of cls, including overridden definitions."""
    found: dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        attr = vars(klass).get(name)
        if attr is not None:
            for dependency in _names_on(attr):
                found.setdefault(dependency, None)
    return list(found)


def declared_edges(cls: type) -> tuple[tuple[str, str], ...]:
    """(dependent, dependency) pairs declared on cls, computed once per type.

    Self-edges are dropped. Names are not checked against existing
    properties; an unknown name only matters when it is used.
    """
    edges = _anchor.type_edges.get(cls)
    if edges is not None:
        return edges
    with _anchor.lock:
        edges = _anchor.type_edges.get(cls)
        if edges is None:
            edges = tuple(
                (name, dependency)
                for name in property_names(cls)
                for dependency in declared_dependencies(cls, name)
                if dependency != name
            )
            _anchor.type_edges[cls] = edges
            logger.debug("Declared %d dependency edges on %s", len(edges), cls.__qualname__)
    return edges


def _direct_dependent_names(cls: type, name: str) -> list[str]:
    found: dict[str, None] = {}
    for dependent, dependency in declared_edges(cls):
        if dependent != name and dependency in (name, WILDCARD):
            found.setdefault(dependent, None)
    return list(found)


def _direct_dependency_names(cls: type, name: str) -> list[str]:
    declared = {d for dependent, d in declared_edges(cls) if dependent == name}
    return [p for p in property_names(cls) if p != name and p in declared]


def _refs(cls: type, names: list[str]) -> list[PropertyRef]:
    return [PropertyRef(_owner(cls, n), n) for n in names]


def _owner(cls: type, name: str) -> type:
    for klass in cls.__mro__:
        if name in vars(klass):
            return klass
    return cls


def direct_dependents(cls: type, name: str) -> list[PropertyRef]:
    """Properties of cls that depend on name directly (one level)."""
    require_property(cls, name)
    return _refs(cls, _direct_dependent_names(cls, name))


def all_dependents(cls: type, name: str) -> list[PropertyRef]:
    """Properties of cls that change, transitively, when name changes."""
    require_property(cls, name)
    return _refs(cls, closure(name, lambda n: _direct_dependent_names(cls, n)))


def direct_dependencies(cls: type, name: str) -> list[PropertyRef]:
    """Existing properties of cls that name declares directly.

    Declared names that are not properties of cls are left out, and so is
    the wildcard marker.
    """
    require_property(cls, name)
    return _refs(cls, _direct_dependency_names(cls, name))


def all_dependencies(cls: type, name: str) -> list[PropertyRef]:
    """Properties of cls that name depends on, transitively."""
    require_property(cls, name)
    return _refs(cls, closure(name, lambda n: _direct_dependency_names(cls, n)))
