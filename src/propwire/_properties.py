"""Property discovery and the observable descriptor.

A property is any class attribute, visible through the MRO, that is either
a builtin ``property`` or an ``ObservableProperty``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from propwire import _anchor
from propwire.ref import Ref


class PropertyNotFoundError(AttributeError):
    """A property name does not exist on the queried type."""

    def __init__(self, owner: type, name: str) -> None:
        super().__init__(f"{owner.__name__!r} has no property {name!r}")
        self.owner = owner
        self.name = name


@dataclass(frozen=True)
class PropertyRef:
    """A property resolved statically: (declaring type, name)."""

    owner: type
    name: str

    @property
    def descriptor(self) -> Any:
        return lookup(self.owner, self.name)


# Defaults of these types are rejected; each instance needs its own copy.
_MUTABLE = (list, dict, set, bytearray)


class ObservableProperty:
    """Descriptor holding its value in the instance __dict__.

    Every assignment goes through the owner's ``_set``, so equal writes are
    dropped and changes are dispatched to dependents.
    """

    def __init__(
        self,
        default: Any = None,
        *,
        factory: Callable[[], Any] | None = None,
        attr: str | None = None,
    ) -> None:
        if isinstance(default, _MUTABLE):
            raise ValueError(
                f"mutable default {default!r} would be shared by every instance; use factory="
            )
        self.default = default
        self.factory = factory
        self.attr = attr
        self.name: str | None = None
        self.dependencies: list[str] = []

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.attr is None:
            self.attr = f"_{name}"

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        try:
            return instance.__dict__[self.attr]
        except KeyError:
            if self.factory is None:
                return self.default
            return instance.__dict__.setdefault(self.attr, self.factory())

    def __set__(self, instance, value) -> None:
        instance._set(value, name=self.name, store=self.ref(instance))

    def ref(self, instance) -> Ref:
        """Accessor for this property's backing slot on one instance."""
        return Ref(
            lambda: self.__get__(instance),
            lambda v: instance.__dict__.__setitem__(self.attr, v),
        )

    def __repr__(self) -> str:
        return f"observable({self.name!r}, default={self.default!r})"


def observable(default: Any = None, *, factory=None, attr: str | None = None) -> ObservableProperty:
    """Declare a stored, change-notifying property.

    Usage:
        class Match(ObservableObject):
            blue_name = observable("")
            rounds = observable(factory=list)

    Mutable containers need factory=; passing one as default raises ValueError.
    """
    return ObservableProperty(default, factory=factory, attr=attr)


def is_property(attr: Any) -> bool:
    return isinstance(attr, (property, ObservableProperty))


def lookup(cls: type, name: str) -> Any:
    """Most-derived class attribute called name, without invoking descriptors."""
    for klass in cls.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return None


def property_names(cls: type) -> tuple[str, ...]:
    """All property names visible on cls, base-class definitions first."""
    names = _anchor.type_properties.get(cls)
    if names is not None:
        return names
    with _anchor.lock:
        names = _anchor.type_properties.get(cls)
        if names is None:
            seen: dict[str, None] = {}
            for klass in reversed(cls.__mro__):
                for name in vars(klass):
                    seen.setdefault(name, None)
            names = tuple(n for n in seen if is_property(lookup(cls, n)))
            _anchor.type_properties[cls] = names
    return names


def require_property(cls: type, name: str) -> str:
    if name not in property_names(cls):
        raise PropertyNotFoundError(cls, name)
    return name
