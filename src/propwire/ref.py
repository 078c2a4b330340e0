"""Ref — a getter/setter pair standing in for a backing store.

Lets a property keep its value somewhere other than an attribute on the
notifying object (another object, a dict, a row in a table) while still
going through the same equality gate and dispatch.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_NO_DEFAULT = object()


class Ref(Generic[T]):
    """Indirect access to a value through a getter and a setter."""

    __slots__ = ("_getter", "_setter")

    def __init__(self, getter: Callable[[], T], setter: Callable[[T], None]) -> None:
        if getter is None:
            raise ValueError("getter is required")
        if setter is None:
            raise ValueError("setter is required")
        self._getter = getter
        self._setter = setter

    @property
    def value(self) -> T:
        return self._getter()

    @value.setter
    def value(self, new_value: T) -> None:
        self._setter(new_value)

    @classmethod
    def attribute(cls, parent: object, name: str, default: object = _NO_DEFAULT) -> Ref:
        """Ref to parent.<name>. Reads return default while the attribute is unset."""
        if parent is None:
            raise ValueError("parent is required")
        if not name:
            raise ValueError("attribute name is required")
        if default is _NO_DEFAULT:
            return cls(lambda: getattr(parent, name), lambda v: setattr(parent, name, v))
        return cls(lambda: getattr(parent, name, default), lambda v: setattr(parent, name, v))

    @classmethod
    def path(cls, root: object, path: str) -> Ref:
        """Ref to the last member of a dotted member-access chain.

        Only simple instance chains resolve: ``Ref.path(vm, "match.blue_name")``
        reads ``vm.match`` once and binds to its ``blue_name``. A class root
        (a static member) cannot name an owning instance.
        """
        if isinstance(root, type):
            raise ValueError(
                f"cannot resolve an owning instance from static member of {root.__name__!r}"
            )
        parts = path.split(".") if path else []
        if not parts or not all(p.isidentifier() for p in parts):
            raise ValueError(f"not a member-access chain: {path!r}")

        parent = root
        for part in parts[:-1]:
            parent = getattr(parent, part)
            if parent is None:
                raise ValueError(f"{part!r} is None in {path!r}")
        return cls.attribute(parent, parts[-1])

    def __repr__(self) -> str:
        return f"Ref({self._getter!r}, {self._setter!r})"
