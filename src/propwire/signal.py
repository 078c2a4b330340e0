"""Signal — synchronous observer list with map/filter chaining.

Subscribers run in registration order on the emitting thread, over a
snapshot of the list, so a callback may unsubscribe itself mid-emit.
Exceptions from subscribers propagate to the emitter. Each operator
returns a child signal; dispose() tears down the whole chain below.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Disposer = Callable[[], None]


class Signal(Generic[T]):
    """Push-based notification channel."""

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T], None]] = []
        self._children: list[Signal] = []
        self._disposed = False
        self._parent_disposer: Disposer | None = None

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, value: T) -> None:
        """Push a value to all subscribers."""
        if self._disposed:
            return
        for cb in list(self._subscribers):
            cb(value)

    def subscribe(self, callback: Callable[[T], None]) -> Disposer:
        """Register a callback. Returns a function that removes it."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass  # already removed

        return _unsubscribe

    def map(self, fn: Callable[[T], U]) -> Signal[U]:
        """Transform values through fn."""
        child: Signal[U] = Signal()
        child._parent_disposer = self._track_child(child, lambda v: child.emit(fn(v)))
        return child

    def filter(self, fn: Callable[[T], bool]) -> Signal[T]:
        """Only pass values where fn returns True."""
        child: Signal[T] = Signal()
        child._parent_disposer = self._track_child(
            child, lambda v: child.emit(v) if fn(v) else None
        )
        return child

    def dispose(self) -> None:
        """Tear down this signal and all downstream children."""
        self._disposed = True
        self._subscribers.clear()
        for child in list(self._children):
            child.dispose()
        self._children.clear()
        if self._parent_disposer is not None:
            self._parent_disposer()
            self._parent_disposer = None

    def _track_child(self, child: Signal, forward: Callable[[T], None]) -> Disposer:
        """Feed child from this signal. Returns a disposer that detaches it."""
        self._children.append(child)
        unsubscribe = self.subscribe(forward)

        def _remove() -> None:
            unsubscribe()
            try:
                self._children.remove(child)
            except ValueError:
                pass

        return _remove

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else f"{len(self._subscribers)} subscribers"
        return f"Signal({state})"
