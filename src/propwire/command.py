"""Commands — actions whose availability tracks other properties.

A command held in a property reacts when that property's dependencies
change: the dispatcher sees a value implementing ReactsOnDependencyChanged
and calls it, and the command re-announces its availability.

Usage:
    class Editor(ObservableObject):
        title = observable("")

        def __init__(self):
            super().__init__()
            self._save = RelayCommand(self.save, lambda: bool(self.title))

        @depends_on("title")
        @property
        def save_command(self):
            return self._save

    editor.save_command.can_execute_changed.subscribe(refresh_button)
    editor.title = "Draft"  # refresh_button(editor.save_command)
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

from propwire.signal import Signal


@runtime_checkable
class ReactsOnDependencyChanged(Protocol):
    """A property value that wants to know when its property is re-notified."""

    def on_dependency_changed(self) -> None: ...


class RelayCommand:
    """Command backed by plain callables taking no arguments."""

    def __init__(
        self,
        execute: Callable[[], Any],
        can_execute: Callable[[], bool] | None = None,
    ) -> None:
        if execute is None:
            raise ValueError("execute is required")
        self._execute = execute
        self._can_execute = can_execute
        self.can_execute_changed: Signal[RelayCommand] = Signal()

    def can_execute(self, parameter: Any = None) -> bool:
        if self._can_execute is None:
            return True
        return bool(self._call(self._can_execute, parameter))

    def execute(self, parameter: Any = None) -> Any:
        return self._call(self._execute, parameter)

    def _call(self, fn: Callable, parameter: Any) -> Any:
        return fn()

    def raise_can_execute_changed(self) -> None:
        self.can_execute_changed.emit(self)

    def on_dependency_changed(self) -> None:
        self.raise_can_execute_changed()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self._execute, '__name__', self._execute)!r})"


class ParamCommand(RelayCommand):
    """RelayCommand whose callables receive the command parameter."""

    def __init__(
        self,
        execute: Callable[[Any], Any],
        can_execute: Callable[[Any], bool] | None = None,
    ) -> None:
        super().__init__(execute, can_execute)

    def _call(self, fn: Callable, parameter: Any) -> Any:
        return fn(parameter)
