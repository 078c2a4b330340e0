"""propwire: declarative property dependencies and change notification."""

from importlib.metadata import version as _version

__version__ = _version("propwire")

from propwire._declarations import WILDCARD, DeclarationStore
from propwire._properties import PropertyNotFoundError, PropertyRef, observable, property_names
from propwire.command import ParamCommand, ReactsOnDependencyChanged, RelayCommand
from propwire.depends_on import (
    all_dependencies,
    all_dependents,
    declared_edges,
    depends_on,
    direct_dependencies,
    direct_dependents,
)
from propwire.observable_object import ObservableObject
from propwire.ref import Ref
from propwire.registrar import PropertyMapBuilder
from propwire.signal import Signal
# textual NOT auto-imported — opt-in only

__all__ = [
    "ObservableObject",
    "observable",
    "depends_on",
    "WILDCARD",
    "DeclarationStore",
    "PropertyMapBuilder",
    "PropertyNotFoundError",
    "PropertyRef",
    "property_names",
    "declared_edges",
    "direct_dependents",
    "all_dependents",
    "direct_dependencies",
    "all_dependencies",
    "ReactsOnDependencyChanged",
    "RelayCommand",
    "ParamCommand",
    "Ref",
    "Signal",
]
