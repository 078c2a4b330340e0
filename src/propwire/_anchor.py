"""Data anchor — per-type tables built once from class declarations.

Declared dependency edges and the visible property names of a class are
computed at most once per type and kept here. Entries are weakly keyed,
so classes created at runtime can still be collected. Instances never
write to these tables; they copy the edges into their own DeclarationStore.
"""

import threading
import weakref

# type -> ((dependent, dependency), ...) in declaration order
type_edges: "weakref.WeakKeyDictionary[type, tuple[tuple[str, str], ...]]" = (
    weakref.WeakKeyDictionary()
)

# type -> property names in definition order (base classes first)
type_properties: "weakref.WeakKeyDictionary[type, tuple[str, ...]]" = weakref.WeakKeyDictionary()

# Guards first-time construction of both tables.
lock = threading.RLock()
