"""Fixed-point closure over a dependency relation.

Shared by the instance-level queries (against a DeclarationStore) and the
type-level queries (against declared edges only). Termination holds for
cyclic relations: the result only grows, over a finite set of names, and
the loop stops on the first pass that adds nothing.
"""

from __future__ import annotations

from typing import Callable, Iterable


def closure(start: str, neighbors: Callable[[str], Iterable[str]]) -> list[str]:
    """Every name reachable from start through neighbors, start excluded.

    Order is first discovery; each name appears once.
    """
    found: dict[str, None] = {start: None}
    while True:
        size = len(found)
        for name in list(found):
            for neighbor in neighbors(name):
                found.setdefault(neighbor, None)
        if len(found) == size:
            break
    del found[start]
    return list(found)
