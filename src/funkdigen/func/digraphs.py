"""Generation of all functional digraphs of n vertices up to isomorphism.

A functional digraph is coded as a tuple of component codes sorted by
size, components of the same size appearing in the order in which
next_comp generates them. Equal components are the same object.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from funkdigen.codes.rotation import is_min_rotation_naive
from funkdigen.comp.successor import Comp, MinRotation, cycle, next_comp, size
from funkdigen.func.partitions import Part, next_part

Func = Tuple[Comp, ...]


def loops(n: int) -> Func:
    """The functional digraph made of n self-loops."""
    return (cycle(1),) * n


def part(g: Func) -> Part:
    """Component sizes of g, i.e. the partition of its vertex count."""
    return tuple(size(c) for c in g)


def next_func(g: Func, min_rotation: MinRotation = is_min_rotation_naive) -> Optional[Func]:
    """Successor of g among the functional digraphs with the same vertex count.

    Advances the rightmost component that has a successor; components
    to its right of the same size become that successor, the others
    restart from their cycle. If no component can advance, moves to the
    next partition. None once g is the last digraph.
    """
    for h in range(len(g) - 1, -1, -1):
        c = next_comp(g[h], min_rotation)
        if c is None:
            continue
        n = size(c)
        f: List[Comp] = list(g[:h])
        f.append(c)
        for i in range(h + 1, len(g)):
            m = size(g[i])
            f.append(c if m == n else cycle(m))
        return tuple(f)
    q = next_part(part(g))
    if q is None:
        return None
    return tuple(cycle(m) for m in q)


def generate_digraphs(n: int, min_rotation: MinRotation = is_min_rotation_naive) -> Iterator[Func]:
    """Yield every functional digraph of n vertices, up to isomorphism, once.

    For n == 0 the only digraph is the empty one.
    """
    g: Optional[Func] = loops(n)
    while g is not None:
        yield g
        g = next_func(g, min_rotation)


def count_digraphs(n: int, min_rotation: MinRotation = is_min_rotation_naive) -> int:
    count = 0
    for _ in generate_digraphs(n, min_rotation):
        count += 1
    return count
