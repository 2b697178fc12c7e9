"""Successor-based generation of connected functional digraphs.

A component (connected functional digraph) is coded as a tuple of tree
codes, one per vertex of its cycle, read in the direction of the cycle
and rotated so that the tuple is its own least rotation. Trees are
shared between consecutive components rather than copied.

next_comp walks the generation tree of Porreca and Timofeeva,
"Polynomial-delay generation of functional digraphs up to isomorphism"
(arXiv:2302.13832): its children are obtained by merging a run of trees
into the first of them, its parent by unmerging the first non-leaf tree.
"""
from __future__ import annotations

from typing import Callable, Iterator, Optional, Sequence, Tuple

from funkdigen.codes.rotation import is_min_rotation_naive
from funkdigen.codes.trees import LEAF, Tree, children, is_leaf, is_valid_tree, plant

Comp = Tuple[Tree, ...]
MinRotation = Callable[[Sequence], bool]

# Proved bound on the unmerge/remerge retries in next_comp.
MAX_UNMERGES = 2


def is_sorted(s: Sequence) -> bool:
    for i in range(len(s) - 1):
        if s[i] > s[i + 1]:
            return False
    return True


def cycle(n: int) -> Comp:
    """The component made of a single cycle of length n."""
    return (LEAF,) * n


def size(c: Comp) -> int:
    """Number of vertices of a component."""
    return sum(len(t) for t in c)


def is_canonical_component(c: Comp, min_rotation: MinRotation = is_min_rotation_naive) -> bool:
    """All trees are valid codes and c is its own least rotation."""
    return len(c) > 0 and all(is_valid_tree(t) for t in c) and min_rotation(c)


def has_unmerge(c: Comp, u: Comp) -> bool:
    """Check that unmerging c yields u at the position of its first non-leaf.

    Only meaningful when c was obtained by merging a run of u.
    """
    i = 0
    while i < len(c) and is_leaf(c[i]):
        i += 1
    return i < len(u) and is_leaf(u[i])


def unmerge(c: Comp) -> Optional[Tuple[Comp, int, int]]:
    """Unmerge the first non-leaf tree of c.

    Returns (u, l, r) such that merging u[l:r] gives back c, or None if
    every tree of c is a leaf (c is a cycle).
    """
    l = 0
    while l < len(c) and is_leaf(c[l]):
        l += 1
    if l == len(c):
        return None
    subtrees = tuple(children(c[l]))
    u = c[:l] + (LEAF,) + subtrees + c[l + 1 :]
    return u, l, l + 1 + len(subtrees)


def merge(c: Comp, l: int, r: int, min_rotation: MinRotation = is_min_rotation_naive) -> Optional[Comp]:
    """Merge trees c[l], ..., c[r - 1] into a tree rooted at c[l].

    Returns the new component if it is a valid isomorphism code whose
    unmerge is c, otherwise None.
    """
    if not is_leaf(c[l]) or not is_sorted(c[l:r]):
        return None
    m = c[:l] + (plant(c[l + 1 : r]),) + c[r:]
    if not min_rotation(m) or not has_unmerge(m, c):
        return None
    return m


def next_merge(c: Comp, l: int, r: int, min_rotation: MinRotation = is_min_rotation_naive) -> Optional[Comp]:
    """Lexicographically minimal valid merge of c from (l, r) onwards.

    r grows up to len(c) (inclusive, as an exclusive bound); then l moves
    one step left and r restarts at l + 2.
    """
    while True:
        while r <= len(c):
            m = merge(c, l, r, min_rotation)
            if m is not None:
                return m
            r += 1
        if l == 0:
            return None
        l -= 1
        r = l + 2


def next_comp(c: Comp, min_rotation: MinRotation = is_min_rotation_naive) -> Optional[Comp]:
    """Successor of c among the components with the same number of vertices.

    Tries a merge first; otherwise unmerges and looks for the next merge
    of the unmerged component. None once c is the last component.
    """
    if len(c) >= 2:
        m = next_merge(c, len(c) - 2, len(c), min_rotation)
        if m is not None:
            return m
    res = unmerge(c)
    attempts = 0
    while res is not None:
        attempts += 1
        if attempts > MAX_UNMERGES:
            raise RuntimeError(
                f"next_comp unmerged more than {MAX_UNMERGES} times from {c!r}"
            )
        u, l, r = res
        m = next_merge(u, l, r + 1, min_rotation)
        if m is not None:
            return m
        res = unmerge(u)
    return None


def generate_components(n: int, min_rotation: MinRotation = is_min_rotation_naive) -> Iterator[Comp]:
    """Yield every component of n vertices, up to isomorphism, once."""
    if n == 0:
        return
    c: Optional[Comp] = cycle(n)
    while c is not None:
        yield c
        c = next_comp(c, min_rotation)


def count_components(n: int, min_rotation: MinRotation = is_min_rotation_naive) -> int:
    count = 0
    for _ in generate_components(n, min_rotation):
        count += 1
    return count
