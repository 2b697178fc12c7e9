"""Isomorphism codes for rooted trees.

A tree code is a tuple of small ints. t[0] is the number of vertices
of the tree; the remaining entries are the codes of the root's child
subtrees, concatenated in nondecreasing lexicographic order. Every
vertex contributes exactly one entry, so len(t) == t[0].

Examples:
  (1,)            a single vertex
  (3, 1, 1)       a root with two leaf children
  (3, 2, 1)       a path of three vertices
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

Tree = Tuple[int, ...]

# Shared by every component that needs a single-vertex tree.
LEAF: Tree = (1,)


def cycle_leaf() -> Tree:
    """The single-vertex tree (1,)."""
    return LEAF


def is_leaf(t: Tree) -> bool:
    return t[0] == 1


def children(t: Tree) -> Iterator[Tree]:
    """Iterate the codes of the root's child subtrees, left to right."""
    k = 1
    while k < len(t):
        yield t[k : k + t[k]]
        k += t[k]


def merge_tree(t1: Tree, t2: Tree) -> Tree:
    """Attach t2 as the rightmost child of the root of t1.

    The result is a canonical code only if can_merge(t1, t2).
    """
    return (t1[0] + t2[0],) + t1[1:] + t2


def unmerge_tree(t: Tree) -> Tuple[Tree, Tree]:
    """Split off the last child subtree of the root of t.

    Returns (t1, t2) with merge_tree(t1, t2) == t.
    Raises ValueError if the root of t has no children.
    """
    if len(t) <= 1:
        raise ValueError(f"cannot unmerge a single-vertex tree: {t!r}")
    last = 1
    k = 1
    while k < len(t):
        last = k
        k += t[k]
    t2 = t[last:]
    t1 = (t[0] - len(t2),) + t[1:last]
    return t1, t2


def last_child(t: Tree) -> Optional[Tree]:
    """Code of the rightmost child of the root, or None for a leaf."""
    if len(t) <= 1:
        return None
    return unmerge_tree(t)[1]


def can_merge(t1: Tree, t2: Tree) -> bool:
    """True iff merge_tree(t1, t2) keeps the root's children sorted."""
    lc = last_child(t1)
    return lc is None or lc <= t2


def plant(subtrees: Iterable[Tree]) -> Tree:
    """New root whose children are *subtrees*, in the given order.

    Same as folding merge_tree over the subtrees starting from LEAF.
    """
    body: List[int] = []
    for s in subtrees:
        body.extend(s)
    return (len(body) + 1,) + tuple(body)


def is_valid_tree(t: Tree) -> bool:
    """Check sizes and child ordering at every level of a tree code."""
    if not t or t[0] != len(t):
        return False
    prev: Optional[Tree] = None
    k = 1
    while k < len(t):
        m = t[k]
        if m < 1 or k + m > len(t):
            return False
        s = t[k : k + m]
        if prev is not None and s < prev:
            return False
        if not is_valid_tree(s):
            return False
        prev = s
        k += m
    return True


def tree_parents(t: Tree) -> List[Optional[int]]:
    """Parent position of every vertex of a tree code (root -> None).

    Positions follow the code itself, which lists vertices in preorder.
    """
    parents: List[Optional[int]] = [None] * len(t)
    stack: List[Tuple[int, int]] = []  # (position, end of its subtree)
    for k in range(len(t)):
        while stack and stack[-1][1] <= k:
            stack.pop()
        if stack:
            parents[k] = stack[-1][0]
        stack.append((k, k + t[k]))
    return parents
