"""Reverse-search (depth-first) generation of connected functional digraphs.

The generation tree is rooted at the cycle on n vertices. The parent of
any other component is obtained by splitting the last child off its
first non-leaf tree, putting the two pieces back on the cycle in sorted
order and rotating to the least rotation. Children are found among the
candidates of a node, i.e. the merges of two cyclically adjacent trees
in either order, and a candidate is accepted only if its parent points
back to the same node and candidate index.

The walk keeps no stack: going up recomputes the parent together with
the index to resume from. Nodes at even depth are emitted on the way
down and nodes at odd depth on the way up, so at most a bounded number
of tree moves separate two consecutive outputs.
"""
from __future__ import annotations

from typing import Callable, Iterator, Optional, Sequence, Tuple

from funkdigen.codes.rotation import least_rotation_naive, period, rotate
from funkdigen.codes.trees import can_merge, is_leaf, merge_tree, unmerge_tree
from funkdigen.comp.successor import Comp, cycle

LeastRotation = Callable[[Sequence], int]


def candidate_count(c: Comp) -> int:
    """2k candidates for a component with k >= 2 trees, none otherwise."""
    k = len(c)
    return 2 * k if k >= 2 else 0


def candidate(c: Comp, j: int, least_rotation: LeastRotation = least_rotation_naive) -> Optional[Comp]:
    """Apply candidate j to c.

    j // 2 is the position i of the pair (c[i], c[i + 1 mod k]); even j
    merges the second tree under the first (ascending), odd j the first
    under the second (descending). None if the merged tree would not be
    a valid code.
    """
    k = len(c)
    i, descending = divmod(j, 2)
    a, b = c[i], c[(i + 1) % k]
    if descending:
        a, b = b, a
    if not can_merge(a, b):
        return None
    merged = merge_tree(a, b)
    # Cycle order starting from the merged tree.
    q = (merged,) + rotate(c, i + 2)[: k - 2]
    return rotate(q, least_rotation(q))


def candidates(
    c: Comp, least_rotation: LeastRotation = least_rotation_naive, start: int = 0
) -> Iterator[Tuple[int, Comp]]:
    """Yield (j, candidate(c, j)) for every valid candidate of c with j >= start."""
    for j in range(start, candidate_count(c)):
        d = candidate(c, j, least_rotation)
        if d is not None:
            yield j, d


def parent(c: Comp, least_rotation: LeastRotation = least_rotation_naive) -> Optional[Tuple[Comp, int]]:
    """Parent of c in the generation tree and the candidate index leading to c.

    The index is reduced modulo the period of the parent, so that it is
    the same for all equivalent positions. None if c is a cycle.
    """
    i = 0
    while i < len(c) and is_leaf(c[i]):
        i += 1
    if i == len(c):
        return None
    t1, t2 = unmerge_tree(c[i])
    if t1 <= t2:
        pair, descending = (t1, t2), 0
    else:
        pair, descending = (t2, t1), 1
    seq = c[:i] + pair + c[i + 1 :]
    s = least_rotation(seq)
    p = rotate(seq, s)
    pos = (i - s) % period(p)
    return p, 2 * pos + descending


def backtrack(c: Comp, least_rotation: LeastRotation = least_rotation_naive) -> Optional[Tuple[Comp, int]]:
    """Parent of c and the candidate index to resume from (one past c's)."""
    res = parent(c, least_rotation)
    if res is None:
        return None
    p, j = res
    return p, j + 1


def is_child(c: Comp, j: int, d: Comp, least_rotation: LeastRotation = least_rotation_naive) -> bool:
    """True iff candidate j of c is a genuine child of c."""
    return parent(d, least_rotation) == (c, j)


def dfs_components(n: int, least_rotation: LeastRotation = least_rotation_naive) -> Iterator[Comp]:
    """Yield every component of n vertices, up to isomorphism, once."""
    if n == 0:
        return
    c = cycle(n)
    j = 0
    depth = 0
    yield c
    while True:
        child = None
        for j, d in candidates(c, least_rotation, j):
            if is_child(c, j, d, least_rotation):
                child = d
                break
        if child is not None:
            c, j = child, 0
            depth += 1
            if depth % 2 == 0:
                yield c
            continue
        if depth % 2 == 1:
            yield c
        if depth == 0:
            return
        res = backtrack(c, least_rotation)
        assert res is not None, "non-root component without a parent"
        c, j = res
        depth -= 1


def count_components_dfs(n: int, least_rotation: LeastRotation = least_rotation_naive) -> int:
    count = 0
    for _ in dfs_components(n, least_rotation):
        count += 1
    return count
