"""Integer partitions in ascending form.

next_part follows Algorithm 3.1 of J. Kelleher and B. O'Sullivan,
"Generating all partitions: a comparison of two encodings"
(arXiv:0909.2331). Partitions are tuples of nondecreasing parts; the
first is (1, 1, ..., 1) and the last is (n,).
"""
from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

Part = Tuple[int, ...]


def next_part(p: Sequence[int]) -> Optional[Part]:
    """Next partition of sum(p) in lexicographic order, or None after (n,)."""
    if len(p) <= 1:
        return None
    n = sum(p)
    # Working buffer of capacity n, padded with zeros.
    a = list(p) + [0] * (n - len(p))
    k = len(p) - 1
    y = a[k] - 1
    k -= 1
    x = a[k] + 1
    while x <= y:
        a[k] = x
        y -= x
        k += 1
    a[k] = x + y
    return tuple(a[: k + 1])


def partitions(n: int) -> Iterator[Part]:
    """All partitions of n, from (1,)*n to (n,)."""
    p: Optional[Part] = (1,) * n
    while p is not None:
        yield p
        p = next_part(p)
