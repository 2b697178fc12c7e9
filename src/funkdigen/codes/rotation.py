"""Least-rotation tests for sequences of totally ordered elements.

Two interchangeable algorithms are provided:

  naive  : compare every rotation against the identity, stopping at the
           first differing position. Cubic in the worst case but fast for
           the sequence lengths that occur here (at most 255).
  linear : Kellogg S. Booth, "Lexicographically least circular
           substrings", Information Processing Letters 10(4), 1980,
           pp. 240-242, with the errata from the author's page.

Elements are compared with <, so tuples (tree codes) work as well as ints.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def rotate(seq: Sequence[T], k: int) -> Tuple[T, ...]:
    """Rotation of *seq* starting at index k."""
    if not seq:
        return ()
    k %= len(seq)
    return tuple(seq[k:]) + tuple(seq[:k])


def is_min_rotation_naive(seq: Sequence) -> bool:
    n = len(seq)
    for r in range(1, n):
        for i in range(n):
            a = seq[i]
            b = seq[(i + r) % n]
            if a > b:
                return False
            if a < b:
                break
    return True


def least_rotation_naive(seq: Sequence) -> int:
    """Smallest index k such that rotate(seq, k) is lexicographically least."""
    n = len(seq)
    best = 0
    for k in range(1, n):
        for i in range(n):
            a = seq[(k + i) % n]
            b = seq[(best + i) % n]
            if a < b:
                best = k
                break
            if a > b:
                break
    return best


def least_rotation_booth(seq: Sequence) -> int:
    """Index of a lexicographically least rotation, in O(n) comparisons."""
    n = len(seq)
    if n <= 1:
        return 0
    s = list(seq) + list(seq)
    f: List[int] = [-1] * len(s)
    k = 0
    for j in range(1, len(s)):
        sj = s[j]
        i = f[j - k - 1]
        while i != -1 and sj != s[k + i + 1]:
            if sj < s[k + i + 1]:
                k = j - i - 1
            i = f[i]
        if sj != s[k + i + 1]:
            # i == -1 here
            if sj < s[k]:
                k = j
            f[j - k] = -1
        else:
            f[j - k] = i + 1
    return k % n


def is_min_rotation_linear(seq: Sequence) -> bool:
    n = len(seq)
    if n <= 1:
        return True
    k = least_rotation_booth(seq)
    if k == 0:
        return True
    # Periodic sequences may report another index of the same rotation.
    for i in range(n):
        if seq[i] != seq[(k + i) % n]:
            return False
    return True


def period(seq: Sequence) -> int:
    """Smallest d >= 1 with rotate(seq, d) == seq (len(seq) if aperiodic).

    Computed with the prefix function; 0 for the empty sequence.
    """
    n = len(seq)
    if n == 0:
        return 0
    pi = [0] * n
    for i in range(1, n):
        j = pi[i - 1]
        while j > 0 and seq[i] != seq[j]:
            j = pi[j - 1]
        if seq[i] == seq[j]:
            j += 1
        pi[i] = j
    d = n - pi[-1]
    return d if n % d == 0 else n


class RotationTest(Enum):
    NAIVE = "naive"
    LINEAR = "linear"


_MIN_ROTATION = {
    RotationTest.NAIVE: is_min_rotation_naive,
    RotationTest.LINEAR: is_min_rotation_linear,
}

_LEAST_ROTATION = {
    RotationTest.NAIVE: least_rotation_naive,
    RotationTest.LINEAR: least_rotation_booth,
}


def rotation_test(kind: RotationTest | str = RotationTest.NAIVE) -> Callable[[Sequence], bool]:
    """Resolve a RotationTest (or its name) to an is_min_rotation function."""
    return _MIN_ROTATION[RotationTest(kind)]


def least_rotation_finder(kind: RotationTest | str = RotationTest.NAIVE) -> Callable[[Sequence], int]:
    """Resolve a RotationTest (or its name) to a least-rotation index function."""
    return _LEAST_ROTATION[RotationTest(kind)]

