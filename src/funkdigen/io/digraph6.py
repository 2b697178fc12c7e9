"""digraph6 encoding of functional digraphs.

Format (nauty's formats.txt): '&' + N(n) + R(x), where x is the n*n
adjacency matrix read row by row, x[i][j] = 1 iff there is an arc i -> j.
N(n) is chr(n + 63) for n < 63, '~' plus three 6-bit groups for
n < 2**18, and '~~' plus six groups above that. R(x) packs bits six at
a time, most significant first, zero-padded, each group offset by 63.
"""
from __future__ import annotations

from typing import List, Sequence

import networkx as nx

from funkdigen.codes.trees import tree_parents
from funkdigen.comp.successor import Comp
from funkdigen.func.digraphs import Func

HEADER = ">>digraph6<<"


def strip_digraph6_header(d6: str) -> str:
    """
    Remove optional '>>digraph6<<' header and whitespace.
    """
    s = d6.strip()
    if s.startswith(HEADER):
        s = s[len(HEADER) :].strip()
    return s


# ---------------------------------------------------------------------------
# Codes -> successor arrays
# ---------------------------------------------------------------------------

def component_array(c: Comp, offset: int = 0) -> List[int]:
    """Successor of each vertex of component c, vertices numbered from offset.

    Trees are numbered in cycle order, each in code order; a root points to
    the root of the next tree on the cycle, any other vertex to its parent.
    """
    roots = []
    k = offset
    for t in c:
        roots.append(k)
        k += len(t)
    f: List[int] = []
    for j, t in enumerate(c):
        base = roots[j]
        for p in tree_parents(t):
            if p is None:
                f.append(roots[(j + 1) % len(c)])
            else:
                f.append(base + p)
    return f


def functional_array(g: Func) -> List[int]:
    """Successor of each vertex of the functional digraph g."""
    f: List[int] = []
    for c in g:
        f.extend(component_array(c, len(f)))
    return f


def adjacency_matrix(f: Sequence[int], loopless: bool = False) -> List[List[bool]]:
    """Boolean adjacency matrix of a successor array.

    With loopless=True the diagonal is left empty.
    """
    n = len(f)
    x = [[False] * n for _ in range(n)]
    for u, v in enumerate(f):
        if loopless and u == v:
            continue
        x[u][v] = True
    return x


# ---------------------------------------------------------------------------
# digraph6 encoding/decoding helpers
# ---------------------------------------------------------------------------

def _encode_size(n: int) -> str:
    if n < 0:
        raise ValueError(f"negative vertex count: {n}")
    if n < 63:
        return chr(n + 63)
    if n < 1 << 18:
        return "~" + "".join(chr(((n >> s) & 63) + 63) for s in (12, 6, 0))
    if n < 1 << 36:
        return "~~" + "".join(chr(((n >> s) & 63) + 63) for s in (30, 24, 18, 12, 6, 0))
    raise ValueError(f"vertex count too large for digraph6: {n}")


def _encode_bits(bits: Sequence[bool]) -> str:
    out = []
    for k in range(0, len(bits), 6):
        group = 0
        chunk = bits[k : k + 6]
        for b in chunk:
            group = (group << 1) | int(b)
        group <<= 6 - len(chunk)
        out.append(chr(group + 63))
    return "".join(out)


def matrix_to_d6(x: Sequence[Sequence[bool]]) -> str:
    """Encode a square boolean adjacency matrix as a digraph6 string."""
    n = len(x)
    bits = [bool(x[i][j]) for i in range(n) for j in range(n)]
    return "&" + _encode_size(n) + _encode_bits(bits)


def to_digraph6(g: Func, loopless: bool = False) -> str:
    """digraph6 string of the functional digraph g."""
    return matrix_to_d6(adjacency_matrix(functional_array(g), loopless=loopless))


def _decode_size(s: str) -> tuple[int, int]:
    """Return (n, number of characters used)."""
    if not s:
        raise ValueError("missing vertex count")
    if s[0] != "~":
        return ord(s[0]) - 63, 1
    if len(s) >= 2 and s[1] == "~":
        width, start = 6, 2
    else:
        width, start = 3, 1
    groups = s[start : start + width]
    if len(groups) != width:
        raise ValueError(f"truncated vertex count in {s!r}")
    n = 0
    for ch in groups:
        n = (n << 6) | (ord(ch) - 63)
    return n, start + width


def d6_to_matrix(d6: str) -> List[List[bool]]:
    """Parse a digraph6 string into a boolean adjacency matrix."""
    s = strip_digraph6_header(d6)
    if not s.startswith("&"):
        raise ValueError(f"not a digraph6 string: {d6!r}")
    body = s[1:]
    if any(not 63 <= ord(ch) <= 126 for ch in body):
        raise ValueError(f"invalid character in digraph6 string: {d6!r}")
    n, used = _decode_size(body)
    data = body[used:]
    need = (n * n + 5) // 6
    if len(data) != need:
        raise ValueError(f"expected {need} data characters for n={n}, got {len(data)}")
    bits: List[bool] = []
    for ch in data:
        v = ord(ch) - 63
        bits.extend(bool((v >> shift) & 1) for shift in range(5, -1, -1))
    return [bits[i * n : (i + 1) * n] for i in range(n)]


# ---------------------------------------------------------------------------
# networkx bridge
# ---------------------------------------------------------------------------

def to_networkx(g: Func, loopless: bool = False) -> nx.DiGraph:
    """NetworkX DiGraph on 0..n-1 with one arc per vertex of g."""
    G = nx.DiGraph()
    f = functional_array(g)
    G.add_nodes_from(range(len(f)))
    G.add_edges_from((u, v) for u, v in enumerate(f) if not (loopless and u == v))
    return G


def d6_to_nx(d6: str) -> nx.DiGraph:
    """
    Parse a digraph6 string into a NetworkX DiGraph.
    """
    x = d6_to_matrix(d6)
    n = len(x)
    G = nx.DiGraph()
    G.add_nodes_from(range(n))
    G.add_edges_from((i, j) for i in range(n) for j in range(n) if x[i][j])
    return G
