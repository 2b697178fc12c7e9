"""Tests for funkdigen.func.digraphs."""
import networkx as nx
import pytest

from funkdigen.codes.rotation import is_min_rotation_linear
from funkdigen.comp.successor import cycle, size
from funkdigen.func.digraphs import count_digraphs, generate_digraphs, loops, next_func, part
from funkdigen.io.digraph6 import to_networkx

# OEIS A001372: functional digraphs on n unlabeled vertices
DIGRAPH_COUNTS = [1, 1, 3, 7, 19, 47, 130, 343, 951, 2615]


def test_loops():
    g = loops(3)
    assert g == (((1,),), ((1,),), ((1,),))
    assert g[0] is g[1] is g[2]
    assert loops(0) == ()


def test_part():
    g = (((1,),), ((1,), (2, 1)))
    assert part(g) == (1, 3)


def test_digraphs_n0():
    assert list(generate_digraphs(0)) == [()]


def test_digraphs_n1():
    assert list(generate_digraphs(1)) == [(((1,),),)]


def test_digraphs_n2_sequence():
    assert list(generate_digraphs(2)) == [
        (((1,),), ((1,),)),
        (((1,), (1,)),),
        (((2, 1),),),
    ]


def test_next_func_last_is_none():
    assert next_func((((2, 1),),)) is None


@pytest.mark.parametrize("n", range(len(DIGRAPH_COUNTS)))
def test_digraph_counts(n):
    assert count_digraphs(n) == DIGRAPH_COUNTS[n]


@pytest.mark.parametrize("n", range(1, 8))
def test_digraphs_unique_and_sorted(n):
    digraphs = list(generate_digraphs(n))
    assert len(set(digraphs)) == len(digraphs)
    for g in digraphs:
        sizes = part(g)
        assert sum(sizes) == n
        assert list(sizes) == sorted(sizes)


def test_same_size_components_shared():
    for g in generate_digraphs(4):
        if g == (((2, 1),), ((2, 1),)):
            assert g[0] is g[1]
            break
    else:
        pytest.fail("digraph with two (2, 1) components not generated")


def test_partition_change_resets_to_cycles():
    g = (((1,),), ((2, 1),))
    assert next_func(g) == (((1,), (1,), (1,)),)
    assert next_func(g)[0] == cycle(3)


def test_linear_rotation_same_digraphs():
    for n in range(6):
        assert list(generate_digraphs(n, is_min_rotation_linear)) == list(generate_digraphs(n))


@pytest.mark.parametrize("n", range(1, 6))
def test_digraphs_pairwise_non_isomorphic(n):
    graphs = [to_networkx(g) for g in generate_digraphs(n)]
    for G in graphs:
        assert G.number_of_nodes() == n
        assert all(d == 1 for _, d in G.out_degree())
    for i in range(len(graphs)):
        for j in range(i + 1, len(graphs)):
            assert not nx.is_isomorphic(graphs[i], graphs[j])


def test_component_sizes_match_partition():
    for g in generate_digraphs(6):
        assert tuple(size(c) for c in g) == part(g)
