"""Tests for funkdigen.func.partitions."""
import pytest

from funkdigen.func.partitions import next_part, partitions

# number of partitions of n
PARTITION_COUNTS = [1, 1, 2, 3, 5, 7, 11, 15, 22, 30, 42]


def test_next_part_from_all_ones():
    assert next_part((1, 1, 1, 1, 1)) == (1, 1, 1, 2)


def test_next_part_end():
    assert next_part((5,)) is None
    assert next_part(()) is None


def test_partitions_of_5_in_order():
    assert list(partitions(5)) == [
        (1, 1, 1, 1, 1),
        (1, 1, 1, 2),
        (1, 1, 3),
        (1, 2, 2),
        (1, 4),
        (2, 3),
        (5,),
    ]


@pytest.mark.parametrize("n", range(len(PARTITION_COUNTS)))
def test_partition_counts(n):
    parts = list(partitions(n))
    assert len(parts) == PARTITION_COUNTS[n]
    assert len(set(parts)) == len(parts)
    for p in parts:
        assert sum(p) == n
        assert all(x > 0 for x in p)
        assert list(p) == sorted(p)


def test_partitions_lexicographic():
    parts = list(partitions(8))
    assert parts == sorted(parts)
