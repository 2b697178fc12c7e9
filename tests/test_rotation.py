"""Tests for funkdigen.codes.rotation."""
import itertools
import random

import pytest

from funkdigen.codes.rotation import (
    RotationTest,
    is_min_rotation_linear,
    is_min_rotation_naive,
    least_rotation_booth,
    least_rotation_finder,
    least_rotation_naive,
    period,
    rotate,
    rotation_test,
)

TESTERS = [is_min_rotation_naive, is_min_rotation_linear]


def _random_sequences(count, max_len, alphabet, seed=12345):
    rng = random.Random(seed)
    for _ in range(count):
        n = rng.randint(0, max_len)
        yield [rng.choice(alphabet) for _ in range(n)]


# --- basic behaviour ---

@pytest.mark.parametrize("test", TESTERS)
def test_trivial_lengths(test):
    assert test([]) is True
    assert test([5]) is True


@pytest.mark.parametrize("test", TESTERS)
def test_small_examples(test):
    assert test([1, 2]) is True
    assert test([2, 1]) is False
    assert test([1, 1, 2]) is True
    assert test([1, 2, 1]) is False
    assert test([1, 2, 1, 2]) is True
    assert test([1, 2, 1, 1]) is False


@pytest.mark.parametrize("test", TESTERS)
def test_tree_code_elements(test):
    # (1,) < (2, 1) < (3, 1, 1) < (3, 2, 1) as tuples
    assert test([(1,), (2, 1)]) is True
    assert test([(2, 1), (1,)]) is False
    assert test([(1,), (3, 2, 1), (1,), (3, 1, 1)]) is False
    assert test([(1,), (3, 1, 1), (1,), (3, 2, 1)]) is True


def test_rotate():
    assert rotate([1, 2, 3], 1) == (2, 3, 1)
    assert rotate([1, 2, 3], 4) == (2, 3, 1)
    assert rotate([], 3) == ()


def test_period():
    assert period([]) == 0
    assert period([7]) == 1
    assert period([1, 2, 1, 2]) == 2
    assert period([1, 2, 1]) == 3
    assert period([3, 3, 3]) == 1


def test_rotation_test_resolves_names():
    assert rotation_test("naive") is is_min_rotation_naive
    assert rotation_test(RotationTest.LINEAR) is is_min_rotation_linear
    assert least_rotation_finder("linear") is least_rotation_booth
    with pytest.raises(ValueError):
        rotation_test("quadratic")


# --- cross-checks between the two algorithms ---

def test_testers_agree_exhaustive_binary():
    for n in range(13):
        for seq in itertools.product((0, 1), repeat=n):
            assert is_min_rotation_naive(seq) == is_min_rotation_linear(seq), seq


def test_testers_agree_exhaustive_ternary():
    for n in range(8):
        for seq in itertools.product((0, 1, 2), repeat=n):
            assert is_min_rotation_naive(seq) == is_min_rotation_linear(seq), seq


def test_testers_agree_random_up_to_20():
    for seq in _random_sequences(3000, 20, [0, 1, 2, 3]):
        assert is_min_rotation_naive(seq) == is_min_rotation_linear(seq), seq


def test_least_rotations_agree():
    for seq in _random_sequences(2000, 20, [0, 1, 2]):
        if not seq:
            continue
        a = rotate(seq, least_rotation_naive(seq))
        b = rotate(seq, least_rotation_booth(seq))
        assert a == b == min(rotate(seq, k) for k in range(len(seq)))


def test_least_rotation_naive_is_smallest_index():
    assert least_rotation_naive([2, 1, 2, 1]) == 1
    assert least_rotation_naive([1, 1, 1]) == 0


# --- exactly one rotation per class ---

@pytest.mark.parametrize("test", TESTERS)
def test_one_accepted_rotation_per_class(test):
    for seq in _random_sequences(500, 12, [0, 1, 2], seed=99):
        if not seq:
            continue
        accepted = {rotate(seq, k) for k in range(len(seq)) if test(rotate(seq, k))}
        assert accepted == {min(rotate(seq, k) for k in range(len(seq)))}
