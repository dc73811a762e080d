import itertools
import math
from random import randint, shuffle

import pytest
from lazytools import permutations, permutations_with_replacement, \
    InvalidArgumentError


@pytest.mark.parametrize('func', [permutations, permutations_with_replacement])
@pytest.mark.parametrize('r', [float('nan'), float('inf'), 3.14, -1])
def test_invalid_r(func, r):
    data = iter("abc")

    with pytest.raises(InvalidArgumentError):
        func(data, r)

    assert next(data) == "a"


def test_permutations_basics():
    assert list(permutations([1, 2, 3], 2)) == [
        (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2)]
    assert list(permutations("abc")) == [
        ("a", "b", "c"), ("a", "c", "b"), ("b", "a", "c"),
        ("b", "c", "a"), ("c", "a", "b"), ("c", "b", "a")]


def test_permutations_edge_cases():
    assert list(permutations("abc", 0)) == [()]
    assert list(permutations("", 0)) == [()]
    assert list(permutations("")) == [()]
    assert list(permutations("", 1)) == []
    assert list(permutations("abc", 4)) == []
    assert list(permutations("a")) == [("a",)]


def test_permutations_random():
    for _ in range(50):
        n, r = randint(0, 6), randint(0, 7)
        pool = [randint(0, 1000) for _ in range(n)]

        result = list(permutations(pool, r))
        assert result == list(itertools.permutations(pool, r))
        assert len(result) == (math.perm(n, r) if r <= n else 0)


def test_permutations_brute_force():
    # keep the index tuples of the odometer which have distinct entries
    for n in range(6):
        pool = list(range(10, 10 + n))
        shuffle(pool)
        for r in range(n + 2):
            expected = [tuple(pool[i] for i in idx)
                        for idx in permutations_with_replacement(range(n), r)
                        if len(set(idx)) == r]
            assert list(permutations(pool, r)) == expected


def test_permutations_ordering():
    for r in range(6):
        result = list(permutations(range(5), r))
        assert result == sorted(result)
        assert len(set(result)) == len(result)
        assert all(len(set(p)) == r for p in result)


def test_permutations_default_r():
    assert list(permutations(range(4))) == list(permutations(range(4), 4))
    assert len(list(permutations(range(6)))) == math.factorial(6)


def test_permutations_large():
    it = permutations(range(20))
    assert next(it) == tuple(range(20))
    assert next(it) == tuple(range(18)) + (19, 18)
    assert next(it) == tuple(range(17)) + (18, 17, 19)


def test_permutations_with_replacement_basics():
    result = list(permutations_with_replacement([1, 2], 3))
    assert len(result) == 2 ** 3
    assert result[0] == (1, 1, 1)
    assert result[-1] == (2, 2, 2)
    assert result == list(itertools.product([1, 2], repeat=3))

    assert list(permutations_with_replacement([1, 2, 3, 4], 2)) == [
        (1, 1), (1, 2), (1, 3), (1, 4),
        (2, 1), (2, 2), (2, 3), (2, 4),
        (3, 1), (3, 2), (3, 3), (3, 4),
        (4, 1), (4, 2), (4, 3), (4, 4)]


def test_permutations_with_replacement_edge_cases():
    assert list(permutations_with_replacement("abc", 0)) == [()]
    assert list(permutations_with_replacement("", 0)) == [()]
    assert list(permutations_with_replacement("")) == [()]
    assert list(permutations_with_replacement("", 2)) == []
    assert list(permutations_with_replacement("ab")) == [
        ("a", "a"), ("a", "b"), ("b", "a"), ("b", "b")]


def test_permutations_with_replacement_random():
    for _ in range(50):
        n, r = randint(0, 5), randint(0, 5)
        pool = [randint(0, 1000) for _ in range(n)]

        result = list(permutations_with_replacement(pool, r))
        assert result == list(itertools.product(pool, repeat=r))
        assert len(result) == n ** r
