import math

import pytest
from lazytools import groupby, tee, InvalidArgumentError


def collect(groups):
    return [(k, list(g)) for k, g in groups]


def test_groupby_basics():
    assert collect(groupby("AAAABBBCCD")) == [
        ("A", list("AAAA")), ("B", list("BBB")), ("C", list("CC")),
        ("D", ["D"])]
    assert collect(groupby([1, 1, 2, 2, 2, 3, 3, 1])) == [
        (1, [1, 1]), (2, [2, 2, 2]), (3, [3, 3]), (1, [1])]
    assert collect(groupby([])) == []
    assert collect(groupby([42])) == [(42, [42])]
    assert collect(groupby([True, True, False, False, False, True])) == [
        (True, [True, True]), (False, [False, False, False]), (True, [True])]


def test_groupby_key():
    assert collect(groupby([1.1, 1.2, 2.1, 2.2, 3.1], math.floor)) == [
        (1, [1.1, 1.2]), (2, [2.1, 2.2]), (3, [3.1])]
    assert collect(groupby(["a", "bb", "cc", "ddd", "eee", "f"], len)) == [
        (1, ["a"]), (2, ["bb", "cc"]), (3, ["ddd", "eee"]), (1, ["f"])]
    assert collect(groupby([1, "1", 2, "2", "2", 3], str)) == [
        ("1", [1, "1"]), ("2", [2, "2", "2"]), ("3", [3])]

    people = [("Alice", 25), ("Bob", 25), ("Charlie", 30), ("David", 30),
              ("Eve", 25)]
    result = [(k, [name for name, _ in g])
              for k, g in groupby(people, lambda p: p[1])]
    assert result == [(25, ["Alice", "Bob"]), (30, ["Charlie", "David"]),
                      (25, ["Eve"])]

    with pytest.raises(TypeError):
        groupby("abc", key=1)


def test_groupby_identity_keys():
    a, b = [1], [1]
    data = [a, a, b, b]
    groups = collect(groupby(data))
    assert len(groups) == 2
    assert groups[0][0] is a
    assert groups[1][0] is b

    # a fresh list per item never matches the previous key
    assert len(collect(groupby("aab", key=lambda x: [x]))) == 3


def test_groupby_bool_keys():
    assert collect(groupby([1, True, 1.0])) == [
        (1, [1]), (True, [True]), (1.0, [1.0])]
    assert collect(groupby([1, 1.0, True, True, 0, False])) == [
        (1, [1, 1.0]), (True, [True, True]), (0, [0]), (False, [False])]
    assert collect(groupby([0, 1, 2], key=lambda x: x > 0)) == [
        (False, [0]), (True, [1, 2])]


def test_groupby_partial_consumption():
    first_items = [(k, next(g)) for k, g in groupby("AAAABBBCCD")]
    assert first_items == [("A", "A"), ("B", "B"), ("C", "C"), ("D", "D")]

    keys = [k for k, _ in groupby("AAAABBBCCDAABBB")]
    assert keys == ["A", "B", "C", "D", "A", "B"]


def test_groupby_large_groups():
    data = ["A"] * 1000 + ["B"] * 1000
    sizes = [(k, sum(1 for _ in g)) for k, g in groupby(data)]
    assert sizes == [("A", 1000), ("B", 1000)]


def test_groupby_lazy():
    consumed = []

    def source():
        for i in range(10):
            consumed.append(i)
            yield i // 3

    groups = groupby(source())
    key, group = next(groups)
    assert key == 0
    assert len(consumed) == 1

    assert next(group) == 0
    assert len(consumed) == 1
    assert next(group) == 0
    assert len(consumed) == 2


def test_groupby_shared_cursor():
    groups = list(groupby("AABBCC"))
    assert [k for k, _ in groups] == ["A", "B", "C"]
    assert [list(g) for _, g in groups] == [[], [], []]

    outer = groupby("AAAB")
    _, first = next(outer)
    assert next(first) == "A"
    key, second = next(outer)
    assert key == "B"
    assert list(first) == []
    assert list(second) == ["B"]
    with pytest.raises(StopIteration):
        next(outer)
    with pytest.raises(StopIteration):
        next(outer)


def test_tee_basics():
    a, b = tee([1, 2, 3, 4])
    assert list(a) == [1, 2, 3, 4]
    assert list(b) == [1, 2, 3, 4]

    a, b, c = tee("ABC", 3)
    assert list(a) == list(b) == list(c) == ["A", "B", "C"]

    assert tee([1, 2, 3], 0) == ()
    (a,) = tee([1, 2, 3], 1)
    assert list(a) == [1, 2, 3]

    iterators = tee([1, 2], 5)
    assert len(iterators) == 5
    assert all(list(it) == [1, 2] for it in iterators)

    a, b = tee([])
    assert list(a) == list(b) == []


@pytest.mark.parametrize('n', [-1, 1.5, float('nan')])
def test_tee_invalid(n):
    with pytest.raises(InvalidArgumentError):
        tee([1, 2, 3], n)


def test_tee_independent():
    a, b = tee(x for x in [1, 2, 3, 4, 5])
    assert next(a) == 1
    assert next(a) == 2
    assert list(b) == [1, 2, 3, 4, 5]
    assert list(a) == [3, 4, 5]

    a, b, c = tee([10, 20, 30, 40], 3)
    assert next(a) == 10
    assert next(b) == 10
    assert next(b) == 20
    assert next(c) == 10
    assert next(a) == 20
    assert next(c) == 20
    assert next(c) == 30
    assert list(a) == [30, 40]
    assert list(b) == [30, 40]
    assert list(c) == [40]


def test_tee_of_tee():
    (a,) = tee([1, 2, 3], 1)
    b, c = tee(a, 2)
    assert list(b) == [1, 2, 3]
    assert list(c) == [1, 2, 3]

    # peek ahead with a copy
    (it,) = tee("abcdef", 1)
    assert next(it) == "a"
    (forked,) = tee(it, 1)
    assert next(forked) == "b"
    assert next(it) == "b"


def test_tee_buffer_release():
    a, b = tee(range(100))
    list(a)
    assert len(b.buffer) == 100
    del b
    c, = tee(a, 1)
    assert list(c) == []
    assert len(a.source.consumers) == 2
