import pytest

from oceanwaves.algorithm import UniqueResult, sort_indexes, unordered_unique


@pytest.mark.parametrize(
    "values",
    [
        [3.0, 1.0, 4.0, 1.5, 9.0, 2.6],
        [5, 5, 2, 8, 1],
        [1.0],
        [],
        (7, -3, 0, 12),
    ],
)
def test_sort_indexes_is_descending_permutation(values):
    idx = sort_indexes(values)
    assert sorted(idx) == list(range(len(values)))
    ordered = [values[i] for i in idx]
    assert all(a >= b for a, b in zip(ordered, ordered[1:]))


def test_sort_indexes_first_is_maximum():
    values = [0.2, 0.9, 0.1, 0.5]
    idx = sort_indexes(values)
    assert values[idx[0]] == max(values)
    assert values[idx[-1]] == min(values)


def test_unordered_unique_keeps_first_appearance_order():
    result = unordered_unique([3, 1, 3, 2, 1])
    assert result.unique == [3, 1, 2]


@pytest.mark.parametrize(
    "values",
    [
        [3, 1, 3, 2, 1],
        [0.5, 0.5, 0.5],
        [1.0, 2.0, 3.0],
        ["a", "b", "a", "c", "b", "a"],
        [],
    ],
)
def test_unordered_unique_invariants(values):
    result = unordered_unique(values)
    assert len(result.inverse) == len(values)
    assert [result.unique[p] for p in result.inverse] == list(values)
    assert [values[i] for i in result.index] == result.unique
    assert sum(result.count) == len(values)
    assert len(set(result.unique)) == len(result.unique)
    for value, n in zip(result.unique, result.count):
        assert list(values).count(value) == n


def test_unordered_unique_accepts_generator():
    result = unordered_unique(x % 3 for x in range(7))
    assert isinstance(result, UniqueResult)
    assert result.unique == [0, 1, 2]
    assert result.index == [0, 1, 2]


def test_unordered_unique_index_increasing():
    result = unordered_unique([4, 4, 9, 4, 1, 9])
    assert result.index == sorted(result.index)