import pytest
from slicekit.functional.sequences import (
    remove,
    remove_at,
    filter_by,
    transform,
    contains,
    index_of,
    unique,
    unique_by,
    reduce,
    some,
    every,
)


@pytest.fixture
def numbers():
    return [3, 1, 4, 1, 5, 9, 2, 6]


def test_remove_first_occurrence_only(numbers):
    result = remove(numbers, 1)
    assert result == [3, 4, 1, 5, 9, 2, 6]
    assert len(result) == len(numbers) - 1
    assert result.count(1) == numbers.count(1) - 1


def test_remove_absent_returns_copy(numbers):
    result = remove(numbers, 42)
    assert result == numbers
    assert result is not numbers


def test_remove_does_not_mutate_input(numbers):
    original = list(numbers)
    remove(numbers, 3)
    assert numbers == original


def test_remove_accepts_tuple():
    assert remove(("a", "b", "a"), "a") == ["b", "a"]


def test_remove_at():
    values = [1, 2, 3]
    assert remove_at(values, 0) == [2, 3]
    assert remove_at(values, 2) == [1, 2]
    assert values == [1, 2, 3]


@pytest.mark.parametrize("index", [3, 5, -1])
def test_remove_at_out_of_range(index):
    with pytest.raises(IndexError):
        remove_at([1, 2, 3], index)


def test_remove_at_empty():
    with pytest.raises(IndexError):
        remove_at([], 0)


def test_filter_by_is_ordered_subsequence(numbers):
    result = filter_by(numbers, lambda x: x % 2 == 0)
    assert result == [4, 2, 6]

    # Every kept element appears in the source in the same relative order
    it = iter(numbers)
    assert all(any(x == y for y in it) for x in result)


def test_filter_by_nothing_matches():
    assert filter_by([1, 2, 3], lambda x: x > 10) == []
    assert filter_by([], lambda x: True) == []


def test_transform(numbers):
    result = transform(numbers, lambda x: x * 10)
    assert len(result) == len(numbers)
    for i, value in enumerate(numbers):
        assert result[i] == value * 10


def test_transform_changes_type():
    assert transform([1, 22, 333], str) == ["1", "22", "333"]
    assert transform([], str) == []


def test_contains(numbers):
    assert contains(numbers, 9)
    assert not contains(numbers, 7)
    assert not contains([], 1)


def test_index_of(numbers):
    assert index_of(numbers, 1) == 1
    assert index_of(numbers, 6) == 7
    assert index_of(numbers, 7) == -1
    assert index_of([], "x") == -1


def test_unique_preserves_first_occurrence_order():
    assert unique([1, 2, 2, 3, 1]) == [1, 2, 3]
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert unique([]) == []


def test_unique_unhashable_raises():
    with pytest.raises(TypeError):
        unique([[1], [1]])


def test_unique_by_keeps_first_element_per_key():
    words = ["apple", "avocado", "banana", "blueberry", "cherry", "apricot"]
    result = unique_by(words, lambda w: w[0])
    assert result == ["apple", "banana", "cherry"]


def test_unique_by_with_unhashable_elements():
    records = [
        {"id": 2, "name": "b"},
        {"id": 1, "name": "a"},
        {"id": 2, "name": "b2"},
    ]
    result = unique_by(records, lambda r: r["id"])
    assert result == [{"id": 2, "name": "b"}, {"id": 1, "name": "a"}]


def test_reduce():
    assert reduce([1, 2, 3, 4], 0, lambda acc, x: acc + x) == 10
    assert reduce(["a", "b"], "", lambda acc, x: acc + x) == "ab"
    assert reduce([], 7, lambda acc, x: acc + x) == 7


def test_reduce_is_left_fold():
    result = reduce([1, 2, 3], [], lambda acc, x: acc + [x])
    assert result == [1, 2, 3]
    assert reduce([1, 2, 3], 100, lambda acc, x: acc - x) == 94


def test_some():
    assert some([1, 3, 4], lambda x: x % 2 == 0)
    assert not some([1, 3, 5], lambda x: x % 2 == 0)
    assert not some([], lambda x: True)


def test_every():
    assert every([2, 4, 6], lambda x: x % 2 == 0)
    assert not every([2, 3, 6], lambda x: x % 2 == 0)
    assert every([], lambda x: False)


def test_some_short_circuits():
    calls = []

    def predicate(x):
        calls.append(x)
        return x > 1

    assert some([1, 2, 3, 4], predicate)
    assert calls == [1, 2]
