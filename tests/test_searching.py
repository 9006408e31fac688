import itertools

import pytest

from algokit.searching import (
    binary_search,
    find_largest,
    find_max_min,
    insert_at,
    linear_search,
    running_min_max,
)

SOURCE_ARRAY = [2, 3, 4, 10, 40]


@pytest.mark.parametrize("values", [[10, 5, 7, 15, 3], [1], [-4, -2, -9]])
def test_find_largest_matches_max(values):
    assert find_largest(values) == max(values)


def test_find_largest_empty_raises():
    with pytest.raises(ValueError):
        find_largest([])


def test_binary_search_source_example():
    assert binary_search(SOURCE_ARRAY, 10) == 3


@pytest.mark.parametrize("target", SOURCE_ARRAY)
def test_binary_search_finds_every_item(target):
    index = binary_search(SOURCE_ARRAY, target)
    assert SOURCE_ARRAY[index] == target


@pytest.mark.parametrize("target", [0, 5, 41])
def test_binary_search_missing(target):
    assert binary_search(SOURCE_ARRAY, target) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


@pytest.mark.parametrize(
    "values", [[1000, 11, 445, 1, 330, 3000], [7], [4, 9], [9, 4], [5, 5, 5]]
)
def test_find_max_min(values):
    assert find_max_min(values) == (max(values), min(values))


def test_find_max_min_empty_raises():
    with pytest.raises(ValueError):
        find_max_min([])


def test_running_min_max_matches_prefixes():
    values = [3, 2, 5, 1, 7, 8, 4]
    expected = list(
        zip(itertools.accumulate(values, min), itertools.accumulate(values, max))
    )
    assert list(running_min_max(values)) == expected


def test_running_min_max_empty():
    assert list(running_min_max([])) == []


def test_insert_at_source_example():
    assert insert_at([1, 2, 3, 4, 5], 2, 10) == [1, 2, 10, 3, 4, 5]


@pytest.mark.parametrize("position", range(0, 6))
def test_insert_at_invariants(position):
    original = [1, 2, 3, 4, 5]
    result = insert_at(original, position, 99)
    assert len(result) == len(original) + 1
    assert result[position] == 99
    assert result[:position] + result[position + 1 :] == original
    assert original == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("position", [-1, 6])
def test_insert_at_out_of_range(position):
    with pytest.raises(IndexError):
        insert_at([1, 2, 3, 4, 5], position, 0)


@pytest.mark.parametrize("target", [2, 10, 40])
def test_linear_search_matches_index(target):
    assert linear_search(SOURCE_ARRAY, target) == SOURCE_ARRAY.index(target)


def test_linear_search_returns_first_occurrence():
    values = [4, 1, 4, 1]
    assert linear_search(values, 1) == values.index(1)


def test_linear_search_missing():
    assert linear_search(SOURCE_ARRAY, 99) is None