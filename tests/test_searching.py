from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import (
    binary_search,
    recursive_binary_search,
    recursive_sequential_search,
    sequential_search,
)

small_ints = st.integers(min_value=-50, max_value=50)
small_lists = st.lists(small_ints, max_size=60)


@given(values=small_lists, target=small_ints)
def test_binary_search_finds_present_values(values, target):
    items = sorted(values)
    results = [binary_search(items, target), recursive_binary_search(items, target)]
    if target in items:
        assert [items[result] for result in results] == [target, target]
    else:
        assert results == [None, None]


@given(values=st.sets(st.integers(), max_size=60))
def test_binary_search_on_distinct_values_gives_exact_index(values):
    items = sorted(values)
    for index, value in enumerate(items):
        assert binary_search(items, value) == index
        assert recursive_binary_search(items, value) == index


def test_empty_sequence_finds_nothing():
    found = [
        binary_search([], 5),
        recursive_binary_search([], 5),
        sequential_search([], 5),
        recursive_sequential_search([], 5),
    ]
    assert found == [None] * 4


def test_binary_search_missing_between_values():
    items = [10, 20, 30]
    for target in (25, 5, 35):
        assert binary_search(items, target) is None
        assert recursive_binary_search(items, target) is None


@given(values=small_lists, target=small_ints)
def test_sequential_search_returns_first_match(values, target):
    expected = values.index(target) if target in values else None
    assert sequential_search(values, target) == expected
    assert recursive_sequential_search(values, target) == expected


def test_sequential_search_unsorted_input():
    items = [9, 4, 7, 4, 1]
    for target, expected in ((4, 1), (1, 4), (8, None)):
        assert sequential_search(items, target) == expected
        assert recursive_sequential_search(items, target) == expected


def test_works_on_tuples_and_strings():
    items = ("apple", "banana", "cherry")
    for target, expected in (("cherry", 2), ("apple", 0)):
        assert binary_search(items, target) == expected
        assert recursive_binary_search(items, target) == expected
        assert sequential_search(items, target) == expected
        assert recursive_sequential_search(items, target) == expected