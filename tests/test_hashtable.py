from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.hashtable import ChainedHashTable


def test_empty_table():
    table = ChainedHashTable()
    assert len(table) == 0
    assert list(table) == []
    assert 3 not in table


def test_insert_then_contains():
    table = ChainedHashTable()
    table.insert(12)
    assert 12 in table
    assert 7 not in table
    assert len(table) == 1


def test_remove_missing_raises_key_error():
    table = ChainedHashTable()
    table.insert(1)
    with pytest.raises(KeyError):
        table.remove(6)


def test_remove_takes_one_duplicate():
    table = ChainedHashTable()
    table.insert(4)
    table.insert(4)
    table.remove(4)
    assert 4 in table
    assert len(table) == 1
    table.remove(4)
    assert 4 not in table


def test_iteration_order_buckets_then_newest_first():
    table = ChainedHashTable()
    for value in (1, 6, 2):
        table.insert(value)
    assert list(table) == [6, 1, 2]


def test_one_value_per_bucket_iterates_by_remainder():
    table = ChainedHashTable()
    for value in (4, 3, 2, 1, 0):
        table.insert(value)
    assert list(table) == [0, 1, 2, 3, 4]


def test_negative_values():
    table = ChainedHashTable()
    table.insert(-3)
    assert -3 in table
    table.remove(-3)
    assert -3 not in table


@pytest.mark.parametrize("buckets", [0, -1])
def test_bucket_count_must_be_positive(buckets):
    with pytest.raises(ValueError):
        ChainedHashTable(buckets)


def test_non_integer_is_not_contained():
    table = ChainedHashTable()
    table.insert(1)
    assert "1" not in table


@given(values=st.lists(st.integers()), buckets=st.integers(min_value=1, max_value=11))
def test_contents_match_inserted_multiset(values, buckets):
    table = ChainedHashTable(buckets)
    for value in values:
        table.insert(value)
    assert Counter(table) == Counter(values)
    assert len(table) == len(values)
    assert all(value in table for value in values)


@given(values=st.lists(st.integers(), min_size=1))
def test_removing_everything_empties_table(values):
    table = ChainedHashTable()
    for value in values:
        table.insert(value)
    for value in values:
        table.remove(value)
    assert len(table) == 0
    assert list(table) == []