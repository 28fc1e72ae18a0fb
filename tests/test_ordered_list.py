import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.ordered_list import OrderedList


@given(st.sets(st.integers()), st.integers())
def test_ascending_iteration_and_membership(values, probe):
    ordered = OrderedList()
    for value in values:
        ordered.insert(value)
    assert list(ordered) == sorted(values)
    assert len(ordered) == len(values)
    assert (probe in ordered) == (probe in values)


def test_constructor_inserts_items():
    assert list(OrderedList([4, 2, 8])) == [2, 4, 8]


def test_duplicate_insert_raises():
    ordered = OrderedList([3, 1])
    with pytest.raises(ValueError):
        ordered.insert(3)
    assert list(ordered) == [1, 3]


@pytest.mark.parametrize("victim, rest", [(1, [3, 5]), (3, [1, 5]), (5, [1, 3])])
def test_remove_head_middle_tail(victim, rest):
    ordered = OrderedList([5, 1, 3])
    ordered.remove(victim)
    assert victim not in ordered
    assert (list(ordered), len(ordered)) == (rest, 2)


@pytest.mark.parametrize("contents", [[], [1, 2]])
def test_remove_missing_raises(contents):
    ordered = OrderedList(contents)
    with pytest.raises(KeyError):
        ordered.remove(7)
    assert len(ordered) == len(contents)


def test_is_empty_and_clear():
    ordered = OrderedList()
    assert ordered.is_empty()
    ordered.insert(9)
    assert not ordered.is_empty()
    ordered.clear()
    assert ordered.is_empty()
    assert (list(ordered), len(ordered)) == ([], 0)


def test_contains_unorderable_is_false():
    assert "x" not in OrderedList([1, 2])