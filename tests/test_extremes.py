import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.extremes import largest, min_max, second_largest


def test_min_max_source_example():
    data = [1, 423, 6, 46, 34, 23, 13, 53, 4]
    assert min_max(data) == (1, 423)


def test_min_max_does_not_modify_input():
    data = [3, 1, 2]
    min_max(data)
    assert data == [3, 1, 2]


@given(st.lists(st.integers(), min_size=1))
def test_min_max_matches_builtins(values):
    assert min_max(values) == (min(values), max(values))


@given(st.lists(st.integers(), min_size=1))
def test_largest_is_maximum(values):
    result = largest(values)
    assert result in values
    assert all(value <= result for value in values)


@given(st.lists(st.integers(), min_size=1))
def test_second_largest_invariants(values):
    result = second_largest(values)
    top = largest(values)
    if result is None:
        assert set(values) == {top}
    else:
        assert result in values
        assert result < top
        assert all(value <= result for value in values if value != top)


def test_second_largest_with_duplicated_top():
    assert second_largest([5, 9, 9, 7]) == 7


def test_second_largest_all_equal():
    assert second_largest([4, 4, 4]) is None


@pytest.mark.parametrize("func", [min_max, largest, second_largest])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])