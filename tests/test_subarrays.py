import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.subarrays import (
    longest_subarray_with_sum,
    max_subarray_sum,
    max_subarray_sum_or_zero,
)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([-2, 1, -3, 4, -1, 2, 1, -5, 4], 6),
        ([-1, 1], 1),
        ([-1, 1, 2, -1, 2], 4),
    ],
)
def test_max_subarray_documented_examples(values, expected):
    assert max_subarray_sum(values) == expected


def test_max_subarray_all_negative_keeps_best_element():
    assert max_subarray_sum([-5, -2, -9]) == -2


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_or_zero_all_negative():
    assert max_subarray_sum_or_zero([-5, -2, -9]) == 0


def test_or_zero_empty():
    assert max_subarray_sum_or_zero([]) == 0


@given(st.lists(st.integers(-100, 100), min_size=1))
def test_or_zero_clamps_kadane(values):
    assert max_subarray_sum_or_zero(values) == max(0, max_subarray_sum(values))


@given(st.lists(st.integers(-100, 100), min_size=1))
def test_max_subarray_bounds(values):
    result = max_subarray_sum(values)
    assert result >= max(values)
    assert result >= sum(values)


def test_longest_subarray_example():
    assert longest_subarray_with_sum([2, 3, 5, 1, 9], 10) == 3


@given(st.lists(st.integers(0, 20), max_size=30), st.integers(0, 60))
def test_longest_subarray_window_exists(values, k):
    length = longest_subarray_with_sum(values, k)
    assert 0 <= length <= len(values)
    if length > 0:
        windows = [values[i:i + length] for i in range(len(values) - length + 1)]
        assert any(sum(window) == k for window in windows)


@given(st.lists(st.integers(1, 20), min_size=1, max_size=30))
def test_longest_subarray_whole_sum(values):
    assert longest_subarray_with_sum(values, sum(values)) == len(values)