import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.pizza import MOD, ways


def test_known_layouts():
    assert ways(["A..", "AAA", "..."], 3) == 3
    assert ways(["A..", "AA.", "..."], 3) == 1


def test_single_piece_needs_an_apple():
    assert ways(["A..", "A..", "..."], 1) == 1
    assert ways(["...", "..."], 1) == ways(["..."], 1)
    assert ways([".."], 1) < ways(["A."], 1)


@st.composite
def pizzas(draw):
    h = draw(st.integers(min_value=1, max_value=5))
    w = draw(st.integers(min_value=1, max_value=5))
    row = st.text(alphabet="A.", min_size=w, max_size=w)
    return draw(st.lists(row, min_size=h, max_size=h))


@given(pizzas(), st.integers(min_value=1, max_value=6))
def test_result_is_reduced(pizza, k):
    assert 0 <= ways(pizza, k) < MOD


@given(pizzas(), st.integers(min_value=1, max_value=6))
def test_no_apples_no_ways(pizza, k):
    empty = [row.replace("A", ".") for row in pizza]
    assert ways(empty, k) == ways(["."], 1)


@given(pizzas(), st.integers(min_value=1, max_value=6))
def test_full_of_apples_at_least_as_many_ways(pizza, k):
    full = ["A" * len(row) for row in pizza]
    assert ways(full, k) >= ways(pizza, k)


def test_more_pieces_than_possible():
    assert ways(["AA", "AA"], 4) == ways(["."], 1)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        ways([], 1)
    with pytest.raises(ValueError):
        ways(["A"], 0)
    with pytest.raises(ValueError):
        ways(["AA", "A"], 1)