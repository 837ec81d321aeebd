import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.binary_tree import (
    Node,
    from_array,
    from_level_order,
    has_duplicates,
    inorder,
    insert_complete,
    insert_level_order,
    insert_sorted,
    is_same_tree,
    level_order,
    levels,
    postorder,
    preorder,
    prune_zeros,
)

NUMARR = [1, 2, 3, 4, 5, 6, 7, 0, 8, 9, 0, 0, 0, 10, 11, 12, 13, 0, 14, 15, 0, 16, 17]


def test_same_tree_example_differs():
    assert not is_same_tree(from_level_order([100, 200, 0]), from_level_order([100, 200, 300]))


def test_same_tree_with_itself_and_empty():
    assert is_same_tree(from_level_order([1, 2, 3]), from_level_order([1, 2, 3]))
    assert is_same_tree(None, None)
    assert not is_same_tree(Node(1), None)


def test_same_tree_shape_matters():
    assert not is_same_tree(from_level_order([1, 2]), from_level_order([1, -1, 2]))


def test_small_tree_traversals():
    root = from_level_order([1, 2, 3])
    assert preorder(root) == [1, 2, 3]
    assert inorder(root) == [2, 1, 3]
    assert postorder(root) == [2, 3, 1]
    assert level_order(root) == [1, 2, 3]


def test_levels_grouping():
    assert levels(from_level_order([1, 2, 3, 4])) == [[1], [2, 3], [4]]


def test_from_level_order_empty_and_dangling():
    assert from_level_order([]) is None
    with pytest.raises(ValueError):
        from_level_order([1, -1, -1, 2])


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1))
def test_from_level_order_round_trip(values):
    root = from_level_order(values)
    assert level_order(root) == values


def test_from_array_level_order_drops_zero_slots():
    root = from_array(NUMARR)
    assert level_order(root) == [v for v in NUMARR if v]


def test_from_array_traversals_are_permutations():
    root = from_array(NUMARR)
    expected = sorted(v for v in NUMARR if v)
    assert sorted(preorder(root)) == expected
    assert sorted(inorder(root)) == expected
    assert sorted(postorder(root)) == expected
    assert preorder(root)[0] == postorder(root)[-1] == NUMARR[0]


def test_insert_level_order_skips_zero_placeholder():
    root = insert_level_order(None, 1)
    root = insert_level_order(root, 0)
    root = insert_level_order(root, 2)
    root = insert_level_order(root, 3)
    assert root.left.data == 0 and root.left.left is None
    assert root.right.left.data == 3
    prune_zeros(root)
    assert root.left is None


def test_from_array_empty():
    assert from_array([]) is None


@given(st.lists(st.integers(), min_size=1))
def test_insert_complete_fills_level_order(values):
    root = None
    for value in values:
        root = insert_complete(root, value)
    assert level_order(root) == values


@given(st.lists(st.integers()))
def test_insert_sorted_inorder_is_sorted(values):
    root = None
    for value in values:
        root = insert_sorted(root, value)
    assert inorder(root) == sorted(values)


def test_has_duplicates_example():
    root = None
    for value in (5, 3, 7, 2, 4, 6, 8):
        root = insert_complete(root, value)
    assert not has_duplicates(root)
    insert_complete(root, 5)
    assert has_duplicates(root)


@given(st.lists(st.integers()))
def test_has_duplicates_matches_set_size(values):
    root = None
    for value in values:
        root = insert_sorted(root, value)
    assert has_duplicates(root) == (len(set(values)) != len(values))