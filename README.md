# dsakit

A small library of classic algorithms and data structures: array scans,
rotations, subarray sums, rain-water trapping, candy distribution, book
allocation, sorting and merging, pair and triplet searches, string checks,
matrix symmetry, a pizza-cutting counter, linked stacks and queues, and
n-ary, binary, search and AVL trees.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Arrays

```python
from dsakit.extremes import min_max, largest, second_largest
from dsakit.rotation import rotate_left_by_one, rotate_right
from dsakit.subarrays import max_subarray_sum, longest_subarray_with_sum
from dsakit.water import trapped_water
from dsakit.candy import min_candies
from dsakit.median import median_of_two
from dsakit.combinatorics import pascal_element
from dsakit.allocation import allocate_pages

min_max([1, 423, 6, 46, 34, 23, 13, 53, 4])            # (1, 423)
second_largest([5, 5, 3])                              # 3
rotate_left_by_one([1, 2, 3, 4, 5])                    # [2, 3, 4, 5, 1]
rotate_right([1, 2, 3, 4, 5, 6, 7], 2)                 # [6, 7, 1, 2, 3, 4, 5]
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])      # 6
longest_subarray_with_sum([2, 3, 5, 1, 9], 10)         # 3
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])    # 6
median_of_two([1, 3], [2, 4])                          # 2.5
pascal_element(5, 3)                                   # 6
allocate_pages([10, 20, 30, 40], 2)                    # 60
```

`second_largest` returns `None` when every value equals the maximum.
`max_subarray_sum_or_zero` is the variant that reports 0 instead of a
negative sum. `trapped_water_two_pointer` and `min_candies_by_slopes` are
constant-space alternatives to `trapped_water` and `min_candies`, and
`allocate_pages_brute` tries every split recursively. `allocate_pages`
raises `ValueError` when there are more students than books.

## Searching, sorting and strings

```python
from dsakit.pairs import good_pairs, two_sum, three_sum, two_repeated
from dsakit.sorting import bubble_sort, quick_sort, merge_sorted, merge_without_extra_space
from dsakit.strings import is_anagram, can_make_palindrome
from dsakit.matrix import is_symmetric
from dsakit.pizza import ways

good_pairs([1, 2, 3, 1, 1, 3])                         # 4
two_sum([2, 7, 11, 15], 9)                             # (1, 0)
three_sum([-1, 0, 1, 2, -1, -4])                       # [(-1, -1, 2), (-1, 0, 1)]
two_repeated([1, 2, 1, 3, 4, 3])                       # (1, 3)
quick_sort([24, 9, 29, 14, 19, 27])                    # [9, 14, 19, 24, 27, 29]
merge_sorted([1, 3, 5, 7], [0, 2, 6, 8, 9])            # [0, 1, 2, 3, 5, 6, 7, 8, 9]
merge_without_extra_space([1, 5, 9], [2, 3])           # ([1, 2, 3], [5, 9])
is_anagram("gram", "arm")                              # False
can_make_palindrome(["djfh", "gadt", "hfjd", "tdag"])  # True
is_symmetric([[1, 2], [2, 1]])                         # True
ways(["A..", "AAA", "..."], 3)                         # 3
```

`two_sum` returns `None` when no pair exists; `two_repeated` raises
`ValueError` when fewer than two values repeat. `ways` counts modulo
1 000 000 007.

## Stacks and queues

```python
from dsakit.stacks import LinkedStack, LinkedQueue, reverse_stack

stack = LinkedStack()
for value in (11, 22, 33, 44):
    stack.push(value)
stack.display()   # "44 -> 33 -> 22 -> 11"
stack.pop()       # 44
stack.peek()      # 33

queue = LinkedQueue([10, 20, 30])
queue.dequeue()   # 10
queue.front()     # 20
queue.rear()      # 30

items = [1, 2, 3, 4]
reverse_stack(items)   # items is now [4, 3, 2, 1]
```

Popping, peeking or displaying an empty `LinkedStack` raises `IndexError`;
`LinkedQueue.dequeue`, `front` and `rear` return `None` on an empty queue.

## Trees

```python
from dsakit import avl, bst, binary_tree, nary_tree

root = avl.build([4, 7, 6, 0, 2, 1, 8])
avl.inorder(root)                  # [0, 1, 2, 4, 6, 7, 8]
root = avl.delete(root, 4)

tree = bst.build([5, 3, 8])
bst.height(tree)                   # 2
bst.is_avl(tree)                   # True (checks the root only)

same = binary_tree.is_same_tree(
    binary_tree.from_level_order([1, 2, 3]),
    binary_tree.from_level_order([1, 2, 3]),
)                                  # True

t = binary_tree.from_array([1, 2, 3, 4, 5])
binary_tree.preorder(t)            # [1, 2, 4, 5, 3]
binary_tree.levels(t)              # [[1], [2, 3], [4, 5]]

n = nary_tree.from_level_tokens([1, 2, 5, 3, 0, 0])
nary_tree.max_data_node(n).data    # 5
```

`avl.delete` removes a value by plain search-tree deletion and does not
rebalance. `binary_tree` also offers `inorder`, `postorder`, `level_order`,
`insert_complete`, `insert_sorted` and `has_duplicates`.

## What it does not include

dsakit is a library only: it has no command-line program and reads
nothing from standard input. Every function takes its data as Python
values and returns its result.