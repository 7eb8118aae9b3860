# algodrills

Solutions to classic algorithm exercises, each one a plain Python function.
The package has no dependencies beyond the standard library.

## Modules

- `algodrills.trees` works on binary trees made of `TreeNode` (`val`, `left`,
  `right`). It provides:
  - `from_level_order` to build a tree from a level-order list, with `None` for a
    missing child.
  - `is_valid_bst`.
  - `lowest_common_ancestor`.
  - `binary_tree_paths`, which returns root-to-leaf paths such as `"1->2->5"`.
  - `diameter_of_binary_tree`.
  - `insert_into_bst`, which sends equal values right.
  - `bst_insert`, which sends equal values left.
  - `prune_tree`, which drops subtrees that hold only zeros.
  - `distribute_coins`.
  - `is_valid_serialization` for comma-separated preorder strings with `#`.
  - `top_view`, which gives the left spine bottom-up, the root, then the right
    spine.
- `algodrills.linked` works on singly linked lists made of `ListNode` (`val`,
  `next`). It provides:
  - `list_from` and `values_of` to convert between nodes and Python lists.
  - `merge_two_lists` to merge two sorted lists.
  - `merge_k_lists` to merge several sorted lists.
- `algodrills.arrays` provides:
  - `find_kth_largest`.
  - `max_sliding_window`.
  - `most_booked` for meeting rooms.
  - `top_k_frequent`.
  - `k_smallest_pairs`, which returns tuples with the largest sum first.
  - `least_interval` for the task scheduler.
  - `shortest_subarray`, which returns the shortest run with a sum of at least k,
    or -1.
- `algodrills.greedy` provides:
  - `candies`.
  - `fair_rations`, which returns a count as a string, or `"NO"`.
  - `goodland_electricity`.
  - `greedy_florist`.
  - `highest_value_palindrome`, which returns `"-1"` when no palindrome can be
    reached.
  - `luck_balance`.
  - `truck_tour`.
- `algodrills.puzzles` provides:
  - `acm_team`, which returns `(max_topics, team_count)`.
  - `consecutive_subsequences`.
  - `running_median`.
  - `manasa_stones`.
  - `non_divisible_subset`.
  - `queens_attack`.
  - `sam_substrings`, which works modulo 10**9 + 7.
  - `sansa_xor`.
  - `special_multiple`.
  - `first_primes`.
  - `waiter`.

Where an input makes no sense, the function raises `ValueError`. Examples are a
`k` outside `1..len(nums)` for `find_kth_largest`, fewer than one room for
`most_booked`, or an empty digit string for `sam_substrings`.

## Installation

```
pip install .
```

To install with the test requirements:

```
pip install ".[test]"
```

## Usage

```python
from algodrills.trees import from_level_order, is_valid_bst, binary_tree_paths
from algodrills.linked import list_from, values_of, merge_k_lists
from algodrills.arrays import max_sliding_window
from algodrills.greedy import candies
from algodrills.puzzles import special_multiple

root = from_level_order([2, 1, 3])
is_valid_bst(root)                    # True
binary_tree_paths(root)               # ['2->1', '2->3']

merged = merge_k_lists([list_from([1, 4]), list_from([2, 3])])
values_of(merged)                     # [1, 2, 3, 4]

max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3)   # [3, 3, 5, 5, 6, 7]
candies([1, 2, 2])                    # 4
special_multiple(7)                   # '9009'
```

## What it does not do

This package is a library only. It has no command-line program, and it does not
read exercise input from standard input or write answers to a file. To use it,
call the functions from Python with ordinary lists, strings and integers.

## Running the tests

```
pytest
```