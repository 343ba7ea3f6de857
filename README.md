# leetsolve

Classic algorithm problems solved in plain Python, with no dependencies beyond the
standard library.

## Installation

```
pip install leetsolve
```

For running the tests:

```
pip install "leetsolve[test]"
pytest
```

## Modules

- `leetsolve.arrays`: `max_profit`, `max_profit_multi`, `can_complete_circuit`, `h_index`,
  `can_jump`, `jump`, `majority_element`, `merge`, `product_except_self`,
  `remove_duplicates`, `remove_duplicates_keep_two`, `remove_element`, `rotate`, and
  `RandomizedSet` (`insert`, `remove`, `get_random`; it also supports `len()` and `in`,
  and takes an optional `random.Random` for reproducible picks).
- `leetsolve.strings`: `str_str` (KMP search), `int_to_roman`, `roman_to_int`,
  `length_of_last_word`, `longest_common_prefix`, `reverse_words` and `convert`
  (zigzag layout).
- `leetsolve.tree`: the `TreeNode` dataclass, `from_level_order` (None marks a missing
  child), `build_tree_from_inorder_postorder`, `build_tree_from_preorder_inorder`,
  `count_nodes`, `flatten`, `invert_tree`, `lowest_common_ancestor`, `max_depth`,
  `has_path_sum`, `is_same_tree`, `sum_numbers` and `is_symmetric`.
- `leetsolve.tree_levels`: `level_order`, `zigzag_level_order`, `right_side_view` and
  `average_of_levels`.
- `leetsolve.listnode`: the `ListNode` class (iterating a node yields the values from it
  to the end), `from_values` and `to_values`.
- `leetsolve.linked_lists`: `add_two_numbers`, `has_cycle`, `merge_two_lists`,
  `partition`, `delete_duplicates`, `remove_nth_from_end`, `reverse_between` and
  `rotate_right`.
- `leetsolve.two_pointers`: `max_area`, `is_subsequence`, `three_sum`, `two_sum_sorted`
  and `is_palindrome`.
- `leetsolve.hashing`: `contains_nearby_duplicate`, `group_anagrams`, `is_happy`,
  `is_isomorphic`, `longest_consecutive`, `can_construct`, `two_sum`, `is_anagram` and
  `word_pattern`.
- `leetsolve.stacks`: `MinStack` (`push`, `pop`, `top`, `get_min`), `eval_rpn`,
  `simplify_path` and `is_valid`.

## Examples

```python
from leetsolve.arrays import can_complete_circuit
from leetsolve.strings import int_to_roman, roman_to_int
from leetsolve.tree import from_level_order, max_depth
from leetsolve.tree_levels import level_order
from leetsolve.listnode import from_values, to_values
from leetsolve.linked_lists import reverse_between
from leetsolve.stacks import MinStack, eval_rpn

can_complete_circuit([2, 3, 4], [3, 4, 3])    # 1
int_to_roman(1994)                            # "MCMXCIV"
roman_to_int("MCMXCIV")                       # 1994

root = from_level_order([3, 9, 20, None, None, 15, 7])
max_depth(root)                               # 3
level_order(root)                             # [[3], [9, 20], [15, 7]]

to_values(reverse_between(from_values([1, 2, 3, 4, 5]), 2, 4))  # [1, 4, 3, 2, 5]

eval_rpn(["2", "1", "+", "3", "*"])           # 9

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()                               # -3
```

## Errors

Where an input has no sensible answer, a function raises rather than returning a
sentinel:

- `ValueError`: `jump` on an empty list, `length_of_last_word` on a string with no word,
  `longest_common_prefix` on an empty list, `convert` with fewer than one row,
  `max_area` on an empty list, `is_happy` on a negative number, `eval_rpn` on an empty
  expression or an operator lacking an operand, the tree builders on traversals that do
  not match, `reverse_between` with positions outside the list, `rotate_right` with a
  negative `k`, and `to_values` on a list that loops.
- `IndexError`: `RandomizedSet.get_random` on an empty set, and `MinStack.top` or
  `MinStack.get_min` on an empty stack.

## What it does not do

This is a library of functions and small classes only. It has no command-line tool and
reads no input of its own; call the functions from your own code.