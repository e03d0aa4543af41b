# algokit

A small library of well-known algorithms and data structures in plain
Python, with no third-party dependencies. It needs Python 3.10 or later.

The `test` extra of the package pulls in pytest for running the test suite
in `tests/`.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.caching` | `LRUCache` with `get` and `put`, plus `len()` and `in` |
| `algokit.stacks` | `MinStack`, `eval_rpn`, `is_valid_parentheses` |
| `algokit.linked_lists` | `ListNode` (with `from_values` and `values`), `reverse_list`, `is_palindrome`, `merge_two_lists`, `remove_nth_from_end` |
| `algokit.trees` | `TreeNode` (with `inorder`), `sorted_array_to_bst`, `is_valid_bst`, `is_symmetric` |
| `algokit.bits` | `hamming_distance`, `reverse_bits` |
| `algokit.strings` | `first_uniq_char`, `str_str`, `longest_common_prefix`, `character_replacement`, `min_window`, `check_inclusion`, `roman_to_int`, `my_atoi` |
| `algokit.combinatorics` | `generate_parenthesis`, `subsets`, `subsets_with_dup`, `pascal_triangle` |
| `algokit.searching` | `first_bad_version`, `two_sum_sorted` |
| `algokit.arrays` | `max_profit`, `rob`, `longest_consecutive`, `max_sub_array`, `merge_sorted`, `missing_number`, `product_except_self`, `rotate`, `max_sliding_window`, `top_k_frequent` |
| `algokit.grids` | `rotate_image`, `is_valid_sudoku` |

## Examples

```python
from algokit.caching import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)      # 1
cache.put(3, 3)   # evicts key 2, the least recently used
cache.get(2)      # -1 (algokit.caching.MISSING)
```

```python
from algokit.stacks import MinStack, eval_rpn, is_valid_parentheses

eval_rpn(["2", "1", "+", "3", "*"])   # 9
eval_rpn(["7", "-2", "/"])            # -3, division truncates toward zero
is_valid_parentheses("()[]{}")        # True

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                       # 1
stack.pop()                           # 1
stack.get_min()                       # 3
```

```python
from algokit.linked_lists import ListNode, is_palindrome, reverse_list

head = ListNode.from_values([1, 2, 3])
reverse_list(head).values()           # [3, 2, 1]
is_palindrome(ListNode.from_values([1, 2, 1]))   # True, list left intact
```

```python
from algokit.trees import sorted_array_to_bst, is_valid_bst

root = sorted_array_to_bst([-10, -3, 0, 5, 9])
root.inorder()                        # [-10, -3, 0, 5, 9]
is_valid_bst(root)                    # True
```

```python
from algokit.searching import first_bad_version, two_sum_sorted

first_bad_version(5, lambda version: version >= 4)   # 4
two_sum_sorted([2, 7, 11, 15], 9)                    # (1, 2)
two_sum_sorted([1, 2], 10)                           # None
```

```python
from algokit.strings import my_atoi, roman_to_int

roman_to_int("MCMXCIV")               # 1994
my_atoi("   -42abc")                  # -42
my_atoi("99999999999")                # 2147483647, clamped to 32 bits
```

## Behaviour worth knowing

- Functions that work in place, such as `rotate`, `merge_sorted` and
  `rotate_image`, change the list they are given and return `None`.
- Invalid input raises rather than returning a sentinel: for example
  `LRUCache(0)`, `remove_nth_from_end(head, 0)`, `max_sliding_window` with a
  window wider than the list, `max_profit([])`, `pascal_triangle(0)`, an
  unknown Roman digit or a malformed Sudoku board all raise `ValueError`,
  and `MinStack.pop`, `top` and `get_min` on an empty stack raise
  `IndexError`.
- `top_k_frequent` takes values a whole frequency at a time, so values tied
  with the last one taken are all returned.

## What it does not do

This is a library only: it has no command-line program, and it keeps
nothing on disk.