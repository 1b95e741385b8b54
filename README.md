# dsaworkbench

A collection of classic data structures and algorithm exercises, written as
small, self-contained Python modules. Each module works on ordinary Python
values: lists, strings and integers. The package has no runtime dependencies.

## Installation

```
pip install dsaworkbench
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "dsaworkbench[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsaworkbench.arrays` | `peaks_and_valleys_sorted`, `peaks_and_valleys`, `sparse_search`, `magic_index` |
| `dsaworkbench.numbers` | `Person`, `year_with_most_living`, `year_with_most_living_by_deltas`, `number_max`, `count_ways`, `count_ways_memo`, `make_change` |
| `dsaworkbench.edits` | `one_away` |
| `dsaworkbench.hanoi` | `Tower`, `solve_hanoi` |
| `dsaworkbench.bst` | `TreeNode`, `build_minimal_bst`, `build_binary_tree`, `inorder`, `level_order`, `inorder_successor`, `find_node`, `RandomBST` |
| `dsaworkbench.puzzles` | `gcd_of_strings`, `multiply_strings`, `word_exists`, `merge_sorted`, `sum_of_series` |
| `dsaworkbench.lru` | `LRUCache` |
| `dsaworkbench.deques` | `Deque` |
| `dsaworkbench.dynamic_array` | `DynamicArray` |
| `dsaworkbench.complete_tree` | `CompleteBinaryTree` |
| `dsaworkbench.sorting` | `insertion_sort`, `selection_sort`, `bubble_sort`, `bubble_sort_recursive` |
| `dsaworkbench.rbtree` | `Color`, `RBNode`, `RedBlackTree` |
| `dsaworkbench.linked_list` | `LinkedList` |
| `dsaworkbench.problems` | `substring_calculator`, `max_subset_sum`, `count_odd_product_subarrays`, `valid_parentheses`, `cut_off_tree`, `Tree`, `answer_queries` |
| `dsaworkbench.forward_list` | `ForwardList` |

## Examples

```python
from dsaworkbench.puzzles import gcd_of_strings, multiply_strings
from dsaworkbench.numbers import make_change
from dsaworkbench.lru import LRUCache
from dsaworkbench.rbtree import RedBlackTree

gcd_of_strings("ABCABC", "ABC")        # "ABC"
multiply_strings("123456789", "12345") # "1524074060205"
make_change(100)                       # number of ways to make 100 cents

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                           # 1
cache.put(3, 3)                        # evicts key 2
cache.get(2)                           # None
cache.items()                          # [(3, 3), (1, 1)], most recent first

tree = RedBlackTree([7, 6, 5, 4, 3, 2, 1])
tree.search(4)                         # True
tree.remove(6)
tree.inorder()                         # [1, 2, 3, 4, 5, 7]
```

Traversal methods on the tree classes return their values rather than printing
them, so the results can be inspected or asserted on directly.

Errors are raised as exceptions: reading from or popping an empty container
raises `IndexError`, `RedBlackTree.remove` raises `KeyError` for a missing key,
and invalid arguments raise `ValueError`.

## What it does not do

The package is a library only. It installs no command-line program and does
not read input or print results; call its functions from your own code.