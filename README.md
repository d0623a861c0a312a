# dsakit

A small, dependency-free collection of classic data structures and
algorithms, written as plain Python functions and classes. It needs
nothing beyond the standard library and supports Python 3.10 and later.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `heap_sort`, `insertion_sort`, `radix_sort`, `randomized_quicksort` |
| `dsakit.searching` | `binary_search`, `search_matrix`, `max_subarray_sum`, `satisfy_equation`, `second_largest_and_smallest`, `maximum_toys` |
| `dsakit.dynamic` | `lcs_length`, `lcs`, `longest_palindromic_subsequence_length`, `common_suffix_length`, `knapsack`, `coin_change_ways`, `subset_sum` |
| `dsakit.matrices` | `spiral_fill`, `sorted_spiral`, `add_matrices`, `format_matrix` |
| `dsakit.basics` | `celsius_to_fahrenheit`, `multiplication_table`, `fibonacci`, `hanoi_moves`, `reverse_each_word`, `booth_multiply`, `booth_trace`, and the `Move`, `BoothStep` and `Student` records |
| `dsakit.expressions` | `simple_infix_to_postfix`, `infix_to_postfix`, `infix_to_prefix`, `evaluate_postfix`, `ExpressionError` |
| `dsakit.containers` | `BoundedStack`, `SingleQueueStack`, `BoundedQueue`, `LinkedQueue`, `ContainerFull`, `ContainerEmpty` |
| `dsakit.singly` | `SinglyLinkedList`, `merge_sorted_lists` |
| `dsakit.doubly` | `DoublyLinkedList` with `merge_sort`, `bubble_pass` and `backward` iteration |
| `dsakit.circular` | `CircularLinkedList` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.lru_cache` | `LRUCache` |
| `dsakit.trie` | `Trie` for words of lower-case letters a-z |
| `dsakit.snapshot_array` | `SnapshotArray` |

The sorting functions return new lists and leave their input untouched.

## Examples

Sorting and searching:

```python
from dsakit.sorting import heap_sort, randomized_quicksort
from dsakit.searching import binary_search, max_subarray_sum

print(heap_sort([12, 11, 13, 5, 6, 7]))              # [5, 6, 7, 11, 12, 13]
print(max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]))  # 6
print(binary_search([1, 3, 4, 5, 6], 10))            # -1

ordered, comparisons = randomized_quicksort([3, 1, 2])
print(ordered)                                       # [1, 2, 3]
```

`randomized_quicksort` takes an optional `random.Random` for repeatable
pivots and returns the sorted list together with a comparison count.
`radix_sort` accepts only non-negative integers and raises `ValueError`
otherwise.

Dynamic programming:

```python
from dsakit.dynamic import lcs, lcs_length, knapsack, coin_change_ways

print(lcs_length("abcdef", "abkldefh"))          # 5
print(lcs("abcdefg", "abefhk"))                  # abef
print(knapsack([10, 20, 30], [60, 100, 120], 50))  # 220
print(coin_change_ways([1, 2, 4, 5, 10], 3))     # 2
```

Expressions:

```python
from dsakit.expressions import infix_to_postfix, infix_to_prefix, evaluate_postfix

print(infix_to_postfix("a+b*(c^d-e)"))  # abcd^e-*+
print(infix_to_prefix("x+y*z"))         # +x*yz
print(evaluate_postfix("23*5+"))        # 11
```

Operands are single ASCII letters or digits; `evaluate_postfix` works on
single-digit operands, ignores spaces and tabs, and truncates division
toward zero. Malformed input raises `ExpressionError`, a `ValueError`.

Containers raise exceptions rather than printing warnings: pushing onto a
full `BoundedStack` or enqueueing into a full `BoundedQueue` raises
`ContainerFull`, and reading from an empty container raises
`ContainerEmpty`. Both are `IndexError` subclasses. A `BoundedQueue` uses
each of its slots once, so after `capacity` enqueues it stays full.

Trees and caches:

```python
from dsakit.bst import BinarySearchTree
from dsakit.lru_cache import LRUCache
from dsakit.trie import Trie

tree = BinarySearchTree([8, 3, 1, 6, 7, 10, 14, 4])
tree.delete(10)
print(tree.inorder())   # [1, 3, 4, 6, 7, 8, 14]

words = Trie(["apple"])
print(words.search("apple"), words.starts_with("app"), words.search("app"))
# True True False

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)
cache.put(3, 3)         # evicts key 2
print(cache.get(2))     # -1
```

## What it does not do

This is a library only: it has no command-line program and no interactive
menus. Linked lists, stacks and queues are used from Python code, and
nothing is read from or saved to disk.

## Running the tests

Install the `test` extra and run `pytest` from the project root.