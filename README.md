# dsakit

A small collection of classic data structures and algorithms, written as
plain Python functions and classes with no third-party dependencies.

## Installation

```
pip install dsakit
```

Install the test extra to run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `find_duplicates`, `max_min`, `min_partition_difference`, `missing_elements`, `reverse_range` |
| `dsakit.searching` | `binary_search`, `find_peak`, `linear_search`, `binary_contains` |
| `dsakit.sorting` | `selection_sort`, `counting_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `insertion_sort`, `wave_sort` |
| `dsakit.dp` | Fibonacci, stair climbing and factorial (recursive, memoized and tabulated), `longest_increasing_subsequence`, `Box` and `max_stack_height`, `dice_ways`, `edit_distance` |
| `dsakit.stack` | `Stack` with `push`, `pop`, `is_empty`; `StackOverflowError`, `StackUnderflowError` |
| `dsakit.graph` | `undirected_adjacency`, `dfs_traversal`, `has_cycle`, `count_provinces` |
| `dsakit.huffman` | `HuffmanNode`, `build_tree`, `assign_codes`, `HuffmanCodec` |
| `dsakit.scheduling` | `Job`, `schedule_jobs` |
| `dsakit.linked_list` | `ListNode`, `DoublyNode`, list building, loop detection, searching, middle element, quick sort and reversal in groups |

## Notes on behaviour

- Every function in `dsakit.sorting` takes an iterable and returns a new list;
  the input is left alone.
- `counting_sort` emits a `RuntimeWarning` when the value range is wider than
  `RANGE_LIMIT` (1,000,000). `radix_sort` raises `ValueError` for negative
  numbers.
- `binary_search` and `linear_search` return the index, or `None` when the key
  is absent.
- `dice_ways` counts modulo `10**9 + 7`.
- `Stack` holds at most `capacity` items (1000 by default). Pushing onto a full
  stack raises `StackOverflowError`; popping an empty one raises
  `StackUnderflowError`.
- `HuffmanCodec` takes symbol frequencies (a mapping or `(symbol, count)`
  pairs); `HuffmanCodec.from_text` counts the characters of a string for you.
  Encoded data is a string of `"0"` and `"1"` characters, not packed bytes.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.dp import edit_distance, fibonacci_tabulated

merge_sort([6, 5, 12, 10, 9, 1])          # [1, 5, 6, 9, 10, 12]
binary_search([2, 4, 6, 8, 12, 18], 6)    # 2
edit_distance("horse", "ros")             # 3
fibonacci_tabulated(10)                   # 55
```

```python
from dsakit.huffman import HuffmanCodec

codec = HuffmanCodec.from_text("Huffman coding is a data compression algorithm.")
bits = codec.encode("data")
codec.decode(bits)                        # "data"
```

```python
from dsakit.stack import Stack

stack = Stack()
stack.push(1)
stack.push(2)
stack.pop()                               # 2
```

```python
from dsakit.linked_list import build_list, quick_sort_list, to_list

head = build_list([30, 3, 4, 20, 5])
to_list(quick_sort_list(head))            # [3, 4, 5, 20, 30]
```

## What it does not do

dsakit is a library only: it has no command-line program and reads no input
of its own. The functions return their results rather than printing them, so
reading data and showing output are left to the calling code.