# algokit

A collection of classic algorithms and small data structures in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.searching` | `binary_search`, `linear_search`, `search_matrix`, `two_sum_sorted` |
| `algokit.arrays` | `max_subarray_sum` (Kadane), `max_sliding_window`, `trapped_water` |
| `algokit.greedy` | `Item`, `Job`, `fractional_knapsack`, `job_scheduling` |
| `algokit.palindrome` | `reverse_digits`, `is_palindrome_number` |
| `algokit.calculator` | `calculate` and the `algokit-calc` command |
| `algokit.backtracking` | `find_maze_paths` (rat in a maze), `solve_n_queens` |
| `algokit.text_editor` | `TextEditor`, a cursor-based editor buffer |
| `algokit.lru_cache` | `LRUCache` |
| `algokit.trees` | `TreeNode`, `morris_inorder` |
| `algokit.josephus` | `josephus_survivor` |

A few conventions:

- `binary_search`, `linear_search` and `two_sum_sorted` return `None` when
  nothing is found; `two_sum_sorted` gives 1-based positions.
- `max_subarray_sum` raises `ValueError` on an empty sequence, and
  `max_sliding_window` raises `ValueError` for a window smaller than 1.
- `job_scheduling` returns `(jobs done, total profit)`.
- `LRUCache.get` returns `None` for a missing key; the capacity must be at
  least 1.
- `TextEditor.cursor_left` and `cursor_right` return the last (at most ten)
  characters to the left of the cursor; `str(editor)` gives the whole text.
- `morris_inorder` leaves the tree as it found it.
- `josephus_survivor(n, k)` numbers people from 0.

## Examples

```python
from algokit.arrays import max_subarray_sum, trapped_water
from algokit.backtracking import find_maze_paths, solve_n_queens
from algokit.greedy import Item, Job, fractional_knapsack, job_scheduling
from algokit.lru_cache import LRUCache
from algokit.text_editor import TextEditor

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])      # 6
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])    # 6

maze = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]
find_maze_paths(maze)                                   # ['DDRDRR', 'DRDDRR']

len(solve_n_queens(4))                                  # 2

fractional_knapsack(50, [Item(100, 20), Item(60, 10), Item(120, 30)])  # 240.0
job_scheduling([Job(1, 4, 20), Job(2, 1, 10), Job(3, 2, 40), Job(4, 2, 30)])  # (3, 90)

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                                            # 1
cache.get(3)                                            # None

editor = TextEditor()
editor.add_text("leetcode")
editor.cursor_left(4)                                   # 'leet'
```

## Command line

`algokit-calc` evaluates one binary operation:

```
algokit-calc + 2 3
```

This prints `2 + 3 = 5`. Run without arguments, it prompts for the operator
and the two operands. Supported operators are `+`, `-`, `*` and `/`; any other
operator prints `Error! operator is not correct`. Division by zero gives `inf`
or `nan`.

## What is not included

algokit has no sorting functions and no matrix-chain multiplication cost
routines; use Python's built-in `sorted` for ordering sequences.