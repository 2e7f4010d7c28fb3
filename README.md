# algodrills

A library of small, self-contained solutions to classic algorithm exercises.
Each function takes ordinary Python values (ints, lists, strings, tuples) and
returns its answer. Invalid input is reported by raising an exception,
usually `ValueError`, or `IndexError` for out-of-range queries.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install ".[test]"
```

## Modules

| Module | Topic |
| --- | --- |
| `algodrills.two_pointer` | merging, pair counts, shortest and longest windows |
| `algodrills.dynamic` | `PrefixSums`, `PrefixSums2D`, knapsack, LIS, tiling counts, triangle paths |
| `algodrills.searching` | binary search for membership, budget caps and cut heights |
| `algodrills.graph_search` | BFS/DFS on grids and graphs, backtracking enumerations |
| `algodrills.number_theory` | primes, Euler's phi, modular power, gcd and lcm |
| `algodrills.simulation` | Z-order indexing, land flattening, quad-tree paper counts, the AC language |
| `algodrills.brute_force` | best and worst results of inserting operators |
| `algodrills.greedy` | coins, meetings, merge costs, expressions |
| `algodrills.sliding_window` | window minimums, DNA passwords, circular grouping |
| `algodrills.sorting` | stable member sort, coordinate compression, h-index |
| `algodrills.stacks` | stack commands, text editor, next greater element, string explosion |
| `algodrills.trees` | `MinSegmentTree` and `SumSegmentTree`, traversals, parent discovery |

Range queries on `PrefixSums`, `PrefixSums2D`, `MinSegmentTree` and
`SumSegmentTree` use 1-based positions with both bounds included.

## Examples

```python
from algodrills.two_pointer import merge_sorted, closest_to_zero_pair
from algodrills.dynamic import PrefixSums, knapsack
from algodrills.graph_search import maze_shortest_path
from algodrills.number_theory import mod_pow, primes_between
from algodrills.trees import SumSegmentTree

merge_sorted([3, 5], [2, 9])                  # [2, 3, 5, 9]
closest_to_zero_pair([-2, 4, -99, -1, 98])    # (-99, 98)

sums = PrefixSums([5, 4, 3, 2, 1])
sums.range_sum(1, 3)                          # 12

knapsack(7, [(6, 13), (4, 8), (3, 6), (5, 12)])  # 14

maze_shortest_path(["101111", "101010", "101011", "111011"])  # 15

mod_pow(10, 11, 12)                           # 4
primes_between(3, 16)                         # [3, 5, 7, 11, 13]

tree = SumSegmentTree([1, 2, 3, 4, 5])
tree.update(3, 6)
tree.query(2, 5)                              # 17
```

The AC language in `algodrills.simulation` reports a `D` command on an empty
array by raising `AcError`, a subclass of `ValueError`:

```python
from algodrills.simulation import AcError, apply_ac, format_array, parse_array

apply_ac("RDD", parse_array("[1,2,3,4]"))   # [2, 1]
format_array([2, 1])                        # "[2,1]"
try:
    apply_ac("DD", [42])
except AcError:
    print("error")
```

## What it does not do

The package is a library only. It has no command-line program, and it does
not read problem input from standard input or write answers to standard
output; turning input text into arguments and results into output is left to
the caller.

## Running the tests

```
pytest
```