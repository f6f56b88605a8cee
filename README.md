# algodrills

A small collection of algorithm drills with a plain Python API and a
command-line runner that reads problem input from standard input.

## What is inside

- `algodrills.union_find`
  - `UnionFind(n)`: disjoint sets over `0 .. n-1` with `find`, `union`,
    `connected`, and `ids()` / `sizes()` returning copies of the parent
    links and root weights. Each node's weight starts at its own index; a
    union hangs the lighter root below the heavier one.
  - `WeightedQuickUnionUF(n)`: the same operations plus `union_count()`
    (number of sets, single nodes included), `components()` (root to member
    list) and `info()` (a text summary of the total set count and every set
    with more than one node).
  - Nodes outside `0 .. n-1` raise `IndexError`; a negative `n` raises
    `ValueError`.
- `algodrills.recall`: `merge_recall_queues(queues, weights, final_size)`
  takes items from each queue, heaviest weight first, giving each queue a
  share of the remaining size by its share of the remaining weight (rounded
  up) and skipping items already taken.
- `algodrills.problems`:
  - `banner()`: a fixed ASCII-art picture as a string.
  - `a_plus_b(a, b)`: the sum of two integers.
  - `horse_paths(tx, ty, mx, my)`: the number of monotone lattice paths
    from `(0, 0)` to `(tx, ty)` that avoid a horse at `(mx, my)` and every
    square it attacks.
  - `top_carpet(carpets, x, y)`: the 1-based number of the topmost carpet
    `(a, b, g, k)` covering the point, or `-1`.
  - `all_subarray_sum(values)`: the total of the sums of all contiguous
    subarrays.
- `algodrills.grid_paths`: `max_two_paths(grid)` returns the largest total
  two walks from the top-left to the bottom-right corner of a square grid
  can collect, moving down or right, with a shared cell counted once.
- `algodrills.inputs`: `read_sized(stream)` reads a count followed by that
  many unsigned 32-bit integers; `read_line(stream)` reads all integers on
  the next non-blank line. Both raise `EOFError` when input runs out and
  `ValueError` on bad or out-of-range tokens.

## Install

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Using the library

```python
from algodrills.union_find import UnionFind, WeightedQuickUnionUF
from algodrills.recall import merge_recall_queues
from algodrills.problems import a_plus_b, horse_paths, all_subarray_sum

uf = UnionFind(5)
uf.union(0, 1)
uf.union(3, 4)
uf.connected(0, 1)   # True
uf.connected(1, 3)   # False

wuf = WeightedQuickUnionUF(4)
wuf.union(0, 1)
wuf.union_count()    # 3

a_plus_b(1, 2)               # 3
horse_paths(6, 6, 3, 3)      # 6
all_subarray_sum([2, 1, 2])  # 16

merge_recall_queues(
    [["1", "2", "3"],
     ["4", "5", "3", "2", "1", "10", "7"],
     ["11", "3", "6", "8"]],
    [3, 5, 4],
    10,
)
# ['4', '5', '3', '2', '1', '11', '6', '8']
```

## Command line

The `algodrills` command runs one problem on whitespace-separated integers
read from standard input and prints the answer. Commands:

| command    | input                                              | output                         |
|------------|----------------------------------------------------|--------------------------------|
| `banner`   | none                                               | the ASCII-art picture          |
| `a-plus-b` | `a b`                                              | `a + b`                        |
| `horse`    | `tx ty mx my`                                      | paths avoiding the horse       |
| `carpet`   | `n`, then `n` lines of `a b g k`, then `x y`       | topmost carpet number or `-1`  |
| `grid`     | `n`, then 1-based `x y v` triples ending `0 0 0`   | best two-walk total            |
| `subarray` | `n`, then `n` integers                             | sum over all subarrays         |

```
$ echo "1 2" | algodrills a-plus-b
3
$ echo "6 6 3 3" | algodrills horse
6
$ printf "3\n1 0 2 3\n0 2 3 3\n2 1 3 3\n2 2\n" | algodrills carpet
3
$ printf "3\n2 1 2\n" | algodrills subarray
16
```

Malformed or short input prints a message to standard error and exits
with status 1. For the full list of commands:

```
algodrills --help
```

## Tests

```
pytest
```