# dsalgo

Small, dependency-free implementations of classic textbook algorithms:
shortest paths and path matrices on graphs, step-by-step sorting, factorial
computed with an accumulator, and a few helpers for student records.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs (`dsalgo.graph`)

Graphs are given as square weighted adjacency matrices (lists of lists) with
0-based node indices. An entry greater than zero is the weight of an edge; zero
means there is no edge.

```python
from dsalgo.graph import shortest_path, path_matrix, power_matrix, format_matrix

adj = [
    [0, 4, 1],
    [0, 0, 0],
    [0, 2, 0],
]

result = shortest_path(adj, 0, 1)
# ShortestPath(distance=3, path=(0, 2, 1))

shortest_path(adj, 1, 0)   # None: node 0 cannot be reached from node 1

print(format_matrix(power_matrix(adj, 2), 4))  # adj raised to the power 2
print(format_matrix(path_matrix(adj), 4))      # 1 where a path of length 1..n exists
```

- `shortest_path(adj, source, dest)` runs Dijkstra's algorithm and returns a
  `ShortestPath` (fields `distance` and `path`) or `None` when `dest` cannot be
  reached. Distances of `INFINITY` (9999) or more are treated as unreachable.
  A node outside the graph or a non-square matrix raises `ValueError`.
- `multiply(mat1, mat2)` returns the matrix product; mismatched dimensions raise
  `ValueError`.
- `power_matrix(adj, p)` returns `adj` to the power `p`; a `p` of 1 or less
  gives a copy of `adj`.
- `to_boolean(matrix)` turns every non-zero entry into 1.
- `path_matrix(adj)` adds the powers 1..n of the boolean adjacency matrix and
  turns the sum into a boolean reachability matrix.
- `format_matrix(matrix, width=4)` renders rows of right-aligned columns, one
  row per line.

## Sorting (`dsalgo.sorting`)

Every function returns a new sorted list; the input is left as it is.

```python
from dsalgo.sorting import (
    insertion_sort, insertion_sort_passes,
    merge_sort, merge_sort_passes,
    bubble_sort,
)

insertion_sort([5, 2, 9, 1])    # [1, 2, 5, 9]
merge_sort([5, 2, 9, 1])        # [1, 2, 5, 9]
bubble_sort([5, 2, 9, 1])       # [1, 2, 5, 9]

for pass_number, inserted, snapshot in insertion_sort_passes([5, 2, 9, 1]):
    print(pass_number, inserted, snapshot)

for size, snapshot in merge_sort_passes([5, 2, 9, 1]):
    print(size, snapshot)
```

`insertion_sort_passes` yields the pass number, the element inserted in that
pass and the list afterwards. `merge_sort_passes` works bottom-up with no
recursion: it merges runs of size 1, then 2, then 4, and so on, yielding the
run size and the list after each pass. The merge is stable.

## Recursion (`dsalgo.recursion`)

```python
from dsalgo.recursion import factorial

factorial(5)   # 120
factorial(0)   # 1
```

A negative argument raises `ValueError`.

## Records (`dsalgo.records`)

```python
from dsalgo.records import Student, grade, total

grade(80)   # "A"  (75 and above)
grade(60)   # "B"  (50 to 74)
grade(30)   # "F"  (below 50)

student = Student(name="asha", school_class=10, marks=68)
student.grade()   # "B"

total([1, 2, 3])  # 6
```

## What this package does not do

There is no command-line program and nothing reads from the keyboard: the
graphs, lists and records are passed to the functions directly, and results
are returned rather than printed.