# dctree

`dctree` reorders the rows of a sparse graph, such as the adjacency structure of
a sparse matrix or mesh, into a divide-and-conquer tree. At every level the
current range of rows is split into up to `nb_parts` parts. Rows of different
parts share no edge. Rows that touch another part become the *separator*. The
separator is placed at the end of the range and is split again at the next
level. Building the tree leaves every part and every separator in a contiguous
range of rows.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Usage

```python
from dctree.tree import DivideConquer

# A path graph 0-1-2-3-4-5: each row lists its neighbouring rows.
adjacency = [[1], [0, 2], [1, 3], [2, 4], [3, 5], [4]]
values = [1] * len(adjacency)  # per-row weights

dc = DivideConquer(len(adjacency), nb_parts=2, level=3)
dc.build(adjacency, values)

print(dc.row_perm())  # new position of each original row
print(dc.row_rev())   # original row at each new position

def visit(user_args, args):
    user_args.append((args.first_row, args.last_row))

ranges = []
dc.traverse(visit, ranges)
print(ranges)  # half-open row ranges of the tree's leaves, level by level
```

`DivideConquer(global_nb_row, nb_parts, level)` raises `ValueError` for a
negative row count or fewer than one part. `level` is the number of levels
that are split before the remaining rows are left as a single leaf.

`build(adjacency, values)` changes both lists in place. It reorders them to
follow the new row order. Each neighbour list keeps original row identifiers
but is pruned to the neighbours that lie in the same range at each level.
`build` raises `ValueError` when the lengths do not match the row count. It
returns an `int`: the first row of the last range that was left unsplit, or one
past that range when it holds at most one row or has no separator. The tree
itself is available as `dc.root`, a `DCNode` with `first_row`, `last_row`
(exclusive), `nb_parts`, `sons` and `iso` (the separator node).

`traverse(func, user_args=None, level=None)` calls `func(user_args, args)`.
It does so for each non-empty part of a node and for every node that was not
split. Each call receives a `DCArgs` holding a half-open range
`[first_row, last_row)`. Parts come first, then the separator is descended
into. `level` limits how many separator levels are visited; `None` visits them
all.

### Building blocks

The lower-level steps can be used on their own:

- `dctree.partitioning.partition_kway(adjacency, n, k)` splits a graph into `k`
  parts by breadth-first growth. Each part grows to at most `n // k` rows, and
  rows that are never reached go to the last part.
- `dctree.partitioning.extract_local_adjacency(adjacency, values, row_perm,
  first_row, last_row)` builds the subgraph induced by a row range and prunes
  the global neighbour lists of that range in place.
- `dctree.partitioning.build_nodal_graph(adjacency)` flattens an adjacency list
  into compressed index/value arrays.
- `dctree.permutation.create_permutation(part, adjacency, nb_parts)` orders rows
  part by part, with separator rows last and rows breadth-first inside each part.
- `dctree.permutation.permute_in_place(sequence, perm, offset)` reorders a
  slice of a list.
- `dctree.tree.classify_rows(row_part, adjacency, nb_parts)` marks the rows
  that touch another part as separator rows (`dctree.permutation.SEPARATOR`).
  It returns the new part list, the row count per part and the separator count.

## What it does not do

- `traverse` calls the function one range after another in the calling thread.
  It does not run the parts in parallel; that is left to the caller.
- Partitioning is the simple breadth-first growth described above. It does not
  use a multilevel graph partitioner and does not balance the row values.
- There is no command-line tool; the package is used as a library.

## Running the tests

```
pytest
```