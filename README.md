# griddbscan

Exact DBSCAN clustering of points in 2 to 20 dimensions.

Points are placed into a grid of cells whose diagonal equals `eps`, so
every point in a cell holding at least `min_samples` points is a core point
without further checks. Neighbouring cells are found through a kd-tree over
the cell centres. Cells holding core points are joined with a union-find
structure whenever their closest pair of core points is within `eps`.
Border points join the cluster of their nearest core point within `eps`.
Points that belong to no cluster are labelled `-1`.

## Installation

```
pip install griddbscan
```

To run the test suite:

```
pip install "griddbscan[test]"
pytest
```

## Using it from Python

The `DBSCAN` function in `griddbscan.api` takes a two-dimensional array of
shape `(n, dim)` and returns the cluster labels and a core-sample mask:

```python
import numpy as np
from griddbscan.api import DBSCAN

X = np.array([
    [0.0, 2.0],
    [1.0, 3.0],
    [1.5, 2.5],
    [2.5, 1.5],
    [4.0, 0.0],
])

labels, core_samples = DBSCAN(X, eps=1.42, min_samples=3)
# labels:       [0, 0, 0, 0, -1]
# core_samples: [False, True, True, False, False]
```

- `eps` (default `0.5`) is the neighbourhood radius.
- `min_samples` (default `5`) is how many points, the point itself
  included, must lie within `eps` for a point to be a core point.
- `X` must be two-dimensional with between 2 and 20 columns; anything else
  raises `ValueError`. Inputs with more than 100,000,000 rows produce a
  `RuntimeWarning`.
- `labels` is an `int` (C `int`) array, `core_samples` a `bool` array.

Cluster labels are numbered from 0 upwards without gaps; noise is `-1`.

The lower-level `griddbscan.algo.dbscan(points, epsilon, min_pts)` takes any
sequence of coordinate sequences and returns a `DbscanResult` with `labels`
and `core` lists in input order. It raises `UnsupportedDimensionError` (a
`ValueError`) when the dimension is outside 2 to 20, and returns empty lists
for empty input.

The building blocks can be used on their own:

- `griddbscan.point`: `Point`, an immutable point with `dist`, `dist_sqr`,
  `dot`, `average`, `normalize` and friends, and `point_min`.
- `griddbscan.grid`: `Grid` and `Cell`, with `insert`, `find_cell`,
  `neighbor_cells` and `neighbor_points`.
- `griddbscan.kdtree`: `KdTree` and `KdNode`, with range queries and
  closest-pair search.
- `griddbscan.unionfind`: `UnionFind` and `EdgeUnionFind`.
- `griddbscan.bccp`: `core_closest_distance` and `has_edge` between cells.
- `griddbscan.bruteforce`: `core_bf`, `cluster_core_bf` and
  `cluster_border_bf`, a straightforward O(n²) reference handy for checking
  results on small inputs.
- `griddbscan.fileio`: `read_header`, `read_doubles`, `write_array`,
  `write_int_array` and `read_int_array` for plain-text files.

## Command line

```
griddbscan [-o <outFile>] [-eps <epsilon>] [-minpts <minpts>] <inFile>
```

The input file is always the last argument. It holds one point per line,
with coordinates separated by spaces, tabs or commas. The dimension is the
number of entries on the first line, or on the second line when the first
one is not numeric; a header made of a single non-numeric word is skipped.
Values left over at the end that do not make up a whole point are dropped.

`-eps` defaults to 1 and `-minpts` defaults to 1; `-minpts` must be a
positive integer. When `-o` is given, the labels are written to that file,
one per line, below a first line reading `cluster-id`; without `-o` nothing
is written. On bad arguments or an unsupported dimension the command prints
a message and exits with status 1.

Example:

```
griddbscan -eps 0.5 -minpts 10 -o labels.txt points.csv
```

## Limitations

All clustering runs in a single thread in pure Python, so it is meant for
inputs of modest size rather than for very large data sets.