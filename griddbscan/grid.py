"""A uniform grid of axis-aligned box cells laid over a point set."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from griddbscan.kdtree import KdTree
from griddbscan.point import Point

CellKey = tuple[int, ...]

# Cells whose centres lie within this many cell widths may hold points
# within one cell-diagonal of each other.
_HOP_SLACK = 1.0000001


def _cell_key(coord: Sequence[float], p_min: Sequence[float], r: float) -> CellKey:
    return tuple(math.floor((x - lo) / r) for x, lo in zip(coord, p_min))


def compare_cell(a: Sequence[float], b: Sequence[float],
                 p_min: Sequence[float], r: float) -> int:
    """Order two coordinates by their grid cell: -1 earlier, 0 same cell, 1 later."""
    key_a = _cell_key(a, p_min, r)
    key_b = _cell_key(b, p_min, r)
    if key_a == key_b:
        return 0
    return 1 if key_a > key_b else -1


@dataclass(eq=False)
class Cell:
    """One non-empty box of the grid: a run of the grid's sorted points."""

    index: int
    key: CellKey
    center: Point
    start: int
    stop: int
    _grid_points: list[Point] = field(repr=False)

    def size(self) -> int:
        """Number of points in the cell."""
        return self.stop - self.start

    @property
    def indices(self) -> range:
        """Positions of the cell's points in the grid's sorted point list."""
        return range(self.start, self.stop)

    def points(self) -> list[Point]:
        """The points held by the cell."""
        return self._grid_points[self.start:self.stop]


class Grid:
    """Points bucketed into cubic cells of side r anchored at p_min."""

    def __init__(self, p_min: Iterable[float], r: float) -> None:
        if not r > 0:
            raise ValueError("cell size must be positive")
        self.p_min = Point(p_min)
        self.r = float(r)
        self.dim = self.p_min.dim
        self.points: list[Point] = []
        self.order: list[int] = []
        self.cells: list[Cell] = []
        self._table: dict[CellKey, Cell] = {}
        self._tree: KdTree | None = None
        self._neighbor_cache: dict[int, list[Cell]] = {}

    def cell_key(self, coord: Sequence[float]) -> CellKey:
        """Integer grid coordinates of the cell containing coord."""
        if len(coord) != self.dim:
            raise ValueError(f"coordinate has dimension {len(coord)}, grid has {self.dim}")
        return _cell_key(coord, self.p_min, self.r)

    def _center(self, key: CellKey) -> Point:
        return Point(self.r / 2 + lo + k * self.r for k, lo in zip(key, self.p_min))

    def insert(self, points: Iterable[Iterable[float]]) -> list[int]:
        """Bucket the points into cells.

        The points are stored in ``self.points`` sorted by cell; the returned
        list gives, for each sorted position, the point's original index.
        """
        given = [Point(p) for p in points]
        for p in given:
            if p.dim != self.dim:
                raise ValueError(f"point has dimension {p.dim}, grid has {self.dim}")
        keys = [self.cell_key(p) for p in given]
        order = sorted(range(len(given)), key=keys.__getitem__)

        self.points = [given[i] for i in order]
        self.order = order
        self.cells = []
        self._table = {}
        self._tree = None
        self._neighbor_cache = {}
        if not given:
            return order

        sorted_keys = [keys[i] for i in order]
        start = 0
        for pos in range(1, len(sorted_keys) + 1):
            if pos == len(sorted_keys) or sorted_keys[pos] != sorted_keys[start]:
                key = sorted_keys[start]
                cell = Cell(len(self.cells), key, self._center(key), start, pos, self.points)
                self.cells.append(cell)
                self._table[key] = cell
                start = pos

        self._tree = KdTree(self.cells, key=lambda c: c.center)
        return order

    def num_cells(self) -> int:
        return len(self.cells)

    def get_cell(self, i: int) -> Cell:
        return self.cells[i]

    def find_cell(self, coord: Sequence[float]) -> Cell | None:
        """The cell containing coord, or None if no point fell there."""
        return self._table.get(self.cell_key(coord))

    def neighbor_cells(self, cell: Cell) -> list[Cell]:
        """Cells that may hold points within one cell-diagonal of the cell, itself included."""
        cached = self._neighbor_cache.get(cell.index)
        if cached is None:
            if self._tree is None:
                raise ValueError("grid holds no points")
            hop = math.sqrt(self.dim + 3) * _HOP_SLACK
            cached = self._tree.range_neighbor(cell.center, self.r * hop)
            self._neighbor_cache[cell.index] = cached
        return cached

    def neighbor_points(self, coord: Sequence[float]) -> list[int]:
        """Sorted-point positions of every point in the cells neighbouring coord's cell."""
        cell = self.find_cell(coord)
        if cell is None:
            raise KeyError(f"no cell contains {tuple(coord)}")
        return [i for nbr in self.neighbor_cells(cell) for i in nbr.indices]