"""Grid-based exact DBSCAN clustering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from griddbscan.bccp import has_edge
from griddbscan.grid import Grid
from griddbscan.kdtree import KdTree
from griddbscan.point import Point, point_min
from griddbscan.unionfind import UnionFind

MIN_DIMS = 2
MAX_DIMS = 20


class UnsupportedDimensionError(ValueError):
    """Raised when the data's dimension is outside the supported range."""

    def __init__(self, dim: int) -> None:
        super().__init__(
            f"dimension {dim} is not supported (must be {MIN_DIMS} to {MAX_DIMS})"
        )
        self.dim = dim


@dataclass
class DbscanResult:
    """Per-point cluster labels (-1 for noise) and core flags, in input order."""

    labels: list[int]
    core: list[bool]


def _mark_core(grid: Grid, eps_sqr: float, min_pts: int) -> list[bool]:
    points = grid.points
    core = [False] * len(points)
    for cell in grid.cells:
        if cell.size() >= min_pts:
            for i in cell.indices:
                core[i] = True
    for i, p in enumerate(points):
        if core[i]:
            continue
        count = 0
        for j in grid.neighbor_points(p):
            if count >= min_pts:
                break
            if points[j].dist_sqr(p) <= eps_sqr:
                count += 1
        core[i] = count >= min_pts
    return core


def _cluster_cores(grid: Grid, core: list[bool], epsilon: float) -> list[int]:
    cells = grid.cells
    has_core = [any(core[i] for i in cell.indices) for cell in cells]
    uf = UnionFind(len(cells))
    trees: dict[int, KdTree] = {}
    for cell in cells:
        i = cell.index
        if not has_core[i]:
            continue
        for nbr in grid.neighbor_cells(cell):
            j = nbr.index
            if (j < i and has_core[j] and uf.find(i) != uf.find(j)
                    and has_edge(cell, nbr, core, epsilon, trees)):
                uf.link(i, j)

    cluster = [-1] * len(grid.points)
    for cell in cells:
        cid = cells[uf.find(cell.index)].start
        for p in cell.indices:
            if core[p]:
                cluster[p] = cid
    return cluster


def _cluster_borders(grid: Grid, core: list[bool], cluster: list[int],
                     eps_sqr: float) -> None:
    points = grid.points
    for i, p in enumerate(points):
        if core[i]:
            continue
        cid = -1
        best = math.inf
        for j in grid.neighbor_points(p):
            if core[j]:
                d = points[j].dist_sqr(p)
                if d <= eps_sqr and d < best:
                    best = d
                    cid = cluster[j]
        cluster[i] = cid


def _relabel(cluster: list[int]) -> list[int]:
    ranks = {cid: rank for rank, cid in enumerate(sorted(set(cluster) - {-1}))}
    return [ranks.get(cid, -1) for cid in cluster]


def dbscan(points: Iterable[Iterable[float]], epsilon: float, min_pts: int) -> DbscanResult:
    """Cluster points with DBSCAN.

    Clusters are numbered 0, 1, ... and noise points are labelled -1.
    """
    pts = [Point(p) for p in points]
    if not pts:
        return DbscanResult([], [])
    dim = pts[0].dim
    if not MIN_DIMS <= dim <= MAX_DIMS:
        raise UnsupportedDimensionError(dim)
    epsilon = float(epsilon)
    eps_sqr = epsilon * epsilon

    grid = Grid(point_min(pts), epsilon / math.sqrt(dim))
    order = grid.insert(pts)

    core = _mark_core(grid, eps_sqr, min_pts)
    cluster = _cluster_cores(grid, core, epsilon)
    _cluster_borders(grid, core, cluster, eps_sqr)
    labels = _relabel(cluster)

    n = len(pts)
    out_labels = [-1] * n
    out_core = [False] * n
    for pos, original in enumerate(order):
        out_labels[original] = labels[pos]
        out_core[original] = core[pos]
    return DbscanResult(out_labels, out_core)