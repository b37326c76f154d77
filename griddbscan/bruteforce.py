"""Quadratic-time DBSCAN building blocks, useful as a reference."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from griddbscan.point import Point
from griddbscan.unionfind import UnionFind


def _as_points(points: Iterable[Iterable[float]]) -> list[Point]:
    return [Point(p) for p in points]


def core_bf(points: Iterable[Iterable[float]], epsilon: float, min_pts: int) -> list[bool]:
    """For each point, whether at least min_pts points (itself included) lie within epsilon."""
    pts = _as_points(points)
    return [
        sum(1 for q in pts if p.dist(q) <= epsilon) >= min_pts
        for p in pts
    ]


def cluster_core_bf(points: Iterable[Iterable[float]], epsilon: float,
                    core: Sequence[bool]) -> list[int]:
    """Cluster ids of core points (a union-find root); -1 for non-core points."""
    pts = _as_points(points)
    uf = UnionFind(len(pts))
    for i, p in enumerate(pts):
        if not core[i]:
            continue
        for j in range(i + 1, len(pts)):
            if core[j] and p.dist(pts[j]) <= epsilon:
                uf.link(i, j)
    return [uf.find(i) if core[i] else -1 for i in range(len(pts))]


def cluster_border_bf(points: Iterable[Iterable[float]], epsilon: float,
                      core: Sequence[bool], cluster: Sequence[int]) -> list[int]:
    """Assign each non-core point the cluster of its closest core point within epsilon.

    Non-core points with no core point in reach get -1. Core points keep
    their cluster id.
    """
    pts = _as_points(points)
    thresh = epsilon * epsilon
    result = list(cluster)
    for i, p in enumerate(pts):
        if core[i]:
            continue
        cid = -1
        best = math.inf
        for j, q in enumerate(pts):
            if core[j]:
                d = p.dist_sqr(q)
                if d <= thresh and d < best:
                    cid = cluster[j]
                    best = d
        result[i] = cid
    return result