"""A Euclidean kd-tree split at the spatial median of the widest dimension."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Sequence

Coord = tuple[float, ...]


class _Relation(Enum):
    INCLUDE = 0
    OVERLAP = 1
    EXCLUDE = 2


def _box_relation(min1: Sequence[float], max1: Sequence[float],
                  min2: Sequence[float], max2: Sequence[float]) -> _Relation:
    """How box 1 relates to box 2: includes it, overlaps it, or excludes it."""
    exclude = False
    include = True
    for lo1, hi1, lo2, hi2 in zip(min1, max1, min2, max2):
        if hi1 < lo2 or lo1 > hi2:
            exclude = True
        if hi1 < hi2 or lo1 > lo2:
            include = False
    if exclude:
        return _Relation.EXCLUDE
    return _Relation.INCLUDE if include else _Relation.OVERLAP


def _in_box(box_min: Sequence[float], box_max: Sequence[float], coord: Coord) -> bool:
    return all(lo <= c <= hi for lo, hi, c in zip(box_min, box_max, coord))


@dataclass
class ClosestPair:
    """The closest pair of items found so far and their distance."""

    u: Any = None
    v: Any = None
    dist: float = math.inf

    def update(self, u: Any, v: Any, dist: float) -> None:
        if dist < self.dist:
            self.u, self.v, self.dist = u, v, dist


class KdNode:
    """A node of a kd-tree holding its items and their bounding box."""

    def __init__(self, entries: list[tuple[Any, Coord]], leaf_size: int = 16) -> None:
        if not entries:
            raise ValueError("a kd-tree node needs at least one item")
        coords = [coord for _, coord in entries]
        self.box_min: Coord = tuple(map(min, zip(*coords)))
        self.box_max: Coord = tuple(map(max, zip(*coords)))
        self.left: KdNode | None = None
        self.right: KdNode | None = None

        if len(entries) > leaf_size:
            spans = [hi - lo for lo, hi in zip(self.box_min, self.box_max)]
            k = spans.index(max(spans))
            mid = (self.box_max[k] + self.box_min[k]) / 2
            lower = [e for e in entries if e[1][k] < mid]
            upper = [e for e in entries if e[1][k] >= mid]
            if not lower or not upper:
                half = (len(entries) + 1) // 2
                lower, upper = entries[:half], entries[half:]
            entries = lower + upper
            self.left = KdNode(lower, leaf_size)
            self.right = KdNode(upper, leaf_size)

        self.items: list[Any] = [item for item, _ in entries]
        self.coords: list[Coord] = [coord for _, coord in entries]

    def __len__(self) -> int:
        return len(self.items)

    def is_leaf(self) -> bool:
        return self.left is None

    def node_distance(self, other: KdNode) -> float:
        """Distance between the bounding boxes; zero when they intersect."""
        total = 0.0
        for lo1, hi1, lo2, hi2 in zip(self.box_min, self.box_max,
                                      other.box_min, other.box_max):
            gap = max(lo1 - hi2, lo2 - hi1, 0.0)
            total += gap * gap
        return math.sqrt(total)

    def node_far_distance(self, other: KdNode) -> float:
        """Diagonal of the box enclosing both bounding boxes."""
        total = 0.0
        for lo1, hi1, lo2, hi2 in zip(self.box_min, self.box_max,
                                      other.box_min, other.box_max):
            span = max(hi1, hi2) - min(lo1, lo2)
            total += span * span
        return math.sqrt(total)

    def node_diag(self) -> float:
        """Diagonal length of the bounding box."""
        return math.sqrt(sum((hi - lo) ** 2 for lo, hi in zip(self.box_min, self.box_max)))

    def l_max(self) -> float:
        """Largest side of the bounding box."""
        return max([0.0, *(hi - lo for lo, hi in zip(self.box_min, self.box_max))])

    def well_separated(self, other: KdNode, s: float = 2) -> bool:
        """Whether the enclosing balls of the two boxes are s-separated."""
        diam_u = self.node_diag()
        diam_v = other.node_diag()
        centers = 0.0
        for lo1, hi1, lo2, hi2 in zip(self.box_min, self.box_max,
                                      other.box_min, other.box_max):
            diff = (hi1 + lo1) / 2 - (hi2 + lo2) / 2
            centers += diff * diff
        radius = max(diam_u, diam_v) / 2
        gap = math.sqrt(centers) - diam_u / 2 - diam_v / 2
        return gap >= s * radius

    def range_neighbor(self, query: Sequence[float], r: float,
                       box_min: Sequence[float], box_max: Sequence[float]) -> Iterator[Any]:
        """Yield items within distance r of query, limited to the given box."""
        relation = _box_relation(box_min, box_max, self.box_min, self.box_max)
        if relation is _Relation.INCLUDE:
            for item, coord in zip(self.items, self.coords):
                if math.dist(coord, query) <= r:
                    yield item
        elif relation is _Relation.OVERLAP:
            if self.is_leaf():
                for item, coord in zip(self.items, self.coords):
                    if math.dist(coord, query) <= r and _in_box(box_min, box_max, coord):
                        yield item
            else:
                yield from self.left.range_neighbor(query, r, box_min, box_max)
                yield from self.right.range_neighbor(query, r, box_min, box_max)

    def closest_pair(self, other: KdNode) -> ClosestPair:
        """The closest pair with one item from each node."""
        best = ClosestPair()
        self._closest_pair_into(other, best)
        return best

    def _ordered_children(self, parent: KdNode) -> tuple[KdNode, KdNode]:
        if self.node_distance(parent.left) < self.node_distance(parent.right):
            return parent.left, parent.right
        return parent.right, parent.left

    def _closest_pair_into(self, other: KdNode, best: ClosestPair) -> None:
        if self.node_distance(other) > best.dist:
            return
        if self.is_leaf() and other.is_leaf():
            for u, u_coord in zip(self.items, self.coords):
                for v, v_coord in zip(other.items, other.coords):
                    best.update(u, v, math.dist(u_coord, v_coord))
        elif self.is_leaf():
            for child in self._ordered_children(other):
                self._closest_pair_into(child, best)
        elif other.is_leaf():
            for child in other._ordered_children(self):
                other._closest_pair_into(child, best)
        else:
            pairs = [
                (other.left, self.left),
                (other.right, self.left),
                (other.left, self.right),
                (other.right, self.right),
            ]
            pairs.sort(key=lambda pair: pair[0].node_distance(pair[1]))
            for a, b in pairs:
                a._closest_pair_into(b, best)


class KdTree:
    """A kd-tree over arbitrary items located by a coordinate key."""

    def __init__(self, items: Iterable[Any],
                 key: Callable[[Any], Iterable[float]] | None = None,
                 leaf_size: int = 16) -> None:
        if leaf_size < 1:
            raise ValueError("leaf_size must be at least 1")
        locate = key if key is not None else tuple
        entries = [(item, tuple(float(c) for c in locate(item))) for item in items]
        if not entries:
            raise ValueError("cannot build a kd-tree over no items")
        dims = {len(coord) for _, coord in entries}
        if len(dims) != 1:
            raise ValueError("all items must have the same dimension")
        self.dim = dims.pop()
        self.root = KdNode(entries, leaf_size)

    def __len__(self) -> int:
        return len(self.root)

    def range_neighbor(self, center: Iterable[float], r: float) -> list[Any]:
        """All items within distance r of center."""
        query = tuple(float(c) for c in center)
        if len(query) != self.dim:
            raise ValueError(f"query has dimension {len(query)}, tree has {self.dim}")
        box_min = tuple(c - r for c in query)
        box_max = tuple(c + r for c in query)
        return list(self.root.range_neighbor(query, r, box_min, box_max))