"""Points in Euclidean space of any dimension."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True, init=False)
class Point:
    """An immutable point with float coordinates."""

    coords: tuple[float, ...]

    def __init__(self, coords: Iterable[float]) -> None:
        object.__setattr__(self, "coords", tuple(float(c) for c in coords))

    @property
    def dim(self) -> int:
        return len(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self.coords)

    def __getitem__(self, i: int) -> float:
        return self.coords[i]

    def _pairs(self, other: Iterable[float]) -> Iterator[tuple[float, float]]:
        other_coords = tuple(other)
        if len(other_coords) != len(self.coords):
            raise ValueError(
                f"dimension mismatch: {len(self.coords)} and {len(other_coords)}"
            )
        return zip(self.coords, other_coords)

    def __sub__(self, other: Point) -> Point:
        return Point(a - b for a, b in self._pairs(other))

    def __mul__(self, factor: float) -> Point:
        return Point(a * factor for a in self.coords)

    def __truediv__(self, divisor: float) -> Point:
        return Point(a / divisor for a in self.coords)

    def dist_sqr(self, other: Point) -> float:
        """Squared Euclidean distance to another point."""
        return sum((a - b) * (a - b) for a, b in self._pairs(other))

    def dist(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.dist_sqr(other))

    def average(self, other: Point) -> Point:
        """The midpoint between this point and another."""
        return Point((b + a) / 2 for a, b in self._pairs(other))

    def dot(self, other: Point) -> float:
        return sum(a * b for a, b in self._pairs(other))

    def normalize(self) -> Point:
        """This point scaled to unit length."""
        norm = math.sqrt(sum(a * a for a in self.coords))
        if norm == 0:
            raise ValueError("cannot normalize a zero vector")
        return self / norm

    def quadrant(self, center: Point) -> int:
        """Orthant index: bit i is set when coordinate i exceeds the center's."""
        return sum(1 << i for i, (a, c) in enumerate(self._pairs(center)) if a > c)

    def out_of_box(self, center: Point, half_size: float) -> bool:
        """Whether the center lies outside the box of half-width half_size around this point."""
        return any(
            a - half_size > c or a + half_size < c for a, c in self._pairs(center)
        )

    def min_coords(self, other: Iterable[float]) -> Point:
        """Coordinate-wise minimum with another point."""
        return Point(min(a, b) for a, b in self._pairs(other))

    def max_coords(self, other: Iterable[float]) -> Point:
        """Coordinate-wise maximum with another point."""
        return Point(max(a, b) for a, b in self._pairs(other))


def point_min(points: Iterable[Point]) -> Point:
    """Coordinate-wise minimum of a non-empty collection of points."""
    iterator = iter(points)
    try:
        result = Point(next(iterator))
    except StopIteration:
        raise ValueError("point_min of an empty collection") from None
    for p in iterator:
        result = result.min_coords(p)
    return result