"""Nearest-neighbour search over a set of points."""

from __future__ import annotations

import heapq
from typing import Iterable

from cfdlab.geom.point import Point


class PointSearcher:
    """Finds the points closest to a given location.

    Only the first ``dim`` coordinates take part in distance computations.
    """

    def __init__(self, points: Iterable[Point] | None = None, dim: int = 3) -> None:
        if dim not in (1, 2, 3):
            raise ValueError(f"dimension must be 1, 2 or 3, got {dim}")
        self._dim = dim
        self._entries: list[tuple[tuple[float, ...], int]] = []
        if points is not None:
            self.add_points(points)

    def _coords(self, p: Point) -> tuple[float, ...]:
        return tuple(p)[: self._dim]

    def add_points(self, points: Iterable[Point]) -> None:
        """Add points; each call numbers its points from zero."""
        for i, p in enumerate(points):
            self._entries.append((self._coords(p), i))

    def nearest(self, p: Point, n: int) -> list[int]:
        """Indices of the ``n`` stored points closest to ``p``, nearest first."""
        target = self._coords(p)

        def distance(entry: tuple[tuple[float, ...], int]) -> float:
            return sum((a - b) ** 2 for a, b in zip(entry[0], target))

        return [idx for _, idx in heapq.nsmallest(n, self._entries, key=distance)]