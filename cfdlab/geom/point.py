"""Three-dimensional points and vectors with basic vector algebra."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator


class Point:
    """Mutable 3D point; also used as a 3D vector."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y, -self.z)

    def __mul__(self, a: float) -> Point:
        if not isinstance(a, Real):
            return NotImplemented
        return Point(a * self.x, a * self.y, a * self.z)

    def __rmul__(self, a: float) -> Point:
        return self.__mul__(a)

    def __truediv__(self, a: float) -> Point:
        if not isinstance(a, Real):
            return NotImplemented
        return Point(self.x / a, self.y / a, self.z / a)

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __setitem__(self, i: int, value: float) -> None:
        names = ("x", "y", "z")
        setattr(self, names[i], value)

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r}, {self.z!r})"


Vector = Point


def dot_product(v1: Point, v2: Point) -> float:
    """Dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross_product(v1: Point, v2: Point) -> Point:
    """Cross product of two vectors."""
    return Point(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def cross_product_2d(v1: Point, v2: Point) -> float:
    """The z component of the cross product."""
    return v1.x * v2.y - v1.y * v2.x


def vector_abs(v: Point) -> float:
    """Vector length."""
    return math.sqrt(vector_meas(v))


def vector_meas(v: Point) -> float:
    """Squared vector length."""
    return v.x * v.x + v.y * v.y + v.z * v.z