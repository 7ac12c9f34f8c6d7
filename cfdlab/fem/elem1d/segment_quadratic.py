"""Quadratic basis on the parametric segment [-1, 1]."""

from __future__ import annotations

from cfdlab.fem.element import BasisType, IElementBasis
from cfdlab.geom.point import Point, Vector


class SegmentQuadraticBasis(IElementBasis):
    """Three nodal quadratic basis functions: ends first, then the midpoint."""

    def size(self) -> int:
        return 3

    def parametric_reference_points(self) -> list[Point]:
        return [Point(-1), Point(1), Point(0)]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * 3

    def value(self, xi: Point) -> list[float]:
        x = xi.x
        return [(x * x - x) / 2, (x * x + x) / 2, 1 - x * x]

    def grad(self, xi: Point) -> list[Vector]:
        x = xi.x
        return [Vector((2 * x - 1) / 2), Vector((2 * x + 1) / 2), Vector(-(2 * x))]