"""Quadratic basis on the parametric triangle."""

from __future__ import annotations

from cfdlab.fem.element import BasisType, IElementBasis
from cfdlab.geom.point import Point, Vector


class TriangleQuadraticBasis(IElementBasis):
    """Six nodal quadratic basis functions: vertices, then edge midpoints."""

    def size(self) -> int:
        return 6

    def parametric_reference_points(self) -> list[Point]:
        return [
            Point(0, 0),
            Point(1, 0),
            Point(0, 1),
            Point(0.5, 0),
            Point(0.5, 0.5),
            Point(0, 0.5),
        ]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * self.size()

    def value(self, xi: Point) -> list[float]:
        x, y = xi.x, xi.y
        return [
            1 - 3 * x - 3 * y + 4 * x * y + 2 * x * x + 2 * y * y,
            -x + 2 * x * x,
            -y + 2 * y * y,
            4 * x - 4 * x * y - 4 * x * x,
            4 * x * y,
            4 * y - 4 * x * y - 4 * y * y,
        ]

    def grad(self, xi: Point) -> list[Vector]:
        x, y = xi.x, xi.y
        return [
            Vector(-3 + 4 * y + 4 * x, -3 + 4 * x + 4 * y),
            Vector(-1 + 4 * x, 0),
            Vector(0, -1 + 4 * y),
            Vector(4 - 4 * y - 8 * x, -4 * x),
            Vector(4 * y, 4 * x),
            Vector(-4 * y, 4 - 4 * x - 8 * y),
        ]