"""Cubic Lagrange and Hermite bases on the parametric segment [-1, 1]."""

from __future__ import annotations

from cfdlab.fem.element import BasisType, IElementBasis, IElementGeometry
from cfdlab.geom.point import Point, Vector


class SegmentCubicBasis(IElementBasis):
    """Four nodal cubic basis functions at -1, 1, -1/3 and 1/3."""

    def size(self) -> int:
        return 4

    def parametric_reference_points(self) -> list[Point]:
        return [Point(-1), Point(1), Point(-1.0 / 3.0), Point(1.0 / 3.0)]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * 4

    def value(self, xi: Point) -> list[float]:
        x = xi.x
        return [
            (-(9 * x**3) + 9 * x * x + x - 1) / 16.0,
            (9 * x**3 + 9 * x * x - x - 1) / 16.0,
            (27 * x**3 - 9 * x * x - 27 * x + 9) / 16.0,
            (-(27 * x**3) - 9 * x * x + 27 * x + 9) / 16.0,
        ]

    def grad(self, xi: Point) -> list[Vector]:
        x = xi.x
        return [
            Vector((-(27 * x * x) + 18 * x + 1) / 16.0),
            Vector((27 * x * x + 18 * x - 1) / 16.0),
            Vector((81 * x * x - 18 * x - 27) / 16.0),
            Vector((-(81 * x * x) - 18 * x + 27) / 16.0),
        ]


class SegmentHermiteBasis(IElementBasis):
    """Cubic Hermite basis: two nodal values and two physical x-derivatives."""

    def __init__(self, geom: IElementGeometry) -> None:
        self._geom = geom

    def size(self) -> int:
        return 4

    def parametric_reference_points(self) -> list[Point]:
        return [Point(-1), Point(1), Point(-1), Point(1)]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL, BasisType.NODAL, BasisType.DX, BasisType.DX]

    def value(self, xi: Point) -> list[float]:
        x = xi.x
        modj = self._geom.jacobi(xi).modj
        return [
            0.25 * (x**3 - 3 * x + 2),
            0.25 * (-(x**3) + 3 * x + 2),
            0.25 * (x**3 - x * x - x + 1) * modj,
            0.25 * (x**3 + x * x - x - 1) * modj,
        ]

    def grad(self, xi: Point) -> list[Vector]:
        x = xi.x
        modj = self._geom.jacobi(xi).modj
        return [
            Vector(0.25 * (3 * x * x - 3)),
            Vector(0.25 * (3 - 3 * x * x)),
            Vector(0.25 * (3 * x * x - 2 * x - 1) * modj),
            Vector(0.25 * (3 * x * x + 2 * x - 1) * modj),
        ]