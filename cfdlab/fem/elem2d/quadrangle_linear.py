"""Bilinear quadrangle element: geometry mapping and basis."""

from __future__ import annotations

from cfdlab.fem.element import BasisType, IElementBasis, IElementGeometry
from cfdlab.geom.jacobi import JacobiMatrix, fill_jacobi_modj_2d
from cfdlab.geom.point import Point, Vector


class QuadrangleLinearGeometry(IElementGeometry):
    """Maps the parametric square [-1, 1]^2 onto the quadrangle p0-p1-p2-p3."""

    def __init__(self, p0: Point, p1: Point, p2: Point, p3: Point) -> None:
        self._points = (p0, p1, p2, p3)
        self._c_1 = (p0 + p1 + p2 + p3) / 4
        self._c_xi = (-p0 + p1 + p2 - p3) / 4
        self._c_eta = (-p0 - p1 + p2 + p3) / 4
        self._c_xieta = (p0 - p1 + p2 - p3) / 4

    def jacobi(self, xi: Point) -> JacobiMatrix:
        dxi = self._c_xi + xi.y * self._c_xieta
        deta = self._c_eta + xi.x * self._c_xieta
        jac = JacobiMatrix(
            j11=dxi.x,
            j12=deta.x,
            j21=dxi.y,
            j22=deta.y,
            j31=dxi.z,
            j32=deta.z,
        )
        return fill_jacobi_modj_2d(jac)

    def to_physical(self, xi: Point) -> Point:
        x, e = xi.x, xi.y
        return self._c_1 + x * self._c_xi + e * self._c_eta + (x * e) * self._c_xieta

    def parametric_center(self) -> Point:
        return Point(0, 0)


class QuadrangleLinearBasis(IElementBasis):
    """Four nodal bilinear basis functions at the square's corners."""

    def size(self) -> int:
        return 4

    def parametric_reference_points(self) -> list[Point]:
        return [Point(-1, -1), Point(1, -1), Point(1, 1), Point(-1, 1)]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * self.size()

    def value(self, xi: Point) -> list[float]:
        x, e = xi.x, xi.y
        return [
            0.25 * (1 - x) * (1 - e),
            0.25 * (1 + x) * (1 - e),
            0.25 * (1 + x) * (1 + e),
            0.25 * (1 - x) * (1 + e),
        ]

    def grad(self, xi: Point) -> list[Vector]:
        x, e = xi.x, xi.y
        return [
            0.25 * Vector(-1 + e, -1 + x),
            0.25 * Vector(1 - e, -1 - x),
            0.25 * Vector(1 + e, 1 + x),
            0.25 * Vector(-1 - e, 1 - x),
        ]