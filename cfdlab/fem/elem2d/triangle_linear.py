"""Linear triangle element: geometry, basis and analytic integrals."""

from __future__ import annotations

import dataclasses

from cfdlab.fem.element import BasisType, IElementBasis, IElementGeometry, IElementIntegrals
from cfdlab.geom.jacobi import JacobiMatrix
from cfdlab.geom.point import Point, Vector, cross_product, vector_abs


class TriangleLinearGeometry(IElementGeometry):
    """Maps the parametric triangle (0,0)-(1,0)-(0,1) onto p0-p1-p2."""

    def __init__(self, p0: Point, p1: Point, p2: Point) -> None:
        self._p0 = p0
        self._p1 = p1
        self._p2 = p2
        self._jac = JacobiMatrix(
            j11=p1.x - p0.x,
            j12=p2.x - p0.x,
            j21=p1.y - p0.y,
            j22=p2.y - p0.y,
            j31=p1.z - p0.z,
            j32=p2.z - p0.z,
            modj=vector_abs(cross_product(p1 - p0, p2 - p0)),
        )

    def jacobi(self, xi: Point) -> JacobiMatrix:
        return dataclasses.replace(self._jac)

    def to_physical(self, xi: Point) -> Point:
        x, e = xi.x, xi.y
        return (1 - x - e) * self._p0 + x * self._p1 + e * self._p2

    def parametric_center(self) -> Point:
        return Point(1.0 / 3.0, 1.0 / 3.0)


class TriangleLinearBasis(IElementBasis):
    """Three nodal linear basis functions at the triangle's vertices."""

    def size(self) -> int:
        return 3

    def parametric_reference_points(self) -> list[Point]:
        return [Point(0, 0), Point(1, 0), Point(0, 1)]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * 3

    def value(self, xi: Point) -> list[float]:
        x, e = xi.x, xi.y
        return [1 - x - e, x, e]

    def grad(self, xi: Point) -> list[Vector]:
        return [Vector(-1, -1), Vector(1, 0), Vector(0, 1)]


class TriangleLinearIntegrals(IElementIntegrals):
    """Exact integrals of the linear triangle basis."""

    def __init__(self, jac: JacobiMatrix) -> None:
        self._jac = dataclasses.replace(jac)

    def mass_matrix(self) -> list[float]:
        s0 = self._jac.modj / 12.0
        s1 = self._jac.modj / 24.0
        return [s0, s1, s1, s1, s0, s1, s1, s1, s0]

    def load_vector(self) -> list[float]:
        s0 = self._jac.modj / 6
        return [s0, s0, s0]

    def stiff_matrix(self) -> list[float]:
        jac = self._jac
        c = 0.5 / jac.modj
        j11, j12, j21, j22 = jac.j11, jac.j12, jac.j21, jac.j22

        s00 = c * (j22 * j22 - 2 * j21 * j22 + j21 * j21 + j12 * j12 - 2 * j11 * j12 + j11 * j11)
        s01 = -c * (j22 * j22 - j21 * j22 + j12 * j12 - j11 * j12)
        s02 = c * (j21 * j22 - j21 * j21 + j11 * j12 - j11 * j11)
        s11 = c * (j22 * j22 + j12 * j12)
        s12 = -c * (j21 * j22 + j11 * j12)
        s22 = c * (j21 * j21 + j11 * j11)

        return [s00, s01, s02, s01, s11, s12, s02, s12, s22]