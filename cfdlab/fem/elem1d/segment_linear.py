"""Linear segment element: geometry, basis and analytic integrals."""

from __future__ import annotations

import dataclasses

from cfdlab.fem.element import BasisType, IElementBasis, IElementGeometry, IElementIntegrals
from cfdlab.geom.jacobi import JacobiMatrix
from cfdlab.geom.point import Point, Vector, vector_abs


class SegmentLinearGeometry(IElementGeometry):
    """Maps the parametric segment [-1, 1] onto the segment p0-p1."""

    def __init__(self, p0: Point, p1: Point) -> None:
        self._p0 = p0
        self._p1 = p1
        modj = vector_abs(p1 - p0) / 2
        self._jac = JacobiMatrix(j11=modj, modj=modj)

    def jacobi(self, xi: Point) -> JacobiMatrix:
        return dataclasses.replace(self._jac)

    def to_physical(self, xi: Point) -> Point:
        t = (xi.x + 1) / 2.0
        return (1 - t) * self._p0 + t * self._p1

    def parametric_center(self) -> Point:
        return Point(0)


class SegmentLinearBasis(IElementBasis):
    """Two nodal linear basis functions on [-1, 1]."""

    def size(self) -> int:
        return 2

    def parametric_reference_points(self) -> list[Point]:
        return [Point(-1), Point(1)]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL, BasisType.NODAL]

    def value(self, xi: Point) -> list[float]:
        x = xi.x
        return [(1 - x) / 2, (1 + x) / 2]

    def grad(self, xi: Point) -> list[Vector]:
        return [Vector(-0.5), Vector(0.5)]


class SegmentLinearIntegrals(IElementIntegrals):
    """Exact integrals of the linear segment basis."""

    def __init__(self, jac: JacobiMatrix) -> None:
        self._len = 2 * jac.modj

    def mass_matrix(self) -> list[float]:
        v = self._len / 6
        return [2 * v, v, v, 2 * v]

    def load_vector(self) -> list[float]:
        s0 = self._len / 2
        return [s0, s0]

    def stiff_matrix(self) -> list[float]:
        s = 1 / self._len
        return [s, -s, -s, s]