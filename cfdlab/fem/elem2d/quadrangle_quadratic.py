"""Quadratic quadrangle bases: 9-node Lagrange and 8-node serendipity."""

from __future__ import annotations

from cfdlab.fem.element import BasisType, IElementBasis
from cfdlab.geom.point import Point, Vector

_REFERENCE_POINTS_8 = (
    (-1, -1),
    (1, -1),
    (1, 1),
    (-1, 1),
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 0),
)


def _p0(x: float) -> float:
    return (x * x - x) / 2


def _p1(x: float) -> float:
    return (x * x + x) / 2


def _p2(x: float) -> float:
    return 1 - x * x


def _d0(x: float) -> float:
    return (2 * x - 1) / 2


def _d1(x: float) -> float:
    return (2 * x + 1) / 2


def _d2(x: float) -> float:
    return -2 * x


# (x-factor, y-factor) index pairs of the tensor-product 1D polynomials
_TENSOR_9 = ((0, 0), (1, 0), (1, 1), (0, 1), (2, 0), (1, 2), (2, 1), (0, 2), (2, 2))
_POLY = (_p0, _p1, _p2)
_DPOLY = (_d0, _d1, _d2)


class QuadrangleQuadraticBasis(IElementBasis):
    """Nine nodal tensor-product quadratic basis functions."""

    def size(self) -> int:
        return 9

    def parametric_reference_points(self) -> list[Point]:
        return [Point(x, y) for x, y in _REFERENCE_POINTS_8] + [Point(0, 0)]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * self.size()

    def value(self, xi: Point) -> list[float]:
        x, y = xi.x, xi.y
        return [_POLY[i](x) * _POLY[j](y) for i, j in _TENSOR_9]

    def grad(self, xi: Point) -> list[Vector]:
        x, y = xi.x, xi.y
        return [
            Vector(_DPOLY[i](x) * _POLY[j](y), _POLY[i](x) * _DPOLY[j](y))
            for i, j in _TENSOR_9
        ]


class QuadrangleQuadratic8Basis(IElementBasis):
    """Eight nodal serendipity quadratic basis functions."""

    def size(self) -> int:
        return 8

    def parametric_reference_points(self) -> list[Point]:
        return [Point(x, y) for x, y in _REFERENCE_POINTS_8]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * self.size()

    def value(self, xi: Point) -> list[float]:
        x, y = xi.x, xi.y
        return [
            0.25 * (-1 + x * y + x * x + y * y - x * x * y - x * y * y),
            0.25 * (-1 - x * y + x * x + y * y - x * x * y + x * y * y),
            0.25 * (-1 + x * y + x * x + y * y + x * x * y + x * y * y),
            0.25 * (-1 - x * y + x * x + y * y + x * x * y - x * y * y),
            0.25 * (2 - 2 * y - 2 * x * x + 2 * x * x * y),
            0.25 * (2 + 2 * x - 2 * y * y - 2 * x * y * y),
            0.25 * (2 + 2 * y - 2 * x * x - 2 * x * x * y),
            0.25 * (2 - 2 * x - 2 * y * y + 2 * x * y * y),
        ]

    def grad(self, xi: Point) -> list[Vector]:
        x, y = xi.x, xi.y
        return [
            0.25 * Vector(y + 2 * x - 2 * x * y - y * y, x + 2 * y - x * x - 2 * x * y),
            0.25 * Vector(-y + 2 * x - 2 * x * y + y * y, -x + 2 * y - x * x + 2 * x * y),
            0.25 * Vector(y + 2 * x + 2 * x * y + y * y, x + 2 * y + x * x + 2 * x * y),
            0.25 * Vector(-y + 2 * x + 2 * x * y - y * y, -x + 2 * y + x * x - 2 * x * y),
            0.25 * Vector(-4 * x + 4 * x * y, -2 + 2 * x * x),
            0.25 * Vector(2 - 2 * y * y, -4 * y - 4 * x * y),
            0.25 * Vector(-4 * x - 4 * x * y, 2 - 2 * x * x),
            0.25 * Vector(-2 + 2 * y * y, -4 * y + 4 * x * y),
        ]