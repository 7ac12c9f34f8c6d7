"""Cubic bases on the parametric triangle (0,0)-(1,0)-(0,1)."""

from __future__ import annotations

from cfdlab.fem.element import BasisType, IElementBasis, IElementGeometry
from cfdlab.geom.point import Point, Vector

_THIRD = 1.0 / 3.0
_TWO_THIRDS = 2.0 / 3.0

_CONTOUR_POINTS = (
    (0, 0),
    (1, 0),
    (0, 1),
    (_THIRD, 0),
    (_TWO_THIRDS, 0),
    (_TWO_THIRDS, _THIRD),
    (_THIRD, _TWO_THIRDS),
    (0, _TWO_THIRDS),
    (0, _THIRD),
)


def _contour_points() -> list[Point]:
    return [Point(x, y) for x, y in _CONTOUR_POINTS]


def _cubic9_grad(xi: Point) -> list[Vector]:
    x, y = xi.x, xi.y
    return [
        0.25 * Vector(-(18 * y * y) + (36 - 36 * x) * y - 54 * x * x + 72 * x - 22,
                      -(54 * y * y) + (72 - 36 * x) * y - 18 * x * x + 36 * x - 22),
        0.25 * Vector(9 * y * y + (18 * x - 9) * y + 54 * x * x - 36 * x + 4,
                      18 * x * y + 9 * x * x - 9 * x),
        0.25 * Vector(9 * y * y + (18 * x - 9) * y,
                      54 * y * y + (18 * x - 36) * y + 9 * x * x - 9 * x + 4),
        0.25 * Vector((108 * x - 36) * y + 162 * x * x - 180 * x + 36, 54 * x * x - 36 * x),
        0.25 * Vector((18 - 108 * x) * y - 162 * x * x + 144 * x - 18, 18 * x - 54 * x * x),
        0.25 * Vector((54 * x + 9) * y - 27 * y * y, -(54 * x * y) + 27 * x * x + 9 * x),
        0.25 * Vector(27 * y * y + (9 - 54 * x) * y, 54 * x * y - 27 * x * x + 9 * x),
        0.25 * Vector(18 * y - 54 * y * y, -(162 * y * y) + (144 - 108 * x) * y + 18 * x - 18),
        0.25 * Vector(54 * y * y - 36 * y, 162 * y * y + (108 * x - 180) * y - 36 * x + 36),
    ]


class TriangleCubicBasis(IElementBasis):
    """Ten nodal cubic basis functions: vertices, edge thirds and the centroid."""

    def size(self) -> int:
        return 10

    def parametric_reference_points(self) -> list[Point]:
        return _contour_points() + [Point(_THIRD, _THIRD)]

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * self.size()

    def value(self, xi: Point) -> list[float]:
        x, y = xi.x, xi.y
        return [
            0.5 * (-9 * y**3 + (18 - 27 * x) * y * y + (-27 * x * x + 36 * x - 11) * y
                   - 9 * x**3 + 18 * x * x - 11 * x + 2),
            0.5 * (9 * x**3 - 9 * x * x + 2 * x),
            0.5 * (9 * y**3 - 9 * y * y + 2 * y),
            0.5 * (27 * x * y * y + (54 * x * x - 45 * x) * y + 27 * x**3 - 45 * x * x + 18 * x),
            0.5 * ((9 * x - 27 * x * x) * y - 27 * x**3 + 36 * x * x - 9 * x),
            0.5 * ((27 * x * x - 9 * x) * y),
            0.5 * (27 * x * y * y - 9 * x * y),
            0.5 * (-27 * y**3 + (36 - 27 * x) * y * y + (9 * x - 9) * y),
            0.5 * (27 * y**3 + (54 * x - 45) * y * y + (27 * x * x - 45 * x + 18) * y),
            0.5 * ((54 * x - 54 * x * x) * y - 54 * x * y * y),
        ]

    def grad(self, xi: Point) -> list[Vector]:
        x, y = xi.x, xi.y
        d0 = -27 * y * y + (36 - 54 * x) * y - 27 * x * x + 36 * x - 11
        return [
            0.5 * Vector(d0, d0),
            0.5 * Vector(27 * x * x - 18 * x + 2, 0),
            0.5 * Vector(0, 27 * y * y - 18 * y + 2),
            0.5 * Vector(27 * y * y + (108 * x - 45) * y + 81 * x * x - 90 * x + 18,
                         54 * x * y + 54 * x * x - 45 * x),
            0.5 * Vector((9 - 54 * x) * y - 81 * x * x + 72 * x - 9, 9 * x - 27 * x * x),
            0.5 * Vector((54 * x - 9) * y, 27 * x * x - 9 * x),
            0.5 * Vector(27 * y * y - 9 * y, 54 * x * y - 9 * x),
            0.5 * Vector(9 * y - 27 * y * y, -81 * y * y + (72 - 54 * x) * y + 9 * x - 9),
            0.5 * Vector(54 * y * y + (54 * x - 45) * y,
                         81 * y * y + (108 * x - 90) * y + 27 * x * x - 45 * x + 18),
            0.5 * Vector((54 - 108 * x) * y - 54 * y * y, -108 * x * y - 54 * x * x + 54 * x),
        ]


class TriangleCubic9Basis(IElementBasis):
    """Nine nodal cubic basis functions: vertices and edge thirds."""

    def size(self) -> int:
        return 9

    def parametric_reference_points(self) -> list[Point]:
        return _contour_points()

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * self.size()

    def value(self, xi: Point) -> list[float]:
        x, y = xi.x, xi.y
        return [
            0.25 * (-(18 * y**3) + (36 - 18 * x) * y * y + (-(18 * x * x) + 36 * x - 22) * y
                    - 18 * x**3 + 36 * x * x - 22 * x + 4),
            0.25 * (9 * x * y * y + (9 * x * x - 9 * x) * y + 18 * x**3 - 18 * x * x + 4 * x),
            0.25 * (18 * y**3 + (9 * x - 18) * y * y + (9 * x * x - 9 * x + 4) * y),
            0.25 * ((54 * x * x - 36 * x) * y + 54 * x**3 - 90 * x * x + 36 * x),
            0.25 * ((18 * x - 54 * x * x) * y - 54 * x**3 + 72 * x * x - 18 * x),
            0.25 * ((27 * x * x + 9 * x) * y - 27 * x * y * y),
            0.25 * (27 * x * y * y + (9 * x - 27 * x * x) * y),
            0.25 * (-(54 * y**3) + (72 - 54 * x) * y * y + (18 * x - 18) * y),
            0.25 * (54 * y**3 + (54 * x - 90) * y * y + (36 - 36 * x) * y),
        ]

    def grad(self, xi: Point) -> list[Vector]:
        return _cubic9_grad(xi)


class TriangleCubicNo11Basis(IElementBasis):
    """Nine-node cubic basis sharing the 9-node gradients; it defines no values."""

    def size(self) -> int:
        return 9

    def parametric_reference_points(self) -> list[Point]:
        return _contour_points()

    def basis_types(self) -> list[BasisType]:
        return [BasisType.NODAL] * self.size()

    def value(self, xi: Point) -> list[float]:
        """This basis carries no value functions: always an empty list."""
        return []

    def grad(self, xi: Point) -> list[Vector]:
        return _cubic9_grad(xi)


class TriangleHermiteBasis(IElementBasis):
    """Cubic Hermite basis: vertex values, physical x and y derivatives, centroid value."""

    def __init__(self, geom: IElementGeometry) -> None:
        self._geom = geom

    def size(self) -> int:
        return 10

    def parametric_reference_points(self) -> list[Point]:
        vertices = [Point(0, 0), Point(1, 0), Point(0, 1)]
        return [Point(p.x, p.y) for _ in range(3) for p in vertices] + [Point(_THIRD, _THIRD)]

    def basis_types(self) -> list[BasisType]:
        return (
            [BasisType.NODAL] * 3
            + [BasisType.DX] * 3
            + [BasisType.DY] * 3
            + [BasisType.NODAL]
        )

    def _coefficients(self, xi: Point) -> tuple[float, float, float, float, float]:
        jac = self._geom.jacobi(xi)
        m = jac.modj
        return jac.j22 / m, -jac.j21 / m, -jac.j12 / m, jac.j11 / m, m

    def value(self, xi: Point) -> list[float]:
        x, y = xi.x, xi.y
        c11, c12, c21, c22, m = self._coefficients(xi)

        a = -y**3 + (2 - 3 * x) * y * y + (-(2 * x * x) + 3 * x - 1) * y
        b = 2 * x * y * y + (3 * x * x - 3 * x) * y + x**3 - 2 * x * x + x
        c = 2 * x * y * y + (2 * x * x - 2 * x) * y - x**3 + x * x
        d = x * y * y + (2 * x * x - x) * y
        e = -y**3 + (2 * x + 1) * y * y + (2 * x * x - 2 * x) * y
        f = 2 * x * y * y + (x * x - x) * y

        return [
            2 * y**3 + (13 * x - 3) * y * y + (13 * x * x - 13 * x) * y + 2 * x**3 - 3 * x * x + 1,
            7 * x * y * y + (7 * x * x - 7 * x) * y - 2 * x**3 + 3 * x * x,
            -(2 * y**3) + (7 * x + 3) * y * y + (7 * x * x - 7 * x) * y,
            (c21 * a + c22 * b) * m,
            -((c22 * c + c21 * d) * m),
            (c21 * e + c22 * f) * m,
            -((c11 * a + c12 * b) * m),
            (c12 * c + c11 * d) * m,
            -((c11 * e + c12 * f) * m),
            (27 * x - 27 * x * x) * y - 27 * x * y * y,
        ]

    def grad(self, xi: Point) -> list[Vector]:
        x, y = xi.x, xi.y
        c11, c12, c21, c22, m = self._coefficients(xi)

        # derivative pieces shared by the Dx and Dy functions
        bx = 2 * y * y + (6 * x - 3) * y + 3 * x * x - 4 * x + 1
        ax = (3 - 4 * x) * y - 3 * y * y
        ay = -(3 * y * y) + (4 - 6 * x) * y - 2 * x * x + 3 * x - 1
        by = 4 * x * y + 3 * x * x - 3 * x
        cx = 2 * y * y + (4 * x - 2) * y - 3 * x * x + 2 * x
        dx = y * y + (4 * x - 1) * y
        cy = 4 * x * y + 2 * x * x - 2 * x
        dy = 2 * x * y + 2 * x * x - x
        ex = 2 * y * y + (4 * x - 2) * y
        fx = 2 * y * y + (2 * x - 1) * y
        ey = -(3 * y * y) + (4 * x + 2) * y + 2 * x * x - 2 * x
        fy = 4 * x * y + x * x - x

        return [
            Vector(13 * y * y + (26 * x - 13) * y + 6 * x * x - 6 * x,
                   6 * y * y + (26 * x - 6) * y + 13 * x * x - 13 * x),
            Vector(7 * y * y + (14 * x - 7) * y - 6 * x * x + 6 * x, 14 * x * y + 7 * x * x - 7 * x),
            Vector(7 * y * y + (14 * x - 7) * y, -(6 * y * y) + (14 * x + 6) * y + 7 * x * x - 7 * x),
            Vector((c22 * bx + c21 * ax) * m, (c21 * ay + c22 * by) * m),
            Vector(-((c22 * cx + c21 * dx) * m), -((c22 * cy + c21 * dy) * m)),
            Vector((c21 * ex + c22 * fx) * m, (c21 * ey + c22 * fy) * m),
            Vector(-((c12 * bx + c11 * ax) * m), -((c11 * ay + c12 * by) * m)),
            Vector((c12 * cx + c11 * dx) * m, (c12 * cy + c11 * dy) * m),
            Vector(-((c11 * ex + c12 * fx) * m), -((c11 * ey + c12 * fy) * m)),
            Vector((27 - 54 * x) * y - 27 * y * y, -(54 * x * y) - 27 * x * x + 27 * x),
        ]