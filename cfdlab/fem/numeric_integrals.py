"""Element integrals evaluated with a numerical quadrature rule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Protocol, Sequence

from cfdlab.fem.element import IElementBasis, IElementGeometry, IElementIntegrals
from cfdlab.geom.jacobi import JacobiMatrix, gradient_to_physical
from cfdlab.geom.point import Point, Vector, dot_product

Values = Sequence[float]


class Quadrature(Protocol):
    """Quadrature rule over the parametric element."""

    def size(self) -> int: ...

    def points(self) -> Sequence[Point]: ...

    def integrate(self, values: Sequence[Sequence[float]]) -> Sequence[float]: ...


@dataclass(frozen=True)
class _QuadSample:
    """Basis data at one quadrature point."""

    phi: list[float]
    grad: list[Vector]
    modj: float


def _matrix_upper_to_sym(nrows: int, upper: Sequence[float]) -> list[float]:
    """Expand a row-major upper triangle into a full symmetric matrix."""
    ret = [0.0] * (nrows * nrows)
    values = iter(upper)
    for irow in range(nrows):
        for icol in range(irow, nrows):
            v = next(values)
            ret[irow * nrows + icol] = v
            ret[icol * nrows + irow] = v
    return ret


def _velocity(phi: Sequence[float], vx: Values, vy: Values, vz: Values) -> Vector:
    """Velocity interpolated from nodal components; empty components count as zero."""
    vel = Vector(0, 0, 0)
    if vx:
        vel.x = sum(v * p for v, p in zip(vx, phi))
    if vy:
        vel.y = sum(v * p for v, p in zip(vy, phi))
    if vz:
        vel.z = sum(v * p for v, p in zip(vz, phi))
    return vel


def _divergence(grad: Sequence[Vector], vx: Values, vy: Values, vz: Values) -> float:
    """Divergence of the interpolated velocity."""
    div_u = 0.0
    if vx:
        div_u += sum(v * g.x for v, g in zip(vx, grad))
    if vy:
        div_u += sum(v * g.y for v, g in zip(vy, grad))
    if vz:
        div_u += sum(v * g.z for v, g in zip(vz, grad))
    return div_u


class NumericElementIntegrals(IElementIntegrals):
    """Element integrals computed by quadrature of the basis on the mapped element."""

    def __init__(self, quad: Quadrature, geom: IElementGeometry, basis: IElementBasis) -> None:
        self._quad = quad
        self._geom = geom
        self._basis = basis
        self._quad_jacobi: list[JacobiMatrix] = [geom.jacobi(xi) for xi in quad.points()]

    # ------------------------------------------------------------------ helpers
    def _samples(self) -> Iterator[_QuadSample]:
        for xi, jac in zip(self._quad.points(), self._quad_jacobi):
            yield _QuadSample(
                phi=list(self._basis.value(xi)),
                grad=[gradient_to_physical(jac, g) for g in self._basis.grad(xi)],
                modj=jac.modj,
            )

    def _integrate(self, integrand: Callable[[_QuadSample], list[float]]) -> list[float]:
        values = [[v * q.modj for v in integrand(q)] for q in self._samples()]
        return list(self._quad.integrate(values))

    def _upper(self, n: int) -> Iterator[tuple[int, int]]:
        return ((i, j) for i in range(n) for j in range(i, n))

    def _full(self, n: int) -> Iterator[tuple[int, int]]:
        return ((i, j) for i in range(n) for j in range(n))

    def _d_matrix(self, axis: int) -> list[float]:
        n = self._basis.size()
        return self._integrate(
            lambda q: [q.grad[j][axis] * q.phi[i] for i, j in self._full(n)]
        )

    def _d_matrix_supg(self, axis: int, vx: Values, vy: Values, vz: Values) -> list[float]:
        n = self._basis.size()

        def integrand(q: _QuadSample) -> list[float]:
            vel = _velocity(q.phi, vx, vy, vz)
            return [
                q.grad[j][axis] * dot_product(vel, q.grad[i]) for i, j in self._full(n)
            ]

        return self._integrate(integrand)

    def _d_matrix_supg2(self, axis: int, vx: Values, vy: Values, vz: Values) -> list[float]:
        n = self._basis.size()

        def integrand(q: _QuadSample) -> list[float]:
            vel = _velocity(q.phi, vx, vy, vz)
            div_u = _divergence(q.grad, vx, vy, vz)
            return [
                q.grad[j][axis] * (dot_product(vel, q.grad[i]) + q.phi[i] * div_u)
                for i, j in self._full(n)
            ]

        return self._integrate(integrand)

    # ---------------------------------------------------------------- integrals
    def mass_matrix(self) -> list[float]:
        n = self._basis.size()
        upper = self._integrate(lambda q: [q.phi[i] * q.phi[j] for i, j in self._upper(n)])
        return _matrix_upper_to_sym(n, upper)

    def load_vector(self) -> list[float]:
        return self._integrate(lambda q: list(q.phi))

    def stiff_matrix(self) -> list[float]:
        n = self._basis.size()
        upper = self._integrate(
            lambda q: [dot_product(q.grad[i], q.grad[j]) for i, j in self._upper(n)]
        )
        return _matrix_upper_to_sym(n, upper)

    def transport_matrix(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        n = self._basis.size()

        def integrand(q: _QuadSample) -> list[float]:
            vel = _velocity(q.phi, vx, vy, vz)
            return [dot_product(vel, q.grad[j]) * q.phi[i] for i, j in self._full(n)]

        return self._integrate(integrand)

    def mass_matrix_stab_supg(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        n = self._basis.size()

        def integrand(q: _QuadSample) -> list[float]:
            vel = _velocity(q.phi, vx, vy, vz)
            return [dot_product(vel, q.grad[i]) * q.phi[j] for i, j in self._full(n)]

        return self._integrate(integrand)

    def stiff_matrix_stab_supg(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        """Zero matrix: the term vanishes for linear elements."""
        n = self._basis.size()
        return [0.0] * (n * n)

    def transport_matrix_stab_supg(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        n = self._basis.size()

        def integrand(q: _QuadSample) -> list[float]:
            vel = _velocity(q.phi, vx, vy, vz)
            d = [dot_product(vel, g) for g in q.grad]
            return [d[i] * d[j] for i, j in self._upper(n)]

        return _matrix_upper_to_sym(n, self._integrate(integrand))

    def divergence_vector(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        def integrand(q: _QuadSample) -> list[float]:
            div_u = _divergence(q.grad, vx, vy, vz)
            return [div_u * p for p in q.phi]

        return self._integrate(integrand)

    def divergence_vector_byparts(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        def integrand(q: _QuadSample) -> list[float]:
            vel = _velocity(q.phi, vx, vy, vz)
            return [dot_product(vel, g) for g in q.grad]

        return self._integrate(integrand)

    def dx_matrix(self) -> list[float]:
        return self._d_matrix(0)

    def dy_matrix(self) -> list[float]:
        return self._d_matrix(1)

    def dz_matrix(self) -> list[float]:
        return self._d_matrix(2)

    def dx_matrix_stab_supg(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        return self._d_matrix_supg(0, vx, vy, vz)

    def dy_matrix_stab_supg(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        return self._d_matrix_supg(1, vx, vy, vz)

    def dz_matrix_stab_supg(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        return self._d_matrix_supg(2, vx, vy, vz)

    def dx_matrix_stab_supg2(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        return self._d_matrix_supg2(0, vx, vy, vz)

    def dy_matrix_stab_supg2(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        return self._d_matrix_supg2(1, vx, vy, vz)

    def dz_matrix_stab_supg2(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        return self._d_matrix_supg2(2, vx, vy, vz)