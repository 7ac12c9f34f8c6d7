import math
from dataclasses import dataclass

import pytest

from cfdlab.fem.elem1d.segment_linear import (
    SegmentLinearBasis,
    SegmentLinearGeometry,
    SegmentLinearIntegrals,
)
from cfdlab.fem.elem2d.quadrangle_linear import QuadrangleLinearBasis, QuadrangleLinearGeometry
from cfdlab.fem.elem2d.triangle_linear import (
    TriangleLinearBasis,
    TriangleLinearGeometry,
    TriangleLinearIntegrals,
)
from cfdlab.fem.numeric_integrals import NumericElementIntegrals
from cfdlab.geom.point import Point


@dataclass
class _Rule:
    pts: list
    weights: list

    def size(self):
        return len(self.pts)

    def points(self):
        return self.pts

    def integrate(self, values):
        n = len(values[0])
        return [sum(w * v[k] for w, v in zip(self.weights, values)) for k in range(n)]


_G = 1 / math.sqrt(3)
SEGMENT_GAUSS = _Rule([Point(-_G), Point(_G)], [1.0, 1.0])
TRIANGLE_RULE = _Rule(
    [Point(1 / 6, 1 / 6), Point(2 / 3, 1 / 6), Point(1 / 6, 2 / 3)], [1 / 6] * 3
)
SQUARE_GAUSS = _Rule(
    [Point(a, b) for a in (-_G, _G) for b in (-_G, _G)], [1.0] * 4
)


def transpose(m, n):
    return [m[j * n + i] for i in range(n) for j in range(n)]


@pytest.fixture
def segment():
    geom = SegmentLinearGeometry(Point(0), Point(2))
    return geom, NumericElementIntegrals(SEGMENT_GAUSS, geom, SegmentLinearBasis())


@pytest.fixture
def triangle():
    geom = TriangleLinearGeometry(Point(0, 0), Point(2, 0.5), Point(0.3, 1.5))
    return geom, NumericElementIntegrals(TRIANGLE_RULE, geom, TriangleLinearBasis())


def test_segment_matches_analytic(segment):
    geom, num = segment
    exact = SegmentLinearIntegrals(geom.jacobi(Point(0)))
    assert num.mass_matrix() == pytest.approx(exact.mass_matrix())
    assert num.load_vector() == pytest.approx(exact.load_vector())
    assert num.stiff_matrix() == pytest.approx(exact.stiff_matrix())


def test_triangle_matches_analytic(triangle):
    geom, num = triangle
    exact = TriangleLinearIntegrals(geom.jacobi(Point(0, 0)))
    assert num.mass_matrix() == pytest.approx(exact.mass_matrix())
    assert num.load_vector() == pytest.approx(exact.load_vector())
    assert num.stiff_matrix() == pytest.approx(exact.stiff_matrix())


def test_quadrangle_mass_sums_to_area():
    geom = QuadrangleLinearGeometry(Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1))
    num = NumericElementIntegrals(SQUARE_GAUSS, geom, QuadrangleLinearBasis())
    assert sum(num.mass_matrix()) == pytest.approx(1.0)
    assert sum(num.load_vector()) == pytest.approx(1.0)
    mass = num.mass_matrix()
    assert mass == pytest.approx(transpose(mass, 4))


def test_stiff_rows_sum_to_zero(triangle):
    _, num = triangle
    stiff = num.stiff_matrix()
    for i in range(3):
        assert sum(stiff[3 * i: 3 * i + 3]) == pytest.approx(0.0, abs=1e-12)


def test_stiff_stab_supg_is_zero(triangle):
    _, num = triangle
    assert num.stiff_matrix_stab_supg([1, 1, 1]) == [0.0] * 9


def test_load_stab_supg_equals_byparts(triangle):
    _, num = triangle
    vx, vy = [1.0, 2.0, 0.5], [0.3, -1.0, 2.0]
    assert num.load_vector_stab_supg(vx, vy) == pytest.approx(
        num.divergence_vector_byparts(vx, vy)
    )


def test_constant_velocity_transport_equals_derivative(triangle):
    _, num = triangle
    ones, zeros = [1.0] * 3, [0.0] * 3
    assert num.transport_matrix(ones) == pytest.approx(num.dx_matrix())
    assert num.transport_matrix(zeros, ones) == pytest.approx(num.dy_matrix())


def test_mass_stab_supg_is_transport_transposed(triangle):
    _, num = triangle
    vx, vy = [1.0, -0.5, 2.0], [0.2, 0.7, -1.0]
    assert num.mass_matrix_stab_supg(vx, vy) == pytest.approx(
        transpose(num.transport_matrix(vx, vy), 3)
    )


def test_supg_variants_agree_for_constant_velocity(triangle):
    _, num = triangle
    ones = [1.0] * 3
    dx_supg = num.dx_matrix_stab_supg(ones)
    assert dx_supg == pytest.approx(num.transport_matrix_stab_supg(ones))
    assert num.dx_matrix_stab_supg2(ones) == pytest.approx(dx_supg)
    assert num.dy_matrix_stab_supg2(ones) == pytest.approx(num.dy_matrix_stab_supg(ones))


def test_transport_stab_supg_symmetric(triangle):
    _, num = triangle
    m = num.transport_matrix_stab_supg([1.0, 2.0, -1.0], [0.5, 0.1, 0.4])
    assert m == pytest.approx(transpose(m, 3))


def test_divergence_of_constant_velocity_vanishes(triangle):
    _, num = triangle
    assert num.divergence_vector([1.0] * 3, [2.0] * 3) == pytest.approx([0.0] * 3, abs=1e-12)


def test_divergence_of_linear_velocity_equals_load(segment):
    _, num = segment
    # u = x on [0, 2], so div u = 1
    assert num.divergence_vector([0.0, 2.0]) == pytest.approx(num.load_vector())


def test_out_of_plane_derivatives_vanish(segment, triangle):
    _, seg = segment
    _, tri = triangle
    assert seg.dy_matrix() == pytest.approx([0.0] * 4, abs=1e-12)
    assert tri.dz_matrix() == pytest.approx([0.0] * 9, abs=1e-12)
    assert tri.dz_matrix_stab_supg([1.0] * 3) == pytest.approx([0.0] * 9, abs=1e-12)
    assert tri.dz_matrix_stab_supg2([1.0] * 3) == pytest.approx([0.0] * 9, abs=1e-12)


def test_dx_matrix_columns_integrate_derivative(segment):
    _, num = segment
    # sum over rows gives integral of d(phi_j)/dx over [0, 2]: phi_j(2) - phi_j(0)
    m = num.dx_matrix()
    assert [m[0] + m[2], m[1] + m[3]] == pytest.approx([-1.0, 1.0])


def test_byparts_with_zero_velocity(segment):
    _, num = segment
    assert num.divergence_vector_byparts([0.0, 0.0]) == pytest.approx([0.0, 0.0])