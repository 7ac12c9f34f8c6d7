import pytest

from cfdlab.fem.elem1d.segment_quadratic import SegmentQuadraticBasis
from cfdlab.fem.element import BasisType
from cfdlab.geom.point import Point


def test_size_and_types():
    basis = SegmentQuadraticBasis()
    assert basis.size() == 3
    assert basis.basis_types() == [BasisType.NODAL] * 3
    assert [p.x for p in basis.parametric_reference_points()] == [-1, 1, 0]


def test_kronecker_at_reference_points():
    basis = SegmentQuadraticBasis()
    for i, ref in enumerate(basis.parametric_reference_points()):
        for j, v in enumerate(basis.value(ref)):
            assert v == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)


@pytest.mark.parametrize("x", [-0.9, -0.3, 0.0, 0.5, 0.8])
def test_partition_of_unity(x):
    basis = SegmentQuadraticBasis()
    assert sum(basis.value(Point(x))) == pytest.approx(1.0)
    assert sum(g.x for g in basis.grad(Point(x))) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("x", [-0.7, 0.1, 0.6])
def test_grad_matches_finite_difference(x):
    basis = SegmentQuadraticBasis()
    h = 1e-6
    plus = basis.value(Point(x + h))
    minus = basis.value(Point(x - h))
    for g, vp, vm in zip(basis.grad(Point(x)), plus, minus):
        assert g.x == pytest.approx((vp - vm) / (2 * h), abs=1e-6)
        assert g.y == 0 and g.z == 0


@pytest.mark.parametrize("x", [-0.5, 0.25, 0.9])
def test_reproduces_quadratic(x):
    basis = SegmentQuadraticBasis()
    nodes = [p.x for p in basis.parametric_reference_points()]
    coefs = [n * n for n in nodes]
    approx = sum(c * v for c, v in zip(coefs, basis.value(Point(x))))
    assert approx == pytest.approx(x * x)