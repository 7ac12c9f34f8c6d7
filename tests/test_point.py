import pytest

from cfdlab.geom.point import (
    Point,
    Vector,
    cross_product,
    cross_product_2d,
    dot_product,
    vector_abs,
    vector_meas,
)


def test_defaults_and_indexing():
    p = Point(1.5)
    assert tuple(p) == (1.5, 0, 0)
    q = Point(1, 2, 3)
    assert (q[0], q[1], q[2]) == (1, 2, 3)
    assert len(q) == 3


def test_setitem_changes_coordinate():
    p = Point(1, 2, 3)
    p[2] = 7
    assert p.z == 7
    p.x = 4
    assert p[0] == 4


def test_add_sub_round_trip():
    a = Point(1, -2, 3.5)
    b = Point(0.25, 4, -1)
    assert (a + b) - b == a


def test_negation_equals_minus_one_scaling():
    a = Point(1, -2, 3)
    assert -a == (-1) * a
    assert -a == a * -1


def test_division_inverts_multiplication():
    a = Point(1, -2, 3)
    assert tuple((2 * a) / 2) == pytest.approx(tuple(a))


def test_operations_do_not_mutate():
    a = Point(1, 2, 3)
    b = Point(4, 5, 6)
    _ = a + b
    _ = a * 3
    assert a == Point(1, 2, 3)


def test_multiplication_by_point_rejected():
    with pytest.raises(TypeError):
        Point(1, 2, 3) * Point(1, 2, 3)


def test_vector_behaves_as_point():
    v = Vector(3, 4)
    assert v == Point(3, 4, 0)
    assert vector_abs(v) == pytest.approx(5)


def test_cross_product_orthogonal():
    a = Point(1, 2, 3)
    b = Point(-2, 0.5, 4)
    c = cross_product(a, b)
    assert dot_product(a, c) == pytest.approx(0)
    assert dot_product(b, c) == pytest.approx(0)


def test_cross_product_antisymmetric():
    a = Point(1, 2, 3)
    b = Point(-2, 0.5, 4)
    assert cross_product(a, b) == -cross_product(b, a)


def test_cross_product_2d_is_z_component():
    a = Point(1, 2)
    b = Point(-3, 5)
    assert cross_product_2d(a, b) == cross_product(a, b).z


def test_abs_and_meas():
    v = Point(3, 4)
    assert vector_abs(v) == pytest.approx(5)
    w = Point(1, -2, 2.5)
    assert vector_meas(w) == pytest.approx(vector_abs(w) ** 2)
    assert vector_meas(w) == dot_product(w, w)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Point(1, 2, 3))