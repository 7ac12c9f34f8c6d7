import dataclasses

import pytest

from cfdlab.fem.element import (
    BasisType,
    FemElement,
    IElementBasis,
    IElementGeometry,
    IElementIntegrals,
)
from cfdlab.geom.jacobi import JacobiMatrix
from cfdlab.geom.point import Point


class _Geom(IElementGeometry):
    def jacobi(self, xi):
        return JacobiMatrix()


class _Basis(IElementBasis):
    def size(self):
        return 1

    def parametric_reference_points(self):
        return [Point()]

    def basis_types(self):
        return [BasisType.NODAL]

    def value(self, xi):
        return [1.0]

    def grad(self, xi):
        return [Point()]


class _ByParts(IElementIntegrals):
    def divergence_vector_byparts(self, vx, vy=(), vz=()):
        return list(vx) + list(vy) + list(vz)


def test_abstract_geometry_cannot_be_created():
    with pytest.raises(TypeError):
        IElementGeometry()


def test_abstract_basis_cannot_be_created():
    with pytest.raises(TypeError):
        IElementBasis()


@pytest.mark.parametrize("method", ["to_physical", "to_parametric"])
def test_geometry_optional_methods_raise(method):
    with pytest.raises(NotImplementedError):
        getattr(_Geom(), method)(Point())


def test_geometry_parametric_center_raises():
    with pytest.raises(NotImplementedError):
        IElementGeometry.parametric_center(_Geom())


def test_basis_upper_hessian_raises():
    with pytest.raises(NotImplementedError):
        _Basis().upper_hessian(Point())


@pytest.mark.parametrize(
    "method",
    ["load_vector", "mass_matrix", "stiff_matrix", "dx_matrix", "dy_matrix", "dz_matrix"],
)
def test_integrals_without_arguments_raise(method):
    with pytest.raises(NotImplementedError):
        getattr(IElementIntegrals(), method)()


@pytest.mark.parametrize(
    "method",
    [
        "transport_matrix",
        "divergence_vector",
        "divergence_vector_byparts",
        "mass_matrix_stab_supg",
        "load_vector_stab_supg",
        "stiff_matrix_stab_supg",
        "transport_matrix_stab_supg",
        "dx_matrix_stab_supg",
        "dy_matrix_stab_supg",
        "dz_matrix_stab_supg",
        "dx_matrix_stab_supg2",
        "dy_matrix_stab_supg2",
        "dz_matrix_stab_supg2",
    ],
)
def test_integrals_with_velocity_raise(method):
    with pytest.raises(NotImplementedError):
        getattr(IElementIntegrals(), method)([1.0, 2.0])


def test_load_vector_stab_supg_delegates_to_byparts():
    result = IElementIntegrals.load_vector_stab_supg(_ByParts(), [1.0], [2.0], [3.0])
    assert result == [1.0, 2.0, 3.0]


def test_load_vector_stab_supg_default_components_are_empty():
    assert IElementIntegrals.load_vector_stab_supg(_ByParts(), [5.0]) == [5.0]


def test_fem_element_holds_parts():
    geom, basis = _Geom(), _Basis()
    elem = FemElement(geometry=geom, basis=basis)
    assert elem.geometry is geom
    assert elem.basis is basis
    assert elem.integrals is None


def test_fem_element_is_frozen():
    elem = FemElement(_Geom(), _Basis())
    with pytest.raises(dataclasses.FrozenInstanceError):
        elem.basis = _Basis()


def test_basis_type_members():
    names = [BasisType(t.value).name for t in BasisType]
    assert names == ["CUSTOM", "NODAL", "DX", "DY", "DZ"]