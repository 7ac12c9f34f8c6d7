"""Finite element interfaces: geometry mapping, basis functions and integrals."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from cfdlab.geom.jacobi import JacobiMatrix
from cfdlab.geom.point import Point, Vector


def _not_provided(obj: object, what: str) -> NotImplementedError:
    return NotImplementedError(f"{type(obj).__name__} does not provide {what}")


class IElementGeometry(ABC):
    """Mapping between the parametric and the physical element."""

    @abstractmethod
    def jacobi(self, xi: Point) -> JacobiMatrix:
        """Jacobi matrix of the mapping at the parametric point ``xi``."""

    def to_physical(self, xi: Point) -> Point:
        """Physical point for the parametric point ``xi``."""
        raise _not_provided(self, "to_physical")

    def to_parametric(self, p: Point) -> Point:
        """Parametric point for the physical point ``p``."""
        raise _not_provided(self, "to_parametric")

    def parametric_center(self) -> Point:
        """Center of the parametric element."""
        raise _not_provided(self, "parametric_center")


class BasisType(enum.Enum):
    """What degree of freedom a basis function stands for."""

    CUSTOM = enum.auto()
    NODAL = enum.auto()
    DX = enum.auto()
    DY = enum.auto()
    DZ = enum.auto()


class IElementBasis(ABC):
    """Set of basis functions defined on the parametric element."""

    @abstractmethod
    def size(self) -> int:
        """Number of basis functions."""

    @abstractmethod
    def parametric_reference_points(self) -> list[Point]:
        """Parametric points the basis functions refer to."""

    @abstractmethod
    def basis_types(self) -> list[BasisType]:
        """Degree-of-freedom type of each basis function."""

    @abstractmethod
    def value(self, xi: Point) -> list[float]:
        """Values of all basis functions at ``xi``."""

    @abstractmethod
    def grad(self, xi: Point) -> list[Vector]:
        """Parametric gradients of all basis functions at ``xi``."""

    def upper_hessian(self, xi: Point) -> list[tuple[float, ...]]:
        """Upper triangle of the parametric hessian of each basis function."""
        raise _not_provided(self, "upper_hessian")


Values = Sequence[float]


class IElementIntegrals:
    """Element integrals; every matrix is returned row-major as a flat list."""

    def load_vector(self) -> list[float]:
        """Integral of phi_i."""
        raise _not_provided(self, "load_vector")

    def mass_matrix(self) -> list[float]:
        """Integral of phi_j * phi_i."""
        raise _not_provided(self, "mass_matrix")

    def stiff_matrix(self) -> list[float]:
        """Integral of grad(phi_j) . grad(phi_i)."""
        raise _not_provided(self, "stiff_matrix")

    def dx_matrix(self) -> list[float]:
        """Integral of d(phi_j)/dx * phi_i."""
        raise _not_provided(self, "dx_matrix")

    def dy_matrix(self) -> list[float]:
        """Integral of d(phi_j)/dy * phi_i."""
        raise _not_provided(self, "dy_matrix")

    def dz_matrix(self) -> list[float]:
        """Integral of d(phi_j)/dz * phi_i."""
        raise _not_provided(self, "dz_matrix")

    def transport_matrix(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        """Integral of (u . grad(phi_j)) * phi_i."""
        raise _not_provided(self, "transport_matrix")

    def divergence_vector(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        """Integral of div(u) * phi_i."""
        raise _not_provided(self, "divergence_vector")

    def divergence_vector_byparts(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        """Integral of u . grad(phi_i)."""
        raise _not_provided(self, "divergence_vector_byparts")

    def mass_matrix_stab_supg(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        """Integral of phi_j * (u . grad(phi_i))."""
        raise _not_provided(self, "mass_matrix_stab_supg")

    def load_vector_stab_supg(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        """Integral of u . grad(phi_i); same as divergence_vector_byparts."""
        return self.divergence_vector_byparts(vx, vy, vz)

    def stiff_matrix_stab_supg(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        """Integral of grad(phi_j) . grad(u . grad(phi_i))."""
        raise _not_provided(self, "stiff_matrix_stab_supg")

    def transport_matrix_stab_supg(
        self, vx: Values, vy: Values = (), vz: Values = ()
    ) -> list[float]:
        """Integral of (u . grad(phi_j)) * (u . grad(phi_i))."""
        raise _not_provided(self, "transport_matrix_stab_supg")

    def dx_matrix_stab_supg(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        """Integral of d(phi_j)/dx * (u . grad(phi_i))."""
        raise _not_provided(self, "dx_matrix_stab_supg")

    def dy_matrix_stab_supg(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        """Integral of d(phi_j)/dy * (u . grad(phi_i))."""
        raise _not_provided(self, "dy_matrix_stab_supg")

    def dz_matrix_stab_supg(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        """Integral of d(phi_j)/dz * (u . grad(phi_i))."""
        raise _not_provided(self, "dz_matrix_stab_supg")

    def dx_matrix_stab_supg2(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        """Integral of d(phi_j)/dx * div(u * phi_i)."""
        raise _not_provided(self, "dx_matrix_stab_supg2")

    def dy_matrix_stab_supg2(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        """Integral of d(phi_j)/dy * div(u * phi_i)."""
        raise _not_provided(self, "dy_matrix_stab_supg2")

    def dz_matrix_stab_supg2(self, vx: Values, vy: Values = (), vz: Values = ()) -> list[float]:
        """Integral of d(phi_j)/dz * div(u * phi_i)."""
        raise _not_provided(self, "dz_matrix_stab_supg2")


@dataclass(frozen=True)
class FemElement:
    """A finite element: its geometry, basis and (optionally) integrals."""

    geometry: IElementGeometry
    basis: IElementBasis
    integrals: Optional[IElementIntegrals] = None