"""Jacobi matrix of a parametric mapping and gradient transformations."""

from __future__ import annotations

from dataclasses import dataclass

from cfdlab.geom.point import Point, Vector


@dataclass
class JacobiMatrix:
    """3x3 Jacobi matrix with its determinant (modj); identity by default."""

    j11: float = 1.0
    j12: float = 0.0
    j13: float = 0.0
    j21: float = 0.0
    j22: float = 1.0
    j23: float = 0.0
    j31: float = 0.0
    j32: float = 0.0
    j33: float = 1.0
    modj: float = 1.0


def fill_jacobi_modj(jac: JacobiMatrix) -> JacobiMatrix:
    """Set modj to the 3x3 determinant; returns the same matrix."""
    jac.modj = (
        jac.j11 * (jac.j22 * jac.j33 - jac.j23 * jac.j32)
        - jac.j12 * (jac.j21 * jac.j33 - jac.j23 * jac.j31)
        + jac.j13 * (jac.j21 * jac.j32 - jac.j22 * jac.j31)
    )
    return jac


def fill_jacobi_modj_1d(jac: JacobiMatrix) -> JacobiMatrix:
    """Set modj to the 1x1 determinant; returns the same matrix."""
    jac.modj = jac.j11
    return jac


def fill_jacobi_modj_2d(jac: JacobiMatrix) -> JacobiMatrix:
    """Set modj to the 2x2 determinant; returns the same matrix."""
    jac.modj = jac.j11 * jac.j22 - jac.j12 * jac.j21
    return jac


def gradient_to_parametric(jac: JacobiMatrix, grad_x: Vector) -> Vector:
    """Transform a physical gradient to parametric coordinates (J^T g)."""
    return Point(
        jac.j11 * grad_x.x + jac.j21 * grad_x.y + jac.j31 * grad_x.z,
        jac.j12 * grad_x.x + jac.j22 * grad_x.y + jac.j32 * grad_x.z,
        jac.j13 * grad_x.x + jac.j23 * grad_x.y + jac.j33 * grad_x.z,
    )


def gradient_to_parametric_1d(jac: JacobiMatrix, grad_x: Vector) -> Vector:
    """One-dimensional version of gradient_to_parametric."""
    return Point(jac.j11 * grad_x.x)


def gradient_to_parametric_2d(jac: JacobiMatrix, grad_x: Vector) -> Vector:
    """Two-dimensional version of gradient_to_parametric."""
    return Point(
        jac.j11 * grad_x.x + jac.j21 * grad_x.y,
        jac.j12 * grad_x.x + jac.j22 * grad_x.y,
    )


def gradient_to_physical(jac: JacobiMatrix, grad_xi: Vector) -> Vector:
    """Transform a parametric gradient to physical coordinates using modj."""
    c = 1.0 / jac.modj
    a11 = c * (jac.j22 * jac.j33 - jac.j23 * jac.j32)
    a12 = c * (jac.j23 * jac.j31 - jac.j21 * jac.j33)
    a13 = c * (jac.j21 * jac.j32 - jac.j22 * jac.j31)
    a21 = c * (jac.j13 * jac.j32 - jac.j12 * jac.j33)
    a22 = c * (jac.j11 * jac.j33 - jac.j13 * jac.j31)
    a23 = c * (jac.j12 * jac.j31 - jac.j11 * jac.j32)
    a31 = c * (jac.j12 * jac.j23 - jac.j13 * jac.j22)
    a32 = c * (jac.j13 * jac.j21 - jac.j11 * jac.j23)
    a33 = c * (jac.j11 * jac.j22 - jac.j12 * jac.j21)
    return Point(
        a11 * grad_xi.x + a12 * grad_xi.y + a13 * grad_xi.z,
        a21 * grad_xi.x + a22 * grad_xi.y + a23 * grad_xi.z,
        a31 * grad_xi.x + a32 * grad_xi.y + a33 * grad_xi.z,
    )


def gradient_to_physical_1d(jac: JacobiMatrix, grad_xi: Vector) -> Vector:
    """One-dimensional version of gradient_to_physical."""
    return Point(grad_xi.x / jac.j11)


def gradient_to_physical_2d(jac: JacobiMatrix, grad_xi: Vector) -> Vector:
    """Two-dimensional version of gradient_to_physical using modj."""
    c = 1.0 / jac.modj
    a11 = c * jac.j22
    a12 = -c * jac.j21
    a21 = -c * jac.j12
    a22 = c * jac.j11
    return Point(
        a11 * grad_xi.x + a12 * grad_xi.y,
        a21 * grad_xi.x + a22 * grad_xi.y,
    )