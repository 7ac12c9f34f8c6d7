"""Simplex geometry helpers."""

from __future__ import annotations

from cfdlab.geom.point import Point


def triangle_area(p0: Point, p1: Point, p2: Point) -> float:
    """Signed area of a triangle in the xy plane (positive if counter-clockwise)."""
    x1 = p1.x - p0.x
    y1 = p1.y - p0.y
    x2 = p2.x - p0.x
    y2 = p2.y - p0.y
    return 0.5 * (x1 * y2 - x2 * y1)