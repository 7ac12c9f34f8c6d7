"""Polygon cell connectivity with faces ordered along the cell contour."""

from __future__ import annotations

from typing import Protocol, Sequence


class PolygonGrid(Protocol):
    def tab_cell_point(self, icell: int) -> Sequence[int]: ...

    def tab_cell_face(self, icell: int) -> Sequence[int]: ...

    def tab_face_point(self, iface: int) -> Sequence[int]: ...


class PolygonElementInfo:
    """Points of a 2D polygon cell and its faces in contour order.

    ``ifaces[i]`` joins ``ipoints[i]`` and ``ipoints[i + 1]``;
    ``is_face_reverted[i]`` tells whether that face runs the other way.
    """

    def __init__(self, grid: PolygonGrid, icell: int) -> None:
        self.icell = icell
        self.ipoints: list[int] = list(grid.tab_cell_point(icell))
        self.ifaces: list[int] = []
        self.is_face_reverted: list[bool] = []

        cell_faces = list(grid.tab_cell_face(icell))
        npoints = len(self.ipoints)
        for ip, p0 in enumerate(self.ipoints):
            p1 = self.ipoints[(ip + 1) % npoints]
            for iface in cell_faces:
                face_points = list(grid.tab_face_point(iface))
                if len(face_points) != 2:
                    raise ValueError(
                        f"face {iface} of cell {icell} has {len(face_points)} points, expected 2"
                    )
                if face_points == [p0, p1]:
                    self.ifaces.append(iface)
                    self.is_face_reverted.append(False)
                    break
                if face_points == [p1, p0]:
                    self.ifaces.append(iface)
                    self.is_face_reverted.append(True)
                    break

        if len(self.ifaces) != npoints:
            raise ValueError(f"faces of cell {icell} do not close its contour")

    def n_points(self) -> int:
        """Number of cell vertices."""
        return len(self.ipoints)