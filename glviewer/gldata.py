"""Vertex storage for lines and triangles: position then colour per vertex."""

from __future__ import annotations

from enum import IntFlag
from typing import Iterable

from glviewer.geometry import Vec3, normal

FLOATS_PER_VERTEX = 6


class Sides(IntFlag):
    NONE = 0
    LEFT = 1 << 0
    RIGHT = 1 << 1
    FRONT = 1 << 2
    BACK = 1 << 3
    TOP = 1 << 4
    BOTTOM = 1 << 5
    ALL = LEFT | RIGHT | FRONT | BACK | TOP | BOTTOM


def _vertex(position: Vec3, color: Vec3) -> Iterable[float]:
    yield from position
    yield from color


class GLData:
    """Flat float buffers of coloured line and triangle vertices."""

    def __init__(self) -> None:
        self._lines: list[float] = []
        self._tris: list[float] = []

    @property
    def line_data(self) -> tuple[float, ...]:
        return tuple(self._lines)

    @property
    def triangle_data(self) -> tuple[float, ...]:
        return tuple(self._tris)

    def line_vertex_count(self) -> int:
        return len(self._lines) // FLOATS_PER_VERTEX

    def triangle_vertex_count(self) -> int:
        return len(self._tris) // FLOATS_PER_VERTEX

    def resize_line_vertex_count(self, count: int) -> None:
        """Truncate the line buffer, or pad it with zero vertices."""
        size = count * FLOATS_PER_VERTEX
        del self._lines[size:]
        self._lines.extend([0.0] * (size - len(self._lines)))

    def copy(self) -> GLData:
        duplicate = GLData()
        duplicate._lines = list(self._lines)
        duplicate._tris = list(self._tris)
        return duplicate

    def add_line(self, a: Vec3, b: Vec3, color: Vec3) -> None:
        for point in (a, b):
            self._lines.extend(_vertex(point, color))

    def add_triangle(self, a: Vec3, b: Vec3, c: Vec3, color: Vec3) -> None:
        """Add a triangle; its front has the vertices counter-clockwise."""
        for point in (a, b, c):
            self._tris.extend(_vertex(point, color))

    def add_cuboid(self, u1left: Vec3, u1right: Vec3, u2left: Vec3, u2right: Vec3,
                   thickness: float, frac_green: float, frac_blue: float,
                   sides: Sides = Sides.ALL) -> None:
        """Add a cuboid from its top rectangle, extruded by thickness along the normal."""
        offset = normal(u1left, u2left, u1right) * thickness
        l1left = u1left + offset
        l1right = u1right + offset
        l2left = u2left + offset
        l2right = u2right + offset

        top = Vec3(0.0, 1.0 - frac_green, frac_blue)
        blue = Vec3(0.0, 0.0, 1.0)
        yellow = Vec3(1.0, 1.0, 0.0)
        bottom = Vec3(1.0 - frac_green, 0.0, frac_blue)

        faces = (
            (Sides.TOP, top, ((u1left, u1right, u2left), (u1right, u2right, u2left))),
            (Sides.RIGHT, blue, ((u1right, l1right, u2right), (l1right, l2right, u2right))),
            (Sides.FRONT, blue, ((u2left, u2right, l2right), (u2left, l2right, l2left))),
            (Sides.LEFT, yellow, ((u1left, u2left, l1left), (l1left, u2left, l2left))),
            (Sides.BACK, yellow, ((u1right, u1left, l1left), (u1right, l1left, l1right))),
            (Sides.BOTTOM, bottom, ((l1left, l2left, l1right), (l1right, l2left, l2right))),
        )
        for side, color, triangles in faces:
            if sides & side:
                for triangle in triangles:
                    self.add_triangle(*triangle, color)