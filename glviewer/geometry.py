"""Small 3D math types: vectors, quaternions and 4x4 matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_FUZZY = 1e-5


def _is_null(value: float) -> bool:
    return abs(value) <= _FUZZY


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return self + -other

    def __neg__(self) -> Vec3:
        return self * -1.0

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec3:
        return self * (1.0 / divisor)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        return Vec3() if _is_null(length) else self / length

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    """Unit normal of the plane through a, b and c."""
    return (b - a).cross(c - a).normalized()


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion with scalar part w."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.w, self.x, self.y, self.z))

    @property
    def vector(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return self.rotated_vector(other)
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self
        w2, x2, y2, z2 = other
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    @staticmethod
    def from_axis_and_angle(axis: Vec3, angle: float) -> Quaternion:
        """Rotation of angle degrees about axis."""
        half = math.radians(angle / 2.0)
        v = axis.normalized() * math.sin(half)
        return Quaternion(math.cos(half), *v).normalized()

    @staticmethod
    def from_axes(x_axis: Vec3, y_axis: Vec3, z_axis: Vec3) -> Quaternion:
        """Rotation taking the unit axes onto the three given axes."""
        m = [list(row) for row in zip(x_axis, y_axis, z_axis)]
        trace = m[0][0] + m[1][1] + m[2][2]
        if trace > 1e-8:
            s = 2.0 * math.sqrt(trace + 1.0)
            return Quaternion(0.25 * s, (m[2][1] - m[1][2]) / s,
                              (m[0][2] - m[2][0]) / s, (m[1][0] - m[0][1]) / s)
        i = max(range(3), key=lambda n: (m[n][n], -n))
        j, k = (i + 1) % 3, (i + 2) % 3
        s = 2.0 * math.sqrt(m[i][i] - m[j][j] - m[k][k] + 1.0)
        axis = [0.0, 0.0, 0.0]
        axis[i] = 0.25 * s
        axis[j] = (m[j][i] + m[i][j]) / s
        axis[k] = (m[k][i] + m[i][k]) / s
        return Quaternion((m[k][j] - m[j][k]) / s, *axis)

    @staticmethod
    def from_direction(direction: Vec3, up: Vec3) -> Quaternion:
        """Orientation whose local z axis points along direction."""
        if all(_is_null(c) for c in direction):
            return Quaternion()
        z_axis = direction.normalized()
        x_axis = up.cross(z_axis)
        if _is_null(x_axis.dot(x_axis)):
            # up is parallel to direction: shortest rotation from +z
            d = z_axis.z + 1.0
            if _is_null(d):
                return Quaternion(0.0, 0.0, 1.0, 0.0)
            d = math.sqrt(2.0 * d)
            axis = Vec3(0.0, 0.0, 1.0).cross(z_axis) / d
            return Quaternion(d * 0.5, *axis).normalized()
        x_axis = x_axis.normalized()
        return Quaternion.from_axes(x_axis, z_axis.cross(x_axis), z_axis)

    def conjugated(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def normalized(self) -> Quaternion:
        length = math.sqrt(sum(c * c for c in self))
        if _is_null(length):
            return Quaternion(0.0, 0.0, 0.0, 0.0)
        return Quaternion(*(c / length for c in self))

    def rotated_vector(self, v: Vec3) -> Vec3:
        """Vector v rotated by this quaternion."""
        return (self * Quaternion(0.0, *v) * self.conjugated()).vector


_IDENTITY = tuple(tuple(float(r == c) for c in range(4)) for r in range(4))


@dataclass(frozen=True)
class Matrix4:
    """An immutable row-major 4x4 matrix; transforms return new matrices."""

    rows: tuple[tuple[float, ...], ...] = _IDENTITY

    @staticmethod
    def identity() -> Matrix4:
        return Matrix4()

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.rows[row][col]

    def __matmul__(self, other: Matrix4) -> Matrix4:
        columns = list(zip(*other.rows))
        return Matrix4(tuple(
            tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
            for row in self.rows
        ))

    def _times(self, entries: dict[tuple[int, int], float]) -> Matrix4:
        rows = [list(row) for row in _IDENTITY]
        for (r, c), value in entries.items():
            rows[r][c] = value
        return self @ Matrix4(tuple(map(tuple, rows)))

    def perspective(self, fov: float, aspect: float, near: float, far: float) -> Matrix4:
        """Multiply by a perspective projection; fov is vertical, in degrees."""
        half = math.radians(fov / 2.0)
        if near == far or aspect == 0 or math.sin(half) == 0:
            return self
        cotan = math.cos(half) / math.sin(half)
        clip = far - near
        return self._times({
            (0, 0): cotan / aspect,
            (1, 1): cotan,
            (2, 2): -(near + far) / clip,
            (2, 3): -(2.0 * near * far) / clip,
            (3, 2): -1.0,
            (3, 3): 0.0,
        })

    def ortho(self, left: float, right: float, bottom: float, top: float,
              near: float, far: float) -> Matrix4:
        """Multiply by an orthographic projection."""
        if left == right or bottom == top or near == far:
            return self
        width, height, clip = right - left, top - bottom, far - near
        return self._times({
            (0, 0): 2.0 / width,
            (0, 3): -(left + right) / width,
            (1, 1): 2.0 / height,
            (1, 3): -(top + bottom) / height,
            (2, 2): -2.0 / clip,
            (2, 3): -(near + far) / clip,
        })

    def rotate(self, q: Quaternion) -> Matrix4:
        """Multiply by the rotation of a unit quaternion."""
        w, x, y, z = q
        return self._times({
            (0, 0): 1.0 - 2.0 * (y * y + z * z),
            (0, 1): 2.0 * (x * y - z * w),
            (0, 2): 2.0 * (x * z + y * w),
            (1, 0): 2.0 * (x * y + z * w),
            (1, 1): 1.0 - 2.0 * (x * x + z * z),
            (1, 2): 2.0 * (y * z - x * w),
            (2, 0): 2.0 * (x * z - y * w),
            (2, 1): 2.0 * (y * z + x * w),
            (2, 2): 1.0 - 2.0 * (x * x + y * y),
        })

    def translate(self, v: Vec3) -> Matrix4:
        """Multiply by a translation."""
        return self._times({(0, 3): v.x, (1, 3): v.y, (2, 3): v.z})

    def map(self, v: Vec3) -> Vec3:
        """Transform a point, dividing by w where w is neither 0 nor 1."""
        point = (v.x, v.y, v.z, 1.0)
        x, y, z, w = (sum(a * b for a, b in zip(row, point)) for row in self.rows)
        if w in (0.0, 1.0):
            return Vec3(x, y, z)
        return Vec3(x / w, y / w, z / w)