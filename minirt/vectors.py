"""Three-component vectors, rays and axis rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector or point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: Number) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, other: Vec3 | Number) -> Vec3:
        """Divide component-wise by another vector, or by a scalar."""
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vec3(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Return the unit vector; a zero vector yields NaN components."""
        length = self.length()
        if length == 0.0:
            return Vec3(math.nan, math.nan, math.nan)
        return self / length


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` heading along ``direction``."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        return self.origin + self.direction * t


def rotate_x(vector: Vec3, degrees: float) -> Vec3:
    """Rotate ``vector`` about the X axis."""
    theta = math.radians(degrees)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return Vec3(
        vector.x,
        vector.y * cos_t - vector.z * sin_t,
        vector.y * sin_t + vector.z * cos_t,
    )


def rotate_y(vector: Vec3, degrees: float) -> Vec3:
    """Rotate ``vector`` about the Y axis."""
    theta = math.radians(degrees)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return Vec3(
        vector.x * cos_t + vector.z * sin_t,
        vector.y,
        vector.z * cos_t - vector.x * sin_t,
    )


def rotate_z(vector: Vec3, degrees: float) -> Vec3:
    """Rotate ``vector`` about the Z axis."""
    theta = math.radians(degrees)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return Vec3(
        vector.x * cos_t - vector.y * sin_t,
        vector.x * sin_t + vector.y * cos_t,
        vector.z,
    )


def rotate(vector: Vec3, angles: Vec3) -> Vec3:
    """Rotate about X, then Y, then Z by ``angles`` (degrees) and normalise."""
    rotated = rotate_x(vector, angles.x)
    rotated = rotate_y(rotated, angles.y)
    rotated = rotate_z(rotated, angles.z)
    return rotated.normalized()