"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from junglecore.matrix import Matrix
from junglecore.vector import Vector

_DEGREES_TO_RADIANS = 3.14159265359 / 180.0


@dataclass(frozen=True, slots=True)
class Quat:
    """A quaternion ``w + xi + yj + zk``; the default is no rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    def __mul__(self, other: Quat) -> Quat:
        """Hamilton product; combines two rotations."""
        return Quat(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    @staticmethod
    def identity() -> Quat:
        """The quaternion with every component set to one."""
        return Quat(1.0, 1.0, 1.0, 1.0)

    @staticmethod
    def from_axis_angle(axis: Vector, angle: float) -> Quat:
        """Rotation by ``angle`` radians about ``axis``."""
        half = angle * 0.5
        sin_half = math.sin(half)
        return Quat(math.cos(half), axis.x * sin_half, axis.y * sin_half, axis.z * sin_half)

    @staticmethod
    def create_rotation(roll: float, pitch: float, yaw: float) -> Quat:
        """Rotation from Euler angles in degrees, combined as roll * pitch * yaw."""
        q_roll = Quat.from_axis_angle(Vector(1.0, 0.0, 0.0), roll * _DEGREES_TO_RADIANS)
        q_pitch = Quat.from_axis_angle(Vector(0.0, 1.0, 0.0), pitch * _DEGREES_TO_RADIANS)
        q_yaw = Quat.from_axis_angle(Vector(0.0, 0.0, 1.0), yaw * _DEGREES_TO_RADIANS)
        return q_roll * q_pitch * q_yaw

    def rotate_vector(self, vector: Vector) -> Vector:
        """Rotate ``vector`` as ``q * v * conj(q)``."""
        pure = Quat(0.0, vector.x, vector.y, vector.z)
        conjugate = Quat(self.w, -self.x, -self.y, -self.z)
        result = self * pure * conjugate
        return Vector(result.x, result.y, result.z)

    def is_normalized(self) -> bool:
        """Whether the squared length is within 1e-6 of one."""
        return abs(self.w ** 2 + self.x ** 2 + self.y ** 2 + self.z ** 2 - 1.0) < 1e-6

    def normalize(self) -> Quat:
        """Unit quaternion in the same direction."""
        magnitude = math.sqrt(self.w ** 2 + self.x ** 2 + self.y ** 2 + self.z ** 2)
        return Quat(self.w / magnitude, self.x / magnitude, self.y / magnitude, self.z / magnitude)

    def to_matrix(self) -> Matrix:
        """Rotation matrix that acts on column vectors."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return Matrix((
            (1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y), 0.0),
            (2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x), 0.0),
            (2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y), 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))