"""Two, three and four component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

from junglecore.mathutil import inv_sqrt


@dataclass(frozen=True, slots=True)
class Vector2D:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x / scalar, self.y / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class Vector:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector]
    ONE: ClassVar[Vector]
    FORWARD: ClassVar[Vector]
    RIGHT: ClassVar[Vector]
    UP: ClassVar[Vector]

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[float, Vector]) -> Vector:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: float) -> Vector:
        return self * scalar

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vector) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vector:
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag > 0:
            return Vector(self.x / mag, self.y / mag, self.z / mag)
        return Vector()

    def cross(self, other: Vector) -> Vector:
        """Cross product."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance(self, other: Vector) -> float:
        """Distance between two points."""
        return (self - other).magnitude()

    def clamp_max_size(self, max_size: float) -> Vector:
        """Shorten the vector so its length does not exceed ``max_size``."""
        if max_size < 1.0e-4:
            return Vector()
        length_sq = self.magnitude_squared()
        if length_sq > max_size * max_size:
            scale = max_size * inv_sqrt(length_sq)
            return Vector(self.x * scale, self.y * scale, self.z * scale)
        return self


Vector.ZERO = Vector(0.0, 0.0, 0.0)
Vector.ONE = Vector(1.0, 1.0, 1.0)
Vector.FORWARD = Vector(1.0, 0.0, 0.0)
Vector.RIGHT = Vector(0.0, 1.0, 0.0)
Vector.UP = Vector(0.0, 0.0, 1.0)


@dataclass(frozen=True, slots=True)
class Vector4:
    """A 4D vector whose last component is named ``a``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    a: float = 0.0

    def __add__(self, other: Vector4) -> Vector4:
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.a + other.a)

    def __sub__(self, other: Vector4) -> Vector4:
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.a - other.a)

    def __truediv__(self, scalar: float) -> Vector4:
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.a / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.a

    def xyz(self) -> Vector:
        """The first three components as a :class:`Vector`."""
        return Vector(self.x, self.y, self.z)