"""4x4 float matrices in the row-vector convention."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Union

from junglecore.vector import Vector, Vector4

Row = tuple[float, float, float, float]
Rows = tuple[Row, Row, Row, Row]

_DEGREES_TO_RADIANS = 3.14159265359 / 180.0
_SINGULAR_EPSILON = 1e-6


def _zero_rows() -> Rows:
    return tuple((0.0, 0.0, 0.0, 0.0) for _ in range(4))  # type: ignore[return-value]


def _minor(rows: Rows, skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]


def _det3(sub: list[list[float]]) -> float:
    return (
        sub[0][0] * (sub[1][1] * sub[2][2] - sub[1][2] * sub[2][1])
        - sub[0][1] * (sub[1][0] * sub[2][2] - sub[1][2] * sub[2][0])
        + sub[0][2] * (sub[1][0] * sub[2][1] - sub[1][1] * sub[2][0])
    )


@dataclass(frozen=True, slots=True)
class Matrix:
    """An immutable 4x4 matrix; with no rows given, every entry is zero."""

    rows: Rows = field(default_factory=_zero_rows)

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a matrix needs 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, row: int) -> Row:
        return self.rows[row]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __add__(self, other: Matrix) -> Matrix:
        return Matrix(
            tuple(tuple(a + b for a, b in zip(ra, rb)) for ra, rb in zip(self.rows, other.rows))
        )

    def __sub__(self, other: Matrix) -> Matrix:
        return Matrix(
            tuple(tuple(a - b for a, b in zip(ra, rb)) for ra, rb in zip(self.rows, other.rows))
        )

    def __mul__(self, other: Union[Matrix, float]) -> Matrix:
        """Matrix product with another matrix, or scaling by a number."""
        if isinstance(other, Matrix):
            return self @ other
        return Matrix(tuple(tuple(value * other for value in row) for row in self.rows))

    def __rmul__(self, scalar: float) -> Matrix:
        return self * scalar

    def __matmul__(self, other: Matrix) -> Matrix:
        columns = list(zip(*other.rows))
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def __truediv__(self, scalar: float) -> Matrix:
        return Matrix(tuple(tuple(value / scalar for value in row) for row in self.rows))

    @staticmethod
    def identity() -> Matrix:
        """The identity matrix."""
        return _IDENTITY

    def transpose(self) -> Matrix:
        """Rows and columns swapped."""
        return Matrix(tuple(zip(*self.rows)))

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return sum(
            (1 if col % 2 == 0 else -1) * value * _det3(_minor(self.rows, 0, col))
            for col, value in enumerate(self.rows[0])
        )

    def inverse(self) -> Matrix:
        """Inverse via the adjugate; a (near) singular matrix yields the identity."""
        det = self.determinant()
        if abs(det) < _SINGULAR_EPSILON:
            return _IDENTITY
        inv_det = 1.0 / det
        return Matrix(
            tuple(
                tuple(
                    (1 if (i + j) % 2 == 0 else -1) * _det3(_minor(self.rows, i, j)) * inv_det
                    for i in range(4)
                )
                for j in range(4)
            )
        )

    @staticmethod
    def create_rotation(roll: float, pitch: float, yaw: float) -> Matrix:
        """Rotation from Euler angles in degrees, applied yaw, then pitch, then roll."""
        rad_roll = roll * _DEGREES_TO_RADIANS
        rad_pitch = pitch * _DEGREES_TO_RADIANS
        rad_yaw = yaw * _DEGREES_TO_RADIANS
        cos_roll, sin_roll = math.cos(rad_roll), math.sin(rad_roll)
        cos_pitch, sin_pitch = math.cos(rad_pitch), math.sin(rad_pitch)
        cos_yaw, sin_yaw = math.cos(rad_yaw), math.sin(rad_yaw)

        rotation_z = Matrix((
            (cos_yaw, sin_yaw, 0, 0),
            (-sin_yaw, cos_yaw, 0, 0),
            (0, 0, 1, 0),
            (0, 0, 0, 1),
        ))
        rotation_y = Matrix((
            (cos_pitch, 0, -sin_pitch, 0),
            (0, 1, 0, 0),
            (sin_pitch, 0, cos_pitch, 0),
            (0, 0, 0, 1),
        ))
        rotation_x = Matrix((
            (1, 0, 0, 0),
            (0, cos_roll, sin_roll, 0),
            (0, -sin_roll, cos_roll, 0),
            (0, 0, 0, 1),
        ))
        return rotation_x * rotation_y * rotation_z

    @staticmethod
    def create_scale(scale_x: float, scale_y: float, scale_z: float) -> Matrix:
        """Axis-aligned scale matrix."""
        return Matrix((
            (scale_x, 0, 0, 0),
            (0, scale_y, 0, 0),
            (0, 0, scale_z, 0),
            (0, 0, 0, 1),
        ))

    @staticmethod
    def create_translation(position: Vector) -> Matrix:
        """Translation matrix; the offset sits in the last row."""
        return Matrix((
            (1, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 0, 1, 0),
            (position.x, position.y, position.z, 1),
        ))

    def transform_vector(self, vector: Union[Vector, Vector4]) -> Union[Vector, Vector4]:
        """Transform a direction (w = 0); a :class:`Vector4` is transformed as is."""
        if isinstance(vector, Vector4):
            return self.transform_vector4(vector)
        m = self.rows
        return Vector(
            vector.x * m[0][0] + vector.y * m[1][0] + vector.z * m[2][0],
            vector.x * m[0][1] + vector.y * m[1][1] + vector.z * m[2][1],
            vector.x * m[0][2] + vector.y * m[1][2] + vector.z * m[2][2],
        )

    def transform_vector4(self, vector: Vector4) -> Vector4:
        """Transform a four component row vector."""
        m = self.rows
        components = tuple(
            vector.x * m[0][col] + vector.y * m[1][col] + vector.z * m[2][col] + vector.a * m[3][col]
            for col in range(4)
        )
        return Vector4(*components)

    def transform_position(self, vector: Vector) -> Vector:
        """Transform a point (w = 1), dividing by the resulting w unless it is zero."""
        m = self.rows
        x, y, z, w = (
            m[0][col] * vector.x + m[1][col] * vector.y + m[2][col] * vector.z + m[3][col]
            for col in range(4)
        )
        if w != 0.0:
            return Vector(x / w, y / w, z / w)
        return Vector(x, y, z)


_IDENTITY = Matrix((
    (1, 0, 0, 0),
    (0, 1, 0, 0),
    (0, 0, 1, 0),
    (0, 0, 0, 1),
))