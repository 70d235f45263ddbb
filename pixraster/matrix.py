"""A 4x4 row-major matrix for row-vector transforms."""

from __future__ import annotations

import math
from typing import Iterator, Tuple, Union

from .vectors import Vector3

Row = Tuple[float, float, float, float]

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class Matrix4:
    """An immutable 4x4 matrix; built from 16 values in row order, identity if none."""

    __slots__ = ("_values",)

    def __init__(self, *values: float) -> None:
        if not values:
            values = _IDENTITY
        if len(values) != 16:
            raise ValueError(f"Matrix4 needs 16 values, got {len(values)}")
        object.__setattr__(self, "_values", tuple(float(v) for v in values))

    def __setattr__(self, name, value):
        raise AttributeError("Matrix4 is immutable")

    @property
    def values(self) -> tuple[float, ...]:
        """The 16 elements in row order."""
        return self._values

    def rows(self) -> tuple[Row, Row, Row, Row]:
        """Return the four rows as tuples."""
        v = self._values
        return (v[0:4], v[4:8], v[8:12], v[12:16])  # type: ignore[return-value]

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError("Matrix4 index out of range")
        return self._values[row * 4 + col]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Matrix4{self._values!r}"

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a + b for a, b in zip(self._values, other._values)))

    def __mul__(self, other: Union[Matrix4, float]) -> Matrix4:
        if isinstance(other, Matrix4):
            return self @ other
        if isinstance(other, (int, float)):
            return Matrix4(*(a * other for a in self._values))
        return NotImplemented

    def __rmul__(self, s: float) -> Matrix4:
        if isinstance(s, (int, float)):
            return Matrix4(*(a * s for a in self._values))
        return NotImplemented

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other.rows()))
        return Matrix4(
            *(
                sum(r * c for r, c in zip(row, col))
                for row in self.rows()
                for col in columns
            )
        )

    @classmethod
    def identity(cls) -> Matrix4:
        """Return the identity matrix."""
        return cls(*_IDENTITY)

    @classmethod
    def rotation_x(cls, rad: float) -> Matrix4:
        """Rotation about the X axis by ``rad`` radians."""
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_y(cls, rad: float) -> Matrix4:
        """Rotation about the Y axis by ``rad`` radians."""
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_z(cls, rad: float) -> Matrix4:
        """Rotation about the Z axis by ``rad`` radians."""
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def scale(cls, s: Union[float, Vector3]) -> Matrix4:
        """Scaling by a uniform factor or by a per-axis vector."""
        if isinstance(s, (int, float)):
            sx = sy = sz = float(s)
        else:
            sx, sy, sz = s.x, s.y, s.z
        return cls(
            sx, 0.0, 0.0, 0.0,
            0.0, sy, 0.0, 0.0,
            0.0, 0.0, sz, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def translation(cls, d: Vector3) -> Matrix4:
        """Translation by the vector ``d``."""
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            d.x, d.y, d.z, 1.0,
        )