"""Two- and three-component float vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, s: float) -> Vector2:
        """Return a vector with every component set to ``s``."""
        return cls(s, s)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Vector2:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vector2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector2:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vector2(self.x / s, self.y / s)


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, s: float) -> Vector3:
        """Return a vector with every component set to ``s``."""
        return cls(s, s, s)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Vector3:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vector3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector3:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vector3(self.x / s, self.y / s, self.z / s)