"""Vector and matrix helper functions."""

from __future__ import annotations

import math
from typing import Union

from .matrix import Matrix4
from .vectors import Vector2, Vector3

DEG_TO_RAD = 3.1416 / 180.0

Vector = Union[Vector2, Vector3]


def is_equal(a: float, b: float) -> bool:
    """Return True when ``a`` and ``b`` differ by less than 0.01."""
    return abs(a - b) < 0.01


def flatten_screen_coords(v: Vector3) -> Vector3:
    """Round x and y to the nearest whole pixel, keeping z."""
    return Vector3(math.floor(v.x + 0.5), math.floor(v.y + 0.5), v.z)


def magnitude_squared(v: Vector) -> float:
    """Squared length of a 2D or 3D vector."""
    return sum(c * c for c in v)


def magnitude(v: Vector) -> float:
    """Length of a 2D or 3D vector."""
    return math.sqrt(magnitude_squared(v))


def normalize(v: Vector) -> Vector:
    """Return ``v`` scaled to unit length; a zero vector raises ZeroDivisionError."""
    return v / magnitude(v)


def dot(a: Vector, b: Vector) -> float:
    """Dot product of two vectors of the same dimension."""
    if type(a) is not type(b):
        raise TypeError("dot needs two vectors of the same dimension")
    return sum(x * y for x, y in zip(a, b))


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product of two 3D vectors."""
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def transform_coord(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a point by ``m`` with perspective divide."""
    (m11, m12, m13, m14,
     m21, m22, m23, m24,
     m31, m32, m33, m34,
     m41, m42, m43, m44) = m.values
    w = v.x * m14 + v.y * m24 + v.z * m34 + m44
    inv_w = 1.0 if is_equal(w, 0.0) else 1.0 / w
    return Vector3(
        (v.x * m11 + v.y * m21 + v.z * m31 + m41) * inv_w,
        (v.x * m12 + v.y * m22 + v.z * m32 + m42) * inv_w,
        (v.x * m13 + v.y * m23 + v.z * m33 + m43) * inv_w,
    )


def transform_normal(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a direction by the upper 3x3 of ``m`` and normalize it."""
    (m11, m12, m13, _,
     m21, m22, m23, _,
     m31, m32, m33, _,
     _, _, _, _) = m.values
    return normalize(
        Vector3(
            v.x * m11 + v.y * m21 + v.z * m31,
            v.x * m12 + v.y * m22 + v.z * m32,
            v.x * m13 + v.y * m23 + v.z * m33,
        )
    )


def transpose(m: Matrix4) -> Matrix4:
    """Return the transpose of ``m``."""
    return Matrix4(*(value for column in zip(*m.rows()) for value in column))


def determinant(m: Matrix4) -> float:
    """Determinant of ``m``."""
    (m11, m12, m13, m14,
     m21, m22, m23, m24,
     m31, m32, m33, m34,
     m41, m42, m43, m44) = m.values
    det = m11 * (m22 * (m33 * m44 - m43 * m34)
                 - m23 * (m32 * m44 - m42 * m34)
                 + m24 * (m32 * m43 - m42 * m33))
    det -= m12 * (m21 * (m33 * m44 - m43 * m34)
                  - m23 * (m31 * m44 - m41 * m34)
                  + m24 * (m31 * m43 - m41 * m33))
    det += m13 * (m21 * (m32 * m44 - m42 * m34)
                  - m22 * (m31 * m44 - m41 * m34)
                  + m24 * (m31 * m42 - m41 * m32))
    det -= m14 * (m21 * (m32 * m43 - m42 * m33)
                  - m22 * (m31 * m43 - m41 * m33)
                  + m23 * (m31 * m42 - m41 * m32))
    return det


def adjoint(m: Matrix4) -> Matrix4:
    """Adjugate (transposed cofactor matrix) of ``m``."""
    (m11, m12, m13, m14,
     m21, m22, m23, m24,
     m31, m32, m33, m34,
     m41, m42, m43, m44) = m.values
    return Matrix4(
        +(m22 * (m33 * m44 - m43 * m34) - m23 * (m32 * m44 - m42 * m34) + m24 * (m32 * m43 - m42 * m33)),
        -(m12 * (m33 * m44 - m43 * m34) - m13 * (m32 * m44 - m42 * m34) + m14 * (m32 * m43 - m42 * m33)),
        +(m12 * (m23 * m44 - m43 * m24) - m13 * (m22 * m44 - m42 * m24) + m14 * (m22 * m43 - m42 * m23)),
        -(m12 * (m23 * m34 - m33 * m24) - m13 * (m22 * m34 - m32 * m24) + m14 * (m22 * m33 - m32 * m23)),

        -(m21 * (m33 * m44 - m43 * m34) - m31 * (m23 * m44 - m24 * m43) + m41 * (m23 * m34 - m24 * m33)),
        +(m11 * (m33 * m44 - m43 * m34) - m13 * (m31 * m44 - m41 * m34) + m14 * (m31 * m43 - m41 * m33)),
        -(m11 * (m23 * m44 - m43 * m24) - m13 * (m21 * m44 - m41 * m24) + m14 * (m21 * m43 - m41 * m23)),
        +(m11 * (m23 * m34 - m33 * m24) - m13 * (m21 * m34 - m31 * m24) + m14 * (m21 * m33 - m31 * m23)),

        +(m21 * (m32 * m44 - m42 * m34) - m31 * (m22 * m44 - m42 * m24) + m41 * (m22 * m34 - m32 * m24)),
        -(m11 * (m32 * m44 - m42 * m34) - m31 * (m12 * m44 - m42 * m14) + m41 * (m12 * m34 - m32 * m14)),
        +(m11 * (m22 * m44 - m42 * m24) - m12 * (m21 * m44 - m41 * m24) + m14 * (m21 * m42 - m41 * m22)),
        -(m11 * (m22 * m34 - m32 * m24) - m21 * (m12 * m34 - m32 * m14) + m31 * (m12 * m24 - m22 * m14)),

        -(m21 * (m32 * m43 - m42 * m33) - m31 * (m22 * m43 - m42 * m23) + m41 * (m22 * m33 - m32 * m23)),
        +(m11 * (m32 * m43 - m42 * m33) - m12 * (m31 * m43 - m41 * m33) + m13 * (m31 * m42 - m41 * m32)),
        -(m11 * (m22 * m43 - m42 * m23) - m12 * (m21 * m43 - m41 * m23) + m13 * (m21 * m42 - m41 * m22)),
        +(m11 * (m22 * m33 - m32 * m23) - m12 * (m21 * m33 - m31 * m23) + m13 * (m21 * m32 - m31 * m22)),
    )


def inverse(m: Matrix4) -> Matrix4:
    """Inverse of ``m``; raises ValueError when ``m`` is singular."""
    det = determinant(m)
    if det == 0.0:
        raise ValueError("matrix is singular")
    return adjoint(m) * (1.0 / det)