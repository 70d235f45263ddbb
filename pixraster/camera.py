"""A look-direction camera producing view and projection matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .mathhelper import cross, dot, normalize
from .matrix import Matrix4
from .vectors import Vector3

_WORLD_UP = Vector3(0.0, 1.0, 0.0)


def _default_direction() -> Vector3:
    return Vector3(0.0, 0.0, 1.0)


@dataclass
class Camera:
    """Camera state: position, look direction, clip planes and vertical field of view in radians."""

    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=_default_direction)
    near_plane: float = 0.1
    far_plane: float = 100.0
    fov: float = 1.57

    def reset(self) -> None:
        """Restore every setting to its default."""
        defaults = Camera()
        self.position = defaults.position
        self.direction = defaults.direction
        self.near_plane = defaults.near_plane
        self.far_plane = defaults.far_plane
        self.fov = defaults.fov

    def view_matrix(self) -> Matrix4:
        """World-to-view matrix for row vectors."""
        look = normalize(self.direction)
        right = normalize(cross(_WORLD_UP, look))
        up = normalize(cross(look, right))
        a = -dot(right, self.position)
        b = -dot(up, self.position)
        c = -dot(look, self.position)
        return Matrix4(
            right.x, up.x, look.x, 0.0,
            right.y, up.y, look.y, 0.0,
            right.z, up.z, look.z, 0.0,
            a, b, c, 1.0,
        )

    def projection_matrix(self, width: float, height: float) -> Matrix4:
        """Perspective projection for a render target of ``width`` by ``height``."""
        aspect = width / height
        d = 1.0 / math.tan(self.fov * 0.5)
        w = d / aspect
        zf = self.far_plane
        zn = self.near_plane
        q = zf / (zf - zn)
        return Matrix4(
            w, 0.0, 0.0, 0.0,
            0.0, d, 0.0, 0.0,
            0.0, 0.0, q, 1.0,
            0.0, 0.0, -zn * q, 0.0,
        )