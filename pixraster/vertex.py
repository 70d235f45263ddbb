"""Vertices and the interpolation used by clipping and rasterising."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .colors import Color
from .vectors import Vector3


@dataclass(frozen=True)
class Vertex:
    """A position with a colour."""

    pos: Vector3 = field(default_factory=Vector3)
    color: Color = field(default_factory=Color)


def lerp_position(a: Vector3, b: Vector3, t: float) -> Vector3:
    """Linear interpolation between two positions."""
    return Vector3(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
    )


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Linear interpolation between two colours, channel by channel."""
    return Color(
        a.r + (b.r - a.r) * t,
        a.g + (b.g - a.g) * t,
        a.b + (b.b - a.b) * t,
        a.a + (b.a - a.a) * t,
    )


def lerp_vertex(a: Vertex, b: Vertex, t: float) -> Vertex:
    """Interpolate two vertices and snap x and y down to whole pixels.

    A small bias of 0.05 is added before flooring so values just under a
    whole number land on it.
    """
    pos = lerp_position(a.pos, b.pos, t)
    snapped = Vector3(
        float(math.floor(pos.x + 0.05)),
        float(math.floor(pos.y + 0.05)),
        pos.z,
    )
    return Vertex(snapped, lerp_color(a.color, b.color, t))