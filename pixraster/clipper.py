"""Viewport clipping for points, lines and triangles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .vectors import Vector3
from .vertex import Vertex, lerp_vertex

_INSIDE = 0
_LEFT = 1 << 1
_RIGHT = 1 << 2
_BOTTOM = 1 << 3
_TOP = 1 << 4


class _Edge(Enum):
    LEFT = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 3


@dataclass(frozen=True)
class ClipRect:
    """An axis-aligned clip rectangle in screen space; y grows downwards."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def outcode(self, x: float, y: float) -> int:
        """Cohen-Sutherland region code of the point (x, y)."""
        code = _INSIDE
        if x < self.min_x:
            code |= _LEFT
        elif x > self.max_x:
            code |= _RIGHT
        if y < self.min_y:
            code |= _TOP
        elif y > self.max_y:
            code |= _BOTTOM
        return code

    def _in_front(self, edge: _Edge, pos: Vector3) -> bool:
        if edge is _Edge.LEFT:
            return pos.x > self.min_x
        if edge is _Edge.TOP:
            return pos.y > self.min_y
        if edge is _Edge.RIGHT:
            return pos.x < self.max_x
        return pos.y < self.max_y

    def _intersect(self, edge: _Edge, a: Vertex, b: Vertex) -> Vertex:
        if edge is _Edge.LEFT:
            t = (self.min_x - a.pos.x) / (b.pos.x - a.pos.x)
        elif edge is _Edge.TOP:
            t = (self.min_y - a.pos.y) / (b.pos.y - a.pos.y)
        elif edge is _Edge.RIGHT:
            t = (self.max_x - a.pos.x) / (b.pos.x - a.pos.x)
        else:
            t = (self.max_y - a.pos.y) / (b.pos.y - a.pos.y)
        return lerp_vertex(a, b, t)


class Clipper:
    """Clips primitives against a rectangle; does nothing while clipping is off."""

    def __init__(self, rect: ClipRect, clipping: bool = False) -> None:
        self.rect = rect
        self.clipping = clipping

    def reset(self) -> None:
        """Turn clipping off."""
        self.clipping = False

    def clip_point(self, v: Vertex) -> bool:
        """Return True when the point lies outside the rectangle and should be dropped."""
        if not self.clipping:
            return False
        r = self.rect
        return (
            v.pos.x < r.min_x
            or v.pos.x > r.max_x
            or v.pos.y < r.min_y
            or v.pos.y > r.max_y
        )

    def clip_line(self, a: Vertex, b: Vertex) -> Optional[tuple[Vertex, Vertex]]:
        """Clip a line segment.

        Returns the (possibly shortened) endpoints, or None when the whole
        line lies outside the rectangle.
        """
        if not self.clipping:
            return a, b
        r = self.rect
        code_a = r.outcode(a.pos.x, a.pos.y)
        code_b = r.outcode(b.pos.x, b.pos.y)
        while True:
            if not (code_a | code_b):
                return a, b
            if code_a & code_b:
                return None
            out = max(code_a, code_b)
            t = 0.0
            if out & _TOP:
                t = (r.min_y - a.pos.y) / (b.pos.y - a.pos.y)
            elif out & _BOTTOM:
                t = (r.max_y - a.pos.y) / (b.pos.y - a.pos.y)
            elif out & _RIGHT:
                t = (r.max_x - a.pos.x) / (b.pos.x - a.pos.x)
            elif out & _LEFT:
                t = (r.min_x - a.pos.x) / (b.pos.x - a.pos.x)
            if out == code_a:
                a = lerp_vertex(a, b, t)
                code_a = r.outcode(a.pos.x, a.pos.y)
            else:
                b = lerp_vertex(a, b, t)
                code_b = r.outcode(b.pos.x, b.pos.y)

    def clip_triangle(self, vertices: Sequence[Vertex]) -> list[Vertex]:
        """Clip a polygon edge by edge and return the resulting polygon."""
        polygon = list(vertices)
        if not self.clipping:
            return polygon
        for edge in _Edge:
            clipped: list[Vertex] = []
            for vn, vnp1 in zip(polygon, polygon[1:] + polygon[:1]):
                n_front = self.rect._in_front(edge, vn.pos)
                np1_front = self.rect._in_front(edge, vnp1.pos)
                if n_front and np1_front:
                    clipped.append(vnp1)
                elif n_front:
                    clipped.append(self.rect._intersect(edge, vn, vnp1))
                elif np1_front:
                    clipped.append(self.rect._intersect(edge, vn, vnp1))
                    clipped.append(vnp1)
            polygon = clipped
        return polygon