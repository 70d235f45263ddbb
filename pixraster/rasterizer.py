"""Pixel canvas and the point, line and triangle rasteriser."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .colors import BLACK, WHITE, Color
from .mathhelper import is_equal
from .vertex import Vertex, lerp_vertex


class FillMode(Enum):
    """How triangles are drawn."""

    WIREFRAME = "wireframe"
    SOLID = "solid"


class Canvas:
    """A grid of colours; writes outside the grid are ignored."""

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = BLACK,
        pixel_size: int = 1,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        if pixel_size <= 0:
            raise ValueError(f"pixel size must be positive, got {pixel_size}")
        self.width = width
        self.height = height
        self.background = background
        self.pixel_size = pixel_size
        self._pixels = [[background] * width for _ in range(height)]

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Paint one pixel; coordinates off the canvas are ignored."""
        if self._contains(x, y):
            self._pixels[y][x] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the colour of one pixel; raises IndexError off the canvas."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y][x]

    def clear(self) -> None:
        """Fill the whole canvas with the background colour."""
        for row in self._pixels:
            row[:] = [self.background] * self.width


class Rasterizer:
    """Draws points, lines and triangles onto a canvas in the current colour."""

    def __init__(
        self,
        canvas: Canvas,
        color: Color = WHITE,
        fill_mode: FillMode = FillMode.SOLID,
    ) -> None:
        self.canvas = canvas
        self.color = color
        self.fill_mode = fill_mode

    def draw_point(self, x: int, y: int) -> None:
        """Paint pixel (x, y) with the current colour."""
        self.canvas.set_pixel(x, y, self.color)

    def draw_vertex(self, vertex: Vertex) -> None:
        """Make the vertex colour current and paint its pixel."""
        self.color = vertex.color
        self.draw_point(int(vertex.pos.x), int(vertex.pos.y))

    def _draw_line_low(self, left: Vertex, right: Vertex) -> None:
        dx = right.pos.x - left.pos.x
        start, end = int(left.pos.x), int(right.pos.x)
        for x in range(start, end + 1):
            t = (x - start) / dx if dx else 0.0
            self.draw_vertex(lerp_vertex(left, right, t))

    def _draw_line_high(self, bottom: Vertex, top: Vertex) -> None:
        dy = top.pos.y - bottom.pos.y
        start, end = int(bottom.pos.y), int(top.pos.y)
        for y in range(start, end + 1):
            t = (y - start) / dy if dy else 0.0
            self.draw_vertex(lerp_vertex(bottom, top, t))

    def draw_line(self, a: Vertex, b: Vertex) -> None:
        """Draw a line, stepping along its longer axis and interpolating colour."""
        dx = b.pos.x - a.pos.x
        dy = b.pos.y - a.pos.y
        if is_equal(dx, 0.0) or abs(dy / dx) >= 1:
            if a.pos.y < b.pos.y:
                self._draw_line_high(a, b)
            else:
                self._draw_line_high(b, a)
        elif a.pos.x < b.pos.x:
            self._draw_line_low(a, b)
        else:
            self._draw_line_low(b, a)

    def draw_triangle(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        """Draw a triangle as outline or filled, according to the fill mode."""
        if self.fill_mode is FillMode.WIREFRAME:
            self.draw_line(a, b)
            self.draw_line(b, c)
            self.draw_line(c, a)
        else:
            top, middle, bottom = sorted((a, b, c), key=lambda v: v.pos.y)
            self._draw_filled_triangle(top, middle, bottom)

    def _draw_filled_triangle(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        dy = c.pos.y - a.pos.y
        sides: Optional[tuple[tuple[Vertex, Vertex], tuple[Vertex, Vertex]]]
        if is_equal(a.pos.y, b.pos.y):
            sides = ((a, c), (b, c))
        elif is_equal(b.pos.y, c.pos.y):
            sides = ((a, b), (a, c))
        else:
            split = lerp_vertex(a, c, (b.pos.y - a.pos.y) / dy)
            self._draw_filled_triangle(a, b, split)
            self._draw_filled_triangle(b, split, c)
            return
        (p0, p1), (q0, q1) = sides
        start, end = int(a.pos.y), int(c.pos.y)
        for y in range(start, end + 1):
            t = (y - start) / dy if dy else 0.0
            self.draw_line(lerp_vertex(p0, p1, t), lerp_vertex(q0, q1, t))