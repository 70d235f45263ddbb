"""Buffers vertices between begin and end of a draw and sends them to the rasteriser."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Optional

from .camera import Camera
from .clipper import Clipper
from .mathhelper import flatten_screen_coords, transform_coord
from .matrix import Matrix4
from .matrixstack import MatrixStack
from .rasterizer import Rasterizer
from .vertex import Vertex


class Topology(Enum):
    """How buffered vertices are grouped into primitives."""

    POINT = "point"
    LINE = "line"
    TRIANGLE = "triangle"


def screen_transform(width: float, height: float) -> Matrix4:
    """Map normalised device coordinates to pixel coordinates, y pointing down."""
    hw = width * 0.5
    hh = height * 0.5
    return Matrix4(
        hw, 0.0, 0.0, 0.0,
        0.0, -hh, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        hw, hh, 0.0, 1.0,
    )


class PrimitivesManager:
    """Collects vertices and draws them as points, lines or triangles."""

    def __init__(
        self,
        rasterizer: Rasterizer,
        clipper: Clipper,
        matrix_stack: Optional[MatrixStack] = None,
        camera: Optional[Camera] = None,
    ) -> None:
        self.rasterizer = rasterizer
        self.clipper = clipper
        self.matrix_stack = matrix_stack if matrix_stack is not None else MatrixStack()
        self.camera = camera if camera is not None else Camera()
        self._vertices: list[Vertex] = []
        self._topology = Topology.POINT
        self._drawing = False
        self._apply_transform = False

    def begin_draw(self, topology: Topology, apply_transform: bool = False) -> None:
        """Start a new draw, discarding any buffered vertices."""
        self._topology = topology
        self._apply_transform = apply_transform
        self._drawing = True
        self._vertices = []

    def add_vertex(self, vertex: Vertex) -> None:
        """Buffer a vertex; ignored when no draw has begun."""
        if self._drawing:
            self._vertices.append(vertex)

    def _transformed(self) -> list[Vertex]:
        canvas = self.rasterizer.canvas
        final = (
            self.matrix_stack.transform
            @ self.camera.view_matrix()
            @ self.camera.projection_matrix(canvas.width, canvas.height)
            @ screen_transform(canvas.width, canvas.height)
        )
        return [
            replace(v, pos=flatten_screen_coords(transform_coord(v.pos, final)))
            for v in self._vertices
        ]

    def end_draw(self) -> None:
        """Draw the buffered vertices; raises RuntimeError when no draw has begun."""
        if not self._drawing:
            raise RuntimeError("end_draw called without begin_draw")

        vertices = self._transformed() if self._apply_transform else list(self._vertices)
        raster = self.rasterizer
        clipper = self.clipper

        if self._topology is Topology.POINT:
            for v in vertices:
                if not clipper.clip_point(v):
                    raster.draw_vertex(v)
        elif self._topology is Topology.LINE:
            for a, b in zip(vertices[0::2], vertices[1::2]):
                clipped = clipper.clip_line(a, b)
                if clipped is not None:
                    raster.draw_line(*clipped)
        elif self._topology is Topology.TRIANGLE:
            for a, b, c in zip(vertices[0::3], vertices[1::3], vertices[2::3]):
                polygon = clipper.clip_triangle([a, b, c])
                for p, q in zip(polygon[1:], polygon[2:]):
                    raster.draw_triangle(polygon[0], p, q)

        self._drawing = False