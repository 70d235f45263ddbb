"""The render state shared by every command of a script."""

from __future__ import annotations

import re

from .camera import Camera
from .clipper import Clipper, ClipRect
from .matrixstack import MatrixStack
from .primitives import PrimitivesManager
from .rasterizer import Canvas, Rasterizer

DEFAULT_WIDTH = 500
DEFAULT_HEIGHT = 500
DEFAULT_PIXEL_SIZE = 1

_VAR_NAME = re.compile(r"\$[a-zA-Z_]+")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _is_var_name(text: str) -> bool:
    return _VAR_NAME.fullmatch(text) is not None


def _parse_float(text: str) -> float:
    """Read the number at the start of ``text``; trailing characters are ignored."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``; trailing characters are ignored."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _canvas_rect(width: int, height: int) -> ClipRect:
    return ClipRect(0.0, 0.0, float(width - 1), float(height - 1))


class RenderContext:
    """Canvas, rasteriser, clipper, transforms, camera and script variables."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        pixel_size: int = DEFAULT_PIXEL_SIZE,
    ) -> None:
        self.rasterizer = Rasterizer(Canvas(width, height, pixel_size=pixel_size))
        self.clipper = Clipper(_canvas_rect(width, height))
        self.matrix_stack = MatrixStack()
        self.camera = Camera()
        self.primitives = PrimitivesManager(
            self.rasterizer, self.clipper, self.matrix_stack, self.camera
        )
        self.variables: dict[str, float] = {}
        self.variable_settings: dict[str, tuple[float, float, float]] = {}
        self.show_grid = False

    @property
    def canvas(self) -> Canvas:
        """The canvas currently drawn on."""
        return self.rasterizer.canvas

    def new_frame(self) -> None:
        """Reset clipping, the matrix stack and the camera for a new frame."""
        self.clipper.reset()
        self.matrix_stack.reset()
        self.camera.reset()

    def set_resolution(self, width: int, height: int, pixel_size: int = 1) -> None:
        """Replace the canvas with a blank one of the given size."""
        canvas = Canvas(width, height, pixel_size=pixel_size)
        self.rasterizer.canvas = canvas
        self.clipper.rect = _canvas_rect(width, height)
        self.show_grid = False

    def resolve_float(self, text: str) -> float:
        """Return the value of a ``$variable`` or of a number literal.

        Unknown variables raise KeyError; text that is not a number raises ValueError.
        """
        if text in self.variables:
            return self.variables[text]
        if _is_var_name(text):
            raise KeyError(f"unknown variable: {text}")
        return _parse_float(text)