"""The script commands and what each does to a render context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Sequence, TypeVar

from .colors import Color
from .context import RenderContext, _is_var_name, _parse_float, _parse_int
from .mathhelper import DEG_TO_RAD
from .primitives import Topology
from .rasterizer import FillMode
from .vectors import Vector3
from .vertex import Vertex

FLT_MAX = 3.4028234663852886e38

_T = TypeVar("_T")


class CommandError(Exception):
    """A command was given parameters it cannot run with."""


def _require(command: Command, params: Sequence[str], count: int) -> None:
    if len(params) < count:
        raise CommandError(
            f"{command.name} needs at least {count} parameter(s), got {len(params)}"
        )


def _convert(command: Command, func: Callable[[str], _T], text: str) -> _T:
    try:
        return func(text)
    except (ValueError, KeyError) as exc:
        raise CommandError(f"{command.name}: {exc}") from exc


def _resolve(command: Command, context: RenderContext, params: Sequence[str]) -> list[float]:
    return [_convert(command, context.resolve_float, p) for p in params]


def _vector(command: Command, context: RenderContext, params: Sequence[str]) -> Vector3:
    _require(command, params, 3)
    return Vector3(*_resolve(command, context, params[:3]))


def _scalar(command: Command, context: RenderContext, params: Sequence[str]) -> float:
    _require(command, params, 1)
    return _resolve(command, context, params[:1])[0]


class Command(ABC):
    """A named script command."""

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    @abstractmethod
    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        """Run the command; raises CommandError when the parameters are unusable."""


class AddVertex(Command):
    name = "Vertex"
    description = (
        "Vertex(x, y)\n"
        "Vertex(x, y, z)\n"
        "Vertex(x, y, r, g, b)\n"
        "Vertex(x, y, z, r, g, b)\n"
        "\n"
        "- Adds vertex to the primatives manager before render."
    )

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        values = [_convert(self, _parse_float, p) for p in params]
        z, r, g, b = 0.0, 1.0, 1.0, 1.0
        if len(values) == 2:
            x, y = values
        elif len(values) == 3:
            x, y, z = values
        elif len(values) == 5:
            x, y, r, g, b = values
        elif len(values) == 6:
            x, y, z, r, g, b = values
        else:
            raise CommandError(f"{self.name} takes 2, 3, 5 or 6 parameters, got {len(values)}")
        context.primitives.add_vertex(Vertex(Vector3(x, y, z), Color(r, g, b, 1.0)))


class BeginDraw(Command):
    name = "BeginDraw"
    description = "BeginDraw(topology)\n\n- Begins drawing. \n- Stores topology."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        _require(self, params, 1)
        try:
            topology = Topology(params[0])
        except ValueError as exc:
            raise CommandError(f"{self.name}: unknown topology {params[0]!r}") from exc
        apply_transform = len(params) > 1 and params[1] == "true"
        context.primitives.begin_draw(topology, apply_transform)


class EndDraw(Command):
    name = "EndDraw"
    description = "EndDraw()\n\n- Sends vertices to rasteriser to render."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        try:
            context.primitives.end_draw()
        except RuntimeError as exc:
            raise CommandError(f"{self.name}: {exc}") from exc


class SetCameraPosition(Command):
    name = "SetCameraPosition"
    description = "SetCameraPosition (x, y, z)\n- sets the camera position."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.camera.position = _vector(self, context, params)


class SetCameraDirection(Command):
    name = "SetCameraDirection"
    description = "SetCameraDirection (x, y, z)\n- sets the camera's direction."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.camera.direction = _vector(self, context, params)


class SetCameraNear(Command):
    name = "SetCameraNear"
    description = "SetCameraNear (value)\n- sets the camera's near value/ distance."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.camera.near_plane = _scalar(self, context, params)


class SetCameraFar(Command):
    name = "SetCameraFar"
    description = "SetCameraFar (value)\n- sets the camera's far value/ distance."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.camera.far_plane = _scalar(self, context, params)


class SetCameraFov(Command):
    name = "SetCameraFov"
    description = "SetCameraFov (degrees)\n- sets the camera's field of view angle."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.camera.fov = _scalar(self, context, params) * DEG_TO_RAD


class DrawPixel(Command):
    name = "DrawPixel"
    description = "DrawPixel(x, y)\n\n- Draws a single pixel at position (x, y)."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        _require(self, params, 2)
        x = _convert(self, _parse_int, params[0])
        y = _convert(self, _parse_int, params[1])
        context.rasterizer.draw_point(x, y)


class PushTranslation(Command):
    name = "PushTranslation"
    description = "PushTranslation (x, y, z)\n- pushes a translation matrix into the matrix stack."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.matrix_stack.push_translation(_vector(self, context, params))


class PushRotationX(Command):
    name = "PushRotationX"
    description = (
        "PushRotationX (degrees)\n"
        "- pushes a rotation matrix along the X axis into the matrix stack."
    )

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.matrix_stack.push_rotation_x(_scalar(self, context, params) * DEG_TO_RAD)


class PushRotationY(Command):
    name = "PushRotationY"
    description = (
        "PushRotationY (degrees)\n"
        "- pushes a rotation matrix along the Y axis into the matrix stack."
    )

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.matrix_stack.push_rotation_y(_scalar(self, context, params) * DEG_TO_RAD)


class PushRotationZ(Command):
    name = "PushRotationZ"
    description = (
        "PushRotationZ (degrees)\n"
        "- pushes a rotation matrix along the Z axis into the matrix stack."
    )

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.matrix_stack.push_rotation_z(_scalar(self, context, params) * DEG_TO_RAD)


class PushScaling(Command):
    name = "PushScaling"
    description = "PushScaling (x, y, z)\n- pushes a scaling matrix into the matrix stack."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.matrix_stack.push_scaling(_vector(self, context, params))


class PopMatrix(Command):
    name = "PopMatrix"
    description = "PopMatrix\n- pops the last matrix from the matrix stack."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        context.matrix_stack.pop()


class SetClipping(Command):
    name = "SetClipping"
    description = "SetClipping(clip)\n- Enables or Disables Clipping within the viewport."

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        _require(self, params, 1)
        context.clipper.clipping = params[0] == "true"


class SetColor(Command):
    name = "SetColor"
    description = (
        "SetColor(r, g, b)\n"
        "\n"
        "- Sets the color using red, green, and blue. Values are from 0.0 to 1.0."
    )

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        _require(self, params, 3)
        r, g, b = _resolve(self, context, params[:3])
        context.rasterizer.color = Color(r, g, b, 1.0)


class SetFillMode(Command):
    name = "SetFillMode"
    description = "SetFillMode(fillMode)\n\n- Sets the fill mode <wireframe>, <solid>"

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        _require(self, params, 1)
        try:
            mode = FillMode(params[0])
        except ValueError as exc:
            raise CommandError(f"{self.name}: unknown fill mode {params[0]!r}") from exc
        context.rasterizer.fill_mode = mode


class SetResolution(Command):
    name = "SetResolution"
    description = (
        "SetResolution(width, height, <pixelSize>, <showGrid>)\n"
        "\n"
        "- Sets the render view resolution.\n"
        "- Optional: Set pixel size, default = 1.\n"
        "- Optional: Show grid (true or false) if pixel size is > 1.\n"
    )

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        _require(self, params, 2)
        width = _convert(self, _parse_int, params[0])
        height = _convert(self, _parse_int, params[1])
        pixel_size = _convert(self, _parse_int, params[2]) if len(params) > 2 else 1
        show_grid = len(params) > 3 and params[3] == "true"
        try:
            context.set_resolution(width, height, pixel_size)
        except ValueError as exc:
            raise CommandError(f"{self.name}: {exc}") from exc
        context.show_grid = show_grid and pixel_size > 1


class VarFloat(Command):
    name = "float"
    description = (
        "Declares a float variable. Can optionally specify a drag speed, min, and max.\n"
        "\n"
        "syntax: float $<name> = <value>, <speed>, <min>, <max>\n"
        "\n"
        "e.g.\n"
        "  float $angle = 3.14\n"
        "  float $color = 0.47, 0.01, 0, 1\n"
    )

    def execute(self, context: RenderContext, params: Sequence[str]) -> None:
        _require(self, params, 3)
        if not _is_var_name(params[0]) or params[1] != "=":
            raise CommandError(f"{self.name}: expected '$name = value'")
        value = _convert(self, _parse_float, params[2])
        speed = _convert(self, _parse_float, params[3]) if len(params) > 3 else 0.01
        minimum = _convert(self, _parse_float, params[4]) if len(params) > 4 else -FLT_MAX
        maximum = _convert(self, _parse_float, params[5]) if len(params) > 5 else FLT_MAX
        context.variables[params[0]] = value
        context.variable_settings[params[0]] = (speed, minimum, maximum)