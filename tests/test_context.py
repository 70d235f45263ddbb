import pytest

from pixraster.camera import Camera
from pixraster.colors import WHITE, Color
from pixraster.context import RenderContext
from pixraster.matrix import Matrix4
from pixraster.vectors import Vector3
from pixraster.vertex import Vertex


def test_default_canvas_size():
    ctx = RenderContext()
    assert (ctx.canvas.width, ctx.canvas.height) == (500, 500)
    assert ctx.canvas.pixel_size == 1


def test_new_frame_resets_state():
    ctx = RenderContext(10, 10)
    ctx.camera.fov = 2.0
    ctx.camera.position = Vector3(1.0, 2.0, 3.0)
    ctx.matrix_stack.push_translation(Vector3(1.0, 0.0, 0.0))
    ctx.clipper.clipping = True
    ctx.new_frame()
    assert ctx.camera == Camera()
    assert len(ctx.matrix_stack) == 0
    assert ctx.matrix_stack.transform == Matrix4.identity()
    assert ctx.clipper.clipping is False


def test_set_resolution_replaces_canvas():
    ctx = RenderContext(10, 10)
    ctx.rasterizer.draw_point(1, 1)
    ctx.set_resolution(20, 30, 2)
    assert (ctx.canvas.width, ctx.canvas.height, ctx.canvas.pixel_size) == (20, 30, 2)
    assert ctx.canvas.get_pixel(1, 1) == ctx.canvas.background
    assert ctx.primitives.rasterizer.canvas is ctx.canvas


def test_set_resolution_updates_clip_rect():
    ctx = RenderContext(10, 10)
    ctx.set_resolution(20, 30)
    ctx.clipper.clipping = True
    assert ctx.clipper.clip_point(Vertex(Vector3(19.0, 29.0, 0.0), WHITE)) is False
    assert ctx.clipper.clip_point(Vertex(Vector3(20.0, 0.0, 0.0), WHITE)) is True


def test_set_resolution_rejects_bad_size():
    ctx = RenderContext(10, 10)
    with pytest.raises(ValueError):
        ctx.set_resolution(0, 10)


def test_resolve_float_reads_variables():
    ctx = RenderContext(4, 4)
    ctx.variables["$angle"] = 0.75
    assert ctx.resolve_float("$angle") == 0.75


def test_resolve_float_unknown_variable():
    ctx = RenderContext(4, 4)
    with pytest.raises(KeyError):
        ctx.resolve_float("$missing")


@pytest.mark.parametrize("text,expected", [("2.5", 2.5), ("-3", -3.0), ("2f", 2.0), ("1.5abc", 1.5)])
def test_resolve_float_reads_number_prefix(text, expected):
    assert RenderContext(4, 4).resolve_float(text) == expected


def test_resolve_float_rejects_text():
    with pytest.raises(ValueError):
        RenderContext(4, 4).resolve_float("abc")


def test_rasterizer_colour_survives_new_frame():
    ctx = RenderContext(4, 4)
    ctx.rasterizer.color = Color(0.5, 0.5, 0.5, 1.0)
    ctx.new_frame()
    assert ctx.rasterizer.color == Color(0.5, 0.5, 0.5, 1.0)