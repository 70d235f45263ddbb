import pytest

from pixraster.clipper import Clipper, ClipRect
from pixraster.colors import Color
from pixraster.mathhelper import transform_coord
from pixraster.primitives import PrimitivesManager, Topology, screen_transform
from pixraster.rasterizer import Canvas, Rasterizer
from pixraster.vectors import Vector3
from pixraster.vertex import Vertex

RED = Color(1.0, 0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)


def vtx(x, y, z=0.0, color=RED):
    return Vertex(Vector3(float(x), float(y), float(z)), color)


def make_manager(size=20, rect=None, clipping=False):
    canvas = Canvas(size, size)
    rect = rect if rect is not None else ClipRect(0.0, 0.0, size - 1.0, size - 1.0)
    manager = PrimitivesManager(Rasterizer(canvas), Clipper(rect, clipping=clipping))
    return manager, canvas


def painted(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_pixel(x, y) != canvas.background
    }


def test_screen_transform_maps_corners():
    m = screen_transform(40, 20)
    assert tuple(transform_coord(Vector3(-1.0, 1.0, 0.0), m)) == pytest.approx((0.0, 0.0, 0.0))
    assert tuple(transform_coord(Vector3(1.0, -1.0, 0.0), m)) == pytest.approx((40.0, 20.0, 0.0))
    assert tuple(transform_coord(Vector3(0.0, 0.0, 0.0), m)) == pytest.approx((20.0, 10.0, 0.0))


def test_end_draw_without_begin_raises():
    manager, _ = make_manager()
    with pytest.raises(RuntimeError):
        manager.end_draw()


def test_end_draw_twice_raises():
    manager, _ = make_manager()
    manager.begin_draw(Topology.POINT)
    manager.end_draw()
    with pytest.raises(RuntimeError):
        manager.end_draw()


def test_points_drawn_with_their_colors():
    manager, canvas = make_manager()
    manager.begin_draw(Topology.POINT)
    manager.add_vertex(vtx(1, 2, color=RED))
    manager.add_vertex(vtx(5, 6, color=GREEN))
    manager.end_draw()
    assert painted(canvas) == {(1, 2), (5, 6)}
    assert canvas.get_pixel(5, 6) == GREEN


def test_vertex_added_before_begin_is_ignored():
    manager, canvas = make_manager()
    manager.add_vertex(vtx(3, 3))
    manager.begin_draw(Topology.POINT)
    manager.add_vertex(vtx(7, 7))
    manager.end_draw()
    assert painted(canvas) == {(7, 7)}


def test_begin_draw_discards_previous_buffer():
    manager, canvas = make_manager()
    manager.begin_draw(Topology.POINT)
    manager.add_vertex(vtx(2, 2))
    manager.begin_draw(Topology.POINT)
    manager.add_vertex(vtx(4, 4))
    manager.end_draw()
    assert painted(canvas) == {(4, 4)}


def test_lines_drawn_in_pairs_and_odd_vertex_ignored():
    manager, canvas = make_manager()
    manager.begin_draw(Topology.LINE)
    manager.add_vertex(vtx(0, 3))
    manager.add_vertex(vtx(6, 3))
    manager.add_vertex(vtx(15, 15))
    manager.end_draw()
    assert painted(canvas) == {(x, 3) for x in range(0, 7)}


def test_points_outside_clip_rect_dropped():
    manager, canvas = make_manager(rect=ClipRect(0.0, 0.0, 9.0, 9.0), clipping=True)
    manager.begin_draw(Topology.POINT)
    manager.add_vertex(vtx(3, 3))
    manager.add_vertex(vtx(15, 3))
    manager.end_draw()
    assert painted(canvas) == {(3, 3)}


def test_triangle_drawn_solid():
    manager, canvas = make_manager()
    manager.begin_draw(Topology.TRIANGLE)
    for point in [(0, 0), (8, 0), (0, 8)]:
        manager.add_vertex(vtx(*point))
    manager.end_draw()
    pixels = painted(canvas)
    assert {(0, 0), (8, 0), (0, 8), (2, 2)} <= pixels
    assert (7, 7) not in pixels


def test_clipped_triangle_stays_inside_rect():
    manager, canvas = make_manager(rect=ClipRect(0.0, 0.0, 9.0, 9.0), clipping=True)
    manager.begin_draw(Topology.TRIANGLE)
    for point in [(2, 2), (15, 2), (2, 15)]:
        manager.add_vertex(vtx(*point))
    manager.end_draw()
    pixels = painted(canvas)
    assert (3, 3) in pixels
    assert all(0 <= x <= 9 and 0 <= y <= 9 for x, y in pixels)


def test_apply_transform_projects_to_screen_centre():
    manager, canvas = make_manager(size=20)
    manager.begin_draw(Topology.POINT, apply_transform=True)
    manager.add_vertex(vtx(0, 0, 5))
    manager.end_draw()
    assert painted(canvas) == {(10, 10)}