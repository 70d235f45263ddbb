import math

import pytest

from pixraster.mathhelper import transform_coord
from pixraster.matrix import Matrix4
from pixraster.matrixstack import MatrixStack
from pixraster.vectors import Vector3


def _close(m1, m2, tol=1e-9):
    return all(math.isclose(a, b, abs_tol=tol) for a, b in zip(m1, m2))


def _vclose(a, b, tol=1e-9):
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


def test_new_stack_is_empty_identity():
    stack = MatrixStack()
    assert len(stack) == 0
    assert stack.transform == Matrix4.identity()


def test_push_translation_moves_points():
    stack = MatrixStack()
    d = Vector3(1.0, 2.0, 3.0)
    stack.push_translation(d)
    assert len(stack) == 1
    p = Vector3(4.0, 5.0, 6.0)
    assert _vclose(transform_coord(p, stack.transform), p + d)


def test_push_order_applies_last_pushed_first():
    stack = MatrixStack()
    t = Vector3(1.0, 0.0, 0.0)
    s = Vector3(2.0, 2.0, 2.0)
    stack.push_translation(t)
    stack.push_scaling(s)
    p = Vector3(1.0, 1.0, 1.0)
    expected = transform_coord(
        transform_coord(p, Matrix4.scale(s)), Matrix4.translation(t)
    )
    result = transform_coord(p, stack.transform)
    assert list(result) == pytest.approx(list(expected), abs=1e-9)
    assert len(stack) == 2


@pytest.mark.parametrize(
    "push",
    [
        lambda st: st.push_translation(Vector3(3.0, -1.0, 2.0)),
        lambda st: st.push_rotation_x(0.7),
        lambda st: st.push_rotation_y(-1.2),
        lambda st: st.push_rotation_z(2.5),
        lambda st: st.push_scaling(Vector3(2.0, 0.5, 4.0)),
    ],
)
def test_push_then_pop_restores_identity(push):
    stack = MatrixStack()
    push(stack)
    assert not _close(stack.transform, Matrix4.identity())
    stack.pop()
    assert len(stack) == 0
    assert _close(stack.transform, Matrix4.identity())


def test_pop_undoes_only_last_push():
    stack = MatrixStack()
    stack.push_rotation_z(0.3)
    after_first = stack.transform
    stack.push_translation(Vector3(5.0, 5.0, 0.0))
    popped = stack.pop()
    assert popped == Matrix4.translation(Vector3(5.0, 5.0, 0.0))
    assert _close(stack.transform, after_first)
    assert len(stack) == 1


def test_pop_on_empty_stack_does_nothing():
    stack = MatrixStack()
    assert stack.pop() is None
    assert stack.transform == Matrix4.identity()
    assert len(stack) == 0


def test_reset_clears_everything():
    stack = MatrixStack()
    stack.push_scaling(Vector3(3.0, 3.0, 3.0))
    stack.push_rotation_y(1.0)
    stack.reset()
    assert len(stack) == 0
    assert stack.transform == Matrix4.identity()