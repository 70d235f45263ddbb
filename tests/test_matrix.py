import math

import pytest

from pixraster.matrix import Matrix4
from pixraster.vectors import Vector3


def assert_matrix_close(a, b):
    assert list(a.values) == pytest.approx(list(b.values), abs=1e-9)


def transposed(m):
    return Matrix4(*(v for col in zip(*m.rows()) for v in col))


def test_default_is_identity():
    assert Matrix4() == Matrix4.identity()
    assert Matrix4.identity().rows()[0] == (1.0, 0.0, 0.0, 0.0)


def test_wrong_number_of_values_raises():
    with pytest.raises(ValueError):
        Matrix4(1.0, 2.0, 3.0)


def test_indexing_is_row_major():
    m = Matrix4(*range(16))
    assert m[0, 1] == 1.0
    assert m[3, 0] == 12.0
    assert m.rows()[2] == (8.0, 9.0, 10.0, 11.0)


def test_index_out_of_range_raises():
    with pytest.raises(IndexError):
        Matrix4()[4, 0]


def test_identity_is_neutral_for_product():
    m = Matrix4(*range(1, 17))
    assert m * Matrix4.identity() == m
    assert Matrix4.identity() * m == m
    assert m @ Matrix4.identity() == m


def test_scalar_product_both_sides():
    m = Matrix4(*range(16))
    assert m * 2.0 == 2.0 * m
    assert (m * 2.0).values == tuple(v * 2.0 for v in m.values)


def test_addition_elementwise():
    m = Matrix4(*range(16))
    assert m + m == m * 2.0


def test_translation_places_offset_in_last_row():
    m = Matrix4.translation(Vector3(1.0, 2.0, 3.0))
    assert m.rows()[3] == (1.0, 2.0, 3.0, 1.0)


def test_translations_compose_additively():
    a = Matrix4.translation(Vector3(1.0, 2.0, 3.0))
    b = Matrix4.translation(Vector3(4.0, 5.0, 6.0))
    assert a * b == Matrix4.translation(Vector3(5.0, 7.0, 9.0))


def test_uniform_scale_matches_vector_scale():
    assert Matrix4.scale(2.0) == Matrix4.scale(Vector3(2.0, 2.0, 2.0))


def test_scale_diagonal():
    m = Matrix4.scale(Vector3(2.0, 3.0, 4.0))
    assert (m[0, 0], m[1, 1], m[2, 2], m[3, 3]) == (2.0, 3.0, 4.0, 1.0)


@pytest.mark.parametrize(
    "factory", [Matrix4.rotation_x, Matrix4.rotation_y, Matrix4.rotation_z]
)
def test_zero_rotation_is_identity(factory):
    assert_matrix_close(factory(0.0), Matrix4.identity())


@pytest.mark.parametrize(
    "factory", [Matrix4.rotation_x, Matrix4.rotation_y, Matrix4.rotation_z]
)
def test_rotations_are_orthogonal(factory):
    r = factory(0.7)
    assert_matrix_close(r * transposed(r), Matrix4.identity())


@pytest.mark.parametrize(
    "factory", [Matrix4.rotation_x, Matrix4.rotation_y, Matrix4.rotation_z]
)
def test_opposite_rotations_cancel(factory):
    assert_matrix_close(factory(1.1) * factory(-1.1), Matrix4.identity())


def test_quarter_turns_compose_to_half_turn():
    q = Matrix4.rotation_z(math.pi / 2)
    assert_matrix_close(q * q, Matrix4.rotation_z(math.pi))


def test_matrix_is_immutable_and_hashable():
    m = Matrix4()
    with pytest.raises(AttributeError):
        m.foo = 1  # type: ignore[attr-defined]
    assert len({Matrix4(), Matrix4.identity()}) == 1