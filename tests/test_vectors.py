import pytest

from pixraster.vectors import Vector2, Vector3


def test_vector2_defaults_to_origin():
    assert Vector2() == Vector2(0.0, 0.0)


def test_vector3_defaults_to_origin():
    assert Vector3() == Vector3(0.0, 0.0, 0.0)


def test_splat_fills_all_components():
    assert Vector2.splat(10.0) == Vector2(10.0, 10.0)
    assert Vector3.splat(2.5) == Vector3(2.5, 2.5, 2.5)


def test_vector2_add_then_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(3.0, 4.25)
    assert (a + b) - b == a


def test_vector3_add_then_sub_round_trip():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 7.0)
    assert (a + b) - b == a


def test_negation_is_inverse_of_addition():
    v = Vector3(1.0, -2.0, 3.0)
    assert v + (-v) == Vector3()
    w = Vector2(4.0, -5.0)
    assert w + (-w) == Vector2()


def test_scalar_multiply_and_divide_round_trip():
    v = Vector3(1.0, 2.0, 3.0)
    assert (v * 4.0) / 4.0 == v
    assert 2.0 * v == v * 2.0
    w = Vector2(3.0, 6.0)
    assert (w * 2.0) / 2.0 == w


def test_scalar_multiply_scales_each_component():
    v = Vector3(1.0, 2.0, 3.0)
    assert v * 2.0 == Vector3(2.0, 4.0, 6.0)


def test_augmented_assignment_rebinds():
    v = Vector2(1.0, 1.0)
    original = v
    v += Vector2(2.0, 3.0)
    assert v == Vector2(3.0, 4.0)
    assert original == Vector2(1.0, 1.0)


def test_iteration_yields_components_in_order():
    assert list(Vector3(7.0, 8.0, 9.0)) == [7.0, 8.0, 9.0]
    assert tuple(Vector2(1.0, 2.0)) == (1.0, 2.0)


def test_vectors_are_immutable():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v.x == 1.0
    assert v == Vector3(1.0, 2.0, 3.0)


def test_mixing_dimensions_is_a_type_error():
    with pytest.raises(TypeError):
        Vector2(1.0, 2.0) + Vector3(1.0, 2.0, 3.0)  # type: ignore[operator]