from __future__ import annotations

import math

import pytest

from vec3py import Vec3ValueError, Vector3, vecmath


def test_magnitude():
    assert vecmath.magnitude(Vector3(3, 4, 0)) == 5.0
    assert vecmath.magnitude([2, 3, 6]) == 7.0
    assert vecmath.magnitude(Vector3()) == 0.0
    assert vecmath.magnitude(-2) == pytest.approx(math.sqrt(12))
    assert vecmath.mag is vecmath.magnitude


@pytest.mark.parametrize(
    "components", [(1, 5, 2), (-1, -1, -1), (0, 0, 1e-9), (0, -3, 0), (1e-200, 0, 0), (0, 1e-320, 0)]
)
def test_magnitude_positive(components):
    assert vecmath.magnitude(components) > 0.0


def test_magnitude_extreme_components():
    assert vecmath.magnitude(Vector3(1e-200, 0, 0)) == 1e-200
    assert vecmath.magnitude(Vector3(3e-200, 4e-200, 0)) == pytest.approx(5e-200)
    big = vecmath.magnitude(Vector3(1e200, 1e200, 1e200))
    assert math.isfinite(big)
    assert big == pytest.approx(math.sqrt(3) * 1e200)


def test_unit():
    assert vecmath.unit(Vector3(0, 0, 5)) == Vector3(0.0, 0.0, 1.0)
    assert vecmath.unit([3, 0, 4]) == Vector3(0.6, 0.0, 0.8)
    assert vecmath.magnitude(vecmath.unit((1, 5, 2))) == pytest.approx(1.0)
    assert vecmath.unit(Vector3(1e-200, 0, 0)) == Vector3(1.0, 0.0, 0.0)
    assert vecmath.unit(Vector3(0, 0, -1e200)) == Vector3(0.0, 0.0, -1.0)


def test_unit_zero_vector():
    with pytest.raises(Vec3ValueError):
        vecmath.unit(Vector3())


def test_abs():
    assert vecmath.abs(Vector3(-1, 2, -3.5)) == Vector3(1, 2, 3.5)
    assert vecmath.abs(-4) == Vector3(4, 4, 4)
    assert vecmath.abs({"y": -2}) == Vector3(0, 2, 0)


def test_dot(v1: Vector3, v2: Vector3):
    assert vecmath.dot(v1, v2) == -12
    assert vecmath.dot(v1, v2) == vecmath.dot(v2, v1)
    assert vecmath.dot([1, 0, 0], [0, 1, 0]) == 0
    assert vecmath.dot(v1, 2) == 16
    assert vecmath.scalar_prod is vecmath.dot


def test_cross(v1: Vector3, v2: Vector3):
    assert vecmath.cross(v1, v2) == Vector3(-26, 26, -52)
    assert vecmath.cross(v1, v2) == -vecmath.cross(v2, v1)
    assert vecmath.cross([1, 0, 0], [0, 1, 0]) == Vector3(0, 0, 1)
    assert vecmath.cross(v1, v1) == Vector3(0, 0, 0)
    assert vecmath.vector_prod is vecmath.cross


def test_cross_is_orthogonal(v1: Vector3, v2: Vector3):
    prod = vecmath.cross(v1, v2)
    assert vecmath.dot(prod, v1) == 0
    assert vecmath.dot(prod, v2) == 0


def test_angle_between(v1: Vector3, v2: Vector3):
    assert vecmath.angle_between([1, 0, 0], [0, 1, 0]) == pytest.approx(math.pi / 2)
    assert vecmath.angle_between([1, 0, 0], [-2, 0, 0]) == pytest.approx(math.pi)
    assert vecmath.angle_between([1, 1, 0], [1, 0, 0]) == pytest.approx(math.pi / 4)
    assert vecmath.angle_between(v1, v1 * 3) == pytest.approx(0.0, abs=1e-7)

    expected = math.acos(-12 / (math.sqrt(30) * math.sqrt(140)))
    assert vecmath.angle_between(v1, v2) == pytest.approx(expected)


def test_angle_between_tiny_vectors():
    assert vecmath.angle_between([1e-200, 0, 0], [0, 1e-200, 0]) == pytest.approx(math.pi / 2)
    assert vecmath.angle_between([1e-200, 1e-200, 0], [1e200, 0, 0]) == pytest.approx(math.pi / 4)


def test_angle_between_zero_vector(v1: Vector3):
    with pytest.raises(Vec3ValueError):
        vecmath.angle_between(v1, Vector3())


def test_distance():
    assert vecmath.distance_sq([1, 2, 3], [1, 2, 3]) == 0
    assert vecmath.distance_sq([0, 0, 0], [1, 2, 2]) == 9
    assert vecmath.distance([1, 1, 1], Vector3(4, 5, 1)) == 5.0
    assert vecmath.distance(Vector3(1, 5, 2), Vector3(10, -2, -6)) == pytest.approx(
        math.sqrt(81 + 49 + 64)
    )


def test_inputs_are_not_modified(v1: Vector3, v2: Vector3):
    vecmath.unit(v1)
    vecmath.cross(v1, v2)
    vecmath.abs(-v1)
    assert v1 == Vector3(1, 5, 2)
    assert v2 == Vector3(10, -2, -6)
