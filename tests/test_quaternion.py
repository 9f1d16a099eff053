import pytest

from frengine import mathutil
from frengine.quaternion import Quaternion
from frengine.vectors import Vec3, Vec4


def test_components():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert list(q) == [1.0, 2.0, 3.0, 4.0]


def test_from_vec4_copies_components():
    vec = Vec4(0.5, -1.0, 2.0, 3.5)
    q = Quaternion.from_vec4(vec)
    assert list(q) == list(vec)
    assert isinstance(q, Quaternion)


def test_zero_angle_is_identity_rotation():
    q = Quaternion.from_axis_angle(Vec3(0.0, 1.0, 0.0), 0.0)
    assert (q.x, q.y, q.z) == (0.0, 0.0, 0.0)
    assert q.w == 1


def test_axis_angle_components():
    axis = Vec3(0.0, 0.0, 1.0)
    q = Quaternion.from_axis_angle(axis, 60.0)
    assert q.z == pytest.approx(mathutil.sin(30))
    assert q.w == pytest.approx(mathutil.cos(30))
    assert q.x == 0.0


def test_half_angle_truncated_to_whole_degrees():
    axis = Vec3(1.0, 0.0, 0.0)
    assert Quaternion.from_axis_angle(axis, 61.0) == Quaternion.from_axis_angle(axis, 60.0)


def test_unit_axis_gives_unit_quaternion():
    q = Quaternion.from_axis_angle(Vec3(1.0, 0.0, 0.0), 90.0)
    assert q.dot(q) == pytest.approx(1.0, abs=1e-6)


def test_vector_arithmetic_applies():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert q + q == Vec4(2.0, 4.0, 6.0, 8.0)