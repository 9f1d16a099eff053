"""Quaternion stored as a four component vector."""

from dataclasses import dataclass

from frengine import mathutil
from frengine.vectors import Vec4


@dataclass
class Quaternion(Vec4):
    """Rotation quaternion with components x, y, z and w."""

    @classmethod
    def from_vec4(cls, vec):
        return cls(vec.x, vec.y, vec.z, vec.w)

    @classmethod
    def from_axis_angle(cls, axis, angle):
        """Quaternion for a rotation of ``angle`` degrees about ``axis``."""
        half = angle / 2
        half_sin = mathutil.sin(half)
        half_cos = mathutil.cos(half)
        return cls(axis.x * half_sin, axis.y * half_sin, axis.z * half_sin, half_cos)