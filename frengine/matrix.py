"""Row-major 4x4 float matrix."""

import operator

from frengine import mathutil

_SIZE = 4


class Mat4:
    """A 4x4 matrix indexed as ``[row][column]``; new matrices are all zero."""

    __slots__ = ("_rows",)

    def __init__(self, *args):
        if not args:
            self._rows = _zero_rows()
        elif len(args) == _SIZE * _SIZE:
            values = iter(float(v) for v in args)
            self._rows = [list(row) for row in zip(*[values] * _SIZE)]
        else:
            raise TypeError(f"Mat4 takes 0 or 16 values, got {len(args)}")

    @classmethod
    def from_vec4(cls, vec):
        """Matrix whose every row is the vector's components."""
        return cls(*(tuple(vec) * _SIZE))

    @classmethod
    def from_transform(cls, pos, scale, rot):
        """Zero matrix with position, scale and then each axis rotation written in."""
        mat = cls()
        mat.set_position(pos)
        mat.set_scale(scale)
        mat.set_rot_x(rot.x)
        mat.set_rot_y(rot.y)
        mat.set_rot_z(rot.z)
        return mat

    @classmethod
    def translation(cls, pos):
        mat = cls()
        mat.set_position(pos)
        return mat

    @classmethod
    def scaling(cls, scale):
        mat = cls()
        mat.set_scale(scale)
        return mat

    @classmethod
    def rotation(cls, rot):
        mat = cls()
        mat.set_rot_x(rot.x)
        mat.set_rot_y(rot.y)
        mat.set_rot_z(rot.z)
        return mat

    def set_zero(self):
        self._rows = _zero_rows()

    def set_identity(self):
        """Write ones on the diagonal, leaving other entries as they are."""
        for i, row in enumerate(self._rows):
            row[i] = 1.0

    def set_position(self, pos):
        self._rows[0][3] = pos.x
        self._rows[1][3] = pos.y
        self._rows[2][3] = pos.z

    def set_scale(self, scale):
        self._rows[0][0] = scale.x
        self._rows[1][1] = scale.y
        self._rows[2][2] = scale.z

    @staticmethod
    def _cos_sin(angle):
        # The trigonometric helpers take whole degrees, so the radian value is truncated.
        rad = mathutil.radians(angle)
        return mathutil.cos(rad), mathutil.sin(rad)

    def set_rot_x(self, angle):
        c, s = self._cos_sin(angle)
        m = self._rows
        m[1][1], m[1][2] = c, -s
        m[2][1], m[2][2] = s, c

    def set_rot_y(self, angle):
        c, s = self._cos_sin(angle)
        m = self._rows
        m[0][0], m[0][2] = c, s
        m[2][0], m[2][2] = -s, c

    def set_rot_z(self, angle):
        c, s = self._cos_sin(angle)
        m = self._rows
        m[0][0], m[0][1] = c, -s
        m[1][0], m[1][1] = s, c

    def set_orthographic(self, left, right, bottom, top, near, far):
        m = self._rows
        m[0][0] = 2.0 / (right - left)
        m[1][1] = 2.0 / (top - bottom)
        m[2][2] = 2.0 / (near - far)
        m[3][0] = (left + right) / (left - right)
        m[3][1] = (bottom + top) / (bottom - top)
        m[3][2] = near / -far

    def set_perspective(self, fov, aspect_ratio, near, far):
        q = 1.0 / mathutil.tan(mathutil.radians(0.5 * fov))
        m = self._rows
        m[0][0] = q / aspect_ratio
        m[1][1] = q
        m[2][2] = (near + far) / (near - far)
        m[2][3] = -1.0
        m[3][2] = (2.0 * near * far) / (near - far)

    @staticmethod
    def _check(row, col):
        if not (0 <= row < _SIZE and 0 <= col < _SIZE):
            raise IndexError(f"matrix index ({row}, {col}) out of range")

    def get(self, row, col):
        self._check(row, col)
        return self._rows[row][col]

    def set(self, row, col, value):
        self._check(row, col)
        self._rows[row][col] = value

    def values(self):
        """All sixteen entries in row-major order."""
        return [v for row in self._rows for v in row]

    def _combine(self, other, op):
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(
            *(op(a, b) for ra, rb in zip(self._rows, other._rows) for a, b in zip(ra, rb))
        )

    def __mul__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        columns = list(zip(*other._rows))
        return Mat4(
            *(sum(a * b for a, b in zip(row, col)) for row in self._rows for col in columns)
        )

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None

    def __repr__(self):
        return f"Mat4({self._rows!r})"


def _zero_rows():
    return [[0.0] * _SIZE for _ in range(_SIZE)]