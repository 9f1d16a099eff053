"""Two, three and four component float vectors."""

from dataclasses import dataclass, fields

from frengine import mathutil

_SCALAR = (int, float)


class _Vector:
    """Component iteration shared by the vector types."""

    def __iter__(self):
        return (getattr(self, f.name) for f in fields(self))


def _dot(left, right):
    return sum(a * b for a, b in zip(left, right))


@dataclass
class Vec2(_Vector):
    """Two component vector.

    Vector-by-vector arithmetic combines only the x components and keeps the
    left operand's y.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y)

    def __sub__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y)

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y)
        if isinstance(other, _SCALAR):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y)
        if isinstance(other, _SCALAR):
            return Vec2(self.x / other, self.y / other)
        return NotImplemented

    def __iadd__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def length(self):
        """Euclidean length."""
        return mathutil.sqrt(self.x * self.x + self.y * self.y)

    def dot(self, other):
        """Sum of the products of matching components."""
        return _dot(self, other)


@dataclass
class Vec3(_Vector):
    """Three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, _SCALAR):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, _SCALAR):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __iadd__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def length(self):
        """Euclidean length."""
        return mathutil.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self):
        """Vector divided by its length; the zero vector stays zero."""
        size = self.length()
        if size == 0:
            return Vec3()
        return self / size

    def dot(self, other):
        """Sum of the products of matching components."""
        return _dot(self, other)

    def lerp(self, other, factor):
        """Linear interpolation towards ``other``."""
        return (other - self) * factor + self


@dataclass
class Vec4(_Vector):
    """Four component vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def __truediv__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w)

    def dot(self, other):
        """Sum of the products of matching components."""
        return _dot(self, other)