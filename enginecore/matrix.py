"""Column-major 4x4 float matrices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from . import scalar
from .quaternion import Quaternion
from .vectors import Float3, Float4


def _det(xx, yx, zx, xy, yy, zy, xz, yz, zz) -> float:
    return (
        xx * (yy * zz - zy * yz)
        - yx * (xy * zz - zy * xz)
        + zx * (xy * yz - yy * xz)
    )


@dataclass(slots=True)
class Float4x4:
    """Column-major matrix; ``x``, ``y``, ``z`` and ``w`` are its columns."""

    x: Float4 = field(default_factory=Float4)
    y: Float4 = field(default_factory=Float4)
    z: Float4 = field(default_factory=Float4)
    w: Float4 = field(default_factory=Float4)

    def __iter__(self) -> Iterator[Float4]:
        return iter((self.x, self.y, self.z, self.w))

    @classmethod
    def from_rows(cls, *args: float) -> "Float4x4":
        """Build from sixteen values given row by row."""
        if len(args) != 16:
            raise TypeError(f"from_rows takes 16 values, got {len(args)}")
        return cls(*(Float4(*args[c::4]) for c in range(4)))

    def translation(self) -> Float3:
        return Float3(self.w.x, self.w.y, self.w.z)

    def without_translation(self) -> "Float4x4":
        return Float4x4(Float4(*self.x), Float4(*self.y), Float4(*self.z), Float4(0, 0, 0, 1))

    def transpose(self) -> "Float4x4":
        x, y, z, w = self
        return Float4x4(
            Float4(x.x, y.x, z.x, w.x),
            Float4(x.y, y.y, z.y, w.y),
            Float4(x.z, y.z, z.z, w.z),
            Float4(x.w, y.w, z.w, w.w),
        )

    def inverse(self) -> "Float4x4":
        """Inverse matrix; a singular matrix raises ZeroDivisionError."""
        a = self.cofactor().transpose()
        n = 1.0 / (self.x.x * a.x.x + self.y.x * a.x.y + self.z.x * a.x.z + self.w.x * a.x.w)
        return Float4x4(a.x * n, a.y * n, a.z * n, a.w * n)

    def cofactor(self) -> "Float4x4":
        m = self.minor()
        m.y.x = -m.y.x
        m.w.x = -m.w.x
        m.x.y = -m.x.y
        m.z.y = -m.z.y
        m.y.z = -m.y.z
        m.w.z = -m.w.z
        m.x.w = -m.x.w
        m.z.w = -m.z.w
        return m

    def minor(self) -> "Float4x4":
        x, y, z, w = self
        return Float4x4.from_rows(
            _det(y.y, z.y, w.y, y.z, z.z, w.z, y.w, z.w, w.w),
            _det(x.y, z.y, w.y, x.z, z.z, w.z, x.w, z.w, w.w),
            _det(x.y, y.y, w.y, x.z, y.z, w.z, x.w, y.w, w.w),
            _det(x.y, y.y, z.y, x.z, y.z, z.z, x.w, y.w, z.w),

            _det(y.x, z.x, w.x, y.z, z.z, w.z, y.w, z.w, w.w),
            _det(x.x, z.x, w.x, x.z, z.z, w.z, x.w, z.w, w.w),
            _det(x.x, y.x, w.x, x.z, y.z, w.z, x.w, y.w, w.w),
            _det(x.x, y.x, z.x, x.z, y.z, z.z, x.w, y.w, z.w),

            _det(y.x, z.x, w.x, y.y, z.y, w.y, y.w, z.w, w.w),
            _det(x.x, z.x, w.x, x.y, z.y, w.y, x.w, z.w, w.w),
            _det(x.x, y.x, w.x, x.y, y.y, w.y, x.w, y.w, w.w),
            _det(x.x, y.w, z.x, x.y, y.y, z.y, x.w, y.w, z.w),

            _det(y.x, z.x, w.x, y.y, z.y, w.y, y.z, z.z, w.z),
            _det(x.x, z.x, w.x, x.y, z.y, w.y, x.z, z.z, w.z),
            _det(x.x, y.x, w.x, x.y, y.y, w.y, x.z, y.z, w.z),
            _det(x.x, y.x, z.x, x.y, y.y, z.y, x.z, y.z, z.z),
        )

    def __mul__(self, other):
        if isinstance(other, Float4x4):
            rows = list(self.transpose())
            return Float4x4.from_rows(*(row.dot(col) for row in rows for col in other))
        if isinstance(other, Float4):
            return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w
        return NotImplemented

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self.transpose())

    @classmethod
    def identity(cls) -> "Float4x4":
        return cls(Float4(1, 0, 0, 0), Float4(0, 1, 0, 0), Float4(0, 0, 1, 0), Float4(0, 0, 0, 1))

    @classmethod
    def perspective(cls, aspect_ratio: float, fov: float, near: float, far: float) -> "Float4x4":
        s = 1.0 / scalar.tan(fov * 0.5)
        a = (near + far) / (near - far)
        b = (2.0 * near * far) / (near - far)
        return cls.from_rows(
            s / aspect_ratio, 0, 0, 0,
            0, s, 0, 0,
            0, 0, a, -1,
            0, 0, b, 0,
        )

    @classmethod
    def orthographic(cls, aspect_ratio: float, height: float, near: float, far: float) -> "Float4x4":
        half_height = height * 0.5
        half_width = half_height * aspect_ratio
        return cls.orthographic_bounds(
            Float3(-half_width, -half_height, near), Float3(half_width, half_height, far)
        )

    @classmethod
    def orthographic_bounds(cls, low: Float3, high: Float3) -> "Float4x4":
        total = high + low
        span = high - low
        return cls.from_rows(
            2.0 / span.x, 0, 0, -total.x / span.x,
            0, 2.0 / span.y, 0, -total.y / span.y,
            0, 0, -2.0 / span.z, -total.z / span.z,
            0, 0, 0, 1,
        )

    @classmethod
    def translate_rotate(cls, translation: Float3, rotation: Quaternion) -> "Float4x4":
        x, y, z, w = rotation
        return cls.from_rows(
            2.0 * (w * w + x * x) - 1.0, 2.0 * (x * y - w * z), 2.0 * (x * z + w * y), translation.x,
            2.0 * (x * y + w * z), 2.0 * (w * w + y * y) - 1.0, 2.0 * (y * z - w * x), translation.y,
            2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 2.0 * (w * w + z * z) - 1.0, translation.z,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotate(cls, rotation: Quaternion) -> "Float4x4":
        return cls.translate_rotate(Float3(), rotation)

    @classmethod
    def translate(cls, translation: Float3) -> "Float4x4":
        return cls.from_rows(
            1, 0, 0, translation.x,
            0, 1, 0, translation.y,
            0, 0, 1, translation.z,
            0, 0, 0, 1,
        )

    @classmethod
    def scale(cls, factors) -> "Float4x4":
        """Scaling matrix; a single number scales every axis equally."""
        if not isinstance(factors, Float3):
            factors = Float3.splat(factors)
        return cls.from_rows(
            factors.x, 0, 0, 0,
            0, factors.y, 0, 0,
            0, 0, factors.z, 0,
            0, 0, 0, 1,
        )