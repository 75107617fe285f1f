"""Quaternions for representing rotations."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterator

from . import scalar
from .vectors import Float3


@dataclass(slots=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.w = float(self.w)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        return scalar.sqrt(self.length_sq())

    def inverse(self) -> "Quaternion":
        n = self.length_sq()
        return Quaternion(-self.x / n, -self.y / n, -self.z / n, self.w / n)

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def normalized(self) -> "Quaternion":
        n = self.length()
        return Quaternion(self.x / n, self.y / n, self.z / n, self.w / n)

    def __neg__(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            x, y, z, w = self
            return Quaternion(
                w * other.x + x * other.w + y * other.z - z * other.y,
                w * other.y - x * other.z + y * other.w + z * other.x,
                w * other.z + x * other.y - y * other.x + z * other.w,
                w * other.w - x * other.x - y * other.y - z * other.z,
            )
        if isinstance(other, Float3):
            return self.rotate(other)
        if isinstance(other, numbers.Real):
            return Quaternion(*(a * other for a in self))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return Quaternion(*(a * other for a in self))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return Quaternion(*(a / other for a in self))
        return NotImplemented

    def rotate(self, vector: Float3) -> Float3:
        """Rotate ``vector`` by this quaternion."""
        u = Float3(self.x, self.y, self.z)
        w = self.w
        return (
            u * (2.0 * u.dot(vector))
            + vector * (w * w - u.length_sq())
            + u.cross(vector) * (2.0 * w)
        )

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def slerp(cls, a: "Quaternion", b: "Quaternion", t: float) -> "Quaternion":
        """Spherical interpolation from ``a`` to ``b``."""
        cos_half = a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w
        if cos_half >= 1.0:
            return a
        half_theta = math.acos(cos_half)
        sin_half = scalar.sqrt(1.0 - cos_half * cos_half)
        ratio_a = scalar.sin((1.0 - t) * half_theta) / sin_half
        ratio_b = scalar.sin(t * half_theta) / sin_half
        return a * ratio_a + b * ratio_b

    @classmethod
    def look_at(cls, origin: Float3, target: Float3, forward: Float3) -> "Quaternion":
        """Rotation turning ``forward`` toward the direction from ``origin`` to ``target``."""
        look = (target - origin).normalized()
        cos_angle = scalar.clamp(forward.dot(look), -1.0, 1.0)
        angle = math.acos(cos_angle)
        axis = forward.cross(look).normalized()
        return cls.from_axis_angle(axis, angle)

    @classmethod
    def from_axis_angle(cls, axis: Float3, angle: float) -> "Quaternion":
        half = angle * 0.5
        s = scalar.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, scalar.cos(half))

    @classmethod
    def from_euler_angle(cls, euler: Float3) -> "Quaternion":
        cr = scalar.cos(euler.x * 0.5)
        sr = scalar.sin(euler.x * 0.5)
        cp = scalar.cos(euler.y * 0.5)
        sp = scalar.sin(euler.y * 0.5)
        cy = scalar.cos(euler.z * 0.5)
        sy = scalar.sin(euler.z * 0.5)
        return cls(
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            cr * cp * cy + sr * sp * sy,
        )