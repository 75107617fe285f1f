"""Float2, Float3 and Float4 column vectors."""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator

from . import scalar


def _dot(a: Iterable[float], b: Iterable[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


class _Vector:
    """Arithmetic shared by the float vector types."""

    __slots__ = ()

    def __iter__(self) -> Iterator[float]:
        raise NotImplementedError

    def _combine(self, other: Any, op: Callable[[float, float], float]) -> Any:
        if isinstance(other, type(self)):
            return type(self)(*map(op, self, other))
        if isinstance(other, numbers.Real):
            return type(self)(*(op(a, other) for a in self))
        return NotImplemented

    def __neg__(self):
        return type(self)(*(-a for a in self))

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self._combine(other, operator.mul)
        return NotImplemented

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __str__(self) -> str:
        return ",".join(f"{a:g}" for a in self)


@dataclass(slots=True)
class Float2(_Vector):
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    @classmethod
    def splat(cls, value: float) -> "Float2":
        """Vector with every component set to ``value``."""
        return cls(value, value)

    def dot(self, other: "Float2") -> float:
        return _dot(self, other)

    def length_sq(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return scalar.sqrt(self.length_sq())

    def normalized(self) -> "Float2":
        """Vector of unit length; a zero vector raises ZeroDivisionError."""
        return self / self.length()


@dataclass(slots=True)
class Float3(_Vector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    @classmethod
    def splat(cls, value: float) -> "Float3":
        """Vector with every component set to ``value``."""
        return cls(value, value, value)

    def cross(self, other: "Float3") -> "Float3":
        return Float3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: "Float3") -> float:
        return _dot(self, other)

    def length_sq(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return scalar.sqrt(self.length_sq())

    def normalized(self) -> "Float3":
        """Vector of unit length; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def xy(self) -> Float2:
        return Float2(self.x, self.y)


@dataclass(slots=True)
class Float4(_Vector):
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

    @classmethod
    def splat(cls, value: float) -> "Float4":
        """Vector with every component set to ``value``."""
        return cls(value, value, value, value)

    @classmethod
    def from_xyz(cls, xyz: Float3, w: float = 0.0) -> "Float4":
        return cls(xyz.x, xyz.y, xyz.z, w)

    def dot(self, other: "Float4") -> float:
        return _dot(self, other)

    def length_sq(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return scalar.sqrt(self.length_sq())

    def normalized(self) -> "Float4":
        """Vector of unit length; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def xyz(self) -> Float3:
        return Float3(self.x, self.y, self.z)


_KINDS = (Float2, Float3, Float4)


def _check_same(*vectors: Any) -> type:
    kind = type(vectors[0])
    if kind not in _KINDS or any(type(v) is not kind for v in vectors):
        raise TypeError("arguments must be vectors of one and the same type")
    return kind


def componentwise_min(l, r):
    kind = _check_same(l, r)
    return kind(*map(scalar.minimum, l, r))


def componentwise_max(l, r):
    kind = _check_same(l, r)
    return kind(*map(scalar.maximum, l, r))


def componentwise_clamp(value, low, high):
    kind = _check_same(value, low, high)
    return kind(*map(scalar.clamp, value, low, high))


def _coerce(kind: type, value: Any):
    if isinstance(value, kind):
        return value
    if isinstance(value, numbers.Real):
        return kind.splat(value)
    raise TypeError(f"cannot use {value!r} as a {kind.__name__}")


def random_vector(kind, *args):
    """Random vector of ``kind``: unit range, ``[0, upper]`` or ``[lower, upper]``.

    Scalar bounds are spread over every component.
    """
    if kind not in _KINDS:
        raise TypeError(f"unsupported vector type {kind!r}")
    size = len(kind.__dataclass_fields__)
    if not args:
        return kind(*(scalar.random_unit() for _ in range(size)))
    if len(args) == 1:
        upper = _coerce(kind, args[0])
        return kind(*map(scalar.random_below, upper))
    if len(args) == 2:
        lower, upper = (_coerce(kind, a) for a in args)
        return kind(*map(scalar.random_between, lower, upper))
    raise TypeError("random_vector takes at most two bounds")