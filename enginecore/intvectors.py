"""Int2, Int3 and Int4 integer column vectors."""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


def _trunc_div(a: int, b: int) -> int:
    """Integer quotient truncated toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _dot(a: Iterable[int], b: Iterable[int]) -> int:
    return sum(x * y for x, y in zip(a, b))


class _IntVector:
    """Arithmetic shared by the integer vector types."""

    __slots__ = ()

    def __iter__(self) -> Iterator[int]:
        raise NotImplementedError

    def _combine(self, other: Any, op: Callable[[int, int], int]) -> Any:
        if isinstance(other, type(self)):
            return type(self)(*map(op, self, other))
        if isinstance(other, numbers.Integral):
            return type(self)(*(op(a, int(other)) for a in self))
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
        if isinstance(other, numbers.Integral):
            return self._combine(other, operator.mul)
        return NotImplemented

    def __truediv__(self, other):
        """Componentwise division, truncating toward zero."""
        return self._combine(other, _trunc_div)

    def __str__(self) -> str:
        return ",".join(str(a) for a in self)


@dataclass(slots=True)
class Int2(_IntVector):
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        self.x = int(self.x)
        self.y = int(self.y)

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))

    @classmethod
    def splat(cls, value: int) -> "Int2":
        """Vector with every component set to ``value``."""
        return cls(value, value)

    def dot(self, other: "Int2") -> int:
        return _dot(self, other)

    def length_sq(self) -> int:
        return self.dot(self)


@dataclass(slots=True)
class Int3(_IntVector):
    x: int = 0
    y: int = 0
    z: int = 0

    def __post_init__(self) -> None:
        self.x = int(self.x)
        self.y = int(self.y)
        self.z = int(self.z)

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y, self.z))

    @classmethod
    def splat(cls, value: int) -> "Int3":
        """Vector with every component set to ``value``."""
        return cls(value, value, value)

    def cross(self, other: "Int3") -> "Int3":
        return Int3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: "Int3") -> int:
        return _dot(self, other)

    def length_sq(self) -> int:
        return self.dot(self)

    def xy(self) -> Int2:
        return Int2(self.x, self.y)


@dataclass(slots=True)
class Int4(_IntVector):
    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    def __post_init__(self) -> None:
        self.x = int(self.x)
        self.y = int(self.y)
        self.z = int(self.z)
        self.w = int(self.w)

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y, self.z, self.w))

    @classmethod
    def splat(cls, value: int) -> "Int4":
        """Vector with every component set to ``value``."""
        return cls(value, value, value, value)

    def dot(self, other: "Int4") -> int:
        return _dot(self, other)

    def length_sq(self) -> int:
        return self.dot(self)

    def xyz(self) -> Int3:
        return Int3(self.x, self.y, self.z)