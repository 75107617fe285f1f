"""32-bit colours, channel masks and channel swizzles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar, Iterator

from .vectors import Float4


class ColorChannelMask(IntFlag):
    R = 1 << 0
    G = 1 << 1
    B = 1 << 2
    A = 1 << 3

    RG = R | G
    RGB = R | G | B
    RGBA = R | G | B | A


class ColorChannel(IntEnum):
    R = 0
    G = 1
    B = 2
    A = 3


_NAMES = ("r", "g", "b", "a")


def _check_byte(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"colour component {value} is outside 0..255")
    return value


def _float_to_byte(value: float) -> int:
    return min(255, max(0, int(value * 255.0)))


@dataclass(slots=True)
class Color32:
    """An RGBA colour with one byte per channel."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        self.r = _check_byte(self.r)
        self.g = _check_byte(self.g)
        self.b = _check_byte(self.b)
        self.a = _check_byte(self.a)

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))

    def __getitem__(self, channel: ColorChannel) -> int:
        return getattr(self, _NAMES[ColorChannel(channel)])

    def __setitem__(self, channel: ColorChannel, value: int) -> None:
        setattr(self, _NAMES[ColorChannel(channel)], _check_byte(value))

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float) -> "Color32":
        """Colour from components in ``[0, 1]``, scaled by 255 and truncated."""
        return cls(*(_float_to_byte(v) for v in (r, g, b, a)))

    def to_float4(self) -> Float4:
        return Float4(self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def value(self) -> int:
        """The colour packed into 32 bits, red in the lowest byte."""
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)


@dataclass(slots=True)
class ColorSwizzle:
    """Maps each input channel to an output channel, two bits per channel."""

    RRRR: ClassVar[int] = 0b00000000
    GGGG: ClassVar[int] = 0b01010101
    BBBB: ClassVar[int] = 0b10101010
    AAAA: ClassVar[int] = 0b11111111
    RGBA: ClassVar[int] = 0b11100100

    value: int = 0b11100100

    def __post_init__(self) -> None:
        self.value = int(self.value)
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"swizzle value {self.value} does not fit in a byte")

    @classmethod
    def from_channels(
        cls, r: ColorChannel, g: ColorChannel, b: ColorChannel, a: ColorChannel
    ) -> "ColorSwizzle":
        return cls(int(r) | (int(g) << 2) | (int(b) << 4) | (int(a) << 6))

    def get_channel(self, channel: ColorChannel) -> ColorChannel:
        shift = int(channel) * 2
        return ColorChannel((self.value >> shift) & 3)

    def set_channel(self, channel: ColorChannel, target: ColorChannel) -> None:
        shift = int(channel) * 2
        cleared = self.value & ~(3 << shift) & 0xFF
        self.value = cleared | (int(target) << shift)