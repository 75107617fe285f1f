"""In-memory RGBA bitmaps with per-channel clear and copy operations."""

from __future__ import annotations

import os
import struct
from typing import Callable, Iterator, Optional, Sequence, Union

from PIL import Image

from .color import Color32, ColorChannel, ColorChannelMask, ColorSwizzle
from .intvectors import Int2

PositionLike = Union[Int2, Sequence[int]]
SwizzleLike = Union[ColorSwizzle, int, None]

_PLACEHOLDER = (
    (0, 0, 255, 255),
    (255, 0, 255, 255),
    (255, 255, 255, 255),
    (0, 255, 255, 255),
)


def _as_int2(value: PositionLike) -> Int2:
    if isinstance(value, Int2):
        return value
    x, y = value
    return Int2(x, y)


def _as_swizzle(swizzle: SwizzleLike) -> ColorSwizzle:
    if swizzle is None:
        return ColorSwizzle(ColorSwizzle.RGBA)
    if isinstance(swizzle, ColorSwizzle):
        return swizzle
    return ColorSwizzle(swizzle)


def _channel_pairs(swizzle: SwizzleLike, mask: ColorChannelMask) -> Iterator[tuple[ColorChannel, ColorChannel]]:
    swizzle = _as_swizzle(swizzle)
    for channel in ColorChannel:
        if int(mask) & (1 << int(channel)):
            yield channel, swizzle.get_channel(channel)


def _positions(pos: Int2, size: Int2) -> Iterator[Int2]:
    for x in range(size.x):
        for y in range(size.y):
            yield Int2(pos.x + x, pos.y + y)


class Bitmap:
    """A ``width`` by ``height`` grid of :class:`Color32` pixels, stored row by row."""

    def __init__(self, width: int, height: int, pixels: Optional[Sequence[Color32]] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        self.width = int(width)
        self.height = int(height)
        if pixels is None:
            self.pixels = [Color32() for _ in range(self.width * self.height)]
        else:
            if len(pixels) != self.width * self.height:
                raise ValueError("pixel count does not match the bitmap dimensions")
            self.pixels = [Color32(*p) for p in pixels]

    @classmethod
    def placeholder(cls) -> "Bitmap":
        """The 2x2 bitmap used when an image cannot be loaded."""
        return cls(2, 2, [Color32(*p) for p in _PLACEHOLDER])

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> "Bitmap":
        """Read an image file; unreadable files give the placeholder bitmap."""
        try:
            with Image.open(path) as image:
                rgba = image.convert("RGBA")
        except (OSError, ValueError):
            return cls.placeholder()
        width, height = rgba.size
        pixels = [Color32(*p) for p in struct.iter_unpack("4B", rgba.tobytes())]
        return cls(width, height, pixels)

    def __len__(self) -> int:
        return len(self.pixels)

    def _offset(self, key: Union[int, PositionLike]) -> int:
        if isinstance(key, int):
            return key
        pos = _as_int2(key)
        if not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
            raise IndexError(f"position {pos} is outside the bitmap")
        return self.width * pos.y + pos.x

    def __getitem__(self, key: Union[int, PositionLike]) -> Color32:
        return self.pixels[self._offset(key)]

    def __setitem__(self, key: Union[int, PositionLike], color: Color32) -> None:
        self.pixels[self._offset(key)] = Color32(*color)

    def _area(
        self,
        pos: Optional[PositionLike],
        size: Optional[PositionLike],
        width: int,
        height: int,
        message: str,
    ) -> tuple[Int2, Int2]:
        if pos is None and size is None:
            return Int2(0, 0), Int2(width, height)
        if pos is None or size is None:
            raise TypeError("pos and size must be given together")
        pos, size = _as_int2(pos), _as_int2(size)
        if pos.x < 0 or pos.y < 0 or pos.x + size.x > width or pos.y + size.y > height:
            raise ValueError(message)
        return pos, size

    def evaluate(
        self,
        function: Callable[[Int2], Color32],
        pos: Optional[PositionLike] = None,
        size: Optional[PositionLike] = None,
    ) -> None:
        """Set each pixel of the area (default: all) to ``function(position)``."""
        pos, size = self._area(
            pos, size, self.width, self.height,
            "Bitmap evaluation failed because area is not inside the bounds of the bitmap.",
        )
        for position in _positions(pos, size):
            self[position] = function(position)

    def clear(
        self,
        color: Color32,
        swizzle: SwizzleLike = None,
        mask: ColorChannelMask = ColorChannelMask.RGBA,
        pos: Optional[PositionLike] = None,
        size: Optional[PositionLike] = None,
    ) -> None:
        """Write the masked channels of ``color`` through ``swizzle`` into the area."""
        pos, size = self._area(
            pos, size, self.width, self.height,
            "Bitmap clear failed because area is not inside the bounds of the bitmap.",
        )
        for channel_in, channel_out in _channel_pairs(swizzle, mask):
            value = color[channel_in]
            for position in _positions(pos, size):
                self[position][channel_out] = value

    def copy_to(
        self,
        dst: "Bitmap",
        swizzle: SwizzleLike = None,
        mask: ColorChannelMask = ColorChannelMask.RGBA,
        src_pos: Optional[PositionLike] = None,
        dst_pos: Optional[PositionLike] = None,
        size: Optional[PositionLike] = None,
    ) -> None:
        """Copy masked channels into ``dst``, routing each through ``swizzle``.

        Without positions the whole bitmap is copied and both bitmaps must have
        the same dimensions.
        """
        pairs = list(_channel_pairs(swizzle, mask))
        if src_pos is None and dst_pos is None and size is None:
            if self.width != dst.width:
                raise ValueError(
                    "Bitmap copy failed because source and destination bitmaps have different widths."
                )
            if self.height != dst.height:
                raise ValueError(
                    "Bitmap copy failed because source and destination bitmaps have different heights."
                )
            for channel_in, channel_out in pairs:
                for src, target in zip(self.pixels, dst.pixels):
                    target[channel_out] = src[channel_in]
            return
        if src_pos is None or dst_pos is None or size is None:
            raise TypeError("src_pos, dst_pos and size must be given together")
        src_pos, size = self._area(
            src_pos, size, self.width, self.height,
            "Bitmap copy failed because source area is not inside the bounds of the source bitmap.",
        )
        dst_pos, _ = self._area(
            dst_pos, size, dst.width, dst.height,
            "Bitmap copy failed because destination area is not inside the bounds of the destination bitmap.",
        )
        offset = _as_int2(dst_pos) - src_pos
        for channel_in, channel_out in pairs:
            for position in _positions(src_pos, size):
                dst[position + offset][channel_out] = self[position][channel_in]

    def __repr__(self) -> str:
        return f"Bitmap(width={self.width}, height={self.height})"