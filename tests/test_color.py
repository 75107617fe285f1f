import pytest

from enginecore.color import Color32, ColorChannel, ColorChannelMask, ColorSwizzle
from enginecore.vectors import Float4


def test_mask_combinations():
    assert ColorChannelMask(0b0011) == ColorChannelMask.RG
    assert ColorChannelMask(0b0111) == ColorChannelMask.RGB
    assert ColorChannelMask(0b1111) == ColorChannelMask.RGBA
    assert ColorChannelMask.R | ColorChannelMask.G == ColorChannelMask.RG
    assert ColorChannelMask.RG | ColorChannelMask.B == ColorChannelMask.RGB
    inverted = ~ColorChannelMask.R & ColorChannelMask.RGBA
    assert inverted == ColorChannelMask(0b1110)
    assert ColorChannelMask.RGBA ^ ColorChannelMask.A == ColorChannelMask(0b0111)


def test_color_indexing_by_channel():
    color = Color32(10, 20, 30, 40)
    assert [color[ch] for ch in ColorChannel] == [10, 20, 30, 40]
    color[ColorChannel.B] = 99
    assert color.b == 99
    assert tuple(color) == (10, 20, 99, 40)


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color32(256, 0, 0, 0)
    color = Color32()
    with pytest.raises(ValueError):
        color[ColorChannel.R] = -1


def test_packed_value_is_little_endian():
    assert Color32(1, 2, 3, 4).value() == int.from_bytes(bytes([1, 2, 3, 4]), "little")


def test_from_floats_truncates():
    color = Color32.from_floats(1.0, 0.0, 0.5, 1.0)
    assert tuple(color) == (255, 0, 127, 255)


def test_to_float4_extremes():
    assert Color32(255, 0, 255, 0).to_float4() == Float4(1, 0, 1, 0)


def test_from_floats_round_trip_for_extremes():
    color = Color32(0, 255, 255, 0)
    assert Color32.from_floats(*color.to_float4()) == color


def test_identity_swizzle_maps_channels_to_themselves():
    swizzle = ColorSwizzle(ColorSwizzle.RGBA)
    for channel in ColorChannel:
        assert swizzle.get_channel(channel) == channel


def test_broadcast_swizzles():
    for value, target in (
        (ColorSwizzle.RRRR, ColorChannel.R),
        (ColorSwizzle.GGGG, ColorChannel.G),
        (ColorSwizzle.BBBB, ColorChannel.B),
        (ColorSwizzle.AAAA, ColorChannel.A),
    ):
        swizzle = ColorSwizzle(value)
        assert all(swizzle.get_channel(ch) == target for ch in ColorChannel)


def test_from_channels_matches_constant():
    swizzle = ColorSwizzle.from_channels(
        ColorChannel.R, ColorChannel.G, ColorChannel.B, ColorChannel.A
    )
    assert swizzle.value == ColorSwizzle.RGBA


def test_from_channels_reverse():
    swizzle = ColorSwizzle.from_channels(
        ColorChannel.A, ColorChannel.B, ColorChannel.G, ColorChannel.R
    )
    assert swizzle.get_channel(ColorChannel.R) == ColorChannel.A
    assert swizzle.get_channel(ColorChannel.A) == ColorChannel.R


def test_set_channel():
    swizzle = ColorSwizzle()
    swizzle.set_channel(ColorChannel.G, ColorChannel.A)
    assert swizzle.get_channel(ColorChannel.G) == ColorChannel.A
    assert swizzle.get_channel(ColorChannel.R) == ColorChannel.R
    assert swizzle.get_channel(ColorChannel.B) == ColorChannel.B
    assert swizzle.get_channel(ColorChannel.A) == ColorChannel.A


def test_swizzle_rejects_large_value():
    with pytest.raises(ValueError):
        ColorSwizzle(256)