"""Deterministic hash noise built on a 64-bit xorshift."""

from __future__ import annotations

import math
import struct

_MUL = 16854404399406269837
_MASK64 = (1 << 64) - 1
_WIDTHS = (8, 16, 32, 64)


def _mutate(state: int) -> int:
    state ^= (state << 13) & _MASK64
    state ^= state >> 17
    state ^= (state << 5) & _MASK64
    return state


def _check_bits(bits: int) -> None:
    if bits not in _WIDTHS:
        raise ValueError(f"bits must be one of {_WIDTHS}, not {bits}")


def noise_uint(seed: int, bits: int = 64) -> int:
    """Noise for an unsigned integer seed of the given width."""
    _check_bits(bits)
    if not 0 <= seed < (1 << bits):
        raise ValueError(f"seed {seed} does not fit in {bits} unsigned bits")
    state = _mutate(seed ^ _MUL)
    return state & ((1 << bits) - 1)


def noise_int(seed: int, bits: int = 64) -> int:
    """Noise for a signed integer seed of the given width."""
    _check_bits(bits)
    half = 1 << (bits - 1)
    if not -half <= seed < half:
        raise ValueError(f"seed {seed} does not fit in {bits} signed bits")
    state = _mutate((seed & _MASK64) ^ _MUL)
    low = state & ((1 << bits) - 1)
    return low - (1 << bits) if low >= half else low


def _double_from_bits(bits: int) -> float:
    return struct.unpack("<d", bits.to_bytes(8, "little"))[0]


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def noise_double(seed: float) -> float:
    """Fractional noise in ``(-1, 1)`` for a double seed (NaN stays possible)."""
    bits = int.from_bytes(struct.pack("<d", seed), "little")
    value = _double_from_bits(_mutate(bits ^ _MUL))
    return math.modf(value)[0]


def noise_float(seed: float) -> float:
    """Fractional noise for a single-precision seed, as a single-precision value."""
    bits = int.from_bytes(struct.pack("<f", _to_float32(seed)), "little")
    value = _to_float32(_double_from_bits(_mutate(bits ^ _MUL)))
    return math.modf(value)[0]