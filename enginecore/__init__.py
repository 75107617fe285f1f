"""Core of a small entity-component game engine: vector, matrix and quaternion math, noise, colours, bitmaps, an entity registry, and scenes with transform and rotation systems."""

__version__ = "0.1.0"