"""View frustum planes and sphere containment tests."""

from __future__ import annotations

from typing import Optional

from .matrix import Float4x4
from .vectors import Float3, Float4


class FrustumPlanes:
    """The six normalised planes of a projection frustum.

    Plane order is left, right, top, bottom, near, far.  Each plane's ``xyz``
    is a unit normal pointing into the frustum and ``w`` its offset.
    """

    __slots__ = ("planes",)

    def __init__(self, matrix: Optional[Float4x4] = None) -> None:
        if matrix is None:
            self.planes: tuple[Float4, ...] = tuple(Float4() for _ in range(6))
            return
        row0, row1, row2, row3 = matrix.transpose()
        raw = (
            row3 + row0,
            row3 - row0,
            row3 - row1,
            row3 + row1,
            row3 + row2,
            row3 - row2,
        )
        self.planes = tuple(plane / plane.xyz().length() for plane in raw)

    def contains(self, position: Float3, radius: float) -> bool:
        """Whether a sphere at ``position`` with ``radius`` touches the frustum."""
        for plane in self.planes:
            distance = plane.xyz().dot(position) + plane.w
            if distance < -radius:
                return False
        return True

    def __repr__(self) -> str:
        return f"FrustumPlanes({list(self.planes)!r})"