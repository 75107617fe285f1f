import pytest

from enginecore.frustum import FrustumPlanes
from enginecore.matrix import Float4x4
from enginecore.scalar import DEG_TO_RAD
from enginecore.vectors import Float3


def _perspective():
    return Float4x4.perspective(1.0, 90.0 * DEG_TO_RAD, 1.0, 100.0)


def test_identity_frustum_contains_origin():
    frustum = FrustumPlanes(Float4x4.identity())
    assert frustum.contains(Float3(0, 0, 0), 0.0) is True


def test_identity_frustum_rejects_point_outside():
    frustum = FrustumPlanes(Float4x4.identity())
    assert frustum.contains(Float3(2, 0, 0), 0.0) is False
    assert frustum.contains(Float3(0, -2, 0), 0.0) is False
    assert frustum.contains(Float3(0, 0, 2), 0.0) is False


def test_radius_lets_sphere_overlap_boundary():
    frustum = FrustumPlanes(Float4x4.identity())
    assert frustum.contains(Float3(2, 0, 0), 1.5) is True
    assert frustum.contains(Float3(2, 0, 0), 0.5) is False


def test_planes_are_normalised():
    frustum = FrustumPlanes(_perspective())
    assert len(frustum.planes) == 6
    for plane in frustum.planes:
        assert plane.xyz().length() == pytest.approx(1.0)


def test_perspective_in_front_and_behind():
    frustum = FrustumPlanes(_perspective())
    assert frustum.contains(Float3(0, 0, -10), 0.0) is True
    assert frustum.contains(Float3(0, 0, 10), 0.0) is False


def test_perspective_near_and_far_clipping():
    frustum = FrustumPlanes(_perspective())
    assert frustum.contains(Float3(0, 0, -0.5), 0.0) is False
    assert frustum.contains(Float3(0, 0, -150), 0.0) is False
    assert frustum.contains(Float3(0, 0, -99), 0.0) is True


def test_default_frustum_contains_everything():
    frustum = FrustumPlanes()
    assert frustum.contains(Float3(1e6, -1e6, 1e6), 0.0) is True