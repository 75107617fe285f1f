"""Components attached to entities, and queries on camera entities."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any

from .entity import EntityComponent, EntityId, EntityRegistry
from .matrix import Float4x4
from .quaternion import Quaternion
from .vectors import Float2, Float3

ALL_CAMERA_LAYERS = 0xFFFFFFFF


class MissingComponentError(LookupError):
    """An entity lacks a component that an operation needs."""


def _as_float3(value: Any) -> Float3:
    if isinstance(value, Float3):
        return value
    if isinstance(value, numbers.Real):
        return Float3.splat(value)
    raise TypeError(f"cannot use {value!r} as a Float3")


@dataclass
class CmpCamera(EntityComponent):
    clip_plane_near: float
    clip_plane_far: float
    field_of_view: float
    orthographic: bool = False
    layers: int = ALL_CAMERA_LAYERS
    order: int = 0
    framebuffer: Any = None


@dataclass
class CmpCameraFreecam(EntityComponent):
    speed_linear: float = 25.0
    speed_angular: float = 15.0


@dataclass
class CmpLightAmbient(EntityComponent):
    color: Float3
    layers: int = 1

    def __post_init__(self) -> None:
        self.color = _as_float3(self.color)


@dataclass
class CmpLightDirectional(EntityComponent):
    color: Float3
    layers: int = 1

    def __post_init__(self) -> None:
        self.color = _as_float3(self.color)


@dataclass
class CmpLightPoint(EntityComponent):
    color: Float3
    falloff: Float2
    layers: int = 1

    def __post_init__(self) -> None:
        self.color = _as_float3(self.color)

    @classmethod
    def with_radius(cls, radius: float) -> "CmpLightPoint":
        """White light fading out from the centre to ``radius``."""
        return cls(Float3.splat(1.0), Float2(0.0, radius), 1)


@dataclass
class CmpMeshRendererShadow(EntityComponent):
    mesh: Any
    layers: int = 1


@dataclass
class CmpMeshRendererOpaque(EntityComponent):
    material: Any
    mesh: Any
    layers: int = 1


@dataclass
class CmpMeshRendererTransparent(EntityComponent):
    material: Any
    mesh: Any
    layers: int = 1


@dataclass
class CmpParent(EntityComponent):
    parent: EntityId


@dataclass
class CmpPosition(EntityComponent):
    value: Float3 = field(default_factory=Float3)

    def __post_init__(self) -> None:
        self.value = _as_float3(self.value)


@dataclass
class CmpRotation(EntityComponent):
    value: Quaternion = field(default_factory=Quaternion.identity)


@dataclass
class CmpRotationVelocity(EntityComponent):
    rotation: Float3 = field(default_factory=Float3)

    def __post_init__(self) -> None:
        self.rotation = _as_float3(self.rotation)


@dataclass
class CmpScale(EntityComponent):
    value: Float3 = field(default_factory=Float3)

    def __post_init__(self) -> None:
        self.value = _as_float3(self.value)


@dataclass
class CmpTransformLocalToWorld(EntityComponent):
    value: Float4x4 = field(default_factory=Float4x4.identity)


def _camera(registry: EntityRegistry, entity: EntityId) -> CmpCamera:
    camera = registry.get_component(entity, CmpCamera)
    if camera is None:
        raise MissingComponentError("The entity does not have a camera component.")
    return camera


def camera_framebuffer(registry: EntityRegistry, entity: EntityId) -> Any:
    """The framebuffer the camera renders to (None for the default one)."""
    return _camera(registry, entity).framebuffer


def camera_projection(
    registry: EntityRegistry, entity: EntityId, width: float, height: float
) -> Float4x4:
    """Projection matrix of the camera for a target of the given size."""
    camera = _camera(registry, entity)
    build = Float4x4.orthographic if camera.orthographic else Float4x4.perspective
    return build(
        width / height, camera.field_of_view, camera.clip_plane_near, camera.clip_plane_far
    )


def camera_view(registry: EntityRegistry, entity: EntityId) -> Float4x4:
    """View matrix: the inverse of the camera's local-to-world transform."""
    _camera(registry, entity)
    local_to_world = registry.get_component(entity, CmpTransformLocalToWorld)
    if local_to_world is None:
        raise MissingComponentError(
            "The entity does not have a transform local to world component."
        )
    return local_to_world.value.inverse()


def camera_layers(registry: EntityRegistry, entity: EntityId) -> int:
    """Rendering layer bits the camera sees."""
    return _camera(registry, entity).layers