"""Systems that compute transforms and spin rotating objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .components import (
    CmpParent,
    CmpPosition,
    CmpRotation,
    CmpRotationVelocity,
    CmpScale,
    CmpTransformLocalToWorld,
)
from .entity import EntityId, EntityRegistry
from .matrix import Float4x4
from .quaternion import Quaternion
from .scene import EvtUpdate, SceneSystem, listener


@dataclass
class _Entry:
    matrix: Float4x4
    entity: EntityId
    parent: Optional[int]


class _Hierarchy:
    """Transformed entities ordered so that parents come before children."""

    def __init__(self, registry: EntityRegistry) -> None:
        self._registry = registry
        self._indices: dict[EntityId, int] = {}
        self._visiting: set[EntityId] = set()
        self.entries: list[_Entry] = []
        for entity in registry:
            local_to_world = registry.get_component(entity, CmpTransformLocalToWorld)
            if local_to_world is not None:
                self._include(entity, local_to_world.value)

    def _include(self, entity: EntityId, matrix: Float4x4) -> int:
        if entity in self._indices:
            return self._indices[entity]
        if entity in self._visiting:
            raise ValueError("entity parents form a cycle")
        self._visiting.add(entity)
        parent_index = None
        parent = self._registry.get_component(entity, CmpParent)
        if parent is not None and self._registry.exists(parent.parent):
            parent_matrix = self._registry.get_component(parent.parent, CmpTransformLocalToWorld)
            if parent_matrix is not None:
                parent_index = self._include(parent.parent, parent_matrix.value)
        self._visiting.discard(entity)
        index = len(self.entries)
        self._indices[entity] = index
        self.entries.append(_Entry(matrix, entity, parent_index))
        return index

    def refresh(self) -> None:
        for entry in self.entries:
            if entry.parent is not None:
                entry.matrix = self.entries[entry.parent].matrix * entry.matrix
        for entry in self.entries:
            self._registry.get_component(entry.entity, CmpTransformLocalToWorld).value = entry.matrix


class TransformCalculator(SceneSystem):
    """Builds local-to-world matrices from position, rotation, scale and parents."""

    @listener(EvtUpdate)
    def on_update(self, event: EvtUpdate) -> None:
        registry = self.scene.entities
        for entity in registry:
            local_to_world = registry.get_component(entity, CmpTransformLocalToWorld)
            position = registry.get_component(entity, CmpPosition)
            rotation = registry.get_component(entity, CmpRotation)
            scale = registry.get_component(entity, CmpScale)
            if local_to_world is None or (position is None and rotation is None and scale is None):
                continue
            matrix = Float4x4.identity()
            if position is not None:
                matrix = matrix * Float4x4.translate(position.value)
            if rotation is not None:
                matrix = matrix * Float4x4.rotate(rotation.value)
            if scale is not None:
                matrix = matrix * Float4x4.scale(scale.value)
            local_to_world.value = matrix
        _Hierarchy(registry).refresh()


class RotateObjects(SceneSystem):
    """Turns entities by their rotation velocity (Euler radians per second)."""

    @listener(EvtUpdate)
    def on_update(self, event: EvtUpdate) -> None:
        registry = self.scene.entities
        for entity in registry:
            rotation = registry.get_component(entity, CmpRotation)
            velocity = registry.get_component(entity, CmpRotationVelocity)
            if rotation is not None and velocity is not None:
                step = Quaternion.from_euler_angle(velocity.rotation * event.timestep)
                rotation.value = rotation.value * step