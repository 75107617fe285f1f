"""Entity identifiers, components and the registry that owns them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, TypeVar

_U32 = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class EntityId:
    """Slot index plus version; index 0 is the null entity and is falsy."""

    index: int = 0
    version: int = 0

    def packed(self) -> int:
        """Index and version as one 64-bit number, index in the low half."""
        return (self.index & _U32) | ((self.version & _U32) << 32)

    def __bool__(self) -> bool:
        return self.index != 0


NULL_ENTITY = EntityId(0, 0)


class EntityComponent:
    """Base class for data attached to entities."""


ComponentT = TypeVar("ComponentT")


@dataclass
class _Slot:
    components: list = field(default_factory=list)
    version: int = 0
    next: int = 0
    prev: int = 0


class EntityRegistry:
    """Creates and destroys entities and stores their components.

    Live entities are iterated newest first.  Destroyed slots are reused with
    a bumped version, so stale identifiers stop resolving.
    """

    def __init__(self) -> None:
        self._slots: list[_Slot] = [_Slot()]
        self._head = 0
        self._free = 0

    def _grow(self) -> None:
        capacity = len(self._slots)
        new_capacity = (capacity + 1) * 2
        self._slots.extend(_Slot(next=i + 1) for i in range(capacity, new_capacity))
        self._slots[-1].next = 0
        self._free = capacity

    def _slot(self, entity: EntityId) -> Optional[_Slot]:
        if not 0 <= entity.index < len(self._slots):
            return None
        slot = self._slots[entity.index]
        if slot.version != entity.version:
            return None
        return slot

    def create(self) -> EntityId:
        if not self._free:
            self._grow()
        index = self._free
        slot = self._slots[index]
        self._free = slot.next
        slot.prev = 0
        slot.next = self._head
        if self._head:
            self._slots[self._head].prev = index
        self._head = index
        return EntityId(index, slot.version)

    def exists(self, entity: EntityId) -> bool:
        return self._slot(entity) is not None

    def destroy(self, entity: EntityId) -> bool:
        """Destroy ``entity`` and its components; False if it was not alive."""
        slot = self._slot(entity)
        if slot is None:
            return False
        slot.components = []
        slot.version = (slot.version + 1) & _U32
        if self._head == entity.index:
            self._head = slot.next
        if slot.next:
            self._slots[slot.next].prev = slot.prev
        if slot.prev:
            self._slots[slot.prev].next = slot.next
        slot.next = self._free
        self._free = entity.index
        return True

    def first(self) -> EntityId:
        """The newest live entity, or the null entity if there is none."""
        if self._head:
            return EntityId(self._head, self._slots[self._head].version)
        return NULL_ENTITY

    def next(self, entity: EntityId) -> EntityId:
        """The entity after ``entity``, or the null entity at the end."""
        slot = self._slot(entity)
        if slot is None:
            return NULL_ENTITY
        return EntityId(slot.next, self._slots[slot.next].version)

    def last(self) -> EntityId:
        """The end marker of iteration: always the null entity."""
        return NULL_ENTITY

    def __iter__(self) -> Iterator[EntityId]:
        entity = self.first()
        while entity:
            following = self.next(entity)
            yield entity
            entity = following

    def remove_component(self, entity: EntityId, kind: type) -> bool:
        """Remove the first component that is a ``kind``; False if none."""
        slot = self._slot(entity)
        if slot is None:
            return False
        for position, component in enumerate(slot.components):
            if isinstance(component, kind):
                last = slot.components.pop()
                if position < len(slot.components):
                    slot.components[position] = last
                return True
        return False

    def get_component(self, entity: EntityId, kind: type[ComponentT]) -> Optional[ComponentT]:
        slot = self._slot(entity)
        if slot is None:
            return None
        return next((c for c in slot.components if isinstance(c, kind)), None)

    def get_or_add_component(
        self, entity: EntityId, kind: type[ComponentT], *args: Any, **kwargs: Any
    ) -> Optional[ComponentT]:
        """Existing ``kind`` component, or a new ``kind(*args, **kwargs)``.

        Returns None when ``entity`` is not alive.
        """
        slot = self._slot(entity)
        if slot is None:
            return None
        for component in slot.components:
            if isinstance(component, kind):
                return component
        component = kind(*args, **kwargs)
        slot.components.append(component)
        return component