"""Scenes: an entity registry plus systems that react to events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, TypeVar

from .entity import EntityRegistry

SystemT = TypeVar("SystemT", bound="SceneSystem")


def listener(event_type: type) -> Callable[[Callable], Callable]:
    """Mark a method of a :class:`SceneSystem` as the handler of ``event_type``."""

    def mark(method: Callable) -> Callable:
        method._event_type = event_type
        return method

    return mark


class SceneSystem:
    """Logic that belongs to one scene and handles the events it listens to."""

    _handlers: ClassVar[dict[type, tuple[str, ...]]] = {}

    def __init__(self, scene: "Scene") -> None:
        self.scene = scene

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        handlers: dict[type, list[str]] = {}
        for name in dir(cls):
            event_type = getattr(getattr(cls, name, None), "_event_type", None)
            if event_type is not None:
                handlers.setdefault(event_type, []).append(name)
        cls._handlers = {kind: tuple(names) for kind, names in handlers.items()}

    def receive(self, event: Any) -> bool:
        """Pass ``event`` to the matching handlers; False if none listens."""
        handled = False
        for kind in type(event).__mro__:
            for name in self._handlers.get(kind, ()):
                getattr(self, name)(event)
                handled = True
        return handled


@dataclass
class EvtUpdate:
    """Sent when updating the scene."""

    time: float
    timestep: float


@dataclass
class EvtRenderPre:
    """Sent before rendering the scene."""

    time: float


@dataclass
class EvtRender:
    """Sent when rendering the scene."""

    time: float


@dataclass
class EvtRenderPost:
    """Sent after rendering the scene."""

    time: float


class Scene:
    """Entities and the systems working on them."""

    EvtUpdate = EvtUpdate
    EvtRenderPre = EvtRenderPre
    EvtRender = EvtRender
    EvtRenderPost = EvtRenderPost

    def __init__(self) -> None:
        self.entities = EntityRegistry()
        self.systems: list[SceneSystem] = []
        self._time = 0.0

    @property
    def time(self) -> float:
        """Total time the scene has been updated for."""
        return self._time

    def has_system(self, kind: type) -> bool:
        return any(isinstance(system, kind) for system in self.systems)

    def get_system(self, kind: type[SystemT]) -> SystemT:
        for system in self.systems:
            if isinstance(system, kind):
                return system
        raise LookupError("System not found!")

    def get_or_add_system(self, kind: type[SystemT], *args: Any) -> SystemT:
        """Existing ``kind`` system, or a new ``kind(self, *args)``."""
        for system in self.systems:
            if isinstance(system, kind):
                return system
        system = kind(self, *args)
        self.systems.append(system)
        return system

    def send_message(self, event: Any) -> None:
        """Deliver ``event`` to every system, in the order they were added."""
        for system in list(self.systems):
            system.receive(event)

    def update(self, timestep: float) -> None:
        self._time += timestep
        self.send_message(EvtUpdate(self._time, timestep))

    def render(self) -> None:
        self.send_message(EvtRenderPre(self._time))
        self.send_message(EvtRender(self._time))
        self.send_message(EvtRenderPost(self._time))