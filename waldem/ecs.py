"""A small entity-component registry used by the engine's systems."""

from __future__ import annotations

import itertools
from typing import Any, Iterator, TypeVar

T = TypeVar("T")


class Entity:
    """An identifier with at most one component of each type attached."""

    def __init__(self, entity_id: int) -> None:
        self.id = entity_id
        self._components: dict[type, Any] = {}

    def add(self, component: T) -> T:
        """Attach ``component``, replacing any component of the same type."""
        self._components[type(component)] = component
        return component

    def get(self, component_type: type[T]) -> T:
        """The component of ``component_type``; KeyError if there is none."""
        try:
            return self._components[component_type]
        except KeyError:
            raise KeyError(
                f"entity {self.id} has no {component_type.__name__} component"
            ) from None

    def has(self, *component_types: type) -> bool:
        """Whether every one of ``component_types`` is attached."""
        return all(t in self._components for t in component_types)

    def __contains__(self, component_type: type) -> bool:
        return component_type in self._components

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self._components)
        return f"Entity({self.id}: {names})"


class Registry:
    """Holds entities; new entities become visible after ``refresh``."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._pending: list[Entity] = []
        self._ids = itertools.count()

    def create_entity(self) -> Entity:
        """Create an entity that queries will see after the next refresh."""
        entity = Entity(next(self._ids))
        self._pending.append(entity)
        return entity

    def refresh(self) -> None:
        """Make every entity created since the last refresh visible."""
        self._entities.extend(self._pending)
        self._pending.clear()

    def entities_with(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, component, ...)`` for entities having all ``args``."""
        for entity in list(self._entities):
            if entity.has(*args):
                yield (entity, *(entity.get(t) for t in args))

    def __len__(self) -> int:
        return len(self._entities)