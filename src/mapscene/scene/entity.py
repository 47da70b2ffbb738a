"""Entity: an identity plus at most one component per kind.

Usage:
    entity = Entity(EntityId(index=16))
    t = entity.add(Transform(position=Vector3(1, 0, 0)))
    assert entity[Transform] is t
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from mapscene.core.component import get_registry
from mapscene.core.identity import EntityId

T = TypeVar("T")


class Entity:
    """Closed set of components keyed by kind.

    Structure:
        _components[component_type] = component_instance

    Adding a component of a kind already present replaces the old instance.

    Args:
        entity_id: Identity of this entity within its scene.
    """

    __slots__ = ("_id", "_components")

    def __init__(self, entity_id: EntityId) -> None:
        self._id = entity_id
        self._components: dict[type, Any] = {}

    @property
    def id(self) -> EntityId:
        return self._id

    def add(self, component: T) -> T:
        """Attach a component, replacing any previous one of the same kind.

        Args:
            component: Instance of a registered component kind.

        Returns:
            The attached component, for in-place initialization.

        Raises:
            TypeError: If the component's type is not a registered kind.
        """
        kind = type(component)
        if not get_registry().is_registered(kind):
            raise TypeError(
                f"{kind.__name__} is not a component kind. Did you forget @component?"
            )
        self._components[kind] = component
        return component

    def get(self, kind: type[T]) -> T | None:
        """Get the component of the given kind, or None if absent."""
        return self._components.get(kind)

    def has(self, kind: type) -> bool:
        return kind in self._components

    def remove(self, kind: type) -> bool:
        """Detach a component kind. Returns True if it was attached."""
        return self._components.pop(kind, None) is not None

    def clear(self) -> None:
        """Detach every component."""
        self._components.clear()

    def component_types(self) -> frozenset[type]:
        return frozenset(self._components)

    def components(self) -> Iterator[Any]:
        """Iterate attached components in attachment order."""
        return iter(self._components.values())

    def __getitem__(self, kind: type[T]) -> T:
        try:
            return self._components[kind]
        except KeyError:
            raise KeyError(f"Entity {self._id} has no component {kind.__name__}") from None

    def __contains__(self, kind: object) -> bool:
        return kind in self._components

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        kinds = ", ".join(k.__name__ for k in self._components)
        return f"Entity({self._id.index}, [{kinds}])"
