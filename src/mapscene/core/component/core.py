"""Component registry and decorator.

Usage:
    @component
    @dataclass(slots=True)
    class Transform:
        position: Vector3
        rotation: Vector3
        scale: Vector3

Only registered kinds can be attached to an Entity, which keeps the set of
component kinds closed and enumerable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import is_dataclass
from typing import overload


class ComponentRegistry:
    """Process-local set of component kinds."""

    def __init__(self) -> None:
        """Initialize empty component registry."""
        self._kinds: set[type] = set()

    def register(self, cls: type) -> type:
        """Register a component kind. Registering twice is a no-op.

        Args:
            cls: Component class to register.

        Returns:
            The registered class.
        """
        self._kinds.add(cls)
        return cls

    def is_registered(self, cls: type) -> bool:
        """Check if a type is registered as a component kind."""
        return cls in self._kinds

    def kinds(self) -> frozenset[type]:
        """All registered component kinds."""
        return frozenset(self._kinds)


# Module-level registry instance
_registry = ComponentRegistry()


def get_registry() -> ComponentRegistry:
    """Access the global component registry.

    Returns:
        The process-local ComponentRegistry instance.
    """
    return _registry


@overload
def component(cls: type) -> type: ...


@overload
def component(cls: None = None) -> Callable[[type], type]: ...


def component(cls: type | None = None) -> type | Callable[[type], type]:
    """Register a dataclass as a component kind.

    Supports two forms:
        @component                    # bare decorator
        @component()                  # parenthesized

    Args:
        cls: The class to register, or None if called with parentheses.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is not a dataclass.

    Note:
        Apply @component AFTER @dataclass.
    """

    def decorator(c: type) -> type:
        if not is_dataclass(c):
            raise TypeError(
                f"Component {c.__name__} must be a dataclass. "
                f"Did you forget @dataclass decorator?"
            )
        return _registry.register(c)

    if cls is None:
        return decorator
    return decorator(cls)
