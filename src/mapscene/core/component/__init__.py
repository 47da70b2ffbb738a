"""Component functionality: registry and decorator."""

from mapscene.core.component.core import ComponentRegistry, component, get_registry

__all__ = [
    "ComponentRegistry",
    "component",
    "get_registry",
]
