"""Core functionalities: value types, entity identity and the component registry.

Architecture Note:
    core/ holds stateless building blocks with no knowledge of maps or assets.
    For the scene model see scene/, for map loading see loader/.
"""

from mapscene.core.component import (
    ComponentRegistry,
    component,
    get_registry,
)
from mapscene.core.identity import EntityAllocator, EntityId, SceneEntity
from mapscene.core.types import Vector3

__all__ = [
    # Types
    "Vector3",
    # Identity
    "EntityId",
    "SceneEntity",
    "EntityAllocator",
    # Component
    "component",
    "get_registry",
    "ComponentRegistry",
]
