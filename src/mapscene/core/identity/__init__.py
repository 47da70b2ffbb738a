"""Entity identity functionality: lightweight IDs and reserved scene entities."""

from mapscene.core.identity.allocator import EntityAllocator
from mapscene.core.identity.models import EntityId, SceneEntity

__all__ = [
    "EntityId",
    "SceneEntity",
    "EntityAllocator",
]
