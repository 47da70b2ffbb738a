"""Entity allocation service.

EntityAllocator hands out ids for the entities created during one scene load.
"""

from __future__ import annotations

from mapscene.core.identity.models import EntityId, SceneEntity


class EntityAllocator:
    """Allocates sequential entity IDs after the reserved singleton range.

    Scenes are built once and dropped as a whole, so ids are never recycled
    and every id carries generation 0.
    """

    def __init__(self) -> None:
        self._next_index = SceneEntity._RESERVED_COUNT

    def allocate(self) -> EntityId:
        """Allocate a new entity ID.

        Returns:
            Newly allocated EntityId.
        """
        index = self._next_index
        self._next_index += 1
        return EntityId(index=index, generation=0)

    @property
    def allocated(self) -> int:
        """Number of ids handed out so far."""
        return self._next_index - SceneEntity._RESERVED_COUNT
