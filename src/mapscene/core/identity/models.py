"""Entity identity models.

Usage:
    entity = EntityId(index=1000, generation=0)
    player = SceneEntity.PLAYER
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Lightweight entity identifier.

    Ids are scoped to a single scene load; two scenes may hand out the same id.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def is_reserved(self) -> bool:
        """Check if this id belongs to one of the fixed scene singletons.

        Returns:
            True if the index falls in the reserved range, False otherwise.
        """
        return self.index < SceneEntity._RESERVED_COUNT


class SceneEntity:
    """Reserved entity IDs for the singletons every scene owns."""

    PLAYER = EntityId(index=0, generation=0)
    START = EntityId(index=1, generation=0)
    END = EntityId(index=2, generation=0)

    _RESERVED_COUNT = 16  # First 16 indices reserved
