"""Scene: the fully assembled level.

A scene is created fresh for every load and handed to the caller, who owns it
from then on. Nothing in mapscene keeps a reference after the build returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mapscene.core.identity import EntityAllocator, SceneEntity
from mapscene.scene.components import Health, Light, PlayerMotion, Transform
from mapscene.scene.entity import Entity
from mapscene.scene.materials import MaterialRegistry


@dataclass(slots=True)
class Scene:
    """Player, start/end markers, level entities, lights and materials.

    Attributes:
        player: The player entity; always carries Transform, PlayerMotion and Health.
        start: Spawn marker; always carries a Transform.
        end: Exit door; component-less when the map defines no end.
        entities: Level entities in extraction order.
        lights: Point lights in document order.
        materials: Material id bindings for this load.
    """

    player: Entity = field(default_factory=lambda: Entity(SceneEntity.PLAYER))
    start: Entity = field(default_factory=lambda: Entity(SceneEntity.START))
    end: Entity = field(default_factory=lambda: Entity(SceneEntity.END))
    entities: list[Entity] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    materials: MaterialRegistry = field(default_factory=MaterialRegistry)
    _allocator: EntityAllocator = field(default_factory=EntityAllocator, repr=False)

    @classmethod
    def new(cls) -> Scene:
        """Create an empty scene with the player and start invariants in place."""
        scene = cls()
        scene.player.add(Transform())
        scene.player.add(PlayerMotion())
        scene.player.add(Health())
        scene.start.add(Transform())
        return scene

    def spawn(self) -> Entity:
        """Append a new, component-less entity to the scene and return it."""
        entity = Entity(self._allocator.allocate())
        self.entities.append(entity)
        return entity

    def entities_with(self, *kinds: type) -> list[Entity]:
        """Entities carrying every one of the given component kinds, in order."""
        return [e for e in self.entities if all(e.has(k) for k in kinds)]
