"""Scene model: component kinds, entities, material registry and the scene."""

from mapscene.scene.components import (
    AACollisionBox,
    Health,
    Light,
    MeshDrawable,
    PlayerMotion,
    Transform,
    Trigger,
)
from mapscene.scene.entity import Entity
from mapscene.scene.materials import MaterialRegistry
from mapscene.scene.scene import Scene

__all__ = [
    # Components
    "Transform",
    "MeshDrawable",
    "AACollisionBox",
    "Trigger",
    "Health",
    "PlayerMotion",
    "Light",
    # Model
    "Entity",
    "MaterialRegistry",
    "Scene",
]
