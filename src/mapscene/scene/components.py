"""Component kinds attachable to scene entities.

The set is closed: every kind here is registered through @component and
Entity refuses anything else.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mapscene.assets.models import BoundingBox, Material, MeshHandle
from mapscene.core.component import component
from mapscene.core.types import Vector3


@component
@dataclass(slots=True)
class Transform:
    """Placement in world space. Rotation is stored in degrees as authored."""

    position: Vector3 = Vector3.ZERO
    rotation: Vector3 = Vector3.ZERO
    scale: Vector3 = Vector3.ONE


@component
@dataclass(slots=True)
class MeshDrawable:
    """Something the renderer draws: a mesh with a material."""

    material: Material = field(default_factory=Material)
    mesh: MeshHandle | None = None


@component
@dataclass(slots=True)
class AACollisionBox:
    """Axis-aligned collision volume in world space."""

    box: BoundingBox = field(default_factory=BoundingBox)


@component
@dataclass(slots=True)
class Trigger:
    """Volume that fires an event of the given type when entered.

    The type is carried verbatim from the map; interpreting it is left to
    gameplay code.
    """

    type: str = ""


@component
@dataclass(slots=True)
class Health:
    value: float = 1.0
    max_value: float = 1.0


@component
@dataclass(slots=True)
class PlayerMotion:
    """Locomotion state owned by the movement code."""

    velocity: Vector3 = Vector3.ZERO
    speed: float = 0.1
    flying: bool = False


@dataclass(slots=True)
class Light:
    """Scene-level point light. Lights are records on the scene, not components."""

    position: Vector3 = Vector3.ZERO
    color: Vector3 = Vector3.ZERO
    distance: float = 0.0
    energy: float = 0.0
    specular: float = 0.0
