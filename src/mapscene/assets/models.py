"""Asset handle models.

Handles are lightweight, immutable references to resolved assets. Loading
pixel or vertex data from disk is the renderer's concern; a handle only
records what was resolved and where it came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mapscene.core.types import Vector3


@dataclass(frozen=True, slots=True)
class TextureHandle:
    """Reference to a texture resolved by name."""

    name: str
    source: Path | None = None


@dataclass(frozen=True, slots=True)
class MeshHandle:
    """Reference to a mesh, either resolved by name or generated procedurally.

    Attributes:
        name: Mesh name or a generated identifier.
        vertices: Vertex positions in local space (empty for file-backed meshes).
        uvs: Texture coordinates, one pair per vertex.
        source: File the mesh resolves to, if any.
    """

    name: str
    vertices: tuple[Vector3, ...] = ()
    uvs: tuple[tuple[float, float], ...] = ()
    source: Path | None = None

    @property
    def is_procedural(self) -> bool:
        return bool(self.vertices)


@dataclass(frozen=True, slots=True)
class Material:
    """Surface description attached to drawables.

    The default instance (empty name, no diffuse texture, unit UV scale) is
    what unresolved material references fall back to.
    """

    name: str = ""
    diffuse: TextureHandle | None = None
    scale_u: float = 1.0
    scale_v: float = 1.0

    def is_default(self) -> bool:
        """Check if this is the empty fallback material, whatever its UV scale."""
        return not self.name and self.diffuse is None


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounds given by two opposite corners."""

    minimum: Vector3 = field(default=Vector3.ZERO)
    maximum: Vector3 = field(default=Vector3.ZERO)

    @property
    def center(self) -> Vector3:
        return (self.minimum + self.maximum) * 0.5

    @property
    def size(self) -> Vector3:
        return self.maximum - self.minimum

    def contains(self, point: Vector3) -> bool:
        """Check if a point lies inside or on the boundary of the box."""
        return (
            self.minimum.x <= point.x <= self.maximum.x
            and self.minimum.y <= point.y <= self.maximum.y
            and self.minimum.z <= point.z <= self.maximum.z
        )
