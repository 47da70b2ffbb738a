"""Procedural geometry for box-shaped map elements.

portal_box() produces the drawable mesh for walls and acid pools, and
generate_cage() the axis-aligned collision volume around the same transform.
Both only depend on the transform, never on the material.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from mapscene.assets.models import BoundingBox, MeshHandle
from mapscene.core.types import Vector3

if TYPE_CHECKING:
    from mapscene.scene.components import Transform

# (axis, sign) for each face; the remaining two axes span the face.
_FACES: tuple[tuple[int, float], ...] = (
    (0, 1.0),
    (0, -1.0),
    (1, 1.0),
    (1, -1.0),
    (2, 1.0),
    (2, -1.0),
)
_CORNERS: tuple[tuple[float, float], ...] = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))


@lru_cache(maxsize=256)
def _box_geometry(
    size: tuple[float, float, float],
) -> tuple[tuple[Vector3, ...], tuple[tuple[float, float], ...]]:
    half = tuple(s / 2 for s in size)
    vertices: list[Vector3] = []
    uvs: list[tuple[float, float]] = []
    for axis, sign in _FACES:
        u_axis, v_axis = (a for a in range(3) if a != axis)
        for cu, cv in _CORNERS:
            coords = [0.0, 0.0, 0.0]
            coords[axis] = sign * half[axis]
            coords[u_axis] = (cu - 0.5) * size[u_axis]
            coords[v_axis] = (cv - 0.5) * size[v_axis]
            vertices.append(Vector3(*coords))
            # Texture repeats once per world unit along each face edge
            uvs.append((cu * size[u_axis], cv * size[v_axis]))
    return tuple(vertices), tuple(uvs)


def portal_box(transform: Transform) -> MeshHandle:
    """Generate a box mesh sized to the transform's scale.

    Vertices are in local space centered on the origin; the renderer applies
    position and rotation. UVs tile with the face dimensions so textures keep
    their density on large walls.

    Args:
        transform: Transform the box is fitted to.

    Returns:
        Procedural mesh handle with 24 vertices (4 per face).
    """
    size = abs(transform.scale).as_tuple()
    vertices, uvs = _box_geometry(size)
    return MeshHandle(name="portal_box({:g},{:g},{:g})".format(*size), vertices=vertices, uvs=uvs)


def generate_cage(transform: Transform) -> BoundingBox:
    """Axis-aligned box enclosing the transform's scaled unit cube.

    Args:
        transform: Transform to enclose.

    Returns:
        Bounds centered on the transform position with the scale as extent.
    """
    half = abs(transform.scale) * 0.5
    return BoundingBox(minimum=transform.position - half, maximum=transform.position + half)
