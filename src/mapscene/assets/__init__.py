"""Asset handles, resolver protocols, in-memory resolvers and box geometry."""

from mapscene.assets.geometry import generate_cage, portal_box
from mapscene.assets.local import (
    AssetResolvers,
    LocalMaterialResolver,
    LocalMeshResolver,
    LocalTextureResolver,
)
from mapscene.assets.models import BoundingBox, Material, MeshHandle, TextureHandle
from mapscene.assets.protocol import MaterialResolver, MeshResolver, TextureResolver

__all__ = [
    # Models
    "TextureHandle",
    "MeshHandle",
    "Material",
    "BoundingBox",
    # Protocols
    "MeshResolver",
    "TextureResolver",
    "MaterialResolver",
    # Local resolvers
    "AssetResolvers",
    "LocalMeshResolver",
    "LocalTextureResolver",
    "LocalMaterialResolver",
    # Geometry
    "portal_box",
    "generate_cage",
]
