"""mapscene: build entity/component scenes from XML level maps.

Usage:
    from mapscene import SceneBuilder, MapSettings, Transform

    builder = SceneBuilder(settings=MapSettings(data_dir=Path("data")))
    scene = builder.load("n1")

    print(scene.player[Transform].position)
    for entity in scene.entities:
        ...
"""

__version__ = "0.1.0"

# Core primitives
from mapscene.core import EntityId, SceneEntity, Vector3, component

# Assets
from mapscene.assets import (
    AssetResolvers,
    BoundingBox,
    Material,
    MaterialResolver,
    MeshHandle,
    MeshResolver,
    TextureHandle,
    TextureResolver,
)

# Configuration
from mapscene.config import MapSettings

# Documents
from mapscene.document import MarkupDocument

# Errors
from mapscene.errors import (
    MalformedDocumentError,
    MapLoadError,
    MissingRequiredSectionError,
    ResourceUnavailableError,
)

# Loading
from mapscene.loader import BuildContext, SceneBuilder, extractor

# Scene model
from mapscene.scene import (
    AACollisionBox,
    Entity,
    Health,
    Light,
    MaterialRegistry,
    MeshDrawable,
    PlayerMotion,
    Scene,
    Transform,
    Trigger,
)

# Tracing
from mapscene.tracing import BuildReport, ExtractionRecord

__all__ = [
    # Version
    "__version__",
    # Core
    "Vector3",
    "EntityId",
    "SceneEntity",
    "component",
    # Assets
    "AssetResolvers",
    "BoundingBox",
    "Material",
    "MeshHandle",
    "TextureHandle",
    "MeshResolver",
    "TextureResolver",
    "MaterialResolver",
    # Config
    "MapSettings",
    # Documents
    "MarkupDocument",
    # Errors
    "MapLoadError",
    "ResourceUnavailableError",
    "MalformedDocumentError",
    "MissingRequiredSectionError",
    # Loading
    "SceneBuilder",
    "BuildContext",
    "extractor",
    # Scene
    "Scene",
    "Entity",
    "MaterialRegistry",
    "Transform",
    "MeshDrawable",
    "AACollisionBox",
    "Trigger",
    "Health",
    "PlayerMotion",
    "Light",
    # Tracing
    "BuildReport",
    "ExtractionRecord",
]
