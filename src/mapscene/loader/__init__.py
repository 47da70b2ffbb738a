"""Map loading: build context, section extractors and the scene builder."""

from mapscene.loader.builder import SceneBuilder
from mapscene.loader.extractors import (
    ACID_TEXTURE,
    DEFAULT_EXTRACTORS,
    DOOR_MESH,
    DOOR_TEXTURE,
    WALL_UV_SCALE,
    extract_acids,
    extract_door,
    extract_lights,
    extract_materials,
    extract_models,
    extract_spawn,
    extract_triggers,
    extract_walls,
)
from mapscene.loader.models import BuildContext, ExtractorDescriptor, extractor

__all__ = [
    # Models
    "BuildContext",
    "ExtractorDescriptor",
    "extractor",
    # Extractors
    "extract_materials",
    "extract_spawn",
    "extract_door",
    "extract_models",
    "extract_lights",
    "extract_walls",
    "extract_acids",
    "extract_triggers",
    "DEFAULT_EXTRACTORS",
    "DOOR_MESH",
    "DOOR_TEXTURE",
    "ACID_TEXTURE",
    "WALL_UV_SCALE",
    # Builder
    "SceneBuilder",
]
