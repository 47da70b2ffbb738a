"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for locating
map files.

Usage:
    from mapscene.config import MapSettings

    # Load from environment variables (MAPSCENE_*)
    settings = MapSettings()

    # Or override with explicit values
    settings = MapSettings(data_dir=Path("/opt/game/data"))
    settings.map_path("n1")  # /opt/game/data/maps/n1.xml
"""

from __future__ import annotations

from pathlib import Path

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class MapSettings(BaseSettings):  # type: ignore[misc]
    """Where map and asset files live.

    Attributes:
        data_dir: Root of the game data directory.
        maps_subdir: Directory under data_dir holding map files.
        map_extension: File extension of map files, including the dot.
        assets_subdir: Directory under data_dir that asset names resolve against.

    Environment Variables:
        MAPSCENE_DATA_DIR
        MAPSCENE_MAPS_SUBDIR
        MAPSCENE_MAP_EXTENSION
        MAPSCENE_ASSETS_SUBDIR
    """

    model_config = SettingsConfigDict(
        env_prefix="MAPSCENE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    maps_subdir: str = "maps"
    map_extension: str = ".xml"
    assets_subdir: str = ""

    def map_path(self, name: str) -> Path:
        """Path of the map file for a map name."""
        return self.data_dir / self.maps_subdir / f"{name}{self.map_extension}"

    @property
    def assets_dir(self) -> Path:
        return self.data_dir / self.assets_subdir if self.assets_subdir else self.data_dir
