"""Configuration module using Pydantic Settings.

Usage:
    from mapscene.config import MapSettings

    settings = MapSettings(data_dir=Path("data"))
"""

from mapscene.config.settings import MapSettings

__all__ = [
    "MapSettings",
]
