"""Asset resolver protocols for swappable backends.

The loader never reads asset files itself. It asks resolvers for handles,
enabling:
- In-memory resolvers (default, see local.py)
- Engine-backed resolvers with real file caches

Usage:
    assets = AssetResolvers.local(Path("data"))
    builder = SceneBuilder(assets=assets)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mapscene.assets.models import Material, MeshHandle, TextureHandle


@runtime_checkable
class MeshResolver(Protocol):
    """Resolves mesh names to handles."""

    def get(self, name: str) -> MeshHandle:
        """Get the mesh registered under name."""
        ...


@runtime_checkable
class TextureResolver(Protocol):
    """Resolves texture names to handles."""

    def get(self, name: str) -> TextureHandle:
        """Get the texture registered under name."""
        ...


@runtime_checkable
class MaterialResolver(Protocol):
    """Builds materials from texture names or material definitions."""

    def from_texture(self, name: str) -> Material:
        """Material whose diffuse map is the named texture."""
        ...

    def by_name(self, name: str) -> Material:
        """Material described by the named material definition."""
        ...
