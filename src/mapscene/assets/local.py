"""In-memory asset resolvers.

Simple name-keyed caches suitable for tools, tests and headless loading.
Each name resolves once; later lookups return the cached handle.

Usage:
    assets = AssetResolvers.local(Path("data"))
    wall = assets.materials.by_name("Brick")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mapscene.assets.models import Material, MeshHandle, TextureHandle
from mapscene.assets.protocol import MaterialResolver, MeshResolver, TextureResolver


def _source(root: Path | None, subdir: str, name: str) -> Path | None:
    if root is None:
        return None
    return root / subdir / name


class LocalTextureResolver:
    """Caches texture handles by name under ``<root>/textures``."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root
        self._cache: dict[str, TextureHandle] = {}

    def get(self, name: str) -> TextureHandle:
        if name not in self._cache:
            self._cache[name] = TextureHandle(name=name, source=_source(self._root, "textures", name))
        return self._cache[name]

    def __len__(self) -> int:
        return len(self._cache)


class LocalMeshResolver:
    """Caches mesh handles by name under ``<root>/meshes``."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root
        self._cache: dict[str, MeshHandle] = {}

    def get(self, name: str) -> MeshHandle:
        if name not in self._cache:
            self._cache[name] = MeshHandle(name=name, source=_source(self._root, "meshes", name))
        return self._cache[name]

    def __len__(self) -> int:
        return len(self._cache)


class LocalMaterialResolver:
    """Builds materials on top of a texture resolver.

    Material definitions are named after their diffuse texture, so
    ``by_name("Brick")`` resolves the ``Brick`` texture and names the
    material ``Brick``.
    """

    def __init__(self, textures: TextureResolver) -> None:
        self._textures = textures
        self._by_texture: dict[str, Material] = {}
        self._by_name: dict[str, Material] = {}

    def from_texture(self, name: str) -> Material:
        if name not in self._by_texture:
            self._by_texture[name] = Material(name=name, diffuse=self._textures.get(name))
        return self._by_texture[name]

    def by_name(self, name: str) -> Material:
        if name not in self._by_name:
            self._by_name[name] = Material(name=name, diffuse=self._textures.get(name))
        return self._by_name[name]


@dataclass(slots=True)
class AssetResolvers:
    """The resolvers a scene build consults, bundled for injection."""

    meshes: MeshResolver
    textures: TextureResolver
    materials: MaterialResolver

    @classmethod
    def local(cls, root: Path | None = None) -> AssetResolvers:
        """Create in-memory resolvers rooted at an optional asset directory."""
        textures = LocalTextureResolver(root)
        return cls(
            meshes=LocalMeshResolver(root),
            textures=textures,
            materials=LocalMaterialResolver(textures),
        )
