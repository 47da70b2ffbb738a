"""Material registry: load-scoped mapping from numeric id to Material.

Map files bind materials to small integer ids once (``<mat mid="0" .../>``)
and walls refer to them by id. Lookups of unknown ids are lenient: they
yield the default Material and are never an error.
"""

from __future__ import annotations

from collections.abc import Iterator

from mapscene.assets.models import Material


class MaterialRegistry:
    """Id → Material mapping for one scene load."""

    def __init__(self) -> None:
        self._materials: dict[int, Material] = {}

    def register(self, mid: int, material: Material) -> None:
        """Bind a material to an id, overwriting any previous binding.

        Raises:
            ValueError: If mid is negative.
        """
        if mid < 0:
            raise ValueError(f"Material id must be non-negative, got {mid}")
        self._materials[mid] = material

    def resolve_or_default(self, mid: int) -> Material:
        """Material bound to mid, or the default Material if unbound.

        Never inserts an entry for an unbound id.
        """
        return self._materials.get(mid, Material())

    def get(self, mid: int) -> Material | None:
        return self._materials.get(mid)

    def items(self) -> Iterator[tuple[int, Material]]:
        return iter(self._materials.items())

    def __contains__(self, mid: object) -> bool:
        return mid in self._materials

    def __len__(self) -> int:
        return len(self._materials)

    def __repr__(self) -> str:
        return f"MaterialRegistry({self._materials!r})"
