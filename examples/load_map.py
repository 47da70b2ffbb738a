"""Load a map and print a summary of the resulting scene.

Usage:
    python examples/load_map.py                     # examples/data/maps/demo.xml
    python examples/load_map.py n1 --data-dir /path/to/data -v
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from mapscene import (
    AACollisionBox,
    MapLoadError,
    MapSettings,
    MeshDrawable,
    SceneBuilder,
    Transform,
    Trigger,
)


def describe(entity) -> str:
    parts = [f"#{entity.id.index}"]
    if entity.has(Transform):
        parts.append(f"at {entity[Transform].position.as_tuple()}")
    if entity.has(MeshDrawable):
        drawable = entity[MeshDrawable]
        parts.append(f"mesh={drawable.mesh.name} material={drawable.material.name or '-'}")
    if entity.has(AACollisionBox):
        parts.append("solid")
    if entity.has(Trigger):
        parts.append(f"trigger={entity[Trigger].type}")
    return " ".join(parts)


def main() -> int:
    parser = argparse.ArgumentParser(description="Load a map and summarize its scene")
    parser.add_argument("map", nargs="?", default="demo", help="Map name")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path(__file__).parent / "data",
        help="Game data directory",
    )
    parser.add_argument("--report", action="store_true", help="Print the build report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    settings = MapSettings(data_dir=args.data_dir)
    builder = SceneBuilder(settings=settings)
    try:
        scene, report = builder.build_with_report(settings.map_path(args.map))
    except MapLoadError as e:
        print(f"Level failed to load: {e}", file=sys.stderr)
        return 1

    print(f"Player starts at {scene.player[Transform].position.as_tuple()}")
    print(f"{len(scene.entities)} entities, {len(scene.lights)} lights")
    for entity in scene.entities:
        print("  " + describe(entity))
    if args.report:
        print(json.dumps(report.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
