"""End-to-end load of the bundled demo map."""

from pathlib import Path

import pytest

from mapscene import (
    AACollisionBox,
    AssetResolvers,
    MapSettings,
    MeshDrawable,
    SceneBuilder,
    Transform,
    Trigger,
    Vector3,
)

DATA_DIR = Path(__file__).resolve().parents[2] / "examples" / "data"


@pytest.fixture
def scene():
    builder = SceneBuilder(assets=AssetResolvers.local(), settings=MapSettings(data_dir=DATA_DIR))
    return builder.load("demo")


def test_player_on_spawn(scene):
    assert scene.player[Transform].position == Vector3(0, 1, 0)
    assert scene.player[Transform].rotation == Vector3(0, -90, 0)
    assert scene.start[Transform] == scene.player[Transform]


def test_door(scene):
    assert scene.end[Transform].position == Vector3(10, 0, 4)
    assert scene.end.has(MeshDrawable)


def test_entity_counts_and_order(scene):
    # 1 model, 3 walls, 1 acid, 2 triggers
    assert len(scene.entities) == 7
    assert len(scene.entities_with(AACollisionBox)) == 4
    assert [e[Trigger].type for e in scene.entities_with(Trigger)] == ["win", "death"]
    assert scene.entities[0][MeshDrawable].mesh.name == "Chair.obj"


def test_walls_resolve_materials(scene):
    walls = scene.entities[1:4]
    names = [w[MeshDrawable].material.name for w in walls]

    assert names == ["Brick", "Metal", ""]
    assert walls[2][MeshDrawable].material.is_default()


def test_lights_and_materials(scene):
    assert len(scene.lights) == 2
    assert scene.lights[1].specular == 0.0
    assert sorted(mid for mid, _ in scene.materials.items()) == [0, 1]
