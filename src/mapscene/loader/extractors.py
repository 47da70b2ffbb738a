"""Section extractors.

Each extractor reads one kind of section from the map root and adds the
matching records to the scene. They run in the order of DEFAULT_EXTRACTORS;
walls depend on the material bindings made by extract_materials, so the order
is fixed.

Map format:
    <map>
      <materials><mat mid="0" name="Brick"/></materials>
      <spawn><position x="0" y="1" z="0"/><rotation x="0" y="90" z="0"/></spawn>
      <end><position .../><rotation .../></end>
      <model mesh="Chair.obj" texture="Wood.png"><position .../></model>
      <light x="0" y="5" z="0" r="1" g="1" b="1" distance="30" energy="5" specular="1"/>
      <wall mid="0"><position .../><rotation .../><scale .../></wall>
      <acid><position .../><scale .../></acid>
      <trigger type="win"><position .../><scale .../></trigger>
    </map>
"""

from __future__ import annotations

import logging
from dataclasses import replace

from mapscene.assets import Material, generate_cage, portal_box
from mapscene.core.types import Vector3
from mapscene.document import (
    MarkupElement,
    extract_position,
    extract_rotation,
    extract_scale,
    read_vertex,
)
from mapscene.errors import MissingRequiredSectionError
from mapscene.loader.models import BuildContext, ExtractorDescriptor, extractor
from mapscene.scene import AACollisionBox, Light, MeshDrawable, Transform, Trigger

logger = logging.getLogger(__name__)

DOOR_MESH = "Door.obj"
DOOR_TEXTURE = "Door.png"
ACID_TEXTURE = "acid.png"
WALL_UV_SCALE = 2.0
UNNAMED_ASSET = "none"
NO_MATERIAL_ID = -1


def _float_attr(element: MarkupElement, name: str) -> float:
    value = element.query_float(name)
    return 0.0 if value is None else value


@extractor("materials")
def extract_materials(ctx: BuildContext) -> None:
    """Bind ``<mat mid=".." name=".."/>`` entries to material ids.

    Entries without a usable id or without a name are skipped. A later entry
    with the same id replaces the earlier binding.
    """
    section = ctx.root.first_child("materials")
    if section is None:
        return

    for mat in section.children_named("mat"):
        mid = mat.query_int("mid")
        if mid is None or mid < 0:
            ctx.skip("materials", "no material id", mat)
            continue
        name = mat.query_string("name") or ""
        if not name:
            ctx.skip("materials", "no material name", mat)
            continue
        if mid in ctx.scene.materials:
            logger.debug("Material id %d rebound to %r", mid, name)
        ctx.scene.materials.register(mid, ctx.assets.materials.by_name(name))


@extractor("spawn", required=True)
def extract_spawn(ctx: BuildContext) -> None:
    """Place the start marker and move the player onto it.

    Raises:
        MissingRequiredSectionError: If the map has no spawn section.
    """
    node = ctx.root.first_child("spawn")
    if node is None:
        raise MissingRequiredSectionError("spawn")

    start = ctx.scene.start
    start.clear()
    t = start.add(Transform(position=extract_position(node), rotation=extract_rotation(node)))

    pt = ctx.scene.player[Transform]
    pt.position = t.position
    pt.rotation = t.rotation


@extractor("end")
def extract_door(ctx: BuildContext) -> None:
    """Place the exit door. Without an end section the end entity stays empty."""
    node = ctx.root.first_child("end")
    if node is None:
        return

    door = ctx.scene.end
    door.clear()
    door.add(Transform(position=extract_position(node), rotation=extract_rotation(node)))
    door.add(
        MeshDrawable(
            material=ctx.assets.materials.from_texture(DOOR_TEXTURE),
            mesh=ctx.assets.meshes.get(DOOR_MESH),
        )
    )


@extractor("model")
def extract_models(ctx: BuildContext) -> None:
    for node in ctx.root.children_named("model"):
        texture = node.query_string("texture")
        mesh = node.query_string("mesh")
        if texture is None:
            texture = UNNAMED_ASSET
        if mesh is None:
            mesh = UNNAMED_ASSET

        model = ctx.scene.spawn()
        model.add(Transform(position=extract_position(node), rotation=extract_rotation(node)))
        model.add(
            MeshDrawable(
                material=ctx.assets.materials.from_texture(texture),
                mesh=ctx.assets.meshes.get(mesh),
            )
        )


@extractor("light")
def extract_lights(ctx: BuildContext) -> None:
    """Append one Light per ``light`` section. Missing attributes read as 0.0.

    A map without lights yields an empty light list.
    """
    count = 0
    for node in ctx.root.children_named("light"):
        ctx.scene.lights.append(
            Light(
                position=read_vertex(node),
                color=Vector3(
                    _float_attr(node, "r"),
                    _float_attr(node, "g"),
                    _float_attr(node, "b"),
                ),
                distance=_float_attr(node, "distance"),
                energy=_float_attr(node, "energy"),
                specular=_float_attr(node, "specular"),
            )
        )
        count += 1
    if count == 0:
        logger.debug("Map defines no lights")


@extractor("wall")
def extract_walls(ctx: BuildContext) -> None:
    """Walls: portal box mesh, registry material with doubled UV scale, collision cage."""
    materials = ctx.scene.materials
    for node in ctx.root.children_named("wall"):
        wall = ctx.scene.spawn()
        t = wall.add(
            Transform(
                position=extract_position(node),
                rotation=extract_rotation(node),
                scale=extract_scale(node),
            )
        )

        mid = node.query_int("mid")
        if mid is None:
            mid = NO_MATERIAL_ID
        if mid not in materials:
            logger.debug("Wall %s uses unbound material id %d", wall.id.index, mid)
        material = replace(
            materials.resolve_or_default(mid), scale_u=WALL_UV_SCALE, scale_v=WALL_UV_SCALE
        )
        wall.add(MeshDrawable(material=material, mesh=portal_box(t)))
        wall.add(AACollisionBox(box=generate_cage(t)))


@extractor("acid")
def extract_acids(ctx: BuildContext) -> None:
    """Acid pools: like walls, but unrotated and always textured with acid."""
    for node in ctx.root.children_named("acid"):
        acid = ctx.scene.spawn()
        t = acid.add(Transform(position=extract_position(node), scale=extract_scale(node)))
        acid.add(
            MeshDrawable(
                material=Material(diffuse=ctx.assets.textures.get(ACID_TEXTURE)),
                mesh=portal_box(t),
            )
        )
        acid.add(AACollisionBox(box=generate_cage(t)))


@extractor("trigger")
def extract_triggers(ctx: BuildContext) -> None:
    for node in ctx.root.children_named("trigger"):
        trigger = ctx.scene.spawn()
        trigger.add(Transform(position=extract_position(node), scale=extract_scale(node)))
        trigger.add(Trigger(type=node.query_string("type") or ""))


DEFAULT_EXTRACTORS: tuple[ExtractorDescriptor, ...] = (
    extract_materials,
    extract_spawn,
    extract_door,
    extract_models,
    extract_lights,
    extract_walls,
    extract_acids,
    extract_triggers,
)
