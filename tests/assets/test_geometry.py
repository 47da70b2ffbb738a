"""Tests for portal box meshes and collision cages."""

from hypothesis import given
from hypothesis import strategies as st

from mapscene import Transform, Vector3
from mapscene.assets import generate_cage, portal_box

coord = st.floats(min_value=-100, max_value=100, allow_nan=False)
extent = st.floats(min_value=0.01, max_value=50, allow_nan=False)


def test_cage_centered_on_position():
    t = Transform(position=Vector3(2, 0, 0), scale=Vector3(1, 1, 1))
    box = generate_cage(t)

    assert box.center == Vector3(2, 0, 0)
    assert box.minimum == Vector3(1.5, -0.5, -0.5)
    assert box.maximum == Vector3(2.5, 0.5, 0.5)
    assert box.contains(Vector3(2, 0, 0))
    assert not box.contains(Vector3(3, 0, 0))


def test_cage_handles_negative_scale():
    box = generate_cage(Transform(scale=Vector3(-2, 1, 1)))

    assert box.size == Vector3(2, 1, 1)


@given(x=coord, y=coord, z=coord, sx=extent, sy=extent, sz=extent)
def test_cage_encloses_transform(x, y, z, sx, sy, sz):
    """PROPERTY: the cage contains the transform position and has the scale as size."""
    t = Transform(position=Vector3(x, y, z), scale=Vector3(sx, sy, sz))
    box = generate_cage(t)

    assert box.contains(t.position)
    size = box.size
    assert abs(size.x - sx) < 1e-6
    assert abs(size.y - sy) < 1e-6
    assert abs(size.z - sz) < 1e-6


def test_portal_box_fits_scale():
    mesh = portal_box(Transform(scale=Vector3(4, 2, 1)))

    assert mesh.is_procedural
    assert len(mesh.vertices) == 24
    assert len(mesh.uvs) == 24
    assert max(v.x for v in mesh.vertices) == 2
    assert min(v.y for v in mesh.vertices) == -1
    assert max(v.z for v in mesh.vertices) == 0.5


def test_portal_box_uvs_tile_with_face_size():
    mesh = portal_box(Transform(scale=Vector3(4, 2, 1)))

    max_u = max(u for u, _ in mesh.uvs)
    max_v = max(v for _, v in mesh.uvs)
    assert max_u == 4
    assert max_v == 2


def test_portal_box_ignores_position():
    a = portal_box(Transform(position=Vector3(5, 5, 5), scale=Vector3(1, 2, 3)))
    b = portal_box(Transform(scale=Vector3(1, 2, 3)))

    assert a == b
