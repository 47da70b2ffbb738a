"""Tests for Entity component attachment."""

from dataclasses import dataclass

import pytest

from mapscene import Entity, EntityId, Transform, Trigger, Vector3


@pytest.fixture
def entity():
    return Entity(EntityId(index=100))


def test_add_returns_attached_component(entity):
    t = entity.add(Transform(position=Vector3(1, 2, 3)))

    assert entity[Transform] is t
    assert entity.get(Transform) is t
    assert Transform in entity
    assert entity.has(Transform)
    assert len(entity) == 1


def test_readding_kind_replaces_previous_instance(entity):
    """At most one instance per kind; the newest wins."""
    entity.add(Trigger(type="old"))
    entity.add(Trigger(type="new"))

    assert entity[Trigger].type == "new"
    assert len(entity) == 1


def test_missing_component(entity):
    assert entity.get(Trigger) is None
    with pytest.raises(KeyError, match="no component Trigger"):
        entity[Trigger]


def test_rejects_unregistered_kind(entity):
    @dataclass
    class Loose:
        value: int

    with pytest.raises(TypeError, match="not a component kind"):
        entity.add(Loose(1))
    assert len(entity) == 0


def test_remove_and_clear(entity):
    entity.add(Transform())
    entity.add(Trigger(type="x"))

    assert entity.remove(Trigger) is True
    assert entity.remove(Trigger) is False
    assert entity.component_types() == frozenset({Transform})

    entity.clear()
    assert len(entity) == 0


def test_components_iterate_in_attachment_order(entity):
    t = entity.add(Transform())
    trig = entity.add(Trigger())

    assert list(entity.components()) == [t, trig]
