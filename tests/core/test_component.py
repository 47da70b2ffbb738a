"""Tests for the component registry."""

from dataclasses import dataclass

import pytest

from mapscene import component
from mapscene.core.component import ComponentRegistry, get_registry
from mapscene.scene import (
    AACollisionBox,
    Health,
    Light,
    MeshDrawable,
    PlayerMotion,
    Transform,
    Trigger,
)


@pytest.fixture
def registry():
    """Create a ComponentRegistry for testing."""
    return ComponentRegistry()


def test_register_is_idempotent(registry):
    @dataclass
    class TestComp:
        value: int

    assert registry.register(TestComp) is TestComp
    registry.register(TestComp)

    assert registry.kinds() == frozenset({TestComp})


def test_registries_are_independent(registry):
    @dataclass
    class Local:
        x: int

    registry.register(Local)

    assert registry.is_registered(Local)
    assert not ComponentRegistry().is_registered(Local)
    assert not get_registry().is_registered(Local)


def test_decorator_rejects_non_dataclass():
    with pytest.raises(TypeError, match="must be a dataclass"):

        @component
        class NotADataclass:
            pass


def test_decorator_parenthesized_form():
    @component()
    @dataclass
    class Parenthesized:
        value: int = 0

    assert get_registry().is_registered(Parenthesized)


def test_scene_component_kinds_are_registered():
    """Every built-in kind can be attached to entities; lights are scene records."""
    kinds = get_registry().kinds()
    for kind in (Transform, MeshDrawable, AACollisionBox, Trigger, Health, PlayerMotion):
        assert kind in kinds
    assert Light not in kinds
