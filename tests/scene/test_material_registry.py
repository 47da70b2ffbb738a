"""Tests for MaterialRegistry lenient resolution."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mapscene import Material, MaterialRegistry


@pytest.fixture
def registry():
    return MaterialRegistry()


def test_resolve_registered(registry):
    brick = Material(name="Brick")
    registry.register(0, brick)

    assert registry.resolve_or_default(0) is brick
    assert 0 in registry


def test_unbound_id_resolves_to_default_without_inserting(registry):
    """Unknown ids yield the default material and leave no trace."""
    material = registry.resolve_or_default(7)

    assert material == Material()
    assert material.is_default()
    assert 7 not in registry
    assert len(registry) == 0


def test_rebinding_overwrites(registry):
    registry.register(1, Material(name="Brick"))
    registry.register(1, Material(name="Metal"))

    assert registry.resolve_or_default(1).name == "Metal"
    assert len(registry) == 1


def test_negative_id_rejected(registry):
    with pytest.raises(ValueError, match="non-negative"):
        registry.register(-1, Material(name="Brick"))


@given(
    bindings=st.lists(
        st.tuples(st.integers(min_value=0, max_value=5), st.sampled_from(["A", "B", "C"])),
        max_size=20,
    )
)
def test_last_binding_wins(bindings):
    """PROPERTY: each id resolves to the last material bound to it."""
    registry = MaterialRegistry()
    for mid, name in bindings:
        registry.register(mid, Material(name=name))

    expected = dict(bindings)
    assert len(registry) == len(expected)
    for mid, name in expected.items():
        assert registry.resolve_or_default(mid).name == name
