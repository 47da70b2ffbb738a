"""Tests for entity identity.

Critical Invariants:
- Allocated ids never collide with the reserved scene singletons
- Ids are unique within one allocator
"""

import pytest

from mapscene.core.identity import EntityAllocator, EntityId, SceneEntity


@pytest.fixture
def allocator():
    return EntityAllocator()


def test_allocated_entities_skip_reserved_range(allocator):
    """CRITICAL: First allocated entity index >= _RESERVED_COUNT.

    Why: Prevents collision with the player/start/end singletons.
    """
    entity = allocator.allocate()

    assert entity.index >= SceneEntity._RESERVED_COUNT
    assert not entity.is_reserved()


def test_allocated_ids_are_unique_and_sequential(allocator):
    ids = [allocator.allocate() for _ in range(5)]

    assert len(set(ids)) == 5
    assert [e.index for e in ids] == sorted(e.index for e in ids)
    assert allocator.allocated == 5


def test_singletons_are_reserved_and_distinct():
    singletons = {SceneEntity.PLAYER, SceneEntity.START, SceneEntity.END}

    assert len(singletons) == 3
    assert all(e.is_reserved() for e in singletons)


def test_separate_allocators_are_independent():
    """Ids are load-scoped: two builds hand out the same first id."""
    assert EntityAllocator().allocate() == EntityAllocator().allocate()


def test_entity_id_is_hashable_value():
    assert EntityId(index=20) == EntityId(index=20, generation=0)
    assert hash(EntityId(index=20)) == hash(EntityId(index=20))
