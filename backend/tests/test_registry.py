import pytest

from config import parse_spawn_points
from relay.services.combat import SpawnAllocator


def test_register_alternates_spawn_sides(registry):
    a = registry.register('A')
    b = registry.register('B')
    c = registry.register('C')
    assert [a.spawn_point_index, b.spawn_point_index, c.spawn_point_index] == [0, 1, 0]
    assert (a.x, a.y) == (200, 686)
    assert (b.x, b.y) == (3000, 686)
    assert a.health == 10 and a.alive and not a.respawning


def test_register_same_id_keeps_one_session(registry):
    first = registry.register('A')
    first.health = 4
    assert registry.register('A') is first
    assert len(registry) == 1


def test_remove_is_idempotent(registry):
    registry.register('A')
    assert registry.remove('A').id == 'A'
    assert registry.remove('A') is None
    assert registry.get('A') is None
    assert 'A' not in registry


def test_snapshot_uses_wire_names(registry):
    registry.register('A')
    snap = registry.snapshot()
    assert snap['A']['playerId'] == 'A'
    assert snap['A']['isDead'] is False
    assert snap['A']['flipX'] is False
    assert snap['A']['lastHitBy'] is None


def test_respawn_index_rotates_from_previous():
    spawns = SpawnAllocator([(0, 0), (1, 0), (2, 0)])
    assert spawns.next_spawn_point(0).index == 1
    assert spawns.next_spawn_point(2).index == 0
    assert spawns.next_spawn_point(session_count=4).index == 1


def test_spawn_allocator_needs_points():
    with pytest.raises(ValueError):
        SpawnAllocator([])


def test_parse_spawn_points():
    assert parse_spawn_points('200:686, 3000:686') == ((200.0, 686.0), (3000.0, 686.0))
    with pytest.raises(ValueError):
        parse_spawn_points('200-686')
    with pytest.raises(ValueError):
        parse_spawn_points('')
