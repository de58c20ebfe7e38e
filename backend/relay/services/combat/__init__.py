"""Combat domain services: spawn allocation, damage arbitration and respawn timers.

This package contains the authoritative game rules. Socket handlers call
into it; it never touches Flask request state directly, so every rule can
be exercised with an in-memory router and a manual scheduler.
"""

from .arbiter import CombatArbiter
from .scheduler import RespawnScheduler
from .spawn import SpawnAllocator, SpawnPoint

__all__ = ['CombatArbiter', 'RespawnScheduler', 'SpawnAllocator', 'SpawnPoint']
