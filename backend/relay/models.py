from dataclasses import dataclass
from typing import Optional


# Shooter id used when a victim reports a hit without naming the shooter
UNATTRIBUTED_SHOOTER = 'SYSTEM'


@dataclass
class Session:
    """Server-side authoritative record of one connected player."""
    id: str
    x: float
    y: float
    health: int
    spawn_point_index: int
    facing_left: bool = False
    alive: bool = True
    respawning: bool = False
    last_damaged_by: Optional[str] = None
    kills: int = 0
    deaths: int = 0

    @property
    def pending_respawn(self) -> bool:
        return not self.alive or self.respawning

    def place(self, x, y):
        self.x = x
        self.y = y

    def revive(self, max_health: int) -> None:
        # Health reset, alive and respawning flip together
        self.health = max_health
        self.alive = True
        self.respawning = False

    def to_dict(self):
        return {
            'playerId': self.id,
            'x': self.x,
            'y': self.y,
            'flipX': self.facing_left,
            'health': self.health,
            'isDead': not self.alive,
            'lastHitBy': self.last_damaged_by,
            'respawning': self.respawning,
            'spawnPointIndex': self.spawn_point_index,
            'kills': self.kills,
            'deaths': self.deaths,
        }
