from typing import NamedTuple, Optional, Sequence, Tuple


class SpawnPoint(NamedTuple):
    index: int
    x: float
    y: float


class SpawnAllocator:
    """Hands out spawn coordinates, alternating between the fixed points.

    Joining players get ``session_count % len(points)``. This is plain
    alternation, not a fairness queue: rapid disconnect/reconnect can put
    several players on the same side. Respawns rotate from the player's own
    previous index, so one player's repeated deaths always alternate sides.
    """

    def __init__(self, points: Sequence[Tuple[float, float]]):
        if not points:
            raise ValueError('at least one spawn point is required')
        self.points = tuple((p[0], p[1]) for p in points)

    def point(self, index: int) -> SpawnPoint:
        x, y = self.points[index]
        return SpawnPoint(index, x, y)

    def next_spawn_point(self, previous_index: Optional[int] = None, session_count: int = 0) -> SpawnPoint:
        if previous_index is None:
            return self.point(session_count % len(self.points))
        return self.point((previous_index + 1) % len(self.points))
