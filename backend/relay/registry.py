import threading
from typing import Dict, Iterator, Optional

from relay.models import Session
from relay.services.combat.spawn import SpawnAllocator


class ConnectionRegistry:
    """Owns the session table: one Session per connected sid.

    Handlers and timer callbacks must hold ``lock`` while reading and
    mutating sessions. The lock is re-entrant so arbiter calls made from a
    handler can take it again. It is a threading lock: under eventlet or
    gevent the process must be monkey-patched before import, otherwise
    greenlets share one thread ident and the lock excludes nothing.
    """

    def __init__(self, spawns: SpawnAllocator, max_health: int = 10):
        self.spawns = spawns
        self.max_health = max_health
        self.lock = threading.RLock()
        self._sessions: Dict[str, Session] = {}

    def register(self, session_id: str) -> Session:
        with self.lock:
            existing = self._sessions.get(session_id)
            if existing is not None:
                return existing
            spawn = self.spawns.next_spawn_point(session_count=len(self._sessions))
            session = Session(
                id=session_id,
                x=spawn.x,
                y=spawn.y,
                health=self.max_health,
                spawn_point_index=spawn.index,
            )
            self._sessions[session_id] = session
            return session

    def get(self, session_id) -> Optional[Session]:
        if session_id is None:
            return None
        return self._sessions.get(session_id)

    def remove(self, session_id) -> Optional[Session]:
        """Delete and return the session; ``None`` if it was already gone."""
        with self.lock:
            return self._sessions.pop(session_id, None)

    def snapshot(self) -> Dict[str, dict]:
        with self.lock:
            return {sid: s.to_dict() for sid, s in self._sessions.items()}

    def __contains__(self, session_id) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[Session]:
        return iter(list(self._sessions.values()))
