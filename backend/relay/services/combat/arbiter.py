import logging
from typing import Optional

from relay.models import Session


class CombatArbiter:
    """Authoritative per-player combat state machine.

    A session is either ALIVE or DEAD_PENDING_RESPAWN. Damage is gated on
    ``health > 0 and not respawning`` and nothing else: the shooter's
    "I hit X" and the victim's "X hit me" for the same bullet both land
    here, and the gate is what keeps a dead player from being hit or killed
    twice. Without a bullet id shared by both clients this is best effort;
    two reports of one bullet against a live target still cost two health.

    All public methods expect the caller to hold ``registry.lock``; the
    respawn timer takes it itself.
    """

    def __init__(self, registry, router, scheduler, respawn_delay: float = 3.0, logger=None):
        self.registry = registry
        self.spawns = registry.spawns
        self.router = router
        self.scheduler = scheduler
        self.respawn_delay = respawn_delay
        self.logger = logger or logging.getLogger(__name__)

    @property
    def max_health(self) -> int:
        return self.registry.max_health

    def apply_hit(self, target_id, shooter_id) -> bool:
        """Take one point of health from ``target_id``. Returns False when dropped."""
        target = self.registry.get(target_id)
        if target is None:
            self.logger.debug(f"[relay-drop] hit on unknown target={target_id}")
            return False
        if shooter_id == target_id:
            self.logger.debug(f"[relay-drop] self hit target={target_id}")
            return False
        if target.health <= 0 or target.pending_respawn:
            self.logger.debug(f"[relay-drop] hit on dead target={target_id}")
            return False

        target.last_damaged_by = shooter_id
        target.health = max(0, target.health - 1)
        self.logger.info(f"[relay-hit] target={target_id} shooter={shooter_id} health={target.health}")
        self.router.to_all('playerDamaged', {
            'playerId': target_id,
            'health': target.health,
            'shooterId': shooter_id,
        })
        if target.health == 0:
            self._kill(target, shooter_id)
        return True

    def confirm_death(self, session_id) -> bool:
        """Client says it died. Credited to whoever hit it last, if anyone."""
        session = self.registry.get(session_id)
        if session is None or session.pending_respawn:
            return False
        self._kill(session, session.last_damaged_by)
        return True

    def ratchet_health(self, session_id, reported: int) -> bool:
        """Accept a client-reported health only if it is lower than ours."""
        session = self.registry.get(session_id)
        if session is None or session.pending_respawn:
            return False
        if reported >= session.health:
            return False
        if reported <= 0:
            self._kill(session, session.last_damaged_by)
        else:
            session.health = reported
        return True

    def report_respawn(self, session_id, x=None, y=None) -> bool:
        """Client finished its respawn animation before our timer did.

        Client coordinates are taken as-is when both are given.
        """
        session = self.registry.get(session_id)
        if session is None or not session.pending_respawn:
            return False
        if x is not None and y is not None:
            session.place(x, y)
        else:
            self._move_to_next_spawn(session)
        self._revive(session)
        return True

    def _kill(self, session: Session, killer_id: Optional[str]) -> None:
        session.health = 0
        session.alive = False
        session.respawning = True
        session.deaths += 1
        self.logger.info(f"[relay-death] player={session.id} killed_by={killer_id}")
        self.router.to_all('playerDied', {'playerId': session.id, 'killedBy': killer_id})

        killer = self.registry.get(killer_id)
        if killer is not None and killer.id != session.id:
            killer.kills += 1
            self.logger.info(f"[relay-kill] player={killer.id} kills={killer.kills}")

        self.scheduler.schedule(self.respawn_delay, self.respawn_expired, session.id, session.deaths)

    def respawn_expired(self, session_id, death_count: int) -> None:
        with self.registry.lock:
            session = self.registry.get(session_id)
            if session is None:
                self.logger.info(f"[timer-abort] player={session_id} disconnected before respawn")
                return
            if not session.pending_respawn or session.deaths != death_count:
                self.logger.debug(f"[timer-abort] player={session_id} already respawned")
                return
            self._move_to_next_spawn(session)
            self._revive(session)

    def _move_to_next_spawn(self, session: Session) -> None:
        spawn = self.spawns.next_spawn_point(session.spawn_point_index)
        session.spawn_point_index = spawn.index
        session.place(spawn.x, spawn.y)

    def _revive(self, session: Session) -> None:
        session.revive(self.max_health)
        self.logger.info(f"[relay-respawn] player={session.id} x={session.x} y={session.y}")
        self.router.to_all('playerRespawned', {'playerId': session.id, 'x': session.x, 'y': session.y})
