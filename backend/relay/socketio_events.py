import functools

from flask import request
from flask_socketio import emit

from relay import socketio
from relay.payloads import (
    MalformedEvent,
    parse_hit_source,
    parse_hit_target,
    parse_movement,
    parse_respawn,
    parse_shot,
)
from relay.state import get_relay


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def session_event(handler):
    """Resolve the sender's session and run ``handler`` under the registry lock.

    Events from sids with no session (already disconnected) are dropped
    silently, malformed payloads are logged and dropped.
    """
    @functools.wraps(handler)
    def wrapper(data=None):
        relay = get_relay()
        sid = _get_sid()
        with relay.registry.lock:
            session = relay.registry.get(sid)
            if session is None:
                return
            try:
                handler(relay, session, data)
            except MalformedEvent as exc:
                relay.logger.warning(f"[relay-drop] sid={sid} event={handler.__name__}: {exc}")
    return wrapper


def handle_connect():
    relay = get_relay()
    sid = _get_sid()
    with relay.registry.lock:
        session = relay.registry.register(sid)
        relay.logger.info(f"[relay-connect] player={sid} spawn={session.spawn_point_index}")
        emit('currentPlayers', relay.registry.snapshot())
        relay.router.to_others(sid, 'newPlayer', session.to_dict())


def handle_disconnect(reason=None):
    relay = get_relay()
    sid = _get_sid()
    with relay.registry.lock:
        removed = relay.registry.remove(sid)
        if removed is None:
            return
        relay.logger.info(f"[relay-disconnect] player={sid}")
        relay.router.to_all('playerDisconnected', sid)


@session_event
def handle_movement(relay, session, data):
    if not session.alive:
        return
    move = parse_movement(data, relay.registry.max_health)
    session.place(move.x, move.y)
    session.facing_left = move.facing_left
    if move.health is not None:
        relay.arbiter.ratchet_health(session.id, move.health)
    if session.alive:
        relay.router.to_others(session.id, 'playerMoved', session.to_dict())


@session_event
def handle_shoot(relay, session, data):
    if not session.alive:
        return
    relay.router.to_others(session.id, 'bulletCreated', parse_shot(data, session.id))


@session_event
def handle_hit_player(relay, session, data):
    relay.arbiter.apply_hit(parse_hit_target(data), session.id)


@session_event
def handle_bullet_hit_me(relay, session, data):
    relay.arbiter.apply_hit(session.id, parse_hit_source(data))


@session_event
def handle_player_died(relay, session, data):
    relay.arbiter.confirm_death(session.id)


@session_event
def handle_player_respawned(relay, session, data):
    x, y = parse_respawn(data)
    relay.arbiter.report_respawn(session.id, x, y)


HANDLERS = {
    'connect': handle_connect,
    'disconnect': handle_disconnect,
    'playerMovement': handle_movement,
    'playerShoot': handle_shoot,
    'hitPlayer': handle_hit_player,
    'bulletHitMe': handle_bullet_hit_me,
    'playerDied': handle_player_died,
    'playerRespawned': handle_player_respawned,
}


def register_socketio_handlers(namespace: str = '/') -> None:
    """Bind every relay handler to ``namespace``."""
    for event, handler in HANDLERS.items():
        socketio.on_event(event, handler, namespace=namespace)
