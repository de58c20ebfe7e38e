from flask import current_app

from relay.broadcast import BroadcastRouter
from relay.registry import ConnectionRegistry
from relay.services.combat import CombatArbiter, RespawnScheduler, SpawnAllocator


class Relay:
    """Everything one match server owns, built once per Flask app."""

    def __init__(self, registry, router, arbiter, logger):
        self.registry = registry
        self.router = router
        self.arbiter = arbiter
        self.logger = logger


def init_relay(flask_app, socketio) -> Relay:
    config = flask_app.config
    spawns = SpawnAllocator(config['SPAWN_POINTS'])
    registry = ConnectionRegistry(spawns, max_health=config['MAX_HEALTH'])
    router = BroadcastRouter(socketio, namespace=config['SOCKETIO_NAMESPACE'])
    arbiter = CombatArbiter(
        registry,
        router,
        RespawnScheduler(flask_app, socketio),
        respawn_delay=config['RESPAWN_DELAY_SEC'],
        logger=flask_app.logger,
    )
    relay = Relay(registry, router, arbiter, flask_app.logger)
    flask_app.extensions['relay'] = relay
    return relay


def get_relay() -> Relay:
    return current_app.extensions['relay']
