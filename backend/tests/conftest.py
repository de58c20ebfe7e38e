import os
import sys
import pytest

# Ensure the backend root (containing the `relay` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import Config
from relay import create_app, socketio
from relay.registry import ConnectionRegistry
from relay.services.combat import CombatArbiter, SpawnAllocator


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    MAX_HEALTH = 10
    RESPAWN_DELAY_SEC = 3.0
    SPAWN_POINTS = ((200, 686), (3000, 686))
    SOCKETIO_NAMESPACE = '/'


class ManualScheduler:
    """Collects respawn timers; tests fire them explicitly."""

    def __init__(self):
        self.pending = []

    def schedule(self, delay, callback, *args):
        self.pending.append((delay, callback, args))

    def fire_all(self):
        pending, self.pending = self.pending, []
        for _, callback, args in pending:
            callback(*args)


class RecordingRouter:
    def __init__(self):
        self.sent = []

    def to_others(self, origin_id, event, payload):
        self.sent.append(('others', event, payload))

    def to_all(self, event, payload):
        self.sent.append(('all', event, payload))

    def events(self, name):
        return [payload for _, event, payload in self.sent if event == name]


@pytest.fixture()
def scheduler():
    return ManualScheduler()


@pytest.fixture()
def router():
    return RecordingRouter()


@pytest.fixture()
def registry():
    return ConnectionRegistry(SpawnAllocator(TestConfig.SPAWN_POINTS), max_health=TestConfig.MAX_HEALTH)


@pytest.fixture()
def arbiter(registry, router, scheduler):
    return CombatArbiter(registry, router, scheduler, respawn_delay=TestConfig.RESPAWN_DELAY_SEC)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    application.extensions['relay'].arbiter.scheduler = ManualScheduler()
    with application.app_context():
        yield application


@pytest.fixture()
def relay(flask_app):
    return flask_app.extensions['relay']


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def connect_player(flask_app, relay):
    """Connects a Socket.IO test client and returns it with its player id."""
    clients = []

    def _connect():
        before = set(relay.registry.snapshot())
        test_client = socketio.test_client(flask_app, namespace='/')
        (player_id,) = set(relay.registry.snapshot()) - before
        clients.append(test_client)
        return test_client, player_id

    yield _connect
    for test_client in clients:
        if test_client.is_connected('/'):
            test_client.disconnect(namespace='/')
