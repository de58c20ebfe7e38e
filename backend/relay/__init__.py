from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config['CORS_ALLOWED_ORIGINS']
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Session table, arbiter and router for this app
    from relay.state import init_relay
    init_relay(flask_app, socketio)

    from relay.main import main
    flask_app.register_blueprint(main)

    from relay.api.players import players
    flask_app.register_blueprint(players, url_prefix='/api')

    from relay.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config['SOCKETIO_NAMESPACE'])

    @click.command('relay-config')
    def relay_config_command():
        """Prints the effective combat and transport settings."""
        cfg = flask_app.config
        click.echo(f"max health:     {cfg['MAX_HEALTH']}")
        click.echo(f"respawn delay:  {cfg['RESPAWN_DELAY_SEC']}s")
        click.echo(f"namespace:      {cfg['SOCKETIO_NAMESPACE']}")
        click.echo('spawn points:')
        for index, (x, y) in enumerate(cfg['SPAWN_POINTS']):
            click.echo(f"  [{index}] x={x} y={y}")

    flask_app.cli.add_command(relay_config_command)

    return flask_app
