from flask import Blueprint, jsonify

from relay.state import get_relay

players = Blueprint('players', __name__)

@players.route('/players', methods=['GET'])
def list_players():
    """
    Returns the session table, keyed by player id, as sent in currentPlayers.
    """
    return jsonify(get_relay().registry.snapshot()), 200

@players.route('/players/<string:player_id>', methods=['GET'])
def get_player(player_id):
    relay = get_relay()
    with relay.registry.lock:
        session = relay.registry.get(player_id)
        if session is None:
            return jsonify({'error': 'Player not found'}), 404
        return jsonify(session.to_dict()), 200

@players.route('/scoreboard', methods=['GET'])
def scoreboard():
    """
    Returns kills and deaths per connected player, best first.
    """
    relay = get_relay()
    with relay.registry.lock:
        rows = [
            {'playerId': s.id, 'kills': s.kills, 'deaths': s.deaths}
            for s in relay.registry
        ]
    rows.sort(key=lambda r: (-r['kills'], r['deaths']))
    return jsonify(rows), 200
