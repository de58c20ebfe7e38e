from flask import Blueprint, jsonify

from relay.state import get_relay

main = Blueprint('main', __name__)

@main.route('/')
def index():
    relay = get_relay()
    return jsonify({'message': 'Relay server is running', 'players': len(relay.registry)})
