"""Validation of inbound Socket.IO payloads.

Each parser returns plain values or raises ``MalformedEvent``; the
dispatcher logs and drops those.
"""
from typing import Any, Dict, NamedTuple, Optional, Tuple

from relay.models import UNATTRIBUTED_SHOOTER


class MalformedEvent(ValueError):
    pass


class Movement(NamedTuple):
    x: float
    y: float
    facing_left: bool
    health: Optional[int]


def _require_dict(data) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedEvent(f"expected an object, got {type(data).__name__}")
    return data


def _number(data, key):
    value = data.get(key)
    # bool is an int subclass; true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedEvent(f"{key} must be a number")
    return value


def _session_id(data, key):
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise MalformedEvent(f"{key} is required")
    return value


def parse_movement(data, max_health: int) -> Movement:
    data = _require_dict(data)
    health = data.get('health')
    # A bad health field is ignored; the move itself still applies
    if isinstance(health, bool) or not isinstance(health, int) or not 0 <= health <= max_health:
        health = None
    return Movement(
        x=_number(data, 'x'),
        y=_number(data, 'y'),
        facing_left=bool(data.get('flipX', False)),
        health=health,
    )


def parse_shot(data, shooter_id: str) -> Dict[str, Any]:
    data = _require_dict(data)
    _number(data, 'x')
    _number(data, 'y')
    shot = dict(data)
    shot['playerId'] = shooter_id
    return shot


def parse_hit_target(data) -> str:
    return _session_id(_require_dict(data), 'targetId')


def parse_hit_source(data) -> str:
    data = _require_dict(data or {})
    shooter_id = data.get('shooterId')
    if shooter_id is None or shooter_id == '':
        return UNATTRIBUTED_SHOOTER
    if not isinstance(shooter_id, str):
        raise MalformedEvent('shooterId must be a string')
    return shooter_id


def parse_respawn(data) -> Tuple[Optional[float], Optional[float]]:
    if data is None:
        return None, None
    data = _require_dict(data)
    if data.get('x') is None or data.get('y') is None:
        return None, None
    return _number(data, 'x'), _number(data, 'y')
