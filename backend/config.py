import os


def parse_spawn_points(raw):
    """Parse an ``x:y,x:y`` list into a tuple of ``(x, y)`` pairs."""
    points = []
    for chunk in raw.split(','):
        chunk = chunk.strip()
        if not chunk:
            continue
        x, sep, y = chunk.partition(':')
        if not sep:
            raise ValueError(f"spawn point {chunk!r} must look like x:y")
        points.append((float(x), float(y)))
    if not points:
        raise ValueError('at least one spawn point is required')
    return tuple(points)


def parse_origins(raw):
    raw = raw.strip()
    if raw == '*':
        return '*'
    return [o.strip() for o in raw.split(',') if o.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Combat rules
    MAX_HEALTH = int(os.environ.get('MAX_HEALTH', '10'))
    RESPAWN_DELAY_SEC = float(os.environ.get('RESPAWN_DELAY_SEC', '3.0'))
    # Left and right ends of the playable width
    SPAWN_POINTS = parse_spawn_points(os.environ.get('SPAWN_POINTS', '200:686,3000:686'))
    # Transport
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    CORS_ALLOWED_ORIGINS = parse_origins(os.environ.get('CORS_ALLOWED_ORIGINS', '*'))
    # Dev server binding (run.py)
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '4000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
