class BroadcastRouter:
    """Fans events out over the Socket.IO namespace.

    Delivery is whatever the transport gives: at most once per send, no
    retry. A client that misses events is resynced by the snapshot it gets
    on reconnect.
    """

    def __init__(self, socketio, namespace='/'):
        self.socketio = socketio
        self.namespace = namespace

    def to_others(self, origin_id, event, payload):
        self.socketio.emit(event, payload, namespace=self.namespace, skip_sid=origin_id)

    def to_all(self, event, payload):
        self.socketio.emit(event, payload, namespace=self.namespace)
