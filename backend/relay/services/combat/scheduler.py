import time


class RespawnScheduler:
    """Runs one-shot delayed callbacks as Socket.IO background tasks.

    Tasks cannot be cancelled; callbacks must re-check state when they fire.
    """

    def __init__(self, app, socketio):
        self.app = app
        self.socketio = socketio

    def schedule(self, delay: float, callback, *args) -> None:
        deadline = time.time() + delay

        def _runner():
            sleep_for = max(0.0, deadline - time.time())
            if sleep_for:
                self.socketio.sleep(sleep_for)
            with self.app.app_context():
                callback(*args)

        self.app.logger.debug(f"[timer-set] callback={getattr(callback, '__name__', callback)} delay={delay}s")
        self.socketio.start_background_task(_runner)
