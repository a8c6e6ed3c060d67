import time


class Notifier:
    """Single-slot toast: a new message replaces the current one, nothing is queued."""

    def __init__(self, duration=2.0, clock=time.monotonic):
        self.duration = duration
        self.clock = clock
        self._message = None
        self._shown_at = None

    def notify(self, text):
        self._message = text
        self._shown_at = self.clock()

    def current(self):
        if self._message is None:
            return None
        if self.clock() - self._shown_at >= self.duration:
            self.clear()
            return None
        return self._message

    def clear(self):
        self._message = None
        self._shown_at = None
