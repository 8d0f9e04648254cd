import threading
import time


class Counter:
    """Monotonic counter shared between producer threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def increment(self):
        with self._lock:
            self._value += 1

    def get(self):
        with self._lock:
            return self._value


class IntervalTimer:
    """
    Accumulates the time during which at least one owner is active.

    Owners call start()/stop() independently. The timer is reference counted:
    it starts accruing when the first owner starts and stops accruing when the
    last owner stops, so overlapping owners never count the same window twice.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._active_users = 0
        self._accumulated = 0.0
        self._segment_start = None

    def start(self):
        with self._lock:
            if self._active_users < 1:
                self._segment_start = self._clock()
            self._active_users += 1

    def stop(self):
        with self._lock:
            # Ignore excess calls to stop()
            if self._active_users > 0:
                self._active_users -= 1
                if self._active_users < 1:
                    self._accumulated += self._clock() - self._segment_start
                    self._segment_start = None

    def running(self):
        with self._lock:
            return self._active_users > 0

    def active_user_count(self):
        with self._lock:
            return self._active_users

    def rate(self, counter):
        """Events per second of active time, 0 when no time has accrued."""
        with self._lock:
            duration = self._accumulated
            if self._active_users > 0:
                duration += self._clock() - self._segment_start
        return counter.get() / duration if duration > 0 else 0.0

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False


class SharedValue:
    """A single value guarded by a lock."""

    def __init__(self, value=None):
        self._lock = threading.Lock()
        self._value = value

    def get(self):
        with self._lock:
            return self._value

    def set(self, value):
        with self._lock:
            self._value = value
