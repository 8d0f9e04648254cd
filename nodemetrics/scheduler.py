import threading
import time

from .metrics import SharedValue

# Polling step of the render loop, also the grace period granted to the
# renderer after an immediate refresh request.
POLL_INTERVAL = 0.2


class RefreshScheduler:
    """Owns the next-refresh timestamp shared by the renderer and producers."""

    def __init__(self, interval=1, clock=time.time, poll_interval=POLL_INTERVAL):
        self._clock = clock
        self._interval = interval
        self._poll_interval = poll_interval
        self._next_refresh = SharedValue(clock())
        self._wakeup = threading.Condition()
        # Set by a refresh request until the renderer starts the frame it asked for
        self._refresh_pending = False

    @property
    def interval(self):
        return self._interval

    def set_interval(self, seconds):
        if seconds <= 0:
            raise ValueError("refresh interval must be positive")
        self._interval = seconds

    def next_refresh(self):
        return self._next_refresh.get()

    def schedule_next(self):
        """
        Push the next refresh one interval past now.

        A refresh requested while the last frame was being drawn is kept, so
        the next frame still follows immediately.
        """
        with self._wakeup:
            if self._refresh_pending:
                return
            self._next_refresh.set(self._clock() + self._interval)

    def request_immediate_refresh(self):
        """
        Ask the renderer to draw a new frame now.

        Blocks the caller for the grace period so the renderer has most likely
        begun the new frame by the time this returns. This is best effort and
        gives no ordering guarantee.
        """
        with self._wakeup:
            self._refresh_pending = True
            self._next_refresh.set(self._clock())
            self._wakeup.notify_all()
        time.sleep(self._poll_interval)

    def wait_for_next_tick(self, cancel):
        """
        Block until the next refresh is due.

        Returns True when a new frame should be drawn and False as soon as
        ``cancel`` (a threading.Event) is set.
        """
        while True:
            if cancel.is_set():
                return False
            with self._wakeup:
                remaining = self._next_refresh.get() - self._clock()
                if remaining <= 0:
                    self._refresh_pending = False
                    return True
                self._wakeup.wait(min(remaining, self._poll_interval))
