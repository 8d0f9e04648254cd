import logging
import sys
import threading

from .colors import cursor_up
from .dashboard import Dashboard

# Back-off after a failed frame
ERROR_BACKOFF = 5


class MetricsScreen:
    """Runs the dashboard on its own thread until stopped."""

    def __init__(self, registry, node, config, out=None):
        self.registry = registry
        self.out = out if out is not None else sys.stdout
        self.is_tty = self.out.isatty()
        self.is_screen, refresh = config.display_mode(self.is_tty)
        registry.scheduler.set_interval(refresh)

        self.dashboard = Dashboard(
            registry,
            node,
            mining=bool(config.get("mining.enabled", False)),
            solver=config.get("mining.solver", "default"),
            node_name=config.get("node.name", "LitecoinZ"),
            is_tty=self.is_tty,
            is_screen=self.is_screen,
            out=self.out,
        )
        self.cancel = threading.Event()
        self.thread = None

    @property
    def running(self):
        return self.thread is not None and self.thread.is_alive()

    def start(self):
        """Start the background rendering thread."""
        if self.running:
            return

        self.cancel.clear()
        self.thread = threading.Thread(target=self._run, name="metrics-screen", daemon=True)
        self.thread.start()
        logging.info(f"Metrics screen started (screen={self.is_screen}, "
                     f"refresh={self.registry.scheduler.interval}s)")

    def stop(self, timeout=5):
        """Cancel the rendering thread and wait for it to exit."""
        self.cancel.set()
        if self.thread:
            self.thread.join(timeout=timeout)
        logging.info("Metrics screen stopped")

    def _run(self):
        scheduler = self.registry.scheduler
        if self.is_screen:
            self.dashboard.render_splash()

        while not self.cancel.is_set():
            try:
                lines = self.dashboard.render_frame()
            except Exception as e:
                logging.error(f"Metrics screen error: {e}")
                if self.cancel.wait(ERROR_BACKOFF):
                    break
                continue

            scheduler.schedule_next()
            if not scheduler.wait_for_next_tick(self.cancel):
                break

            if self.is_screen:
                # Return to the top of the updating section
                print(cursor_up(lines), end="", file=self.out)
