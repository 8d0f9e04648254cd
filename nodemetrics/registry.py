import logging
import time

from .blocks import TrackedBlockLedger
from .messages import MessageQueue, caption_for
from .metrics import Counter, IntervalTimer, SharedValue
from .scheduler import RefreshScheduler


class MetricsRegistry:
    """
    Every piece of state the metrics screen reads.

    Created once at node startup and handed to the producer threads
    (validation, mining, init) and to the renderer.
    """

    def __init__(self, scheduler=None, clock=time.time):
        self._clock = clock
        self.scheduler = scheduler or RefreshScheduler()

        self.start_time = SharedValue(int(clock()))
        self.init_message = SharedValue("")
        self.loaded = SharedValue(False)

        self.transactions_validated = Counter()
        self.solver_runs = Counter()
        self.solution_target_checks = Counter()
        self.mining_timer = IntervalTimer()
        self.tracked_blocks = TrackedBlockLedger()
        self.messages = MessageQueue(on_post=self.trigger_refresh)

    def mark_start_time(self):
        self.start_time.set(int(self._clock()))

    def uptime(self):
        return int(self._clock()) - self.start_time.get()

    def local_sol_ps(self):
        return self.mining_timer.rate(self.solution_target_checks)

    def track_mined_block(self, block_hash):
        logging.info(f"Tracking mined block {block_hash}")
        self.tracked_blocks.record_mined(block_hash)

    def trigger_refresh(self):
        self.scheduler.request_immediate_refresh()

    # --- UI interface sinks ------------------------------------------------

    def thread_safe_message_box(self, message, caption, style):
        self.messages.post(caption_for(caption, style), message)
        return False

    def thread_safe_question(self, interactive_message, message, caption, style):
        return self.thread_safe_message_box(message, caption, style)

    def set_init_message(self, message):
        self.init_message.set(message)

    def connect_ui(self, ui):
        """Route the node's UI signals to this registry, replacing earlier handlers."""
        ui.thread_safe_message_box = self.thread_safe_message_box
        ui.thread_safe_question = self.thread_safe_question
        ui.init_message = self.set_init_message
