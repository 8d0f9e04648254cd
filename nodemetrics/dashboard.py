import math
import re
import sys
import textwrap
import time

from blessed import Terminal

from .colors import CLEAR_SCREEN, CYAN, ERASE_BELOW, GREEN, RED, RESET, YELLOW
from .estimator import estimate_net_height_for
from .node import COIN

DEFAULT_COLUMNS = 80
DONE_LOADING = "Done loading"
DELIMITER = "-" * 40

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def visible_length(text):
    return len(_ANSI_RE.sub("", text))


def format_duration(seconds):
    """Uptime as '<d> days, <h> hours, ...' starting at the largest non-zero unit."""
    seconds = max(0, int(seconds))
    days, seconds = divmod(seconds, 24 * 60 * 60)
    hours, seconds = divmod(seconds, 60 * 60)
    minutes, seconds = divmod(seconds, 60)

    parts = [(days, "days"), (hours, "hours"), (minutes, "minutes"), (seconds, "seconds")]
    while len(parts) > 1 and parts[0][0] == 0:
        parts.pop(0)
    return ", ".join(f"{CYAN}{value}{RESET} {unit}" for value, unit in parts)


def format_money(amount):
    """Base units as a decimal amount with at least two decimals."""
    sign = "-" if amount < 0 else ""
    whole, frac = divmod(abs(int(amount)), COIN)
    frac_str = f"{frac:08d}".rstrip("0")
    if len(frac_str) < 2:
        frac_str = frac_str.ljust(2, "0")
    return f"{sign}{whole}.{frac_str}"


class Dashboard:
    """Composes one frame of the metrics screen per tick."""

    def __init__(self, registry, node, mining=False, solver="default", node_name="LitecoinZ",
                 is_tty=False, is_screen=False, out=None, clock=time.time):
        self.registry = registry
        self.node = node
        self.mining = mining
        self.solver = solver
        self.node_name = node_name
        self.is_tty = is_tty
        self.is_screen = is_screen
        self.out = out if out is not None else sys.stdout
        self._clock = clock
        self._term = None
        self._cols = DEFAULT_COLUMNS
        self._lines = 0

    def _terminal_width(self):
        if not self.is_tty:
            return DEFAULT_COLUMNS
        try:
            if self._term is None:
                self._term = Terminal(stream=self.out)
            return self._term.width or DEFAULT_COLUMNS
        except Exception:
            return DEFAULT_COLUMNS

    def _emit(self, text=""):
        print(text, file=self.out)
        self._lines += max(1, math.ceil(visible_length(text) / self._cols))

    def render_splash(self):
        print(CLEAR_SCREEN, end="", file=self.out)
        print(f"{GREEN}Thank you for running a {self.node_name} node!{RESET}", file=self.out)
        print(file=self.out)
        self.out.flush()

    def render_frame(self):
        """Print one frame and return how many terminal lines it took."""
        self._lines = 0
        self._cols = self._terminal_width()

        if self.is_screen:
            print(ERASE_BELOW, end="", file=self.out)

        loaded = self.registry.loaded.get()
        if loaded:
            self._render_stats()
            self._render_mining_status()
        self._render_metrics(loaded)
        self._render_messages()
        self._render_init_message()

        if self.is_screen:
            self._emit("[Press Ctrl+C to exit] [Set 'metrics.show: false' to hide]")
        else:
            self._emit(DELIMITER)

        self.out.flush()
        return self._lines

    def _render_stats(self):
        node = self.node
        with node.chain_lock:
            height = node.height()
            tip_median_time = node.tip_median_time()
            connections = node.connection_count()
            net_sol_ps = node.network_sol_ps()
        local_sol_ps = self.registry.local_sol_ps()

        if node.is_initial_block_download():
            net_height = estimate_net_height_for(node.chain_params, height, tip_median_time,
                                                 now=int(self._clock()))
            percent = height * 100 // net_height if net_height > 0 else 0
            color = CYAN if percent == 100 else YELLOW
            self._emit(f"     Downloading blocks | {height} / ~{net_height} ({color}{percent}%{RESET})")
        else:
            self._emit(f"           Block height | {CYAN}{height}{RESET}")
        self._emit(f"            Connections | {CYAN}{connections}{RESET}")
        self._emit(f"  Network solution rate | {CYAN}{net_sol_ps}{RESET} Sol/s")
        if self.mining and self.registry.mining_timer.running():
            self._emit(f"    Local solution rate | {CYAN}{local_sol_ps:.4f} {RESET} Sol/s")
        self._emit()

    def _render_mining_status(self):
        if self.mining:
            threads = self.registry.mining_timer.active_user_count()
            if threads > 0:
                self._emit(f"You are mining with the {CYAN}{self.solver} {RESET} solver on "
                           f"{CYAN}{threads}{RESET} threads.")
            elif self.node.connection_count() == 0:
                self._emit(f"{YELLOW}Mining is paused while waiting for connections.{RESET}")
            elif self.node.is_initial_block_download():
                self._emit(f"{YELLOW}Mining is paused while downloading blocks.{RESET}")
            else:
                self._emit(f"{YELLOW}Mining is paused (a JoinSplit may be in progress).{RESET}")
        else:
            self._emit(f"{RED}You are currently not mining.{RESET}")
            self._emit(f"{YELLOW}To enable mining, set 'mining.enabled: true' in config.yaml and restart.{RESET}")
        self._emit()

    def _render_metrics(self, loaded):
        registry = self.registry
        self._emit(f"Since starting this node {format_duration(registry.uptime())} ago:")

        validated = registry.transactions_validated.get()
        if validated > 1:
            self._emit(f"- You have validated {CYAN}{validated}{RESET} transactions!")
        elif validated == 1:
            self._emit("- You have validated a transaction!")
        else:
            self._emit(f"- {YELLOW}You have validated no transactions.{RESET}")

        if self.mining and loaded:
            self._emit(f"- You have completed {CYAN}{registry.solver_runs.get()}{RESET} solver runs.")

            node = self.node
            params = node.chain_params
            with node.chain_lock:
                result = registry.tracked_blocks.reconcile(node, node.height(), params)

            if result.mined > 0:
                units = params.currency_units
                self._emit(f"- {GREEN}You have mined {result.mined} blocks!{RESET}")
                self._emit(f"  Orphaned: {RED}{result.orphaned}{RESET} blocks, "
                           f"Immature: {YELLOW}{format_money(result.immature)}{RESET} {units}, "
                           f"Mature: {GREEN}{format_money(result.mature)}{RESET} {units}")
        self._emit()

    def _render_messages(self):
        entries = self.registry.messages.snapshot()
        if not entries:
            return

        self._emit("Messages:")
        width = max(10, self._cols - 2)
        for entry in entries:
            # Wrap on the visible caption, then put its colors back
            plain_caption = _ANSI_RE.sub("", entry.caption)
            text = f"{plain_caption}: {entry.body}" if entry.caption else entry.body
            wrapped = []
            for i, paragraph in enumerate(text.split("\n")):
                wrapped.extend(textwrap.wrap(paragraph, width=width,
                                             initial_indent="" if i == 0 else "  ",
                                             subsequent_indent="  ") or [""])
            if entry.caption and wrapped[0].startswith(plain_caption):
                wrapped[0] = entry.caption + wrapped[0][len(plain_caption):]
            self._emit(f"- {wrapped[0]}")
            for line in wrapped[1:]:
                self._emit(line)
        self._emit()

    def _render_init_message(self):
        if self.registry.loaded.get():
            return

        msg = self.registry.init_message.get()
        if msg == DONE_LOADING:
            self._emit(f"Init message: {GREEN}{msg}{RESET}")
            self.registry.loaded.set(True)
        else:
            self._emit(f"Init message: {YELLOW}{msg}{RESET}")
        self._emit()
