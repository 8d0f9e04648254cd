"""
Live console metrics screen for a blockchain full node.

Producer threads feed a ``MetricsRegistry``; ``MetricsScreen`` redraws the
dashboard from it on a background thread.
"""

from .blocks import ReconcileResult, TrackedBlockLedger
from .config import Config
from .estimator import estimate_net_height, estimate_net_height_for
from .logger import setup_logging
from .messages import MessageEntry, MessageQueue, MessageStyle
from .metrics import Counter, IntervalTimer, SharedValue
from .node import ChainParams, NodeState
from .registry import MetricsRegistry
from .scheduler import RefreshScheduler
from .screen import MetricsScreen

__version__ = "1.0.0"

__all__ = [
    "ChainParams",
    "Config",
    "Counter",
    "IntervalTimer",
    "MessageEntry",
    "MessageQueue",
    "MessageStyle",
    "MetricsRegistry",
    "MetricsScreen",
    "NodeState",
    "ReconcileResult",
    "RefreshScheduler",
    "SharedValue",
    "TrackedBlockLedger",
    "estimate_net_height",
    "estimate_net_height_for",
    "setup_logging",
]
