"""
Interface to the node the metrics screen reports on.

Chain state, peers and consensus rules belong to the node. The screen only
reads them through ``NodeState``, which the node subclasses.
"""

import threading
from dataclasses import dataclass

from .estimator import MEDIAN_TIME_SPAN

COIN = 100_000_000


@dataclass(frozen=True)
class ChainParams:
    """Checkpoint and consensus data needed for display."""

    checkpoint_height: int
    checkpoint_time: int
    genesis_time: int
    target_spacing: int
    coinbase_maturity: int = 100
    median_time_span: int = MEDIAN_TIME_SPAN
    currency_units: str = "LTZ"


class NodeState:
    """
    Read-only view of the node consumed by the dashboard.

    ``chain_lock`` guards the node's chain state. The dashboard holds it while
    it reads several chain facts together and while it reconciles mined
    blocks, calling ``active_block_height`` and ``block_subsidy`` with the lock
    held, so it must be reentrant. Subclasses pass the node's own lock to
    ``NodeState.__init__``; without one a private ``threading.RLock`` is used.
    """

    chain_params = None

    def __init__(self, chain_lock=None):
        self.chain_lock = chain_lock if chain_lock is not None else threading.RLock()

    def height(self):
        raise NotImplementedError

    def tip_median_time(self):
        raise NotImplementedError

    def connection_count(self):
        raise NotImplementedError

    def network_sol_ps(self):
        raise NotImplementedError

    def is_initial_block_download(self):
        raise NotImplementedError

    def active_block_height(self, block_hash):
        """Height of ``block_hash`` if it is on the active chain, else None."""
        raise NotImplementedError

    def block_subsidy(self, height, params):
        """Block reward at ``height``, in base units."""
        raise NotImplementedError
