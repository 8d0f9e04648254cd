import logging
import threading
from typing import NamedTuple

from .metrics import Counter


class ReconcileResult(NamedTuple):
    mined: int
    orphaned: int
    immature: int
    mature: int


class TrackedBlockLedger:
    """Blocks mined by this node, reconciled against the active chain."""

    def __init__(self):
        self._lock = threading.Lock()
        self._hashes = []
        self.mined_count = Counter()

    def record_mined(self, block_hash):
        with self._lock:
            self.mined_count.increment()
            self._hashes.append(block_hash)

    def reconcile(self, node, tip_height, params):
        """
        Prune orphans and total the subsidies of the blocks still tracked.

        This is a write: hashes the node no longer has on its active chain are
        removed from the ledger for good. Callers must hold ``node.chain_lock``
        so the chain cannot move while it is being cross-referenced.
        """
        immature = 0
        mature = 0
        with self._lock:
            kept = []
            for block_hash in self._hashes:
                height = node.active_block_height(block_hash)
                if height is None:
                    logging.debug(f"Tracked block {block_hash} is no longer on the active chain")
                    continue
                subsidy = node.block_subsidy(height, params)
                if max(0, params.coinbase_maturity - (tip_height - height)) > 0:
                    immature += subsidy
                else:
                    mature += subsidy
                kept.append(block_hash)
            self._hashes = kept

            mined = self.mined_count.get()
            orphaned = mined - len(self._hashes)

        return ReconcileResult(mined, orphaned, immature, mature)

    def hashes(self):
        with self._lock:
            return list(self._hashes)

    def __len__(self):
        with self._lock:
            return len(self._hashes)
