"""Shared fixtures for the metrics screen tests."""

import io

import pytest

from nodemetrics.node import COIN, ChainParams, NodeState
from nodemetrics.registry import MetricsRegistry
from nodemetrics.scheduler import RefreshScheduler


TEST_PARAMS = ChainParams(
    checkpoint_height=900_000,
    checkpoint_time=1_590_000_000,
    genesis_time=1_500_000_000,
    target_spacing=150,
    coinbase_maturity=100,
    currency_units="TEST",
)
BLOCK_SUBSIDY = 12 * COIN + COIN // 2


class FakeClock:
    def __init__(self, now=1_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeNode(NodeState):
    def __init__(self, height=1_000, params=TEST_PARAMS):
        super().__init__()
        self.chain_params = params
        self.tip_height = height
        self.median_time = 1_600_000_000
        self.connections = 8
        self.sol_ps = 42
        self.ibd = False
        # hash -> height for blocks on the active chain
        self.active_blocks = {}

    def height(self):
        return self.tip_height

    def tip_median_time(self):
        return self.median_time

    def connection_count(self):
        return self.connections

    def network_sol_ps(self):
        return self.sol_ps

    def is_initial_block_download(self):
        return self.ibd

    def active_block_height(self, block_hash):
        return self.active_blocks.get(block_hash)

    def block_subsidy(self, height, params):
        return BLOCK_SUBSIDY


class FakeUI:
    """Stands in for the node's UI signal hub."""

    def __init__(self):
        self.thread_safe_message_box = None
        self.thread_safe_question = None
        self.init_message = None


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def node():
    return FakeNode()


@pytest.fixture
def registry():
    # No grace period so posting messages does not slow the tests down
    return MetricsRegistry(scheduler=RefreshScheduler(poll_interval=0.0))


@pytest.fixture
def out():
    return io.StringIO()
