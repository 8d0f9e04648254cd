"""Metrics screen entry point, called by the node during startup."""

import logging

from .config import Config
from .logger import setup_logging
from .registry import MetricsRegistry
from .screen import MetricsScreen


def start(node, ui=None, config_path="config.yaml", out=None):
    """
    Build the registry and, unless disabled, start the metrics screen.

    Returns ``(registry, screen)``; ``screen`` is None when the config sets
    ``metrics.show`` to false. The caller hands the registry to its producer
    threads and calls ``screen.stop()`` on shutdown.
    """
    config = Config(config_path)
    setup_logging(config)
    config.log_load_result()

    logging.info("=== Metrics Screen Starting ===")
    registry = MetricsRegistry()
    registry.mark_start_time()
    if ui is not None:
        registry.connect_ui(ui)

    if not config.get("metrics.show", True):
        logging.info("Metrics screen disabled by configuration")
        return registry, None

    screen = MetricsScreen(registry, node, config, out=out)
    screen.start()
    return registry, screen
