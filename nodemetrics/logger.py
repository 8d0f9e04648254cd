import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s: %(message)s"


def setup_logging(config):
    """
    Send log records to a file; the console is owned by the metrics screen.

    Replaces any handler already on the root logger, including the stderr
    handler that an early module-level logging call installs implicitly.
    """
    level = getattr(logging, str(config.get("logging.level", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        filename=config.get("logging.file", "metrics.log"),
        level=level,
        format=LOG_FORMAT,
        force=True,
    )
