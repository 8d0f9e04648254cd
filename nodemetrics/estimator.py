"""Estimate the network's chain height from checkpoint data."""

import time

# Number of blocks used to compute a block's median time past
MEDIAN_TIME_SPAN = 11


def _trunc(value):
    """Truncate toward zero, as integer division does on the node."""
    return int(value)


def _round_to_ten(height):
    # Integer (truncating) division, not Python's floor division
    return _trunc((height + 5) / 10) * 10


def estimate_net_height(height, tip_median_time, checkpoint_height, checkpoint_time,
                        genesis_time, target_spacing, now, median_time_span=MEDIAN_TIME_SPAN):
    """
    Estimate the current network height, rounded to the nearest ten.

    The target spacing is averaged with the spacing observed relative to the
    last checkpoint (from above or below depending on the current height), and
    the time elapsed since the tip's median time is converted into blocks with
    that average.
    """
    if height > median_time_span:
        median_height = height - (1 + (median_time_span - 1) // 2)
    else:
        median_height = height // 2

    if median_height > checkpoint_height:
        checkpoint_spacing = (tip_median_time - checkpoint_time) / (median_height - checkpoint_height)
    elif checkpoint_height > 0:
        checkpoint_spacing = (checkpoint_time - genesis_time) / checkpoint_height
    else:
        checkpoint_spacing = 0.0

    average_spacing = (target_spacing + checkpoint_spacing) / 2
    if average_spacing <= 0:
        return _round_to_ten(median_height)

    net_height = _trunc(median_height + (now - tip_median_time) / average_spacing)
    return _round_to_ten(net_height)


def estimate_net_height_for(params, height, tip_median_time, now=None):
    """Run the estimator with the checkpoint metadata of ``params``."""
    if now is None:
        now = int(time.time())
    return estimate_net_height(
        height,
        tip_median_time,
        params.checkpoint_height,
        params.checkpoint_time,
        params.genesis_time,
        params.target_spacing,
        now,
        median_time_span=params.median_time_span,
    )
