"""Target-time sampling inside a soft/hard window."""

from __future__ import annotations

import math
from datetime import datetime

from dynalarm.core.timefmt import from_epoch_millis, to_epoch_millis
from dynalarm.sleep.types import TimeInterval, UniformSource


def sample_target_time(interval: TimeInterval, rng: UniformSource) -> datetime:
    """Draw a uniformly random instant in ``[interval.start, interval.end)``.

    The offset is drawn over whole milliseconds. The caller is responsible
    for ``interval.start < interval.end``.

    Args:
        interval: Soft/hard window
        rng: Uniform source on [0, 1)

    Returns:
        UTC instant with millisecond precision
    """
    start_ms = to_epoch_millis(interval.start)
    span_ms = to_epoch_millis(interval.end) - start_ms
    # Float rounding of u * span can land on span itself for u close to 1
    offset_ms = min(math.floor(rng.random() * span_ms), span_ms - 1)
    return from_epoch_millis(start_ms + offset_ms)
