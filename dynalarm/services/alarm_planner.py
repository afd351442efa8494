"""Alarm planning service.

Validates the soft/hard limits, samples a target and generates the sleep
pattern leading up to it. All validation happens before any randomness is
consumed.
"""

from __future__ import annotations

import math
from datetime import datetime

import numpy as np
from loguru import logger

from dynalarm.core.timefmt import parse_instant, to_epoch_millis
from dynalarm.sleep.constants import SECONDS_PER_SAMPLE
from dynalarm.sleep.errors import EXAMPLE_PAYLOAD, DegenerateWindowError, ValidationError, WindowTooLargeError
from dynalarm.sleep.pattern import generate_sleep_pattern
from dynalarm.sleep.sampler import sample_target_time
from dynalarm.sleep.types import AlarmPlan, TimeInterval, UniformSource


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a NumPy RNG. Deterministic when ``seed`` is given."""
    return np.random.default_rng(seed)


def parse_window(soft: str | None, hard: str | None) -> TimeInterval:
    """Validate raw soft/hard limits and build the wake window.

    Raises:
        ValidationError: If a limit is missing, unparseable, or soft >= hard
    """
    if not soft or not hard:
        raise ValidationError("Both soft and hard limit times are required", example=EXAMPLE_PAYLOAD)

    try:
        soft_limit = parse_instant(soft)
        hard_limit = parse_instant(hard)
    except (ValueError, OverflowError) as e:
        raise ValidationError(
            f"Invalid date format. Use ISO 8601 format (e.g., {EXAMPLE_PAYLOAD['soft']})"
        ) from e

    if soft_limit >= hard_limit:
        raise ValidationError("Soft limit must be before hard limit")

    return TimeInterval(start=soft_limit, end=hard_limit)


def elapsed_whole_seconds(start: datetime, end: datetime) -> int:
    return math.floor((to_epoch_millis(end) - to_epoch_millis(start)) / 1000)


def build_plan(interval: TimeInterval, rng: UniformSource, max_array_size: int | None = None) -> AlarmPlan:
    """Sample a target inside ``interval`` and generate its sleep pattern.

    Raises:
        DegenerateWindowError: If the target is too close to the soft limit
        WindowTooLargeError: If ``max_array_size`` is set and the target is too far from it
    """
    target = sample_target_time(interval, rng)
    elapsed_seconds = elapsed_whole_seconds(interval.start, target)
    array_size = math.floor(elapsed_seconds / SECONDS_PER_SAMPLE)

    if array_size <= 0:
        logger.info(
            "Sampled window too small for a sleep pattern",
            elapsed_seconds=elapsed_seconds,
        )
        raise DegenerateWindowError(elapsed_seconds)

    if max_array_size is not None and array_size > max_array_size:
        logger.info("Sampled window exceeds sample cap", array_size=array_size, max_array_size=max_array_size)
        raise WindowTooLargeError(array_size, max_array_size)

    sequence = generate_sleep_pattern(array_size, rng)
    return AlarmPlan(
        target=target,
        sequence=sequence,
        interval=interval,
        elapsed_seconds=elapsed_seconds,
    )


def plan_alarm(
    soft: str | None,
    hard: str | None,
    rng: UniformSource,
    max_array_size: int | None = None,
) -> AlarmPlan:
    """Plan an alarm from raw soft/hard limit strings.

    Args:
        soft: Earliest acceptable wake time (ISO-8601)
        hard: Latest acceptable wake time (ISO-8601)
        rng: Uniform source on [0, 1)
        max_array_size: Optional cap on the number of generated samples

    Returns:
        AlarmPlan with sampled target and sleep sequence

    Raises:
        ValidationError: If the limits are missing, invalid, or out of order
        DegenerateWindowError: If the sampled window yields no samples
        WindowTooLargeError: If the sampled window exceeds ``max_array_size``
    """
    interval = parse_window(soft, hard)
    return build_plan(interval, rng, max_array_size)
