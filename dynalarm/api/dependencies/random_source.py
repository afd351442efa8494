"""Random source dependency.

Each request gets its own generator, so nothing random is shared between
worker threads. With ``ALARM_RANDOM_SEED`` set every request is seeded
identically and produces the same plan for the same input.
"""

from __future__ import annotations

from dynalarm.core.settings import settings
from dynalarm.services.alarm_planner import make_rng
from dynalarm.sleep.types import UniformSource


def get_random_source() -> UniformSource:
    """FastAPI dependency returning a fresh uniform random source."""
    return make_rng(settings.random_seed)
