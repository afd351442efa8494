"""Synthetic sleep-stage sequence generation.

The sequence is built in three phases and then partially shuffled:

1. Early phase: deep-biased. The first 70% of the deep-sleep budget is DEEP
   outright; remaining early slots are DEEP with p=0.6, else REM.
2. Late phase: REM-biased. Each slot is REM with p=0.7, else DEEP.
3. Tail: LIGHT only (wake-up preparation).

Everything before the tail is Fisher-Yates shuffled, so the early/late bias
only shapes the DEEP/REM mix, not the order. The tail is never shuffled.

For short sequences the phase lengths are clamped so the output is always
exactly ``n`` long: the early phase never exceeds ``n - light_count`` and the
late phase never goes negative. When ``n`` is below the minimum light count
the whole sequence is LIGHT.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import MutableSequence, TypeVar

from dynalarm.sleep.constants import (
    DEEP_RATIO,
    DETERMINISTIC_DEEP_SHARE,
    EARLY_DEEP_PROBABILITY,
    FIRST_HALF_RATIO,
    LATE_REM_PROBABILITY,
    LIGHT_RATIO,
    MIN_LIGHT_COUNT,
)
from dynalarm.sleep.types import SleepSequence, SleepStage, UniformSource

T = TypeVar("T")


@dataclass(frozen=True)
class PatternBudget:
    """Derived slot counts for a sequence of length ``n``.

    Attributes:
        n: Total sequence length
        light_count: Target light-sleep tail length, ``max(5, floor(0.15n))``
        deep_count: Deep-sleep budget, ``floor(0.45n)``
        rem_count: Remainder, informational only
        first_half_len: Nominal early phase length, ``floor(0.6n)``
    """

    n: int
    light_count: int
    deep_count: int
    rem_count: int
    first_half_len: int

    @classmethod
    def for_length(cls, n: int) -> PatternBudget:
        light_count = max(MIN_LIGHT_COUNT, math.floor(n * LIGHT_RATIO))
        deep_count = math.floor(n * DEEP_RATIO)
        return cls(
            n=n,
            light_count=light_count,
            deep_count=deep_count,
            rem_count=n - light_count - deep_count,
            first_half_len=math.floor(n * FIRST_HALF_RATIO),
        )

    @property
    def tail_len(self) -> int:
        return min(self.light_count, self.n)

    @property
    def early_len(self) -> int:
        return min(self.first_half_len, self.n - self.tail_len)

    @property
    def late_len(self) -> int:
        return max(0, self.n - self.first_half_len - self.light_count)


def fisher_yates_shuffle(items: MutableSequence[T], rng: UniformSource) -> None:
    """Shuffle ``items`` in place with a uniform random permutation."""
    for i in range(len(items) - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        items[i], items[j] = items[j], items[i]


def _early_phase(budget: PatternBudget, rng: UniformSource) -> list[SleepStage]:
    deterministic_deep = budget.deep_count * DETERMINISTIC_DEEP_SHARE
    stages = []
    for i in range(budget.early_len):
        if i < deterministic_deep:
            stages.append(SleepStage.DEEP)
        else:
            stages.append(SleepStage.DEEP if rng.random() < EARLY_DEEP_PROBABILITY else SleepStage.REM)
    return stages


def _late_phase(budget: PatternBudget, rng: UniformSource) -> list[SleepStage]:
    return [
        SleepStage.REM if rng.random() < LATE_REM_PROBABILITY else SleepStage.DEEP
        for _ in range(budget.late_len)
    ]


def generate_sleep_pattern(n: int, rng: UniformSource) -> SleepSequence:
    """Generate a synthetic sleep-stage sequence of length ``n``.

    Args:
        n: Sequence length, at least 1
        rng: Uniform source on [0, 1)

    Returns:
        Tuple of ``n`` stages whose last ``max(5, floor(0.15n))`` entries
        (or all ``n`` when shorter) are LIGHT and whose prefix is a shuffled
        mix of DEEP and REM

    Raises:
        ValueError: If n is less than 1
    """
    if n < 1:
        raise ValueError(f"Sequence length must be at least 1, got {n}")

    budget = PatternBudget.for_length(n)

    middle = _early_phase(budget, rng) + _late_phase(budget, rng)
    tail = [SleepStage.LIGHT] * budget.tail_len

    fisher_yates_shuffle(middle, rng)
    return tuple(middle + tail)
