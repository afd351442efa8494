"""Sleep value types.

All types are immutable and built fresh per request.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Protocol


class SleepStage(IntEnum):
    """Sleep stage label. The integer value is the wire code."""

    LIGHT = 0
    DEEP = 1
    REM = 2


STAGE_LABELS: dict[SleepStage, str] = {
    SleepStage.LIGHT: "Light Sleep",
    SleepStage.DEEP: "Deep Sleep",
    SleepStage.REM: "REM Sleep",
}

SleepSequence = tuple[SleepStage, ...]


class UniformSource(Protocol):
    """Anything that returns a uniform float in [0, 1).

    ``numpy.random.Generator`` and ``random.Random`` both satisfy this.
    """

    def random(self) -> float: ...


@dataclass(frozen=True)
class TimeInterval:
    """Soft/hard wake window. ``start`` must be strictly before ``end``."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class AlarmPlan:
    """Computed result for one alarm request.

    Attributes:
        target: Sampled wake-up instant inside the interval
        sequence: Synthetic sleep stages between interval start and target
        interval: Soft/hard window the target was drawn from
        elapsed_seconds: Whole seconds between interval start and target
    """

    target: datetime
    sequence: SleepSequence
    interval: TimeInterval
    elapsed_seconds: int

    @property
    def array_size(self) -> int:
        return len(self.sequence)

    def stage_counts(self) -> dict[SleepStage, int]:
        counts = dict.fromkeys(SleepStage, 0)
        for stage in self.sequence:
            counts[stage] += 1
        return counts
