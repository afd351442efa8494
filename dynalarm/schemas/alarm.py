"""Wire schemas for the alarm API.

Field names on the wire are camelCase; Python attributes are snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dynalarm.core.timefmt import render_instant
from dynalarm.sleep.types import STAGE_LABELS, AlarmPlan, SleepStage


class AlarmRequest(BaseModel):
    """Request for a dynamic alarm.

    Both fields are optional at the schema level so that a missing limit is
    reported with an example payload instead of a generic schema error.
    """

    soft: str | None = Field(default=None, description="Soft limit, ISO 8601 date string")
    hard: str | None = Field(default=None, description="Hard limit, ISO 8601 date string")


class InstantView(BaseModel):
    utc: str
    ist: str


class PatternSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    light_sleep: int = Field(alias="lightSleep")
    deep_sleep: int = Field(alias="deepSleep")
    rem_sleep: int = Field(alias="remSleep")


class AlarmMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    soft_limit: InstantView = Field(alias="softLimit")
    hard_limit: InstantView = Field(alias="hardLimit")
    time_difference_seconds: int = Field(alias="timeDifferenceSeconds")
    array_size: int = Field(alias="arraySize")
    sleep_states: dict[str, str] = Field(alias="sleepStates")
    pattern_summary: PatternSummary = Field(alias="patternSummary")


class AlarmResponse(BaseModel):
    """Response for a planned alarm.

    Attributes:
        target: Wake-up instant in UTC and IST
        data: Sleep stage codes (0=Light, 1=Deep, 2=REM)
        metadata: Window, sizes, stage legend and per-stage counts
    """

    target: InstantView
    data: list[int]
    metadata: AlarmMetadata

    @classmethod
    def from_plan(cls, plan: AlarmPlan) -> AlarmResponse:
        counts = plan.stage_counts()
        return cls(
            target=InstantView(**render_instant(plan.target)),
            data=[int(stage) for stage in plan.sequence],
            metadata=AlarmMetadata(
                soft_limit=InstantView(**render_instant(plan.interval.start)),
                hard_limit=InstantView(**render_instant(plan.interval.end)),
                time_difference_seconds=plan.elapsed_seconds,
                array_size=plan.array_size,
                sleep_states={str(int(stage)): label for stage, label in STAGE_LABELS.items()},
                pattern_summary=PatternSummary(
                    light_sleep=counts[SleepStage.LIGHT],
                    deep_sleep=counts[SleepStage.DEEP],
                    rem_sleep=counts[SleepStage.REM],
                ),
            ),
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: InstantView
