"""Alarm API endpoints.

Provides the dynamic alarm endpoint: a random wake-up target between a soft
and a hard limit plus a synthetic sleep-stage series leading up to it.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from loguru import logger

from dynalarm.api.dependencies.random_source import get_random_source
from dynalarm.core.settings import settings
from dynalarm.schemas.alarm import AlarmRequest, AlarmResponse
from dynalarm.services.alarm_planner import plan_alarm
from dynalarm.sleep.errors import AlarmError, InternalError
from dynalarm.sleep.types import UniformSource

router = APIRouter(prefix="/alarm", tags=["alarm"])


@router.post(
    "",
    response_model=AlarmResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Missing, invalid, degenerate or oversized soft/hard limits"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Unexpected failure"},
    },
)
def create_alarm(
    request: AlarmRequest | None = None,
    rng: UniformSource = Depends(get_random_source),
):
    """Generate a dynamic alarm based on a synthetic sleep pattern.

    Args:
        request: Soft and hard limit times (ISO 8601). An absent body counts as empty.
        rng: Per-request uniform random source

    Returns:
        AlarmResponse on success, or a JSON error body with status 400/500
    """
    if request is None:
        request = AlarmRequest()

    logger.info("POST /alarm endpoint called", soft=request.soft, hard=request.hard)
    try:
        plan = plan_alarm(request.soft, request.hard, rng, max_array_size=settings.max_array_size)
        response = AlarmResponse.from_plan(plan)
    except AlarmError as e:
        logger.warning("Alarm request rejected", code=e.code, reason=e.message)
        return JSONResponse(status_code=e.status_code, content=e.to_payload())
    except Exception as e:
        logger.exception("Error processing alarm request", soft=request.soft, hard=request.hard)
        error = InternalError.from_exception(e)
        return JSONResponse(status_code=error.status_code, content=error.to_payload())

    logger.info(
        "Alarm planned",
        target=response.target.utc,
        array_size=plan.array_size,
        elapsed_seconds=plan.elapsed_seconds,
    )
    return response
