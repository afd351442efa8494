"""Health check and API description endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from dynalarm.core.timefmt import render_instant, truncate_to_millis
from dynalarm.schemas.alarm import HealthResponse
from dynalarm.sleep.errors import EXAMPLE_PAYLOAD

router = APIRouter(tags=["system"])

API_DESCRIPTION = {
    "message": "Dynamic Alarm System API",
    "endpoints": {
        "POST /alarm": {
            "description": "Generate dynamic alarm based on sleep patterns",
            "payload": {
                "soft": "ISO 8601 date string (soft limit)",
                "hard": "ISO 8601 date string (hard limit)",
            },
            "example": EXAMPLE_PAYLOAD,
        },
        "GET /health": "Health check endpoint",
    },
}


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    now = truncate_to_millis(datetime.now(timezone.utc))
    return HealthResponse(
        status="OK",
        message="Dynamic Alarm System is running",
        timestamp=render_instant(now),
    )


@router.get("/")
def root() -> dict:
    return API_DESCRIPTION
