from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from dynalarm.api.alarm import router as alarm_router
from dynalarm.api.system import router as system_router
from dynalarm.core.logger import setup_logger
from dynalarm.core.settings import settings

setup_logger(level=settings.log_level, log_file=settings.log_file)

if settings.random_seed is not None:
    logger.warning(f"ALARM_RANDOM_SEED={settings.random_seed} is set; every alarm request is reproducible")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Log service URLs on startup and shutdown."""
    base_url = f"http://localhost:{settings.port}"
    logger.info(f"Dynamic Alarm System server running on port {settings.port}")
    logger.info(f"Health check: {base_url}/health")
    logger.info(f"API Documentation: {base_url}/")
    yield
    logger.info("Dynamic Alarm System server stopped")


app = FastAPI(title="Dynamic Alarm System", lifespan=lifespan)

app.include_router(system_router)
app.include_router(alarm_router)

logger.info("FastAPI application initialized")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 with the alarm error shape."""
    logger.warning(f"Malformed request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Request body must be a JSON object with soft and hard ISO 8601 strings",
            "details": [error.get("msg", "") for error in exc.errors()],
        },
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests."""
    logger.debug(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
    return response
