"""
FastAPI application exposing the scheduling and prioritization engine.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.infrastructure.observability.logging import get_logger, log_request, setup_logging
from app.middleware import RequestContextMiddleware
from app.models.domain.value_objects import DomainValidationError
from app.routes import health, scheduling, tasks

# Setup logging before creating the app
setup_logging(log_level=settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration; the engine holds no resources to open or close."""
    logger.info(
        "Application starting",
        environment=settings.environment,
        debug=settings.debug,
        working_hours=settings.default_working_hours(),
        buffer_minutes=settings.SCHEDULING_BUFFER_MINUTES,
        timezone=settings.SCHEDULING_TIMEZONE,
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Workflow Scheduler",
    description="Meeting slot suggestions and task prioritization",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(RequestContextMiddleware)

# Include routers
app.include_router(health.router)
app.include_router(scheduling.router)
app.include_router(tasks.router)


@app.exception_handler(DomainValidationError)
async def domain_validation_error_handler(request: Request, exc: DomainValidationError):
    """Malformed values (unknown priority, start after end, bad HH:MM) become 422s."""
    logger.warning(
        "Rejected malformed input",
        path=request.url.path,
        field=exc.field,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": {"field": exc.field, "message": str(exc)}},
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log HTTP requests with timing."""
    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000

    log_request(
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(process_time, 2),
        request_id=getattr(request.state, "request_id", None),
    )
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
