"""
Scheduling API Routes
HTTP endpoints for meeting time suggestions and request pre-checks.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status

from app.infrastructure.observability.logging import get_logger
from app.models.api.scheduling_request import MeetingSchedulingRequest
from app.models.api.scheduling_response import (
    RequestValidationResponse,
    SchedulingResultResponse,
)
from app.routes.dependencies import get_now
from app.services.scheduling import (
    SchedulingServiceError,
    scheduling_service,
    validate_meeting_request,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/scheduling", tags=["scheduling"])


@router.post("/suggestions", response_model=SchedulingResultResponse)
async def suggest_meeting_times(
    body: MeetingSchedulingRequest, now: datetime = Depends(get_now)
):
    """Rank meeting slots for a request against the caller's existing meetings."""
    request = body.to_domain()
    meetings = body.meetings_to_domain()

    try:
        result = scheduling_service.find_optimal_meeting_times(request, meetings, now=now)
    except SchedulingServiceError as e:
        logger.error(
            "Scheduling failed", title=body.title, error=str(e), error_code=e.error_code
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to find meeting times",
        )

    if result.validation_errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": list(result.validation_errors)},
        )

    return SchedulingResultResponse.from_domain(result)


@router.post("/validate", response_model=RequestValidationResponse)
async def validate_scheduling_request(body: MeetingSchedulingRequest):
    """Report problems with a scheduling request without searching."""
    errors = validate_meeting_request(body.to_domain())
    return RequestValidationResponse(valid=not errors, errors=errors)
