"""
Task API Routes
HTTP endpoints for task prioritization and priority advice.
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from app.models.api.task_request import PrioritizeTasksRequest, PriorityAdjustmentsRequest
from app.models.api.task_response import (
    PrioritizationResultResponse,
    PriorityAdjustmentResponse,
    PriorityAdjustmentsResponse,
)
from app.routes.dependencies import get_now
from app.services.prioritization import prioritization_service


router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("/prioritize", response_model=PrioritizationResultResponse)
async def prioritize_tasks(body: PrioritizeTasksRequest, now: datetime = Depends(get_now)):
    """Rank tasks by weighted due date, priority, status, dependency and effort factors."""
    result = prioritization_service.prioritize_tasks(
        body.tasks_to_domain(), body.criteria_overrides(), now=now
    )
    return PrioritizationResultResponse.from_domain(result, now)


@router.post("/priority-adjustments", response_model=PriorityAdjustmentsResponse)
async def priority_adjustments(
    body: PriorityAdjustmentsRequest, now: datetime = Depends(get_now)
):
    """Suggest priority upgrades or downgrades where urgency and priority disagree."""
    adjustments = prioritization_service.suggest_priority_adjustments(
        body.tasks_to_domain(), now=now
    )
    return PriorityAdjustmentsResponse(
        adjustments=[PriorityAdjustmentResponse.from_domain(a) for a in adjustments],
        total_count=len(adjustments),
    )
