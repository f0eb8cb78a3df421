# app/models/api/task_response.py
"""
Task API response models.
Used by routes for output formatting.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.domain.prioritization_domain import (
    PrioritizationResult,
    PrioritizedTask,
    PriorityAdjustment,
)
from app.models.domain.task_domain import Task


class TaskResponse(BaseModel):
    id: str | None = Field(None, description="Task ID")
    title: str = Field(..., description="Task title")
    priority: str = Field(..., description="Task priority")
    status: str = Field(..., description="Task status")
    due_date: datetime | None = Field(None, description="Due date")
    estimated_duration_minutes: int | None = Field(None, description="Estimated effort")
    dependency_ids: list[str] = Field(default_factory=list, description="Blocking task IDs")
    is_overdue: bool = Field(..., description="Past due and not completed")
    urgency_score: int = Field(..., ge=0, le=100, description="Urgency (0-100)")

    @classmethod
    def from_domain(cls, task: Task, now: datetime) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            priority=task.priority.value,
            status=task.status.value,
            due_date=task.due_date,
            estimated_duration_minutes=task.estimated_duration_minutes,
            dependency_ids=list(task.dependency_ids),
            is_overdue=task.is_overdue(now),
            urgency_score=task.urgency_score(now),
        )


class PrioritizedTaskResponse(BaseModel):
    task: TaskResponse
    score: int = Field(..., ge=0, le=100, description="Weighted priority score")
    recommendation: str = Field(..., description="Recommendation band")
    factors: dict[str, int] = Field(..., description="Unweighted factor scores")

    @classmethod
    def from_domain(cls, prioritized: PrioritizedTask, now: datetime) -> "PrioritizedTaskResponse":
        return cls(
            task=TaskResponse.from_domain(prioritized.task, now),
            score=prioritized.score,
            recommendation=prioritized.recommendation,
            factors=prioritized.factors.to_dict(),
        )


class PrioritizationSummaryResponse(BaseModel):
    total_tasks: int
    critical_tasks: int = Field(..., description="Score 90+")
    high_priority_tasks: int = Field(..., description="Score 80-89")
    medium_priority_tasks: int = Field(..., description="Score 60-79")
    low_priority_tasks: int = Field(..., description="Score below 60")


class PrioritizationResultResponse(BaseModel):
    """Response for task prioritization."""

    prioritized_tasks: list[PrioritizedTaskResponse]
    summary: PrioritizationSummaryResponse
    recommendations: list[str]

    @classmethod
    def from_domain(
        cls, result: PrioritizationResult, now: datetime
    ) -> "PrioritizationResultResponse":
        summary = result.summary
        return cls(
            prioritized_tasks=[
                PrioritizedTaskResponse.from_domain(p, now) for p in result.prioritized_tasks
            ],
            summary=PrioritizationSummaryResponse(
                total_tasks=summary.total_tasks,
                critical_tasks=summary.critical_tasks,
                high_priority_tasks=summary.high_priority_tasks,
                medium_priority_tasks=summary.medium_priority_tasks,
                low_priority_tasks=summary.low_priority_tasks,
            ),
            recommendations=list(result.recommendations),
        )


class PriorityAdjustmentResponse(BaseModel):
    task_id: str | None = Field(None, description="Task ID")
    title: str = Field(..., description="Task title")
    current_priority: str = Field(..., description="Priority today")
    suggested_priority: str = Field(..., description="Recommended priority")
    reason: str = Field(..., description="Why the change is suggested")

    @classmethod
    def from_domain(cls, adjustment: PriorityAdjustment) -> "PriorityAdjustmentResponse":
        return cls(
            task_id=adjustment.task.id,
            title=adjustment.task.title,
            current_priority=adjustment.current_priority.value,
            suggested_priority=adjustment.suggested_priority.value,
            reason=adjustment.reason,
        )


class PriorityAdjustmentsResponse(BaseModel):
    adjustments: list[PriorityAdjustmentResponse]
    total_count: int = Field(..., description="Number of suggested changes")
