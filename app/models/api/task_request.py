# app/models/api/task_request.py
"""
Task API request models.
Used by routes for input validation.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.domain.task_domain import Task


class TaskModel(BaseModel):
    """Task snapshot as supplied by the caller."""

    id: str | None = Field(default=None, description="Task ID")
    title: str = Field(..., min_length=1, max_length=200, description="Task title")
    description: str | None = Field(default=None, max_length=2000, description="Task description")
    priority: str = Field(default="medium", description="low, medium, high or urgent")
    status: str = Field(default="pending", description="pending, in-progress, completed or cancelled")
    due_date: datetime | None = Field(default=None, description="Due date")
    estimated_duration_minutes: int | None = Field(
        default=None, gt=0, description="Estimated effort in minutes"
    )
    dependency_ids: list[str] = Field(default_factory=list, description="IDs of blocking tasks")
    tags: list[str] = Field(default_factory=list, description="Task tags")
    assignee: str | None = Field(default=None, description="Assignee email")
    completed_at: datetime | None = Field(default=None, description="Completion time")

    def to_domain(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            priority=self.priority,
            status=self.status,
            due_date=self.due_date,
            estimated_duration_minutes=self.estimated_duration_minutes,
            dependency_ids=tuple(self.dependency_ids),
            tags=tuple(self.tags),
            assignee=self.assignee,
            completed_at=self.completed_at,
        )


class CriteriaModel(BaseModel):
    """Partial prioritization weights; omitted weights use the configured defaults."""

    due_date_weight: float | None = Field(
        default=None, ge=0, allow_inf_nan=False, description="Due date weight"
    )
    priority_weight: float | None = Field(
        default=None, ge=0, allow_inf_nan=False, description="Priority weight"
    )
    status_weight: float | None = Field(
        default=None, ge=0, allow_inf_nan=False, description="Status weight"
    )
    dependency_weight: float | None = Field(
        default=None, ge=0, allow_inf_nan=False, description="Dependency weight"
    )
    estimated_duration_weight: float | None = Field(
        default=None, ge=0, allow_inf_nan=False, description="Estimated duration weight"
    )


class PrioritizeTasksRequest(BaseModel):
    """Request for ranking a task list."""

    tasks: list[TaskModel] = Field(..., description="Tasks to rank")
    criteria: CriteriaModel | None = Field(default=None, description="Weight overrides")

    def tasks_to_domain(self) -> list[Task]:
        return [t.to_domain() for t in self.tasks]

    def criteria_overrides(self) -> dict[str, float] | None:
        if self.criteria is None:
            return None
        return self.criteria.model_dump(exclude_none=True)


class PriorityAdjustmentsRequest(BaseModel):
    """Request for priority change advice."""

    tasks: list[TaskModel] = Field(..., description="Tasks to check")

    def tasks_to_domain(self) -> list[Task]:
        return [t.to_domain() for t in self.tasks]
