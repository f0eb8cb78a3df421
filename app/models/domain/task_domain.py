# app/models/domain/task_domain.py
"""
Task Domain Model
Read-only task snapshot handed to the prioritization engine, with the
derived overdue flag and urgency score evaluated against a supplied instant.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from app.models.domain.value_objects import (
    DomainValidationError,
    Priority,
    TaskStatus,
    ensure_aware,
)
from app.utils.clock import resolve_now

SECONDS_PER_DAY = 24 * 60 * 60

# Urgency bonuses by days until due (first matching threshold wins)
DUE_DATE_URGENCY_BONUSES = (
    (0, 50),  # overdue or due now
    (1, 30),
    (3, 15),
    (7, 5),
)
IN_PROGRESS_URGENCY_BONUS = 20


def days_until(due_date: datetime, now: datetime) -> int:
    """Whole days from now until due_date, rounded up (12 hours out -> 1)."""
    return math.ceil((due_date - now).total_seconds() / SECONDS_PER_DAY)


@dataclass(frozen=True, slots=True)
class Task:
    """Immutable task snapshot. Strings are accepted for priority and status."""

    title: str
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    due_date: datetime | None = None
    estimated_duration_minutes: int | None = None
    dependency_ids: tuple[str, ...] = ()
    completed_at: datetime | None = None
    id: str | None = None
    description: str | None = None
    tags: tuple[str, ...] = ()
    assignee: str | None = None
    created_at: datetime | None = None

    def __post_init__(self):
        object.__setattr__(self, "priority", Priority.parse(self.priority))
        object.__setattr__(self, "status", TaskStatus.parse(self.status))
        object.__setattr__(self, "dependency_ids", tuple(self.dependency_ids))
        object.__setattr__(self, "tags", tuple(self.tags))

        for name in ("due_date", "completed_at", "created_at"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, ensure_aware(value))

        if self.estimated_duration_minutes is not None and self.estimated_duration_minutes <= 0:
            raise DomainValidationError(
                "Estimated duration must be positive",
                field="estimated_duration_minutes",
                value=self.estimated_duration_minutes,
            )

    @property
    def dependency_count(self) -> int:
        return len(self.dependency_ids)

    def is_overdue(self, now: datetime | None = None) -> bool:
        """True iff there is a due date, the task is not completed and the due date has passed."""
        if self.due_date is None or self.status.is_completed:
            return False
        return self.due_date < resolve_now(now)

    def days_until_due(self, now: datetime | None = None) -> int | None:
        if self.due_date is None:
            return None
        return days_until(self.due_date, resolve_now(now))

    def urgency_score(self, now: datetime | None = None) -> int:
        """
        0-100 urgency derived from priority, due date proximity and status.

        Base is priority weight x 25. Incomplete tasks with a due date get a
        bonus by days until due; in-progress tasks get +20. Clamped to 0..100.
        """
        score = self.priority.weight * 25

        if self.due_date is not None and not self.status.is_completed:
            remaining = days_until(self.due_date, resolve_now(now))
            for threshold, bonus in DUE_DATE_URGENCY_BONUSES:
                if remaining <= threshold:
                    score += bonus
                    break

        if self.status is TaskStatus.IN_PROGRESS:
            score += IN_PROGRESS_URGENCY_BONUS

        return max(0, min(score, 100))

    def to_dict(self, now: datetime | None = None) -> dict:
        """Convert to dictionary for API responses, derived fields evaluated at `now`."""
        now = resolve_now(now)
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "priority": self.priority.value,
            "status": self.status.value,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "estimated_duration_minutes": self.estimated_duration_minutes,
            "dependency_ids": list(self.dependency_ids),
            "tags": list(self.tags),
            "assignee": self.assignee,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "is_overdue": self.is_overdue(now),
            "urgency_score": self.urgency_score(now),
        }
