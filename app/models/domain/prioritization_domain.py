# app/models/domain/prioritization_domain.py
"""
Prioritization Domain Models
Criteria weights and ranked results produced by the prioritization service.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from app.config import settings
from app.models.domain.task_domain import Task
from app.models.domain.value_objects import DomainValidationError, Priority


@dataclass(frozen=True, slots=True)
class PrioritizationCriteria:
    """Factor weights. They are not required to sum to 1; the final score is clamped."""

    due_date_weight: float = 0.30
    priority_weight: float = 0.25
    status_weight: float = 0.20
    dependency_weight: float = 0.15
    estimated_duration_weight: float = 0.10

    def __post_init__(self):
        for f in fields(self):
            weight = getattr(self, f.name)
            if not math.isfinite(weight) or weight < 0:
                raise DomainValidationError(
                    f"Invalid {f.name}: {weight}. Must be a finite number >= 0",
                    field=f.name,
                    value=weight,
                )

    @classmethod
    def from_settings(cls) -> PrioritizationCriteria:
        return cls(**settings.default_criteria_weights())

    def merged(self, overrides: dict[str, float | None] | None) -> PrioritizationCriteria:
        """Return a copy with the given weights replaced; None or unknown keys are ignored."""
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if k in known and v is not None})
        return PrioritizationCriteria(**values)


@dataclass(frozen=True, slots=True)
class FactorScores:
    """Unweighted 0-100 component scores, kept for explainability."""

    due_date: int
    priority: int
    status: int
    dependencies: int
    estimated_duration: int

    def weighted_total(self, criteria: PrioritizationCriteria) -> float:
        return (
            self.due_date * criteria.due_date_weight
            + self.priority * criteria.priority_weight
            + self.status * criteria.status_weight
            + self.dependencies * criteria.dependency_weight
            + self.estimated_duration * criteria.estimated_duration_weight
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "due_date": self.due_date,
            "priority": self.priority,
            "status": self.status,
            "dependencies": self.dependencies,
            "estimated_duration": self.estimated_duration,
        }


@dataclass(frozen=True, slots=True)
class PrioritizedTask:
    task: Task
    score: int
    recommendation: str
    factors: FactorScores


@dataclass(frozen=True, slots=True)
class PrioritizationSummary:
    total_tasks: int
    critical_tasks: int
    high_priority_tasks: int
    medium_priority_tasks: int
    low_priority_tasks: int


@dataclass(frozen=True, slots=True)
class PrioritizationResult:
    prioritized_tasks: tuple[PrioritizedTask, ...]
    summary: PrioritizationSummary
    recommendations: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PriorityAdjustment:
    task: Task
    current_priority: Priority
    suggested_priority: Priority
    reason: str
