"""
Task prioritization package.

Provides the weighted multi-factor task ranking service and the priority
adjustment advisor.
"""

from .service import (
    TaskPrioritizationService,
    prioritization_service,
    prioritize_tasks,
    recommendation_for,
    suggest_priority_adjustments,
)

__all__ = [
    "TaskPrioritizationService",
    "prioritization_service",
    "prioritize_tasks",
    "recommendation_for",
    "suggest_priority_adjustments",
]
