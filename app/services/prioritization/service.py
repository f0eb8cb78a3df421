"""
Task prioritization service - weighted multi-factor scoring, ranking,
recommendation bands and priority adjustment advice.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import datetime

from app.infrastructure.observability.logging import get_logger
from app.models.domain.prioritization_domain import (
    FactorScores,
    PrioritizationCriteria,
    PrioritizationResult,
    PrioritizationSummary,
    PrioritizedTask,
    PriorityAdjustment,
)
from app.models.domain.task_domain import Task
from app.models.domain.value_objects import Priority, TaskStatus
from app.utils.clock import resolve_now

logger = get_logger(__name__)

CRITICAL_THRESHOLD = 90
HIGH_THRESHOLD = 80
MEDIUM_THRESHOLD = 60
LOW_THRESHOLD = 40

RECOMMENDATION_BANDS = (
    (CRITICAL_THRESHOLD, "Critical – handle immediately"),
    (HIGH_THRESHOLD, "High – schedule today"),
    (MEDIUM_THRESHOLD, "Medium – schedule this week"),
    (LOW_THRESHOLD, "Low – schedule when convenient"),
)
DEFER_RECOMMENDATION = "Defer – consider delegating or postponing"

NO_DUE_DATE_SCORE = 20
# (max days until due, score); anything later scores 10
DUE_DATE_SCORES = ((0, 90), (1, 80), (3, 70), (7, 50), (14, 30), (30, 20))

PRIORITY_SCORES = {
    Priority.URGENT: 100,
    Priority.HIGH: 75,
    Priority.MEDIUM: 50,
    Priority.LOW: 25,
}

STATUS_SCORES = {
    TaskStatus.IN_PROGRESS: 80,
    TaskStatus.PENDING: 60,
    TaskStatus.COMPLETED: 0,
    TaskStatus.CANCELLED: 0,
}

NO_DURATION_SCORE = 50
# (max minutes, score); anything longer scores 30
DURATION_SCORES = ((30, 80), (60, 70), (120, 60), (240, 50), (480, 40))

IN_PROGRESS_SATURATION = 3
HIGH_PRIORITY_SATURATION = 5


def recommendation_for(score: int) -> str:
    for threshold, label in RECOMMENDATION_BANDS:
        if score >= threshold:
            return label
    return DEFER_RECOMMENDATION


class TaskPrioritizationService:
    """Ranks tasks by a weighted blend of five 0-100 factor scores."""

    def __init__(self, default_criteria: PrioritizationCriteria | None = None):
        self.default_criteria = default_criteria or PrioritizationCriteria.from_settings()

    def prioritize_tasks(
        self,
        tasks: Iterable[Task],
        criteria: PrioritizationCriteria | Mapping[str, float | None] | None = None,
        now: datetime | None = None,
    ) -> PrioritizationResult:
        """
        Score, rank and summarize a task snapshot.

        Args:
            tasks: Tasks to rank (not modified)
            criteria: Full criteria, or a partial mapping of weight overrides
            now: Reference instant, captured once for the whole call

        Returns:
            PrioritizationResult sorted by score descending; equal scores keep input order
        """
        now = resolve_now(now)
        final_criteria = self._resolve_criteria(criteria)

        scored = [self.score_task(task, final_criteria, now) for task in tasks]
        scored.sort(key=lambda p: p.score, reverse=True)

        summary = self.summarize(scored)
        recommendations = self.generate_recommendations(scored, now)

        logger.info(
            "Tasks prioritized",
            total_tasks=summary.total_tasks,
            critical=summary.critical_tasks,
            high=summary.high_priority_tasks,
            medium=summary.medium_priority_tasks,
            low=summary.low_priority_tasks,
        )

        return PrioritizationResult(
            prioritized_tasks=tuple(scored),
            summary=summary,
            recommendations=tuple(recommendations),
        )

    def _resolve_criteria(
        self, criteria: PrioritizationCriteria | Mapping[str, float | None] | None
    ) -> PrioritizationCriteria:
        if criteria is None:
            return self.default_criteria
        if isinstance(criteria, PrioritizationCriteria):
            return criteria
        return self.default_criteria.merged(dict(criteria))

    def score_task(
        self, task: Task, criteria: PrioritizationCriteria, now: datetime
    ) -> PrioritizedTask:
        factors = FactorScores(
            due_date=self.due_date_factor(task, now),
            priority=PRIORITY_SCORES[task.priority],
            status=STATUS_SCORES[task.status],
            dependencies=self.dependency_factor(task),
            estimated_duration=self.duration_factor(task),
        )
        # Clamp, then round half-up: weights need not sum to 1
        total = min(max(factors.weighted_total(criteria), 0.0), 100.0)
        score = math.floor(total + 0.5)

        logger.debug("Task scored", task_id=task.id, score=score, factors=factors.to_dict())

        return PrioritizedTask(
            task=task,
            score=score,
            recommendation=recommendation_for(score),
            factors=factors,
        )

    @staticmethod
    def due_date_factor(task: Task, now: datetime) -> int:
        days = task.days_until_due(now)
        if days is None:
            return NO_DUE_DATE_SCORE
        if days < 0:
            return 100
        for max_days, score in DUE_DATE_SCORES:
            if days <= max_days:
                return score
        return 10

    @staticmethod
    def dependency_factor(task: Task) -> int:
        """Unblocked tasks can start now; each dependency costs 10, floor 20."""
        if not task.dependency_ids:
            return 80
        return max(80 - 10 * task.dependency_count, 20)

    @staticmethod
    def duration_factor(task: Task) -> int:
        """Quick wins score higher."""
        minutes = task.estimated_duration_minutes
        if not minutes:
            return NO_DURATION_SCORE
        for max_minutes, score in DURATION_SCORES:
            if minutes <= max_minutes:
                return score
        return 30

    @staticmethod
    def summarize(prioritized: list[PrioritizedTask]) -> PrioritizationSummary:
        scores = [p.score for p in prioritized]
        return PrioritizationSummary(
            total_tasks=len(scores),
            critical_tasks=sum(1 for s in scores if s >= CRITICAL_THRESHOLD),
            high_priority_tasks=sum(1 for s in scores if HIGH_THRESHOLD <= s < CRITICAL_THRESHOLD),
            medium_priority_tasks=sum(1 for s in scores if MEDIUM_THRESHOLD <= s < HIGH_THRESHOLD),
            low_priority_tasks=sum(1 for s in scores if s < MEDIUM_THRESHOLD),
        )

    @staticmethod
    def generate_recommendations(prioritized: list[PrioritizedTask], now: datetime) -> list[str]:
        recommendations: list[str] = []
        tasks = [p.task for p in prioritized]

        critical = sum(1 for p in prioritized if p.score >= CRITICAL_THRESHOLD)
        if critical:
            recommendations.append(f"Focus on {critical} critical task(s) first")

        overdue = sum(1 for t in tasks if t.is_overdue(now))
        if overdue:
            recommendations.append(f"{overdue} task(s) are overdue and need immediate attention")

        in_progress = sum(1 for t in tasks if t.status is TaskStatus.IN_PROGRESS)
        if in_progress > IN_PROGRESS_SATURATION:
            recommendations.append(
                "Consider focusing on completing in-progress tasks before starting new ones"
            )

        high_priority = sum(1 for t in tasks if t.priority in (Priority.URGENT, Priority.HIGH))
        if high_priority > HIGH_PRIORITY_SATURATION:
            recommendations.append(
                "High number of urgent/high priority tasks - consider delegating some tasks"
            )

        without_due_date = sum(1 for t in tasks if t.due_date is None)
        if without_due_date:
            recommendations.append(
                f"{without_due_date} task(s) don't have due dates - consider setting deadlines"
            )

        if not recommendations:
            recommendations.append(
                "Task priorities are well balanced. Continue with current schedule."
            )
        return recommendations

    def suggest_priority_adjustments(
        self, tasks: Iterable[Task], now: datetime | None = None
    ) -> list[PriorityAdjustment]:
        """
        Compare each task's urgency score with its priority and propose a change.

        Upgrades: urgency >= 80 to urgent, >= 60 low to medium, >= 75 medium to high.
        Downgrades are checked afterwards and win: urgency < 30 urgent/high to
        medium, < 20 medium to low. Tasks needing no change are left out.
        """
        now = resolve_now(now)
        tasks = list(tasks)
        adjustments: list[PriorityAdjustment] = []

        for task in tasks:
            urgency = task.urgency_score(now)
            current = task.priority
            suggested: Priority | None = None
            reason = ""

            if urgency >= 80 and current is not Priority.URGENT:
                suggested = Priority.URGENT
                reason = (
                    "Task is overdue"
                    if task.is_overdue(now)
                    else "Task has high urgency score due to approaching deadline"
                )
            elif urgency >= 60 and current is Priority.LOW:
                suggested = Priority.MEDIUM
                reason = "Task urgency has increased"
            elif urgency >= 75 and current is Priority.MEDIUM:
                suggested = Priority.HIGH
                reason = "Task urgency has increased significantly"

            if urgency < 30 and current in (Priority.URGENT, Priority.HIGH):
                suggested = Priority.MEDIUM
                reason = "Task urgency has decreased"
            elif urgency < 20 and current is Priority.MEDIUM:
                suggested = Priority.LOW
                reason = "Task has low urgency and can be deprioritized"

            if suggested is not None and suggested is not current:
                adjustments.append(
                    PriorityAdjustment(
                        task=task,
                        current_priority=current,
                        suggested_priority=suggested,
                        reason=reason,
                    )
                )

        logger.info(
            "Priority adjustments evaluated", tasks_checked=len(tasks), suggested=len(adjustments)
        )
        return adjustments


prioritization_service = TaskPrioritizationService()


def prioritize_tasks(
    tasks: Iterable[Task],
    criteria: PrioritizationCriteria | Mapping[str, float | None] | None = None,
    now: datetime | None = None,
) -> PrioritizationResult:
    return prioritization_service.prioritize_tasks(tasks, criteria, now)


def suggest_priority_adjustments(
    tasks: Iterable[Task], now: datetime | None = None
) -> list[PriorityAdjustment]:
    return prioritization_service.suggest_priority_adjustments(tasks, now)
