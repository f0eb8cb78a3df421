from datetime import datetime, timedelta

import pytest

from app.models.domain.task_domain import Task
from app.models.domain.value_objects import DomainValidationError, Priority, TaskStatus


def _build_task(**overrides) -> Task:
    fields = {
        "title": "Prepare quarterly report",
        "priority": Priority.MEDIUM,
        "status": TaskStatus.PENDING,
    }
    fields.update(overrides)
    return Task(**fields)


def test_urgent_task_due_in_twelve_hours_is_maximally_urgent(fixed_now):
    task = _build_task(priority="urgent", due_date=fixed_now + timedelta(hours=12))

    # 100 base + 30 for "due within a day", clamped
    assert task.urgency_score(fixed_now) == 100
    assert task.urgency_score(fixed_now) >= 80


@pytest.mark.parametrize(
    "priority,expected",
    [("low", 25), ("medium", 50), ("high", 75), ("urgent", 100)],
)
def test_base_urgency_follows_priority_weight(fixed_now, priority, expected):
    assert _build_task(priority=priority).urgency_score(fixed_now) == expected


@pytest.mark.parametrize(
    "offset,bonus",
    [
        (timedelta(days=-2), 50),
        (timedelta(0), 50),
        (timedelta(hours=12), 30),
        (timedelta(days=1), 30),
        (timedelta(days=1, seconds=1), 15),
        (timedelta(days=3), 15),
        (timedelta(days=6), 5),
        (timedelta(days=7), 5),
        (timedelta(days=8), 0),
    ],
)
def test_due_date_bonus_by_days_until_due(fixed_now, offset, bonus):
    task = _build_task(priority="low", due_date=fixed_now + offset)

    assert task.urgency_score(fixed_now) == 25 + bonus


def test_in_progress_adds_twenty(fixed_now):
    task = _build_task(
        priority="low", status="in-progress", due_date=fixed_now + timedelta(days=5)
    )

    assert task.urgency_score(fixed_now) == 25 + 5 + 20


def test_completed_task_gets_no_due_date_bonus(fixed_now):
    task = _build_task(status="completed", due_date=fixed_now - timedelta(days=3))

    assert task.urgency_score(fixed_now) == 50
    assert task.is_overdue(fixed_now) is False


def test_overdue_requires_due_date_strictly_in_the_past(fixed_now):
    assert _build_task(due_date=fixed_now - timedelta(seconds=1)).is_overdue(fixed_now)
    assert not _build_task(due_date=fixed_now).is_overdue(fixed_now)
    assert not _build_task().is_overdue(fixed_now)


def test_cancelled_overdue_task_still_counts_as_overdue(fixed_now):
    task = _build_task(status="cancelled", due_date=fixed_now - timedelta(days=1))

    assert task.is_overdue(fixed_now)


def test_urgency_is_reevaluated_against_the_supplied_instant(fixed_now):
    task = _build_task(priority="low", due_date=fixed_now + timedelta(days=10))

    assert task.urgency_score(fixed_now) == 25
    assert task.urgency_score(fixed_now + timedelta(days=9, hours=12)) == 55
    assert task.is_overdue(fixed_now + timedelta(days=11))


def test_naive_due_date_is_treated_as_utc(fixed_now):
    naive_due = datetime(2024, 1, 15, 18, 0)
    task = _build_task(priority="low", due_date=naive_due)

    assert task.due_date.tzinfo is not None
    assert task.urgency_score(fixed_now) == 55


def test_invalid_values_fail_construction():
    with pytest.raises(DomainValidationError, match="Invalid priority"):
        _build_task(priority="asap")
    with pytest.raises(DomainValidationError, match="Invalid status"):
        _build_task(status="blocked")
    with pytest.raises(DomainValidationError, match="Estimated duration must be positive"):
        _build_task(estimated_duration_minutes=0)


def test_to_dict_includes_derived_fields(fixed_now):
    task = _build_task(
        id="task-1",
        priority="high",
        due_date=fixed_now - timedelta(hours=1),
        dependency_ids=["task-0"],
    )

    data = task.to_dict(fixed_now)

    assert data["id"] == "task-1"
    assert data["priority"] == "high"
    assert data["dependency_ids"] == ["task-0"]
    assert data["is_overdue"] is True
    assert data["urgency_score"] == 100
