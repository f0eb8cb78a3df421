from datetime import UTC, datetime, time, timedelta

import pytest

from app.models.domain.meeting_domain import Meeting
from app.models.domain.value_objects import (
    DomainValidationError,
    MeetingStatus,
    Priority,
    TaskStatus,
    TimeRange,
    WorkingHours,
)

START = datetime(2024, 1, 16, 10, 0, tzinfo=UTC)


def test_priority_weights():
    assert [p.weight for p in Priority] == [1, 2, 3, 4]
    assert Priority.parse("urgent") is Priority.URGENT
    assert Priority.parse(Priority.LOW) is Priority.LOW


def test_unknown_priority_fails_with_accepted_values():
    with pytest.raises(DomainValidationError) as exc_info:
        Priority.parse("critical")

    assert "Invalid priority: critical" in str(exc_info.value)
    assert "low, medium, high, urgent" in str(exc_info.value)
    assert exc_info.value.field == "priority"


def test_unknown_status_fails():
    with pytest.raises(DomainValidationError, match="Invalid status"):
        TaskStatus.parse("done")


def test_task_status_flags():
    assert TaskStatus.COMPLETED.is_completed
    assert not TaskStatus.COMPLETED.is_active
    assert TaskStatus.IN_PROGRESS.is_active
    assert TaskStatus.PENDING.is_active
    assert not TaskStatus.CANCELLED.is_active
    assert not TaskStatus.CANCELLED.is_completed


def test_time_range_rejects_empty_or_inverted():
    with pytest.raises(DomainValidationError, match="Start date must be before end date"):
        TimeRange(START, START)
    with pytest.raises(DomainValidationError):
        TimeRange(START, START - timedelta(minutes=1))


def test_time_range_duration_and_equality():
    slot = TimeRange(START, START + timedelta(minutes=45))

    assert slot.duration_minutes == 45
    assert slot == TimeRange(START, START + timedelta(minutes=45))


def test_touching_ranges_do_not_overlap():
    first = TimeRange(START, START + timedelta(minutes=30))
    second = TimeRange(START + timedelta(minutes=30), START + timedelta(minutes=60))
    straddling = TimeRange(START + timedelta(minutes=29), START + timedelta(minutes=31))

    assert not first.overlaps(second)
    assert not second.overlaps(first)
    assert first.overlaps(straddling)
    assert second.overlaps(straddling)


def test_contains_is_inclusive_of_both_ends():
    slot = TimeRange(START, START + timedelta(minutes=30))

    assert slot.contains(START)
    assert slot.contains(START + timedelta(minutes=30))
    assert not slot.contains(START + timedelta(minutes=31))


def test_naive_datetimes_are_treated_as_utc():
    slot = TimeRange(datetime(2024, 1, 16, 10, 0), datetime(2024, 1, 16, 11, 0))

    assert slot.start == START
    assert slot.start.tzinfo is not None


def test_expanded_range_keeps_original_untouched():
    slot = TimeRange(START, START + timedelta(minutes=30))
    wider = slot.expanded(15)

    assert wider.start == START - timedelta(minutes=15)
    assert wider.end == START + timedelta(minutes=45)
    assert slot.duration_minutes == 30


def test_working_hours_parsing():
    hours = WorkingHours.from_strings("09:00", "17:30")

    assert hours.start == time(9, 0)
    assert hours.end == time(17, 30)
    assert hours.to_dict() == {"start": "09:00", "end": "17:30"}


@pytest.mark.parametrize("raw", ["9am", "25:00", "09:60", "", "0900"])
def test_working_hours_rejects_bad_clock_strings(raw):
    with pytest.raises(DomainValidationError, match="Expected HH:MM"):
        WorkingHours.from_strings(raw, "17:00")


def test_working_hours_must_start_before_end():
    with pytest.raises(DomainValidationError):
        WorkingHours.from_strings("17:00", "09:00")


def test_only_scheduled_and_running_meetings_block_time():
    slot = TimeRange(START, START + timedelta(minutes=30))

    assert Meeting(date_range=slot).blocks_time
    assert Meeting(date_range=slot, status="in-progress").blocks_time
    assert not Meeting(date_range=slot, status=MeetingStatus.CANCELLED).blocks_time
    assert not Meeting(date_range=slot, status="completed").blocks_time
