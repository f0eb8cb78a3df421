from datetime import UTC, datetime, timedelta

from app.models.domain.meeting_domain import Meeting
from app.models.domain.value_objects import TimeRange
from app.services.scheduling.conflicts import collect_conflicting_meetings, find_conflicts

TUESDAY = datetime(2024, 1, 16, tzinfo=UTC)


def _at(hour: int, minute: int = 0) -> datetime:
    return TUESDAY.replace(hour=hour, minute=minute)


def _slot(hour: int, minute: int, length: int = 30) -> TimeRange:
    start = _at(hour, minute)
    return TimeRange(start, start + timedelta(minutes=length))


def _meeting(hour: int, minute: int, length: int = 30, status: str = "scheduled", **kw) -> Meeting:
    return Meeting(date_range=_slot(hour, minute, length), status=status, **kw)


def test_buffer_expands_candidate_into_existing_meeting():
    standup = _meeting(10, 0, id="standup")

    assert find_conflicts(_slot(10, 15), [standup], buffer_minutes=15) == [standup]
    assert find_conflicts(_slot(11, 0), [standup], buffer_minutes=15) == []


def test_buffer_edge_touching_is_not_a_conflict():
    standup = _meeting(10, 0)

    # 10:45 - 15 = 10:30, exactly when the standup ends
    assert find_conflicts(_slot(10, 45), [standup], buffer_minutes=15) == []
    assert find_conflicts(_slot(10, 45), [standup], buffer_minutes=16) == [standup]


def test_zero_buffer_uses_the_candidate_as_is():
    standup = _meeting(10, 0)

    assert find_conflicts(_slot(10, 30), [standup], buffer_minutes=0) == []
    assert find_conflicts(_slot(10, 29), [standup], buffer_minutes=0) == [standup]


def test_cancelled_and_completed_meetings_never_conflict():
    meetings = [
        _meeting(10, 0, status="cancelled"),
        _meeting(10, 0, status="completed"),
        _meeting(10, 0, status="in-progress", id="live"),
    ]

    conflicts = find_conflicts(_slot(10, 0), meetings, buffer_minutes=15)

    assert [m.id for m in conflicts] == ["live"]


def test_inputs_are_not_modified():
    meetings = [_meeting(10, 0), _meeting(13, 0)]
    snapshot = list(meetings)
    candidate = _slot(10, 0)

    find_conflicts(candidate, meetings, buffer_minutes=30)

    assert meetings == snapshot
    assert candidate == _slot(10, 0)


def test_union_is_deduplicated_in_first_seen_order():
    early = _meeting(9, 0, id="early")
    late = _meeting(15, 0, id="late")
    candidates = [_slot(15, 0), _slot(9, 0), _slot(9, 15), _slot(12, 0)]

    union = collect_conflicting_meetings(candidates, [early, late])

    assert [m.id for m in union] == ["late", "early"]
