"""
Conflict detector - which existing meetings collide with a candidate slot.
"""

from collections.abc import Iterable

from app.models.domain.meeting_domain import Meeting
from app.models.domain.value_objects import TimeRange


def find_conflicts(
    candidate: TimeRange, meetings: Iterable[Meeting], buffer_minutes: int = 0
) -> list[Meeting]:
    """
    Meetings overlapping the candidate widened by buffer_minutes on both sides.

    Cancelled and completed meetings never conflict. Input order is preserved.
    """
    proposed = candidate.expanded(max(buffer_minutes, 0))
    return [
        meeting
        for meeting in meetings
        if meeting.blocks_time and meeting.date_range.overlaps(proposed)
    ]


def collect_conflicting_meetings(
    candidates: Iterable[TimeRange], meetings: list[Meeting], buffer_minutes: int = 0
) -> list[Meeting]:
    """Union of meetings conflicting with any candidate, first-seen order, no duplicates."""
    seen: set[int] = set()
    union: list[Meeting] = []
    for candidate in candidates:
        for meeting in find_conflicts(candidate, meetings, buffer_minutes):
            if id(meeting) not in seen:
                seen.add(id(meeting))
                union.append(meeting)
    return union
