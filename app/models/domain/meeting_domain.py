# app/models/domain/meeting_domain.py
"""
Meeting Scheduling Domain Models
Snapshots and results exchanged with the scheduling service.
Used by services for internal processing and by routes for conversion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from app.models.domain.value_objects import (
    MeetingStatus,
    TimeRange,
    WorkingHours,
    ensure_aware,
)

MAX_MEETING_MINUTES = 480
MAX_BUFFER_MINUTES = 24 * 60


@dataclass(frozen=True, slots=True)
class Attendee:
    email: str
    name: str = ""
    is_required: bool = True


@dataclass(frozen=True, slots=True)
class Meeting:
    """Existing meeting used for conflict checks; only date_range and status matter."""

    date_range: TimeRange
    status: MeetingStatus = MeetingStatus.SCHEDULED
    id: str | None = None
    title: str = ""
    attendees: tuple[Attendee, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "status", MeetingStatus.parse(self.status))
        object.__setattr__(self, "attendees", tuple(self.attendees))

    @property
    def blocks_time(self) -> bool:
        return self.status.blocks_time


@dataclass(frozen=True, slots=True)
class SchedulingRequest:
    """
    A request to find meeting times.

    Not validated on construction: validate_meeting_request() reports
    problems as strings so callers decide whether to proceed.
    buffer_minutes / working_hours / timezone of None mean "service default".
    """

    title: str
    duration_minutes: int
    attendees: tuple[Attendee, ...] = ()
    preferred_times: tuple[TimeRange, ...] = ()
    earliest_date: datetime | None = None
    latest_date: datetime | None = None
    working_hours: WorkingHours | None = None
    exclude_weekends: bool = True
    buffer_minutes: int | None = None
    timezone: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "attendees", tuple(self.attendees))
        object.__setattr__(self, "preferred_times", tuple(self.preferred_times))
        for name in ("earliest_date", "latest_date"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, ensure_aware(value))


@dataclass(frozen=True, slots=True)
class AvailabilityWindow:
    """One calendar day's candidate slots within working hours."""

    date: date
    available_slots: tuple[TimeRange, ...]
    conflicting_meetings: tuple[Meeting, ...] = ()


@dataclass(frozen=True, slots=True)
class SchedulingSuggestion:
    time_slot: TimeRange
    score: int
    conflicts: tuple[str, ...] = ()
    reasons: tuple[str, ...] = ()
    attendee_availability: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    @property
    def is_conflict_free(self) -> bool:
        return not self.conflicts


@dataclass(frozen=True, slots=True)
class SchedulingSummary:
    total_suggestions: int
    optimal_slots: int
    suboptimal_slots: int
    conflict_count: int


@dataclass(frozen=True, slots=True)
class SchedulingResult:
    suggestions: tuple[SchedulingSuggestion, ...]
    best_suggestion: SchedulingSuggestion | None
    conflicts: tuple[Meeting, ...]
    summary: SchedulingSummary
    validation_errors: tuple[str, ...] = ()

    @classmethod
    def empty(cls, validation_errors: list[str] | None = None) -> SchedulingResult:
        return cls(
            suggestions=(),
            best_suggestion=None,
            conflicts=(),
            summary=SchedulingSummary(0, 0, 0, 0),
            validation_errors=tuple(validation_errors or ()),
        )
