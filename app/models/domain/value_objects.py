# app/models/domain/value_objects.py
"""
Value Objects
Immutable Priority, TaskStatus, MeetingStatus, TimeRange and WorkingHours values.
Invalid data fails at construction with DomainValidationError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, time, timedelta
from enum import Enum
from typing import Any


class DomainValidationError(ValueError):
    """Raised when a value object is built from malformed caller data."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


def ensure_aware(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so comparisons never mix naive and aware."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


class _ClosedEnum(str, Enum):
    """String enum whose parse() rejects unknown values with a readable message."""

    @classmethod
    def parse(cls, raw: Any):
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise DomainValidationError(
                f"Invalid {cls._field_name()}: {raw}. Must be one of: {allowed}",
                field=cls._field_name(),
                value=raw,
            ) from None

    @classmethod
    def _field_name(cls) -> str:
        return "value"

    def __str__(self) -> str:
        return self.value


class Priority(_ClosedEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @classmethod
    def _field_name(cls) -> str:
        return "priority"

    @property
    def weight(self) -> int:
        """Numeric weight 1..4 used by the urgency calculator."""
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
    Priority.URGENT: 4,
}


class TaskStatus(_ClosedEnum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def _field_name(cls) -> str:
        return "status"

    @property
    def is_completed(self) -> bool:
        return self is TaskStatus.COMPLETED

    @property
    def is_active(self) -> bool:
        return self in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS)


class MeetingStatus(_ClosedEnum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def _field_name(cls) -> str:
        return "meeting status"

    @property
    def blocks_time(self) -> bool:
        """Only scheduled and running meetings can conflict with a new slot."""
        return self in (MeetingStatus.SCHEDULED, MeetingStatus.IN_PROGRESS)


@dataclass(frozen=True, slots=True)
class TimeRange:
    """Half-open [start, end) interval; start must be strictly before end."""

    start: datetime
    end: datetime

    def __post_init__(self):
        start = ensure_aware(self.start)
        end = ensure_aware(self.end)
        if start >= end:
            raise DomainValidationError(
                "Start date must be before end date",
                field="time_range",
                value=(self.start, self.end),
            )
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @property
    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)

    def overlaps(self, other: TimeRange) -> bool:
        """Touching ranges (one ends exactly when the other starts) do not overlap."""
        return self.start < other.end and self.end > other.start

    def contains(self, moment: datetime) -> bool:
        moment = ensure_aware(moment)
        return self.start <= moment <= self.end

    def expanded(self, minutes: int) -> TimeRange:
        """New range widened by `minutes` on both sides."""
        margin = timedelta(minutes=minutes)
        return TimeRange(self.start - margin, self.end + margin)


_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_clock_time(raw: str, field: str = "working_hours") -> time:
    """Parse an 'HH:MM' string into a time."""
    match = _HHMM.match(raw.strip()) if isinstance(raw, str) else None
    if not match:
        raise DomainValidationError(
            f"Invalid time '{raw}'. Expected HH:MM (24-hour)", field=field, value=raw
        )
    return time(int(match.group(1)), int(match.group(2)))


@dataclass(frozen=True, slots=True)
class WorkingHours:
    """Daily working-hours policy, e.g. 09:00 to 17:00."""

    start: time
    end: time

    def __post_init__(self):
        if self.start >= self.end:
            raise DomainValidationError(
                "Working hours must start before they end",
                field="working_hours",
                value=(self.start, self.end),
            )

    @classmethod
    def from_strings(cls, start: str, end: str) -> WorkingHours:
        return cls(
            parse_clock_time(start, "working_hours.start"),
            parse_clock_time(end, "working_hours.end"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> WorkingHours:
        return cls.from_strings(data["start"], data["end"])

    def to_dict(self) -> dict:
        return {"start": self.start.strftime("%H:%M"), "end": self.end.strftime("%H:%M")}
