# app/models/api/scheduling_request.py
"""
Scheduling API request models.
Used by routes for input shaping; business validation happens in the
scheduling service so problems come back as a readable list.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.domain.meeting_domain import Attendee, Meeting, SchedulingRequest
from app.models.domain.value_objects import TimeRange, WorkingHours


class TimeRangeModel(BaseModel):
    start: datetime = Field(..., description="Range start")
    end: datetime = Field(..., description="Range end (must be after start)")

    def to_domain(self) -> TimeRange:
        return TimeRange(self.start, self.end)


class AttendeeModel(BaseModel):
    email: str = Field(..., description="Attendee email address")
    name: str = Field(default="", description="Display name")
    is_required: bool = Field(default=True, description="Whether attendance is required")

    def to_domain(self) -> Attendee:
        return Attendee(email=self.email, name=self.name, is_required=self.is_required)


class WorkingHoursModel(BaseModel):
    start: str = Field(..., description="Start of the working day, HH:MM", examples=["09:00"])
    end: str = Field(..., description="End of the working day, HH:MM", examples=["17:00"])

    def to_domain(self) -> WorkingHours:
        return WorkingHours.from_strings(self.start, self.end)


class ExistingMeetingModel(BaseModel):
    id: str | None = Field(default=None, description="Meeting ID")
    title: str = Field(default="", description="Meeting title")
    start: datetime = Field(..., description="Meeting start")
    end: datetime = Field(..., description="Meeting end")
    status: str = Field(
        default="scheduled", description="scheduled, in-progress, completed or cancelled"
    )

    def to_domain(self) -> Meeting:
        return Meeting(
            date_range=TimeRange(self.start, self.end),
            status=self.status,
            id=self.id,
            title=self.title,
        )


class MeetingSchedulingRequest(BaseModel):
    """Request for ranked meeting time suggestions."""

    title: str = Field(..., max_length=200, description="Meeting title")
    duration_minutes: int = Field(..., description="Meeting length in minutes (1-480)")
    attendees: list[AttendeeModel] = Field(default_factory=list, description="Invitees")
    preferred_times: list[TimeRangeModel] = Field(
        default_factory=list, description="Preferred time ranges"
    )
    earliest_date: datetime | None = Field(default=None, description="Search period start")
    latest_date: datetime | None = Field(default=None, description="Search period end")
    working_hours: WorkingHoursModel | None = Field(
        default=None, description="Working hours (default 09:00-17:00)"
    )
    exclude_weekends: bool = Field(default=True, description="Skip Saturdays and Sundays")
    buffer_minutes: int | None = Field(
        default=None, description="Gap enforced around existing meetings (default 15)"
    )
    timezone: str | None = Field(default=None, description="IANA timezone for working hours")
    existing_meetings: list[ExistingMeetingModel] = Field(
        default_factory=list, description="Meetings already on the calendar"
    )

    def to_domain(self) -> SchedulingRequest:
        return SchedulingRequest(
            title=self.title,
            duration_minutes=self.duration_minutes,
            attendees=[a.to_domain() for a in self.attendees],
            preferred_times=[p.to_domain() for p in self.preferred_times],
            earliest_date=self.earliest_date,
            latest_date=self.latest_date,
            working_hours=self.working_hours.to_domain() if self.working_hours else None,
            exclude_weekends=self.exclude_weekends,
            buffer_minutes=self.buffer_minutes,
            timezone=self.timezone,
        )

    def meetings_to_domain(self) -> list[Meeting]:
        return [m.to_domain() for m in self.existing_meetings]
