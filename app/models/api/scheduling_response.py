# app/models/api/scheduling_response.py
"""
Scheduling API response models.
Used by routes for output formatting.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.domain.meeting_domain import Meeting, SchedulingResult, SchedulingSuggestion


class SuggestionResponse(BaseModel):
    """One ranked candidate slot."""

    start: datetime = Field(..., description="Slot start")
    end: datetime = Field(..., description="Slot end")
    duration_minutes: int = Field(..., description="Slot length")
    score: int = Field(..., ge=0, le=100, description="Slot score (0-100)")
    conflicts: list[str] = Field(default_factory=list, description="Conflict notes")
    reasons: list[str] = Field(default_factory=list, description="Scoring rationale")
    attendee_availability: dict[str, str] = Field(
        default_factory=dict, description="Attendee email to availability"
    )

    @classmethod
    def from_domain(cls, suggestion: SchedulingSuggestion) -> "SuggestionResponse":
        slot = suggestion.time_slot
        return cls(
            start=slot.start,
            end=slot.end,
            duration_minutes=slot.duration_minutes,
            score=suggestion.score,
            conflicts=list(suggestion.conflicts),
            reasons=list(suggestion.reasons),
            attendee_availability=dict(suggestion.attendee_availability),
        )


class ConflictingMeetingResponse(BaseModel):
    id: str | None = Field(None, description="Meeting ID")
    title: str = Field(default="", description="Meeting title")
    start: datetime = Field(..., description="Meeting start")
    end: datetime = Field(..., description="Meeting end")
    status: str = Field(..., description="Meeting status")

    @classmethod
    def from_domain(cls, meeting: Meeting) -> "ConflictingMeetingResponse":
        return cls(
            id=meeting.id,
            title=meeting.title,
            start=meeting.date_range.start,
            end=meeting.date_range.end,
            status=meeting.status.value,
        )


class SchedulingSummaryResponse(BaseModel):
    total_suggestions: int = Field(..., description="Number of suggestions returned")
    optimal_slots: int = Field(..., description="Conflict-free suggestions scoring 80+")
    suboptimal_slots: int = Field(..., description="All other suggestions")
    conflict_count: int = Field(..., description="Distinct meetings overlapping any suggestion")


class SchedulingResultResponse(BaseModel):
    """Response for a meeting time search."""

    suggestions: list[SuggestionResponse] = Field(..., description="Top suggestions, best first")
    best_suggestion: SuggestionResponse | None = Field(
        None, description="Best conflict-free suggestion, else best overall"
    )
    conflicts: list[ConflictingMeetingResponse] = Field(
        ..., description="Meetings conflicting with any suggestion"
    )
    summary: SchedulingSummaryResponse

    @classmethod
    def from_domain(cls, result: SchedulingResult) -> "SchedulingResultResponse":
        return cls(
            suggestions=[SuggestionResponse.from_domain(s) for s in result.suggestions],
            best_suggestion=(
                SuggestionResponse.from_domain(result.best_suggestion)
                if result.best_suggestion
                else None
            ),
            conflicts=[ConflictingMeetingResponse.from_domain(m) for m in result.conflicts],
            summary=SchedulingSummaryResponse(
                total_suggestions=result.summary.total_suggestions,
                optimal_slots=result.summary.optimal_slots,
                suboptimal_slots=result.summary.suboptimal_slots,
                conflict_count=result.summary.conflict_count,
            ),
        )


class RequestValidationResponse(BaseModel):
    valid: bool = Field(..., description="Whether the request can be scheduled")
    errors: list[str] = Field(default_factory=list, description="Validation problems")
