"""
Meeting scheduling service - walks the search window, scores every
candidate slot and returns ranked suggestions with conflict awareness.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import settings
from app.infrastructure.observability.logging import get_logger
from app.models.domain.meeting_domain import (
    MAX_BUFFER_MINUTES,
    MAX_MEETING_MINUTES,
    AvailabilityWindow,
    Meeting,
    SchedulingRequest,
    SchedulingResult,
    SchedulingSuggestion,
    SchedulingSummary,
)
from app.models.domain.value_objects import DomainValidationError, TimeRange, WorkingHours
from app.utils.clock import resolve_now

from .availability import SLOT_MINUTES, build_availability_windows
from .conflicts import collect_conflicting_meetings
from .scorer import SuggestionScorer

logger = get_logger(__name__)


class SchedulingServiceError(Exception):
    """Custom exception for unexpected scheduling failures."""

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code


def _zone_for(name: str) -> tzinfo:
    return ZoneInfo(name)


def validate_meeting_request(request: SchedulingRequest) -> list[str]:
    """Human-readable problems with a scheduling request; empty when it is usable. Never raises."""
    errors: list[str] = []

    if not (request.title or "").strip():
        errors.append("Meeting title is required")

    if request.duration_minutes <= 0:
        errors.append("Meeting duration must be positive")

    if request.duration_minutes > MAX_MEETING_MINUTES:
        errors.append("Meeting duration cannot exceed 8 hours")

    if not request.attendees:
        errors.append("At least one attendee is required")

    if (
        request.earliest_date is not None
        and request.latest_date is not None
        and request.earliest_date >= request.latest_date
    ):
        errors.append("Earliest date must be before latest date")

    if request.buffer_minutes is not None and request.buffer_minutes < 0:
        errors.append("Buffer minutes cannot be negative")

    if request.buffer_minutes is not None and request.buffer_minutes > MAX_BUFFER_MINUTES:
        errors.append("Buffer minutes cannot exceed 24 hours")

    if request.timezone:
        try:
            _zone_for(request.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"Unknown timezone: {request.timezone}")

    return errors


class MeetingSchedulingService:
    """
    Finds and ranks meeting slots for a SchedulingRequest.

    Pure over its inputs: existing meetings are read, never modified, and
    one "now" is used for the whole search.
    """

    MAX_SUGGESTIONS = 10
    OPTIMAL_SCORE = 80

    def __init__(
        self,
        default_working_hours: WorkingHours | None = None,
        default_buffer_minutes: int | None = None,
        default_timezone: str | None = None,
        lead_days: int | None = None,
        horizon_days: int | None = None,
    ):
        self.default_working_hours = default_working_hours or WorkingHours.from_dict(
            settings.default_working_hours()
        )
        self.default_buffer_minutes = (
            settings.SCHEDULING_BUFFER_MINUTES
            if default_buffer_minutes is None
            else default_buffer_minutes
        )
        self.default_timezone = default_timezone or settings.SCHEDULING_TIMEZONE
        self.lead_days = settings.SCHEDULING_LEAD_DAYS if lead_days is None else lead_days
        self.horizon_days = (
            settings.SCHEDULING_HORIZON_DAYS if horizon_days is None else horizon_days
        )

    def validate_meeting_request(self, request: SchedulingRequest) -> list[str]:
        return validate_meeting_request(request)

    def find_optimal_meeting_times(
        self,
        request: SchedulingRequest,
        existing_meetings: Iterable[Meeting],
        now: datetime | None = None,
    ) -> SchedulingResult:
        """
        Rank candidate slots for the request against a meeting snapshot.

        Args:
            request: What to schedule
            existing_meetings: Meetings already on the calendar
            now: Reference instant for the default search period (captured once)

        Returns:
            SchedulingResult with at most MAX_SUGGESTIONS suggestions, best first.
            An invalid request yields an empty result carrying the validation errors.
        """
        errors = validate_meeting_request(request)
        if errors:
            logger.warning("Scheduling request rejected", title=request.title, errors=errors)
            return SchedulingResult.empty(errors)

        now = resolve_now(now)
        meetings = list(existing_meetings)

        try:
            zone = _zone_for(request.timezone or self.default_timezone)
            working_hours = request.working_hours or self.default_working_hours
            buffer_minutes = (
                self.default_buffer_minutes
                if request.buffer_minutes is None
                else request.buffer_minutes
            )
            search_start, search_end = self.get_search_period(request, now)

            windows = build_availability_windows(
                search_start, search_end, working_hours, request.exclude_weekends, zone
            )
            suggestions = self.generate_suggestions(
                request, windows, meetings, buffer_minutes, SuggestionScorer(zone)
            )
        except DomainValidationError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error finding meeting times",
                title=request.title,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise SchedulingServiceError(
                f"Failed to find meeting times: {e}", error_code="scheduling_failed"
            ) from e

        conflicts = collect_conflicting_meetings(
            (suggestion.time_slot for suggestion in suggestions), meetings
        )
        best = self.select_best_suggestion(suggestions)
        summary = self.summarize(suggestions, conflicts)

        logger.info(
            "Meeting times found",
            title=request.title,
            windows=len(windows),
            suggestions=summary.total_suggestions,
            optimal_slots=summary.optimal_slots,
            conflict_count=summary.conflict_count,
            best_score=best.score if best else None,
        )

        return SchedulingResult(
            suggestions=tuple(suggestions),
            best_suggestion=best,
            conflicts=tuple(conflicts),
            summary=summary,
        )

    def get_search_period(
        self, request: SchedulingRequest, now: datetime
    ) -> tuple[datetime, datetime]:
        """Requested bounds, defaulting to [now + lead_days, now + horizon_days]."""
        start = request.earliest_date or now + timedelta(days=self.lead_days)
        end = request.latest_date or now + timedelta(days=self.horizon_days)
        return start, end

    def generate_suggestions(
        self,
        request: SchedulingRequest,
        windows: list[AvailabilityWindow],
        meetings: list[Meeting],
        buffer_minutes: int,
        scorer: SuggestionScorer,
    ) -> list[SchedulingSuggestion]:
        """Score every candidate in every window; best first, ties keep chronological order."""
        suggestions = [
            scorer.score(candidate, request, meetings, buffer_minutes)
            for window in windows
            for candidate in self.candidate_slots(window, request.duration_minutes)
        ]
        suggestions.sort(key=lambda s: s.score, reverse=True)
        return suggestions[: self.MAX_SUGGESTIONS]

    @staticmethod
    def candidate_slots(window: AvailabilityWindow, duration_minutes: int) -> list[TimeRange]:
        """Start a candidate at every slot that begins a run of back-to-back slots long enough for the meeting."""
        slots = window.available_slots
        needed = math.ceil(duration_minutes / SLOT_MINUTES)
        length = timedelta(minutes=duration_minutes)

        candidates = []
        for i in range(len(slots) - needed + 1):
            run = slots[i : i + needed]
            if all(a.end == b.start for a, b in zip(run, run[1:])):
                candidates.append(TimeRange(run[0].start, run[0].start + length))
        return candidates

    @staticmethod
    def select_best_suggestion(
        suggestions: list[SchedulingSuggestion],
    ) -> SchedulingSuggestion | None:
        """Highest-scoring conflict-free suggestion, else the highest-scoring overall."""
        if not suggestions:
            return None
        return next((s for s in suggestions if s.is_conflict_free), suggestions[0])

    def summarize(
        self, suggestions: list[SchedulingSuggestion], conflicts: list[Meeting]
    ) -> SchedulingSummary:
        optimal = sum(
            1 for s in suggestions if s.score >= self.OPTIMAL_SCORE and s.is_conflict_free
        )
        return SchedulingSummary(
            total_suggestions=len(suggestions),
            optimal_slots=optimal,
            suboptimal_slots=len(suggestions) - optimal,
            conflict_count=len(conflicts),
        )


scheduling_service = MeetingSchedulingService()


def find_meeting_times(
    request: SchedulingRequest,
    existing_meetings: Iterable[Meeting],
    now: datetime | None = None,
) -> SchedulingResult:
    return scheduling_service.find_optimal_meeting_times(request, existing_meetings, now)
