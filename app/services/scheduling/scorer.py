"""
Suggestion scorer - rates one candidate slot against scheduling heuristics.

Every slot starts at 100; rule adjustments are additive and independent of
each other, and the total is clamped to 0..100:

    conflicts            -20 per conflicting meeting
    preferred time       +20 when it overlaps one, -10 when none match
    time of day          +15 at 10-11h, +10 at 14-15h, -15 before 9h or after 16h
    day of week          +10 Tuesday-Thursday, -5 Monday or Friday
    meeting length       -10 over two hours, +5 for 30 minutes or less
"""

from __future__ import annotations

from datetime import tzinfo

from app.models.domain.meeting_domain import Meeting, SchedulingRequest, SchedulingSuggestion
from app.models.domain.value_objects import TimeRange

from .conflicts import find_conflicts

BASE_SCORE = 100
CONFLICT_PENALTY = 20
PREFERRED_TIME_BONUS = 20
PREFERRED_TIME_MISS_PENALTY = 10
LONG_MEETING_MINUTES = 120
SHORT_MEETING_MINUTES = 30

MONDAY, TUESDAY, THURSDAY, FRIDAY = 0, 1, 3, 4


class SuggestionScorer:
    """Scores candidate slots; stateless apart from the zone used for local hour/day rules."""

    def __init__(self, zone: tzinfo):
        self.zone = zone

    def score(
        self,
        candidate: TimeRange,
        request: SchedulingRequest,
        meetings: list[Meeting],
        buffer_minutes: int,
    ) -> SchedulingSuggestion:
        score = BASE_SCORE
        conflicts: list[str] = []
        reasons: list[str] = []

        conflicting = find_conflicts(candidate, meetings, buffer_minutes)
        if conflicting:
            score -= CONFLICT_PENALTY * len(conflicting)
            conflicts.append(f"{len(conflicting)} conflicting meeting(s)")

        score += self._preferred_time_adjustment(candidate, request, reasons)

        local_start = candidate.start.astimezone(self.zone)
        score += self._time_of_day_adjustment(local_start.hour, reasons)
        score += self._day_of_week_adjustment(local_start.weekday(), reasons)
        score += self._duration_adjustment(request.duration_minutes, reasons)

        return SchedulingSuggestion(
            time_slot=candidate,
            score=max(0, min(score, 100)),
            conflicts=tuple(conflicts),
            reasons=tuple(reasons),
            attendee_availability={attendee.email: "unknown" for attendee in request.attendees},
        )

    @staticmethod
    def _preferred_time_adjustment(
        candidate: TimeRange, request: SchedulingRequest, reasons: list[str]
    ) -> int:
        if not request.preferred_times:
            return 0
        if any(candidate.overlaps(preferred) for preferred in request.preferred_times):
            reasons.append("Matches preferred time")
            return PREFERRED_TIME_BONUS
        reasons.append("Outside preferred times")
        return -PREFERRED_TIME_MISS_PENALTY

    @staticmethod
    def _time_of_day_adjustment(hour: int, reasons: list[str]) -> int:
        if 10 <= hour <= 11:
            reasons.append("Optimal morning time")
            return 15
        if 14 <= hour <= 15:
            reasons.append("Good afternoon time")
            return 10
        if hour < 9 or hour > 16:
            reasons.append("Outside optimal hours")
            return -15
        return 0

    @staticmethod
    def _day_of_week_adjustment(weekday: int, reasons: list[str]) -> int:
        if TUESDAY <= weekday <= THURSDAY:
            reasons.append("Optimal day of week")
            return 10
        if weekday in (MONDAY, FRIDAY):
            reasons.append("Suboptimal day of week")
            return -5
        return 0

    @staticmethod
    def _duration_adjustment(duration_minutes: int, reasons: list[str]) -> int:
        if duration_minutes > LONG_MEETING_MINUTES:
            reasons.append("Long meeting duration")
            return -10
        if duration_minutes <= SHORT_MEETING_MINUTES:
            reasons.append("Short, focused meeting")
            return 5
        return 0
