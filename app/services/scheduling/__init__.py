"""
Meeting scheduling package.

Builds per-day availability windows, detects conflicts with existing
meetings and ranks candidate slots into scheduling suggestions.
"""

from .service import (
    MeetingSchedulingService,
    SchedulingServiceError,
    find_meeting_times,
    scheduling_service,
    validate_meeting_request,
)

__all__ = [
    "MeetingSchedulingService",
    "SchedulingServiceError",
    "find_meeting_times",
    "scheduling_service",
    "validate_meeting_request",
]
