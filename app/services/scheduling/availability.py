"""
Availability window builder - turns a search period and working-hours
policy into per-day fixed-size candidate slots.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from app.infrastructure.observability.logging import get_logger
from app.models.domain.meeting_domain import AvailabilityWindow
from app.models.domain.value_objects import TimeRange, WorkingHours

logger = get_logger(__name__)

SLOT_MINUTES = 30
SATURDAY = 5  # date.weekday(): Monday=0 .. Sunday=6


def is_weekend(moment) -> bool:
    return moment.weekday() >= SATURDAY


def generate_daily_slots(day, working_hours: WorkingHours, zone: tzinfo) -> list[TimeRange]:
    """Back-to-back SLOT_MINUTES slots from the start of working hours; a trailing partial slot is dropped."""
    day_start = datetime.combine(day, working_hours.start, tzinfo=zone)
    day_end = datetime.combine(day, working_hours.end, tzinfo=zone)
    step = timedelta(minutes=SLOT_MINUTES)

    slots = []
    current = day_start
    while current + step <= day_end:
        slots.append(TimeRange(current, current + step))
        current += step
    return slots


def build_availability_windows(
    search_start: datetime,
    search_end: datetime,
    working_hours: WorkingHours,
    exclude_weekends: bool,
    zone: tzinfo,
) -> list[AvailabilityWindow]:
    """
    One AvailabilityWindow per eligible calendar day.

    Days run from the local date of search_start through the local date of
    search_end inclusive, evaluated in `zone`. Weekends are skipped when
    exclude_weekends is set.
    """
    first_day = search_start.astimezone(zone).date()
    last_day = search_end.astimezone(zone).date()

    windows = []
    day = first_day
    while day <= last_day:
        if not (exclude_weekends and is_weekend(day)):
            windows.append(
                AvailabilityWindow(
                    date=day,
                    available_slots=tuple(generate_daily_slots(day, working_hours, zone)),
                )
            )
        day += timedelta(days=1)

    logger.debug(
        "Availability windows built",
        first_day=first_day.isoformat(),
        last_day=last_day.isoformat(),
        windows=len(windows),
        exclude_weekends=exclude_weekends,
    )
    return windows
