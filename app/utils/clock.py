"""
Clock helpers.
Engine entry points capture "now" once per call so every slot and task in
that call is evaluated against the same instant.
"""

from datetime import UTC, datetime

from app.models.domain.value_objects import ensure_aware


def utc_now() -> datetime:
    return datetime.now(UTC)


def resolve_now(now: datetime | None) -> datetime:
    """Return the caller's instant (naive treated as UTC) or the current UTC time."""
    if now is None:
        return utc_now()
    return ensure_aware(now)
