"""
Shared route dependencies.
"""

from datetime import datetime

from app.utils.clock import utc_now


def get_now() -> datetime:
    """Reference instant for one request; tests override this dependency."""
    return utc_now()
