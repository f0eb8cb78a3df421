from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PATH = Path(__file__).resolve().parent.parent / ".env.local"


class Settings(BaseSettings):
    # Environment settings
    environment: str = "development"
    debug: bool = False
    LOG_LEVEL: str = "INFO"

    # =================================================================
    # SCHEDULING DEFAULTS - used when a request leaves them out
    # =================================================================
    SCHEDULING_WORKDAY_START: str = "09:00"
    SCHEDULING_WORKDAY_END: str = "17:00"
    SCHEDULING_BUFFER_MINUTES: int = 15
    SCHEDULING_LEAD_DAYS: int = 1  # search starts tomorrow
    SCHEDULING_HORIZON_DAYS: int = 14  # and runs two weeks out
    SCHEDULING_TIMEZONE: str = "UTC"

    # =================================================================
    # PRIORITIZATION WEIGHTS - not normalized, the score is clamped instead
    # =================================================================
    PRIORITIZATION_DUE_DATE_WEIGHT: float = 0.30
    PRIORITIZATION_PRIORITY_WEIGHT: float = 0.25
    PRIORITIZATION_STATUS_WEIGHT: float = 0.20
    PRIORITIZATION_DEPENDENCY_WEIGHT: float = 0.15
    PRIORITIZATION_DURATION_WEIGHT: float = 0.10

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def default_working_hours(self) -> dict[str, str]:
        """Working hours applied when a scheduling request has none."""
        return {"start": self.SCHEDULING_WORKDAY_START, "end": self.SCHEDULING_WORKDAY_END}

    def default_criteria_weights(self) -> dict[str, float]:
        """
        Get the default prioritization weights keyed by criteria field name.
        Adjust environment-specific overrides through PRIORITIZATION_* env vars.
        """
        return {
            "due_date_weight": self.PRIORITIZATION_DUE_DATE_WEIGHT,
            "priority_weight": self.PRIORITIZATION_PRIORITY_WEIGHT,
            "status_weight": self.PRIORITIZATION_STATUS_WEIGHT,
            "dependency_weight": self.PRIORITIZATION_DEPENDENCY_WEIGHT,
            "estimated_duration_weight": self.PRIORITIZATION_DURATION_WEIGHT,
        }


settings = Settings()

# =================================================================
# QUICK CONFIGURATION REFERENCE
# =================================================================
"""
To change scheduling behaviour, set env vars (or .env.local):

LONGER WORKDAY:
    SCHEDULING_WORKDAY_START=08:00
    SCHEDULING_WORKDAY_END=18:00

NO MEETING GAPS:
    SCHEDULING_BUFFER_MINUTES=0

DEADLINE-HEAVY PRIORITIZATION:
    PRIORITIZATION_DUE_DATE_WEIGHT=0.45
    PRIORITIZATION_DURATION_WEIGHT=0.05
"""
