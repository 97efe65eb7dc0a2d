"""Attendance configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class AttendanceConfig(BaseSettings):
    """Attendance configuration loaded from environment variables.

    Settings are read from LANPARTY_* environment variables with sensible
    defaults. For local development, create a .env file in the project root.
    """

    # Events
    max_event_duration_days: int = Field(
        default=14,
        ge=1,
        description="Longest event, in days, searched when locating buckets",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "LANPARTY_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: AttendanceConfig | None = None


def get_config() -> AttendanceConfig:
    """Get the attendance configuration singleton.

    Returns:
        AttendanceConfig: Attendance configuration instance
    """
    global _config
    if _config is None:
        _config = AttendanceConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads it."""
    global _config
    _config = None
