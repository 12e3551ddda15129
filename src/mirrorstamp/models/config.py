"""Configuration data models for MirrorStamp."""

from datetime import timedelta
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from mirrorstamp.models.repository import RepositoryStatus

# Statuses accepted as the primary transition. "pending" is only ever stamped
# as a side effect of a schedule offset.
REQUESTABLE_STATUSES: tuple[RepositoryStatus, ...] = (
    RepositoryStatus.SYNCING,
    RepositoryStatus.SUCCESS,
    RepositoryStatus.FAILED,
)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_level: Literal["INFO", "DEBUG", "WARNING", "ERROR"] = "WARNING"


class StampingConfig(BaseModel):
    """Timestamp rendering configuration."""

    # Render stamps in UTC ("Z") instead of the local offset
    utc: bool = False


class AppConfig(BaseModel):
    """Application configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    stamping: StampingConfig = Field(default_factory=StampingConfig)


class TransitionRequest(BaseModel):
    """A single status transition, built once at the command line boundary."""

    status: RepositoryStatus
    name: str = Field(..., min_length=1)
    size: int = Field(0, description="Size override in bytes, 0 keeps the current size")
    schedule: timedelta = Field(timedelta(0), description="Offset of the next scheduled sync, 0 leaves it untouched")

    @field_validator("status")
    @classmethod
    def requestable_status(cls, v: RepositoryStatus) -> RepositoryStatus:
        if v not in REQUESTABLE_STATUSES:
            raise ValueError(f"status must be one of {', '.join(s.value for s in REQUESTABLE_STATUSES)}")
        return v
