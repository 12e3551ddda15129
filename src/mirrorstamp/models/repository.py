"""Repository record models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator


class RepositoryStatus(str, Enum):
    """Mirror sync status of a tracked repository."""

    PENDING = "pending"  # Waiting for the next scheduled sync
    SYNCING = "syncing"  # Sync in progress
    SUCCESS = "success"  # Last sync finished successfully
    FAILED = "failed"  # Last sync finished with an error


class TimestampField(str, Enum):
    """Timestamp pairs carried by a repository record.

    Each pair is stored as an ISO-8601 string under the member value and as
    Unix epoch seconds under ``<value>_ts``.
    """

    LAST_UPDATE = "last_update"
    LAST_STARTED = "last_started"
    LAST_ENDED = "last_ended"
    NEXT_SCHEDULE = "next_schedule"

    @property
    def epoch_key(self) -> str:
        return f"{self.value}_ts"


class Repository(BaseModel):
    """One entry of the mirror status list.

    Field order matches the persisted JSON layout.
    """

    name: str = ""
    is_master: bool = False
    upstream: str = ""
    status: RepositoryStatus | None = None

    last_update: str = ""
    last_update_ts: int = 0
    last_started: str = ""
    last_started_ts: int = 0
    last_ended: str = ""
    last_ended_ts: int = 0
    next_schedule: str = ""
    next_schedule_ts: int = 0

    size: str = Field("", description="Human readable size, e.g. '1.500 GiB'")
    size_bytes: int = 0

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:  # noqa: ANN401
        """Treat explicit JSON nulls like missing keys."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @field_validator("status", mode="before")
    @classmethod
    def empty_status(cls, v: object) -> object:
        if v == "":
            return None
        return v

    @field_serializer("status")
    def serialize_status(self, status: RepositoryStatus | None) -> str:
        return status.value if status is not None else ""

    @classmethod
    def synthesize(cls, name: str) -> "Repository":
        """Create the primary record for a repository seen for the first time."""
        return cls(name=name, is_master=True)

    def get_timestamp(self, field: TimestampField) -> tuple[str, int]:
        if field is TimestampField.LAST_UPDATE:
            return self.last_update, self.last_update_ts
        if field is TimestampField.LAST_STARTED:
            return self.last_started, self.last_started_ts
        if field is TimestampField.LAST_ENDED:
            return self.last_ended, self.last_ended_ts
        if field is TimestampField.NEXT_SCHEDULE:
            return self.next_schedule, self.next_schedule_ts
        raise ValueError(f"Unknown timestamp field: {field!r}")

    def set_timestamp(self, field: TimestampField, iso: str, ts: int) -> None:
        """Write both halves of a timestamp pair."""
        if field is TimestampField.LAST_UPDATE:
            self.last_update, self.last_update_ts = iso, ts
        elif field is TimestampField.LAST_STARTED:
            self.last_started, self.last_started_ts = iso, ts
        elif field is TimestampField.LAST_ENDED:
            self.last_ended, self.last_ended_ts = iso, ts
        elif field is TimestampField.NEXT_SCHEDULE:
            self.next_schedule, self.next_schedule_ts = iso, ts
        else:
            raise ValueError(f"Unknown timestamp field: {field!r}")

    def set_size(self, num_bytes: int, human: str) -> None:
        self.size_bytes = num_bytes
        self.size = human
