"""Transition rule table: which timestamp pairs a status stamps."""

from datetime import datetime

from mirrorstamp.models.config import REQUESTABLE_STATUSES
from mirrorstamp.models.repository import Repository, RepositoryStatus, TimestampField

__all__ = [
    "REQUESTABLE_STATUSES",
    "TRANSITION_FIELDS",
    "fields_for",
    "format_instant",
    "stamp",
    "stamp_status",
]

TRANSITION_FIELDS: dict[RepositoryStatus, tuple[TimestampField, ...]] = {
    RepositoryStatus.PENDING: (TimestampField.NEXT_SCHEDULE,),
    RepositoryStatus.SYNCING: (TimestampField.LAST_STARTED,),
    RepositoryStatus.SUCCESS: (TimestampField.LAST_UPDATE, TimestampField.LAST_ENDED),
    RepositoryStatus.FAILED: (TimestampField.LAST_ENDED,),
}


def fields_for(status: RepositoryStatus) -> tuple[TimestampField, ...]:
    """Return the timestamp pairs stamped when a record enters ``status``."""
    return TRANSITION_FIELDS[RepositoryStatus(status)]


def format_instant(instant: datetime) -> str:
    """Render an instant as RFC 3339 with second precision.

    Naive instants are taken as local time. A zero offset renders as ``Z``.
    """
    if instant.tzinfo is None:
        instant = instant.astimezone()
    text = instant.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def stamp(repo: Repository, field: TimestampField, instant: datetime) -> None:
    """Write both halves of ``field`` from a single instant."""
    if instant.tzinfo is None:
        instant = instant.astimezone()
    instant = instant.replace(microsecond=0)
    repo.set_timestamp(field, format_instant(instant), int(instant.timestamp()))


def stamp_status(repo: Repository, status: RepositoryStatus, instant: datetime) -> None:
    for field in fields_for(status):
        stamp(repo, field, instant)
