"""Status transition core for MirrorStamp."""

from mirrorstamp.core.transitions import (
    REQUESTABLE_STATUSES,
    TRANSITION_FIELDS,
    fields_for,
    format_instant,
    stamp,
    stamp_status,
)
from mirrorstamp.core.upsert import apply_transition, deduplicate, find_repository

__all__ = [
    "REQUESTABLE_STATUSES",
    "TRANSITION_FIELDS",
    "apply_transition",
    "deduplicate",
    "fields_for",
    "find_repository",
    "format_instant",
    "stamp",
    "stamp_status",
]
