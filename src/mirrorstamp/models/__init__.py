"""Data models for MirrorStamp."""

from mirrorstamp.models.config import AppConfig, TransitionRequest
from mirrorstamp.models.repository import Repository, RepositoryStatus, TimestampField

__all__ = [
    "AppConfig",
    "Repository",
    "RepositoryStatus",
    "TimestampField",
    "TransitionRequest",
]
