"""MirrorStamp services."""

from .stamper import StatusStamper
from .store import dump_repositories, load_repositories, read_repositories, write_repositories

__all__ = [
    "StatusStamper",
    "dump_repositories",
    "load_repositories",
    "read_repositories",
    "write_repositories",
]
