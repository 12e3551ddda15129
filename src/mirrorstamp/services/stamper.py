"""Status stamper - read, transition and write the repository list."""

from datetime import datetime, timezone
from pathlib import Path

from mirrorstamp.config import get_config
from mirrorstamp.core.upsert import apply_transition
from mirrorstamp.logger import get_logger
from mirrorstamp.models.config import AppConfig, TransitionRequest
from mirrorstamp.models.repository import Repository

from .store import read_repositories, write_repositories

logger = get_logger(__name__)


class StatusStamper:
    """Applies one transition per invocation to a persisted repository list."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or get_config()

    def now(self) -> datetime:
        """Current instant in the configured rendering zone."""
        if self._config.stamping.utc:
            return datetime.now(timezone.utc)
        return datetime.now().astimezone()

    def run(
        self,
        request: TransitionRequest,
        source: Path | None = None,
        destination: Path | None = None,
    ) -> list[Repository]:
        """
        Load the list, apply ``request`` and write the result.

        Args:
            request: Transition to apply
            source: Input file, stdin when None
            destination: Output file, stdout when None

        Returns:
            The written repository list
        """
        repos = read_repositories(source)
        logger.info("Repository list loaded", count=len(repos), source=str(source) if source else "-")

        apply_transition(repos, request, now=self.now())

        write_repositories(repos, destination)
        logger.info(
            "Repository list written",
            count=len(repos),
            name=request.name,
            status=request.status.value,
            destination=str(destination) if destination else "-",
        )
        return repos
