"""
Upsert engine - apply one status transition to one named repository.

The repository list is updated in place: the record named by the request is
found (or appended when absent), its status and timestamps are stamped, and
any later record repeating an earlier name is dropped so the list leaves
with unique names.
"""

from datetime import datetime, timedelta

from mirrorstamp.core.transitions import stamp_status
from mirrorstamp.exceptions import ValidationError
from mirrorstamp.logger import get_logger
from mirrorstamp.models.config import REQUESTABLE_STATUSES, TransitionRequest
from mirrorstamp.models.repository import Repository, RepositoryStatus
from mirrorstamp.utils.units import format_byte_unit

logger = get_logger(__name__)


def find_repository(repos: list[Repository], name: str) -> int | None:
    """Return the index of the first record named ``name``, if any."""
    for index, repo in enumerate(repos):
        if repo.name == name:
            return index
    return None


def _shift(now: datetime, offset: timedelta) -> datetime:
    """Add ``offset`` to ``now``, keeping local time local across DST changes."""
    if now.tzinfo is None:
        now = now.astimezone()
    shifted = now + offset
    if now.utcoffset() == now.astimezone().utcoffset():
        return shifted.astimezone()
    return shifted


def deduplicate(repos: list[Repository]) -> list[Repository]:
    """Drop records whose name already appeared earlier in the list.

    The first occurrence of each name is kept where it is.

    Returns:
        The removed records
    """
    seen: set[str] = set()
    kept: list[Repository] = []
    removed: list[Repository] = []
    for repo in repos:
        if repo.name in seen:
            removed.append(repo)
            continue
        seen.add(repo.name)
        kept.append(repo)

    if removed:
        repos[:] = kept
    return removed


def apply_transition(
    repos: list[Repository],
    request: TransitionRequest,
    now: datetime | None = None,
) -> list[Repository]:
    """Stamp ``request.status`` onto the record named ``request.name``.

    Args:
        repos: Repository list, modified in place
        request: Transition to apply
        now: Instant used for every stamp of this call; defaults to the current local time

    Returns:
        The same list object, updated

    Raises:
        ValidationError: If the name is empty or the status cannot be requested directly
    """
    if not request.name:
        raise ValidationError("transition.empty_name")
    if request.status not in REQUESTABLE_STATUSES:
        raise ValidationError("transition.unrequestable_status", status=RepositoryStatus(request.status).value)

    index = find_repository(repos, request.name)
    if index is None:
        repo = Repository.synthesize(request.name)
        repos.append(repo)
        logger.info("Repository created", name=request.name)
    else:
        repo = repos[index]

    repo.status = request.status
    if request.size != 0:
        repo.set_size(request.size, format_byte_unit(request.size))

    if now is None:
        now = datetime.now().astimezone()

    if request.schedule:
        stamp_status(repo, RepositoryStatus.PENDING, _shift(now, request.schedule))
    stamp_status(repo, request.status, now)

    removed = deduplicate(repos)
    if removed:
        logger.warning("Dropped duplicate repository records", names=sorted({r.name for r in removed}))

    logger.debug(
        "Transition applied",
        name=request.name,
        status=repo.status.value if repo.status else "",
        created=index is None,
        total=len(repos),
    )
    return repos
