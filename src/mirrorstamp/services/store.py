"""JSON framing of the repository status list."""

import json
import sys
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from mirrorstamp.exceptions import InputDecodeError
from mirrorstamp.logger import get_logger
from mirrorstamp.models.repository import Repository

logger = get_logger(__name__)

_repository_list = TypeAdapter(list[Repository])


def load_repositories(text: str) -> list[Repository]:
    """Decode a JSON array of repository records.

    A JSON ``null`` decodes to an empty list.

    Raises:
        InputDecodeError: If the text is not a JSON array of records
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputDecodeError("store.decode_failed", reason=str(e)) from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise InputDecodeError("store.decode_failed", reason=f"expected a JSON array, got {type(data).__name__}")

    try:
        return _repository_list.validate_python(data)
    except PydanticValidationError as e:
        raise InputDecodeError("store.decode_failed", reason=str(e)) from e


def dump_repositories(repos: list[Repository]) -> str:
    """Encode repository records as a tab-indented JSON array."""
    data = [repo.model_dump(mode="json") for repo in repos]
    return json.dumps(data, indent="\t", ensure_ascii=False) + "\n"


def read_repositories(path: Path | None = None) -> list[Repository]:
    """Read the repository list from ``path``, or stdin when no path is given."""
    if path is None:
        return load_repositories(sys.stdin.read())

    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise InputDecodeError("store.io_failed", path=str(path), reason=e.strerror or str(e)) from e
    repos = load_repositories(text)
    logger.debug(f"Loaded {len(repos)} repositories from {path}")
    return repos


def write_repositories(repos: list[Repository], path: Path | None = None) -> None:
    """Write the repository list to ``path``, or stdout when no path is given."""
    text = dump_repositories(repos)
    if path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise InputDecodeError("store.io_failed", path=str(path), reason=e.strerror or str(e)) from e
    logger.debug(f"Saved {len(repos)} repositories to {path}")
