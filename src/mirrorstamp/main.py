import argparse
import re
import sys
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from mirrorstamp import __version__
from mirrorstamp.exceptions import MirrorStampError, UsageError
from mirrorstamp.logger import get_logger
from mirrorstamp.models.config import REQUESTABLE_STATUSES, TransitionRequest
from mirrorstamp.models.repository import RepositoryStatus
from mirrorstamp.services import StatusStamper
from mirrorstamp.utils import parse_duration

logger = get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise UsageError("cli.usage", reason=message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="mirrorstamp",
        description="Stamp a repository's mirror sync status into a JSON status list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mirrorstamp syncing ubuntu < status.json > status.new.json
  mirrorstamp success ubuntu 1073741824 < status.json > status.new.json
  mirrorstamp failed ubuntu 0 6h -i status.json -o status.new.json
        """,
    )

    parser.add_argument("status", metavar="{syncing|success|failed}", help="New repository status")
    parser.add_argument("repo", help="Repository name")
    parser.add_argument("size", nargs="?", default=None, help="Repository size in bytes, 0 keeps the current size")
    parser.add_argument(
        "schedule",
        nargs="?",
        default=None,
        metavar="next schedule",
        help="Offset of the next scheduled sync, e.g. 6h or 1h30m",
    )
    parser.add_argument("-i", "--input", type=Path, metavar="PATH", help="Read the status list from PATH instead of stdin")
    parser.add_argument("-o", "--output", type=Path, metavar="PATH", help="Write the status list to PATH instead of stdout")
    parser.add_argument("--version", action="version", version=f"MirrorStamp {__version__}")
    return parser


def build_request(args: argparse.Namespace) -> TransitionRequest:
    """Turn parsed arguments into a transition request.

    Raises:
        UsageError: If any argument is malformed
    """
    try:
        status = RepositoryStatus(args.status)
    except ValueError:
        status = None
    if status not in REQUESTABLE_STATUSES:
        raise UsageError("cli.invalid_status", status=args.status)

    size = 0
    if args.size is not None:
        if not _INTEGER.fullmatch(args.size):
            raise UsageError("cli.invalid_size", value=args.size, reason="not an integer")
        size = int(args.size)

    schedule = None
    if args.schedule is not None:
        try:
            schedule = parse_duration(args.schedule)
        except ValueError as e:
            raise UsageError("cli.invalid_schedule", value=args.schedule, reason=str(e)) from e

    try:
        if schedule is None:
            return TransitionRequest(status=status, name=args.repo, size=size)
        return TransitionRequest(status=status, name=args.repo, size=size, schedule=schedule)
    except PydanticValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors())
        raise UsageError("cli.invalid_request", reason=reason) from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI argument parsing."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        request = build_request(args)
        StatusStamper().run(request, source=args.input, destination=args.output)
    except MirrorStampError as e:
        logger.debug("Invocation failed", error=e.message_key)
        print(str(e), file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
