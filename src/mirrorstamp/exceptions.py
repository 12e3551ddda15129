"""Centralized exception hierarchy for MirrorStamp.

Every error carries a message key and formatting parameters; the rendered
English message is what the operator sees on stderr.
"""

USAGE = "usage: mirrorstamp {syncing|success|failed} <repo> [<size> [<next schedule>]] < src.json > dest.json"

MESSAGES: dict[str, str] = {
    "cli.usage": "error: {reason}\n" + USAGE,
    "cli.invalid_status": "invalid status {status!r}\n" + USAGE,
    "cli.invalid_size": "invalid size {value!r}: {reason}",
    "cli.invalid_schedule": "invalid schedule duration {value!r}: {reason}",
    "cli.invalid_request": "invalid request: {reason}",
    "transition.empty_name": "repository name must not be empty",
    "transition.unrequestable_status": "status {status!r} cannot be requested directly",
    "store.decode_failed": "failed to decode repository list: {reason}",
    "store.io_failed": "failed to access {path}: {reason}",
}


class MirrorStampError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message_key: str, exit_code: int = 1, **params: object) -> None:
        """
        Initialize the error.

        Args:
            message_key: Key into MESSAGES (e.g., 'cli.invalid_size')
            exit_code: Process exit code reported by the command line
            **params: Parameters for string formatting of the message
        """
        super().__init__(message_key)
        self.message_key = message_key
        self.exit_code = exit_code
        self.params = params

    def __str__(self) -> str:
        template = MESSAGES.get(self.message_key)
        if template is None:
            params_str = ", ".join(f"{k}={v}" for k, v in self.params.items())
            return f"[{self.message_key}] {params_str}"
        try:
            return template.format(**self.params)
        except (KeyError, IndexError):
            return template


class UsageError(MirrorStampError):
    """Raised when command line arguments are missing or malformed."""


class ValidationError(MirrorStampError):
    """Raised when a transition request violates the engine's preconditions."""


class InputDecodeError(MirrorStampError):
    """Raised when the repository list cannot be read or decoded."""
