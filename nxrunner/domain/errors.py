"""Exceptions raised across the nx-runner layers.

Services never recover from these; they propagate to the command layer,
which reports them and turns them into a non-zero exit code.
"""

from __future__ import annotations


class InvalidInputError(Exception):
    """Raised when an action input cannot be parsed."""

    pass


class InvalidEventError(Exception):
    """Raised when the triggering event payload is malformed."""

    pass


class GitRevisionError(Exception):
    """Raised when a git revision query fails or returns nothing."""

    pass


class NxCommandError(Exception):
    """Raised when an Nx invocation exits unsuccessfully."""

    def __init__(self, args: list[str], returncode: int, reason: str | None = None):
        self.command_args = list(args)
        self.returncode = returncode
        message = f"Nx command failed with exit code {returncode}: {' '.join(args)}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
