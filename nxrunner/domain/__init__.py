"""Domain models for nx-runner."""

from nxrunner.domain.boundaries import GitBoundaries
from nxrunner.domain.errors import (
    GitRevisionError,
    InvalidEventError,
    InvalidInputError,
    NxCommandError,
)
from nxrunner.domain.event_context import EventContext, EventKind
from nxrunner.domain.run_config import RunConfig
from nxrunner.domain.run_mode import RunMode

__all__ = [
    "EventContext",
    "EventKind",
    "GitBoundaries",
    "GitRevisionError",
    "InvalidEventError",
    "InvalidInputError",
    "NxCommandError",
    "RunConfig",
    "RunMode",
]
