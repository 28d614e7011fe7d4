"""Process environment writes.

Nx Cloud reads NX_RUN_GROUP and NX_BRANCH from the environment of the Nx
process, so they have to be set on this process before Nx is spawned. The
sink abstraction keeps services testable without touching os.environ.
"""

from __future__ import annotations

import os
from typing import Protocol


class EnvironmentSink(Protocol):
    """Protocol for setting process-wide environment variables."""

    def set(self, name: str, value: str) -> None:
        """Set an environment variable."""
        ...


class ProcessEnvironment:
    """Writes to os.environ, inherited by every subprocess started afterwards."""

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value
