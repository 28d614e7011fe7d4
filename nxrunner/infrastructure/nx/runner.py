"""Nx command runner.

Infrastructure component that wraps subprocess calls to the Nx CLI.
This abstraction allows services to be tested without actually calling Nx.
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from nxrunner.domain.errors import NxCommandError

# Lockfile -> command prefix used to launch the workspace-local Nx binary
_LAUNCHERS = [
    ("pnpm-lock.yaml", ["pnpm", "exec", "nx"]),
    ("yarn.lock", ["yarn", "nx"]),
]
_DEFAULT_LAUNCHER = ["npx", "nx"]

# Shell convention for "command not found"
_LAUNCH_FAILED_EXIT_CODE = 127


class CommandRunner(Protocol):
    """Protocol for running Nx commands."""

    def run(self, args: list[str]) -> None:
        """Run Nx with the given arguments, raising NxCommandError on failure."""
        ...


def detect_launcher(working_directory: str | Path) -> list[str]:
    """Pick the Nx launcher for the package manager the workspace uses.

    Args:
        working_directory: Workspace root to look for lockfiles in

    Returns:
        Command prefix, e.g. ["npx", "nx"]
    """
    root = Path(working_directory)
    for lockfile, launcher in _LAUNCHERS:
        if (root / lockfile).is_file():
            return list(launcher)
    return list(_DEFAULT_LAUNCHER)


@dataclass
class NxCommandRunner:
    """Runs Nx commands via subprocess.

    This is the production implementation of CommandRunner. Nx output is
    streamed straight to the job log. For testing, mock this class or use a
    fake implementation.
    """

    working_directory: str = "."
    dry_run: bool = False
    executed: list[list[str]] = field(default_factory=list)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def run(self, args: list[str]) -> None:
        """Run an Nx command.

        Args:
            args: Nx arguments (e.g., ["run-many", "--target=build", "--all"])

        Raises:
            NxCommandError: If Nx cannot be started or exits with a non-zero status
        """
        cmd = detect_launcher(self.working_directory) + list(args)
        command_line = shlex.join(cmd)

        if self.dry_run:
            print(f"[DRY RUN] Would run: {command_line}")
            self.executed.append(list(args))
            return

        print(f"[command]{command_line}", flush=True)
        try:
            result = subprocess.run(cmd, cwd=self.working_directory)
        except OSError as e:
            raise NxCommandError(list(args), _LAUNCH_FAILED_EXIT_CODE, str(e))
        if result.returncode != 0:
            raise NxCommandError(list(args), result.returncode)
        self.executed.append(list(args))
