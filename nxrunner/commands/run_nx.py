"""Run Nx command.

Thin command that orchestrates domain models and services.
No business logic - just wiring and coordination.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping

from nxrunner.domain import (
    EventContext,
    GitRevisionError,
    InvalidEventError,
    InvalidInputError,
    NxCommandError,
    RunConfig,
    RunMode,
)
from nxrunner.infrastructure import (
    NxCommandRunner,
    ProcessEnvironment,
    write_github_step_summary,
)
from nxrunner.services import BoundaryResolver, GitOperationsService, NxDispatcher


def cmd_run_nx(
    inputs: Mapping[str, str],
    environ: Mapping[str, str] | None = None,
    dry_run: bool = False,
    write_job_summary: bool = False,
) -> int:
    """Run the configured Nx targets.

    Thin command that:
    1. Parses action inputs and the triggering event into domain models
    2. Initializes services with dependencies
    3. Dispatches the Nx invocations
    4. Returns exit code

    Args:
        inputs: Action inputs keyed by input name (e.g. "targets", "nxCloud")
        environ: Environment holding the GITHUB_* event variables (default: os.environ)
        dry_run: Print the Nx commands without running them
        write_job_summary: Write the executed commands to GITHUB_STEP_SUMMARY

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if environ is None:
        environ = os.environ

    # --------------------------------------------------------
    # 1. Parse into domain models
    # --------------------------------------------------------
    try:
        config = RunConfig.from_inputs(inputs)
        event = EventContext.from_github_env(environ)
    except (InvalidInputError, InvalidEventError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    print(f"Event: {event.kind.value}, targets: {','.join(config.targets)}")

    # --------------------------------------------------------
    # 2. Initialize services with dependencies
    # --------------------------------------------------------
    nx_runner = NxCommandRunner(working_directory=config.working_directory, dry_run=dry_run)
    resolver = BoundaryResolver(GitOperationsService(config.working_directory))
    dispatcher = NxDispatcher(nx=nx_runner, resolver=resolver, env=ProcessEnvironment())

    # --------------------------------------------------------
    # 3. Dispatch
    # --------------------------------------------------------
    try:
        mode = dispatcher.run(config, event)
    except GitRevisionError as e:
        print(f"Failed to retrieve git boundaries: {e}", file=sys.stderr)
        return 1
    except NxCommandError as e:
        print(str(e), file=sys.stderr)
        if write_job_summary:
            content = _generate_job_summary_content(RunMode.select(config), nx_runner.executed, e)
            write_github_step_summary(content)
        return 1

    if write_job_summary:
        write_github_step_summary(_generate_job_summary_content(mode, nx_runner.executed))

    print(f"Completed {len(nx_runner.executed)} Nx invocation(s)")
    return 0


# ============================================================
# Private Helpers
# ============================================================


def _generate_job_summary_content(
    mode: RunMode,
    executed: list[list[str]],
    error: NxCommandError | None = None,
) -> str:
    """Generate markdown content for the job summary."""
    lines = ["## Nx Summary", "", f"**Mode:** {mode.value}", ""]

    if executed:
        lines.extend(["### Commands", ""])
        for args in executed:
            lines.append(f"- `nx {' '.join(args)}`")
        lines.append("")

    if error is not None:
        lines.append(f"**Failed:** `nx {' '.join(error.command_args)}` (exit code {error.returncode})")
        lines.append("")

    return "\n".join(lines)
