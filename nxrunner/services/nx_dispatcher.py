"""Nx mode dispatcher.

Selects the run mode for a configuration and issues the Nx invocations for
it, one at a time. The first failing invocation aborts the run.
"""

from __future__ import annotations

from nxrunner.domain.event_context import EventContext
from nxrunner.domain.run_config import RunConfig
from nxrunner.domain.run_mode import RunMode
from nxrunner.infrastructure.github.environment import EnvironmentSink
from nxrunner.infrastructure.github.output import group
from nxrunner.infrastructure.nx.runner import CommandRunner
from nxrunner.services.boundary_resolver import BoundaryResolver

# Variables read by the Nx Cloud runner
NX_RUN_GROUP_VAR = "NX_RUN_GROUP"
NX_BRANCH_VAR = "NX_BRANCH"

BOUNDARIES_GROUP_TITLE = "Retrieving Git boundaries (affected command)"


class NxDispatcher:
    """Runs the configured Nx targets in the selected mode.

    Receives its dependencies via constructor injection:
    - nx: runs a single Nx invocation
    - resolver: resolves git boundaries for affected mode
    - env: receives the Nx Cloud environment variables
    """

    def __init__(self, nx: CommandRunner, resolver: BoundaryResolver, env: EnvironmentSink):
        self.nx = nx
        self.resolver = resolver
        self.env = env

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def run(self, config: RunConfig, event: EventContext) -> RunMode:
        """Run every invocation the configuration requires.

        Args:
            config: Run configuration
            event: Triggering event

        Returns:
            The mode that was run

        Raises:
            NxCommandError: On the first failed invocation
            GitRevisionError: If boundary resolution fails in affected mode
        """
        args = list(config.args)
        print(f"args: {','.join(args)}")

        if config.nx_cloud:
            self._export_nx_cloud_env(event)

        if config.parallel:
            args.append(f"--parallel={config.parallel}")

        mode = RunMode.select(config)
        if mode is RunMode.ALL:
            self._run_all(config, args)
        elif mode is RunMode.PROJECTS:
            self._run_projects(config, args)
        else:
            self._run_affected(config, event, args)
        return mode

    # --------------------------------------------------------
    # Modes
    # --------------------------------------------------------

    def _run_all(self, config: RunConfig, args: list[str]) -> None:
        for target in config.targets:
            self.nx.run(["run-many", f"--target={target}", "--all", *args])

    def _run_projects(self, config: RunConfig, args: list[str]) -> None:
        for project in config.projects:
            for target in config.targets:
                self.nx.run([target, project, *args])

    def _run_affected(self, config: RunConfig, event: EventContext, args: list[str]) -> None:
        with group(BOUNDARIES_GROUP_TITLE):
            boundaries = self.resolver.resolve(config, event)
            print(f"Base boundary: {boundaries.base}")
            print(f"Head boundary: {boundaries.head}")

        for target in config.targets:
            self.nx.run([
                "affected",
                f"--target={target}",
                f"--base={boundaries.base}",
                f"--head={boundaries.head}",
                *args,
            ])

    # --------------------------------------------------------
    # Private Helpers
    # --------------------------------------------------------

    def _export_nx_cloud_env(self, event: EventContext) -> None:
        self.env.set(NX_RUN_GROUP_VAR, event.run_id)
        if event.is_pull_request and event.pr_number is not None:
            self.env.set(NX_BRANCH_VAR, str(event.pr_number))
