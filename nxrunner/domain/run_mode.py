"""Execution mode selection for nx-runner."""

from __future__ import annotations

from enum import Enum

from nxrunner.domain.run_config import RunConfig


class RunMode(Enum):
    """Strategy used to run the configured targets.

    Attributes:
        ALL: nx run-many --all, once per target
        PROJECTS: nx <target> <project>, once per project and target
        AFFECTED: nx affected between two git boundaries, once per target
    """

    ALL = "all"
    PROJECTS = "projects"
    AFFECTED = "affected"

    @classmethod
    def select(cls, config: RunConfig) -> RunMode:
        """Pick the mode for a configuration. First match wins.

        Examples:
            >>> RunMode.select(RunConfig(targets=("build",), all=True))
            <RunMode.ALL: 'all'>
            >>> RunMode.select(RunConfig(targets=("build",), projects=("app",)))
            <RunMode.PROJECTS: 'projects'>
            >>> RunMode.select(RunConfig(targets=("build",)))
            <RunMode.AFFECTED: 'affected'>
        """
        if config.all is True or config.affected is False:
            return cls.ALL
        if config.projects:
            return cls.PROJECTS
        return cls.AFFECTED
