"""Git boundary resolution for the Nx affected command.

Resolves the (base, head) pair from the triggering event:

- pull_request: the base and head SHAs recorded on the pull request.
  User overrides are not consulted.
- push: the pushed range (before/after), each end replaceable by an override.
- anything else: HEAD~1 and HEAD from the working tree, each end replaceable
  by an override. Only the unresolved ends are queried.
"""

from __future__ import annotations

import re
from typing import Protocol

from nxrunner.domain.boundaries import GitBoundaries
from nxrunner.domain.event_context import EventContext, EventKind
from nxrunner.domain.run_config import RunConfig

_LINE_BREAKS = re.compile(r"\r\n|\n|\r")

BASE_REVISION = "HEAD~1"
HEAD_REVISION = "HEAD"


class RevisionQuery(Protocol):
    """Protocol for resolving a revision against the working tree."""

    def rev_parse(self, revision: str) -> str:
        """Resolve a revision, raising GitRevisionError on failure."""
        ...


class BoundaryResolver:
    """Resolves git boundaries for a run.

    Receives its git dependency via constructor injection.
    """

    def __init__(self, git: RevisionQuery):
        self.git = git

    def resolve(self, config: RunConfig, event: EventContext) -> GitBoundaries:
        """Resolve the base and head boundaries.

        Args:
            config: Run configuration holding the optional overrides
            event: Triggering event

        Returns:
            Resolved GitBoundaries

        Raises:
            GitRevisionError: If a revision query fails (not retried)
        """
        if event.kind is EventKind.PULL_REQUEST:
            return GitBoundaries(base=event.pr_base_sha or "", head=event.pr_head_sha or "")

        if event.kind is EventKind.PUSH:
            return GitBoundaries(
                base=config.base_boundary_override or event.push_before or "",
                head=config.head_boundary_override or event.push_after or "",
            )

        base = config.base_boundary_override or self.git.rev_parse(BASE_REVISION)
        head = config.head_boundary_override or self.git.rev_parse(HEAD_REVISION)
        return GitBoundaries(base=_strip_line_breaks(base), head=_strip_line_breaks(head))


# ============================================================
# Private Helpers
# ============================================================


def _strip_line_breaks(value: str) -> str:
    return _LINE_BREAKS.sub("", value)
