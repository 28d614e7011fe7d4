"""Triggering CI event modeled as an explicit, read-only value.

The GitHub Actions runner exposes the event through GITHUB_EVENT_NAME,
GITHUB_RUN_ID and a JSON payload file at GITHUB_EVENT_PATH. EventContext
captures the fields nx-runner needs once, so services never read ambient
process state.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from nxrunner.domain.errors import InvalidEventError


class EventKind(Enum):
    """Kind of event that triggered the workflow run.

    Attributes:
        PULL_REQUEST: pull_request event, payload carries base and head SHAs
        PUSH: push event, payload carries before and after SHAs
        OTHER: any other trigger (workflow_dispatch, schedule, ...)
    """

    PULL_REQUEST = "pull_request"
    PUSH = "push"
    OTHER = "other"

    @classmethod
    def from_event_name(cls, event_name: str) -> EventKind:
        """Map a GitHub event name to an EventKind.

        Examples:
            >>> EventKind.from_event_name("pull_request")
            <EventKind.PULL_REQUEST: 'pull_request'>
            >>> EventKind.from_event_name("workflow_dispatch")
            <EventKind.OTHER: 'other'>
        """
        if event_name == cls.PULL_REQUEST.value:
            return cls.PULL_REQUEST
        if event_name == cls.PUSH.value:
            return cls.PUSH
        return cls.OTHER


@dataclass(frozen=True)
class EventContext:
    """Snapshot of the triggering event.

    Only the fields matching ``kind`` are populated; the others stay None.
    """

    kind: EventKind
    run_id: str = ""
    pr_base_sha: str | None = None
    pr_head_sha: str | None = None
    pr_number: int | None = None
    push_before: str | None = None
    push_after: str | None = None

    @property
    def is_pull_request(self) -> bool:
        return self.kind is EventKind.PULL_REQUEST

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_payload(
        cls, event_name: str, run_id: str, payload: Mapping[str, Any]
    ) -> EventContext:
        """Parse an event payload into an EventContext.

        Args:
            event_name: GitHub event name (e.g. "pull_request", "push")
            run_id: Unique id of the workflow run
            payload: Decoded webhook payload

        Returns:
            Parsed EventContext

        Raises:
            InvalidEventError: If a pull_request payload has no pull_request object,
                non-object base/head, or a non-numeric number
        """
        kind = EventKind.from_event_name(event_name)

        if kind is EventKind.PULL_REQUEST:
            pull_request = payload.get("pull_request")
            if not isinstance(pull_request, Mapping):
                raise InvalidEventError(
                    "pull_request event payload is missing the 'pull_request' object"
                )
            base = pull_request.get("base") or {}
            head = pull_request.get("head") or {}
            if not isinstance(base, Mapping) or not isinstance(head, Mapping):
                raise InvalidEventError(
                    "pull_request 'base' and 'head' must be objects"
                )
            return cls(
                kind=kind,
                run_id=run_id,
                pr_base_sha=base.get("sha"),
                pr_head_sha=head.get("sha"),
                pr_number=_parse_pr_number(pull_request.get("number")),
            )

        if kind is EventKind.PUSH:
            return cls(
                kind=kind,
                run_id=run_id,
                push_before=payload.get("before"),
                push_after=payload.get("after"),
            )

        return cls(kind=kind, run_id=run_id)

    @classmethod
    def from_github_env(cls, environ: Mapping[str, str]) -> EventContext:
        """Build the context from GitHub Actions environment variables.

        A missing GITHUB_EVENT_PATH (or a path that does not exist) yields an
        empty payload, as when running outside of Actions.

        Args:
            environ: Environment mapping (usually os.environ)

        Returns:
            Parsed EventContext
        """
        payload: Any = {}
        event_path = environ.get("GITHUB_EVENT_PATH")
        if event_path and Path(event_path).is_file():
            try:
                payload = json.loads(Path(event_path).read_text())
            except json.JSONDecodeError as e:
                raise InvalidEventError(f"Failed to parse event payload {event_path}: {e}")
            if not isinstance(payload, Mapping):
                raise InvalidEventError(f"Event payload {event_path} is not a JSON object")

        return cls.from_payload(
            event_name=environ.get("GITHUB_EVENT_NAME", ""),
            run_id=environ.get("GITHUB_RUN_ID", ""),
            payload=payload,
        )


# ============================================================
# Private Helpers
# ============================================================


def _parse_pr_number(number: Any) -> int | None:
    if number is None:
        return None
    try:
        return int(number)
    except (TypeError, ValueError):
        raise InvalidEventError(f"pull_request number is not numeric: {number!r}")
