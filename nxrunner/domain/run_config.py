"""Run configuration parsed from GitHub Action inputs.

Parse-once pattern: raw input strings are converted into a typed, immutable
RunConfig at the edge, and the rest of the code only deals with the model.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from nxrunner.domain.errors import InvalidInputError

# Accepted spellings, matching the YAML 1.2 core schema used by the Actions toolkit
_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


@dataclass(frozen=True)
class RunConfig:
    """Configuration for a single nx-runner invocation.

    Attributes:
        targets: Nx targets to run, in order
        projects: Explicit projects to run the targets against (may be empty)
        all: Run the targets against every project
        affected: Tri-state affected flag (None when unset)
        parallel: Number of parallel Nx tasks, if configured
        base_boundary_override: User supplied base revision
        head_boundary_override: User supplied head revision
        args: Passthrough arguments appended to every invocation
        nx_cloud: Enable Nx Cloud distributed caching variables
        working_directory: Directory Nx is run from
    """

    targets: tuple[str, ...]
    projects: tuple[str, ...] = ()
    all: bool = False
    affected: bool | None = None
    parallel: int | None = None
    base_boundary_override: str | None = None
    head_boundary_override: str | None = None
    args: tuple[str, ...] = field(default_factory=tuple)
    nx_cloud: bool = False
    working_directory: str = "."

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_inputs(cls, inputs: Mapping[str, str]) -> RunConfig:
        """Parse action inputs into a RunConfig.

        Args:
            inputs: Mapping of action input name to raw string value

        Returns:
            Parsed RunConfig

        Raises:
            InvalidInputError: If an input cannot be parsed or targets is empty
        """
        targets = _parse_list(inputs.get("targets", ""))
        if not targets:
            raise InvalidInputError("Input 'targets' must name at least one target")

        return cls(
            targets=targets,
            projects=_parse_list(inputs.get("projects", "")),
            all=_parse_bool("all", inputs.get("all", "")) or False,
            affected=_parse_bool("affected", inputs.get("affected", "")),
            parallel=_parse_parallel(inputs.get("parallel", "")),
            base_boundary_override=inputs.get("baseBoundaryOverride", "").strip() or None,
            head_boundary_override=inputs.get("headBoundaryOverride", "").strip() or None,
            args=tuple(inputs.get("args", "").split()),
            nx_cloud=_parse_bool("nxCloud", inputs.get("nxCloud", "")) or False,
            working_directory=inputs.get("workingDirectory", "").strip() or ".",
        )


# ============================================================
# Private Helpers
# ============================================================


def _parse_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _parse_bool(name: str, value: str) -> bool | None:
    value = value.strip()
    if not value:
        return None
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidInputError(
        f"Input '{name}' must be 'true' or 'false', got: {value}"
    )


def _parse_parallel(value: str) -> int | None:
    value = value.strip()
    if not value:
        return None
    try:
        parallel = int(value)
    except ValueError:
        raise InvalidInputError(f"Input 'parallel' must be an integer, got: {value}")
    if parallel < 1:
        raise InvalidInputError(f"Input 'parallel' must be positive, got: {value}")
    return parallel
