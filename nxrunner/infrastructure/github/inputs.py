"""GitHub Action input helpers."""

from __future__ import annotations

from collections.abc import Mapping

# Action inputs understood by nx-runner
ACTION_INPUTS = [
    "targets",
    "projects",
    "all",
    "affected",
    "parallel",
    "args",
    "nxCloud",
    "workingDirectory",
    "baseBoundaryOverride",
    "headBoundaryOverride",
]


def input_env_name(name: str) -> str:
    """Name of the variable the runner exposes an input under.

    Examples:
        >>> input_env_name("nxCloud")
        'INPUT_NXCLOUD'
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def read_action_inputs(environ: Mapping[str, str]) -> dict[str, str]:
    """Collect the nx-runner action inputs from the environment.

    Inputs that are not set are returned as empty strings.

    Args:
        environ: Environment mapping (usually os.environ)

    Returns:
        Mapping of input name to stripped value
    """
    return {name: environ.get(input_env_name(name), "").strip() for name in ACTION_INPUTS}
