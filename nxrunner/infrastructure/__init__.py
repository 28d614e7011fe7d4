"""Infrastructure components for nx-runner.

This layer handles external system interactions:
- Nx CLI via subprocess
- GitHub Actions inputs, environment and log output

Organized into subdirectories:
- nx/ - Nx command runner
- github/ - GitHub Actions integration
"""

from .github import (
    EnvironmentSink,
    ProcessEnvironment,
    group,
    read_action_inputs,
    write_github_step_summary,
)
from .nx import CommandRunner, NxCommandRunner, detect_launcher

__all__ = [
    # Nx
    "CommandRunner",
    "NxCommandRunner",
    "detect_launcher",
    # GitHub Actions
    "EnvironmentSink",
    "ProcessEnvironment",
    "group",
    "read_action_inputs",
    "write_github_step_summary",
]
