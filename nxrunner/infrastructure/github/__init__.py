"""GitHub Actions integration: inputs, environment and job log output."""

from .environment import EnvironmentSink, ProcessEnvironment
from .inputs import read_action_inputs
from .output import group, write_github_step_summary

__all__ = [
    "EnvironmentSink",
    "ProcessEnvironment",
    "group",
    "read_action_inputs",
    "write_github_step_summary",
]
