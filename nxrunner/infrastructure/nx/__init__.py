"""Nx CLI wrapper."""

from .runner import CommandRunner, NxCommandRunner, detect_launcher

__all__ = ["CommandRunner", "NxCommandRunner", "detect_launcher"]
