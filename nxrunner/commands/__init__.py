"""CLI command implementations."""

from nxrunner.commands.run_nx import cmd_run_nx

__all__ = ["cmd_run_nx"]
