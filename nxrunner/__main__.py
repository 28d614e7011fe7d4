#!/usr/bin/env python3
"""CLI entry point for nx-runner.

Usage:
    python -m nxrunner run [options]

Commands:
    run     Run Nx targets for the current workflow run

Inputs are read from the INPUT_* variables GitHub Actions sets for the
action; any flag given on the command line takes precedence.
"""

import argparse
import os
import sys

from nxrunner.commands.run_nx import cmd_run_nx
from nxrunner.infrastructure.github.inputs import read_action_inputs


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nx-runner",
        description="Run Nx targets from GitHub Actions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  run     Run Nx targets in all, projects or affected mode

Examples:
  nx-runner run --targets lint,test
  nx-runner run --targets build --projects app,lib --parallel 3
  nx-runner run --targets test --base origin/main --head HEAD --dry-run
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # run command
    parser_run = subparsers.add_parser(
        "run",
        help="Run Nx targets for the current workflow run",
    )
    parser_run.add_argument(
        "--targets",
        help="Comma-separated list of targets to run",
    )
    parser_run.add_argument(
        "--projects",
        help="Comma-separated list of projects to run the targets against",
    )
    parser_run.add_argument(
        "--all",
        choices=["true", "false"],
        help="Run the targets against every project ('false' overrides an action input)",
    )
    parser_run.add_argument(
        "--affected",
        choices=["true", "false"],
        help="Run only affected projects ('false' runs every project)",
    )
    parser_run.add_argument(
        "--parallel",
        help="Number of parallel Nx tasks",
    )
    parser_run.add_argument(
        "--args",
        help="Extra arguments passed to every Nx command",
    )
    parser_run.add_argument(
        "--nx-cloud",
        choices=["true", "false"],
        help="Set the Nx Cloud run group and branch variables ('false' overrides an action input)",
    )
    parser_run.add_argument(
        "--working-directory",
        help="Directory of the Nx workspace",
    )
    parser_run.add_argument(
        "--base",
        help="Base boundary override for the affected command",
    )
    parser_run.add_argument(
        "--head",
        help="Head boundary override for the affected command",
    )
    parser_run.add_argument(
        "--write-job-summary",
        action="store_true",
        help="Write the executed commands to GITHUB_STEP_SUMMARY",
    )
    parser_run.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the Nx commands without running them",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Route to command implementations with explicit parameters
    if args.command == "run":
        inputs = read_action_inputs(os.environ)
        overrides = {
            "targets": args.targets,
            "projects": args.projects,
            "all": args.all,
            "affected": args.affected,
            "parallel": args.parallel,
            "args": args.args,
            "nxCloud": args.nx_cloud,
            "workingDirectory": args.working_directory,
            "baseBoundaryOverride": args.base,
            "headBoundaryOverride": args.head,
        }
        inputs.update({name: value for name, value in overrides.items() if value is not None})
        return cmd_run_nx(
            inputs=inputs,
            dry_run=args.dry_run,
            write_job_summary=args.write_job_summary,
        )

    return 1


if __name__ == "__main__":
    sys.exit(main())
