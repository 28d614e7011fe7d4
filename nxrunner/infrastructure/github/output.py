"""GitHub Actions output helpers."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def group(title: str) -> Iterator[None]:
    """Fold everything printed inside the block into a collapsible log group.

    The end marker is written even when the block raises, so later output is
    not swallowed into the group.

    Args:
        title: Group title shown in the job log
    """
    print(f"::group::{title}", flush=True)
    try:
        yield
    finally:
        print("::endgroup::", flush=True)


def write_github_step_summary(content: str) -> bool:
    """Write content to GITHUB_STEP_SUMMARY for job summary.

    Args:
        content: Markdown content to write to the summary

    Returns:
        True if written successfully, False otherwise
    """
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        print("GITHUB_STEP_SUMMARY not set, skipping job summary")
        return False
    try:
        with open(summary_path, "a") as f:
            f.write(content)
        return True
    except OSError as e:
        print(f"Failed to write job summary: {e}")
        return False
