"""Git operations service.

Core service for git command operations. Encapsulates all subprocess calls
to git commands.
"""

import subprocess
from pathlib import Path

from nxrunner.domain.errors import GitRevisionError


class GitOperationsService:
    """Core service for git command operations.

    Encapsulates all subprocess calls to git commands.
    Reusable across the entire application.
    """

    def __init__(self, repo_path: str = "."):
        """Initialize with repository path.

        Args:
            repo_path: Path to git repository (default: current directory)
        """
        self.repo_path = Path(repo_path)

    def rev_parse(self, revision: str) -> str:
        """Resolve a revision to a commit SHA.

        Output is returned as git printed it, trailing newline included.

        Args:
            revision: Revision expression (e.g. "HEAD", "HEAD~1")

        Returns:
            Raw stdout of git rev-parse

        Raises:
            GitRevisionError: If git fails or prints nothing
        """
        try:
            result = subprocess.run(
                ["git", "rev-parse", revision],
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise GitRevisionError(f"Failed to resolve {revision}: {e.stderr}")
        except FileNotFoundError as e:
            raise GitRevisionError(f"Failed to run git: {e}")

        if not result.stdout.strip():
            raise GitRevisionError(f"git rev-parse {revision} returned no output")
        return result.stdout
