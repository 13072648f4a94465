"""Git command runner.

Infrastructure component that wraps subprocess calls to the git CLI.
This abstraction allows services to be tested without actually calling git.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Protocol for running git commands."""

    def run(self, args: list[str], cwd: str) -> tuple[bool, str]:
        """Run a git command and return (success, output/error)."""
        ...

    def run_bytes(self, args: list[str], cwd: str) -> tuple[bool, bytes]:
        """Run a git command and return (success, raw stdout/stderr)."""
        ...


@dataclass
class GitCommandRunner:
    """Runs git CLI commands via subprocess.

    This is the production implementation of CommandRunner.
    For testing, mock this class or patch subprocess.run.
    """

    git_binary: str = "git"

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def run(self, args: list[str], cwd: str) -> tuple[bool, str]:
        """Run a git command with text output.

        Args:
            args: Arguments after the git binary (e.g., ["rev-parse", "HEAD"])
            cwd: Working directory for the command

        Returns:
            Tuple of (success, stdout_or_stderr); a missing working directory
            or git binary is reported as a failure
        """
        cmd = [self.git_binary, *args]
        try:
            result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.debug("git command failed: %s: %s", " ".join(cmd), e.stderr)
            return False, e.stderr or ""
        except OSError as e:
            logger.debug("git command could not run: %s: %s", " ".join(cmd), e)
            return False, str(e)

    def run_bytes(self, args: list[str], cwd: str) -> tuple[bool, bytes]:
        """Run a git command and keep stdout as bytes.

        Used for blob contents, which need not be valid text.
        """
        cmd = [self.git_binary, *args]
        try:
            result = subprocess.run(cmd, cwd=cwd, capture_output=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.debug("git command failed: %s", " ".join(cmd))
            return False, e.stderr or b""
        except OSError as e:
            logger.debug("git command could not run: %s: %s", " ".join(cmd), e)
            return False, str(e).encode()
