"""Git primitives."""

from .runner import CommandRunner, GitCommandRunner

__all__ = ["CommandRunner", "GitCommandRunner"]
