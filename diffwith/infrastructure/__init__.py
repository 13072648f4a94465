"""Infrastructure components for diffwith.

This layer handles external system interactions:
- git CLI access via subprocess
- External diff tool launching and console output
- User-facing error messages

Organized into subdirectories:
- git/ - Git command runner
- viewer/ - Comparison viewers (diff tool vs console)
"""

from .git import CommandRunner, GitCommandRunner
from .messages import show_generic_error_message

__all__ = [
    "CommandRunner",
    "GitCommandRunner",
    "show_generic_error_message",
]
