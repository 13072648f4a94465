"""Open command - open a comparison from a command link.

Accepts the output of `--as-link` (or the JSON object it encodes), so a link
rendered in a hover or a review comment can be opened later from a shell.
"""

from __future__ import annotations

from diffwith.commands.common import load_command_settings, run_comparison
from diffwith.config import ConfigError
from diffwith.domain.comparison import ComparisonRequest
from diffwith.services.git_operations import GitOperationsService


def cmd_open(
    link: str,
    viewer: str | None = None,
    config_path: str | None = None,
) -> int:
    """Execute the open command.

    Args:
        link: `command:` link or JSON comparison arguments
        viewer: Viewer name overriding the configured one
        config_path: Settings file (default: <repoPath>/.diffwith.yml)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        request = ComparisonRequest.from_command_uri(link)
        if not request.is_executable:
            raise ValueError("Comparison needs repoPath, lhs and rhs")
        settings = load_command_settings(config_path, request.repo_path)
    except (ConfigError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return run_comparison(request, settings, GitOperationsService(), viewer)
