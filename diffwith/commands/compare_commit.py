"""Compare-commit command - show what a commit did to a file.

With one commit, the file is compared with its previous revision (or, for
uncommitted changes, HEAD with the working tree). With two commits, the
file at the first is compared with the file at the second.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace

from diffwith.commands.common import absolute_path, load_command_settings, run_comparison
from diffwith.config import ConfigError
from diffwith.domain.comparison import ComparisonRequest
from diffwith.services.git_operations import GitOperationError, GitOperationsService


def cmd_compare_commit(
    repo_path: str,
    path: str,
    sha: str,
    sha2: str | None = None,
    line: int | None = None,
    viewer: str | None = None,
    config_path: str | None = None,
    as_link: bool = False,
) -> int:
    """Execute the compare-commit command.

    Args:
        repo_path: Any path inside the repository
        path: File to compare
        sha: Commit to show ("" for uncommitted changes)
        sha2: Second commit; compares sha against it when given
        line: 0-based line to place the cursor on
        viewer: Viewer name overriding the configured one
        config_path: Settings file (default: <repo>/.diffwith.yml)
        as_link: Print a command link for the request instead of opening it

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    git_service = GitOperationsService()
    file_path = absolute_path(path)
    try:
        repo_root = git_service.get_repo_root(absolute_path(repo_path))
        settings = load_command_settings(config_path, repo_root)
        commit1 = asyncio.run(git_service.get_commit_for_file(repo_root, file_path, sha))
        commit2 = None
        if sha2 is not None:
            commit2 = asyncio.run(git_service.get_commit_for_file(repo_root, file_path, sha2))
    except (GitOperationError, ConfigError) as e:
        print(f"Error: {e}")
        return 1

    request = ComparisonRequest.from_commits(commit1, commit2)
    if line is not None:
        request = replace(request, line=line)

    if as_link:
        print(request.to_command_uri())
        return 0

    return run_comparison(request, settings, git_service, viewer)
