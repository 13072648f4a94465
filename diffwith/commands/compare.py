"""Compare command - open a file at two revisions side by side.

Each side is a revision marker plus a file path. Use an empty revision for
the working tree, or any ref git understands (sha, branch, HEAD~2, ...).
"""

from __future__ import annotations

from diffwith.commands.common import absolute_path, load_command_settings, run_comparison
from diffwith.config import ConfigError
from diffwith.domain.comparison import ComparisonRequest, RevisionSide, ShowOptions, ViewColumn
from diffwith.domain.revision import WORKING_TREE
from diffwith.services.git_operations import GitOperationsService, GitRepositoryError


def cmd_compare(
    repo_path: str,
    lhs_sha: str,
    lhs_path: str,
    rhs_sha: str = WORKING_TREE,
    rhs_path: str | None = None,
    lhs_title: str | None = None,
    rhs_title: str | None = None,
    line: int | None = None,
    view_column: str | None = None,
    viewer: str | None = None,
    config_path: str | None = None,
    as_link: bool = False,
) -> int:
    """Execute the compare command.

    Args:
        repo_path: Any path inside the repository
        lhs_sha: Baseline revision marker
        lhs_path: Baseline file path
        rhs_sha: Target revision marker ("" for the working tree)
        rhs_path: Target file path (default: lhs_path)
        lhs_title: Explicit baseline label
        rhs_title: Explicit target label
        line: 0-based line to place the cursor on
        view_column: Pane name or number for the comparison
        viewer: Viewer name overriding the configured one
        config_path: Settings file (default: <repo>/.diffwith.yml)
        as_link: Print a command link for the request instead of opening it

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    git_service = GitOperationsService()
    try:
        repo_root = git_service.get_repo_root(absolute_path(repo_path))
        settings = load_command_settings(config_path, repo_root)
        show_options = ShowOptions(view_column=ViewColumn.from_string(view_column)) if view_column else None
    except (GitRepositoryError, ConfigError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    request = ComparisonRequest(
        repo_path=repo_root,
        lhs=RevisionSide(revision=lhs_sha, path=absolute_path(lhs_path), title=lhs_title),
        rhs=RevisionSide(
            revision=rhs_sha,
            path=absolute_path(rhs_path if rhs_path is not None else lhs_path),
            title=rhs_title,
        ),
        line=line,
        show_options=show_options,
    )

    if as_link:
        print(request.to_command_uri())
        return 0

    return run_comparison(request, settings, git_service, viewer)
