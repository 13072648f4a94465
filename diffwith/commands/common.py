"""Shared wiring for comparison commands."""

from __future__ import annotations

import asyncio
from pathlib import Path

from diffwith.config import Settings, load_settings
from diffwith.domain.comparison import ComparisonRequest
from diffwith.domain.viewer_kind import ViewerKind
from diffwith.infrastructure.viewer.factory import create_viewer
from diffwith.logging_config import setup_logging
from diffwith.services.comparison_resolver import ComparisonResolver
from diffwith.services.git_operations import GitOperationsService


def absolute_path(path: str) -> str:
    """Resolve a command-line path against the current directory."""
    return str(Path(path).resolve())


def load_command_settings(config_path: str | None, repo_root: str) -> Settings:
    """Load settings for a command and configure logging from them.

    Raises:
        ConfigError: If the settings file is invalid
    """
    settings = load_settings(config_path, repo_root)
    setup_logging(settings.log_level)
    return settings


def run_comparison(
    request: ComparisonRequest,
    settings: Settings,
    git_service: GitOperationsService,
    viewer: str | None = None,
) -> int:
    """Resolve a request and open it with the selected viewer.

    Args:
        request: Comparison to open
        settings: Loaded settings
        git_service: Git service shared by resolver and viewer
        viewer: Viewer name overriding the configured one

    Returns:
        Exit code (0 when the comparison was opened, 1 otherwise)
    """
    kind = ViewerKind.from_string(viewer) if viewer else settings.viewer
    resolver = ComparisonResolver(
        queries=git_service,
        viewer=create_viewer(kind, settings, git_service),
        working_tree_label=settings.working_tree_label,
        legacy_labels=settings.legacy_labels,
    )
    directive = asyncio.run(resolver.execute(request))
    return 0 if directive is not None else 1
