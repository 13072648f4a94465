"""Factory for creating comparison viewers.

This module provides factory functions for creating the appropriate viewer
based on the configured kind (external diff tool or console output).
"""

from __future__ import annotations

from diffwith.config import Settings
from diffwith.domain.viewer_kind import ViewerKind
from diffwith.services.git_operations import GitOperationsService

from .base import DiffViewer
from .console import ConsoleViewer
from .difftool import DiffToolViewer


def create_viewer(
    kind: ViewerKind,
    settings: Settings,
    git_service: GitOperationsService,
) -> DiffViewer:
    """Create a viewer based on kind.

    Args:
        kind: TOOL or CONSOLE
        settings: Loaded settings (supplies the diff tool command)
        git_service: Git service used to read revision contents

    Returns:
        DiffViewer implementation appropriate for the kind

    Raises:
        ValueError: If kind is not a known ViewerKind
    """
    if kind == ViewerKind.TOOL:
        return DiffToolViewer(git_service, command_template=settings.diff_tool)
    elif kind == ViewerKind.CONSOLE:
        return ConsoleViewer()
    else:
        raise ValueError(f"Unknown viewer: {kind}")
