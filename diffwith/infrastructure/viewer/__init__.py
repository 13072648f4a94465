"""Comparison viewers."""

from .base import DiffViewer
from .console import ConsoleViewer
from .difftool import DEFAULT_DIFF_TOOL, DiffToolError, DiffToolViewer
from .factory import create_viewer

__all__ = [
    "ConsoleViewer",
    "DEFAULT_DIFF_TOOL",
    "DiffToolError",
    "DiffToolViewer",
    "DiffViewer",
    "create_viewer",
]
