"""External diff tool viewer.

Materializes both sides of a comparison and launches a configured diff tool
command. Working tree files are passed by their real path; revisions are
extracted to temporary files, and missing content becomes an empty file.

The command template may use these placeholders:
    $LOCAL   path of the left (baseline) side
    $REMOTE  path of the right (target) side
    $TITLE   combined comparison title
"""

from __future__ import annotations

import asyncio
import os
import shlex
import subprocess
import tempfile

from diffwith.config import DEFAULT_DIFF_TOOL
from diffwith.domain.comparison import ShowOptions
from diffwith.domain.content import ContentReference
from diffwith.domain.revision import shorten_revision
from diffwith.services.git_operations import GitOperationsService

from .base import DiffViewer


class DiffToolError(Exception):
    """Raised when the external diff tool exits with a failure."""

    pass


class DiffToolViewer(DiffViewer):
    """Opens comparisons in an external diff tool."""

    def __init__(
        self,
        git_service: GitOperationsService,
        command_template: str = DEFAULT_DIFF_TOOL,
    ):
        """Initialize with dependencies.

        Args:
            git_service: Service used to read revision contents (injected)
            command_template: Shell command with $LOCAL/$REMOTE/$TITLE placeholders
        """
        self.git_service = git_service
        self.command_template = command_template

    async def open_comparison(
        self,
        lhs: ContentReference,
        rhs: ContentReference,
        title: str | None,
        show_options: ShowOptions,
    ) -> int:
        temp_files: list[str] = []
        try:
            local_path = await self._materialize(lhs, "BASE", temp_files)
            remote_path = await self._materialize(rhs, "TARGET", temp_files)
            command = self.build_command(local_path, remote_path, title)
            try:
                await asyncio.to_thread(subprocess.run, command, shell=True, check=True)
            except subprocess.CalledProcessError as e:
                raise DiffToolError(
                    f"Diff tool failed with exit code {e.returncode}: {command}"
                ) from e
            return 0
        finally:
            for temp_file in temp_files:
                if os.path.exists(temp_file):
                    os.remove(temp_file)

    def build_command(self, local_path: str, remote_path: str, title: str | None) -> str:
        """Substitute the placeholders of the command template."""
        command = self.command_template
        command = command.replace("$LOCAL", shlex.quote(local_path))
        command = command.replace("$REMOTE", shlex.quote(remote_path))
        command = command.replace("$TITLE", shlex.quote(title or ""))
        return command

    async def _materialize(
        self,
        reference: ContentReference,
        role: str,
        temp_files: list[str],
    ) -> str:
        if reference.is_working_tree and reference.fs_path.exists():
            return str(reference.fs_path)

        content = await self.git_service.read_content(reference)
        revision = shorten_revision(reference.revision, deleted_or_missing="missing") or "working"
        fd, temp_path = tempfile.mkstemp(suffix=f"_{role}_{revision}_{reference.basename}")
        temp_files.append(temp_path)
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        return temp_path
