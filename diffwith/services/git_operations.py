"""Git operations service.

Core service for the repository queries a comparison depends on: resolving
revision markers, classifying a file's status in a commit, and handing out
content references. All git access goes through an injected CommandRunner;
lookups are coroutines that run the blocking git call on a worker thread so
independent lookups overlap.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from diffwith.domain.commit import GitCommit
from diffwith.domain.content import ContentReference, repo_relative_path
from diffwith.domain.file_status import FileStatus
from diffwith.domain.revision import (
    DELETED_OR_MISSING_SHA,
    UNCOMMITTED_SHA,
    is_deleted_or_missing,
    is_resolve_required,
    is_uncommitted,
    is_working_tree,
)
from diffwith.infrastructure.git.runner import CommandRunner, GitCommandRunner


class GitOperationError(Exception):
    """Base class for failed git lookups."""

    pass


class GitRepositoryError(GitOperationError):
    """Raised when directory is not a git repository."""

    pass


class GitReferenceError(GitOperationError):
    """Raised when a revision marker cannot be resolved to a commit."""

    pass


class GitStatusError(GitOperationError):
    """Raised when a file's status in a commit cannot be read."""

    pass


class GitFileNotFoundError(GitOperationError):
    """Raised when file doesn't exist at specified commit."""

    pass


class GitOperationsService:
    """Git-backed repository queries.

    Every query takes the repository root explicitly, so a single service
    instance serves any number of repositories.
    """

    def __init__(self, runner: CommandRunner | None = None):
        """Initialize with a command runner.

        Args:
            runner: Runner used for every git invocation (default: GitCommandRunner)
        """
        self.runner = runner if runner is not None else GitCommandRunner()
        # (repo_path, sha) pairs rev-parse has confirmed to be commits
        self._verified_commits: set[tuple[str, str]] = set()

    # --------------------------------------------------------
    # Repository
    # --------------------------------------------------------

    def get_repo_root(self, path: str) -> str:
        """Find the root of the repository containing `path`.

        Args:
            path: A file or directory inside the repository

        Returns:
            Absolute path of the repository's top-level directory

        Raises:
            GitRepositoryError: If path is not inside a git repository
        """
        start = Path(path)
        cwd = start if start.is_dir() else start.parent
        success, output = self.runner.run(["rev-parse", "--show-toplevel"], str(cwd))
        if not success or not output.strip():
            raise GitRepositoryError(
                f"Not a git repository: {path}\n"
                "Make sure the path is inside a git repository."
            )
        return output.strip()

    # --------------------------------------------------------
    # Repository Queries
    # --------------------------------------------------------

    async def resolve_reference(
        self,
        repo_path: str,
        ref: str,
        path: str | None = None,
    ) -> str:
        """Resolve a revision marker into a concrete commit id.

        Working tree markers and the deleted/missing sentinel are returned
        unchanged. Full shas are verified to name a commit the first time they
        are seen; resolving an already resolved sha makes no git call. With a
        path, the result is the missing sentinel when the file does not exist
        at the resolved commit.

        Args:
            repo_path: Repository root
            ref: Revision marker (sha, abbreviated sha, branch, HEAD, ...)
            path: File the revision is resolved for

        Returns:
            Full sha, an unchanged working tree marker, or DELETED_OR_MISSING_SHA

        Raises:
            GitReferenceError: If ref does not name a commit
        """
        if is_working_tree(ref) or is_deleted_or_missing(ref):
            return ref

        if is_resolve_required(ref) or (repo_path, ref) not in self._verified_commits:
            sha = await self._rev_parse(repo_path, ref)
        else:
            sha = ref
        if path is None:
            return sha

        file_path = repo_relative_path(repo_path, path)
        exists, _ = await self._run(repo_path, ["cat-file", "-e", f"{sha}:{file_path}"])
        return sha if exists else DELETED_OR_MISSING_SHA

    async def get_file_status_for_commit(
        self,
        repo_path: str,
        path: str,
        ref: str,
    ) -> FileStatus | None:
        """Get how a commit changed a file.

        Args:
            repo_path: Repository root
            path: File to look up
            ref: Concrete commit id

        Returns:
            FileStatus for the file, or None if the commit did not touch it
            (always None for working tree markers and the missing sentinel)

        Raises:
            GitStatusError: If git cannot list the commit's changes
        """
        if not ref or is_uncommitted(ref) or is_deleted_or_missing(ref):
            return None

        file_path = repo_relative_path(repo_path, path)
        success, output = await self._run(
            repo_path,
            ["show", "-M", "--name-status", "--format=", ref, "--", file_path],
        )
        if not success:
            raise GitStatusError(f"Failed to read status of {file_path} at {ref}: {output}")

        for status in FileStatus.parse_name_status(output):
            if status.path == file_path:
                return status
        return None

    async def get_versioned_content(
        self,
        repo_path: str,
        path: str,
        ref: str,
    ) -> ContentReference | None:
        """Get a reference to a file's content at a revision.

        Args:
            repo_path: Repository root
            path: File location
            ref: Resolved revision

        Returns:
            ContentReference, or None when there is no content: the revision
            is the missing sentinel, or it denotes the working tree and the
            file does not exist there
        """
        file_path = repo_relative_path(repo_path, path)
        if is_deleted_or_missing(ref):
            return None

        if is_working_tree(ref):
            reference = ContentReference.working_file(repo_path, file_path)
            exists = await asyncio.to_thread(reference.fs_path.exists)
            return reference if exists else None

        return ContentReference.for_revision(ref, file_path, repo_path)

    async def read_content(self, reference: ContentReference) -> bytes:
        """Read the bytes a content reference points at.

        Placeholder references for missing content read as empty.

        Raises:
            GitFileNotFoundError: If file doesn't exist at the revision
        """
        if reference.is_missing:
            return b""
        if reference.is_working_tree:
            return await asyncio.to_thread(reference.fs_path.read_bytes)

        success, output = await asyncio.to_thread(
            self.runner.run_bytes,
            ["show", f"{reference.revision}:{reference.path}"],
            reference.repo_path,
        )
        if not success:
            raise GitFileNotFoundError(
                f"File {reference.path} not found at {reference.revision}: "
                f"{output.decode(errors='replace')}"
            )
        return output

    async def get_commit_for_file(
        self,
        repo_path: str,
        path: str,
        ref: str,
    ) -> GitCommit:
        """Describe a file as it exists in one commit.

        The previous revision is the commit's first parent, unless the commit
        added the file. Renames carry the file's previous path.

        Raises:
            GitReferenceError: If ref does not name a commit
            GitStatusError: If git cannot list the commit's changes
        """
        file_path = repo_relative_path(repo_path, path)
        if is_working_tree(ref):
            return GitCommit(repo_path=repo_path, path=file_path, sha=UNCOMMITTED_SHA)

        sha = await self._rev_parse(repo_path, ref)
        success, output = await self._run(
            repo_path,
            ["show", "-M", "--name-status", "--format=", sha],
        )
        if not success:
            raise GitStatusError(f"Failed to list changes of {sha}: {output}")

        status = next(
            (s for s in FileStatus.parse_name_status(output) if s.path == file_path),
            None,
        )
        previous_sha = None
        if status is None or not status.is_added:
            previous_sha = await self._parent(repo_path, sha)

        return GitCommit(
            repo_path=repo_path,
            path=file_path,
            sha=sha,
            previous_sha=previous_sha,
            previous_path=status.original_path if status is not None and status.is_rename else None,
        )

    # --------------------------------------------------------
    # Private
    # --------------------------------------------------------

    async def _run(self, repo_path: str, args: list[str]) -> tuple[bool, str]:
        return await asyncio.to_thread(self.runner.run, args, repo_path)

    async def _rev_parse(self, repo_path: str, ref: str) -> str:
        success, output = await self._run(
            repo_path, ["rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"]
        )
        sha = output.strip()
        if not success or not sha:
            raise GitReferenceError(f"Unable to resolve revision {ref!r} in {repo_path}")
        self._verified_commits.add((repo_path, sha))
        return sha

    async def _parent(self, repo_path: str, sha: str) -> str | None:
        success, output = await self._run(
            repo_path, ["rev-parse", "--verify", "--quiet", f"{sha}^"]
        )
        if not success:
            return None
        return output.strip() or None
