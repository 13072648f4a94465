"""Commit records used to build comparisons between known commits."""

from __future__ import annotations

from dataclasses import dataclass

from diffwith.domain.revision import is_uncommitted


@dataclass(frozen=True)
class GitCommit:
    """A file as it exists in one commit.

    Attributes:
        repo_path: Repository root
        path: Path of the file in this commit
        sha: Commit id, or the uncommitted sha for working tree changes
        previous_sha: Revision preceding this one for the file, if any
        previous_path: Path of the file in the previous revision when it
            was renamed; defaults to `path`
    """

    repo_path: str
    path: str
    sha: str
    previous_sha: str | None = None
    previous_path: str | None = None

    @property
    def is_uncommitted(self) -> bool:
        return is_uncommitted(self.sha)

    @property
    def previous_file_path(self) -> str:
        return self.previous_path or self.path
