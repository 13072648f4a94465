"""Content references: openable handles to a file at a revision."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath
from urllib.parse import quote, urlencode

from diffwith.domain.revision import WORKING_TREE, is_deleted_or_missing

URI_SCHEME = "diffwith"


def repo_relative_path(repo_path: str, path: str) -> str:
    """Express a file location as a repository-relative POSIX path."""
    if os.path.isabs(path):
        path = os.path.relpath(path, repo_path)
    return PurePath(path).as_posix()


@dataclass(frozen=True)
class ContentReference:
    """A file's content at one revision of a repository.

    Attributes:
        repo_path: Repository root the reference belongs to
        path: Repository-relative POSIX path of the file
        revision: Concrete revision, "" for the working tree file, or the
            deleted/missing sentinel for placeholder references
    """

    repo_path: str
    path: str
    revision: str = WORKING_TREE

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def working_file(cls, repo_path: str, path: str) -> ContentReference:
        return cls(repo_path=repo_path, path=path, revision=WORKING_TREE)

    @classmethod
    def for_revision(cls, revision: str, path: str, repo_path: str) -> ContentReference:
        return cls(repo_path=repo_path, path=path, revision=revision)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def is_working_tree(self) -> bool:
        return self.revision == WORKING_TREE

    @property
    def is_missing(self) -> bool:
        return is_deleted_or_missing(self.revision)

    @property
    def fs_path(self) -> Path:
        """Absolute path of the file in the working tree."""
        return Path(self.repo_path) / self.path

    @property
    def basename(self) -> str:
        return PurePosixPath(self.path).name

    def to_uri(self) -> str:
        """Render the reference as a URI a viewer can open.

        Working tree files become file:// URIs; everything else uses the
        diffwith scheme with the revision and repository in the query.
        """
        if self.is_working_tree:
            return self.fs_path.resolve().as_uri()
        query = urlencode({"ref": self.revision, "repo": self.repo_path})
        return f"{URI_SCHEME}:/{quote(self.path)}?{query}"

    def to_dict(self) -> dict:
        return {
            "repoPath": self.repo_path,
            "path": self.path,
            "revision": self.revision,
            "uri": self.to_uri(),
        }
