"""Domain models for a file's change status within a commit.

Parse-once pattern: `git --name-status` output is parsed into FileStatus at
the boundary so services never deal with raw status lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FileStatusCode(Enum):
    """Single-letter change codes reported by git."""

    ADDED = "A"
    COPIED = "C"
    DELETED = "D"
    MODIFIED = "M"
    RENAMED = "R"
    TYPE_CHANGED = "T"
    UNMERGED = "U"
    UNKNOWN = "X"

    @classmethod
    def from_letter(cls, letter: str) -> FileStatusCode:
        for member in cls:
            if member.value == letter:
                return member
        return cls.UNKNOWN


@dataclass(frozen=True)
class FileStatus:
    """Status of one file in one commit.

    Attributes:
        code: Change code (added, deleted, renamed, ...)
        path: Path of the file after the change
        original_path: Path before the change for renames and copies
        similarity: Rename/copy similarity percentage, when reported
    """

    code: FileStatusCode
    path: str
    original_path: str | None = None
    similarity: int | None = None

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_name_status_line(cls, line: str) -> FileStatus | None:
        """Parse a single `--name-status` line.

        Examples:
            "M\\tsrc/app.py"
            "R087\\told/name.py\\tnew/name.py"

        Returns:
            Parsed FileStatus, or None for blank or malformed lines
        """
        parts = line.rstrip("\n").split("\t")
        if len(parts) < 2 or not parts[0]:
            return None

        status = parts[0]
        code = FileStatusCode.from_letter(status[0])
        similarity = int(status[1:]) if status[1:].isdigit() else None

        if code in (FileStatusCode.RENAMED, FileStatusCode.COPIED) and len(parts) >= 3:
            return cls(code=code, path=parts[2], original_path=parts[1], similarity=similarity)
        return cls(code=code, path=parts[1], similarity=similarity)

    @classmethod
    def parse_name_status(cls, output: str) -> list[FileStatus]:
        """Parse the full `--name-status` output of a git command."""
        statuses = []
        for line in output.splitlines():
            status = cls.from_name_status_line(line)
            if status is not None:
                statuses.append(status)
        return statuses

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def is_deleted(self) -> bool:
        return self.code == FileStatusCode.DELETED

    @property
    def is_added(self) -> bool:
        return self.code == FileStatusCode.ADDED

    @property
    def is_rename(self) -> bool:
        return self.code == FileStatusCode.RENAMED
