"""Domain models for comparison requests and directives.

Parse-once pattern: raw command arguments are parsed into type-safe models at
the boundary. Every model is immutable; the resolver produces new values at
each stage instead of editing the request in place.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import quote, unquote

from diffwith.domain.commit import GitCommit
from diffwith.domain.content import ContentReference
from diffwith.domain.revision import DELETED_OR_MISSING_SHA, WORKING_TREE

COMPARE_COMMAND = "diffwith.compare"


# ============================================================
# Display Options
# ============================================================


class ViewColumn(Enum):
    """Editor pane the comparison opens in."""

    ACTIVE = -1
    BESIDE = -2
    ONE = 1
    TWO = 2
    THREE = 3

    @classmethod
    def from_string(cls, value: str) -> ViewColumn:
        """Parse a ViewColumn from its name or number.

        Raises:
            ValueError: If value names no column

        Examples:
            >>> ViewColumn.from_string("beside")
            <ViewColumn.BESIDE: -2>
            >>> ViewColumn.from_string("2")
            <ViewColumn.TWO: 2>
        """
        value_lower = value.strip().lower()
        for member in cls:
            if member.name.lower() == value_lower or str(member.value) == value_lower:
                return member
        valid_values = [m.name.lower() for m in cls]
        raise ValueError(
            f"Invalid view column: {value}. Must be one of: {', '.join(valid_values)}"
        )


@dataclass(frozen=True)
class Selection:
    """A range in the viewer; start == end for a plain cursor position."""

    start_line: int
    start_character: int
    end_line: int
    end_character: int

    @classmethod
    def at_line(cls, line: int) -> Selection:
        return cls(start_line=line, start_character=0, end_line=line, end_character=0)

    @classmethod
    def from_dict(cls, data: dict) -> Selection:
        return cls(
            start_line=data.get("startLine", 0),
            start_character=data.get("startCharacter", 0),
            end_line=data.get("endLine", data.get("startLine", 0)),
            end_character=data.get("endCharacter", 0),
        )

    def to_dict(self) -> dict:
        return {
            "startLine": self.start_line,
            "startCharacter": self.start_character,
            "endLine": self.end_line,
            "endCharacter": self.end_character,
        }


@dataclass(frozen=True)
class ShowOptions:
    """Viewer placement hints."""

    view_column: ViewColumn | None = None
    preserve_focus: bool = False
    preview: bool | None = None
    selection: Selection | None = None

    @classmethod
    def from_dict(cls, data: dict) -> ShowOptions:
        view_column = data.get("viewColumn")
        selection = data.get("selection")
        return cls(
            view_column=ViewColumn(view_column) if view_column is not None else None,
            preserve_focus=data.get("preserveFocus", False),
            preview=data.get("preview"),
            selection=Selection.from_dict(selection) if selection else None,
        )

    def to_dict(self) -> dict:
        data: dict = {"preserveFocus": self.preserve_focus}
        if self.view_column is not None:
            data["viewColumn"] = self.view_column.value
        if self.preview is not None:
            data["preview"] = self.preview
        if self.selection is not None:
            data["selection"] = self.selection.to_dict()
        return data


# ============================================================
# Requests
# ============================================================


@dataclass(frozen=True)
class RevisionSide:
    """One side of a comparison.

    Attributes:
        revision: Revision marker (sha, ref, "" for the working tree, or the
            deleted/missing sentinel)
        path: File location; stays the same through resolution
        title: Explicit label; derived when None
    """

    revision: str
    path: str
    title: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> RevisionSide:
        return cls(
            revision=data.get("sha", WORKING_TREE),
            path=data.get("path", data.get("uri", "")),
            title=data.get("title"),
        )

    def to_dict(self) -> dict:
        data = {"sha": self.revision, "path": self.path}
        if self.title is not None:
            data["title"] = self.title
        return data


@dataclass(frozen=True)
class ComparisonRequest:
    """An unresolved two-sided comparison.

    A request missing the repository or either side is not executable;
    resolving it is a no-op.
    """

    repo_path: str | None = None
    lhs: RevisionSide | None = None
    rhs: RevisionSide | None = None
    line: int | None = None
    show_options: ShowOptions | None = None

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict) -> ComparisonRequest:
        """Parse a request from raw command arguments.

        Args:
            data: Dictionary with repoPath, lhs, rhs, line and showOptions keys;
                every key is optional

        Returns:
            Typed ComparisonRequest instance
        """
        lhs = data.get("lhs")
        rhs = data.get("rhs")
        show_options = data.get("showOptions")
        return cls(
            repo_path=data.get("repoPath"),
            lhs=RevisionSide.from_dict(lhs) if lhs is not None else None,
            rhs=RevisionSide.from_dict(rhs) if rhs is not None else None,
            line=data.get("line"),
            show_options=ShowOptions.from_dict(show_options) if show_options is not None else None,
        )

    @classmethod
    def from_command_uri(cls, link: str) -> ComparisonRequest:
        """Parse a request from a `command:` link or its bare JSON arguments.

        Args:
            link: Output of to_command_uri, or the JSON object it encodes

        Returns:
            Typed ComparisonRequest instance

        Raises:
            ValueError: If the link does not carry a JSON object
        """
        payload = link.strip()
        if payload.startswith("command:"):
            _, separator, payload = payload.partition("?")
            if not separator:
                raise ValueError(f"Command link has no arguments: {link}")
            payload = unquote(payload)

        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid comparison arguments: {e}") from e
        if not isinstance(data, dict):
            raise ValueError("Invalid comparison arguments: expected a JSON object")
        try:
            return cls.from_dict(data)
        except (AttributeError, TypeError) as e:
            raise ValueError(f"Invalid comparison arguments: {e}") from e

    @classmethod
    def from_commits(
        cls,
        commit1: GitCommit,
        commit2: GitCommit | None = None,
    ) -> ComparisonRequest:
        """Build a request from one or two known commits.

        - One uncommitted commit: HEAD against the working tree.
        - One historical commit: its previous revision against the commit
          (the missing sentinel when the file had no previous revision).
        - Two commits: commit1 against commit2.
        """
        if commit2 is not None:
            return cls(
                repo_path=commit1.repo_path,
                lhs=RevisionSide(revision=commit1.sha, path=commit1.path),
                rhs=RevisionSide(revision=commit2.sha, path=commit2.path),
            )

        if commit1.is_uncommitted:
            return cls(
                repo_path=commit1.repo_path,
                lhs=RevisionSide(revision="HEAD", path=commit1.path),
                rhs=RevisionSide(revision=WORKING_TREE, path=commit1.path),
            )

        previous = commit1.previous_sha if commit1.previous_sha is not None else DELETED_OR_MISSING_SHA
        return cls(
            repo_path=commit1.repo_path,
            lhs=RevisionSide(revision=previous, path=commit1.previous_file_path),
            rhs=RevisionSide(revision=commit1.sha, path=commit1.path),
        )

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def is_executable(self) -> bool:
        return bool(self.repo_path) and self.lhs is not None and self.rhs is not None

    def to_dict(self) -> dict:
        data: dict = {}
        if self.repo_path is not None:
            data["repoPath"] = self.repo_path
        if self.lhs is not None:
            data["lhs"] = self.lhs.to_dict()
        if self.rhs is not None:
            data["rhs"] = self.rhs.to_dict()
        if self.line is not None:
            data["line"] = self.line
        if self.show_options is not None:
            data["showOptions"] = self.show_options.to_dict()
        return data

    def to_command_uri(self, command: str = COMPARE_COMMAND) -> str:
        """Encode the request as a `command:` link for markdown hovers."""
        return f"command:{command}?{quote(json.dumps(self.to_dict()))}"


# ============================================================
# Resolution Results
# ============================================================


@dataclass(frozen=True)
class ResolvedSide:
    """Outcome of resolving one side.

    Attributes:
        side: The side as requested
        revision: Final revision; concrete, "" for the working tree, or the
            deleted/missing sentinel
        label_revision: Revision used when labelling; may keep the requested
            marker when the final revision is the missing sentinel
        content: Reference to the content, or None when it does not exist
        suffix: Descriptive label fragment ("deleted", "added in 1a2b3c4d")
    """

    side: RevisionSide
    revision: str
    label_revision: str
    content: ContentReference | None = None
    suffix: str = ""

    @property
    def path(self) -> str:
        return self.side.path

    @property
    def has_content(self) -> bool:
        return self.content is not None


@dataclass(frozen=True)
class ComparisonDirective:
    """Everything a viewer needs to open a comparison."""

    lhs: ContentReference
    rhs: ContentReference
    title: str | None
    show_options: ShowOptions = field(default_factory=ShowOptions)

    def to_dict(self) -> dict:
        return {
            "lhs": self.lhs.to_dict(),
            "rhs": self.rhs.to_dict(),
            "title": self.title,
            "showOptions": self.show_options.to_dict(),
        }
