"""Domain models for diffwith."""

from diffwith.domain.commit import GitCommit
from diffwith.domain.comparison import (
    ComparisonDirective,
    ComparisonRequest,
    ResolvedSide,
    RevisionSide,
    Selection,
    ShowOptions,
    ViewColumn,
)
from diffwith.domain.content import ContentReference
from diffwith.domain.file_status import FileStatus, FileStatusCode
from diffwith.domain.labels import LabelFacts, combine_titles, derive_labels, format_side_title
from diffwith.domain.lookup import LookupOutcome, LookupResult
from diffwith.domain.revision import (
    DELETED_OR_MISSING_SHA,
    UNCOMMITTED_SHA,
    WORKING_TREE,
    is_uncommitted,
    shorten_revision,
)
from diffwith.domain.viewer_kind import ViewerKind

__all__ = [
    "ComparisonDirective",
    "ComparisonRequest",
    "ContentReference",
    "DELETED_OR_MISSING_SHA",
    "FileStatus",
    "FileStatusCode",
    "GitCommit",
    "LabelFacts",
    "LookupOutcome",
    "LookupResult",
    "ResolvedSide",
    "RevisionSide",
    "Selection",
    "ShowOptions",
    "UNCOMMITTED_SHA",
    "ViewColumn",
    "ViewerKind",
    "WORKING_TREE",
    "combine_titles",
    "derive_labels",
    "format_side_title",
    "is_uncommitted",
    "shorten_revision",
]
