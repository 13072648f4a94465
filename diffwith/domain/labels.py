"""Label derivation for comparison sides.

Both suffixes are derived together: the left side's outcome can clear the
right side's suffix, so the two are never computed independently.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from diffwith.domain.revision import (
    WORKING_TREE,
    WORKING_TREE_LABEL,
    is_deleted_or_missing,
    is_uncommitted,
    shorten_revision,
)

TITLE_SEPARATOR = " ↔ "


@dataclass(frozen=True)
class LabelFacts:
    """What labelling needs to know about one resolved side.

    Attributes:
        revision: Final revision after resolution and classification
        label_revision: Revision to describe the side with
        has_content: Whether a content reference was acquired
    """

    revision: str
    label_revision: str
    has_content: bool


def derive_labels(
    lhs: LabelFacts,
    rhs: LabelFacts,
    working_tree_label: str = WORKING_TREE_LABEL,
    legacy_suffixes: bool = False,
) -> tuple[str, str]:
    """Derive the (left, right) label suffixes for a comparison.

    Args:
        lhs: Facts about the baseline side
        rhs: Facts about the target side
        working_tree_label: Label shown for the uncommitted sha on the right
        legacy_suffixes: Reproduce the historical "deleted in X)" output with
            its unmatched parenthesis

    Returns:
        Tuple of (left suffix, right suffix); empty strings mean no qualifier
    """
    rhs_base = shorten_revision(rhs.label_revision, uncommitted=working_tree_label) or ""
    if not rhs.has_content:
        if is_uncommitted(rhs.revision):
            rhs_suffix = "deleted"
        elif not rhs_base and is_deleted_or_missing(rhs.revision):
            rhs_suffix = f"not in {working_tree_label}"
        else:
            rhs_suffix = f"deleted in {rhs_base}"
    elif not lhs.has_content:
        rhs_suffix = f"added in {rhs_base}"
    else:
        rhs_suffix = rhs_base

    # The baseline is always historical, so it never reads "Working Tree"
    lhs_suffix = ""
    if not is_deleted_or_missing(lhs.revision):
        lhs_suffix = shorten_revision(lhs.label_revision, uncommitted="") or ""

    if not lhs.has_content and rhs.revision == WORKING_TREE:
        if rhs.has_content:
            lhs_suffix = f"not in {lhs_suffix}"
            rhs_suffix = ""
        else:
            lhs_suffix = f"deleted in {lhs_suffix}"
            if legacy_suffixes:
                lhs_suffix += ")"

    return lhs_suffix, rhs_suffix


def format_side_title(path: str, suffix: str) -> str:
    """Label a side as its file name plus an optional parenthesised suffix."""
    name = PurePath(path).name
    return f"{name} ({suffix})" if suffix else name


def combine_titles(lhs_title: str | None, rhs_title: str | None) -> str | None:
    """Join both side labels; fall back to whichever one exists."""
    if lhs_title is not None and rhs_title is not None:
        return f"{lhs_title}{TITLE_SEPARATOR}{rhs_title}"
    return lhs_title or rhs_title
