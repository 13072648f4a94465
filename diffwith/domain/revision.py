"""Revision markers and helpers.

A revision marker is one of:
- a concrete commit id (full or abbreviated sha, or any ref git understands)
- the working tree: an empty string, or the all-zero uncommitted sha
- the deleted/missing sentinel: content known not to exist at that point
"""

from __future__ import annotations

import re


# ============================================================
# Constants
# ============================================================

WORKING_TREE = ""
UNCOMMITTED_SHA = "0000000000000000000000000000000000000000"
DELETED_OR_MISSING_SHA = "0000000000000000000000000000000000000000-"

WORKING_TREE_LABEL = "Working Tree"
SHORT_SHA_LENGTH = 8

_UNCOMMITTED_RE = re.compile(r"^0{40}(?:\^|:)?$")
_SHA_RE = re.compile(r"^[0-9a-f]{40}$")
_SHORT_SHA_RE = re.compile(r"^[0-9a-f]{7,40}$")


# ============================================================
# Predicates
# ============================================================


def is_uncommitted(revision: str | None) -> bool:
    """Whether the revision is the uncommitted (working copy) sha."""
    return bool(revision) and _UNCOMMITTED_RE.match(revision) is not None


def is_working_tree(revision: str | None) -> bool:
    """Whether the revision denotes the working copy (empty or uncommitted)."""
    return revision == WORKING_TREE or is_uncommitted(revision)


def is_deleted_or_missing(revision: str | None) -> bool:
    return revision == DELETED_OR_MISSING_SHA


def is_sha(revision: str | None, allow_short: bool = False) -> bool:
    """Whether the revision looks like a commit sha.

    Args:
        revision: Revision marker to test
        allow_short: Accept abbreviated shas (7+ hex characters)
    """
    if not revision:
        return False
    pattern = _SHORT_SHA_RE if allow_short else _SHA_RE
    return pattern.match(revision) is not None


def is_resolve_required(revision: str | None) -> bool:
    """Whether a revision still needs to be turned into a concrete sha.

    Working-tree markers, the missing sentinel and full shas are already
    concrete; resolving them again must not change them.
    """
    if revision is None:
        return False
    if is_working_tree(revision) or is_deleted_or_missing(revision):
        return False
    return not is_sha(revision)


# ============================================================
# Formatting
# ============================================================


def shorten_revision(
    revision: str | None,
    working: str = "",
    uncommitted: str = WORKING_TREE_LABEL,
    deleted_or_missing: str = "",
) -> str | None:
    """Produce a short, human-readable form of a revision marker.

    Args:
        revision: Revision marker to shorten
        working: Label substituted for the empty working-tree marker
        uncommitted: Label substituted for the uncommitted sha
        deleted_or_missing: Label substituted for the missing sentinel

    Returns:
        The shortened form, or None when no revision was given

    Examples:
        >>> shorten_revision("3f2a9c01d4e5b6a7c8d9e0f1a2b3c4d5e6f7a8b9")
        '3f2a9c01'
        >>> shorten_revision("HEAD")
        'HEAD'
        >>> shorten_revision("0000000000000000000000000000000000000000")
        'Working Tree'
    """
    if revision is None:
        return None
    if revision == WORKING_TREE:
        return working
    if is_uncommitted(revision):
        return uncommitted
    if is_deleted_or_missing(revision):
        return deleted_or_missing
    if is_sha(revision, allow_short=True):
        return revision[:SHORT_SHA_LENGTH]
    return revision
