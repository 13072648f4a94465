"""Comparison resolver service.

Turns a ComparisonRequest into a ComparisonDirective and hands it to a
viewer. The pipeline runs in four stages, each producing new immutable
values:

1. Resolve both revision markers concurrently.
2. Classify the right side: a file the commit deleted becomes missing.
3. Acquire content references for both sides concurrently.
4. Derive labels and the title, then assemble the directive.

Following Martin Fowler's Service Layer pattern with constructor-based
dependency injection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from diffwith.domain.comparison import (
    ComparisonDirective,
    ComparisonRequest,
    ResolvedSide,
    Selection,
    ShowOptions,
    ViewColumn,
)
from diffwith.domain.content import ContentReference, repo_relative_path
from diffwith.domain.file_status import FileStatus
from diffwith.domain.labels import LabelFacts, combine_titles, derive_labels, format_side_title
from diffwith.domain.lookup import gather_pair
from diffwith.domain.revision import (
    DELETED_OR_MISSING_SHA,
    WORKING_TREE_LABEL,
    is_deleted_or_missing,
)
from diffwith.infrastructure.messages import show_generic_error_message
from diffwith.infrastructure.viewer.base import DiffViewer

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Unable to open compare"


class RepositoryQueries(Protocol):
    """Repository lookups the resolver depends on.

    GitOperationsService satisfies this protocol structurally.
    """

    async def resolve_reference(
        self, repo_path: str, ref: str, path: str | None = None
    ) -> str: ...

    async def get_file_status_for_commit(
        self, repo_path: str, path: str, ref: str
    ) -> FileStatus | None: ...

    async def get_versioned_content(
        self, repo_path: str, path: str, ref: str
    ) -> ContentReference | None: ...


@dataclass
class ComparisonResolver:
    """Resolves comparison requests and opens them in a viewer.

    Attributes:
        queries: Repository lookups (injected)
        viewer: Viewer the finished directive is delegated to (injected)
        working_tree_label: Label for uncommitted changes on the right side
        legacy_labels: Keep the historical "deleted in X)" label verbatim
    """

    queries: RepositoryQueries
    viewer: DiffViewer
    working_tree_label: str = WORKING_TREE_LABEL
    legacy_labels: bool = False

    # ============================================================
    # Public API
    # ============================================================

    async def execute(self, request: ComparisonRequest) -> ComparisonDirective | None:
        """Resolve a request and open it in the viewer.

        Any failure is logged and reported to the user as a single generic
        message; nothing is opened in that case.

        Returns:
            The directive that was opened, or None for a no-op or a failure
        """
        if not request.is_executable:
            return None

        try:
            directive = await self.resolve(request)
            assert directive is not None
            await self.viewer.open_comparison(
                directive.lhs,
                directive.rhs,
                directive.title,
                directive.show_options,
            )
            return directive
        except Exception as e:
            logger.error(
                "%s: lhs=%r rhs=%r repo=%s: %s",
                GENERIC_ERROR_MESSAGE,
                request.lhs,
                request.rhs,
                request.repo_path,
                e,
                exc_info=e,
            )
            show_generic_error_message(GENERIC_ERROR_MESSAGE)
            return None

    async def resolve(self, request: ComparisonRequest) -> ComparisonDirective | None:
        """Resolve a request into a directive without opening it.

        Returns:
            The directive, or None when the request is not executable

        Raises:
            Exception: Whatever a repository lookup raised
        """
        if not request.is_executable:
            return None
        assert request.repo_path is not None

        lhs, rhs = await self._resolve_revisions(request)
        rhs = await self._classify_target(request.repo_path, rhs)
        lhs, rhs = await self._acquire_content(request.repo_path, lhs, rhs)
        lhs, rhs = self._apply_labels(lhs, rhs)

        return ComparisonDirective(
            lhs=lhs.content or self._placeholder(request.repo_path, lhs),
            rhs=rhs.content or self._placeholder(request.repo_path, rhs),
            title=self._build_title(lhs, rhs),
            show_options=self._finalize_show_options(request),
        )

    # ============================================================
    # Pipeline Stages
    # ============================================================

    async def _resolve_revisions(
        self, request: ComparisonRequest
    ) -> tuple[ResolvedSide, ResolvedSide]:
        repo_path, lhs, rhs = request.repo_path, request.lhs, request.rhs
        assert repo_path is not None and lhs is not None and rhs is not None

        lhs_revision, rhs_revision = await gather_pair(
            self.queries.resolve_reference(repo_path, lhs.revision, lhs.path),
            self.queries.resolve_reference(repo_path, rhs.revision, rhs.path),
        )
        assert lhs_revision is not None and rhs_revision is not None

        # A baseline that resolved to missing is still described by what was asked for
        lhs_label = lhs.revision if is_deleted_or_missing(lhs_revision) else lhs_revision
        return (
            ResolvedSide(side=lhs, revision=lhs_revision, label_revision=lhs_label),
            ResolvedSide(side=rhs, revision=rhs_revision, label_revision=rhs.revision),
        )

    async def _classify_target(self, repo_path: str, rhs: ResolvedSide) -> ResolvedSide:
        """Mark the right side missing when its commit deleted the file."""
        if not rhs.revision or is_deleted_or_missing(rhs.revision):
            return rhs

        status = await self.queries.get_file_status_for_commit(repo_path, rhs.path, rhs.revision)
        if status is not None and status.is_deleted:
            return replace(rhs, revision=DELETED_OR_MISSING_SHA)
        return replace(rhs, label_revision=rhs.revision)

    async def _acquire_content(
        self,
        repo_path: str,
        lhs: ResolvedSide,
        rhs: ResolvedSide,
    ) -> tuple[ResolvedSide, ResolvedSide]:
        lhs_content, rhs_content = await gather_pair(
            self.queries.get_versioned_content(repo_path, lhs.path, lhs.revision),
            self.queries.get_versioned_content(repo_path, rhs.path, rhs.revision),
        )
        return replace(lhs, content=lhs_content), replace(rhs, content=rhs_content)

    def _apply_labels(
        self, lhs: ResolvedSide, rhs: ResolvedSide
    ) -> tuple[ResolvedSide, ResolvedSide]:
        lhs_suffix, rhs_suffix = derive_labels(
            LabelFacts(lhs.revision, lhs.label_revision, lhs.has_content),
            LabelFacts(rhs.revision, rhs.label_revision, rhs.has_content),
            working_tree_label=self.working_tree_label,
            legacy_suffixes=self.legacy_labels,
        )
        return replace(lhs, suffix=lhs_suffix), replace(rhs, suffix=rhs_suffix)

    # ============================================================
    # Directive Assembly
    # ============================================================

    @staticmethod
    def _build_title(lhs: ResolvedSide, rhs: ResolvedSide) -> str | None:
        lhs_title = lhs.side.title
        if lhs_title is None and (lhs.has_content or lhs.suffix):
            lhs_title = format_side_title(lhs.path, lhs.suffix)

        rhs_title = rhs.side.title
        if rhs_title is None:
            rhs_title = format_side_title(rhs.path, rhs.suffix)

        return combine_titles(lhs_title, rhs_title)

    @staticmethod
    def _finalize_show_options(request: ComparisonRequest) -> ShowOptions:
        show_options = request.show_options or ShowOptions()
        if show_options.view_column is None:
            show_options = replace(show_options, view_column=ViewColumn.ACTIVE)
        if request.line is not None and request.line != 0:
            show_options = replace(show_options, selection=Selection.at_line(request.line))
        return show_options

    @staticmethod
    def _placeholder(repo_path: str, side: ResolvedSide) -> ContentReference:
        return ContentReference.for_revision(
            DELETED_OR_MISSING_SHA,
            repo_relative_path(repo_path, side.path),
            repo_path,
        )
