"""Tests for label derivation.

Tests cover:
- Right side suffixes: plain, added, deleted, not in working tree
- Left side suffixes: plain, missing baseline, not in / deleted in
- The left side clearing the right suffix
- Legacy "deleted in X)" output
- Side titles and the combined title
"""

import unittest

from diffwith.domain.labels import (
    LabelFacts,
    combine_titles,
    derive_labels,
    format_side_title,
)
from diffwith.domain.revision import DELETED_OR_MISSING_SHA, UNCOMMITTED_SHA, WORKING_TREE

OLD_SHA = "1b2c3d4e5f60718293a4b5c6d7e8f9012a3b4c5d"
NEW_SHA = "3f2a9c01d4e5b6a7c8d9e0f1a2b3c4d5e6f7a8b9"


def facts(revision: str, has_content: bool = True, label_revision: str | None = None) -> LabelFacts:
    """Create LabelFacts; the label revision defaults to the revision."""
    return LabelFacts(
        revision=revision,
        label_revision=revision if label_revision is None else label_revision,
        has_content=has_content,
    )


class TestRightSuffix(unittest.TestCase):
    """Tests for the right side's suffix."""

    def test_both_sides_present_shows_short_revisions(self):
        lhs, rhs = derive_labels(facts(OLD_SHA), facts(NEW_SHA))

        self.assertEqual(lhs, "1b2c3d4e")
        self.assertEqual(rhs, "3f2a9c01")

    def test_working_tree_with_content_has_no_qualifier(self):
        lhs, rhs = derive_labels(facts(OLD_SHA), facts(WORKING_TREE))

        self.assertEqual(rhs, "")
        self.assertEqual(lhs, "1b2c3d4e")

    def test_uncommitted_with_content_reads_working_tree(self):
        _, rhs = derive_labels(facts(OLD_SHA), facts(UNCOMMITTED_SHA))

        self.assertEqual(rhs, "Working Tree")

    def test_custom_working_tree_label(self):
        _, rhs = derive_labels(
            facts(OLD_SHA), facts(UNCOMMITTED_SHA), working_tree_label="Local Changes"
        )

        self.assertEqual(rhs, "Local Changes")

    def test_uncommitted_without_content_is_deleted(self):
        _, rhs = derive_labels(facts(OLD_SHA), facts(UNCOMMITTED_SHA, has_content=False))

        self.assertEqual(rhs, "deleted")

    def test_deleted_in_commit_uses_prior_revision(self):
        rhs_facts = facts(DELETED_OR_MISSING_SHA, has_content=False, label_revision=NEW_SHA)

        _, rhs = derive_labels(facts(OLD_SHA), rhs_facts)

        self.assertEqual(rhs, "deleted in 3f2a9c01")

    def test_missing_without_label_is_not_in_working_tree(self):
        rhs_facts = facts(DELETED_OR_MISSING_SHA, has_content=False)

        _, rhs = derive_labels(facts(OLD_SHA), rhs_facts)

        self.assertEqual(rhs, "not in Working Tree")

    def test_missing_left_content_means_added(self):
        lhs_facts = facts(DELETED_OR_MISSING_SHA, has_content=False)

        lhs, rhs = derive_labels(lhs_facts, facts(NEW_SHA))

        self.assertEqual(rhs, "added in 3f2a9c01")
        self.assertEqual(lhs, "")


class TestLeftSuffix(unittest.TestCase):
    """Tests for the left side's suffix and its effect on the right."""

    def test_missing_baseline_never_shows_a_revision(self):
        lhs_facts = facts(DELETED_OR_MISSING_SHA, has_content=False, label_revision=OLD_SHA)

        lhs, _ = derive_labels(lhs_facts, facts(NEW_SHA))

        self.assertEqual(lhs, "")

    def test_baseline_never_reads_working_tree(self):
        lhs, _ = derive_labels(facts(UNCOMMITTED_SHA), facts(NEW_SHA))

        self.assertEqual(lhs, "")

    def test_not_in_baseline_clears_right_suffix(self):
        lhs, rhs = derive_labels(facts(OLD_SHA, has_content=False), facts(WORKING_TREE))

        self.assertEqual(lhs, "not in 1b2c3d4e")
        self.assertEqual(rhs, "")

    def test_deleted_everywhere_is_deleted_in_baseline(self):
        lhs, _ = derive_labels(
            facts(OLD_SHA, has_content=False),
            facts(WORKING_TREE, has_content=False),
        )

        self.assertEqual(lhs, "deleted in 1b2c3d4e")

    def test_legacy_suffix_keeps_unmatched_parenthesis(self):
        lhs, _ = derive_labels(
            facts(OLD_SHA, has_content=False),
            facts(WORKING_TREE, has_content=False),
            legacy_suffixes=True,
        )

        self.assertEqual(lhs, "deleted in 1b2c3d4e)")

    def test_legacy_flag_does_not_touch_other_labels(self):
        lhs, rhs = derive_labels(facts(OLD_SHA), facts(NEW_SHA), legacy_suffixes=True)

        self.assertEqual(lhs, "1b2c3d4e")
        self.assertEqual(rhs, "3f2a9c01")

    def test_missing_baseline_against_commit_keeps_right_added(self):
        lhs, rhs = derive_labels(facts(OLD_SHA, has_content=False), facts(NEW_SHA))

        self.assertEqual(lhs, "1b2c3d4e")
        self.assertEqual(rhs, "added in 3f2a9c01")


class TestTitles(unittest.TestCase):
    """Tests for side titles and the combined title."""

    def test_side_title_uses_basename(self):
        self.assertEqual(format_side_title("src/app/a.ts", ""), "a.ts")

    def test_side_title_appends_suffix(self):
        self.assertEqual(format_side_title("src/a.ts", "deleted"), "a.ts (deleted)")

    def test_combined_title_joins_both(self):
        self.assertEqual(combine_titles("a.ts (1b2c3d4e)", "a.ts"), "a.ts (1b2c3d4e) ↔ a.ts")

    def test_combined_title_falls_back_to_single_side(self):
        self.assertEqual(combine_titles(None, "a.ts (added in 3f2a9c01)"), "a.ts (added in 3f2a9c01)")
        self.assertEqual(combine_titles("a.ts", None), "a.ts")

    def test_combined_title_without_labels_is_none(self):
        self.assertIsNone(combine_titles(None, None))


if __name__ == "__main__":
    unittest.main()
