"""Tests for the compare-commit command.

Tests cover:
- One commit compared with its previous revision
- Two commits compared with each other
- Line selection
- Command link output
- Error exit codes for unknown commits
"""

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from diffwith.commands.compare_commit import cmd_compare_commit
from diffwith.config import Settings
from diffwith.domain.commit import GitCommit
from diffwith.domain.revision import DELETED_OR_MISSING_SHA
from diffwith.services.git_operations import GitReferenceError

SHA = "3f2a9c01d4e5b6a7c8d9e0f1a2b3c4d5e6f7a8b9"
PARENT_SHA = "1b2c3d4e5f60718293a4b5c6d7e8f9012a3b4c5d"


class TestCmdCompareCommit(unittest.TestCase):
    """Tests for cmd_compare_commit function."""

    def setUp(self):
        self.mock_git = MagicMock()
        self.mock_git.get_repo_root.return_value = "/repo"
        self.mock_git.get_commit_for_file = AsyncMock()
        self.git_patcher = patch(
            "diffwith.commands.compare_commit.GitOperationsService",
            return_value=self.mock_git,
        )
        self.git_patcher.start()

        self.settings_patcher = patch(
            "diffwith.commands.compare_commit.load_command_settings",
            return_value=Settings(),
        )
        self.settings_patcher.start()

        self.run_patcher = patch(
            "diffwith.commands.compare_commit.run_comparison", return_value=0
        )
        self.mock_run = self.run_patcher.start()

    def tearDown(self):
        self.git_patcher.stop()
        self.settings_patcher.stop()
        self.run_patcher.stop()

    def test_single_commit_compares_with_previous(self):
        self.mock_git.get_commit_for_file.return_value = GitCommit(
            repo_path="/repo", path="a.ts", sha=SHA, previous_sha=PARENT_SHA
        )

        result = cmd_compare_commit(repo_path=".", path="/repo/a.ts", sha="HEAD")

        self.assertEqual(result, 0)
        self.mock_git.get_commit_for_file.assert_awaited_once_with("/repo", "/repo/a.ts", "HEAD")
        request = self.mock_run.call_args[0][0]
        self.assertEqual(request.lhs.revision, PARENT_SHA)
        self.assertEqual(request.rhs.revision, SHA)

    def test_added_file_compares_with_missing(self):
        self.mock_git.get_commit_for_file.return_value = GitCommit(
            repo_path="/repo", path="a.ts", sha=SHA
        )

        cmd_compare_commit(repo_path=".", path="/repo/a.ts", sha=SHA)

        request = self.mock_run.call_args[0][0]
        self.assertEqual(request.lhs.revision, DELETED_OR_MISSING_SHA)

    def test_two_commits(self):
        self.mock_git.get_commit_for_file.side_effect = [
            GitCommit(repo_path="/repo", path="a.ts", sha=PARENT_SHA),
            GitCommit(repo_path="/repo", path="a.ts", sha=SHA),
        ]

        cmd_compare_commit(repo_path=".", path="/repo/a.ts", sha="v1", sha2="v2")

        self.assertEqual(self.mock_git.get_commit_for_file.await_count, 2)
        request = self.mock_run.call_args[0][0]
        self.assertEqual(request.lhs.revision, PARENT_SHA)
        self.assertEqual(request.rhs.revision, SHA)

    def test_line_is_carried_on_request(self):
        self.mock_git.get_commit_for_file.return_value = GitCommit(
            repo_path="/repo", path="a.ts", sha=SHA, previous_sha=PARENT_SHA
        )

        cmd_compare_commit(repo_path=".", path="/repo/a.ts", sha=SHA, line=9)

        self.assertEqual(self.mock_run.call_args[0][0].line, 9)

    @patch("builtins.print")
    def test_as_link_prints_command_uri(self, mock_print):
        self.mock_git.get_commit_for_file.return_value = GitCommit(
            repo_path="/repo", path="a.ts", sha=SHA, previous_sha=PARENT_SHA
        )

        result = cmd_compare_commit(repo_path=".", path="/repo/a.ts", sha=SHA, as_link=True)

        self.assertEqual(result, 0)
        self.mock_run.assert_not_called()
        self.assertTrue(mock_print.call_args[0][0].startswith("command:diffwith.compare?"))

    @patch("builtins.print")
    def test_unknown_commit_fails(self, mock_print):
        self.mock_git.get_commit_for_file.side_effect = GitReferenceError(
            "Unable to resolve revision 'nope' in /repo"
        )

        result = cmd_compare_commit(repo_path=".", path="/repo/a.ts", sha="nope")

        self.assertEqual(result, 1)
        self.mock_run.assert_not_called()
        self.assertIn("Unable to resolve revision", mock_print.call_args[0][0])


class TestCmdCompareCommitWithoutRepository(unittest.TestCase):
    """Tests for cmd_compare_commit against directories git cannot run in."""

    @patch("builtins.print")
    def test_nonexistent_repo_directory_fails_cleanly(self, mock_print):
        result = cmd_compare_commit(repo_path="/no/such/dir/here", path="a.ts", sha="HEAD")

        self.assertEqual(result, 1)
        self.assertTrue(mock_print.call_args[0][0].startswith("Error: Not a git repository"))


if __name__ == "__main__":
    unittest.main()
