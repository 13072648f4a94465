"""CLI entry point for diffwith.

Usage:
    python -m diffwith <command> [options]
    diffwith <command> [options]

Commands:
    compare         Compare a file at two revisions
    compare-commit  Compare a file across a commit (or two commits)
    open            Open a comparison from a command link
"""

import argparse
import sys

from diffwith.commands.compare import cmd_compare
from diffwith.commands.compare_commit import cmd_compare_commit
from diffwith.commands.open_link import cmd_open
from diffwith.domain.comparison import ViewColumn
from diffwith.domain.viewer_kind import ViewerKind
from diffwith.logging_config import setup_logging


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo",
        default=".",
        help="Any path inside the repository (default: current directory)",
    )
    parser.add_argument(
        "--line",
        type=int,
        help="0-based line to place the cursor on",
    )
    parser.add_argument(
        "--viewer",
        choices=[k.value for k in ViewerKind],
        help="How to open the comparison (default: from config, else tool)",
    )
    parser.add_argument(
        "--config",
        help="Settings file (default: <repo>/.diffwith.yml)",
    )
    parser.add_argument(
        "--as-link",
        action="store_true",
        help="Print a command link for the comparison instead of opening it",
    )


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Open git file comparisons in a diff viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  compare         Compare a file at two revisions
  compare-commit  Compare a file across a commit (or two commits)
  open            Open a comparison from a command link

Examples:
  diffwith compare --lhs-sha HEAD --lhs-path src/app.py
  diffwith compare --lhs-sha v1.0 --lhs-path old.py --rhs-sha main --rhs-path new.py
  diffwith compare-commit --sha 3f2a9c01 --path src/app.py
  diffwith compare-commit --sha 3f2a9c01 --sha2 HEAD --path src/app.py --viewer console
  diffwith open "$(diffwith compare --lhs-sha HEAD --lhs-path src/app.py --as-link)"
        """,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output, including every failed git command",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # compare command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare a file at two revisions",
    )
    parser_compare.add_argument(
        "--lhs-sha",
        required=True,
        help="Baseline revision (sha, branch, HEAD, ...)",
    )
    parser_compare.add_argument(
        "--lhs-path",
        required=True,
        help="Baseline file path",
    )
    parser_compare.add_argument(
        "--rhs-sha",
        default="",
        help="Target revision (default: working tree)",
    )
    parser_compare.add_argument(
        "--rhs-path",
        help="Target file path (default: --lhs-path)",
    )
    parser_compare.add_argument("--lhs-title", help="Explicit baseline label")
    parser_compare.add_argument("--rhs-title", help="Explicit target label")
    parser_compare.add_argument(
        "--view-column",
        choices=[c.name.lower() for c in ViewColumn],
        help="Pane to open the comparison in (default: active)",
    )
    _add_common_arguments(parser_compare)

    # compare-commit command
    parser_compare_commit = subparsers.add_parser(
        "compare-commit",
        help="Compare a file across a commit (or two commits)",
    )
    parser_compare_commit.add_argument(
        "--path",
        required=True,
        help="File to compare",
    )
    parser_compare_commit.add_argument(
        "--sha",
        required=True,
        help='Commit to show ("" for uncommitted changes)',
    )
    parser_compare_commit.add_argument(
        "--sha2",
        help="Second commit to compare against",
    )
    _add_common_arguments(parser_compare_commit)

    # open command
    parser_open = subparsers.add_parser(
        "open",
        help="Open a comparison from a command link",
    )
    parser_open.add_argument(
        "link",
        help="Link printed by --as-link, or its JSON arguments",
    )
    parser_open.add_argument(
        "--viewer",
        choices=[k.value for k in ViewerKind],
        help="How to open the comparison (default: from config, else tool)",
    )
    parser_open.add_argument(
        "--config",
        help="Settings file (default: <repoPath>/.diffwith.yml)",
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        setup_logging("DEBUG")

    # Route to command implementations with explicit parameters
    if args.command == "compare":
        return cmd_compare(
            repo_path=args.repo,
            lhs_sha=args.lhs_sha,
            lhs_path=args.lhs_path,
            rhs_sha=args.rhs_sha,
            rhs_path=args.rhs_path,
            lhs_title=args.lhs_title,
            rhs_title=args.rhs_title,
            line=args.line,
            view_column=args.view_column,
            viewer=args.viewer,
            config_path=args.config,
            as_link=args.as_link,
        )

    elif args.command == "compare-commit":
        return cmd_compare_commit(
            repo_path=args.repo,
            path=args.path,
            sha=args.sha,
            sha2=args.sha2,
            line=args.line,
            viewer=args.viewer,
            config_path=args.config,
            as_link=args.as_link,
        )

    elif args.command == "open":
        return cmd_open(
            link=args.link,
            viewer=args.viewer,
            config_path=args.config,
        )

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
