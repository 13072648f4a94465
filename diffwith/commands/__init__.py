"""CLI command implementations."""

from diffwith.commands.compare import cmd_compare
from diffwith.commands.compare_commit import cmd_compare_commit
from diffwith.commands.open_link import cmd_open

__all__ = ["cmd_compare", "cmd_compare_commit", "cmd_open"]
