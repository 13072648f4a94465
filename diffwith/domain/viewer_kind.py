"""Domain enum for viewer selection.

This module defines the ViewerKind enum used to select how a resolved
comparison is presented in the viewer factory.
"""

from __future__ import annotations

from enum import Enum


class ViewerKind(Enum):
    """How a comparison directive is opened.

    Attributes:
        TOOL: Launch the configured external diff tool (default)
        CONSOLE: Print the directive as JSON without opening anything
    """

    TOOL = "tool"
    CONSOLE = "console"

    @classmethod
    def from_string(cls, value: str) -> ViewerKind:
        """Parse ViewerKind from string value.

        Args:
            value: String value ("tool" or "console")

        Returns:
            Corresponding ViewerKind enum value

        Raises:
            ValueError: If value is not a valid ViewerKind

        Examples:
            >>> ViewerKind.from_string("tool")
            <ViewerKind.TOOL: 'tool'>
            >>> ViewerKind.from_string("Console")
            <ViewerKind.CONSOLE: 'console'>
        """
        value_lower = value.lower()
        for member in cls:
            if member.value == value_lower:
                return member
        valid_values = [m.value for m in cls]
        raise ValueError(
            f"Invalid viewer: {value}. Must be one of: {', '.join(valid_values)}"
        )
