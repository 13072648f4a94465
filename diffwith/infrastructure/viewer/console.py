"""Console viewer.

Prints the resolved comparison as JSON instead of opening it, for scripting
and dry runs.
"""

from __future__ import annotations

import json
import sys
from typing import TextIO

from diffwith.domain.comparison import ComparisonDirective, ShowOptions
from diffwith.domain.content import ContentReference

from .base import DiffViewer


class ConsoleViewer(DiffViewer):
    """Writes each comparison directive to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    async def open_comparison(
        self,
        lhs: ContentReference,
        rhs: ContentReference,
        title: str | None,
        show_options: ShowOptions,
    ) -> int:
        directive = ComparisonDirective(lhs=lhs, rhs=rhs, title=title, show_options=show_options)
        print(json.dumps(directive.to_dict(), indent=2, ensure_ascii=False), file=self.stream)
        return 0
