from abc import ABC, abstractmethod

from diffwith.domain.comparison import ShowOptions
from diffwith.domain.content import ContentReference


class DiffViewer(ABC):
    """Abstract base class for comparison viewers.

    A viewer receives two openable content references and presents them side
    by side. It never inspects how they were resolved.
    """

    @abstractmethod
    async def open_comparison(
        self,
        lhs: ContentReference,
        rhs: ContentReference,
        title: str | None,
        show_options: ShowOptions,
    ) -> int:
        """Open a comparison between two content references.

        Args:
            lhs: Baseline content (a placeholder reference when missing)
            rhs: Target content (a placeholder reference when missing)
            title: Combined title, or None when no side has a label
            show_options: Finalized placement hints

        Returns:
            Viewer exit status (0 for success)

        Note:
            Failures are raised, not returned; the caller reports them.
        """
        pass
