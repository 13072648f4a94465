"""Services for diffwith.

Services encapsulate business logic and orchestrate domain models.
They receive dependencies via constructor injection.
"""

from diffwith.services.comparison_resolver import ComparisonResolver, RepositoryQueries
from diffwith.services.git_operations import (
    GitFileNotFoundError,
    GitOperationError,
    GitOperationsService,
    GitReferenceError,
    GitRepositoryError,
    GitStatusError,
)

__all__ = [
    "ComparisonResolver",
    "GitFileNotFoundError",
    "GitOperationError",
    "GitOperationsService",
    "GitReferenceError",
    "GitRepositoryError",
    "GitStatusError",
    "RepositoryQueries",
]
