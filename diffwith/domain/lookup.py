"""Explicit results for concurrent repository lookups.

Each side's lookup settles into a LookupResult instead of letting the first
exception tear down the gathered group; callers then decide how to fail.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupOutcome(Enum):
    FOUND = "found"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Settled outcome of one lookup."""

    outcome: LookupOutcome
    value: T | None = None
    error: BaseException | None = None

    @classmethod
    def from_value(cls, value: T | None) -> LookupResult[T]:
        if value is None:
            return cls(outcome=LookupOutcome.ABSENT)
        return cls(outcome=LookupOutcome.FOUND, value=value)

    @classmethod
    def from_error(cls, error: BaseException) -> LookupResult[T]:
        return cls(outcome=LookupOutcome.FAILED, error=error)

    @property
    def failed(self) -> bool:
        return self.outcome == LookupOutcome.FAILED

    def unwrap(self) -> T | None:
        """Return the value (None when absent), re-raising a failure."""
        if self.error is not None:
            raise self.error
        return self.value


async def settle(lookup: Awaitable[T | None]) -> LookupResult[T]:
    """Await a lookup and capture its outcome."""
    try:
        return LookupResult.from_value(await lookup)
    except Exception as e:
        return LookupResult.from_error(e)


async def gather_pair(
    lhs: Awaitable[T | None],
    rhs: Awaitable[T | None],
) -> tuple[T | None, T | None]:
    """Run two lookups concurrently and return both values.

    Both lookups always run to completion. If either failed, the first
    failure (left before right) is raised and no values are returned.
    """
    lhs_result, rhs_result = await asyncio.gather(settle(lhs), settle(rhs))
    for result in (lhs_result, rhs_result):
        if result.failed:
            result.unwrap()
    return lhs_result.value, rhs_result.value
