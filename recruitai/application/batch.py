"""Partial-failure combinator for per-item batch work."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Generic, Iterable, List, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class BatchFailure(Generic[T]):
    item: T
    reason: str
    error_type: str


@dataclass
class BatchResult(Generic[T, R]):
    """Successful results in input order plus one entry per failed item."""

    succeeded: List[R] = field(default_factory=list)
    failed: List[BatchFailure[T]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)


async def map_with_failures(
    items: Iterable[T],
    func: Callable[[T], Awaitable[R]],
    *,
    operation: str = "batch_item",
) -> BatchResult[T, R]:
    """
    Apply ``func`` to each item sequentially, collecting failures instead of raising.

    One failing item never aborts the rest of the batch.
    """
    result: BatchResult[T, R] = BatchResult()
    for item in items:
        try:
            result.succeeded.append(await func(item))
        except Exception as exc:
            logger.warning(
                "Batch item failed",
                operation=operation,
                item=str(item),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            result.failed.append(
                BatchFailure(item=item, reason=str(exc) or type(exc).__name__, error_type=type(exc).__name__)
            )
    return result


__all__ = ["BatchFailure", "BatchResult", "map_with_failures"]
