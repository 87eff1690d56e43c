"""
Order-preserving map for the adapter's batch path.

Each element of a ``records`` array is transformed independently, so the
work may be spread over a thread pool. Results are always collected by
input position, never by completion, so callers see the same ordering
whatever the execution strategy.
"""

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def ordered_map(
    func: Callable[[T], R],
    items: Iterable[T],
    workers: int = 1,
) -> list[R]:
    """
    Apply ``func`` to every item and return the results in input order.

    With ``workers`` greater than one and more than one item, calls run on
    a ThreadPoolExecutor. If any call raises, the exception of the earliest
    failing item is re-raised once the pool has drained.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    items = list(items)
    if workers == 1 or len(items) < 2:
        return [func(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(workers, len(items))) as pool:
        return list(pool.map(func, items))
