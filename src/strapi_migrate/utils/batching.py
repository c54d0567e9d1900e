"""Fixed-size batching for sequences of entries."""

from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive slices of ``items`` holding at most ``size`` elements.

    Args:
        items: Sequence to split
        size: Maximum batch size (must be >= 1)

    Yields:
        Lists in original order; only the last may be shorter than ``size``

    Raises:
        ValueError: If size is less than 1

    Example:
        >>> [len(batch) for batch in chunked(list(range(25)), 10)]
        [10, 10, 5]
    """
    if size < 1:
        raise ValueError(f"Batch size must be at least 1, got {size}")

    for start in range(0, len(items), size):
        yield list(items[start : start + size])


def batch_count(total: int, size: int) -> int:
    """Number of batches ``chunked`` produces for ``total`` items."""
    return -(-total // size)
