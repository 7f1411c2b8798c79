"""Exhaustive subset and combination enumeration."""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

from combisearch.errors import InvalidRange

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Power sets grow as 2^N; above this size a warning is emitted.
LARGE_POWER_SET_WARNING = 20


def _power_set(data: Sequence[T]) -> list[list[T]]:
    if len(data) == 0:
        return [[]]
    head = data[0]
    have_nots = _power_set(data[1:])
    haves = [[head, *subset] for subset in have_nots]
    return haves + have_nots


def all_subsets(data: Sequence[T]) -> list[list[T]]:
    """Return all ``2**len(data)`` subsets of *data*.

    Each subset is a new list preserving the original relative order. Subsets
    containing the first element come first, followed by those without it; the
    same rule applies recursively to the remainder.

    Args:
        data: Ordered input elements.

    Returns:
        List of subsets, including ``[]`` and the full sequence.
    """
    if data is None:
        raise TypeError("data must be a sequence, not None")
    if len(data) > LARGE_POWER_SET_WARNING:
        logger.warning(
            f"Enumerating the power set of {len(data)} elements "
            f"({2 ** len(data)} subsets)"
        )
    subsets = _power_set(list(data))
    logger.debug(f"Enumerated {len(subsets)} subsets of {len(data)} elements")
    return subsets


def _combinations(data: Sequence[T], size: int, start: int) -> list[list[T]]:
    if size == 1:
        return [[data[i]] for i in range(start, len(data))]
    combinations: list[list[T]] = []
    for i in range(start, len(data) - size + 1):
        for tail in _combinations(data, size - 1, i + 1):
            combinations.append([data[i], *tail])
    return combinations


def subsets_of_size(
    data: Sequence[T], size: int, starting_index: int = 0
) -> list[list[T]]:
    """Return every combination of exactly *size* elements of *data*.

    Combinations use only indices ``>= starting_index`` and come out in
    lexicographic order of their index tuples.

    Args:
        data: Ordered input elements.
        size: Number of elements per combination. ``size <= 0`` or a size
            larger than the available elements yields an empty list.
        starting_index: Smallest index allowed in a combination.

    Returns:
        List of ``C(len(data) - starting_index, size)`` new lists.

    Raises:
        TypeError: If *data* is ``None``.
        InvalidRange: If *starting_index* is not in ``[0, len(data)]``.

    Examples:
        >>> subsets_of_size([0, 1, 2], 2)
        [[0, 1], [0, 2], [1, 2]]
    """
    if data is None:
        raise TypeError("data must be a sequence, not None")
    if not 0 <= starting_index <= len(data):
        raise InvalidRange("starting_index", starting_index, len(data))
    if size <= 0:
        return []
    return _combinations(data, size, starting_index)


def binomial_coefficients(n: int) -> list[int]:
    """Return the row ``[C(n, 0), ..., C(n, n)]`` of Pascal's triangle.

    Raises:
        ValueError: If *n* is negative.
    """
    if n < 0:
        raise ValueError(f"degree must be non-negative, got {n}")
    row = [0] * (n + 1)
    i = 0
    while 2 * i <= n:
        row[i] = 1 if i == 0 else row[i - 1] * (n - i + 1) // i
        row[n - i] = row[i]
        i += 1
    return row
