"""Exception types raised by combisearch."""

from __future__ import annotations


class CombisearchError(Exception):
    """Base class for all combisearch errors."""


class InvalidRange(CombisearchError, ValueError):
    """A search bound lies outside the sequence or the bounds are inverted.

    Attributes:
        bound: Name of the offending bound (``start_range``, ``end_range`` or
            ``starting_index``).
        value: The rejected value.
        size: Length of the sequence being searched.
    """

    def __init__(self, bound: str, value: int, size: int, message: str | None = None) -> None:
        self.bound = bound
        self.value = value
        self.size = size
        if message is None:
            message = f"{bound} [{value}] is out of range for a collection of size [{size}]"
        super().__init__(message)


class InvalidPickCount(CombisearchError, ValueError):
    """More distinct picks were requested than the value space contains.

    Attributes:
        number_of_picks: Requested number of distinct values.
        available: Number of distinct values that can be drawn.
    """

    def __init__(self, number_of_picks: int, available: int) -> None:
        self.number_of_picks = number_of_picks
        self.available = available
        super().__init__(
            f"Cannot pick {number_of_picks} distinct values out of {available} available"
        )
