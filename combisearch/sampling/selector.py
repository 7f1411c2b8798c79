"""Uniform shuffling and distinct random selection.

All functions draw from an injected :class:`~combisearch.sampling.base.RandomSource`;
nothing here seeds or owns a generator. :class:`SampleSelector` binds a source
once for callers that make repeated draws.
"""

from __future__ import annotations

import logging
from typing import Iterable, MutableSequence, Sequence, TypeVar

from combisearch.config import SelectorConfig
from combisearch.errors import InvalidPickCount
from combisearch.sampling.base import RandomSource
from combisearch.sampling.numpy_source import NumpyRandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_source(source: RandomSource | None) -> RandomSource:
    if source is None:
        raise ValueError("a random source is required")
    return source


def _check_pick_count(number_of_picks: int, available: int) -> None:
    available = max(available, 0)
    if number_of_picks < 0 or number_of_picks > available:
        raise InvalidPickCount(number_of_picks, available)


def shuffle(items: MutableSequence[T], source: RandomSource | None) -> None:
    """Shuffle *items* in place with the Fisher-Yates algorithm.

    Every permutation is equally likely provided *source* is uniform. A ``None``
    source leaves *items* untouched.
    """
    if source is None:
        return
    for n in range(len(items) - 1, 0, -1):
        k = source.next_bounded_int(n + 1)
        items[k], items[n] = items[n], items[k]


def clone_and_shuffle(items: Sequence[T], source: RandomSource | None) -> list[T]:
    """Return a shuffled copy of *items*; the input is never mutated.

    An index permutation is shuffled and then gathered, so *items* only needs
    read access. A ``None`` source returns a copy in the original order.
    """
    indexes = list(range(len(items)))
    shuffle(indexes, source)
    return [items[i] for i in indexes]


def pick_random_numbers(
    from_included: int,
    to_excluded: int,
    number_of_picks: int,
    source: RandomSource | None,
    excluded: Iterable[int] = (),
) -> list[int]:
    """Draw distinct integers from ``[from_included, to_excluded)`` by rejection.

    Args:
        from_included: Inclusive lower bound of the value space.
        to_excluded: Exclusive upper bound of the value space.
        number_of_picks: Number of distinct values to return.
        source: Randomness source.
        excluded: Values that must never be returned.

    Returns:
        The accepted values, in draw order.

    Raises:
        InvalidPickCount: If fewer than *number_of_picks* values are available.
        ValueError: If *source* is ``None``.
    """
    source = _require_source(source)
    width = to_excluded - from_included
    forbidden = {value for value in excluded if from_included <= value < to_excluded}
    _check_pick_count(number_of_picks, width - len(forbidden))

    picks: list[int] = []
    seen = set(forbidden)
    rejected = 0
    while len(picks) < number_of_picks:
        candidate = from_included + source.next_bounded_int(width)
        if candidate in seen:
            rejected += 1
            continue
        seen.add(candidate)
        picks.append(candidate)
    logger.debug(f"Picked {number_of_picks} of {width} values ({rejected} draws rejected)")
    return picks


def pick_random_indices(
    max_excluded_value: int,
    number_of_picks: int,
    source: RandomSource | None,
) -> set[int]:
    """Return exactly *number_of_picks* distinct indices in ``[0, max_excluded_value)``.

    Uses rejection sampling, which slows down as *number_of_picks* approaches
    *max_excluded_value*.

    Raises:
        InvalidPickCount: If *number_of_picks* exceeds *max_excluded_value* or
            is negative. Checked before any draw.
        ValueError: If *source* is ``None``.
    """
    return set(pick_random_numbers(0, max_excluded_value, number_of_picks, source))


def shuffle_and_select(
    number_of_picks: int,
    population_size: int,
    source: RandomSource | None,
) -> list[int]:
    """Select distinct indices from ``range(population_size)`` by draw-and-remove.

    Unlike :func:`pick_random_indices` this makes exactly *number_of_picks*
    draws, so it stays cheap when nearly the whole population is requested.
    """
    source = _require_source(source)
    _check_pick_count(number_of_picks, population_size)
    remaining = list(range(population_size))
    chosen: list[int] = []
    while len(chosen) < number_of_picks:
        chosen.append(remaining.pop(source.next_bounded_int(len(remaining))))
    return chosen


def next_uniform_in(source: RandomSource | None, low: float, high: float) -> float:
    """Return a float drawn uniformly from ``[low, high)``."""
    source = _require_source(source)
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    return low + (high - low) * source.next_uniform()


class SampleSelector:
    """Random selection helpers bound to a single randomness source."""

    def __init__(self, source: RandomSource | None = None) -> None:
        """Initialize the selector.

        Args:
            source: Randomness source. ``None`` turns :meth:`shuffle` into a
                no-op and makes the pick methods raise ``ValueError``.
        """
        self.source = source

    @classmethod
    def from_config(cls, config: SelectorConfig) -> SampleSelector:
        """Build a selector with the source described by *config*."""
        return cls(NumpyRandomSource(seed=config.seed))

    def shuffle(self, items: MutableSequence[T]) -> None:
        shuffle(items, self.source)

    def clone_and_shuffle(self, items: Sequence[T]) -> list[T]:
        return clone_and_shuffle(items, self.source)

    def pick_random_indices(self, max_excluded_value: int, number_of_picks: int) -> set[int]:
        return pick_random_indices(max_excluded_value, number_of_picks, self.source)

    def pick_random_numbers(
        self,
        from_included: int,
        to_excluded: int,
        number_of_picks: int,
        excluded: Iterable[int] = (),
    ) -> list[int]:
        return pick_random_numbers(
            from_included, to_excluded, number_of_picks, self.source, excluded
        )

    def shuffle_and_select(self, number_of_picks: int, population_size: int) -> list[int]:
        return shuffle_and_select(number_of_picks, population_size, self.source)

    def next_uniform_in(self, low: float, high: float) -> float:
        return next_uniform_in(self.source, low, high)
