"""Randomness source interface consumed by the sample selectors."""

from __future__ import annotations

from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Base interface for injectable pseudo-random generators."""

    @abstractmethod
    def next_bounded_int(self, exclusive_upper_bound: int) -> int:
        """Return an integer drawn uniformly from ``[0, exclusive_upper_bound)``."""

    @abstractmethod
    def next_uniform(self) -> float:
        """Return a float drawn uniformly from ``[0, 1)``."""
