"""numpy-backed randomness source."""

from __future__ import annotations

import numpy as np

from combisearch.sampling.base import RandomSource


class NumpyRandomSource(RandomSource):
    """Adapter exposing a ``numpy.random.Generator`` as a :class:`RandomSource`."""

    def __init__(
        self,
        seed: int | None = None,
        generator: np.random.Generator | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            seed: Random seed for reproducibility. Ignored when *generator*
                is given.
            generator: Existing generator to draw from, shared with the caller.
        """
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    def next_bounded_int(self, exclusive_upper_bound: int) -> int:
        """Return an integer drawn uniformly from ``[0, exclusive_upper_bound)``."""
        if exclusive_upper_bound <= 0:
            raise ValueError(
                f"exclusive_upper_bound must be positive, got {exclusive_upper_bound}"
            )
        return int(self._rng.integers(0, exclusive_upper_bound))

    def next_uniform(self) -> float:
        """Return a float drawn uniformly from ``[0, 1)``."""
        return float(self._rng.random())
