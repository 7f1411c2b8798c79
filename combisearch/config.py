"""Configuration objects."""

from __future__ import annotations

from dataclasses import dataclass

SUPPORTED_SOURCES = ("numpy",)


@dataclass
class SelectorConfig:
    """Configuration for building a :class:`~combisearch.sampling.SampleSelector`.

    Attributes:
        seed: Seed for the randomness source; ``None`` draws fresh OS entropy.
        source: Randomness backend name. Only ``numpy`` is available.
    """

    seed: int | None = None
    source: str = "numpy"

    def __post_init__(self) -> None:
        if self.source not in SUPPORTED_SOURCES:
            raise ValueError(
                f"Unknown random source {self.source!r}; expected one of {SUPPORTED_SOURCES}"
            )
