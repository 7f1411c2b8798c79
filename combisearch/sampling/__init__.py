"""Random sources and sample selectors."""

from combisearch.sampling.base import RandomSource
from combisearch.sampling.numpy_source import NumpyRandomSource
from combisearch.sampling.selector import (
    SampleSelector,
    clone_and_shuffle,
    next_uniform_in,
    pick_random_indices,
    pick_random_numbers,
    shuffle,
    shuffle_and_select,
)

__all__ = [
    "RandomSource",
    "NumpyRandomSource",
    "SampleSelector",
    "clone_and_shuffle",
    "next_uniform_in",
    "pick_random_indices",
    "pick_random_numbers",
    "shuffle",
    "shuffle_and_select",
]
