"""combisearch: ordered search and combinatorial sampling over finite sequences.

Public API
----------
The entire usable surface is importable directly from ``combisearch``::

    from combisearch import find_first_index_of, subsets_of_size, SampleSelector
    from combisearch.sampling.numpy_source import NumpyRandomSource
    from combisearch.config import SelectorConfig
"""

from __future__ import annotations

# Configuration
from combisearch.config import SelectorConfig

# Errors
from combisearch.errors import CombisearchError, InvalidPickCount, InvalidRange

# Random sources and selection
from combisearch.sampling import (
    NumpyRandomSource,
    RandomSource,
    SampleSelector,
    clone_and_shuffle,
    next_uniform_in,
    pick_random_indices,
    pick_random_numbers,
    shuffle,
    shuffle_and_select,
)

# Range search
from combisearch.search import (
    NOT_FOUND,
    find_chunk_bounds,
    find_first_index_of,
    find_last_index_of,
)

# Subset enumeration
from combisearch.subsets import all_subsets, binomial_coefficients, subsets_of_size

__version__ = "0.1.0"

__all__ = [
    # Range search
    "NOT_FOUND",
    "find_first_index_of",
    "find_last_index_of",
    "find_chunk_bounds",
    # Subset enumeration
    "all_subsets",
    "subsets_of_size",
    "binomial_coefficients",
    # Selection
    "RandomSource",
    "NumpyRandomSource",
    "SampleSelector",
    "shuffle",
    "clone_and_shuffle",
    "pick_random_indices",
    "pick_random_numbers",
    "shuffle_and_select",
    "next_uniform_in",
    # Configuration and errors
    "SelectorConfig",
    "CombisearchError",
    "InvalidRange",
    "InvalidPickCount",
    "__version__",
]
