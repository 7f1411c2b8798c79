"""Tests for shuffling and distinct random selection."""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from combisearch.config import SelectorConfig
from combisearch.errors import InvalidPickCount
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


class _ScriptedSource(RandomSource):
    """Deterministic source replaying a fixed script of draws."""

    def __init__(self, ints: list[int], uniforms: list[float] | None = None) -> None:
        self.ints = list(ints)
        self.uniforms = list(uniforms or [])
        self.bounds: list[int] = []

    def next_bounded_int(self, exclusive_upper_bound: int) -> int:
        self.bounds.append(exclusive_upper_bound)
        return self.ints.pop(0) % exclusive_upper_bound

    def next_uniform(self) -> float:
        return self.uniforms.pop(0)


def test_shuffle_follows_fisher_yates_draws() -> None:
    items = ["a", "b", "c", "d"]
    source = _ScriptedSource([0, 0, 0])
    shuffle(items, source)
    # n=3 swaps 0<->3, n=2 swaps 0<->2, n=1 swaps 0<->1
    assert items == ["b", "c", "d", "a"]
    assert source.bounds == [4, 3, 2]


def test_shuffle_identity_draws_keep_order() -> None:
    items = [1, 2, 3, 4, 5]
    shuffle(items, _ScriptedSource([4, 3, 2, 1]))
    assert items == [1, 2, 3, 4, 5]


def test_shuffle_without_source_is_noop() -> None:
    items = [3, 1, 2]
    shuffle(items, None)
    assert items == [3, 1, 2]


def test_shuffle_preserves_multiset() -> None:
    items = [1, 1, 2, 3, 5, 8, 13]
    shuffle(items, NumpyRandomSource(seed=11))
    assert sorted(items) == [1, 1, 2, 3, 5, 8, 13]


def test_shuffle_short_sequences_draw_nothing() -> None:
    source = _ScriptedSource([])
    for items in ([], [42]):
        shuffle(items, source)
    assert source.bounds == []


def test_shuffle_is_roughly_uniform() -> None:
    source = NumpyRandomSource(seed=3)
    counts: Counter[tuple[int, ...]] = Counter()
    for _ in range(6000):
        items = [0, 1, 2]
        shuffle(items, source)
        counts[tuple(items)] += 1
    assert len(counts) == 6
    assert all(800 < c < 1200 for c in counts.values())


def test_clone_and_shuffle_does_not_mutate_source() -> None:
    items = (10, 20, 30, 40)
    shuffled = clone_and_shuffle(items, _ScriptedSource([0, 0, 0]))
    assert items == (10, 20, 30, 40)
    assert shuffled == [20, 30, 40, 10]


def test_clone_and_shuffle_is_permutation() -> None:
    items = list(range(50))
    shuffled = clone_and_shuffle(items, NumpyRandomSource(seed=5))
    assert shuffled is not items
    assert sorted(shuffled) == items
    assert clone_and_shuffle(items, None) == items


@pytest.mark.parametrize(("m", "k"), [(0, 0), (1, 1), (10, 0), (10, 3), (10, 10), (100, 99)])
def test_pick_random_indices_distinct_in_range(m: int, k: int) -> None:
    picks = pick_random_indices(m, k, NumpyRandomSource(seed=m + k))
    assert len(picks) == k
    assert all(0 <= i < m for i in picks)


def test_pick_random_indices_rejects_duplicates() -> None:
    source = _ScriptedSource([2, 2, 2, 0, 2, 1])
    assert pick_random_indices(5, 3, source) == {0, 1, 2}
    assert len(source.bounds) == 6


@pytest.mark.parametrize(("m", "k"), [(3, 4), (0, 1), (5, -1)])
def test_pick_random_indices_invalid_count(m: int, k: int) -> None:
    source = _ScriptedSource([])
    with pytest.raises(InvalidPickCount):
        pick_random_indices(m, k, source)
    assert source.bounds == []


def test_pick_random_indices_requires_source() -> None:
    with pytest.raises(ValueError):
        pick_random_indices(5, 2, None)


def test_pick_random_numbers_honours_offset_and_exclusions() -> None:
    source = NumpyRandomSource(seed=9)
    for agent in range(6):
        picks = pick_random_numbers(0, 6, 3, source, excluded=[agent])
        assert len(set(picks)) == 3
        assert agent not in picks
    shifted = pick_random_numbers(10, 14, 4, source)
    assert sorted(shifted) == [10, 11, 12, 13]


def test_pick_random_numbers_counts_only_in_range_exclusions() -> None:
    # 99 is outside the range and must not shrink the available count
    picks = pick_random_numbers(0, 3, 2, _ScriptedSource([0, 1, 2]), excluded=[0, 99])
    assert picks == [1, 2]
    with pytest.raises(InvalidPickCount) as excinfo:
        pick_random_numbers(0, 3, 3, _ScriptedSource([]), excluded=[1])
    assert excinfo.value.available == 2


def test_shuffle_and_select() -> None:
    source = _ScriptedSource([0, 0, 0])
    assert shuffle_and_select(3, 5, source) == [0, 1, 2]
    assert source.bounds == [5, 4, 3]
    picks = shuffle_and_select(10, 10, NumpyRandomSource(seed=1))
    assert sorted(picks) == list(range(10))
    with pytest.raises(InvalidPickCount):
        shuffle_and_select(4, 3, NumpyRandomSource(seed=1))


def test_next_uniform_in() -> None:
    source = _ScriptedSource([], uniforms=[0.0, 0.5])
    assert next_uniform_in(source, 2.0, 4.0) == 2.0
    assert next_uniform_in(source, 2.0, 4.0) == 3.0
    with pytest.raises(ValueError):
        next_uniform_in(source, 4.0, 2.0)


def test_sample_selector_binds_source() -> None:
    selector = SampleSelector(_ScriptedSource([0, 0, 0, 1, 3]))
    items = ["a", "b", "c", "d"]
    selector.shuffle(items)
    assert items == ["b", "c", "d", "a"]
    assert selector.pick_random_indices(4, 2) == {1, 3}


def test_sample_selector_from_config_is_reproducible() -> None:
    first = SampleSelector.from_config(SelectorConfig(seed=42))
    second = SampleSelector.from_config(SelectorConfig(seed=42))
    data = list(range(20))
    assert first.clone_and_shuffle(data) == second.clone_and_shuffle(data)
    assert first.pick_random_numbers(0, 20, 5, excluded=[0]) == second.pick_random_numbers(
        0, 20, 5, excluded=[0]
    )
    assert first.shuffle_and_select(3, 8) == second.shuffle_and_select(3, 8)
    assert first.next_uniform_in(0.0, 1.0) == second.next_uniform_in(0.0, 1.0)


def test_sample_selector_without_source() -> None:
    selector = SampleSelector()
    items = [1, 2, 3]
    selector.shuffle(items)
    assert items == [1, 2, 3]
    with pytest.raises(ValueError):
        selector.pick_random_indices(3, 1)


def test_selector_config_rejects_unknown_source() -> None:
    with pytest.raises(ValueError):
        SelectorConfig(source="mersenne")


def test_numpy_source_wraps_existing_generator() -> None:
    generator = np.random.default_rng(0)
    expected = np.random.default_rng(0).integers(0, 10)
    assert NumpyRandomSource(generator=generator).next_bounded_int(10) == expected
