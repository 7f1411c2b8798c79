"""Binary search over predicate-monotonic index ranges.

Both searches assume the caller supplies a monotonic predicate over the active
range. ``find_first_index_of`` expects ``False`` on a prefix and ``True`` on the
remaining suffix; ``find_last_index_of`` expects ``True`` on a prefix and
``False`` on the suffix. Monotonicity is not checked: doing so would cost a full
scan.

Bounds are inclusive. When ``end_range`` is omitted the search stops at the
last valid index, ``len(sequence) - 1``.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from combisearch.errors import InvalidRange

NOT_FOUND = -1


def _probe(
    sequence: Sequence[Any], predicate: Callable[[Any], bool], by_item: bool
) -> Callable[[int], bool]:
    """Return an index-level predicate, dereferencing items when *by_item* is set."""
    if by_item:
        return lambda i: bool(predicate(sequence[i]))
    return lambda i: bool(predicate(i))


def _resolve_bounds(
    size: int, start_range: int | None, end_range: int | None
) -> tuple[int, int]:
    """Validate optional inclusive bounds and fill in the defaults."""
    if start_range is not None and not 0 <= start_range < size:
        raise InvalidRange(
            "start_range",
            start_range,
            size,
            f"Start range [{start_range}] is outside a collection of size [{size}]",
        )
    if end_range is not None and not 0 <= end_range < size:
        raise InvalidRange(
            "end_range",
            end_range,
            size,
            f"End range [{end_range}] is outside a collection of size [{size}]",
        )
    if start_range is not None and end_range is not None and end_range < start_range:
        raise InvalidRange(
            "start_range",
            start_range,
            size,
            f"Start range [{start_range}] is greater than end range [{end_range}]",
        )
    left = 0 if start_range is None else start_range
    right = size - 1 if end_range is None else end_range
    return left, right


def find_first_index_of(
    sequence: Sequence[Any],
    predicate: Callable[[Any], bool],
    start_range: int | None = None,
    end_range: int | None = None,
    *,
    by_item: bool = False,
) -> int:
    """Return the smallest index in range for which *predicate* holds.

    Args:
        sequence: Read-only indexable collection.
        predicate: Monotonic predicate, ``False`` then ``True`` over the range.
            Receives an index, or the item itself when *by_item* is set.
        start_range: Inclusive lower bound (default ``0``).
        end_range: Inclusive upper bound (default ``len(sequence) - 1``).
        by_item: Apply *predicate* to ``sequence[i]`` instead of ``i``.

    Returns:
        The first matching index, or :data:`NOT_FOUND`.

    Raises:
        InvalidRange: If a bound is not a valid index or the bounds are inverted.

    Examples:
        >>> data = [0, 0, 0, 1, 1, 1]
        >>> find_first_index_of(data, lambda i: data[i] == 1)
        3
    """
    size = len(sequence)
    left, right = _resolve_bounds(size, start_range, end_range)
    if size == 0:
        return NOT_FOUND
    test = _probe(sequence, predicate, by_item)

    if test(left):
        return left
    if left == right or not test(right):
        return NOT_FOUND

    # invariant: test(left) is False, test(right) is True
    while right - left > 1:
        mid = (left + right) // 2
        if test(mid):
            right = mid
        else:
            left = mid
    return right


def find_last_index_of(
    sequence: Sequence[Any],
    predicate: Callable[[Any], bool],
    start_range: int | None = None,
    end_range: int | None = None,
    *,
    by_item: bool = False,
) -> int:
    """Return the largest index in range for which *predicate* holds.

    Args:
        sequence: Read-only indexable collection.
        predicate: Monotonic predicate, ``True`` then ``False`` over the range.
            Receives an index, or the item itself when *by_item* is set.
        start_range: Inclusive lower bound (default ``0``).
        end_range: Inclusive upper bound (default ``len(sequence) - 1``).
        by_item: Apply *predicate* to ``sequence[i]`` instead of ``i``.

    Returns:
        The last matching index, or :data:`NOT_FOUND`.

    Raises:
        InvalidRange: If a bound is not a valid index or the bounds are inverted.
    """
    size = len(sequence)
    left, right = _resolve_bounds(size, start_range, end_range)
    if size == 0:
        return NOT_FOUND
    test = _probe(sequence, predicate, by_item)

    if test(right):
        return right
    if left == right or not test(left):
        return NOT_FOUND

    # invariant: test(left) is True, test(right) is False
    while right - left > 1:
        mid = (left + right) // 2
        if test(mid):
            left = mid
        else:
            right = mid
    return left


def find_chunk_bounds(
    sequence: Sequence[Any],
    lower_predicate: Callable[[Any], bool],
    upper_predicate: Callable[[Any], bool],
    *,
    by_item: bool = False,
) -> tuple[int, int]:
    """Locate the inclusive ``(start, end)`` bounds of a contiguous block.

    ``start`` is the first index satisfying *lower_predicate*; ``end`` is the
    first index at or after ``start`` satisfying *upper_predicate*, or the last
    index of the sequence when nothing does. Typical use is bucketing a sorted
    time axis, e.g. ``ts >= day`` and ``ts > day``.

    Raises:
        InvalidRange: If no index satisfies *lower_predicate*.
    """
    start = find_first_index_of(sequence, lower_predicate, by_item=by_item)
    if start == NOT_FOUND:
        raise InvalidRange(
            "start_range",
            NOT_FOUND,
            len(sequence),
            "Unable to find the starting index of the chunk",
        )
    end = find_first_index_of(sequence, upper_predicate, start, by_item=by_item)
    if end == NOT_FOUND:
        end = len(sequence) - 1
    return start, end
