"""Searching in ordered data."""

from typing import Callable, Sequence


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """Return the first of versions 1..n for which ``is_bad_version`` holds.

    Versions after a bad one are assumed bad as well. If none is bad, ``n``
    is returned.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    low, high = 1, n
    while low < high:
        mid = low + (high - low) // 2
        if is_bad_version(mid):
            high = mid
        else:
            low = mid + 1
    return low


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two entries of sorted ``numbers`` adding up to ``target``.

    Returns their 1-based positions, smaller first, or None if no pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return left + 1, right + 1
        if total > target:
            right -= 1
        else:
            left += 1
    return None