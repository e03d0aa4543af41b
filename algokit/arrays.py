"""Algorithms on sequences of integers."""

import heapq
from collections import Counter, deque
from itertools import accumulate, groupby
from math import gcd
from operator import mul
from typing import MutableSequence, Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from buying once and selling later; 0 if prices never rise."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def rob(nums: Sequence[int]) -> int:
    """Largest sum of elements of ``nums`` with no two of them adjacent."""
    before, current = 0, 0
    for value in nums:
        before, current = current, max(current, before + value)
    return current


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers found in ``nums``."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous slice of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge sorted ``nums2`` into ``nums1`` in place.

    The first ``m`` entries of ``nums1`` hold its sorted values; the list has
    room for exactly ``n`` more, the length of ``nums2``.
    """
    if len(nums2) != n or len(nums1) != m + n:
        raise ValueError(
            f"expected nums1 of length {m + n} and nums2 of length {n}, "
            f"got {len(nums1)} and {len(nums2)}"
        )
    nums1[:] = list(heapq.merge(nums1[:m], nums2))


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..len(nums) that ``nums`` does not hold."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other elements."""
    if not nums:
        return []
    before = list(accumulate(nums[:-1], mul, initial=1))
    after = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [left * right for left, right in zip(before, after)]


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` in place ``k`` steps to the right."""
    size = len(nums)
    if size == 0:
        return
    k %= size
    if k == 0:
        return
    for start in range(gcd(size, k)):
        carried = nums[start]
        index = start
        while True:
            index = (index + k) % size
            nums[index], carried = carried, nums[index]
            if index == start:
                break


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive elements, left to right."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    window: deque[int] = deque()
    result = []
    for i, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Values are taken a whole frequency at a time, smallest value first within
    it, so values tied with the last one taken are all returned.
    """
    counts = Counter(nums)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    result: list[int] = []
    for _, group in groupby(ranked, key=lambda item: item[1]):
        if k <= 0:
            break
        values = [value for value, _ in group]
        result.extend(values)
        k -= len(values)
    return result