"""Array puzzles: pair and triplet sums, selection, counting, digits and jumps."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections import Counter
from typing import Optional, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """0-based indices of two values adding up to ``target``, or ``[]`` if none."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def two_sum_brute_force(nums: Sequence[int], target: int) -> list[int]:
    """Every pair of indices whose values add up to ``target``, flattened in order."""
    found: list[int] = []
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                found.extend((i, j))
    return found


def two_sum_sorted(nums: Sequence[int], target: int) -> list[int]:
    """1-based indices of two values adding up to ``target``, or ``[]`` if none."""
    seen: dict[int, int] = {}
    for position, value in enumerate(nums, start=1):
        complement = target - value
        if complement in seen:
            return [seen[complement], position]
        seen[value] = position
    return []


def two_sum_sorted_pointers(nums: Sequence[int], target: int) -> list[int]:
    """1-based indices found by closing two pointers over sorted ``nums``."""
    left, right = 0, len(nums) - 1
    while left < right:
        if nums[left] + nums[right] == target:
            return [left + 1, right + 1]
        if nums[left] + nums[right] < target:
            left += 1
        if nums[left] + nums[right] > target:
            right -= 1
    return []


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Distinct sorted triplets that add up to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i in range(len(values) - 2):
        first = values[i]
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([first, values[left], values[right]])
                left += 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
    return result


def three_sum_closest(nums: Sequence[int], target: int) -> list[list[int]]:
    """Zero-sum triplets found by a two-pointer scan of ``nums`` as given.

    The input is not sorted and duplicates are not skipped; ``target`` is
    accepted but takes no part in the search.
    """
    result: list[list[int]] = []
    for i in range(len(nums) - 2):
        first = nums[i]
        left, right = i + 1, len(nums) - 1
        while left < right:
            total = first + nums[left] + nums[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([first, nums[left], nums[right]])
                left += 1
    return result


def kth_largest(nums: Sequence[int], k: int) -> int:
    """The k-th largest value, kept with a min-heap of size ``k``."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    heap = list(nums[:k])
    heapq.heapify(heap)
    for value in nums[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values, least frequent first.

    Ties in frequency are broken by value, larger values ranking higher.
    If there are at most ``k`` distinct values, all of them are returned.
    """
    if k <= 0:
        return []
    counts = Counter(nums)
    ranked = sorted(counts, key=lambda value: (counts[value], value))
    return ranked[-k:]


def majority_element(nums: Sequence[int]) -> Optional[int]:
    """The value occurring more than ``len(nums) // 2`` times, or ``None``."""
    threshold = len(nums) // 2
    return next(
        (value for value, count in Counter(nums).items() if count > threshold),
        None,
    )


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given most significant digit first."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] != 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def plus_one_scan(digits: Sequence[int]) -> list[int]:
    """Add one by zeroing the trailing nines, then bumping the digit before them."""
    result = list(digits)
    index = len(result) - 1
    while index >= 0 and result[index] == 9:
        result[index] = 0
        index -= 1
    if index < 0:
        return [1, *result]
    result[index] += 1
    return result


def first_occurrence(nums: Sequence[int], target: int) -> int:
    """Index of the first value not less than ``target`` in sorted ``nums``, or -1."""
    index = bisect_left(nums, target)
    return index if index < len(nums) else -1


def last_occurrence(nums: Sequence[int], target: int) -> int:
    """Index of the last value not greater than ``target`` in sorted ``nums``, or -1."""
    return bisect_right(nums, target) - 1


def min_jumps(arr: Sequence[int]) -> int:
    """Fewest jumps from the first to the last position, each jump at most ``arr[i]``."""
    if not arr:
        raise ValueError("cannot jump through an empty array")
    best = [0] + [float("inf")] * (len(arr) - 1)
    for i in range(1, len(arr)):
        best[i] = min(
            (best[j] + 1 for j in range(i) if j + arr[j] >= i),
            default=float("inf"),
        )
    if best[-1] == float("inf"):
        raise ValueError("the last position cannot be reached")
    return int(best[-1])