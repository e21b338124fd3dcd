"""Array, string and matrix puzzles."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

MOD = 10**9 + 7


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of two numbers adding up to target, or an empty list.

    The index of the smaller number comes first.
    """
    pairs = sorted((value, index) for index, value in enumerate(nums))
    lo, hi = 0, len(pairs) - 1
    while lo < hi:
        total = pairs[lo][0] + pairs[hi][0]
        if total == target:
            return [pairs[lo][1], pairs[hi][1]]
        if total > target:
            hi -= 1
        else:
            lo += 1
    return []


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest contiguous run summing to at least target, or 0."""
    best: int | None = None
    start = 0
    window = 0
    for end, value in enumerate(nums):
        window += value
        while window >= target and start <= end:
            length = end - start + 1
            best = length if best is None else min(best, length)
            window -= nums[start]
            start += 1
    return best or 0


def maximum_product(nums: Sequence[int], k: int) -> int:
    """Spend k increments, each on the current smallest number, and return the product mod 1e9+7."""
    heap = list(nums)
    heapq.heapify(heap)
    for _ in range(k):
        heapq.heapreplace(heap, heap[0] + 1)
    result = 1
    for value in heap:
        result = result * value % MOD
    return result


def next_permutation(nums: list[int]) -> None:
    """Rearrange nums in place into the next lexicographic permutation, wrapping to the first."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums.reverse()
        return
    swap = max(i for i in range(pivot + 1, len(nums)) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])


def find_words_containing(words: Sequence[str], x: str) -> list[int]:
    """Return the indices of the words that contain the character x."""
    return [index for index, word in enumerate(words) if x in word]


def triangle_type(nums: Sequence[int]) -> str:
    """Classify three side lengths as none, equilateral, scalene or isosceles."""
    a, b, c = nums
    if a + b <= c or b + c <= a or c + a <= b:
        return "none"
    if a == b == c:
        return "equilateral"
    if a != b and b != c and a != c:
        return "scalene"
    return "isosceles"


def is_zero_array(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> bool:
    """Tell whether every element can be brought to zero by decrements over the query ranges."""
    diff = [0] * (len(nums) + 1)
    for left, right in queries:
        diff[left] += 1
        diff[right + 1] -= 1
    return all(value <= cover for value, cover in zip(nums, accumulate(diff)))


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous subarrays whose sum equals k."""
    seen = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += seen[running - k]
        seen[running] += 1
    return count


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0