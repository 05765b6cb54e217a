"""Classic array problems: maximum subarray, sliding window maxima, trapped water."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums`` (Kadane)."""
    if not nums:
        raise ValueError("max_subarray_sum() needs at least one number")
    best = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive numbers."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    maxima: list[int] = []
    window: deque[int] = deque()
    for index, value in enumerate(nums):
        if window and window[0] == index - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(index)
        if index >= k - 1:
            maxima.append(nums[window[0]])
    return maxima


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``heights`` can hold."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    total = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= max_left:
                max_left = heights[left]
            else:
                total += max_left - heights[left]
            left += 1
        else:
            if heights[right] >= max_right:
                max_right = heights[right]
            else:
                total += max_right - heights[right]
            right -= 1
    return total