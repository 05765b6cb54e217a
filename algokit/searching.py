"""Search routines over sequences and sorted matrices."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(items: Sequence[int], key: int) -> int | None:
    """Return the index of ``key`` in the sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(items: Sequence[int], key: int) -> int | None:
    """Return the index of the first occurrence of ``key``, or None if absent."""
    return next((index for index, value in enumerate(items) if value == key), None)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns are sorted.

    The search starts at the top-right corner and walks left or down.
    """
    if not matrix or not matrix[0]:
        return False
    rows, cols = len(matrix), len(matrix[0])
    row, col = 0, cols - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two entries of the sorted ``numbers`` that add up to ``target``.

    Returns their 1-based positions, or None when no pair exists.
    """
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total == target:
            return low + 1, high + 1
        if total < target:
            low += 1
        else:
            high -= 1
    return None