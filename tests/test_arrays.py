import pytest

from algokit.arrays import max_sliding_window, max_subarray_sum, trapped_water


def test_max_subarray_sum_worked_example():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_sum_all_negative_is_largest_element():
    nums = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(nums) == max(nums)


def test_max_subarray_sum_all_positive_is_total():
    nums = [3, 1, 4, 1, 5]
    assert max_subarray_sum(nums) == sum(nums)


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_max_sliding_window_length_and_values():
    nums = [1, 3, -1, -3, 5, 3, 6, 7]
    k = 3
    result = max_sliding_window(nums, k)
    assert len(result) == len(nums) - k + 1
    for start, value in enumerate(result):
        assert value in nums[start:start + k]
        assert all(value >= other for other in nums[start:start + k])


def test_max_sliding_window_k_one_is_identity():
    nums = [4, -2, 7, 7, 0]
    assert max_sliding_window(nums, 1) == nums


def test_max_sliding_window_full_width():
    nums = [4, -2, 9, 7, 0]
    assert max_sliding_window(nums, len(nums)) == [max(nums)]


def test_max_sliding_window_too_wide_is_empty():
    assert max_sliding_window([1, 2], 3) == []


def test_max_sliding_window_rejects_bad_k():
    with pytest.raises(ValueError):
        max_sliding_window([1, 2, 3], 0)


def test_trapped_water_worked_example():
    assert trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trapped_water_monotonic_holds_nothing():
    assert trapped_water([1, 2, 3, 4, 5]) == 0


def test_trapped_water_is_mirror_symmetric():
    heights = [4, 2, 0, 3, 2, 5, 1, 0, 2]
    assert trapped_water(heights) == trapped_water(heights[::-1])


def test_trapped_water_raising_walls_never_decreases():
    heights = [3, 0, 1, 0, 2]
    taller = [h + 10 if i in (0, len(heights) - 1) else h for i, h in enumerate(heights)]
    assert trapped_water(taller) >= trapped_water(heights)