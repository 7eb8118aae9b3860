import pytest

from algodrills.arrays import (
    find_kth_largest,
    k_smallest_pairs,
    least_interval,
    max_sliding_window,
    most_booked,
    shortest_subarray,
    top_k_frequent,
)


@pytest.mark.parametrize("k", range(1, 7))
def test_find_kth_largest_matches_sorted_position(k):
    nums = [3, 2, 1, 5, 6, 4]
    assert find_kth_largest(nums, k) == sorted(nums, reverse=True)[k - 1]


def test_find_kth_largest_with_duplicates():
    nums = [3, 2, 3, 1, 2, 4, 5, 5, 6]
    assert find_kth_largest(nums, 4) == 4


@pytest.mark.parametrize("k", [0, 4])
def test_find_kth_largest_rejects_bad_k(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


def test_max_sliding_window_example():
    nums = [1, 3, -1, -3, 5, 3, 6, 7]
    assert max_sliding_window(nums, 3) == [3, 3, 5, 5, 6, 7]


def test_max_sliding_window_invariants():
    nums = [4, -2, 9, 9, 0, 7, 1, 3, 8]
    for k in range(1, len(nums) + 1):
        result = max_sliding_window(nums, k)
        assert len(result) == len(nums) - k + 1
        for start, value in enumerate(result):
            assert value == max(nums[start : start + k])


def test_max_sliding_window_size_one_is_identity():
    nums = [5, 1, 4]
    assert max_sliding_window(nums, 1) == nums


def test_max_sliding_window_rejects_zero():
    with pytest.raises(ValueError):
        max_sliding_window([1, 2], 0)


def test_most_booked_example():
    assert most_booked(2, [[0, 10], [1, 5], [2, 7], [3, 4]]) == 0


def test_most_booked_single_room():
    assert most_booked(1, [[1, 3], [2, 4]]) == 0


def test_most_booked_result_in_range():
    meetings = [[1, 20], [2, 10], [3, 5], [4, 9], [6, 8]]
    assert most_booked(3, meetings) in range(3)


def test_most_booked_needs_a_room():
    with pytest.raises(ValueError):
        most_booked(0, [[0, 1]])


def test_top_k_frequent_example():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [1, 2]


def test_top_k_frequent_single():
    assert top_k_frequent([1], 1) == [1]


def test_top_k_frequent_large_k_returns_all_distinct():
    nums = [7, 8, 7, 9]
    assert sorted(top_k_frequent(nums, 10)) == sorted(set(nums))


def test_top_k_frequent_zero():
    assert top_k_frequent([1, 2, 2], 0) == []


def test_k_smallest_pairs_example_order():
    assert k_smallest_pairs([1, 7, 11], [2, 4, 6], 3) == [(1, 6), (1, 4), (1, 2)]


def test_k_smallest_pairs_are_the_smallest():
    nums1, nums2, k = [1, 1, 2], [1, 2, 3], 4
    result = k_smallest_pairs(nums1, nums2, k)
    assert len(result) == k
    sums = [a + b for a, b in result]
    assert sums == sorted(sums, reverse=True)
    all_sums = sorted(a + b for a in nums1 for b in nums2)
    assert sorted(sums) == all_sums[:k]
    for a, b in result:
        assert a in nums1 and b in nums2


def test_k_smallest_pairs_non_positive_k():
    assert k_smallest_pairs([1], [2], 0) == []


def test_least_interval_example():
    assert least_interval(["A", "A", "A", "B", "B", "B"], 2) == 8


def test_least_interval_no_cooldown():
    tasks = ["A", "A", "A", "B", "B", "B"]
    assert least_interval(tasks, 0) == len(tasks)


def test_least_interval_no_idle_needed():
    tasks = ["A", "C", "A", "B", "D", "B"]
    assert least_interval(tasks, 1) == len(tasks)


def test_least_interval_never_below_task_count():
    tasks = list("AAABBCDDDE")
    for n in range(5):
        assert least_interval(tasks, n) >= len(tasks)


def test_shortest_subarray_single():
    assert shortest_subarray([1], 1) == 1


def test_shortest_subarray_impossible():
    assert shortest_subarray([1, 2], 4) == -1


def test_shortest_subarray_whole_array():
    nums = [2, -1, 2]
    assert shortest_subarray(nums, 3) == len(nums)