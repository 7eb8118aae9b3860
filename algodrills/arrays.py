"""Array, heap and sliding-window algorithms."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Hashable, Iterable, Sequence
from itertools import accumulate


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value, keeping a min-heap of the k best seen."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    heap = list(nums[:k])
    heapq.heapify(heap)
    for value in nums[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of k consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    window: deque[int] = deque()
    maxima: list[int] = []
    for i, value in enumerate(nums):
        if window and window[0] <= i - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            maxima.append(nums[window[0]])
    return maxima


def most_booked(n: int, meetings: Iterable[Sequence[int]]) -> int:
    """Return the room that hosts the most meetings (lowest number on ties).

    Meetings go, in order of start time, to the lowest-numbered free room; if
    none is free, the meeting is delayed into the room that frees up first.
    """
    if n < 1:
        raise ValueError(f"there must be at least one room, got {n}")
    counts = [0] * n
    free_at = [0] * n
    for start, end in sorted((m[0], m[1]) for m in meetings):
        room = next((r for r, t in enumerate(free_at) if t <= start), None)
        if room is None:
            room = min(range(n), key=free_at.__getitem__)
            free_at[room] += end - start
        else:
            free_at[room] = end
        counts[room] += 1
    return max(range(n), key=counts.__getitem__)


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the k most frequent values, most frequent first.

    A negative k returns every distinct value.
    """
    counted = Counter(nums).most_common(k if k >= 0 else None)
    return [value for value, _ in counted]


def k_smallest_pairs(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> list[tuple[int, int]]:
    """Return the k pairs with the smallest sums from two sorted sequences.

    The pairs come out largest first, ordered by (sum, first, second).
    """
    if k <= 0:
        return []
    # Max-heap of the best k candidates, stored negated.
    heap: list[tuple[int, int, int]] = []
    for a in nums1:
        for b in nums2:
            total = a + b
            if len(heap) < k:
                heapq.heappush(heap, (-total, -a, -b))
            elif total < -heap[0][0]:
                heapq.heapreplace(heap, (-total, -a, -b))
            else:
                break
    return [(-a, -b) for _, a, b in sorted(heap)]


def least_interval(tasks: Iterable[Hashable], n: int) -> int:
    """Return the time units needed to run tasks with a cooldown of n between equal tasks."""
    heap = [-count for count in Counter(tasks).values()]
    heapq.heapify(heap)
    time = 0
    while heap:
        remaining: list[int] = []
        cycle = n + 1
        while cycle and heap:
            count = -heapq.heappop(heap)
            if count > 1:
                remaining.append(count - 1)
            time += 1
            cycle -= 1
        for count in remaining:
            heapq.heappush(heap, -count)
        if not heap:
            break
        time += cycle
    return time


def shortest_subarray(nums: Sequence[int], k: int) -> int:
    """Return the length of the shortest non-empty run summing to at least k, or -1."""
    prefix = list(accumulate(nums, initial=0))
    candidates: deque[int] = deque()
    best: int | None = None
    for i, total in enumerate(prefix):
        while candidates and total - prefix[candidates[0]] >= k:
            length = i - candidates.popleft()
            best = length if best is None else min(best, length)
        while candidates and total <= prefix[candidates[-1]]:
            candidates.pop()
        candidates.append(i)
    return -1 if best is None else best