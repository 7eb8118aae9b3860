"""Greedy puzzles: sharing, lighting, buying and balancing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def candies(ratings: Sequence[int]) -> int:
    """Return the fewest candies so that each child gets one and beats lower-rated neighbours."""
    count = len(ratings)
    given = [1] * count
    for i in range(1, count):
        if ratings[i] > ratings[i - 1]:
            given[i] = given[i - 1] + 1
    for i in reversed(range(count - 1)):
        if ratings[i] > ratings[i + 1]:
            given[i] = max(given[i], given[i + 1] + 1)
    return sum(given)


def fair_rations(loaves: Sequence[int]) -> str:
    """Return the loaves needed to make every count even, or 'NO' if impossible."""
    if not loaves:
        raise ValueError("there must be at least one person in the line")
    counts = list(loaves)
    handed_out = 0
    for i, count in enumerate(counts[:-1]):
        if count % 2 == 1:
            counts[i + 1] += 1
            handed_out += 2
    return str(handed_out) if counts[-1] % 2 == 0 else "NO"


def goodland_electricity(k: int, towns: Sequence[int]) -> int:
    """Return the fewest plants (towns marked 1) to switch on to light all towns, or -1.

    A plant lights every town closer than k to it.
    """
    count = len(towns)
    # Distance from each town to the next plant after it; None when there is none.
    to_next: list[int | None] = [None] * count
    distance: int | None = None
    for i in reversed(range(count)):
        to_next[i] = distance
        if towns[i] == 1:
            distance = 1
        elif distance is not None:
            distance += 1

    answer = 0
    skipped = 0
    for i, town in enumerate(towns):
        gap = to_next[i]
        if gap is None:
            if skipped >= k or count - i > k:
                return -1
            answer += 1
            break
        if town == 0:
            skipped += 1
            continue
        if skipped + gap < k:
            skipped += 1
            continue
        if skipped >= k:
            return -1
        answer += 1
        skipped = 1 - k
    return answer


def greedy_florist(k: int, prices: Iterable[int]) -> int:
    """Return the least cost for k friends to buy all flowers.

    A friend's n-th purchase costs (n) times the flower's price.
    """
    if k < 1:
        raise ValueError(f"there must be at least one buyer, got {k}")
    ordered = sorted(prices, reverse=True)
    return sum(price * (i // k + 1) for i, price in enumerate(ordered))


def highest_value_palindrome(s: str, k: int) -> str:
    """Return the largest palindrome reachable with at most k digit changes, or '-1'."""
    size = len(s)
    if size == 0:
        return s
    half = size // 2
    digits = list(s)
    diff = sum(1 for i in range(half) if digits[i] != digits[size - 1 - i])
    if diff > k:
        return "-1"
    remaining = k
    for i in range(half + 1):
        if remaining <= 0:
            break
        j = size - 1 - i
        if digits[i] != digits[j]:
            diff -= 1
            if digits[i] == "9" or digits[j] == "9":
                digits[i] = digits[j] = "9"
                remaining -= 1
            elif remaining - 2 >= diff:
                digits[i] = digits[j] = "9"
                remaining -= 2
            else:
                digits[i] = digits[j] = max(digits[i], digits[j])
                remaining -= 1
        elif i != j and digits[i] < "9" and remaining - 2 >= diff:
            digits[i] = digits[j] = "9"
            remaining -= 2
        elif i == j and digits[i] < "9" and remaining - 1 >= diff:
            digits[i] = "9"
            remaining -= 1
    return "".join(digits)


def luck_balance(k: int, contests: Iterable[tuple[int, int]]) -> int:
    """Return the most luck kept when losing at most k important contests.

    Each contest is (luck, importance), importance 0 meaning unimportant.
    """
    luck = 0
    important: list[int] = []
    for value, importance in contests:
        if importance == 0:
            luck += value
        else:
            important.append(value)
    important.sort(reverse=True)
    lost = max(k, 0)
    return luck + sum(important[:lost]) - sum(important[lost:])


def truck_tour(pumps: Iterable[tuple[int, int]]) -> int:
    """Return the first pump from which a full circle is possible, or -1.

    Each pump is (petrol, distance to the next pump).
    """
    total_petrol = 0
    total_distance = 0
    start = 0
    tank = 0
    for i, (petrol, distance) in enumerate(pumps):
        total_petrol += petrol
        total_distance += distance
        tank += petrol - distance
        if tank < 0:
            start = i + 1
            tank = 0
    if total_petrol < total_distance:
        return -1
    return start