"""Counting, number-theory and simulation puzzles."""

from __future__ import annotations

import bisect
import itertools
from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence
from functools import reduce
from operator import xor

MODULUS = 1_000_000_007

_QUEEN_DIRECTIONS = (
    (-1, 0), (1, 0),
    (0, -1), (0, 1),
    (-1, -1), (-1, 1),
    (1, -1), (1, 1),
)


def acm_team(topics: Sequence[str]) -> tuple[int, int]:
    """Return the most topics a two-person team can know and how many teams know that many.

    Each topic string is a row of '0'/'1' flags for one person.
    """
    known = [int(row, 2) if row else 0 for row in topics]
    best = 0
    teams = 0
    for a, b in itertools.combinations(known, 2):
        covered = bin(a | b).count("1")
        if covered > best:
            best, teams = covered, 1
        elif covered == best:
            teams += 1
    return best, teams


def consecutive_subsequences(numbers: Iterable[int], k: int) -> int:
    """Return how many non-empty contiguous runs have a sum divisible by k."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    remainders = Counter({0: 1})
    total = 0
    for number in numbers:
        total = (total + number) % k
        remainders[total] += 1
    return sum(count * (count - 1) // 2 for count in remainders.values())


def running_median(values: Iterable[int]) -> list[float]:
    """Return the median of each prefix of values."""
    seen: list[int] = []
    medians: list[float] = []
    for value in values:
        bisect.insort(seen, value)
        mid = (len(seen) - 1) // 2
        if len(seen) % 2:
            medians.append(float(seen[mid]))
        else:
            medians.append((seen[mid] + seen[mid + 1]) / 2)
    return medians


def manasa_stones(n: int, a: int, b: int) -> list[int]:
    """Return, ascending, every possible value of the last of n stones.

    The first stone is 0 and each next one differs from the previous by a or b.
    """
    if a == b:
        return [(n - 1) * a]
    return sorted((n - i) * a + (i - 1) * b for i in range(1, n + 1))


def non_divisible_subset(k: int, numbers: Iterable[int]) -> int:
    """Return the size of the largest subset in which no two values sum to a multiple of k."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    residues = Counter(x % k for x in numbers)
    size = sum(max(residues[i], residues[k - i]) for i in range(1, k) if i < k - i)
    if residues[0]:
        size += 1
    if k % 2 == 0 and residues[k // 2]:
        size += 1
    return size


def queens_attack(
    n: int, r_q: int, c_q: int, obstacles: Iterable[Sequence[int]]
) -> int:
    """Return how many squares a queen at (r_q, c_q) attacks on an n by n board."""
    blocked = {(obs[0], obs[1]) for obs in obstacles}
    moves = 0
    for dr, dc in _QUEEN_DIRECTIONS:
        r, c = r_q + dr, c_q + dc
        while 1 <= r <= n and 1 <= c <= n and (r, c) not in blocked:
            moves += 1
            r += dr
            c += dc
    return moves


def sam_substrings(s: str) -> int:
    """Return the sum of all substrings of a digit string read as numbers, modulo 10**9 + 7."""
    if not s:
        raise ValueError("the digit string must not be empty")
    ending_here = 0
    total = 0
    for position, char in enumerate(s, start=1):
        ending_here = (position * int(char) + 10 * ending_here) % MODULUS
        total = (total + ending_here) % MODULUS
    return total


def sansa_xor(numbers: Sequence[int]) -> int:
    """Return the XOR of the XORs of every contiguous run of numbers."""
    size = len(numbers)
    return reduce(
        xor,
        (num for i, num in enumerate(numbers) if (i + 1) * (size - i) % 2 == 1),
        0,
    )


def special_multiple(n: int) -> str:
    """Return the smallest positive multiple of n written only with digits 9 and 0."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    queue = deque([9])
    while True:
        current = queue.popleft()
        if current % n == 0:
            return str(current)
        queue.append(current * 10)
        queue.append(current * 10 + 9)


def _primes() -> Iterator[int]:
    found: list[int] = []
    for candidate in itertools.count(2):
        if all(candidate % p for p in found if p * p <= candidate):
            found.append(candidate)
            yield candidate


def first_primes(count: int) -> list[int]:
    """Return the first count primes in ascending order."""
    return list(itertools.islice(_primes(), max(count, 0)))


def waiter(numbers: Iterable[int], q: int) -> list[int]:
    """Return the plates in the order they come out after q sorting rounds.

    numbers lists the stack from bottom to top. In round i the stack is
    unloaded; plates divisible by the i-th prime are set aside and come out
    top first, the rest form the next stack.
    """
    stack = list(numbers)
    result: list[int] = []
    for prime in first_primes(q):
        if not stack:
            break
        kept: list[int] = []
        divisible: list[int] = []
        for plate in reversed(stack):
            (divisible if plate % prime == 0 else kept).append(plate)
        result.extend(reversed(divisible))
        stack = kept
    result.extend(reversed(stack))
    return result