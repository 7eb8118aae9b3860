import pytest

from algodrills.greedy import (
    candies,
    fair_rations,
    goodland_electricity,
    greedy_florist,
    highest_value_palindrome,
    luck_balance,
    truck_tour,
)


def test_candies_equal_ratings_one_each():
    ratings = [4, 4, 4, 4]
    assert candies(ratings) == len(ratings)


def test_candies_symmetric_under_reversal():
    ratings = [2, 4, 2, 6, 1, 7, 8, 9, 2, 1]
    assert candies(ratings) == candies(ratings[::-1])


def test_candies_at_least_one_each():
    ratings = [1, 2, 2, 5, 3, 3, 1]
    assert candies(ratings) >= len(ratings)


def test_candies_empty():
    assert candies([]) == 0


def test_fair_rations_impossible():
    assert fair_rations([1, 2]) == "NO"


def test_fair_rations_all_even_needs_none():
    assert fair_rations([2, 4, 6]) == str(0)


def test_fair_rations_rejects_empty():
    with pytest.raises(ValueError):
        fair_rations([])


def test_goodland_example():
    k = 2
    assert goodland_electricity(k, [0, 1, 1, 1, 1, 0]) == k


def test_goodland_impossible():
    assert goodland_electricity(1, [0, 0]) == -1


def test_goodland_every_plant_needed():
    towns = [1, 1, 1]
    assert goodland_electricity(1, towns) == len(towns)


def test_greedy_florist_enough_friends_pay_face_value():
    prices = [2, 5, 6]
    assert greedy_florist(3, prices) == sum(prices)


def test_greedy_florist_fewer_friends():
    assert greedy_florist(2, [2, 5, 6]) == 15


def test_greedy_florist_more_friends_never_costs_more():
    prices = [1, 3, 5, 7, 9]
    costs = [greedy_florist(k, prices) for k in range(1, 7)]
    assert costs == sorted(costs, reverse=True)


def test_greedy_florist_rejects_no_friends():
    with pytest.raises(ValueError):
        greedy_florist(0, [1])


@pytest.mark.parametrize(
    "s, k, expected",
    [("3943", 1, "3993"), ("092282", 3, "992299"), ("0011", 1, "-1")],
)
def test_highest_value_palindrome_examples(s, k, expected):
    assert highest_value_palindrome(s, k) == expected


@pytest.mark.parametrize("s, k", [("12321", 0), ("1234", 2), ("5", 1), ("10201", 4)])
def test_highest_value_palindrome_is_palindrome(s, k):
    result = highest_value_palindrome(s, k)
    assert result == result[::-1]
    assert len(result) == len(s)
    assert result >= s


def test_highest_value_palindrome_no_budget_keeps_palindrome():
    assert highest_value_palindrome("12321", 0) == "12321"


def test_luck_balance_lose_everything():
    contests = [(5, 1), (2, 1), (1, 1), (8, 1), (10, 0), (5, 0)]
    assert luck_balance(10, contests) == sum(luck for luck, _ in contests)


def test_luck_balance_win_all_important():
    contests = [(5, 1), (2, 1), (10, 0)]
    assert luck_balance(0, contests) == 10 - 5 - 2


def test_luck_balance_loses_largest_first():
    contests = [(5, 1), (2, 1), (1, 1), (8, 1), (10, 0), (5, 0)]
    assert luck_balance(3, contests) == 10 + 5 + 8 + 5 + 2 - 1


def _completes_circle(pumps, start):
    tank = 0
    size = len(pumps)
    for step in range(size):
        petrol, distance = pumps[(start + step) % size]
        tank += petrol - distance
        if tank < 0:
            return False
    return True


def test_truck_tour_start_completes_circle():
    pumps = [(1, 5), (10, 3), (3, 4)]
    start = truck_tour(pumps)
    assert 0 <= start < len(pumps)
    assert _completes_circle(pumps, start)
    assert not any(_completes_circle(pumps, s) for s in range(start))


def test_truck_tour_impossible():
    assert truck_tour([(1, 5), (2, 3)]) == -1