import pytest

from algokit.josephus import josephus_survivor


def test_single_person_survives():
    assert josephus_survivor(1, 5) == 0


@pytest.mark.parametrize("n", [2, 5, 10])
def test_step_one_leaves_last_person(n):
    assert josephus_survivor(n, 1) == n - 1


def test_classic_seven_three():
    assert josephus_survivor(7, 3) == 3


def test_classic_forty_one_three():
    assert josephus_survivor(41, 3) == 30


@pytest.mark.parametrize("power", [1, 2, 3, 4, 5])
def test_step_two_with_power_of_two_leaves_first(power):
    assert josephus_survivor(2**power, 2) == 0


@pytest.mark.parametrize("n, k", [(3, 10), (6, 4), (12, 7)])
def test_result_is_a_member_of_the_circle(n, k):
    assert 0 <= josephus_survivor(n, k) < n


@pytest.mark.parametrize("n, k", [(0, 2), (-3, 1), (5, 0), (5, -2)])
def test_invalid_arguments(n, k):
    with pytest.raises(ValueError):
        josephus_survivor(n, k)