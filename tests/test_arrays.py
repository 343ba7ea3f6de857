import random

import pytest

from leetsolve.arrays import (
    RandomizedSet,
    can_complete_circuit,
    can_jump,
    h_index,
    jump,
    majority_element,
    max_profit,
    max_profit_multi,
    merge,
    product_except_self,
    remove_duplicates,
    remove_duplicates_keep_two,
    remove_element,
    rotate,
)


@pytest.mark.parametrize(
    "prices, expected",
    [([7, 1, 5, 3, 6, 4], 5), ([7, 6, 4, 3, 1], 0), ([], 0), ([2, 4, 1], 2)],
)
def test_max_profit(prices, expected):
    assert max_profit(prices) == expected


@pytest.mark.parametrize(
    "prices, expected",
    [([7, 1, 5, 3, 6, 4], 7), ([1, 2, 3, 4, 5], 4), ([7, 6, 4, 3, 1], 0), ([], 0)],
)
def test_max_profit_multi(prices, expected):
    assert max_profit_multi(prices) == expected


def test_gas_station_source_case():
    # total gas 9 is less than total cost 10, so no start works
    assert can_complete_circuit([2, 3, 4], [3, 4, 3]) == -1


def test_gas_station_found():
    assert can_complete_circuit([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]) == 3


@pytest.mark.parametrize(
    "citations, expected",
    [([3, 0, 6, 1, 5], 3), ([1, 3, 1], 1), ([0, 0], 0), ([100], 1)],
)
def test_h_index(citations, expected):
    assert h_index(citations) == expected


def test_h_index_does_not_mutate():
    data = [3, 0, 6]
    h_index(data)
    assert data == [3, 0, 6]


@pytest.mark.parametrize(
    "nums, expected",
    [([2, 3, 1, 1, 4], True), ([3, 2, 1, 0, 4], False), ([0], True)],
)
def test_can_jump(nums, expected):
    assert can_jump(nums) is expected


@pytest.mark.parametrize(
    "nums, expected", [([2, 3, 1, 1, 4], 2), ([2, 3, 0, 1, 4], 2), ([0], 0)]
)
def test_jump(nums, expected):
    assert jump(nums) == expected


def test_jump_empty():
    with pytest.raises(ValueError):
        jump([])


@pytest.mark.parametrize(
    "nums, expected", [([3, 2, 3], 3), ([2, 2, 1, 1, 1, 2, 2], 2)]
)
def test_majority_element(nums, expected):
    assert majority_element(nums) == expected


@pytest.mark.parametrize(
    "nums1, m, nums2, n, expected",
    [
        ([1, 2, 3, 0, 0, 0], 3, [2, 5, 6], 3, [1, 2, 2, 3, 5, 6]),
        ([1], 1, [], 0, [1]),
        ([0], 0, [1], 1, [1]),
    ],
)
def test_merge(nums1, m, nums2, n, expected):
    assert merge(nums1, m, nums2, n) is None
    assert nums1 == expected


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 4], [24, 12, 8, 6]), ([-1, 1, 0, -3, 3], [0, 0, 9, 0, 0]), ([], [])],
)
def test_product_except_self(nums, expected):
    assert product_except_self(nums) == expected


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    k = remove_duplicates(nums)
    assert k == 5
    assert nums[:k] == [0, 1, 2, 3, 4]


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 1, 1, 2, 2, 3], [1, 1, 2, 2, 3]),
        ([0, 0, 1, 1, 1, 1, 2, 3, 3], [0, 0, 1, 1, 2, 3, 3]),
    ],
)
def test_remove_duplicates_keep_two(nums, expected):
    k = remove_duplicates_keep_two(nums)
    assert k == len(expected)
    assert nums[:k] == expected


@pytest.mark.parametrize(
    "nums, val, expected",
    [([3, 2, 2, 3], 3, [2, 2]), ([0, 1, 2, 2, 3, 0, 4, 2], 2, [0, 1, 3, 0, 4])],
)
def test_remove_element(nums, val, expected):
    k = remove_element(nums, val)
    assert k == len(expected)
    assert nums[:k] == expected


@pytest.mark.parametrize(
    "nums, k, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7], 3, [5, 6, 7, 1, 2, 3, 4]),
        ([-1, -100, 3, 99], 2, [3, 99, -1, -100]),
        ([1, 2], 4, [1, 2]),
        ([], 3, []),
    ],
)
def test_rotate(nums, k, expected):
    rotate(nums, k)
    assert nums == expected


def test_randomized_set_operations():
    rs = RandomizedSet(random.Random(7))
    assert rs.insert(1) is True
    assert rs.remove(2) is False
    assert rs.insert(2) is True
    assert rs.get_random() in {1, 2}
    assert rs.remove(1) is True
    assert rs.insert(2) is False
    assert rs.get_random() == 2
    assert len(rs) == 1


def test_randomized_set_remove_last_then_reinsert():
    rs = RandomizedSet()
    for value in (5, 6, 7):
        rs.insert(value)
    assert rs.remove(7) is True
    assert rs.remove(5) is True
    assert 6 in rs
    assert 5 not in rs
    assert rs.insert(5) is True
    assert {rs.get_random() for _ in range(50)} <= {5, 6}


def test_randomized_set_empty_random():
    with pytest.raises(IndexError):
        RandomizedSet().get_random()