import pytest

from algodrills.two_pointer import (
    closest_to_zero_pair,
    count_common,
    count_consecutive_sums,
    count_good_numbers,
    count_pairs_with_sum,
    longest_two_kind_run,
    merge_sorted,
    shortest_subarray_at_least,
)


@pytest.mark.parametrize(
    "first, second",
    [
        ([1, 3, 5], [2, 4, 6]),
        ([], [1, 2]),
        ([2, 2, 7], [2, 3]),
        ([-5, 0], [-7, -1, 10]),
    ],
)
def test_merge_sorted_matches_sorted(first, second):
    assert merge_sorted(first, second) == sorted(first + second)


def test_count_good_numbers_example():
    assert count_good_numbers(range(1, 11)) == 8


def test_count_good_numbers_all_zero():
    values = [0, 0, 0, 0]
    assert count_good_numbers(values) == len(values)


def test_count_good_numbers_needs_distinct_positions():
    assert not count_good_numbers([1, 2])


def test_shortest_subarray_example():
    assert shortest_subarray_at_least([5, 1, 3, 5, 10, 7, 4, 9, 2, 8], 15) == 2


def test_shortest_subarray_needs_everything():
    values = [1] * 5
    assert shortest_subarray_at_least(values, sum(values)) == len(values)


def test_shortest_subarray_impossible():
    assert not shortest_subarray_at_least([1, 2, 3], 100)


def test_count_pairs_symmetric():
    values = [3, 8, 1, 6, 2, 7, 4, 5]
    assert count_pairs_with_sum(values, 9) == len(values) // 2


def test_count_pairs_none():
    assert not count_pairs_with_sum([1, 2], 10)


def test_consecutive_sums_example():
    assert count_consecutive_sums(15) == 4


@pytest.mark.parametrize("n", [1, 2, 9, 10, 16, 45, 100])
def test_consecutive_sums_equal_odd_divisor_count(n):
    odd_divisors = sum(1 for d in range(1, n + 1, 2) if n % d == 0)
    assert count_consecutive_sums(n) == odd_divisors


def test_consecutive_sums_rejects_zero():
    with pytest.raises(ValueError):
        count_consecutive_sums(0)


def test_closest_to_zero_example():
    assert closest_to_zero_pair([-2, 4, -99, -1, 98]) == (-99, 98)


def test_closest_to_zero_exact_zero():
    assert closest_to_zero_pair([-3, 7, 3]) == (-3, 3)


def test_closest_to_zero_all_positive():
    assert closest_to_zero_pair([5, 1, 3]) == (1, 3)


def test_closest_to_zero_empty():
    with pytest.raises(ValueError):
        closest_to_zero_pair([])


def test_longest_two_kind_run_drops_first():
    items = [5, 1, 1, 2, 1]
    assert longest_two_kind_run(items) == len(items) - 1


def test_longest_two_kind_run_single_kind():
    items = ["a"] * 6
    assert longest_two_kind_run(items) == len(items)


def test_longest_two_kind_run_empty():
    assert not longest_two_kind_run([])


def test_count_common_identical():
    values = [1, 4, 9, 12]
    assert count_common(values, values) == len(values)


def test_count_common_disjoint():
    assert not count_common([1, 3, 5], [2, 4, 6])


def test_count_common_partial():
    first = [1, 2, 3, 4, 8]
    second = [2, 4, 6, 8, 10]
    assert count_common(first, second) == len(set(first) & set(second))