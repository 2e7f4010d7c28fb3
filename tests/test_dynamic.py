from math import isqrt

import pytest

from algodrills.dynamic import (
    PrefixSums,
    PrefixSums2D,
    binary_tile_count,
    count_123_sums,
    count_divisible_subarrays,
    fibonacci_call_counts,
    knapsack,
    longest_increasing_subsequence,
    max_stair_score,
    max_subarray_sum,
    min_square_terms,
    padovan,
    tiling_2xn,
    triangle_max_path,
)

VALUES = [5, 4, 3, 2, 1, 7, -2]
GRID = [[1, 2, 3, 4], [2, 3, 4, 5], [3, 4, 5, 6]]


def test_prefix_sums_match_slices():
    sums = PrefixSums(VALUES)
    for start in range(1, len(VALUES) + 1):
        for end in range(start, len(VALUES) + 1):
            assert sums.range_sum(start, end) == sum(VALUES[start - 1 : end])


@pytest.mark.parametrize("start, end", [(0, 2), (2, len(VALUES) + 1), (3, 2)])
def test_prefix_sums_bad_range(start, end):
    with pytest.raises(IndexError):
        PrefixSums(VALUES).range_sum(start, end)


def test_prefix_sums_2d_match_slices():
    sums = PrefixSums2D(GRID)
    for x1 in range(1, 4):
        for x2 in range(x1, 4):
            for y1 in range(1, 5):
                for y2 in range(y1, 5):
                    expected = sum(sum(row[y1 - 1 : y2]) for row in GRID[x1 - 1 : x2])
                    assert sums.region_sum(x1, y1, x2, y2) == expected


def test_prefix_sums_2d_out_of_range():
    with pytest.raises(IndexError):
        PrefixSums2D(GRID).region_sum(1, 1, 4, 4)


def test_prefix_sums_2d_ragged():
    with pytest.raises(ValueError):
        PrefixSums2D([[1, 2], [3]])


def test_fibonacci_call_counts_zero():
    assert fibonacci_call_counts(0) == (1, 0)


@pytest.mark.parametrize("n", range(2, 30))
def test_fibonacci_call_counts_recurrence(n):
    zeros, ones = fibonacci_call_counts(n)
    z1, o1 = fibonacci_call_counts(n - 1)
    z2, o2 = fibonacci_call_counts(n - 2)
    assert (zeros, ones) == (z1 + z2, o1 + o2)
    assert zeros == o1


def test_count_divisible_subarrays_example():
    assert count_divisible_subarrays([1, 2, 3, 1, 2], 3) == 7


def test_count_divisible_subarrays_modulus_one_counts_all():
    values = [4, 8, 15, 16, 23]
    n = len(values)
    assert count_divisible_subarrays(values, 1) == n * (n + 1) // 2


def test_count_divisible_subarrays_bad_modulus():
    with pytest.raises(ValueError):
        count_divisible_subarrays([1, 2], 0)


def test_lis_example():
    assert longest_increasing_subsequence([10, 20, 10, 30, 20, 50]) == 4


def test_lis_increasing_is_whole():
    values = [1, 3, 7, 8, 20]
    assert longest_increasing_subsequence(values) == len(values)


def test_lis_equal_values_not_increasing():
    assert longest_increasing_subsequence([3] * 5) == longest_increasing_subsequence([3])


def test_lis_appending_larger_value_extends():
    values = [5, 2, 8, 6, 3, 6, 9, 7]
    extended = values + [max(values) + 1]
    assert longest_increasing_subsequence(extended) == longest_increasing_subsequence(values) + 1


def test_tiling_base_and_recurrence():
    assert tiling_2xn(1) == 1
    assert tiling_2xn(2) == 2
    for n in range(3, 60):
        assert tiling_2xn(n) == (tiling_2xn(n - 1) + tiling_2xn(n - 2)) % 10007


def test_tiling_rejects_zero():
    with pytest.raises(ValueError):
        tiling_2xn(0)


def test_binary_tile_recurrence_and_modulus():
    for n in range(3, 80):
        value = binary_tile_count(n)
        assert value == (binary_tile_count(n - 1) + binary_tile_count(n - 2)) % 15746
        assert 0 <= value < 15746


def test_knapsack_example():
    assert knapsack(7, [(6, 13), (4, 8), (3, 6), (5, 12)]) == 14


def test_knapsack_everything_fits():
    items = [(1, 3), (2, 5), (3, 7)]
    assert knapsack(sum(w for w, _ in items), items) == sum(v for _, v in items)


def test_knapsack_zero_capacity():
    assert not knapsack(0, [(1, 10), (0, 5)])


@pytest.mark.parametrize("n", range(1, 200))
def test_min_square_terms_bounds(n):
    terms = min_square_terms(n)
    assert 1 <= terms <= 4
    assert (terms == 1) == (isqrt(n) ** 2 == n)


def test_max_subarray_all_positive():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_all_negative():
    values = [-8, -3, -6]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_triangle_single_row():
    assert triangle_max_path([[42]]) == 42


def test_triangle_all_ones_is_height():
    rows = [[1] * (i + 1) for i in range(6)]
    assert triangle_max_path(rows) == len(rows)


def test_stairs_small_cases():
    assert max_stair_score([9]) == 9
    assert max_stair_score([4, 6]) == 4 + 6
    scores = [1, 2, 3]
    assert max_stair_score(scores) == scores[1] + scores[2]


def test_stairs_empty():
    with pytest.raises(ValueError):
        max_stair_score([])


def test_count_123_sums_base_and_recurrence():
    assert [count_123_sums(n) for n in (1, 2, 3)] == [1, 2, 4]
    for n in range(4, 12):
        assert count_123_sums(n) == sum(count_123_sums(n - k) for k in (1, 2, 3))


def test_padovan_base_and_recurrence():
    assert [padovan(n) for n in (1, 2, 3)] == [1, 1, 1]
    for n in range(4, 100):
        assert padovan(n) == padovan(n - 2) + padovan(n - 3)