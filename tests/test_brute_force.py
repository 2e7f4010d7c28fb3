import pytest

from algodrills.brute_force import operator_extremes


def test_only_addition():
    numbers = [3, 8, 1, 9, 4]
    assert operator_extremes(numbers, (4, 0, 0, 0)) == (sum(numbers), sum(numbers))


def test_single_number():
    assert operator_extremes([17], (0, 0, 0, 0)) == (17, 17)


def test_division_truncates_toward_zero():
    assert operator_extremes([-7, 2], (0, 0, 0, 1)) == (-3, -3)


def test_max_not_below_min():
    high, low = operator_extremes([5, 6, 2, 9, 3], (1, 1, 1, 1))
    assert high >= low


def test_reordering_counts_matters_only_by_kind():
    numbers = [4, 2, 6, 3]
    assert operator_extremes(numbers, (1, 0, 2, 0)) == operator_extremes(numbers, [1, 0, 2, 0])


def test_mismatched_counts():
    with pytest.raises(ValueError):
        operator_extremes([1, 2, 3], (1, 0, 0, 0))
    with pytest.raises(ValueError):
        operator_extremes([1, 2], (1, 0, 0))


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        operator_extremes([1, 0], (0, 0, 0, 1))