import pytest

from dsakit.arrays import (
    alternates,
    is_sorted,
    largest,
    leaders,
    linear_search,
    push_zeros_to_end,
    remove_duplicates,
    reversed_array,
    rotate_right,
    second_largest,
    subarrays,
    three_largest,
)


def test_alternates_takes_even_positions():
    assert alternates([1, 2, 3, 4, 5]) == [1, 3, 5]
    assert alternates([7, 8]) == [7]
    assert alternates([]) == []


def test_is_sorted_source_example():
    assert is_sorted([20, 23, 23, 45, 78, 88]) is True


def test_is_sorted_detects_disorder():
    assert is_sorted([3, 1]) is False
    assert is_sorted([]) is True
    assert is_sorted([5]) is True


def test_largest_matches_max():
    data = [4, -2, 19, 7, 19, 0]
    assert largest(data) == max(data)


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])


def test_leaders_example():
    assert leaders([16, 17, 4, 3, 5, 2]) == [17, 5, 2]


def test_leaders_keeps_equal_values():
    assert leaders([5, 5]) == [5, 5]


def test_leaders_invariant():
    data = [3, 9, 1, 9, 4, 2, 6, 0]
    result = leaders(data)
    assert result[-1] == data[-1]
    assert all(a >= b for a, b in zip(result, result[1:]))
    assert leaders([]) == []


def test_linear_search_finds_first():
    assert linear_search([1, 5, 3, 5], 5) == 1


def test_linear_search_missing():
    assert linear_search([1, 2, 3], 5) is None
    assert linear_search([], 5) is None


def test_push_zeros_source_example():
    assert push_zeros_to_end([1, 2, 0, 4, 3, 0, 5, 0]) == [1, 2, 4, 3, 5, 0, 0, 0]


def test_push_zeros_does_not_modify_input():
    data = [0, 1, 0]
    push_zeros_to_end(data)
    assert data == [0, 1, 0]


def test_remove_duplicates_source_example():
    assert remove_duplicates([1, 1, 2, 2, 3, 4, 4, 5]) == [1, 2, 3, 4, 5]


def test_remove_duplicates_only_adjacent_runs():
    assert remove_duplicates([1, 2, 1, 1]) == [1, 2, 1]
    assert remove_duplicates([]) == []


def test_reversed_array_round_trip():
    data = [4, 8, 15, 16, 23, 42]
    result = reversed_array(data)
    assert result[0] == data[-1]
    assert reversed_array(result) == data
    assert data == [4, 8, 15, 16, 23, 42]


def test_rotate_right_source_example():
    assert rotate_right([1, 2, 3, 4, 5, 6], 2) == [5, 6, 1, 2, 3, 4]


def test_rotate_right_wraps():
    data = [1, 2, 3, 4, 5, 6]
    assert rotate_right(data, 6) == data
    assert rotate_right(data, 0) == data
    assert rotate_right(data, 8) == rotate_right(data, 2)
    assert rotate_right([], 3) == []


def test_rotate_right_composes():
    data = list(range(7))
    assert rotate_right(rotate_right(data, 3), 4) == data


def test_second_largest():
    assert second_largest([12, 35, 1, 10, 34, 1]) == 34
    assert second_largest([10, 10]) is None


def test_second_largest_empty_raises():
    with pytest.raises(ValueError):
        second_largest([])


def test_subarrays_count_and_content():
    data = [1, 2, 3, 4]
    result = list(subarrays(data))
    assert len(result) == len(data) * (len(data) + 1) // 2
    assert result[0] == [1]
    assert result[3] == [1, 2, 3, 4]
    assert result[-1] == [4]
    assert list(subarrays([])) == []


def test_three_largest_source_example():
    assert three_largest([12, 13, 1, 10, 34, 1]) == [34, 13, 12]


def test_three_largest_fewer_distinct():
    assert three_largest([10, 10]) == [10]
    assert three_largest([]) == []
    assert three_largest([1, 2, 2, 1]) == [2, 1]