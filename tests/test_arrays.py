import pytest

from dsakit.arrays import (
    find_duplicates,
    max_min,
    min_partition_difference,
    missing_elements,
    reverse_range,
)

SAMPLE = [8, 6, 5, 25, 8, 4, 8, 25, 5, 8]


def test_find_duplicates_counts_match_occurrences():
    result = find_duplicates(SAMPLE)
    assert list(result) == sorted(result)
    for value, count in result.items():
        assert count == SAMPLE.count(value)
        assert count > 1
    for value in set(SAMPLE) - set(result):
        assert SAMPLE.count(value) == 1


def test_find_duplicates_without_repeats_is_empty():
    assert find_duplicates([3, 1, 2]) == {}


def test_find_duplicates_empty_input():
    assert find_duplicates([]) == {}


@pytest.mark.parametrize(
    "values",
    [SAMPLE, [49, 8, 654, 897, 6456, 47, 5494, 564, 9, 4, 654, 2], [7], [-3, -1, -9]],
)
def test_max_min_matches_builtins(values):
    assert max_min(values) == (max(values), min(values))


def test_max_min_empty_raises():
    with pytest.raises(ValueError):
        max_min([])


def test_min_partition_difference_source_example():
    assert min_partition_difference([10, 20, 15, 5, 25]) == 5


def test_min_partition_difference_single_value():
    assert min_partition_difference([7]) == 7


def test_min_partition_difference_empty():
    assert min_partition_difference([]) == 0


@pytest.mark.parametrize("values", [[1, 2, 3], [4, 4], [1, 6, 11, 5], [3, 1, 4, 2, 2]])
def test_min_partition_difference_parity_and_bound(values):
    result = min_partition_difference(values)
    assert result % 2 == sum(values) % 2
    assert 0 <= result <= sum(values)


def test_missing_elements_fill_the_range():
    values = [5, 6, 4, 8, 10, 2, 7, 15, 13, 18]
    missing = missing_elements(values)
    assert missing == sorted(missing)
    assert not set(missing) & set(values)
    assert set(missing) | set(values) == set(range(min(values), max(values) + 1))


def test_missing_elements_contiguous_input():
    assert missing_elements([3, 1, 2]) == []


def test_reverse_range_whole_sequence():
    values = [1, 2, 3, 4, 5]
    reverse_range(values, 0, 4)
    assert values == [5, 4, 3, 2, 1]


def test_reverse_range_twice_restores():
    original = [9, 8, 7, 6, 5, 4]
    values = list(original)
    reverse_range(values, 1, 4)
    assert values[0] == original[0] and values[5] == original[5]
    assert values[1:5] == original[1:5][::-1]
    reverse_range(values, 1, 4)
    assert values == original


def test_reverse_range_empty_span_is_noop():
    values = [1, 2, 3]
    reverse_range(values, 2, 1)
    assert values == [1, 2, 3]


def test_reverse_range_out_of_bounds():
    with pytest.raises(IndexError):
        reverse_range([1, 2, 3], 0, 3)