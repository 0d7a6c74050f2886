import pytest

from dsakit.searching import binary_contains, binary_search, find_peak, linear_search

EVEN = [2, 4, 6, 8, 12, 18]
ODD = [3, 8, 11, 14, 16]
LONG = [2, 4, 6, 10, 14, 18, 22, 38, 49, 55, 222]


def test_binary_search_source_examples():
    assert binary_search(EVEN, 6) == 2
    assert binary_search(ODD, 14) == 3


@pytest.mark.parametrize("values", [EVEN, ODD, LONG])
def test_binary_search_finds_every_element(values):
    for key in values:
        assert values[binary_search(values, key)] == key


@pytest.mark.parametrize("key", [0, 5, 13, 1000])
def test_binary_search_missing_is_none(key):
    assert binary_search(EVEN, key) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


@pytest.mark.parametrize("values", [[1, 3, 5, 4, 2], [1, 2, 3], [3, 2, 1], [0, 10, 5, 2], [7]])
def test_find_peak_is_local_maximum(values):
    index = find_peak(values)
    assert 0 <= index < len(values)
    if index > 0:
        assert values[index] >= values[index - 1]
    if index < len(values) - 1:
        assert values[index] >= values[index + 1]


def test_find_peak_empty_raises():
    with pytest.raises(ValueError):
        find_peak([])


@pytest.mark.parametrize("values", [EVEN, ODD, [5, 1, 5, 2]])
def test_linear_search_first_occurrence(values):
    for key in values:
        assert linear_search(values, key) == values.index(key)


def test_linear_search_missing_is_none():
    assert linear_search(ODD, 99) is None


def test_binary_contains_source_example():
    assert binary_contains(LONG, 222) is True


@pytest.mark.parametrize("key", [1, 3, 50, 223])
def test_binary_contains_absent(key):
    assert binary_contains(LONG, key) is False


def test_binary_contains_every_element():
    assert all(binary_contains(LONG, key) for key in LONG)